"""Payment exceptions."""


class PaymentException(Exception):
    """Base exception for payment errors."""

    def __init__(self, message: str = "A payment error occurred"):
        self.message = message
        super().__init__(self.message)


class PaymentNotConfiguredError(PaymentException):
    """Raised when no payment processor key is configured."""

    def __init__(self):
        super().__init__("Payments are not configured (missing STRIPE_SECRET_KEY)")


class PaymentProviderError(PaymentException):
    """Raised when the payment processor rejects a request."""

    def __init__(self, reason: str):
        super().__init__(f"Payment provider error: {reason}")
        self.reason = reason
