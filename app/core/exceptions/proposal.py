"""Proposal-specific exceptions."""


class ProposalException(Exception):
    """Base exception for proposal-related errors."""

    def __init__(self, message: str = "A proposal error occurred"):
        self.message = message
        super().__init__(self.message)


class ProposalNotFoundException(ProposalException):
    """Raised when a proposal is not found."""

    def __init__(self, proposal_id: str | None = None):
        message = f"Proposal not found: {proposal_id}" if proposal_id else "Proposal not found"
        super().__init__(message)


class InvalidProposalStateError(ProposalException):
    """Raised when accepting or rejecting a proposal that is no longer pending."""

    def __init__(self, current: str, action: str):
        super().__init__(f"Cannot {action} proposal: status is already '{current}'")
        self.current = current
