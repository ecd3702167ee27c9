"""Payment intent pass-through to Stripe."""

import asyncio
import uuid
from dataclasses import dataclass

import stripe
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from app.config.settings import settings
from app.core.exceptions import (
    ForbiddenError,
    InvalidProjectStateError,
    PaymentNotConfiguredError,
    PaymentProviderError,
    ProjectNotFoundException,
)
from app.db.enums import ProjectStatus
from app.db.models.user import User
from app.db.repositories.project import ProjectRepository


@dataclass
class PaymentIntentResult:
    """What the browser needs to confirm a payment."""

    client_secret: str
    amount_cents: int
    currency: str


class PaymentService:
    """Creates payment intents for assigned projects.

    Only the project's client may pay, and only once a freelancer has been
    assigned. Nothing is stored locally; Stripe owns the payment record.
    """

    def __init__(self, session: AsyncSession):
        self.projects = ProjectRepository(session)

    @staticmethod
    def _check_configured() -> str:
        if not settings.STRIPE_SECRET_KEY:
            raise PaymentNotConfiguredError()
        return settings.STRIPE_SECRET_KEY

    async def create_payment_intent(
        self,
        caller: User,
        project_id: uuid.UUID,
        amount: float,
        currency: str | None = None,
        description: str | None = None,
    ) -> PaymentIntentResult:
        project = await self.projects.get_by_id(project_id)
        if project is None:
            raise ProjectNotFoundException(str(project_id))
        if project.client_id != caller.id:
            raise ForbiddenError("Only the project owner can pay for it")
        if project.status == ProjectStatus.OPEN.value or project.selected_freelancer_id is None:
            raise InvalidProjectStateError(current=project.status, action="pay for a project")

        api_key = self._check_configured()
        currency = (currency or settings.PAYMENT_DEFAULT_CURRENCY).lower()
        amount_cents = round(amount * 100)

        try:
            intent = await asyncio.to_thread(
                stripe.PaymentIntent.create,
                api_key=api_key,
                amount=amount_cents,
                currency=currency,
                description=description or f"Payment for project {project.title}",
                automatic_payment_methods={"enabled": True},
                metadata={
                    "project_id": str(project.id),
                    "client_id": str(caller.id),
                    "freelancer_id": str(project.selected_freelancer_id),
                },
            )
        except stripe.StripeError as e:
            logger.error(f"Stripe payment intent failed for project {project.id}: {e}")
            raise PaymentProviderError(str(e)) from e

        logger.info(f"Payment intent created for project {project.id}: {amount_cents} {currency}")
        return PaymentIntentResult(
            client_secret=intent.client_secret,
            amount_cents=amount_cents,
            currency=currency,
        )
