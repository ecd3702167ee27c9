"""Payment routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_current_user, get_db
from app.api.schemas.common import APIResponse
from app.api.schemas.payment import PaymentIntentCreate, PaymentIntentResponse
from app.db.models.user import User
from app.services.payment import PaymentService

router = APIRouter(prefix="/payments", tags=["Payments"])


def get_payment_service(db: AsyncSession = Depends(get_db)) -> PaymentService:
    return PaymentService(db)


@router.post("/intent", response_model=APIResponse[PaymentIntentResponse])
async def create_payment_intent(
    data: PaymentIntentCreate,
    current_user: User = Depends(get_current_user),
    service: PaymentService = Depends(get_payment_service),
) -> APIResponse[PaymentIntentResponse]:
    """Create a Stripe payment intent for an assigned project."""
    result = await service.create_payment_intent(caller=current_user, **data.model_dump())
    return APIResponse.ok(
        PaymentIntentResponse(
            client_secret=result.client_secret,
            amount_cents=result.amount_cents,
            currency=result.currency,
        )
    )
