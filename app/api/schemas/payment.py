"""Payment API schemas."""

import uuid

from pydantic import BaseModel, Field

from app.api.schemas.common import RequestModel


class PaymentIntentCreate(RequestModel):
    project_id: uuid.UUID
    amount: float = Field(..., gt=0, description="Amount in major currency units")
    currency: str | None = Field(default=None, min_length=3, max_length=3)
    description: str | None = Field(default=None, max_length=500)


class PaymentIntentResponse(BaseModel):
    client_secret: str
    amount_cents: int
    currency: str
