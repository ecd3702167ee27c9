"""Review API schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from app.api.schemas.common import RequestModel
from app.db.enums import ReviewType


class ReviewCreate(RequestModel):
    project_id: uuid.UUID
    reviewee_id: uuid.UUID
    rating: int = Field(..., ge=1, le=5)
    comment: str = Field(..., min_length=1, max_length=1000)
    review_type: ReviewType


class ReviewResponse(BaseModel):
    id: uuid.UUID
    project_id: uuid.UUID
    reviewer_id: uuid.UUID
    reviewee_id: uuid.UUID
    rating: int
    comment: str
    review_type: str
    created_at: datetime

    model_config = {"from_attributes": True}
