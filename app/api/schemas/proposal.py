"""Proposal API schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from app.api.schemas.common import RequestModel


class ProposalCreate(RequestModel):
    """Schema for submitting a proposal."""

    cover_letter: str = Field(..., min_length=1)
    proposed_budget: float = Field(..., gt=0)
    timeline: str = Field(..., min_length=1, max_length=255)


class ProposalResponse(BaseModel):
    id: uuid.UUID
    project_id: uuid.UUID
    freelancer_id: uuid.UUID
    cover_letter: str
    proposed_budget: float
    timeline: str
    status: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
