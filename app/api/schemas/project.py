"""Project API schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from app.api.schemas.common import RequestModel
from app.db.enums import ProjectStatus


class ProjectCreate(RequestModel):
    """Schema for posting a project."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, max_length=100)
    budget: float = Field(..., gt=0)
    timeline: str = Field(..., min_length=1, max_length=255)
    requirements: list[str] = Field(default_factory=list)


class ProjectStatusUpdate(RequestModel):
    """Schema for the assigned freelancer's status change."""

    status: ProjectStatus


class ProjectResponse(BaseModel):
    """Schema for project response."""

    id: uuid.UUID
    client_id: uuid.UUID
    title: str
    description: str
    category: str
    budget: float
    timeline: str
    status: str
    requirements: list[str]
    selected_freelancer_id: uuid.UUID | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class ProjectListResponse(BaseModel):
    projects: list[ProjectResponse]
    pagination: Pagination
