"""Time tracking API schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from app.api.schemas.common import RequestModel


class TimerStart(RequestModel):
    project_id: uuid.UUID
    description: str | None = Field(default=None, max_length=1000)


class TimerStop(RequestModel):
    time_entry_id: uuid.UUID


class TimeEntryResponse(BaseModel):
    id: uuid.UUID
    freelancer_id: uuid.UUID
    project_id: uuid.UUID
    start_time: datetime
    end_time: datetime | None
    description: str | None
    duration_minutes: int | None
    created_at: datetime

    model_config = {"from_attributes": True}
