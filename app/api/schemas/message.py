"""Messaging API schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from app.api.schemas.common import RequestModel


class MessageCreate(RequestModel):
    receiver_id: uuid.UUID
    content: str = Field(default="", max_length=10000)
    attachments: list[str] = Field(default_factory=list)
    project_id: uuid.UUID | None = None


class ChatMessageResponse(BaseModel):
    id: uuid.UUID
    sender_id: uuid.UUID
    receiver_id: uuid.UUID
    project_id: uuid.UUID | None
    content: str
    attachments: list[str]
    is_read: bool
    created_at: datetime

    model_config = {"from_attributes": True}
