"""Direct messaging routes."""

import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_current_user, get_db
from app.api.schemas.common import APIResponse
from app.api.schemas.message import ChatMessageResponse, MessageCreate
from app.db.models.user import User
from app.services.message import MessageService

router = APIRouter(prefix="/messages", tags=["Messages"])


def get_message_service(db: AsyncSession = Depends(get_db)) -> MessageService:
    return MessageService(db)


@router.post("", response_model=APIResponse[ChatMessageResponse], status_code=status.HTTP_201_CREATED)
async def send_message(
    data: MessageCreate,
    current_user: User = Depends(get_current_user),
    service: MessageService = Depends(get_message_service),
) -> APIResponse[ChatMessageResponse]:
    message = await service.send_message(caller=current_user, **data.model_dump())
    return APIResponse.ok(ChatMessageResponse.model_validate(message))


@router.get("", response_model=APIResponse[list[ChatMessageResponse]])
async def list_messages(
    with_user_id: uuid.UUID | None = Query(default=None),
    project_id: uuid.UUID | None = Query(default=None),
    current_user: User = Depends(get_current_user),
    service: MessageService = Depends(get_message_service),
) -> APIResponse[list[ChatMessageResponse]]:
    """A conversation with one user, or all of the caller's messages, oldest first."""
    messages = await service.list_messages(current_user, with_user_id, project_id)
    return APIResponse.ok([ChatMessageResponse.model_validate(m) for m in messages])
