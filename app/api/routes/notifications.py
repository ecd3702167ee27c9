"""Notification inbox routes."""

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_current_user, get_db
from app.api.schemas.common import APIResponse
from app.api.schemas.notification import (
    MarkAllReadResponse,
    NotificationResponse,
    UnreadCountResponse,
)
from app.db.models.user import User
from app.services.notification import NotificationService

router = APIRouter(prefix="/notifications", tags=["Notifications"])


def get_notification_service(db: AsyncSession = Depends(get_db)) -> NotificationService:
    return NotificationService(db)


@router.get("", response_model=APIResponse[list[NotificationResponse]])
async def list_notifications(
    current_user: User = Depends(get_current_user),
    service: NotificationService = Depends(get_notification_service),
) -> APIResponse[list[NotificationResponse]]:
    """The caller's latest notifications, newest first."""
    notifications = await service.list_notifications(current_user)
    return APIResponse.ok([NotificationResponse.model_validate(n) for n in notifications])


@router.get("/unread-count", response_model=APIResponse[UnreadCountResponse])
async def unread_count(
    current_user: User = Depends(get_current_user),
    service: NotificationService = Depends(get_notification_service),
) -> APIResponse[UnreadCountResponse]:
    count = await service.unread_count(current_user)
    return APIResponse.ok(UnreadCountResponse(count=count))


@router.patch("/read-all", response_model=APIResponse[MarkAllReadResponse])
async def mark_all_read(
    current_user: User = Depends(get_current_user),
    service: NotificationService = Depends(get_notification_service),
) -> APIResponse[MarkAllReadResponse]:
    updated = await service.mark_all_read(current_user)
    return APIResponse.ok(
        MarkAllReadResponse(message="All notifications marked as read", updated=updated)
    )


@router.patch("/{notification_id}/read", response_model=APIResponse[NotificationResponse])
async def mark_read(
    notification_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    service: NotificationService = Depends(get_notification_service),
) -> APIResponse[NotificationResponse]:
    notification = await service.mark_read(current_user, notification_id)
    return APIResponse.ok(NotificationResponse.model_validate(notification))
