"""Notification outbox and inbox services."""

import uuid
from typing import Sequence

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.config.settings import settings
from app.core.exceptions import NotificationNotFoundException
from app.db.base import get_session_factory
from app.db.enums import NotificationType
from app.db.models.notification import Notification
from app.db.models.user import User
from app.db.repositories.notification import NotificationRepository


class NotificationSink:
    """Best-effort writer for notifications.

    Each notification is written in its own session and committed on its own,
    after the triggering change has already been committed. A failure here is
    logged and swallowed: it never fails or rolls back the caller's operation.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession] | None = None):
        self._session_factory = session_factory

    async def append(
        self,
        user_id: uuid.UUID,
        type: NotificationType,
        title: str,
        message: str,
        related_id: uuid.UUID | None = None,
        action_url: str | None = None,
    ) -> uuid.UUID | None:
        """Write one notification. Returns its id, or None if the write failed."""
        factory = self._session_factory or get_session_factory()
        try:
            async with factory() as session:
                notification = await NotificationRepository(session).create(
                    Notification(
                        user_id=user_id,
                        type=type.value,
                        title=title,
                        message=message,
                        related_id=related_id,
                        action_url=action_url,
                        is_read=False,
                    )
                )
                await session.commit()
        except Exception:
            logger.exception(
                f"Failed to create {type.value} notification "
                f"(user={user_id}, related={related_id})"
            )
            return None

        logger.debug(f"Notification {notification.id} ({type.value}) created for user {user_id}")
        return notification.id


class NotificationService:
    """Service layer for a user's notification inbox."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repository = NotificationRepository(session)

    async def list_notifications(self, caller: User) -> Sequence[Notification]:
        """Newest notifications of the caller, capped at the inbox limit."""
        return await self.repository.get_for_user(caller.id, settings.NOTIFICATION_INBOX_LIMIT)

    async def mark_read(self, caller: User, notification_id: uuid.UUID) -> Notification:
        """Mark one of the caller's notifications read. Already-read is a no-op."""
        notification = await self.repository.get_owned(notification_id, caller.id)
        if notification is None:
            raise NotificationNotFoundException(str(notification_id))

        if not notification.is_read:
            notification.is_read = True
            notification = await self.repository.update(notification)
            await self.session.commit()
        return notification

    async def mark_all_read(self, caller: User) -> int:
        """Mark all of the caller's notifications read. Returns how many changed."""
        changed = await self.repository.mark_all_read(caller.id)
        await self.session.commit()
        logger.info(f"Marked {changed} notification(s) read for user {caller.id}")
        return changed

    async def unread_count(self, caller: User) -> int:
        return await self.repository.count_unread(caller.id)
