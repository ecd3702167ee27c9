"""Messaging service."""

import uuid
from typing import Sequence

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import (
    MessageValidationError,
    ProjectNotFoundException,
    UserNotFoundException,
)
from app.db.models.message import Message
from app.db.models.user import User
from app.db.repositories.message import MessageRepository
from app.db.repositories.project import ProjectRepository
from app.db.repositories.user import UserRepository


class MessageService:
    """Service layer for direct messages."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repository = MessageRepository(session)
        self.users = UserRepository(session)
        self.projects = ProjectRepository(session)

    async def send_message(
        self,
        caller: User,
        receiver_id: uuid.UUID,
        content: str = "",
        attachments: list[str] | None = None,
        project_id: uuid.UUID | None = None,
    ) -> Message:
        attachments = [a for a in (attachments or []) if a.strip()]
        if not content.strip() and not attachments:
            raise MessageValidationError()

        if await self.users.get_by_id(receiver_id) is None:
            raise UserNotFoundException(str(receiver_id))
        if project_id is not None and await self.projects.get_by_id(project_id) is None:
            raise ProjectNotFoundException(str(project_id))

        message = await self.repository.create(
            Message(
                sender_id=caller.id,
                receiver_id=receiver_id,
                project_id=project_id,
                content=content,
                attachments=attachments,
                is_read=False,
            )
        )
        await self.session.commit()
        logger.debug(f"Message {message.id} sent from {caller.id} to {receiver_id}")
        return message

    async def list_messages(
        self,
        caller: User,
        with_user_id: uuid.UUID | None = None,
        project_id: uuid.UUID | None = None,
    ) -> Sequence[Message]:
        return await self.repository.get_for_user(caller.id, with_user_id, project_id)
