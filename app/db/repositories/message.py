"""Message repository for database operations."""

import uuid
from typing import Sequence

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.message import Message


class MessageRepository:
    """Repository for Message CRUD operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, message: Message) -> Message:
        """Create a new message."""
        self.session.add(message)
        await self.session.flush()
        await self.session.refresh(message)
        return message

    async def get_for_user(
        self,
        user_id: uuid.UUID,
        with_user_id: uuid.UUID | None = None,
        project_id: uuid.UUID | None = None,
    ) -> Sequence[Message]:
        """Get messages involving a user, oldest first.

        With ``with_user_id`` only the conversation between the two users is
        returned; otherwise every message the user sent or received.
        """
        if with_user_id is not None:
            condition = or_(
                and_(Message.sender_id == user_id, Message.receiver_id == with_user_id),
                and_(Message.sender_id == with_user_id, Message.receiver_id == user_id),
            )
        else:
            condition = or_(Message.sender_id == user_id, Message.receiver_id == user_id)

        stmt = select(Message).where(condition)
        if project_id is not None:
            stmt = stmt.where(Message.project_id == project_id)
        result = await self.session.execute(stmt.order_by(Message.created_at.asc()))
        return result.scalars().all()
