"""User repository for database operations."""

import uuid
from typing import Sequence

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import json_list_ilike
from app.db.enums import UserRole, UserStatus
from app.db.models.user import User


class UserRepository:
    """Repository for User CRUD operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, user: User) -> User:
        """Create a new user."""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def get_by_id(self, user_id: uuid.UUID) -> User | None:
        """Get user by ID."""
        result = await self.session.execute(
            select(User).where(User.id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email (case-insensitive)."""
        result = await self.session.execute(
            select(User).where(User.email == email.lower())
        )
        return result.scalar_one_or_none()

    async def get_active(self) -> Sequence[User]:
        """Get all active users, newest first."""
        result = await self.session.execute(
            select(User)
            .where(User.status == UserStatus.ACTIVE.value)
            .order_by(User.created_at.desc())
        )
        return result.scalars().all()

    async def search_freelancers(
        self,
        q: str | None = None,
        skills: list[str] | None = None,
        location: str | None = None,
        min_rating: float | None = None,
        limit: int = 50,
    ) -> Sequence[User]:
        """Search active freelancers by free text, skills, location and rating."""
        stmt = select(User).where(
            User.role == UserRole.FREELANCER.value,
            User.status == UserStatus.ACTIVE.value,
        )
        if q:
            pattern = f"%{q}%"
            stmt = stmt.where(
                or_(
                    User.first_name.ilike(pattern),
                    User.last_name.ilike(pattern),
                    User.bio.ilike(pattern),
                    User.experience.ilike(pattern),
                )
            )
        if skills:
            dialect = self.session.get_bind().dialect.name
            stmt = stmt.where(
                json_list_ilike(dialect, User.skills, [f"%{skill}%" for skill in skills])
            )
        if location:
            stmt = stmt.where(User.location.ilike(f"%{location}%"))
        if min_rating is not None:
            stmt = stmt.where(User.rating >= min_rating)

        stmt = stmt.order_by(User.rating.desc(), User.created_at.desc()).limit(limit)
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def update(self, user: User) -> User:
        """Update an existing user."""
        await self.session.flush()
        await self.session.refresh(user)
        return user
