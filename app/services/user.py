"""User service: registration, login, caller resolution, profiles, administration."""

import uuid
from typing import Sequence

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from app.config.settings import settings
from app.core.exceptions import (
    ForbiddenError,
    InvalidCredentialsError,
    UnauthenticatedError,
    UserAlreadyExistsError,
    UserNotFoundException,
)
from app.core.security import create_access_token, hash_password, verify_password
from app.db.enums import UserRole, UserStatus
from app.db.models.user import User
from app.db.repositories.user import UserRepository


def normalize_tags(values: list[str] | None) -> list[str]:
    """Strip blanks and duplicates from a list of tags, keeping first-seen order."""
    seen: dict[str, None] = {}
    for value in values or []:
        value = value.strip()
        if value:
            seen.setdefault(value, None)
    return list(seen)


class UserService:
    """Service layer for the identity directory."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repository = UserRepository(session)

    async def register(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        role: UserRole,
    ) -> tuple[User, str]:
        """Create an account and return it with a fresh access token."""
        email = email.lower()
        if await self.repository.get_by_email(email) is not None:
            raise UserAlreadyExistsError(email)

        admin_emails = {e.lower() for e in settings.ADMIN_EMAILS}
        if email in admin_emails:
            role = UserRole.ADMIN

        user = await self.repository.create(
            User(
                email=email,
                password_hash=hash_password(password),
                first_name=first_name,
                last_name=last_name,
                role=role.value,
                status=UserStatus.ACTIVE.value,
                is_verified=True,
            )
        )
        await self.session.commit()
        logger.info(f"Registered {user.role} {user.id} ({user.email})")
        return user, create_access_token(user.id)

    async def login(self, email: str, password: str) -> tuple[User, str]:
        user = await self.repository.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            raise InvalidCredentialsError()
        if not user.is_active:
            raise ForbiddenError("Account is suspended")
        logger.info(f"User {user.id} logged in")
        return user, create_access_token(user.id)

    async def resolve(self, user_id: uuid.UUID) -> User:
        """Resolve an authenticated user id to an active caller."""
        user = await self.repository.get_by_id(user_id)
        if user is None:
            raise UnauthenticatedError("User not found")
        if not user.is_active:
            raise ForbiddenError("Account is suspended")
        return user

    async def get_user(self, user_id: uuid.UUID) -> User:
        user = await self.repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundException(str(user_id))
        return user

    async def update_profile(
        self,
        user: User,
        first_name: str | None = None,
        last_name: str | None = None,
        bio: str | None = None,
        skills: list[str] | None = None,
        experience: str | None = None,
        portfolio: list[str] | None = None,
        location: str | None = None,
    ) -> User:
        """Update name and profile fields. None leaves a field unchanged."""
        if first_name is not None:
            user.first_name = first_name
        if last_name is not None:
            user.last_name = last_name
        if bio is not None:
            user.bio = bio
        if skills is not None:
            user.skills = normalize_tags(skills)
        if experience is not None:
            user.experience = experience
        if portfolio is not None:
            user.portfolio = normalize_tags(portfolio)
        if location is not None:
            user.location = location

        user = await self.repository.update(user)
        await self.session.commit()
        logger.info(f"Profile updated for user {user.id}")
        return user

    async def search_freelancers(
        self,
        q: str | None = None,
        skills: list[str] | None = None,
        location: str | None = None,
        min_rating: float | None = None,
    ) -> Sequence[User]:
        return await self.repository.search_freelancers(
            q=q,
            skills=normalize_tags(skills),
            location=location,
            min_rating=min_rating,
            limit=settings.FREELANCER_SEARCH_LIMIT,
        )

    # Administration

    @staticmethod
    def require_admin(caller: User) -> None:
        if not caller.has_role(UserRole.ADMIN):
            raise ForbiddenError("Admin access required")

    async def list_active_users(self, caller: User) -> Sequence[User]:
        self.require_admin(caller)
        return await self.repository.get_active()

    async def suspend_user(self, caller: User, user_id: uuid.UUID) -> User:
        """Suspend an account. Suspended users can no longer act."""
        self.require_admin(caller)
        user = await self.get_user(user_id)
        user.status = UserStatus.SUSPENDED.value
        user = await self.repository.update(user)
        await self.session.commit()
        logger.warning(f"User {user.id} suspended by admin {caller.id}")
        return user
