"""User profile and freelancer search routes."""

import uuid

from fastapi import APIRouter, Depends, Query
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_current_user, get_db
from app.api.schemas.common import APIResponse
from app.api.schemas.user import ProfileUpdate, UserResponse
from app.db.models.user import User
from app.services.user import UserService

router = APIRouter(tags=["Users"])


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(db)


@router.put("/users/me/profile", response_model=APIResponse[UserResponse])
async def update_my_profile(
    data: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
) -> APIResponse[UserResponse]:
    """Update the caller's name and profile."""
    logger.info(f"Updating profile for user: {current_user.id}")
    user = await service.update_profile(current_user, **data.model_dump(exclude_unset=True))
    return APIResponse.ok(UserResponse.from_user(user))


@router.get("/users/{user_id}", response_model=APIResponse[UserResponse])
async def get_user(
    user_id: uuid.UUID,
    service: UserService = Depends(get_user_service),
) -> APIResponse[UserResponse]:
    """Public profile of a user."""
    user = await service.get_user(user_id)
    return APIResponse.ok(UserResponse.from_user(user))


@router.get("/freelancers", response_model=APIResponse[list[UserResponse]])
async def search_freelancers(
    q: str | None = Query(default=None, max_length=200),
    skills: str | None = Query(default=None, description="Comma-separated skills"),
    location: str | None = Query(default=None, max_length=255),
    min_rating: float | None = Query(default=None, ge=0, le=5),
    service: UserService = Depends(get_user_service),
) -> APIResponse[list[UserResponse]]:
    """Search active freelancers, best rated first."""
    freelancers = await service.search_freelancers(
        q=q,
        skills=skills.split(",") if skills else None,
        location=location,
        min_rating=min_rating,
    )
    logger.debug(f"Found {len(freelancers)} freelancers")
    return APIResponse.ok([UserResponse.from_user(u) for u in freelancers])
