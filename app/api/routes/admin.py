"""Administration routes."""

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_current_user, get_db
from app.api.schemas.common import APIResponse
from app.api.schemas.project import ProjectResponse
from app.api.schemas.user import UserResponse
from app.db.models.user import User
from app.services.project import ProjectService
from app.services.user import UserService

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/users", response_model=APIResponse[list[UserResponse]])
async def list_users(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> APIResponse[list[UserResponse]]:
    """All active users."""
    users = await UserService(db).list_active_users(current_user)
    return APIResponse.ok([UserResponse.from_user(u) for u in users])


@router.get("/projects", response_model=APIResponse[list[ProjectResponse]])
async def list_projects(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> APIResponse[list[ProjectResponse]]:
    """Every project regardless of status."""
    projects = await ProjectService(db).list_all(current_user)
    return APIResponse.ok([ProjectResponse.model_validate(p) for p in projects])


@router.post("/users/{user_id}/suspend", response_model=APIResponse[UserResponse])
async def suspend_user(
    user_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> APIResponse[UserResponse]:
    user = await UserService(db).suspend_user(current_user, user_id)
    return APIResponse.ok(UserResponse.from_user(user))
