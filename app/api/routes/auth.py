"""Authentication API routes."""

from fastapi import APIRouter, Depends, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_current_user, get_db
from app.api.schemas.common import APIResponse
from app.api.schemas.user import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from app.db.enums import UserRole
from app.db.models.user import User
from app.services.user import UserService

router = APIRouter(prefix="/auth", tags=["Auth"])


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    """Dependency for user service."""
    return UserService(db)


@router.post("/register", response_model=APIResponse[AuthResponse], status_code=status.HTTP_201_CREATED)
async def register(
    data: RegisterRequest,
    service: UserService = Depends(get_user_service),
) -> APIResponse[AuthResponse]:
    """Register a client or freelancer account."""
    logger.info(f"Registration attempt: {data.email} as {data.role}")
    user, token = await service.register(
        email=data.email,
        password=data.password,
        first_name=data.first_name,
        last_name=data.last_name,
        role=UserRole(data.role),
    )
    return APIResponse.ok(AuthResponse(user=UserResponse.from_user(user), access_token=token))


@router.post("/login", response_model=APIResponse[AuthResponse])
async def login(
    data: LoginRequest,
    service: UserService = Depends(get_user_service),
) -> APIResponse[AuthResponse]:
    """Exchange email and password for an access token."""
    user, token = await service.login(data.email, data.password)
    return APIResponse.ok(AuthResponse(user=UserResponse.from_user(user), access_token=token))


@router.get("/me", response_model=APIResponse[UserResponse])
async def me(current_user: User = Depends(get_current_user)) -> APIResponse[UserResponse]:
    """Return the authenticated user."""
    return APIResponse.ok(UserResponse.from_user(current_user))
