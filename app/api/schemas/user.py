"""User and authentication API schemas."""

import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, EmailStr, Field

from app.api.schemas.common import RequestModel


class RegisterRequest(RequestModel):
    """Schema for creating an account."""

    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    role: Literal["client", "freelancer"]


class LoginRequest(RequestModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class ProfileUpdate(RequestModel):
    """Schema for updating the caller's profile. Omitted fields are left unchanged."""

    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    bio: str | None = Field(default=None, max_length=5000)
    skills: list[str] | None = None
    experience: str | None = Field(default=None, max_length=5000)
    portfolio: list[str] | None = None
    location: str | None = Field(default=None, max_length=255)


class ProfileResponse(BaseModel):
    bio: str | None = None
    skills: list[str] = []
    experience: str | None = None
    portfolio: list[str] = []
    rating: float = 0.0
    location: str | None = None

    model_config = {"from_attributes": True}


class UserResponse(BaseModel):
    """Public view of a user. Never includes the password hash."""

    id: uuid.UUID
    email: str
    first_name: str
    last_name: str
    role: str
    status: str
    is_verified: bool
    created_at: datetime
    profile: ProfileResponse

    model_config = {"from_attributes": True}

    @classmethod
    def from_user(cls, user) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
            status=user.status,
            is_verified=user.is_verified,
            created_at=user.created_at,
            profile=ProfileResponse.model_validate(user),
        )


class AuthResponse(BaseModel):
    user: UserResponse
    access_token: str
    token_type: str = "bearer"
