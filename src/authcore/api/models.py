"""Pydantic models for API request/response."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from authcore.domain.model.user import PublicUserView


class RegisterRequest(BaseModel):
    """Request model for user registration.

    Email format and password strength are checked by the auth service so the
    API reports the same errors as any other caller.
    """
    name: str
    email: str
    password: str


class LoginRequest(BaseModel):
    """Request model for user login."""
    email: str
    password: str


class UpdateProfileRequest(BaseModel):
    """Request model for updating the caller's profile. Omitted fields are left unchanged."""
    name: Optional[str] = None
    email: Optional[str] = None


class ChangePasswordRequest(BaseModel):
    """Request model for changing the caller's password."""
    current_password: str
    new_password: str


class UserResponse(BaseModel):
    """Public user data. Never includes the password hash."""
    id: str = Field(..., description="User ID")
    name: str
    email: str
    is_active: bool
    created_at: datetime

    @classmethod
    def from_view(cls, view: PublicUserView) -> "UserResponse":
        return cls(
            id=view.id,
            name=view.name,
            email=view.email,
            is_active=view.is_active,
            created_at=view.created_at,
        )


class RegisterResponse(BaseModel):
    user: UserResponse


class AuthResponse(BaseModel):
    """Response model for login."""
    token: str
    user: UserResponse


class MessageResponse(BaseModel):
    message: str
