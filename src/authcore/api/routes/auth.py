"""Authentication routes (register, login, current user, profile, password change)."""

import logging

from fastapi import APIRouter, Depends, status

from authcore.api.dependencies import get_auth_service
from authcore.api.models import (
    AuthResponse,
    ChangePasswordRequest,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
    UpdateProfileRequest,
    UserResponse,
)
from authcore.api.security import get_current_user_required
from authcore.domain.model.user import PublicUserView
from authcore.services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


# Handlers are sync so FastAPI runs them in its threadpool; bcrypt is CPU-bound.

@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(request: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    """Register a new user.

    Raises:
        400 invalid email / weak password, 409 email already in use
    """
    view = service.register(name=request.name, email=request.email, password=request.password)
    return RegisterResponse(user=UserResponse.from_view(view))


@router.post("/login", response_model=AuthResponse)
def login(request: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """Login user and return JWT token.

    Raises:
        401 invalid credentials, 403 account disabled
    """
    result = service.login(email=request.email, password=request.password)
    return AuthResponse(token=result.token, user=UserResponse.from_view(result.user))


@router.get("/me", response_model=UserResponse)
def get_me(current_user: PublicUserView = Depends(get_current_user_required)):
    """Get current authenticated user info."""
    return UserResponse.from_view(current_user)


@router.get("/profile", response_model=UserResponse)
def get_profile(
    current_user: PublicUserView = Depends(get_current_user_required),
    service: AuthService = Depends(get_auth_service),
):
    return UserResponse.from_view(service.get_profile(current_user.id))


@router.put("/profile", response_model=UserResponse)
def update_profile(
    request: UpdateProfileRequest,
    current_user: PublicUserView = Depends(get_current_user_required),
    service: AuthService = Depends(get_auth_service),
):
    """Update name and/or email of the current user.

    Raises:
        400 no field / blank name / invalid email, 409 email already in use
    """
    view = service.update_profile(current_user.id, name=request.name, email=request.email)
    return UserResponse.from_view(view)


@router.put("/change-password", response_model=MessageResponse)
def change_password(
    request: ChangePasswordRequest,
    current_user: PublicUserView = Depends(get_current_user_required),
    service: AuthService = Depends(get_auth_service),
):
    service.change_password(
        user_id=current_user.id,
        current_password=request.current_password,
        new_password=request.new_password,
    )
    return MessageResponse(message="Password changed successfully")
