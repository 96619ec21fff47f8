from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Domain model representing a stored user account."""
    id: str
    name: str
    email: str
    password_hash: str
    created_at: datetime
    updated_at: datetime
    is_active: bool = True


@dataclass(frozen=True)
class PublicUserView:
    """Sanitized projection of a User, safe to return to any caller."""
    id: str
    name: str
    email: str
    is_active: bool
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "PublicUserView":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            is_active=user.is_active,
            created_at=user.created_at,
        )


@dataclass(frozen=True)
class LoginResult:
    """Outcome of a successful login: the caller's view plus a signed token."""
    user: PublicUserView
    token: str
