"""In-memory implementation of UserRepository for testing."""

import uuid
from datetime import datetime, timezone
from authcore.domain.model.errors import DuplicateError
from authcore.domain.model.user import User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}

    # ── write operations ─────────────────────────────────────

    def create(self, name: str, email: str, password_hash: str) -> User:
        if self.get_by_email(email) is not None:
            raise DuplicateError("Email already exists")

        user_id = uuid.uuid4().hex
        now = datetime.now(timezone.utc)

        user = User(
            id=user_id,
            name=name,
            email=email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
        self.store[user_id] = user
        return user

    def update_password(self, user_id: str, password_hash: str) -> bool:
        user = self.store.get(user_id)
        if not user:
            return False

        user.password_hash = password_hash
        user.updated_at = datetime.now(timezone.utc)
        return True

    def update_profile(self, user_id: str, name: str | None = None, email: str | None = None) -> User | None:
        user = self.store.get(user_id)
        if not user:
            return None

        if email is not None:
            owner = self.get_by_email(email)
            if owner is not None and owner.id != user_id:
                raise DuplicateError("Email already exists")
            user.email = email
        if name is not None:
            user.name = name
        user.updated_at = datetime.now(timezone.utc)
        return user

    def set_active(self, user_id: str, is_active: bool) -> bool:
        user = self.store.get(user_id)
        if not user:
            return False

        user.is_active = is_active
        user.updated_at = datetime.now(timezone.utc)
        return True

    def delete(self, user_id: str) -> bool:
        return self.store.pop(user_id, None) is not None

    # ── read operations ──────────────────────────────────────

    def get_by_email(self, email: str) -> User | None:
        for user in self.store.values():
            if user.email == email:
                return user
        return None

    def get_by_id(self, user_id: str) -> User | None:
        return self.store.get(user_id)
