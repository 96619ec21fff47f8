from typing import Protocol
from authcore.domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access.

    Implementations raise RepositoryError when the store fails, so a
    storage outage is never mistaken for an absent user.
    """
    def create(self, name: str, email: str, password_hash: str) -> User:
        """Create a new user. Raise DuplicateError if the email is taken."""
        ...

    def get_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        ...

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...

    def update_password(self, user_id: str, password_hash: str) -> bool:
        """Replace the stored password hash. Return True if a user was updated."""
        ...

    def update_profile(self, user_id: str, name: str | None = None, email: str | None = None) -> User | None:
        """Update name and/or email. Return the updated User or None if not found.

        Raise DuplicateError if the new email belongs to another user.
        """
        ...
