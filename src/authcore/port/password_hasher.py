"""Password hasher port — one-way adaptive hashing of credentials."""

from typing import Protocol


class PasswordHasher(Protocol):
    """Port for hashing and verifying plaintext passwords."""

    def hash(self, plaintext: str) -> str: ...

    def verify(self, plaintext: str, stored_hash: str) -> bool:
        """Return True iff plaintext matches stored_hash. Never raises."""
        ...
