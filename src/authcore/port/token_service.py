"""Token port — issues and verifies signed access tokens."""

from typing import Protocol

from authcore.domain.model.token import TokenClaims


class TokenService(Protocol):
    """Port for minting tokens bound to a user and decoding them back."""

    def issue(self, user_id: str, email: str) -> str: ...

    def verify(self, token: str) -> TokenClaims:
        """Return the verified claims. Raise InvalidTokenError on any failure."""
        ...
