"""Auth configuration.

Values are passed explicitly into AuthService. `AuthConfig.from_env()` is the
only place environment variables for the auth core are read; call
`load_dotenv()` before it if a .env file should be honoured.
"""

import os
from dataclasses import dataclass, field
from datetime import timedelta

from authcore.adapter.security.password_hasher import DEFAULT_BCRYPT_ROUNDS
from authcore.adapter.security.token_service import DEFAULT_ALGORITHM

DEFAULT_TOKEN_TTL = timedelta(days=7)
MIN_BCRYPT_ROUNDS = 4
MAX_BCRYPT_ROUNDS = 31


@dataclass(frozen=True)
class AuthConfig:
    secret_key: str = field(repr=False)
    token_ttl: timedelta = DEFAULT_TOKEN_TTL
    hash_cost: int = DEFAULT_BCRYPT_ROUNDS
    algorithm: str = DEFAULT_ALGORITHM

    def __post_init__(self):
        if not self.secret_key:
            raise ValueError("secret_key must not be empty")
        if not MIN_BCRYPT_ROUNDS <= self.hash_cost <= MAX_BCRYPT_ROUNDS:
            raise ValueError(
                f"hash_cost must be between {MIN_BCRYPT_ROUNDS} and {MAX_BCRYPT_ROUNDS}"
            )
        if self.token_ttl <= timedelta(0):
            raise ValueError("token_ttl must be positive")

    @classmethod
    def from_env(cls) -> "AuthConfig":
        secret_key = os.getenv("JWT_SECRET_KEY")
        if not secret_key:
            raise ValueError(
                "JWT_SECRET_KEY environment variable is required. "
                "Generate a secure key with: openssl rand -hex 32"
            )
        ttl_seconds = os.getenv("JWT_EXPIRATION_SECONDS")
        return cls(
            secret_key=secret_key,
            token_ttl=timedelta(seconds=int(ttl_seconds)) if ttl_seconds else DEFAULT_TOKEN_TTL,
            hash_cost=int(os.getenv("BCRYPT_ROUNDS", DEFAULT_BCRYPT_ROUNDS)),
        )
