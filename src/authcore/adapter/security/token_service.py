"""JWT implementation of TokenService (python-jose, HMAC signed)."""

import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from authcore.domain.model.errors import InvalidTokenError
from authcore.domain.model.token import TokenClaims

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "HS256"

_DECODE_OPTIONS = {
    "require_exp": True,
    "require_iat": True,
    "require_sub": True,
}


class JoseTokenService:
    def __init__(self, secret_key: str, ttl: timedelta, algorithm: str = DEFAULT_ALGORITHM):
        self.secret_key = secret_key
        self.ttl = ttl
        self.algorithm = algorithm

    def issue(self, user_id: str, email: str) -> str:
        """Create a signed access token for the user."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "email": email,
            "iat": now,
            "exp": now + self.ttl,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Verify signature and expiry and return the decoded claims.

        Raises:
            InvalidTokenError: bad signature, malformed token, expired token
                or missing claims. The cause is only logged at debug level.
        """
        if not isinstance(token, str) or not token:
            raise InvalidTokenError()

        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options=_DECODE_OPTIONS,
            )
        except JWTError as e:
            logger.debug(f"JWT verification failed: {e}")
            raise InvalidTokenError() from None

        email = payload.get("email")
        if not isinstance(email, str):
            logger.debug("JWT verification failed: missing email claim")
            raise InvalidTokenError()

        return TokenClaims(
            user_id=payload["sub"],
            email=email,
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
