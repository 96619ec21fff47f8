from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenClaims:
    """Decoded, verified payload of an access token."""
    user_id: str
    email: str
    issued_at: datetime
    expires_at: datetime
