"""Bearer-token authentication dependency."""

from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from authcore.api.dependencies import get_auth_service
from authcore.domain.model.errors import AccountDisabledError
from authcore.domain.model.user import PublicUserView
from authcore.services.auth_service import AuthService

security = HTTPBearer(auto_error=False)


def get_current_user_required(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    service: AuthService = Depends(get_auth_service),
) -> PublicUserView:
    """Resolve the caller from the bearer token. Raises 401 if not authenticated.

    An invalid token raises InvalidTokenError (401). A token whose owner has since been
    disabled raises AccountDisabledError (403); validate_token itself does not check it.
    """
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = service.validate_token(credentials.credentials)
    if not user.is_active:
        raise AccountDisabledError()
    return user
