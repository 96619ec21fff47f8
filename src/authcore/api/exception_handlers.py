"""Map domain errors raised by the auth service to HTTP responses.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "machine_readable_code"
    }
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from authcore.domain.model.errors import (
    AccountDisabledError,
    AuthenticationError,
    DomainError,
    DuplicateError,
    NotFoundError,
    RepositoryError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Checked in order; the first matching base class wins
ERROR_STATUS: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (DuplicateError, status.HTTP_409_CONFLICT),
    (AccountDisabledError, status.HTTP_403_FORBIDDEN),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (RepositoryError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def status_for(exc: DomainError) -> int:
    for error_type, status_code in ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    log = logger.warning if status_code >= 500 else logger.info
    log("Request failed", extra={"path": request.url.path, "code": exc.code, "status": status_code})

    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "code": exc.code},
        headers=headers,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
