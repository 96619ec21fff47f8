from functools import lru_cache

from fastapi import HTTPException

from authcore.adapter.mongodb.connection import get_mongodb_client, DATABASE_NAME
from authcore.adapter.mongodb.user_repository import MongoUserRepository
from authcore.config import AuthConfig
from authcore.port.user_repository import UserRepository
from authcore.services.auth_service import AuthService


def _get_db():
    """Get MongoDB database, raising 503 if unavailable."""
    client = get_mongodb_client()
    if client is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return client[DATABASE_NAME]


def get_user_repo() -> UserRepository:
    return MongoUserRepository(_get_db())


@lru_cache
def get_auth_config() -> AuthConfig:
    return AuthConfig.from_env()


@lru_cache
def get_auth_service() -> AuthService:
    """Build the process-wide AuthService on first use.

    Not cached when the database is unavailable, so the next request retries.
    """
    return AuthService(repo=get_user_repo(), config=get_auth_config())
