"""FastAPI application entry point."""

import os
import logging
from contextlib import asynccontextmanager
from importlib.metadata import PackageNotFoundError, version
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Must run before importing modules that read env vars at import time (mongodb connection)
load_dotenv()

from authcore.api.exception_handlers import setup_exception_handlers
from authcore.api.routes import auth, health
from authcore.adapter.mongodb.connection import get_mongodb_client, DATABASE_NAME
from authcore.adapter.mongodb.indexes import ensure_all_indexes
from authcore.utils.logging import setup_structured_logging

setup_structured_logging()

logger = logging.getLogger(__name__)

try:
    VERSION = version("authcore")
except PackageNotFoundError:
    VERSION = "0.0.0"

SERVICE_NAME = "authcore"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: ensure the unique email index exists."""
    client = get_mongodb_client()
    if client:
        if ensure_all_indexes(client[DATABASE_NAME]):
            logger.info("MongoDB indexes verified/created successfully")
        else:
            logger.warning("Failed to create some MongoDB indexes")
    else:
        logger.warning("MongoDB unavailable, skipping index creation")

    yield


app = FastAPI(
    title=SERVICE_NAME,
    description="Credential and identity service: registration, login and token validation",
    version=VERSION,
    lifespan=lifespan,
)

# With "*" browsers refuse credentials, so only enable them for an explicit origin list
cors_origins_env = os.getenv("CORS_ORIGINS", "*")
if cors_origins_env == "*":
    cors_origins = ["*"]
    allow_credentials = False
else:
    cors_origins = [origin.strip() for origin in cors_origins_env.split(",")]
    allow_credentials = True
    logger.info(f"CORS configured with specific origins: {cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_exception_handlers(app)

app.include_router(auth.router)
app.include_router(health.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=port,
        access_log=False
    )
