"""
Health Check Endpoints

Liveness plus a storage check for the data directory.
"""

import os
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from reelboard.api.deps import get_content_store
from reelboard.db import ContentStore


router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: datetime
    ai_configured: bool


class StorageHealthResponse(BaseModel):
    """Data directory check response."""
    writable: bool
    path: str
    error: Optional[str] = None


@router.get("/health", response_model=HealthResponse)
def health_check():
    """
    Basic health check endpoint.

    Returns 200 OK if the API is running, and whether caption generation
    has an API key.
    """
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc),
        ai_configured=bool(os.getenv("OPENAI_API_KEY")),
    )


@router.get("/health/storage", response_model=StorageHealthResponse)
def storage_health_check(store: ContentStore = Depends(get_content_store)):
    """Check that the content file's directory exists and is writable."""
    error = store.check_writable()
    return StorageHealthResponse(
        writable=error is None,
        path=str(store.path),
        error=error,
    )
