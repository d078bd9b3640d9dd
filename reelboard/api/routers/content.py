"""
Content API Endpoints

CRUD for content records.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from reelboard.api.deps import get_content_service
from reelboard.db import ContentCreate, ContentRecord, ContentUpdate, StorageError
from reelboard.services import ContentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/content", tags=["content"])


def _storage_failure(e: StorageError) -> HTTPException:
    logger.error(f"Content write failed: {e}")
    return HTTPException(status_code=500, detail="Failed to save content")


@router.get("", response_model=List[ContentRecord])
def list_content(service: ContentService = Depends(get_content_service)):
    """List every content record."""
    return service.list_content()


@router.post("", response_model=ContentRecord)
def create_content(
    content: ContentCreate,
    service: ContentService = Depends(get_content_service),
):
    """Create a content record. The id and creation date are assigned here."""
    try:
        return service.create_content(content)
    except StorageError as e:
        raise _storage_failure(e)


@router.get("/{content_id}", response_model=ContentRecord)
def get_content(content_id: str, service: ContentService = Depends(get_content_service)):
    record = service.get_content(content_id)
    if not record:
        raise HTTPException(status_code=404, detail="Content not found")
    return record


@router.put("/{content_id}", response_model=ContentRecord)
def update_content(
    content_id: str,
    updates: ContentUpdate,
    service: ContentService = Depends(get_content_service),
):
    """Update the supplied fields of a record."""
    try:
        record = service.update_content(content_id, updates)
    except StorageError as e:
        raise _storage_failure(e)
    if not record:
        raise HTTPException(status_code=404, detail="Content not found")
    return record


@router.delete("/{content_id}")
def delete_content(content_id: str, service: ContentService = Depends(get_content_service)):
    try:
        deleted = service.delete_content(content_id)
    except StorageError as e:
        raise _storage_failure(e)
    if not deleted:
        raise HTTPException(status_code=404, detail="Content not found")
    return {"success": True}
