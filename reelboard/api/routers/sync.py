"""
Sync API Endpoints

Account stats and metric sync from TikTok and Instagram.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from reelboard.api.deps import get_sync_service
from reelboard.db import StorageError
from reelboard.services import AccountsResponse, MetricSyncService, SyncResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["sync"])


@router.get("/accounts", response_model=AccountsResponse)
def get_accounts(service: MetricSyncService = Depends(get_sync_service)):
    """Stored account stats and which platforms have access tokens."""
    return service.get_accounts()


@router.post("/sync", response_model=SyncResult)
def sync_metrics(service: MetricSyncService = Depends(get_sync_service)):
    """
    Fetch fresh metrics from both platforms and update matching records.

    Platform failures are reported in ``errors``; only a failed write is an
    HTTP error.
    """
    try:
        return service.sync()
    except StorageError as e:
        logger.error(f"Sync results could not be saved: {e}")
        raise HTTPException(status_code=500, detail="Sync failed; metrics were not saved")
