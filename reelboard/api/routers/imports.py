"""
Import API Endpoints

CSV preview/commit and bulk upsert of already-reconciled rows.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel

from reelboard.api.deps import get_import_service
from reelboard.csv_import import TEMPLATE_CSV, TEMPLATE_FILENAME
from reelboard.db import ImportRecord, MergeResult, StorageError
from reelboard.services import ImportPreview, ImportService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/content/import", tags=["import"])


class CsvImportRequest(BaseModel):
    """An uploaded export, read by the browser into one string."""
    text: str


def _saving(operation, *args) -> MergeResult:
    try:
        return operation(*args)
    except StorageError as e:
        # Nothing was written; counts must not be reported
        logger.error(f"Import failed, no changes saved: {e}")
        raise HTTPException(status_code=500, detail="Import failed; no changes were saved")


@router.post("", response_model=MergeResult)
def bulk_import(
    items: List[ImportRecord],
    service: ImportService = Depends(get_import_service),
):
    """
    Upsert reconciled rows.

    Matches existing records by TikTok URL, then Instagram URL, then title;
    refreshes metrics on a match and creates a record otherwise.
    """
    if not items:
        raise HTTPException(status_code=400, detail="Expected a non-empty array of items")
    return _saving(service.commit, items)


@router.post("/preview", response_model=ImportPreview)
def preview_import(
    request: CsvImportRequest,
    service: ImportService = Depends(get_import_service),
):
    """Show the detected platform, column matches and the first rows without saving."""
    return service.preview(request.text)


@router.post("/csv", response_model=MergeResult)
def import_csv(
    request: CsvImportRequest,
    service: ImportService = Depends(get_import_service),
):
    """Parse, reconcile and commit an export. An empty export commits nothing."""
    return _saving(service.import_text, request.text)


@router.get("/template")
def download_template():
    """Example CSV listing every column the importer understands."""
    return Response(
        content=TEMPLATE_CSV,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{TEMPLATE_FILENAME}"'},
    )
