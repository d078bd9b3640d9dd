"""
Import Service

Turns an uploaded metric export into a preview, and commits reconciled rows
into the content store in a single write.
"""

import logging
from datetime import datetime
from typing import Callable, Dict, List, Optional, Sequence

from pydantic import Field

from reelboard.csv_import import (
    DEFAULT_IMPORT_SCHEMA,
    DEFAULT_PLATFORM_SIGNATURES,
    FieldSpec,
    PlatformSignature,
    build_field_mapping,
    detect_platform,
    merge_records,
    parse_headers,
    parse_rows,
    reconcile_rows,
)
from reelboard.csv_import.merge import new_content_id
from reelboard.db import ContentStore, ImportRecord, MergeResult
from reelboard.db.models import CamelModel

logger = logging.getLogger(__name__)

PREVIEW_LIMIT = 5
NOT_FOUND = "not found"


class ImportPreview(CamelModel):
    """What an import would do, shown to the user before committing."""

    platform: str
    mapping: Dict[str, str] = Field(
        description="Import field -> matched source column, or 'not found'"
    )
    preview: List[ImportRecord] = Field(default_factory=list)
    importable_count: int = 0


class ImportService:
    """Previews and commits CSV imports against a ContentStore."""

    def __init__(
        self,
        store: ContentStore,
        schema: Sequence[FieldSpec] = DEFAULT_IMPORT_SCHEMA,
        signatures: Sequence[PlatformSignature] = DEFAULT_PLATFORM_SIGNATURES,
        now: Optional[Callable[[], datetime]] = None,
        id_factory: Callable[[], str] = new_content_id,
    ):
        self.store = store
        self.schema = schema
        self.signatures = signatures
        self.now = now
        self.id_factory = id_factory

    def read_records(self, text: str) -> List[ImportRecord]:
        """Parse and reconcile export text into importable rows."""
        rows = parse_rows(text)
        if not rows:
            return []
        mapping = build_field_mapping(rows[0].keys(), self.schema)
        return reconcile_rows(rows, mapping)

    def preview(self, text: str) -> ImportPreview:
        """Build the pre-import preview: platform, column matches, first rows."""
        headers = parse_headers(text)
        mapping = build_field_mapping(headers, self.schema)
        records = self.read_records(text)

        return ImportPreview(
            platform=detect_platform(headers, self.signatures),
            mapping={key: column or NOT_FOUND for key, column in mapping.items()},
            preview=records[:PREVIEW_LIMIT],
            importable_count=len(records),
        )

    def commit(self, items: Sequence[ImportRecord]) -> MergeResult:
        """
        Upsert rows into the store.

        The merged collection is written once, after every row is processed.

        Raises:
            StorageError: if the write fails; nothing is persisted and the
                counts must not be reported.
        """
        existing = self.store.load()
        merged, result = merge_records(
            existing, items, now=self.now, id_factory=self.id_factory
        )
        self.store.save(merged)
        logger.info(
            f"Import committed: {result.created} created, {result.updated} updated "
            f"of {result.total}"
        )
        return result

    def import_text(self, text: str) -> MergeResult:
        """
        Parse, reconcile and commit an export.

        An export with no importable rows leaves the store untouched.
        """
        records = self.read_records(text)
        if not records:
            return MergeResult()
        return self.commit(records)
