"""
Content Service

CRUD over the content collection. Each mutating call loads the full
collection, changes it, and writes it back.
"""

import logging
from datetime import date
from typing import Callable, List, Optional

from reelboard.csv_import.merge import new_content_id
from reelboard.db import ContentCreate, ContentRecord, ContentStore, ContentUpdate

logger = logging.getLogger(__name__)


class ContentService:
    """Manages content records."""

    def __init__(
        self,
        store: ContentStore,
        id_factory: Callable[[], str] = new_content_id,
        today: Callable[[], date] = date.today,
    ):
        self.store = store
        self.id_factory = id_factory
        self.today = today

    def list_content(self) -> List[ContentRecord]:
        return self.store.load()

    def get_content(self, content_id: str) -> Optional[ContentRecord]:
        """Get a record by id."""
        for record in self.store.load():
            if record.id == content_id:
                return record
        return None

    def create_content(self, content: ContentCreate) -> ContentRecord:
        """
        Create a new record.

        Args:
            content: Fields for the new record

        Returns:
            The stored record with its generated id and creation date
        """
        records = self.store.load()
        record = ContentRecord(
            id=self.id_factory(),
            created_date=self.today().isoformat(),
            **content.model_dump(),
        )
        records.append(record)
        self.store.save(records)
        logger.info(f"Created content {record.id}: {record.title!r}")
        return record

    def update_content(self, content_id: str, updates: ContentUpdate) -> Optional[ContentRecord]:
        """Apply the supplied fields to a record. Returns None if it doesn't exist."""
        records = self.store.load()
        for position, record in enumerate(records):
            if record.id != content_id:
                continue
            changes = updates.model_dump(exclude_unset=True, exclude_none=True)
            records[position] = ContentRecord.model_validate(
                {**record.model_dump(), **changes}
            )
            self.store.save(records)
            return records[position]
        return None

    def delete_content(self, content_id: str) -> bool:
        """Delete a record. Returns False if it doesn't exist."""
        records = self.store.load()
        remaining = [r for r in records if r.id != content_id]
        if len(remaining) == len(records):
            return False
        self.store.save(remaining)
        logger.info(f"Deleted content {content_id}")
        return True
