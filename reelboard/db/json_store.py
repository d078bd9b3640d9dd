"""
JSON-file storage for content records and account stats.

Every write replaces the whole file. There is no locking: two processes
importing at the same time both read the old collection and the last one to
write wins. That is acceptable for a single-user dashboard; a multi-user
deployment needs a real database keyed by the same identity rules the
import merge uses.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, List, Optional, Tuple

from pydantic import ValidationError

from .models import AccountsSnapshot, ContentRecord

logger = logging.getLogger(__name__)

CONTENT_FILENAME = "data.json"
ACCOUNTS_FILENAME = "accounts.json"


class StorageError(Exception):
    """Raised when the data directory cannot be written."""


def get_data_dir() -> Path:
    """Get the data directory from environment (DATA_DIR), defaulting to cwd."""
    return Path(os.getenv("DATA_DIR") or Path.cwd())


class JsonFileStore:
    """Reads and atomically rewrites a single JSON document."""

    def __init__(self, path: Path, default: Any):
        self.path = Path(path)
        self.default = default

    def read(self) -> Any:
        """
        Load the document.

        A missing file yields the default. A corrupt file is logged and also
        yields the default, so the dashboard stays usable.
        """
        if not self.path.exists():
            return self.default
        try:
            with open(self.path, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error loading {self.path}: {e}")
            return self.default

    def write(self, document: Any) -> None:
        """
        Replace the document in one step.

        Writes to a temp file in the same directory then renames it over the
        target, so a failed write leaves the previous file untouched.

        Raises:
            StorageError: if the file could not be written
        """
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Failed to write {self.path}: {e}") from e

    def check_writable(self) -> Optional[str]:
        """Return None if the parent directory is writable, else an error message."""
        directory = self.path.parent
        if not directory.exists():
            return f"{directory} does not exist"
        if not os.access(directory, os.W_OK):
            return f"{directory} is not writable"
        return None


class ContentStore:
    """The full collection of content records, kept as one JSON array."""

    def __init__(self, data_dir: Optional[Path] = None):
        data_dir = Path(data_dir) if data_dir else get_data_dir()
        self._file = JsonFileStore(data_dir / CONTENT_FILENAME, default=[])

    @property
    def path(self) -> Path:
        return self._file.path

    def _read_entries(self) -> Tuple[List[ContentRecord], List[Any]]:
        """Split the stored array into valid records and entries that fail validation."""
        raw = self._file.read()
        if not isinstance(raw, list):
            logger.error(f"{self.path} does not hold a JSON array; ignoring it")
            return [], []

        records, unreadable = [], []
        for entry in raw:
            try:
                records.append(ContentRecord.model_validate(entry))
            except ValidationError as e:
                logger.warning(f"Keeping unreadable content entry {entry!r:.80} untouched: {e}")
                unreadable.append(entry)
        return records, unreadable

    def load(self) -> List[ContentRecord]:
        """
        Load every readable record.

        Entries that fail validation are left out here but stay in the file;
        ``save`` writes them back unchanged.
        """
        records, _ = self._read_entries()
        return records

    def save(self, records: List[ContentRecord]) -> None:
        """Replace the readable records. Raises StorageError on failure."""
        _, unreadable = self._read_entries()
        self._file.write([record.to_json_dict() for record in records] + unreadable)
        logger.debug(f"Saved {len(records)} content records to {self.path}")

    def check_writable(self) -> Optional[str]:
        return self._file.check_writable()


class AccountStore:
    """Per-platform account stats (followers etc.) and the last sync time."""

    def __init__(self, data_dir: Optional[Path] = None):
        data_dir = Path(data_dir) if data_dir else get_data_dir()
        self._file = JsonFileStore(data_dir / ACCOUNTS_FILENAME, default={})

    def load(self) -> AccountsSnapshot:
        raw = self._file.read()
        try:
            return AccountsSnapshot.model_validate(raw)
        except ValidationError as e:
            logger.error(f"Ignoring invalid accounts file: {e}")
            return AccountsSnapshot()

    def save(self, snapshot: AccountsSnapshot) -> None:
        self._file.write(snapshot.model_dump(mode="json", by_alias=True))
