"""Storage module for Reelboard."""

from .json_store import AccountStore, ContentStore, StorageError, get_data_dir
from .models import (
    CONTENT_STATUSES,
    AccountsSnapshot,
    ContentCreate,
    ContentRecord,
    ContentUpdate,
    ImportRecord,
    MergeResult,
)

__all__ = [
    "CONTENT_STATUSES",
    "AccountStore",
    "AccountsSnapshot",
    "ContentCreate",
    "ContentRecord",
    "ContentStore",
    "ContentUpdate",
    "ImportRecord",
    "MergeResult",
    "StorageError",
    "get_data_dir",
]
