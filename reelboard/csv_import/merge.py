"""
Upsert merge of imported rows into the stored content collection.

Identity precedence, evaluated across the whole collection one rule at a
time (the first RULE that matches anything wins, not the first record):
    1. same non-empty TikTok URL (exact)
    2. same non-empty Instagram URL (exact)
    3. same non-empty title, compared lowercased and trimmed

The merge itself is pure apart from the id factory and clock, which callers
inject for deterministic tests.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence, Tuple
from uuid import uuid4

from reelboard.db.models import CONTENT_STATUSES, ContentRecord, ImportRecord, MergeResult

logger = logging.getLogger(__name__)

METRIC_FIELDS: Tuple[str, ...] = ("views", "likes", "comments", "shares")

# Overwritten on a match only when the import supplies a non-empty value
REPLACEABLE_TEXT_FIELDS: Tuple[str, ...] = ("tiktok_url", "instagram_url", "due_date")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_content_id() -> str:
    return uuid4().hex


def normalize_title(title: Optional[str]) -> str:
    return (title or "").strip().lower()


def _same_tiktok_url(record: ContentRecord, item: ImportRecord) -> bool:
    return bool(item.tiktok_url) and record.tiktok_url == item.tiktok_url


def _same_instagram_url(record: ContentRecord, item: ImportRecord) -> bool:
    return bool(item.instagram_url) and record.instagram_url == item.instagram_url


def _same_title(record: ContentRecord, item: ImportRecord) -> bool:
    title_key = normalize_title(item.title)
    return bool(title_key) and normalize_title(record.title) == title_key


# In precedence order
IDENTITY_RULES: Tuple[Callable[[ContentRecord, ImportRecord], bool], ...] = (
    _same_tiktok_url,
    _same_instagram_url,
    _same_title,
)


def find_match(records: Sequence[ContentRecord], item: ImportRecord) -> Optional[int]:
    """
    Return the position of the record an import row refers to, or None.

    Linear per rule; fine for a single creator's catalogue. A larger store
    would keep one index per rule instead.
    """
    for rule in IDENTITY_RULES:
        for position, record in enumerate(records):
            if rule(record, item):
                return position
    return None


def apply_import(existing: ContentRecord, item: ImportRecord, now: datetime) -> ContentRecord:
    """
    Refresh a matched record from an import row.

    Metrics are overwritten whenever the import has a value, including 0.
    URLs and the date are only overwritten by non-empty values.
    """
    updates = {}
    for field in METRIC_FIELDS:
        value = getattr(item, field)
        if value is not None:
            updates[field] = value
    for field in REPLACEABLE_TEXT_FIELDS:
        value = getattr(item, field)
        if value:
            updates[field] = value
    updates["last_imported"] = now
    return existing.model_copy(update=updates)


def record_from_import(
    item: ImportRecord,
    now: datetime,
    id_factory: Callable[[], str] = new_content_id,
) -> ContentRecord:
    """Create a new content record from an unmatched import row."""
    views = item.views or 0
    if item.status in CONTENT_STATUSES:
        status = item.status
    else:
        status = "posted" if views > 0 else "idea"

    return ContentRecord(
        id=id_factory(),
        title=item.title or "Untitled",
        summary=item.summary,
        caption=item.caption,
        hashtags=item.hashtags,
        category=item.category,
        status=status,
        due_date=item.due_date,
        created_date=item.created_date or now.date().isoformat(),
        tiktok_url=item.tiktok_url,
        instagram_url=item.instagram_url,
        views=views,
        likes=item.likes or 0,
        comments=item.comments or 0,
        shares=item.shares or 0,
        last_imported=now,
    )


def merge_records(
    existing: Sequence[ContentRecord],
    items: Sequence[ImportRecord],
    now: Optional[Callable[[], datetime]] = None,
    id_factory: Callable[[], str] = new_content_id,
) -> Tuple[List[ContentRecord], MergeResult]:
    """
    Upsert import rows into a copy of the collection.

    Records created earlier in the batch can be matched by later rows, so a
    file listing the same video twice yields one record.

    Args:
        existing: Current stored collection (not modified)
        items: Reconciled import rows
        now: Clock returning an aware datetime (default: UTC now)
        id_factory: Generates ids for new records

    Returns:
        (merged collection, counts)
    """
    clock = now or utc_now
    merged = list(existing)
    result = MergeResult(total=len(items))

    for item in items:
        stamp = clock()
        position = find_match(merged, item)
        if position is not None:
            merged[position] = apply_import(merged[position], item, stamp)
            result.updated += 1
        else:
            merged.append(record_from_import(item, stamp, id_factory))
            result.created += 1

    logger.info(
        f"Merged {result.total} import rows: {result.created} created, {result.updated} updated"
    )
    return merged, result
