"""
Schema reconciliation: match export headers to import fields, guess the
export's platform, and coerce raw cells into typed ImportRecords.

Bad data never raises here. Every fallback is an explicit default:
- unmatched field      -> mapped to None, value "" (or 0 for metrics)
- unreadable metric    -> 0
- unreadable date      -> the raw cell, unchanged
"""

import logging
import re
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional, Sequence

from reelboard.db.models import ImportRecord

from .parser import RawRow
from .schema import (
    DATE_FIELD,
    DEFAULT_IMPORT_SCHEMA,
    DEFAULT_PLATFORM_SIGNATURES,
    NUMERIC_FIELDS,
    UNKNOWN_PLATFORM_LABEL,
    FieldSpec,
    PlatformSignature,
)

logger = logging.getLogger(__name__)

# Target field key -> original header name, or None if no alias matched
FieldMapping = Dict[str, Optional[str]]

_LEADING_DIGITS = re.compile(r"\d+")

# Tried after ISO-8601; covers the US-style and spelled-month dates exports use
_DATE_FORMATS = (
    "%m/%d/%Y",
    "%m/%d/%y",
    "%Y/%m/%d",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %H:%M:%S",
    "%b %d, %Y",
    "%B %d, %Y",
    "%d %b %Y",
    "%d %B %Y",
)


def _normalize_header(value: str) -> str:
    return value.strip().lower()


def build_field_mapping(
    headers: Iterable[str],
    schema: Sequence[FieldSpec] = DEFAULT_IMPORT_SCHEMA,
) -> FieldMapping:
    """
    Decide which header feeds each import field.

    For each field the aliases are tried in declared order and the first one
    that equals a header (case-insensitive, trimmed) wins. The header's
    original spelling is recorded.

    Args:
        headers: Header row cells
        schema: Import fields and their aliases

    Returns:
        Mapping of every schema key to a header name or None
    """
    by_normalized: Dict[str, str] = {}
    for header in headers:
        # Two headers differing only in case: keep the first
        by_normalized.setdefault(_normalize_header(header), header)

    mapping: FieldMapping = {}
    for spec in schema:
        mapping[spec.key] = None
        for alias in spec.aliases:
            header = by_normalized.get(_normalize_header(alias))
            if header is not None:
                mapping[spec.key] = header
                break
    return mapping


def detect_platform(
    headers: Iterable[str],
    signatures: Sequence[PlatformSignature] = DEFAULT_PLATFORM_SIGNATURES,
) -> str:
    """
    Best-effort guess of which platform produced the export.

    Only used for the preview banner; an unrecognised export is labelled
    "Custom CSV".
    """
    joined = ",".join(_normalize_header(h) for h in headers)
    for signature in signatures:
        if signature.phrase.lower() in joined:
            return signature.label
    return UNKNOWN_PLATFORM_LABEL


def parse_count(raw: Optional[str]) -> int:
    """
    Parse a metric cell.

    Thousands separators are removed and the leading integer is used, so
    "12,345" -> 12345 and "12.7" -> 12. Anything else (empty, "abc", "-5")
    becomes 0.
    """
    if not raw:
        return 0
    match = _LEADING_DIGITS.match(raw.replace(",", "").strip())
    if not match:
        return 0
    return int(match.group())


def parse_date(raw: Optional[str]) -> str:
    """
    Normalize a date cell to YYYY-MM-DD.

    Unparseable values are returned unchanged rather than dropped, so the
    user can still see and fix them on the record.
    """
    value = (raw or "").strip()
    if not value:
        return ""

    parsed = _parse_calendar_date(value)
    if parsed is None:
        logger.debug(f"Keeping unparseable date as-is: {value!r}")
        return value
    return parsed.isoformat()


def _parse_calendar_date(value: str) -> Optional[date]:
    iso_value = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        return datetime.fromisoformat(iso_value).date()
    except ValueError:
        pass

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    return None


def reconcile_row(row: RawRow, mapping: FieldMapping) -> ImportRecord:
    """Build a typed ImportRecord from one raw row."""
    values = {}
    for key, header in mapping.items():
        raw = (row.get(header) or "") if header is not None else ""
        if key in NUMERIC_FIELDS:
            values[key] = parse_count(raw)
        elif key == DATE_FIELD:
            values[key] = parse_date(raw)
        else:
            values[key] = raw.strip()
    return ImportRecord.model_validate(values)


def is_importable(record: ImportRecord) -> bool:
    """A record with neither a title nor views carries nothing to import."""
    return bool(record.title) or bool(record.views)


def reconcile_rows(rows: Iterable[RawRow], mapping: FieldMapping) -> List[ImportRecord]:
    """Reconcile every row, dropping rows with no title and no views."""
    records = [reconcile_row(row, mapping) for row in rows]
    importable = [r for r in records if is_importable(r)]
    if len(importable) < len(records):
        logger.info(f"Dropped {len(records) - len(importable)} rows with no title and no views")
    return importable
