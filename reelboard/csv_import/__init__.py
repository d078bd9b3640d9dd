"""
CSV import pipeline.

parse_rows -> build_field_mapping / reconcile_rows -> merge_records
"""

from .merge import find_match, merge_records
from .parser import RawRow, parse_headers, parse_rows, split_line
from .reconciler import (
    FieldMapping,
    build_field_mapping,
    detect_platform,
    parse_count,
    parse_date,
    reconcile_row,
    reconcile_rows,
)
from .schema import (
    DEFAULT_IMPORT_SCHEMA,
    DEFAULT_PLATFORM_SIGNATURES,
    FieldSpec,
    PlatformSignature,
)
from .template import TEMPLATE_CSV, TEMPLATE_FILENAME

__all__ = [
    "DEFAULT_IMPORT_SCHEMA",
    "DEFAULT_PLATFORM_SIGNATURES",
    "FieldMapping",
    "FieldSpec",
    "PlatformSignature",
    "RawRow",
    "TEMPLATE_CSV",
    "TEMPLATE_FILENAME",
    "build_field_mapping",
    "detect_platform",
    "find_match",
    "merge_records",
    "parse_count",
    "parse_date",
    "parse_headers",
    "parse_rows",
    "reconcile_row",
    "reconcile_rows",
    "split_line",
]
