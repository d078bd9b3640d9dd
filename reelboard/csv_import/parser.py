"""
Delimited-text parser for metric exports.

Deliberately simpler than the ``csv`` module: a double quote only toggles
"inside a quoted field" and is never copied into the value, so a doubled
quote (``""``) does not produce a literal quote character. Platform exports
we see in practice never rely on that escape.
"""

import re
from typing import Dict, List

RawRow = Dict[str, str]

FIELD_SEPARATOR = ","
QUOTE = '"'

_LINE_BREAK = re.compile(r"\r?\n")


def split_line(line: str) -> List[str]:
    """
    Split one line into trimmed cells.

    Examples:
        'a, b ,c'            -> ['a', 'b', 'c']
        '"Hello, world",12'  -> ['Hello, world', '12']
    """
    cells = []
    current = []
    in_quotes = False

    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == FIELD_SEPARATOR and not in_quotes:
            cells.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    cells.append("".join(current).strip())
    return cells


def parse_rows(text: str) -> List[RawRow]:
    """
    Parse delimited text into rows keyed by header name.

    The first line is the header. Whitespace-only data lines are skipped.
    Short rows are padded with empty strings; cells beyond the header
    count are dropped.

    Args:
        text: Complete file contents

    Returns:
        One mapping per data row, or an empty list when the text has no
        header or no data lines.
    """
    lines = _LINE_BREAK.split(text.strip())
    if len(lines) < 2:
        return []

    headers = split_line(lines[0])
    rows = []
    for line in lines[1:]:
        if not line.strip():
            continue
        values = split_line(line)
        rows.append({
            header: values[i] if i < len(values) else ""
            for i, header in enumerate(headers)
        })
    return rows


def parse_headers(text: str) -> List[str]:
    """Return the header cells of ``text`` (empty list for empty input)."""
    stripped = text.strip()
    if not stripped:
        return []
    return split_line(_LINE_BREAK.split(stripped)[0])
