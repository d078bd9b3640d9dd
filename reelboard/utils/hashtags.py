"""
Hashtag formatting helpers.

Records store hashtags as one space-separated string ("#garden #spring");
the caption generator returns them as a list.
"""

import re
from typing import Iterable, List, Optional, Union

_SEPARATORS = re.compile(r"[\s,]+")


def _with_hash(tag: str) -> str:
    return tag if tag.startswith("#") else f"#{tag}"


def format_hashtags(hashtags: Union[Iterable[str], str, None]) -> str:
    """
    Join tags into a display string, adding missing '#' prefixes.

    Examples:
        ["garden", "#spring"] -> "#garden #spring"
        "#already #a #string"  -> returned unchanged
    """
    if hashtags is None:
        return ""
    if isinstance(hashtags, str):
        return hashtags
    tags = (tag.strip() for tag in hashtags)
    return " ".join(_with_hash(tag) for tag in tags if tag)


def parse_hashtags(value: Optional[str]) -> List[str]:
    """
    Split a space- or comma-separated hashtag string into tags.

    Examples:
        "garden, #spring plants" -> ["#garden", "#spring", "#plants"]
    """
    if not value:
        return []
    return [_with_hash(tag) for tag in _SEPARATORS.split(value) if tag]
