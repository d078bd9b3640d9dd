"""
Import schema: the target fields an export can fill, and the header aliases
that identify them.

Aliases are matched whole (case-insensitive, trimmed), never as substrings.
Within a field, the FIRST alias that matches any header wins, so put the
most specific spellings first.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class FieldSpec:
    """One import target: its record key, a human label, and header aliases."""

    key: str
    label: str
    aliases: Tuple[str, ...]


@dataclass(frozen=True)
class PlatformSignature:
    """A phrase whose presence in the header row identifies an export's source."""

    phrase: str
    label: str


NUMERIC_FIELDS: Tuple[str, ...] = ("views", "likes", "comments", "shares")
DATE_FIELD = "dueDate"

DEFAULT_IMPORT_SCHEMA: Tuple[FieldSpec, ...] = (
    FieldSpec(
        key="title",
        label="Title",
        aliases=(
            "title", "video title", "post title", "name",
            "description", "video description", "caption",
        ),
    ),
    FieldSpec(
        key="views",
        label="Views",
        aliases=(
            "views", "video views", "total views", "view count", "view_count",
            "plays", "impressions", "reach",
        ),
    ),
    FieldSpec(
        key="likes",
        label="Likes",
        aliases=("likes", "total likes", "like count", "like_count", "hearts", "reactions"),
    ),
    FieldSpec(
        key="comments",
        label="Comments",
        aliases=("comments", "total comments", "comment count", "comment_count", "comments_count"),
    ),
    FieldSpec(
        key="shares",
        label="Shares",
        aliases=("shares", "total shares", "share count", "share_count", "reposts"),
    ),
    FieldSpec(
        key="dueDate",
        label="Date",
        aliases=(
            "duedate", "due date", "date", "post date", "posted date", "publish date",
            "publish time", "video create time", "create time", "date posted", "timestamp",
        ),
    ),
    FieldSpec(
        key="tiktokUrl",
        label="TikTok URL",
        aliases=("tiktokurl", "tiktok url", "tiktok link", "share url", "video link", "video url"),
    ),
    FieldSpec(
        key="instagramUrl",
        label="Instagram URL",
        aliases=("instagramurl", "instagram url", "instagram link", "permalink", "post link"),
    ),
    FieldSpec(
        key="hashtags",
        label="Hashtags",
        aliases=("hashtags", "hashtag", "tags"),
    ),
    FieldSpec(
        key="category",
        label="Category",
        aliases=("category", "content pillar", "pillar", "content type", "type"),
    ),
)

# Checked in order against the lowercased, comma-joined header row
DEFAULT_PLATFORM_SIGNATURES: Tuple[PlatformSignature, ...] = (
    PlatformSignature("tiktokurl,instagramurl", "Reelboard template"),
    PlatformSignature("video views", "TikTok Analytics"),
    PlatformSignature("video create time", "TikTok Analytics"),
    PlatformSignature("tiktok", "TikTok Analytics"),
    PlatformSignature("permalink", "Instagram Insights"),
    PlatformSignature("instagram", "Instagram Insights"),
    PlatformSignature("impressions", "Instagram Insights"),
    PlatformSignature("reach", "Instagram Insights"),
)

UNKNOWN_PLATFORM_LABEL = "Custom CSV"
