"""Pydantic models for stored content records."""

from datetime import datetime
from typing import Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# Production stages, in pipeline order
ContentStatus = Literal["idea", "in-progress", "filmed", "edited", "posted"]

CONTENT_STATUSES: tuple = get_args(ContentStatus)


class CamelModel(BaseModel):
    """Base model whose JSON keys are camelCase (``dueDate``, ``tiktokUrl``)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict:
        """Dump with camelCase keys, JSON-safe values."""
        return self.model_dump(mode="json", by_alias=True)


class ContentRecord(CamelModel):
    """A piece of content tracked through the production pipeline."""

    # Keys written by older versions of the dashboard are kept on round-trip
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    id: str
    title: str = ""
    summary: str = ""
    header: str = ""
    caption: str = ""
    hashtags: str = ""
    category: str = ""
    # Not narrowed to ContentStatus: a stage written by another tool is kept as-is
    status: str = "idea"

    # YYYY-MM-DD, or whatever an import could not parse (see csv_import.reconciler)
    due_date: str = ""
    created_date: str = ""

    tiktok_url: str = ""
    instagram_url: str = ""

    views: int = 0
    likes: int = 0
    comments: int = 0
    shares: int = 0

    last_imported: Optional[datetime] = None
    last_synced: Optional[datetime] = None

    @field_validator("views", "likes", "comments", "shares", mode="before")
    @classmethod
    def null_metric_is_zero(cls, value):
        return 0 if value is None else value


class ContentCreate(CamelModel):
    """Fields for creating a content record."""

    title: str
    summary: str = ""
    header: str = ""
    caption: str = ""
    hashtags: str = ""
    category: str = ""
    status: ContentStatus = "idea"
    due_date: str = ""
    tiktok_url: str = ""
    instagram_url: str = ""
    views: int = Field(default=0, ge=0)
    likes: int = Field(default=0, ge=0)
    comments: int = Field(default=0, ge=0)
    shares: int = Field(default=0, ge=0)


class ContentUpdate(CamelModel):
    """Fields for updating a content record (all optional)."""

    title: Optional[str] = None
    summary: Optional[str] = None
    header: Optional[str] = None
    caption: Optional[str] = None
    hashtags: Optional[str] = None
    category: Optional[str] = None
    status: Optional[ContentStatus] = None
    due_date: Optional[str] = None
    tiktok_url: Optional[str] = None
    instagram_url: Optional[str] = None
    views: Optional[int] = Field(default=None, ge=0)
    likes: Optional[int] = Field(default=None, ge=0)
    comments: Optional[int] = Field(default=None, ge=0)
    shares: Optional[int] = Field(default=None, ge=0)


class ImportRecord(CamelModel):
    """
    One reconciled import row.

    Rows built from CSV always carry integer metrics (0 when the column is
    missing or unreadable). Items posted straight to the bulk import endpoint
    may send null metrics, which the merge treats as "leave unchanged".
    """

    title: str = ""
    views: Optional[int] = Field(default=0, ge=0)
    likes: Optional[int] = Field(default=0, ge=0)
    comments: Optional[int] = Field(default=0, ge=0)
    shares: Optional[int] = Field(default=0, ge=0)
    due_date: str = ""
    tiktok_url: str = ""
    instagram_url: str = ""
    hashtags: str = ""
    category: str = ""

    # Only honoured when a new record is created
    summary: str = ""
    caption: str = ""
    status: Optional[str] = None
    created_date: str = ""


class MergeResult(BaseModel):
    """Counts reported by an import merge."""

    created: int = 0
    updated: int = 0
    total: int = 0


class AccountsSnapshot(BaseModel):
    """Stored account stats for both platforms."""

    model_config = ConfigDict(populate_by_name=True)

    tiktok: Optional[dict] = None
    instagram: Optional[dict] = None
    last_synced: Optional[datetime] = Field(default=None, alias="lastSynced")
