"""
Metric Sync Service

Pulls fresh engagement numbers from TikTok and Instagram and writes them
onto matching content records.

Matching:
- TikTok: the video id in the record's tiktokUrl (".../video/<id>")
- Instagram: the record's instagramUrl equals the post permalink
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from reelboard.db import AccountStore, AccountsSnapshot, ContentRecord, ContentStore
from reelboard.instagram_client import InstagramClient
from reelboard.tiktok_client import TikTokClient, extract_video_id

logger = logging.getLogger(__name__)

# API field -> record field
TIKTOK_METRICS: Dict[str, str] = {
    "view_count": "views",
    "like_count": "likes",
    "comment_count": "comments",
    "share_count": "shares",
}
INSTAGRAM_METRICS: Dict[str, str] = {
    "like_count": "likes",
    "comments_count": "comments",
}


class PlatformSyncSummary(BaseModel):
    """How many items a platform returned and how many matched records."""

    items: int = 0
    matched: int = 0


class SyncResult(BaseModel):
    """Result of a metric sync across both platforms."""

    updated: int = 0
    tiktok: Optional[PlatformSyncSummary] = None
    instagram: Optional[PlatformSyncSummary] = None
    errors: List[str] = Field(default_factory=list)


class AccountsResponse(BaseModel):
    """Stored account stats plus which platforms have tokens configured."""

    model_config = ConfigDict(populate_by_name=True)

    tiktok: Optional[dict] = None
    instagram: Optional[dict] = None
    last_synced: Optional[datetime] = Field(default=None, alias="lastSynced")
    configured: Dict[str, bool] = Field(default_factory=dict)


def _apply_metrics(
    record: ContentRecord, payload: dict, metric_map: Dict[str, str], now: datetime
) -> ContentRecord:
    updates = {
        field: payload[api_field]
        for api_field, field in metric_map.items()
        if payload.get(api_field) is not None
    }
    updates["last_synced"] = now
    return record.model_copy(update=updates)


class MetricSyncService:
    """
    Syncs platform metrics into the content store.

    Each platform is independent: a failure on one is reported in
    ``errors`` and the other still syncs.
    """

    def __init__(
        self,
        content_store: ContentStore,
        account_store: AccountStore,
        tiktok_client: TikTokClient,
        instagram_client: InstagramClient,
        now: Optional[Callable[[], datetime]] = None,
    ):
        self.content_store = content_store
        self.account_store = account_store
        self.tiktok = tiktok_client
        self.instagram = instagram_client
        self.now = now or (lambda: datetime.now(timezone.utc))

    def get_accounts(self) -> AccountsResponse:
        snapshot = self.account_store.load()
        return AccountsResponse(
            tiktok=snapshot.tiktok,
            instagram=snapshot.instagram,
            last_synced=snapshot.last_synced,
            configured={
                "tiktok": self.tiktok.configured,
                "instagram": self.instagram.configured,
            },
        )

    def sync(self) -> SyncResult:
        """
        Fetch account stats and recent post metrics from both platforms.

        Content and account stats are each written once at the end.

        Raises:
            StorageError: if either file cannot be written
        """
        result = SyncResult()
        records = self.content_store.load()
        accounts = self.account_store.load()

        if self.tiktok.configured:
            self._sync_tiktok(records, accounts, result)
        else:
            result.errors.append("TikTok: Add TIKTOK_ACCESS_TOKEN to .env to enable sync")

        if self.instagram.configured:
            self._sync_instagram(records, accounts, result)
        else:
            result.errors.append("Instagram: Add INSTAGRAM_ACCESS_TOKEN to .env to enable sync")

        accounts.last_synced = self.now()
        self.content_store.save(records)
        self.account_store.save(accounts)

        logger.info(f"Metric sync complete: {result.updated} records updated, {len(result.errors)} errors")
        return result

    def _sync_tiktok(self, records: List[ContentRecord], accounts: AccountsSnapshot, result: SyncResult) -> None:
        user = self.tiktok.get_user_info()
        if user:
            accounts.tiktok = {**user, "syncedAt": self.now().isoformat()}

        videos = self.tiktok.list_videos()
        if videos is None:
            result.errors.append("TikTok: failed to fetch video list")
            return

        matched = 0
        for video in videos:
            video_id = str(video.get("id", ""))
            for position, record in enumerate(records):
                if video_id and extract_video_id(record.tiktok_url) == video_id:
                    records[position] = _apply_metrics(record, video, TIKTOK_METRICS, self.now())
                    matched += 1
                    result.updated += 1
                    break
        result.tiktok = PlatformSyncSummary(items=len(videos), matched=matched)

    def _sync_instagram(self, records: List[ContentRecord], accounts: AccountsSnapshot, result: SyncResult) -> None:
        account = self.instagram.get_account()
        if account:
            accounts.instagram = {**account, "syncedAt": self.now().isoformat()}

        posts = self.instagram.list_media()
        if posts is None:
            result.errors.append("Instagram: failed to fetch media list")
            return

        matched = 0
        for post in posts:
            permalink = post.get("permalink")
            for position, record in enumerate(records):
                if permalink and record.instagram_url == permalink:
                    records[position] = _apply_metrics(record, post, INSTAGRAM_METRICS, self.now())
                    matched += 1
                    result.updated += 1
                    break
        result.instagram = PlatformSyncSummary(items=len(posts), matched=matched)
