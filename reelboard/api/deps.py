"""
FastAPI Dependency Injection

Builds stores, platform clients and services from the environment. Tests
replace any of these through ``app.dependency_overrides``.
"""

from fastapi import Depends

from reelboard.db import AccountStore, ContentStore
from reelboard.instagram_client import InstagramClient
from reelboard.services import (
    AnalyticsService,
    CaptionGenerator,
    ContentService,
    ImportService,
    InsightGenerator,
    MetricSyncService,
    ReminderService,
)
from reelboard.tiktok_client import TikTokClient


def get_content_store() -> ContentStore:
    """Content store rooted at DATA_DIR."""
    return ContentStore()


def get_account_store() -> AccountStore:
    return AccountStore()


def get_tiktok_client() -> TikTokClient:
    return TikTokClient()


def get_instagram_client() -> InstagramClient:
    return InstagramClient()


def get_caption_generator() -> CaptionGenerator:
    return CaptionGenerator()


def get_content_service(store: ContentStore = Depends(get_content_store)) -> ContentService:
    return ContentService(store)


def get_import_service(store: ContentStore = Depends(get_content_store)) -> ImportService:
    return ImportService(store)


def get_sync_service(
    content_store: ContentStore = Depends(get_content_store),
    account_store: AccountStore = Depends(get_account_store),
    tiktok_client: TikTokClient = Depends(get_tiktok_client),
    instagram_client: InstagramClient = Depends(get_instagram_client),
) -> MetricSyncService:
    return MetricSyncService(content_store, account_store, tiktok_client, instagram_client)


def get_analytics_service(store: ContentStore = Depends(get_content_store)) -> AnalyticsService:
    return AnalyticsService(store, InsightGenerator())


def get_reminder_service(store: ContentStore = Depends(get_content_store)) -> ReminderService:
    return ReminderService(store)
