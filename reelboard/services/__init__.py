"""
Reelboard Services

Service layer shared by the API and the CLI.
"""

from .analytics_service import AnalyticsReport, AnalyticsService, InsightGenerator
from .caption_generator import CaptionGenerationError, CaptionGenerator, GeneratedCaption
from .content_service import ContentService
from .import_service import ImportPreview, ImportService
from .reminders import ReminderReport, ReminderService, build_reminders
from .sync_service import AccountsResponse, MetricSyncService, SyncResult

__all__ = [
    "AccountsResponse",
    "AnalyticsReport",
    "AnalyticsService",
    "CaptionGenerationError",
    "CaptionGenerator",
    "ContentService",
    "GeneratedCaption",
    "ImportPreview",
    "ImportService",
    "InsightGenerator",
    "MetricSyncService",
    "ReminderReport",
    "ReminderService",
    "SyncResult",
    "build_reminders",
]
