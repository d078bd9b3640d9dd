"""
Analytics API Endpoints
"""

from fastapi import APIRouter, Depends

from reelboard.api.deps import get_analytics_service, get_reminder_service
from reelboard.services import AnalyticsReport, AnalyticsService, ReminderReport, ReminderService


router = APIRouter(prefix="/api", tags=["analytics"])


@router.get("/analytics", response_model=AnalyticsReport)
def get_analytics(service: AnalyticsService = Depends(get_analytics_service)):
    """
    Engagement stats for posted content.

    Includes LLM-written insights when an API key is configured and some
    posted content has views.
    """
    return service.get_report()


@router.get("/reminders", response_model=ReminderReport)
def get_reminders(service: ReminderService = Depends(get_reminder_service)):
    """Unposted content that is overdue, due within 3 days, or due within a week."""
    return service.get_reminders()
