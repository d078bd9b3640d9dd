"""
Deadline reminders.

Buckets unposted content with a due date into overdue / due-soon / upcoming
relative to today. Records whose due date is not a canonical YYYY-MM-DD
(e.g. a free-text date kept from an import) are left out.
"""

import logging
from datetime import date, timedelta
from typing import Callable, Dict, Iterable, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from reelboard.db import ContentRecord, ContentStore

logger = logging.getLogger(__name__)

Urgency = Literal["overdue", "due-soon", "upcoming"]

URGENCY_ORDER: tuple = ("overdue", "due-soon", "upcoming")
DUE_SOON_DAYS = 3
UPCOMING_DAYS = 7


class Reminder(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    status: str
    due_date: str = Field(alias="dueDate")
    urgency: Urgency


class ReminderReport(BaseModel):
    """Reminder counts per bucket and the reminders, most urgent first."""

    counts: Dict[str, int] = Field(default_factory=dict)
    reminders: List[Reminder] = Field(default_factory=list)


def parse_due_date(value: str) -> Optional[date]:
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def classify_due_date(due: date, today: date) -> Optional[Urgency]:
    """
    Classify a due date.

    overdue:  before today
    due-soon: today .. today+3
    upcoming: today+4 .. today+7
    None:     further out
    """
    if due < today:
        return "overdue"
    if due <= today + timedelta(days=DUE_SOON_DAYS):
        return "due-soon"
    if due <= today + timedelta(days=UPCOMING_DAYS):
        return "upcoming"
    return None


def build_reminders(records: Iterable[ContentRecord], today: date) -> ReminderReport:
    """Bucket unposted, dated records. Within a bucket, collection order is kept."""
    buckets: Dict[str, List[Reminder]] = {urgency: [] for urgency in URGENCY_ORDER}

    for record in records:
        if record.status == "posted" or not record.due_date:
            continue
        due = parse_due_date(record.due_date)
        if due is None:
            logger.debug(f"Skipping reminder for {record.id}: non-date due date {record.due_date!r}")
            continue
        urgency = classify_due_date(due, today)
        if urgency is None:
            continue
        buckets[urgency].append(
            Reminder(
                id=record.id,
                title=record.title,
                status=record.status,
                due_date=record.due_date,
                urgency=urgency,
            )
        )

    return ReminderReport(
        counts={urgency: len(items) for urgency, items in buckets.items()},
        reminders=[r for urgency in URGENCY_ORDER for r in buckets[urgency]],
    )


class ReminderService:
    """Reminders over the content store."""

    def __init__(self, store: ContentStore, today: Callable[[], date] = date.today):
        self.store = store
        self.today = today

    def get_reminders(self) -> ReminderReport:
        return build_reminders(self.store.load(), self.today())
