"""Tests for deadline reminders."""

from datetime import date

import pytest

from reelboard.db.models import ContentRecord
from reelboard.services.reminders import (
    ReminderService,
    build_reminders,
    classify_due_date,
)


TODAY = date(2026, 3, 1)


class TestClassifyDueDate:
    @pytest.mark.parametrize("due,expected", [
        (date(2026, 2, 28), "overdue"),
        (date(2026, 3, 1), "due-soon"),
        (date(2026, 3, 4), "due-soon"),
        (date(2026, 3, 5), "upcoming"),
        (date(2026, 3, 8), "upcoming"),
        (date(2026, 3, 9), None),
    ])
    def test_buckets(self, due, expected):
        assert classify_due_date(due, TODAY) == expected


class TestBuildReminders:
    """Tests for build_reminders()."""

    def test_most_urgent_first(self):
        records = [
            ContentRecord(id="up", title="Upcoming", status="filmed", due_date="2026-03-06"),
            ContentRecord(id="late", title="Late", status="idea", due_date="2026-02-20"),
            ContentRecord(id="soon", title="Soon", status="edited", due_date="2026-03-02"),
        ]

        report = build_reminders(records, TODAY)

        assert [r.id for r in report.reminders] == ["late", "soon", "up"]
        assert report.counts == {"overdue": 1, "due-soon": 1, "upcoming": 1}

    def test_skips_posted_undated_and_far_out(self):
        records = [
            ContentRecord(id="posted", status="posted", due_date="2026-02-01"),
            ContentRecord(id="undated", status="idea"),
            ContentRecord(id="far", status="idea", due_date="2026-05-01"),
        ]

        report = build_reminders(records, TODAY)

        assert report.reminders == []
        assert report.counts == {"overdue": 0, "due-soon": 0, "upcoming": 0}

    def test_skips_free_text_dates(self):
        records = [ContentRecord(id="x", status="idea", due_date="next Tuesday")]

        assert build_reminders(records, TODAY).reminders == []

    def test_camel_case_payload(self):
        records = [ContentRecord(id="late", title="Late", due_date="2026-02-20")]

        data = build_reminders(records, TODAY).model_dump(by_alias=True)

        assert data["reminders"][0]["dueDate"] == "2026-02-20"
        assert data["reminders"][0]["urgency"] == "overdue"


def test_reminder_service_uses_store(content_store):
    content_store.save([ContentRecord(id="late", title="Late", due_date="2026-02-20")])

    report = ReminderService(content_store, today=lambda: TODAY).get_reminders()

    assert [r.id for r in report.reminders] == ["late"]
