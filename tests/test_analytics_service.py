"""Tests for analytics: engagement rates, totals and optional insights."""

from unittest.mock import MagicMock

import pytest
from openai import APIConnectionError

from reelboard.db.models import ContentRecord
from reelboard.services.analytics_service import (
    AnalyticsService,
    InsightGenerator,
    engagement_rate,
)


@pytest.fixture
def populated_store(content_store):
    content_store.save([
        ContentRecord(id="a", title="A", status="posted", views=1000, likes=80, comments=15, shares=5),
        ContentRecord(id="b", title="B", status="posted", views=0),
        ContentRecord(id="c", title="C", status="edited", views=999, likes=999),
    ])
    return content_store


def insight_generator(content="- Garden posts win"):
    client = MagicMock()
    client.chat.completions.create.return_value.choices = [MagicMock()]
    client.chat.completions.create.return_value.choices[0].message.content = content
    return InsightGenerator(client=client), client


class TestEngagementRate:
    def test_percentage(self):
        record = ContentRecord(id="1", views=1000, likes=80, comments=15, shares=5)

        assert engagement_rate(record) == 10.0

    def test_rounded(self):
        record = ContentRecord(id="1", views=3, likes=1)

        assert engagement_rate(record) == 33.33

    def test_zero_views(self):
        assert engagement_rate(ContentRecord(id="1", likes=5)) == 0.0


class TestAnalyticsService:
    """Tests for AnalyticsService.get_report()."""

    def test_only_posted_content(self, populated_store):
        report = AnalyticsService(populated_store).get_report()

        assert [s.id for s in report.stats] == ["a", "b"]
        assert report.totals.views == 1000
        assert report.totals.likes == 80
        assert report.avg_engagement == 5.0
        assert report.insights is None

    def test_camel_case_payload(self, populated_store):
        data = AnalyticsService(populated_store).get_report().model_dump(by_alias=True)

        assert "avgEngagement" in data
        assert data["stats"][0]["engagementRate"] == 10.0

    def test_empty_store(self, content_store):
        report = AnalyticsService(content_store).get_report()

        assert report.stats == []
        assert report.avg_engagement == 0.0

    def test_insights_for_posts_with_views(self, populated_store):
        generator, client = insight_generator()

        report = AnalyticsService(populated_store, generator).get_report()

        assert report.insights == "- Garden posts win"
        prompt = client.chat.completions.create.call_args.kwargs["messages"][-1]["content"]
        assert '"title": "A"' in prompt
        assert '"title": "B"' not in prompt

    def test_no_insights_without_views(self, content_store):
        content_store.save([ContentRecord(id="b", title="B", status="posted")])
        generator, client = insight_generator()

        report = AnalyticsService(content_store, generator).get_report()

        assert report.insights is None
        client.chat.completions.create.assert_not_called()

    def test_insight_failure_is_not_fatal(self, populated_store):
        generator, client = insight_generator()
        client.chat.completions.create.side_effect = APIConnectionError(request=MagicMock())

        report = AnalyticsService(populated_store, generator).get_report()

        assert report.insights is None
        assert report.totals.views == 1000

    def test_unconfigured_generator_skipped(self, populated_store, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)

        report = AnalyticsService(populated_store, InsightGenerator()).get_report()

        assert report.insights is None
