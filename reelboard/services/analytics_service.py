"""
Analytics Service

Engagement stats over posted content, with optional LLM-written insights.
"""

import logging
import os
from typing import List, Optional

from openai import OpenAI, OpenAIError
from pydantic import BaseModel, ConfigDict, Field

from reelboard.db import ContentRecord, ContentStore
from reelboard.prompts.insights import INSIGHTS_SYSTEM_PROMPT, build_insights_prompt

logger = logging.getLogger(__name__)

DEFAULT_INSIGHTS_MODEL = "gpt-4o-mini"


class PostStats(BaseModel):
    """Engagement numbers for one posted record."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    views: int = 0
    likes: int = 0
    comments: int = 0
    shares: int = 0
    engagement_rate: float = Field(default=0.0, alias="engagementRate")
    hashtags: str = ""
    due_date: str = Field(default="", alias="dueDate")


class MetricTotals(BaseModel):
    views: int = 0
    likes: int = 0
    comments: int = 0
    shares: int = 0


class AnalyticsReport(BaseModel):
    """Dashboard analytics payload."""

    model_config = ConfigDict(populate_by_name=True)

    stats: List[PostStats] = Field(default_factory=list)
    totals: MetricTotals = Field(default_factory=MetricTotals)
    avg_engagement: float = Field(default=0.0, alias="avgEngagement")
    insights: Optional[str] = None


def engagement_rate(record: ContentRecord) -> float:
    """(likes + comments + shares) / views, as a percentage to 2 places; 0 without views."""
    if record.views <= 0:
        return 0.0
    interactions = record.likes + record.comments + record.shares
    return round(interactions / record.views * 100, 2)


class InsightGenerator:
    """Asks the LLM for short, number-grounded performance insights."""

    def __init__(
        self,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
        client: Optional[OpenAI] = None,
        timeout: float = 30.0,
    ):
        self.model = model or os.getenv("REELBOARD_CAPTION_MODEL", DEFAULT_INSIGHTS_MODEL)
        self.api_key = api_key or os.getenv("OPENAI_API_KEY")
        self.timeout = timeout
        self._client = client

    @property
    def configured(self) -> bool:
        return bool(self.api_key) or self._client is not None

    @property
    def client(self) -> OpenAI:
        """Lazy-initialize OpenAI client."""
        if self._client is None:
            self._client = OpenAI(api_key=self.api_key)
        return self._client

    def generate(self, stats: List[PostStats]) -> Optional[str]:
        """Return insight bullets, or None if the call fails."""
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                timeout=self.timeout,
                max_tokens=600,
                messages=[
                    {"role": "system", "content": INSIGHTS_SYSTEM_PROMPT},
                    {
                        "role": "user",
                        "content": build_insights_prompt(
                            [s.model_dump(by_alias=True) for s in stats]
                        ),
                    },
                ],
            )
        except OpenAIError as e:
            logger.error(f"Analytics AI error: {e}")
            return None
        content = response.choices[0].message.content
        return content.strip() if content else None


class AnalyticsService:
    """Computes analytics over the content store."""

    def __init__(self, store: ContentStore, insight_generator: Optional[InsightGenerator] = None):
        self.store = store
        self.insight_generator = insight_generator

    def get_report(self) -> AnalyticsReport:
        """
        Build per-post stats, totals and average engagement for posted content.

        Insights are requested only when some posted record has views and an
        LLM is configured.
        """
        posted = [r for r in self.store.load() if r.status == "posted"]
        stats = [
            PostStats(
                id=r.id,
                title=r.title,
                views=r.views,
                likes=r.likes,
                comments=r.comments,
                shares=r.shares,
                engagement_rate=engagement_rate(r),
                hashtags=r.hashtags,
                due_date=r.due_date,
            )
            for r in posted
        ]

        totals = MetricTotals(
            views=sum(s.views for s in stats),
            likes=sum(s.likes for s in stats),
            comments=sum(s.comments for s in stats),
            shares=sum(s.shares for s in stats),
        )
        avg = round(sum(s.engagement_rate for s in stats) / len(stats), 2) if stats else 0.0

        insights = None
        with_views = [s for s in stats if s.views > 0]
        if with_views and self.insight_generator and self.insight_generator.configured:
            insights = self.insight_generator.generate(with_views)

        return AnalyticsReport(stats=stats, totals=totals, avg_engagement=avg, insights=insights)
