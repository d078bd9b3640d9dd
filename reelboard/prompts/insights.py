"""
Performance Insights Prompt

Asks for 3-4 actionable bullets about posted content, grounded in the
actual numbers.
"""

import json
from typing import List

INSIGHTS_SYSTEM_PROMPT = "You are a social media strategist. Be direct and specific."

INSIGHTS_PROMPT = '''You're analyzing TikTok/Instagram content performance for a lifestyle and gardening creator. Here's their posted content data:

{stats_json}

Give 3-4 specific, actionable insights. Be direct and reference actual numbers. Cover:
- What's performing best and what's driving it
- What's underperforming and a likely reason
- One clear recommendation for their next post
- Any hashtag or content theme worth doubling down on

Format as short bullet points. No fluff.'''


def build_insights_prompt(stats: List[dict]) -> str:
    return INSIGHTS_PROMPT.format(stats_json=json.dumps(stats, indent=2))
