"""
Caption Generation Prompt

Writes a header, caption and hashtags for a video from a short summary,
in the creator's voice. Used with OpenAI JSON mode.
"""

CAPTION_SYSTEM_PROMPT = "You write short-form video captions. Respond only with valid JSON."

CAPTION_PROMPT = '''You are helping write TikTok captions in a specific voice. The voice is:
- Warm, personal, and genuine
- NOT hype-y, NOT "influencer-speak"
- Uses emojis sparingly (0-2 max)
- Normal capitalization

STRICT LENGTH RULES:
- Caption must be 30 words MAX total
- Each sentence must be 12 words MAX
- Keep it short and punchy

Example captions:
- "Before & after – bye bye to the best loft ever"
- "Night and day in the apartment ✨"
- "Week 1-1: Starting with learning design tools and gardening fundamentals"

Summary: {summary}

Please provide:
1. A short header (max 50 characters)
2. A caption (MAX 30 words total, each sentence MAX 12 words)
3. 5-8 relevant hashtags

Respond in JSON format only:
{{
  "header": "your header here",
  "caption": "your caption here",
  "hashtags": ["tag1", "tag2", "tag3", "tag4", "tag5"]
}}'''


def build_caption_prompt(summary: str) -> str:
    return CAPTION_PROMPT.format(summary=summary)
