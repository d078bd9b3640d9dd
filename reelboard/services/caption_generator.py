"""
Caption Generator

Generates a header, caption and hashtags for a video from a short summary
using the OpenAI chat completions API in JSON mode.
"""

import json
import logging
import os
import time
from dataclasses import dataclass, field
from typing import List, Optional

from openai import (
    OpenAI,
    APIConnectionError,
    APITimeoutError,
    InternalServerError,
    OpenAIError,
    RateLimitError,
)

from reelboard.prompts.captions import CAPTION_SYSTEM_PROMPT, build_caption_prompt
from reelboard.utils.hashtags import format_hashtags

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TIMEOUT = 30.0

TRANSIENT_ERRORS = (RateLimitError, APITimeoutError, InternalServerError, APIConnectionError)


class CaptionGenerationError(Exception):
    """Raised when a caption could not be generated."""


@dataclass
class GeneratedCaption:
    """LLM output for one summary."""

    header: str
    caption: str
    hashtags: List[str] = field(default_factory=list)

    @property
    def hashtag_string(self) -> str:
        """Hashtags in the form stored on content records."""
        return format_hashtags(self.hashtags)


def extract_json_block(text: str) -> str:
    """Strip a markdown code fence if the model wrapped its JSON in one."""
    if "```json" in text:
        return text.split("```json")[1].split("```")[0].strip()
    if "```" in text:
        return text.split("```")[1].split("```")[0].strip()
    return text.strip()


class CaptionGenerator:
    """
    Writes captions in the creator's voice.

    Transient API failures (rate limit, timeout, 5xx, connection) are retried
    with exponential backoff. Anything else fails immediately.
    """

    def __init__(
        self,
        model: Optional[str] = None,
        temperature: float = 0.7,
        timeout: float = DEFAULT_TIMEOUT,
        api_key: Optional[str] = None,
        client: Optional[OpenAI] = None,
    ):
        self.model = model or os.getenv("REELBOARD_CAPTION_MODEL", DEFAULT_MODEL)
        self.temperature = temperature
        self.timeout = timeout
        self.api_key = api_key or os.getenv("OPENAI_API_KEY")
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

    def generate(self, summary: str, max_retries: int = 3) -> GeneratedCaption:
        """
        Generate caption content for a summary.

        Args:
            summary: What the video is about
            max_retries: Attempts for transient API errors

        Returns:
            GeneratedCaption

        Raises:
            ValueError: if the summary is empty
            CaptionGenerationError: if no API key is configured, the API keeps
                failing, or the response cannot be parsed
        """
        if not summary or not summary.strip():
            raise ValueError("Summary is required")
        if not self.configured:
            raise CaptionGenerationError("OPENAI_API_KEY not configured")

        summary = summary.strip()
        base_delay = 1.0

        for attempt in range(max_retries):
            try:
                return self._call_llm(summary)
            except TRANSIENT_ERRORS as e:
                if attempt == max_retries - 1:
                    logger.warning(f"Caption generation failed after {max_retries} attempts: {e}")
                    raise CaptionGenerationError(f"Failed to generate content: {e}") from e
                delay = base_delay * (2 ** attempt)
                logger.info(
                    f"Transient error on attempt {attempt + 1}, "
                    f"retrying in {delay}s: {type(e).__name__}"
                )
                time.sleep(delay)
            except OpenAIError as e:
                logger.warning(f"Caption generation failed: {e}")
                raise CaptionGenerationError(f"Failed to generate content: {e}") from e

        raise CaptionGenerationError("Failed to generate content")

    def _call_llm(self, summary: str) -> GeneratedCaption:
        response = self.client.chat.completions.create(
            model=self.model,
            temperature=self.temperature,
            timeout=self.timeout,
            max_tokens=1024,
            response_format={"type": "json_object"},
            messages=[
                {"role": "system", "content": CAPTION_SYSTEM_PROMPT},
                {"role": "user", "content": build_caption_prompt(summary)},
            ],
        )

        response_text = response.choices[0].message.content
        if response_text is None:
            raise CaptionGenerationError("OpenAI returned empty content")
        return self._parse_response(response_text)

    def _parse_response(self, response_text: str) -> GeneratedCaption:
        """
        Parse the model's JSON into a GeneratedCaption.

        Raises:
            CaptionGenerationError: on invalid JSON or missing fields
        """
        try:
            data = json.loads(extract_json_block(response_text))
        except json.JSONDecodeError as e:
            logger.warning(f"Failed to parse caption response as JSON: {e}")
            raise CaptionGenerationError("Failed to parse AI response") from e

        if not isinstance(data, dict):
            raise CaptionGenerationError("Failed to parse AI response")

        header = data.get("header")
        caption = data.get("caption")
        hashtags = data.get("hashtags")
        if not header or not caption or not isinstance(hashtags, list):
            logger.warning(f"Caption response missing fields: {sorted(data)}")
            raise CaptionGenerationError("Invalid response structure")

        return GeneratedCaption(
            header=str(header).strip(),
            caption=str(caption).strip(),
            hashtags=[str(tag).strip() for tag in hashtags if str(tag).strip()],
        )
