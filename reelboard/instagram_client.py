"""
Instagram Graph API client for account stats and per-post metrics.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

import requests

# Load .env file if present
from dotenv import load_dotenv
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

logger = logging.getLogger(__name__)

BASE_URL = "https://graph.instagram.com"

ACCOUNT_FIELDS = "id,username,followers_count,follows_count,media_count"
MEDIA_FIELDS = "id,caption,like_count,comments_count,timestamp,permalink"


class InstagramClient:
    """Client for the Instagram Graph API."""

    def __init__(self, access_token: Optional[str] = None, timeout: float = 30):
        self.access_token = access_token or os.getenv("INSTAGRAM_ACCESS_TOKEN")
        self.timeout = timeout

    @property
    def configured(self) -> bool:
        return bool(self.access_token)

    def _get(self, endpoint: str, params: dict) -> Optional[dict]:
        """Make a GET request. Returns None on any HTTP/network error."""
        try:
            response = requests.get(
                f"{BASE_URL}{endpoint}",
                params={**params, "access_token": self.access_token or ""},
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            # The token travels in the query string; keep it out of the log
            logger.error(f"Instagram API error on {endpoint}: {type(e).__name__}")
            return None

    def get_account(self) -> Optional[dict]:
        """Get follower/media counts for the authorized account."""
        return self._get("/me", {"fields": ACCOUNT_FIELDS})

    def list_media(self, limit: int = 20) -> Optional[List[dict]]:
        """
        List recent posts with like/comment counts and permalinks.

        Returns:
            Media dicts, or None if the request failed.
        """
        result = self._get("/me/media", {"fields": MEDIA_FIELDS, "limit": limit})
        if result is None:
            return None
        posts = result.get("data") or []
        logger.info(f"Fetched {len(posts)} Instagram posts")
        return posts
