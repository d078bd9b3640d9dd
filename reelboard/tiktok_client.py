"""
TikTok API client for account stats and per-video metrics.

Uses the TikTok Display API v2 with a user access token.
"""

import logging
import os
import re
from pathlib import Path
from typing import List, Optional

import requests

# Load .env file if present
from dotenv import load_dotenv
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

logger = logging.getLogger(__name__)

BASE_URL = "https://open.tiktokapis.com/v2"

USER_FIELDS = "open_id,display_name,follower_count,following_count,likes_count,video_count"
VIDEO_FIELDS = "id,like_count,comment_count,share_count,view_count,share_url"

_VIDEO_ID = re.compile(r"/video/(\d+)")


def extract_video_id(url: Optional[str]) -> Optional[str]:
    """
    Pull the numeric video id out of a TikTok URL.

    Example:
        "https://www.tiktok.com/@me/video/7340000000000000000" -> "7340000000000000000"
    """
    if not url:
        return None
    match = _VIDEO_ID.search(url)
    return match.group(1) if match else None


class TikTokClient:
    """Client for the TikTok Display API."""

    def __init__(self, access_token: Optional[str] = None, timeout: float = 30):
        self.access_token = access_token or os.getenv("TIKTOK_ACCESS_TOKEN")
        self.timeout = timeout

    @property
    def configured(self) -> bool:
        return bool(self.access_token)

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.access_token or ''}",
            "Content-Type": "application/json",
        }

    def _request(self, method: str, endpoint: str, **kwargs) -> Optional[dict]:
        """Make a request to the TikTok API. Returns None on any HTTP/network error."""
        try:
            response = requests.request(
                method,
                f"{BASE_URL}{endpoint}",
                headers=self._headers(),
                timeout=self.timeout,
                **kwargs,
            )
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            logger.error(f"TikTok API error: {e}")
            return None

    def get_user_info(self) -> Optional[dict]:
        """Get follower/like/video counts for the authorized account."""
        result = self._request("GET", "/user/info/", params={"fields": USER_FIELDS})
        if not result:
            return None
        return (result.get("data") or {}).get("user")

    def list_videos(self, max_count: int = 20) -> Optional[List[dict]]:
        """
        List the account's most recent videos with metrics.

        Returns:
            Video dicts (id, view_count, like_count, ...), or None if the
            request failed.
        """
        result = self._request(
            "POST",
            "/video/list/",
            params={"fields": VIDEO_FIELDS},
            json={"max_count": max_count},
        )
        if result is None:
            return None
        videos = (result.get("data") or {}).get("videos") or []
        logger.info(f"Fetched {len(videos)} TikTok videos")
        return videos
