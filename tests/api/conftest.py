"""
Shared fixtures for API router tests.

Stores are real and rooted in tmp_path; platform clients and the OpenAI
client are mocks.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from reelboard.api import deps
from reelboard.api.main import app
from reelboard.services import AnalyticsService, CaptionGenerator


@pytest.fixture
def mock_tiktok():
    client = MagicMock()
    client.configured = True
    client.get_user_info.return_value = {"display_name": "me", "follower_count": 10}
    client.list_videos.return_value = []
    return client


@pytest.fixture
def mock_instagram():
    client = MagicMock()
    client.configured = False
    return client


@pytest.fixture
def mock_openai():
    return MagicMock()


@pytest.fixture
def client(content_store, account_store, mock_tiktok, mock_instagram, mock_openai):
    """TestClient with every external dependency overridden."""
    app.dependency_overrides[deps.get_content_store] = lambda: content_store
    app.dependency_overrides[deps.get_account_store] = lambda: account_store
    app.dependency_overrides[deps.get_tiktok_client] = lambda: mock_tiktok
    app.dependency_overrides[deps.get_instagram_client] = lambda: mock_instagram
    app.dependency_overrides[deps.get_caption_generator] = lambda: CaptionGenerator(client=mock_openai)
    app.dependency_overrides[deps.get_analytics_service] = lambda: AnalyticsService(content_store)

    yield TestClient(app)

    app.dependency_overrides.clear()
