"""
Pytest configuration for Reelboard tests.

Test Tier System:
- fast (default): Pure unit tests, all I/O mocked
- medium: API TestClient, filesystem stores
- slow: Live TikTok / Instagram / OpenAI calls

Run tiers:
- pytest                          # Fast + medium (default, addopts -m "not slow")
- pytest -m fast                  # Fast only
- pytest -m slow                  # Slow only
- pytest --override-ini="addopts=" -v   # Full suite (all tiers)

Note: Unmarked tests are auto-assigned to 'fast' tier. To add a new test:
- No marker needed for fast (unit) tests
- Add @pytest.mark.medium for API TestClient tests
- Add @pytest.mark.slow for live external API tests
- Tests marked @pytest.mark.integration (without tier) default to 'medium'

API Key Safety:
- Fast/medium tests force-set fake OPENAI / TikTok / Instagram credentials so a
  missed mock can never reach a real account
"""

import os
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

FAKE_CREDENTIALS = {
    "OPENAI_API_KEY": "sk-test-fake-key-for-testing",
    "TIKTOK_ACCESS_TOKEN": "tiktok-test-fake-token",
    "INSTAGRAM_ACCESS_TOKEN": "instagram-test-fake-token",
}


# =============================================================================
# Tier Auto-Assignment
# =============================================================================

def pytest_collection_modifyitems(config, items):
    """
    Automatically assign tier markers to unmarked tests.

    Tests are fast by default unless explicitly marked as medium or slow.
    Tests marked @pytest.mark.integration (but no tier) are assigned to
    'medium'.
    """
    for item in items:
        has_tier = (
            list(item.iter_markers(name='fast')) or
            list(item.iter_markers(name='medium')) or
            list(item.iter_markers(name='slow'))
        )
        if has_tier:
            continue

        if list(item.iter_markers(name='skip')):
            continue

        if list(item.iter_markers(name='integration')):
            item.add_marker(pytest.mark.medium)
            continue

        item.add_marker(pytest.mark.fast)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Force fake credentials unless slow tests are being run."""
    markexpr = getattr(config.option, 'markexpr', '') or ''

    includes_slow_tests = (
        not markexpr or
        (
            'slow' in markexpr and
            'not slow' not in markexpr
        )
    )

    for key, value in FAKE_CREDENTIALS.items():
        if includes_slow_tests:
            os.environ.setdefault(key, value)
        else:
            os.environ[key] = value

    os.environ.pop("DEMO_MODE", None)


# =============================================================================
# Shared Fixtures
# =============================================================================

FIXED_NOW = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def project_root():
    """Return project root path (session-scoped for efficiency)."""
    return PROJECT_ROOT


@pytest.fixture
def fixed_now():
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def sequential_ids():
    """Id factory producing id-1, id-2, ..."""
    counter = {"n": 0}

    def next_id():
        counter["n"] += 1
        return f"id-{counter['n']}"

    return next_id


@pytest.fixture
def content_store(tmp_path):
    """A ContentStore backed by a temp directory."""
    from reelboard.db import ContentStore
    return ContentStore(tmp_path)


@pytest.fixture
def account_store(tmp_path):
    from reelboard.db import AccountStore
    return AccountStore(tmp_path)
