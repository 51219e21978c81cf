"""Test fixtures for YouTrack unit tests."""

import os
from unittest.mock import MagicMock, patch

import pytest

from tests.fixtures.youtrack_mocks import BASE_URL, make_response
from youtrack_mcp.youtrack import YouTrackFetcher
from youtrack_mcp.youtrack.config import YouTrackConfig


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict(
        os.environ,
        {
            "YOUTRACK_BASE_URL": BASE_URL,
            "YOUTRACK_TOKEN": "perm:test-token",
        },
        clear=True,
    ):
        yield


@pytest.fixture
def youtrack_config():
    """Create a token-authenticated YouTrackConfig."""
    return YouTrackConfig(
        url=BASE_URL,
        auth_type="token",
        token="perm:test-token",
    )


@pytest.fixture
def fetcher(youtrack_config):
    """A YouTrackFetcher whose HTTP session is replaced by a mock."""
    youtrack_fetcher = YouTrackFetcher(config=youtrack_config)
    youtrack_fetcher.session = MagicMock()
    youtrack_fetcher.session.request.return_value = make_response({})
    return youtrack_fetcher
