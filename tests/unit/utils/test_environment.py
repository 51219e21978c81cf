"""Tests for the environment utilities module."""

import os
from unittest.mock import patch

from youtrack_mcp.utils.environment import is_youtrack_configured


def test_not_configured_without_url():
    with patch.dict(os.environ, {"YOUTRACK_TOKEN": "t"}, clear=True):
        assert is_youtrack_configured() is False


def test_configured_with_token():
    with patch.dict(
        os.environ,
        {"YOUTRACK_BASE_URL": "https://x.youtrack.cloud", "YOUTRACK_TOKEN": "t"},
        clear=True,
    ):
        assert is_youtrack_configured() is True


def test_configured_with_basic_auth_and_url_alias():
    with patch.dict(
        os.environ,
        {
            "YOUTRACK_URL": "https://youtrack.example.com",
            "YOUTRACK_USERNAME": "u",
            "YOUTRACK_PASSWORD": "p",
        },
        clear=True,
    ):
        assert is_youtrack_configured() is True


def test_not_configured_with_partial_credentials():
    with patch.dict(
        os.environ,
        {"YOUTRACK_BASE_URL": "https://x.youtrack.cloud", "YOUTRACK_USERNAME": "u"},
        clear=True,
    ):
        assert is_youtrack_configured() is False
