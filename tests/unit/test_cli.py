"""Tests for the youtrack-mcp command line entry point."""

import logging
import os
from unittest.mock import AsyncMock, patch

from click.testing import CliRunner

from youtrack_mcp import __version__, _logging_level, main
from youtrack_mcp.servers import main_mcp


def test_version():
    result = CliRunner().invoke(main, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_missing_configuration_exits():
    with patch.dict(os.environ, {}, clear=True):
        with patch("youtrack_mcp.load_dotenv"):
            result = CliRunner().invoke(main, [])

    assert result.exit_code == 1
    assert "YouTrack URL and credentials are required" in result.output


def test_options_override_environment():
    """Test that CLI options are exported for the server lifespan."""
    with patch.dict(
        os.environ,
        {"YOUTRACK_BASE_URL": "https://old.youtrack.cloud"},
        clear=True,
    ):
        with (
            patch("youtrack_mcp.load_dotenv"),
            patch.object(main_mcp, "run_async", new=AsyncMock()) as mock_run,
        ):
            result = CliRunner().invoke(
                main,
                [
                    "--base-url",
                    "https://new.youtrack.cloud",
                    "--token",
                    "perm:abc",
                    "--read-only",
                    "--enabled-tools",
                    "youtrack_get_issue",
                ],
            )

            assert result.exit_code == 0, result.output
            assert os.environ["YOUTRACK_BASE_URL"] == "https://new.youtrack.cloud"
            assert os.environ["YOUTRACK_TOKEN"] == "perm:abc"
            assert os.environ["READ_ONLY_MODE"] == "true"
            assert os.environ["ENABLED_TOOLS"] == "youtrack_get_issue"
            mock_run.assert_called_once_with(transport="stdio")


def test_http_transport_arguments():
    with patch.dict(
        os.environ,
        {"YOUTRACK_BASE_URL": "https://x.youtrack.cloud", "YOUTRACK_TOKEN": "t"},
        clear=True,
    ):
        with (
            patch("youtrack_mcp.load_dotenv"),
            patch.object(main_mcp, "run_async", new=AsyncMock()) as mock_run,
        ):
            result = CliRunner().invoke(
                main,
                ["--transport", "streamable-http", "--port", "9000", "--path", "/mcp"],
            )

    assert result.exit_code == 0, result.output
    mock_run.assert_called_once_with(
        transport="streamable-http",
        host="0.0.0.0",
        port=9000,
        log_level="warning",
        path="/mcp",
    )


def test_logging_level_from_environment():
    """Test that MCP_VERBOSE maps to INFO and MCP_VERY_VERBOSE to DEBUG."""
    with patch.dict(os.environ, {"MCP_VERBOSE": "true"}, clear=True):
        assert _logging_level(0, False) == logging.INFO
    with patch.dict(os.environ, {"MCP_VERY_VERBOSE": "true"}, clear=True):
        assert _logging_level(0, False) == logging.DEBUG
    with patch.dict(os.environ, {}, clear=True):
        assert _logging_level(0, False) == logging.WARNING
        assert _logging_level(1, False) == logging.INFO
        assert _logging_level(0, True) == logging.DEBUG
