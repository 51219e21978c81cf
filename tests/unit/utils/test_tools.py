"""Tests for tool utility functions."""

import os
from unittest.mock import patch

from youtrack_mcp.utils.tools import (
    get_enabled_tools,
    parse_tool_list,
    should_include_tool,
)


def test_get_enabled_tools_not_set():
    """Test get_enabled_tools when ENABLED_TOOLS is not set."""
    with patch.dict(os.environ, {}, clear=True):
        assert get_enabled_tools() is None


def test_get_enabled_tools_empty_string():
    """Test get_enabled_tools with empty string."""
    with patch.dict(os.environ, {"ENABLED_TOOLS": ""}, clear=True):
        assert get_enabled_tools() is None


def test_get_enabled_tools_whitespace_and_commas():
    """Test get_enabled_tools with string containing whitespace and commas."""
    with patch.dict(os.environ, {"ENABLED_TOOLS": " , , , "}, clear=True):
        assert get_enabled_tools() is None


def test_get_enabled_tools_multiple_tools():
    """Test get_enabled_tools with multiple tools and surrounding spaces."""
    with patch.dict(
        os.environ,
        {"ENABLED_TOOLS": "youtrack_get_issue, youtrack_search_issues ,"},
        clear=True,
    ):
        assert get_enabled_tools() == ["youtrack_get_issue", "youtrack_search_issues"]


def test_parse_tool_list():
    assert parse_tool_list(None) is None
    assert parse_tool_list("a,,b") == ["a", "b"]


def test_should_include_tool():
    """Test should_include_tool with and without a filter."""
    assert should_include_tool("youtrack_get_issue", None) is True
    assert should_include_tool("youtrack_get_issue", ["youtrack_get_issue"]) is True
    assert should_include_tool("youtrack_delete_issue", ["youtrack_get_issue"]) is False
