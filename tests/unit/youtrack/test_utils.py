"""Tests for the YouTrack request-building helpers."""

import pytest

from youtrack_mcp.youtrack.utils import (
    build_duration,
    build_issue_query,
    clean_params,
    compact,
    extract_error_message,
    pagination_params,
    to_ref,
    to_refs,
)


def test_clean_params_keeps_falsy_values():
    assert clean_params({"a": None, "b": 0, "c": False, "d": ""}) == {
        "b": 0,
        "c": False,
        "d": "",
    }
    assert clean_params(None) == {}


def test_compact():
    assert compact(text="x", usesMarkdown=None) == {"text": "x"}


def test_refs():
    assert to_ref("0-1") == {"id": "0-1"}
    assert to_ref(None) is None
    assert to_refs(["a"]) == [{"id": "a"}]
    assert to_refs(None) is None


def test_pagination_params():
    assert pagination_params(0, 50) == {"$skip": 0, "$top": 50}
    assert pagination_params(fields="id") == {"fields": "id"}


@pytest.mark.parametrize(
    "kwargs,expected",
    [
        ({}, None),
        ({"project": "P"}, "project: P"),
        ({"priority": "Major", "project": "P"}, "project: P and priority: Major"),
        ({"query": "#Unresolved", "state": "Open"}, "#Unresolved"),
        ({"query": "", "state": "Open"}, "state: Open"),
    ],
)
def test_build_issue_query(kwargs, expected):
    assert build_issue_query(**kwargs) == expected


def test_build_duration():
    assert build_duration(None) is None
    assert build_duration(45) == {"minutes": 45}
    assert build_duration("30") == {"minutes": 30}
    assert build_duration("2h") == {"presentation": "2h"}
    with pytest.raises(ValueError):
        build_duration(False)


def test_extract_error_message():
    assert (
        extract_error_message({"error": "Not Found", "error_description": "Gone"})
        == "Gone"
    )
    assert extract_error_message({"error": "Not Found"}) == "Not Found"
    assert extract_error_message({"localizedError": "Nicht gefunden"}) == (
        "Nicht gefunden"
    )
    assert extract_error_message(None, "fallback") == "fallback"
    assert extract_error_message("oops") == "Unknown YouTrack API error"
