"""Utility functions specific to YouTrack operations."""

from typing import Any
from urllib.parse import quote

UNKNOWN_API_ERROR = "Unknown YouTrack API error"

# Order in which discrete issue filters are joined into a query
ISSUE_FILTER_FIELDS = ("project", "assignee", "state", "priority")


def clean_params(params: dict[str, Any] | None) -> dict[str, Any]:
    """Drop keys whose value is None so they are never sent.

    Explicit falsy values such as 0, False and "" are kept.
    """
    if not params:
        return {}
    return {key: value for key, value in params.items() if value is not None}


def compact(**values: Any) -> dict[str, Any]:
    """Build a request body from keyword arguments, omitting absent (None) ones."""
    return {key: value for key, value in values.items() if value is not None}


def path_segment(value: str | int) -> str:
    """Quote an identifier for safe interpolation into a URL path."""
    return quote(str(value), safe="")


def to_ref(value: str | None) -> dict[str, str] | None:
    """Wrap an entity id as a YouTrack reference object ({"id": value})."""
    if value is None:
        return None
    return {"id": value}


def to_refs(values: list[str] | None) -> list[dict[str, str]] | None:
    """Wrap a list of entity ids as YouTrack reference objects."""
    if values is None:
        return None
    return [{"id": value} for value in values]


def pagination_params(
    skip: int | None = None, top: int | None = None, fields: str | None = None
) -> dict[str, Any]:
    """Build the standard YouTrack pagination query ($skip, $top, fields).

    The REST API only honours the dollar-prefixed names; a bare ``skip`` or
    ``top`` query parameter is silently ignored by the server.
    """
    return clean_params({"$skip": skip, "$top": top, "fields": fields})


def fields_params(fields: str | None) -> dict[str, Any] | None:
    """Build a query carrying only ``fields``, or None when it is absent."""
    return {"fields": fields} if fields is not None else None


def build_issue_query(
    query: str | None = None,
    project: str | None = None,
    assignee: str | None = None,
    state: str | None = None,
    priority: str | None = None,
) -> str | None:
    """Compose the YouTrack search query for an issue listing.

    An explicit raw query wins and the discrete filters are ignored
    entirely. Otherwise each present filter becomes a ``field: value``
    clause and the clauses are joined with ``and``.

    Args:
        query: Raw YouTrack query
        project: Project short name or id
        assignee: Assignee login
        state: State name
        priority: Priority name

    Returns:
        The query to send, or None if nothing should be sent
    """
    if query:
        return query

    filters = {
        "project": project,
        "assignee": assignee,
        "state": state,
        "priority": priority,
    }
    clauses = [
        f"{name}: {filters[name]}" for name in ISSUE_FILTER_FIELDS if filters[name]
    ]
    if not clauses:
        return None
    return " and ".join(clauses)


def build_duration(duration: int | str | None) -> dict[str, Any] | None:
    """Convert a work item duration into a YouTrack DurationValue.

    Integers are minutes; strings are presentations such as ``"1h 30m"``.
    """
    if duration is None:
        return None
    if isinstance(duration, bool):
        raise ValueError("Duration must be a number of minutes or a duration string")
    if isinstance(duration, int | float):
        return {"minutes": int(duration)}
    text = str(duration).strip()
    if text.isdigit():
        return {"minutes": int(text)}
    return {"presentation": text}


def extract_error_message(error_body: Any, fallback: str | None = None) -> str:
    """Pick the most descriptive message from a YouTrack error body.

    YouTrack errors look like ``{"error": "Not Found",
    "error_description": "Issue not found"}``; the description wins.

    Args:
        error_body: Parsed JSON error body (may be None or not a dict)
        fallback: Message to use when the body carries none

    Returns:
        The error message
    """
    if isinstance(error_body, dict):
        for key in (
            "error_description",
            "error",
            "localizedErrorDescription",
            "localizedError",
        ):
            value = error_body.get(key)
            if value:
                return str(value)
    return fallback or UNKNOWN_API_ERROR
