"""URL-related utility functions for the YouTrack MCP server."""

from urllib.parse import urlparse


def normalize_base_url(url: str) -> str:
    """Normalize a YouTrack base URL.

    Trailing slashes are removed, and so is a trailing ``/api`` segment so
    that both ``https://host/youtrack`` and ``https://host/youtrack/api/``
    resolve to the same instance.

    Args:
        url: The URL as configured by the user

    Returns:
        The base URL without trailing slash or ``/api`` suffix
    """
    normalized = url.strip().rstrip("/")
    if normalized.endswith("/api"):
        normalized = normalized[: -len("/api")].rstrip("/")
    return normalized


def is_youtrack_cloud_url(url: str) -> bool:
    """Determine if a URL belongs to a JetBrains-hosted YouTrack instance.

    Args:
        url: The URL to check

    Returns:
        True for youtrack.cloud / myjetbrains.com hosts, False otherwise
    """
    if not url:
        return False

    hostname = urlparse(url).hostname or ""
    return hostname.endswith(".youtrack.cloud") or hostname.endswith(
        ".myjetbrains.com"
    )
