"""Environment flag helpers for the YouTrack MCP server."""

import os

TRUTHY_VALUES = ("true", "1", "yes", "y", "on")


def is_env_truthy(name: str, default: str = "false") -> bool:
    """Check whether an environment variable holds a truthy value."""
    return os.getenv(name, default).strip().lower() in TRUTHY_VALUES


def is_read_only_mode() -> bool:
    """Check if the server is running in read-only mode.

    Read-only mode hides and refuses every tool that changes YouTrack
    data (create, update, delete, commands) while keeping all reads.

    Returns:
        True if READ_ONLY_MODE is enabled, False otherwise
    """
    return is_env_truthy("READ_ONLY_MODE")
