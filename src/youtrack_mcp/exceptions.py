"""Exception types raised by the YouTrack MCP server."""


class YouTrackMCPError(Exception):
    """Base class for all errors raised by this package."""


class YouTrackApiError(YouTrackMCPError):
    """Raised when a call to the YouTrack REST API fails.

    Covers network failures, timeouts, non-2xx responses and bodies that
    cannot be parsed. The message is taken from the server's structured
    error body when one is available.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class YouTrackAuthenticationError(YouTrackApiError):
    """Raised when YouTrack rejects the configured credentials (401/403)."""


class DispatchError(YouTrackMCPError):
    """Raised when a tool invocation cannot be routed to a handler."""


class UnknownToolError(DispatchError):
    """Raised when a tool name is not present in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name
