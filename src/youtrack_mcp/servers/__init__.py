"""Server implementations for YouTrack MCP."""

from .context import MainAppContext
from .main import YouTrackMCP, main_mcp
from .registry import TOOL_DEFINITIONS, describe_tools, dispatch

__all__ = [
    "main_mcp",
    "YouTrackMCP",
    "MainAppContext",
    "TOOL_DEFINITIONS",
    "describe_tools",
    "dispatch",
]
