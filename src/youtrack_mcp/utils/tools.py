"""Tool filtering helpers for the YouTrack MCP server."""

import logging
import os

logger = logging.getLogger("mcp-youtrack.utils.tools")


def parse_tool_list(value: str | None) -> list[str] | None:
    """Split a comma-separated tool list, dropping blanks.

    Examples:
        "tool1, tool2 , tool3" -> ["tool1", "tool2", "tool3"]
        " , " -> None
    """
    if not value:
        return None
    tools = [tool.strip() for tool in value.split(",") if tool.strip()]
    return tools or None


def get_enabled_tools() -> list[str] | None:
    """Get the list of enabled tools from the ENABLED_TOOLS variable.

    Returns:
        List of enabled tool names, or None when every tool is enabled
    """
    tools = parse_tool_list(os.getenv("ENABLED_TOOLS"))
    if tools is None:
        logger.debug("ENABLED_TOOLS environment variable not set or empty.")
    else:
        logger.debug(f"Parsed enabled tools from environment: {tools}")
    return tools


def should_include_tool(tool_name: str, enabled_tools: list[str] | None) -> bool:
    """Check if a tool should be included based on the enabled tools list.

    Args:
        tool_name: The name of the tool to check.
        enabled_tools: List of enabled tool names, or None to include all tools.

    Returns:
        True if the tool should be included, False otherwise.
    """
    if enabled_tools is None:
        return True
    return tool_name in enabled_tools
