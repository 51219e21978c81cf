"""Module for YouTrack command (workflow) operations."""

import logging
from typing import Any

from .client import YouTrackClient
from .utils import compact, path_segment

logger = logging.getLogger("mcp-youtrack")


class CommandsMixin(YouTrackClient):
    """Mixin for applying YouTrack commands to issues."""

    def apply_command(
        self, issue_id: str, command: str, comment: str | None = None
    ) -> Any:
        """
        Apply a command such as 'State In Progress' to an issue.

        Args:
            issue_id: Readable id or database id of the issue
            command: Command text in YouTrack command syntax
            comment: Optional comment added together with the command

        Returns:
            The server response, often empty
        """
        body = compact(query=command, comment=comment)
        logger.info(f"Applying command {command!r} to issue {issue_id}")
        return self.request(
            "POST", f"/issues/{path_segment(issue_id)}/execute", body=body
        ).data

    def get_available_commands(self, issue_id: str) -> list[Any]:
        """Get the commands that can be applied to an issue."""
        return (
            self.request("GET", f"/issues/{path_segment(issue_id)}/execute").data
            or []
        )
