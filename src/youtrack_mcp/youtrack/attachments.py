"""Module for YouTrack issue attachment operations."""

import logging
from typing import Any

from .client import YouTrackClient
from .utils import pagination_params, path_segment

logger = logging.getLogger("mcp-youtrack")


class AttachmentsMixin(YouTrackClient):
    """Mixin for YouTrack attachment operations."""

    def get_issue_attachments(
        self,
        issue_id: str,
        skip: int | None = None,
        top: int | None = None,
        fields: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        Get the attachments of an issue.

        Args:
            issue_id: Readable id or database id of the issue
            skip: Number of attachments to skip
            top: Maximum number of attachments to return
            fields: Optional fields projection

        Returns:
            List of attachment metadata
        """
        return (
            self.request(
                "GET",
                f"/issues/{path_segment(issue_id)}/attachments",
                query=pagination_params(skip, top, fields),
            ).data
            or []
        )

    def add_attachment(
        self, issue_id: str, filename: str, content: bytes
    ) -> list[dict[str, Any]]:
        """
        Upload a file to an issue.

        Args:
            issue_id: Readable id or database id of the issue
            filename: Name the attachment is stored under
            content: Raw file bytes

        Returns:
            The created attachment(s) as returned by YouTrack
        """
        if not filename:
            raise ValueError("Attachment filename must not be empty")
        logger.info(
            f"Uploading attachment {filename} ({len(content)} bytes) to {issue_id}"
        )
        return self.upload(
            f"/issues/{path_segment(issue_id)}/attachments", filename, content
        ).data
