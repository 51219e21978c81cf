"""Module for YouTrack issue comment operations."""

import logging
from typing import Any

from .client import YouTrackClient
from .utils import compact, fields_params, pagination_params, path_segment

logger = logging.getLogger("mcp-youtrack")


class CommentsMixin(YouTrackClient):
    """Mixin for YouTrack comment operations."""

    def get_issue_comments(
        self,
        issue_id: str,
        skip: int | None = None,
        top: int | None = None,
        fields: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        Get the comments of an issue.

        Args:
            issue_id: Readable id or database id of the issue
            skip: Number of comments to skip
            top: Maximum number of comments to return
            fields: Optional fields projection

        Returns:
            List of comments
        """
        return (
            self.request(
                "GET",
                f"/issues/{path_segment(issue_id)}/comments",
                query=pagination_params(skip, top, fields),
            ).data
            or []
        )

    def add_comment(
        self,
        issue_id: str,
        text: str,
        uses_markdown: bool | None = None,
        fields: str | None = None,
    ) -> dict[str, Any]:
        """
        Add a comment to an issue.

        Args:
            issue_id: Readable id or database id of the issue
            text: Comment text
            uses_markdown: Whether the text is Markdown
            fields: Optional fields projection for the returned comment

        Returns:
            The created comment
        """
        body = compact(text=text, usesMarkdown=uses_markdown)
        return self.request(
            "POST",
            f"/issues/{path_segment(issue_id)}/comments",
            body=body,
            query=fields_params(fields),
        ).data

    def update_comment(
        self,
        issue_id: str,
        comment_id: str,
        text: str,
        uses_markdown: bool | None = None,
        fields: str | None = None,
    ) -> dict[str, Any]:
        """
        Replace the text of an existing comment.

        Args:
            issue_id: Readable id or database id of the issue
            comment_id: Comment id
            text: New comment text
            uses_markdown: Whether the text is Markdown
            fields: Optional fields projection for the returned comment

        Returns:
            The updated comment
        """
        body = compact(text=text, usesMarkdown=uses_markdown)
        return self.request(
            "POST",
            f"/issues/{path_segment(issue_id)}/comments/{path_segment(comment_id)}",
            body=body,
            query=fields_params(fields),
        ).data

    def delete_comment(self, issue_id: str, comment_id: str) -> None:
        """Delete a comment from an issue."""
        self.request(
            "DELETE",
            f"/issues/{path_segment(issue_id)}/comments/{path_segment(comment_id)}",
        )
