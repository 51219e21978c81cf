"""Module for YouTrack issue operations."""

import logging
from typing import Any

from .client import YouTrackClient
from .utils import (
    build_issue_query,
    compact,
    fields_params,
    pagination_params,
    path_segment,
    to_ref,
    to_refs,
)

logger = logging.getLogger("mcp-youtrack")


class IssuesMixin(YouTrackClient):
    """Mixin for YouTrack issue operations."""

    def list_issues(
        self,
        project: str | None = None,
        query: str | None = None,
        assignee: str | None = None,
        state: str | None = None,
        priority: str | None = None,
        skip: int | None = None,
        top: int | None = None,
        fields: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        List issues, filtered either by a raw query or by discrete filters.

        A raw ``query`` takes precedence; the discrete filters are then
        ignored. Without a raw query the filters are combined as
        ``project: X and assignee: Y ...``.

        Args:
            project: Project short name or id
            query: Raw YouTrack search query
            assignee: Assignee login
            state: State name
            priority: Priority name
            skip: Number of issues to skip
            top: Maximum number of issues to return
            fields: Optional fields projection

        Returns:
            List of issue resources
        """
        params = pagination_params(skip, top, fields)
        composed = build_issue_query(
            query=query,
            project=project,
            assignee=assignee,
            state=state,
            priority=priority,
        )
        if composed is not None:
            params["query"] = composed
        logger.debug(f"Listing issues with query: {composed!r}")
        return self.request("GET", "/issues", query=params).data or []

    def get_issue(self, issue_id: str, fields: str | None = None) -> dict[str, Any]:
        """
        Get a single issue.

        Args:
            issue_id: Readable id (e.g. 'DEMO-1') or database id
            fields: Optional fields projection

        Returns:
            The issue resource
        """
        return self.request(
            "GET", f"/issues/{path_segment(issue_id)}", query=fields_params(fields)
        ).data

    def create_issue(
        self,
        project: str,
        summary: str,
        description: str | None = None,
        assignee: str | None = None,
        priority: str | None = None,
        issue_type: str | None = None,
        tags: list[str] | None = None,
        fields: str | None = None,
    ) -> dict[str, Any]:
        """
        Create a new issue.

        Args:
            project: Project id
            summary: Issue summary
            description: Optional description
            assignee: Optional assignee id or login
            priority: Optional priority id
            issue_type: Optional issue type id
            tags: Optional list of tag ids
            fields: Optional fields projection for the returned issue

        Returns:
            The created issue
        """
        body = compact(
            project=to_ref(project),
            summary=summary,
            description=description,
            assignee=to_ref(assignee),
            priority=to_ref(priority),
            type=to_ref(issue_type),
            tags=to_refs(tags),
        )
        return self.request(
            "POST", "/issues", body=body, query=fields_params(fields)
        ).data

    def update_issue(
        self,
        issue_id: str,
        summary: str | None = None,
        description: str | None = None,
        assignee: str | None = None,
        priority: str | None = None,
        state: str | None = None,
        tags: list[str] | None = None,
        uses_markdown: bool | None = None,
        fields: str | None = None,
    ) -> dict[str, Any]:
        """
        Update an issue. Only arguments that are not None are sent, so an
        explicit ``uses_markdown=False`` or an empty description is kept.

        Args:
            issue_id: Readable id or database id
            summary: New summary
            description: New description
            assignee: New assignee id or login
            priority: New priority id
            state: New state id
            tags: Replacement list of tag ids
            uses_markdown: Whether the description is Markdown
            fields: Optional fields projection for the returned issue

        Returns:
            The updated issue
        """
        body = compact(
            summary=summary,
            description=description,
            assignee=to_ref(assignee),
            priority=to_ref(priority),
            state=to_ref(state),
            tags=to_refs(tags),
            usesMarkdown=uses_markdown,
        )
        return self.request(
            "POST",
            f"/issues/{path_segment(issue_id)}",
            body=body,
            query=fields_params(fields),
        ).data

    def delete_issue(self, issue_id: str) -> None:
        """Delete an issue."""
        self.request("DELETE", f"/issues/{path_segment(issue_id)}")

    def search_issues(
        self,
        query: str,
        skip: int | None = None,
        top: int | None = None,
        fields: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        Search issues with a YouTrack query.

        Args:
            query: YouTrack search query (e.g. 'project: DEMO #Unresolved')
            skip: Number of issues to skip
            top: Maximum number of issues to return
            fields: Optional fields projection

        Returns:
            List of matching issues
        """
        params = {"query": query, **pagination_params(skip, top, fields)}
        return self.request("GET", "/issues", query=params).data or []
