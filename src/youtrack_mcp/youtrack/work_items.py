"""Module for YouTrack time tracking work item operations."""

import logging
from typing import Any

from .client import YouTrackClient
from .utils import build_duration, compact, pagination_params, path_segment, to_ref

logger = logging.getLogger("mcp-youtrack")


class WorkItemsMixin(YouTrackClient):
    """Mixin for YouTrack work item (time tracking) operations."""

    def _work_items_path(self, issue_id: str) -> str:
        return f"/issues/{path_segment(issue_id)}/timeTracking/workItems"

    def get_work_items(
        self,
        issue_id: str,
        skip: int | None = None,
        top: int | None = None,
        fields: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        Get the work items logged against an issue.

        Args:
            issue_id: Readable id or database id of the issue
            skip: Number of work items to skip
            top: Maximum number of work items to return
            fields: Optional fields projection

        Returns:
            List of work items
        """
        return (
            self.request(
                "GET",
                self._work_items_path(issue_id),
                query=pagination_params(skip, top, fields),
            ).data
            or []
        )

    def add_work_item(
        self,
        issue_id: str,
        duration: int | str,
        description: str | None = None,
        date: int | None = None,
        work_type: str | None = None,
    ) -> dict[str, Any]:
        """
        Log time against an issue.

        Args:
            issue_id: Readable id or database id of the issue
            duration: Minutes as an int, or a presentation such as '1h 30m'
            description: Optional work description
            date: Optional work date as a Unix timestamp in milliseconds
            work_type: Optional work item type id

        Returns:
            The created work item

        Raises:
            ValueError: If the duration has an unsupported type
        """
        body = compact(
            duration=build_duration(duration),
            text=description,
            date=date,
            type=to_ref(work_type),
        )
        return self.request("POST", self._work_items_path(issue_id), body=body).data

    def update_work_item(
        self,
        issue_id: str,
        work_item_id: str,
        duration: int | str | None = None,
        description: str | None = None,
        date: int | None = None,
        work_type: str | None = None,
    ) -> dict[str, Any]:
        """
        Update a work item. Only the arguments that are not None are sent.

        Args:
            issue_id: Readable id or database id of the issue
            work_item_id: Work item id
            duration: New duration
            description: New work description
            date: New work date as a Unix timestamp in milliseconds
            work_type: New work item type id

        Returns:
            The updated work item
        """
        body = compact(
            duration=build_duration(duration),
            text=description,
            date=date,
            type=to_ref(work_type),
        )
        return self.request(
            "POST",
            f"{self._work_items_path(issue_id)}/{path_segment(work_item_id)}",
            body=body,
        ).data

    def delete_work_item(self, issue_id: str, work_item_id: str) -> None:
        """Delete a work item."""
        self.request(
            "DELETE",
            f"{self._work_items_path(issue_id)}/{path_segment(work_item_id)}",
        )
