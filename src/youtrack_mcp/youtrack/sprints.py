"""Module for YouTrack sprint operations."""

import logging
from typing import Any

from .client import YouTrackClient
from .utils import compact, fields_params, pagination_params, path_segment

logger = logging.getLogger("mcp-youtrack")


class SprintsMixin(YouTrackClient):
    """Mixin for YouTrack sprint operations."""

    def list_sprints(
        self,
        board_id: str,
        skip: int | None = None,
        top: int | None = None,
        fields: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        Get the sprints of an agile board.

        Args:
            board_id: Agile board id
            skip: Number of sprints to skip
            top: Maximum number of sprints to return
            fields: Optional fields projection

        Returns:
            List of sprints
        """
        return (
            self.request(
                "GET",
                f"/agiles/{path_segment(board_id)}/sprints",
                query=pagination_params(skip, top, fields),
            ).data
            or []
        )

    def get_sprint(
        self, board_id: str, sprint_id: str, fields: str | None = None
    ) -> dict[str, Any]:
        """Get one sprint of an agile board."""
        return self.request(
            "GET",
            f"/agiles/{path_segment(board_id)}/sprints/{path_segment(sprint_id)}",
            query=fields_params(fields),
        ).data

    def create_sprint(
        self,
        board_id: str,
        name: str,
        goal: str | None = None,
        start: int | None = None,
        finish: int | None = None,
        fields: str | None = None,
    ) -> dict[str, Any]:
        """
        Create a sprint on an agile board.

        Args:
            board_id: Agile board id
            name: Sprint name
            goal: Optional sprint goal
            start: Optional start as a Unix timestamp in milliseconds
            finish: Optional finish as a Unix timestamp in milliseconds
            fields: Optional fields projection for the returned sprint

        Returns:
            The created sprint
        """
        body = compact(name=name, goal=goal, start=start, finish=finish)
        return self.request(
            "POST",
            f"/agiles/{path_segment(board_id)}/sprints",
            body=body,
            query=fields_params(fields),
        ).data

    def update_sprint(
        self,
        board_id: str,
        sprint_id: str,
        name: str | None = None,
        goal: str | None = None,
        start: int | None = None,
        finish: int | None = None,
        archived: bool | None = None,
        fields: str | None = None,
    ) -> dict[str, Any]:
        """
        Update a sprint. Only the arguments that are not None are sent.

        Args:
            board_id: Agile board id
            sprint_id: Sprint id
            name: New sprint name
            goal: New sprint goal
            start: New start timestamp in milliseconds
            finish: New finish timestamp in milliseconds
            archived: Archive (True) or restore (False) the sprint
            fields: Optional fields projection for the returned sprint

        Returns:
            The updated sprint
        """
        body = compact(
            name=name, goal=goal, start=start, finish=finish, archived=archived
        )
        return self.request(
            "POST",
            f"/agiles/{path_segment(board_id)}/sprints/{path_segment(sprint_id)}",
            body=body,
            query=fields_params(fields),
        ).data
