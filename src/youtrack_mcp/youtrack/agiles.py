"""Module for YouTrack agile board operations."""

import logging
from typing import Any

from .client import YouTrackClient
from .utils import compact, fields_params, pagination_params, path_segment, to_refs

logger = logging.getLogger("mcp-youtrack")


class AgilesMixin(YouTrackClient):
    """Mixin for YouTrack agile board operations."""

    def list_agile_boards(
        self,
        skip: int | None = None,
        top: int | None = None,
        fields: str | None = None,
    ) -> list[dict[str, Any]]:
        """List agile boards."""
        return (
            self.request(
                "GET", "/agiles", query=pagination_params(skip, top, fields)
            ).data
            or []
        )

    def get_agile_board(
        self, board_id: str, fields: str | None = None
    ) -> dict[str, Any]:
        """Get an agile board by id."""
        return self.request(
            "GET", f"/agiles/{path_segment(board_id)}", query=fields_params(fields)
        ).data

    def create_agile_board(
        self,
        name: str,
        projects: list[str],
        fields: str | None = None,
    ) -> dict[str, Any]:
        """
        Create an agile board.

        Args:
            name: Board name
            projects: Ids of the projects the board covers
            fields: Optional fields projection for the returned board

        Returns:
            The created board
        """
        body = compact(name=name, projects=to_refs(projects))
        return self.request(
            "POST", "/agiles", body=body, query=fields_params(fields)
        ).data

    def update_agile_board(
        self,
        board_id: str,
        name: str | None = None,
        projects: list[str] | None = None,
        fields: str | None = None,
    ) -> dict[str, Any]:
        """
        Update an agile board.

        Args:
            board_id: Board id
            name: New board name
            projects: Replacement list of project ids
            fields: Optional fields projection for the returned board

        Returns:
            The updated board
        """
        body = compact(name=name, projects=to_refs(projects))
        return self.request(
            "POST",
            f"/agiles/{path_segment(board_id)}",
            body=body,
            query=fields_params(fields),
        ).data
