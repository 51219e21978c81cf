"""Module for YouTrack user and group operations."""

import logging
from typing import Any

from .client import YouTrackClient
from .utils import fields_params, pagination_params, path_segment

logger = logging.getLogger("mcp-youtrack")


class UsersMixin(YouTrackClient):
    """Mixin for YouTrack user and group operations."""

    def get_current_user(self, fields: str | None = None) -> dict[str, Any]:
        """
        Get the user the client is authenticated as.

        Args:
            fields: Optional fields projection

        Returns:
            The user resource
        """
        return self.request("GET", "/users/me", query=fields_params(fields)).data

    def get_user(self, user_id: str, fields: str | None = None) -> dict[str, Any]:
        """
        Get a user by login or id.

        Args:
            user_id: User login or database id
            fields: Optional fields projection

        Returns:
            The user resource
        """
        return self.request(
            "GET", f"/users/{path_segment(user_id)}", query=fields_params(fields)
        ).data

    def list_users(
        self,
        query: str | None = None,
        skip: int | None = None,
        top: int | None = None,
        fields: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        List users, optionally filtered by a search query.

        Args:
            query: Search string matched against names and logins
            skip: Number of users to skip
            top: Maximum number of users to return
            fields: Optional fields projection

        Returns:
            List of user resources
        """
        params = pagination_params(skip, top, fields)
        if query is not None:
            params["query"] = query
        return self.request("GET", "/users", query=params).data or []

    def list_groups(
        self,
        skip: int | None = None,
        top: int | None = None,
        fields: str | None = None,
    ) -> list[dict[str, Any]]:
        """List user groups."""
        return (
            self.request(
                "GET", "/groups", query=pagination_params(skip, top, fields)
            ).data
            or []
        )

    def get_group(self, group_id: str, fields: str | None = None) -> dict[str, Any]:
        """Get a user group by id."""
        return self.request(
            "GET", f"/groups/{path_segment(group_id)}", query=fields_params(fields)
        ).data
