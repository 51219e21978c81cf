"""Module for YouTrack project operations."""

import logging
from typing import Any

from .client import YouTrackClient
from .utils import compact, fields_params, pagination_params, path_segment, to_ref

logger = logging.getLogger("mcp-youtrack")


class ProjectsMixin(YouTrackClient):
    """Mixin for YouTrack project operations."""

    def list_projects(
        self,
        query: str | None = None,
        skip: int | None = None,
        top: int | None = None,
        fields: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        List projects visible to the current user.

        Args:
            query: Optional search string for project names
            skip: Number of projects to skip
            top: Maximum number of projects to return
            fields: Optional fields projection

        Returns:
            List of project resources
        """
        params = pagination_params(skip, top, fields)
        if query is not None:
            params["query"] = query
        return self.request("GET", "/admin/projects", query=params).data or []

    def get_project(self, project_id: str, fields: str | None = None) -> dict[str, Any]:
        """
        Get a project by id or short name.

        Args:
            project_id: Project database id or short name
            fields: Optional fields projection

        Returns:
            The project resource
        """
        return self.request(
            "GET",
            f"/admin/projects/{path_segment(project_id)}",
            query=fields_params(fields),
        ).data

    def create_project(
        self,
        name: str,
        short_name: str,
        description: str | None = None,
        leader: str | None = None,
        fields: str | None = None,
    ) -> dict[str, Any]:
        """
        Create a new project.

        Args:
            name: Project name
            short_name: Project short name, used as the issue id prefix
            description: Optional description
            leader: Optional project leader id or login
            fields: Optional fields projection for the returned project

        Returns:
            The created project
        """
        body = compact(
            name=name,
            shortName=short_name,
            description=description,
            leader=to_ref(leader),
        )
        return self.request(
            "POST", "/admin/projects", body=body, query=fields_params(fields)
        ).data

    def update_project(
        self,
        project_id: str,
        name: str | None = None,
        description: str | None = None,
        leader: str | None = None,
        archived: bool | None = None,
        fields: str | None = None,
    ) -> dict[str, Any]:
        """
        Update a project. Only the arguments that are not None are sent.

        Args:
            project_id: Project database id or short name
            name: New name
            description: New description
            leader: New leader id or login
            archived: Archive (True) or restore (False) the project
            fields: Optional fields projection for the returned project

        Returns:
            The updated project
        """
        body = compact(
            name=name,
            description=description,
            leader=to_ref(leader),
            archived=archived,
        )
        return self.request(
            "POST",
            f"/admin/projects/{path_segment(project_id)}",
            body=body,
            query=fields_params(fields),
        ).data

    def delete_project(self, project_id: str) -> None:
        """Delete a project."""
        self.request("DELETE", f"/admin/projects/{path_segment(project_id)}")

    def get_project_custom_fields(
        self, project_id: str, fields: str | None = None
    ) -> list[dict[str, Any]]:
        """Get the custom fields attached to a project."""
        return (
            self.request(
                "GET",
                f"/admin/projects/{path_segment(project_id)}/customFields",
                query=fields_params(fields),
            ).data
            or []
        )
