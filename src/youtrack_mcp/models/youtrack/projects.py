"""
Input models for the YouTrack project tools.
"""

from pydantic import Field

from youtrack_mcp.youtrack.constants import (
    DEFAULT_PROJECT_CUSTOM_FIELD_FIELDS,
    DEFAULT_PROJECT_FIELDS,
)

from ..base import FIELDS_DESCRIPTION, PaginatedInput, ToolInput

PROJECT_ID_DESCRIPTION = "Project short name or ID"


class ProjectRef(ToolInput):
    """Arguments that identify a single project."""

    project_id: str = Field(alias="projectId", description=PROJECT_ID_DESCRIPTION)


class ListProjectsInput(PaginatedInput):
    """Arguments of ``youtrack_list_projects``."""

    fields: str = Field(default=DEFAULT_PROJECT_FIELDS, description=FIELDS_DESCRIPTION)


class GetProjectInput(ProjectRef):
    """Arguments of ``youtrack_get_project``."""

    fields: str = Field(default=DEFAULT_PROJECT_FIELDS, description=FIELDS_DESCRIPTION)


class CreateProjectInput(ToolInput):
    """Arguments of ``youtrack_create_project``."""

    name: str = Field(description="Project name")
    short_name: str = Field(
        alias="shortName", description="Project short name (used as prefix for issues)"
    )
    description: str | None = Field(default=None, description="Project description")
    leader: str | None = Field(default=None, description="Project leader login or ID")


class UpdateProjectInput(ProjectRef):
    """Arguments of ``youtrack_update_project``."""

    name: str | None = Field(default=None, description="Updated project name")
    description: str | None = Field(
        default=None, description="Updated project description"
    )
    leader: str | None = Field(
        default=None, description="Updated project leader login or ID"
    )
    archived: bool | None = Field(
        default=None, description="Whether the project should be archived"
    )


class DeleteProjectInput(ProjectRef):
    """Arguments of ``youtrack_delete_project``."""


class GetProjectCustomFieldsInput(ProjectRef):
    """Arguments of ``youtrack_get_project_custom_fields``."""

    fields: str = Field(
        default=DEFAULT_PROJECT_CUSTOM_FIELD_FIELDS, description=FIELDS_DESCRIPTION
    )


class GetProjectStatisticsInput(ProjectRef):
    """Arguments of ``youtrack_get_project_statistics``."""
