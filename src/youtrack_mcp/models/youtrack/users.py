"""
Input models for the YouTrack user and group tools.
"""

from pydantic import Field

from youtrack_mcp.youtrack.constants import DEFAULT_GROUP_FIELDS, DEFAULT_USER_FIELDS

from ..base import FIELDS_DESCRIPTION, PaginatedInput, ToolInput


class GetCurrentUserInput(ToolInput):
    """Arguments of ``youtrack_get_current_user``."""

    fields: str = Field(default=DEFAULT_USER_FIELDS, description=FIELDS_DESCRIPTION)


class ListUsersInput(PaginatedInput):
    """Arguments of ``youtrack_list_users``."""

    query: str | None = Field(
        default=None, description="Search query for user names or logins"
    )
    fields: str = Field(default=DEFAULT_USER_FIELDS, description=FIELDS_DESCRIPTION)


class GetUserInput(ToolInput):
    """Arguments of ``youtrack_get_user``."""

    user_id: str = Field(alias="userId", description="User login or ID")
    fields: str = Field(default=DEFAULT_USER_FIELDS, description=FIELDS_DESCRIPTION)


class ListGroupsInput(PaginatedInput):
    """Arguments of ``youtrack_list_groups``."""

    fields: str = Field(default=DEFAULT_GROUP_FIELDS, description=FIELDS_DESCRIPTION)


class GetGroupInput(ToolInput):
    """Arguments of ``youtrack_get_group``."""

    group_id: str = Field(alias="groupId", description="Group name or ID")
    fields: str = Field(default=DEFAULT_GROUP_FIELDS, description=FIELDS_DESCRIPTION)
