"""
Input models for the YouTrack tag and custom field tools.
"""

from pydantic import Field

from youtrack_mcp.youtrack.constants import (
    DEFAULT_CUSTOM_FIELD_FIELDS,
    DEFAULT_TAG_FIELDS,
)

from ..base import FIELDS_DESCRIPTION, PaginatedInput, ToolInput


class ListTagsInput(PaginatedInput):
    """Arguments of ``youtrack_list_tags``."""

    query: str | None = Field(default=None, description="Search query for tag names")
    fields: str = Field(default=DEFAULT_TAG_FIELDS, description=FIELDS_DESCRIPTION)


class GetTagInput(ToolInput):
    """Arguments of ``youtrack_get_tag``."""

    tag_id: str = Field(alias="tagId", description="Tag ID")
    fields: str = Field(default=DEFAULT_TAG_FIELDS, description=FIELDS_DESCRIPTION)


class ListCustomFieldsInput(PaginatedInput):
    """Arguments of ``youtrack_list_custom_fields``."""

    fields: str = Field(
        default=DEFAULT_CUSTOM_FIELD_FIELDS, description=FIELDS_DESCRIPTION
    )


class GetCustomFieldInput(ToolInput):
    """Arguments of ``youtrack_get_custom_field``."""

    field_id: str = Field(alias="fieldId", description="Custom field ID")
    fields: str = Field(
        default=DEFAULT_CUSTOM_FIELD_FIELDS, description=FIELDS_DESCRIPTION
    )
