"""
Base models shared by the YouTrack tool input models.

Every tool receives a JSON argument bag whose keys are camelCase
(``issueId``, ``usesMarkdown``). The models keep snake_case attribute
names and expose the camelCase names as aliases, so both spellings
validate.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from youtrack_mcp.youtrack.constants import DEFAULT_SKIP, DEFAULT_TOP

FIELDS_DESCRIPTION = "Comma-separated list of fields to return"


class ToolInput(BaseModel):
    """
    Base model for the arguments of one tool.

    Unknown keys are ignored; optional values default to None, meaning
    "not supplied".
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def tool_schema(cls) -> dict[str, Any]:
        """
        Return the JSON schema advertised to MCP clients.

        Returns:
            The schema of the model, keyed by alias
        """
        schema = cls.model_json_schema(by_alias=True)
        schema.pop("title", None)
        schema.setdefault("properties", {})
        return schema


class PaginatedInput(ToolInput):
    """Mixin-style base for tools that page through a collection."""

    skip: int = Field(
        default=DEFAULT_SKIP,
        ge=0,
        description="Number of items to skip for pagination",
    )
    top: int = Field(
        default=DEFAULT_TOP,
        ge=0,
        description="Maximum number of items to return",
    )
