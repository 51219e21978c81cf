"""
Input models for the YouTrack issue tools.
"""

from pydantic import Field

from youtrack_mcp.youtrack.constants import DEFAULT_ISSUE_FIELDS

from ..base import FIELDS_DESCRIPTION, PaginatedInput, ToolInput

ISSUE_ID_DESCRIPTION = "Issue ID (e.g., PROJECT-123)"


class IssueRef(ToolInput):
    """Arguments that identify a single issue."""

    issue_id: str = Field(alias="issueId", description=ISSUE_ID_DESCRIPTION)


class ListIssuesInput(PaginatedInput):
    """Arguments of ``youtrack_list_issues``."""

    project: str | None = Field(
        default=None, description="Filter by project short name or ID"
    )
    query: str | None = Field(default=None, description="YouTrack search query string")
    assignee: str | None = Field(
        default=None, description="Filter by assignee login or ID"
    )
    state: str | None = Field(default=None, description="Filter by issue state")
    priority: str | None = Field(default=None, description="Filter by priority")
    fields: str = Field(default=DEFAULT_ISSUE_FIELDS, description=FIELDS_DESCRIPTION)


class GetIssueInput(IssueRef):
    """Arguments of ``youtrack_get_issue``."""

    fields: str = Field(default=DEFAULT_ISSUE_FIELDS, description=FIELDS_DESCRIPTION)


class CreateIssueInput(ToolInput):
    """Arguments of ``youtrack_create_issue``."""

    project: str = Field(description="Project short name or ID")
    summary: str = Field(description="Issue title/summary")
    description: str | None = Field(default=None, description="Issue description")
    assignee: str | None = Field(default=None, description="Assignee login or ID")
    priority: str | None = Field(default=None, description="Priority name or ID")
    issue_type: str | None = Field(
        default=None, alias="type", description="Issue type name or ID"
    )
    tags: list[str] | None = Field(
        default=None, description="List of tag names or IDs"
    )


class UpdateIssueInput(IssueRef):
    """Arguments of ``youtrack_update_issue``."""

    summary: str | None = Field(
        default=None, description="Updated issue title/summary"
    )
    description: str | None = Field(
        default=None, description="Updated issue description"
    )
    assignee: str | None = Field(
        default=None, description="Updated assignee login or ID"
    )
    priority: str | None = Field(
        default=None, description="Updated priority name or ID"
    )
    state: str | None = Field(default=None, description="Updated state name or ID")
    tags: list[str] | None = Field(
        default=None, description="Updated list of tag names or IDs"
    )
    uses_markdown: bool | None = Field(
        default=None,
        alias="usesMarkdown",
        description="Whether the description uses Markdown formatting",
    )


class DeleteIssueInput(IssueRef):
    """Arguments of ``youtrack_delete_issue``."""


class SearchIssuesInput(PaginatedInput):
    """Arguments of ``youtrack_search_issues``."""

    query: str = Field(
        description='YouTrack search query (e.g., "assignee: me state: Open")'
    )
    fields: str = Field(default=DEFAULT_ISSUE_FIELDS, description=FIELDS_DESCRIPTION)
