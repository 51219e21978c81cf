"""Static registry of the YouTrack tools and the dispatch entry point.

The table maps every tool name to its description, input model and
handler. It is built once at import time and never changes.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from youtrack_mcp.exceptions import UnknownToolError, YouTrackApiError
from youtrack_mcp.models import ToolInput, ToolResult
from youtrack_mcp.models import youtrack as inputs
from youtrack_mcp.youtrack import YouTrackFetcher

from . import youtrack as handlers

logger = logging.getLogger("mcp-youtrack.server.registry")

TOOL_PREFIX = "youtrack_"

Handler = Callable[[YouTrackFetcher, Any], ToolResult]


@dataclass(frozen=True)
class ToolDefinition:
    """One named tool: its description, input model, handler and access kind."""

    name: str
    description: str
    input_model: type[ToolInput]
    handler: Handler
    write: bool = False

    @property
    def tags(self) -> set[str]:
        return {"youtrack", "write" if self.write else "read"}

    @property
    def action(self) -> str:
        """Human readable action, e.g. 'create issue' for youtrack_create_issue."""
        return self.name.removeprefix(TOOL_PREFIX).replace("_", " ")

    def input_schema(self) -> dict[str, Any]:
        return self.input_model.tool_schema()


def _tool(
    name: str,
    description: str,
    input_model: type[ToolInput],
    handler: Handler,
    write: bool = False,
) -> ToolDefinition:
    return ToolDefinition(
        name=name,
        description=description,
        input_model=input_model,
        handler=handler,
        write=write,
    )


_DEFINITIONS = [
    # Issues
    _tool(
        "youtrack_list_issues",
        "List issues with optional filtering and pagination",
        inputs.ListIssuesInput,
        handlers.list_issues,
    ),
    _tool(
        "youtrack_get_issue",
        "Get detailed information about a specific issue",
        inputs.GetIssueInput,
        handlers.get_issue,
    ),
    _tool(
        "youtrack_create_issue",
        "Create a new issue",
        inputs.CreateIssueInput,
        handlers.create_issue,
        write=True,
    ),
    _tool(
        "youtrack_update_issue",
        "Update an existing issue",
        inputs.UpdateIssueInput,
        handlers.update_issue,
        write=True,
    ),
    _tool(
        "youtrack_delete_issue",
        "Delete an issue",
        inputs.DeleteIssueInput,
        handlers.delete_issue,
        write=True,
    ),
    _tool(
        "youtrack_search_issues",
        "Search issues using YouTrack query syntax",
        inputs.SearchIssuesInput,
        handlers.search_issues,
    ),
    # Comments
    _tool(
        "youtrack_get_comments",
        "Get all comments for an issue",
        inputs.GetCommentsInput,
        handlers.get_comments,
    ),
    _tool(
        "youtrack_add_comment",
        "Add a comment to an issue",
        inputs.AddCommentInput,
        handlers.add_comment,
        write=True,
    ),
    _tool(
        "youtrack_update_comment",
        "Update an existing comment",
        inputs.UpdateCommentInput,
        handlers.update_comment,
        write=True,
    ),
    _tool(
        "youtrack_delete_comment",
        "Delete a comment",
        inputs.DeleteCommentInput,
        handlers.delete_comment,
        write=True,
    ),
    # Attachments
    _tool(
        "youtrack_get_attachments",
        "Get all attachments for an issue",
        inputs.GetAttachmentsInput,
        handlers.get_attachments,
    ),
    _tool(
        "youtrack_add_attachment",
        "Attach a file (base64-encoded content) to an issue",
        inputs.AddAttachmentInput,
        handlers.add_attachment,
        write=True,
    ),
    # Time tracking
    _tool(
        "youtrack_get_work_items",
        "Get work items (time tracking entries) for an issue",
        inputs.GetWorkItemsInput,
        handlers.get_work_items,
    ),
    _tool(
        "youtrack_add_work_item",
        "Add a work item (time tracking entry) to an issue",
        inputs.AddWorkItemInput,
        handlers.add_work_item,
        write=True,
    ),
    _tool(
        "youtrack_update_work_item",
        "Update an existing work item",
        inputs.UpdateWorkItemInput,
        handlers.update_work_item,
        write=True,
    ),
    _tool(
        "youtrack_delete_work_item",
        "Delete a work item",
        inputs.DeleteWorkItemInput,
        handlers.delete_work_item,
        write=True,
    ),
    # Projects
    _tool(
        "youtrack_list_projects",
        "List all accessible projects",
        inputs.ListProjectsInput,
        handlers.list_projects,
    ),
    _tool(
        "youtrack_get_project",
        "Get detailed information about a specific project",
        inputs.GetProjectInput,
        handlers.get_project,
    ),
    _tool(
        "youtrack_create_project",
        "Create a new project",
        inputs.CreateProjectInput,
        handlers.create_project,
        write=True,
    ),
    _tool(
        "youtrack_update_project",
        "Update an existing project",
        inputs.UpdateProjectInput,
        handlers.update_project,
        write=True,
    ),
    _tool(
        "youtrack_delete_project",
        "Delete a project",
        inputs.DeleteProjectInput,
        handlers.delete_project,
        write=True,
    ),
    _tool(
        "youtrack_get_project_custom_fields",
        "Get custom fields for a project",
        inputs.GetProjectCustomFieldsInput,
        handlers.get_project_custom_fields,
    ),
    # Users and groups
    _tool(
        "youtrack_get_current_user",
        "Get current authenticated user information",
        inputs.GetCurrentUserInput,
        handlers.get_current_user,
    ),
    _tool(
        "youtrack_list_users",
        "List users with optional search and pagination",
        inputs.ListUsersInput,
        handlers.list_users,
    ),
    _tool(
        "youtrack_get_user",
        "Get detailed information about a specific user",
        inputs.GetUserInput,
        handlers.get_user,
    ),
    _tool(
        "youtrack_list_groups",
        "List user groups",
        inputs.ListGroupsInput,
        handlers.list_groups,
    ),
    _tool(
        "youtrack_get_group",
        "Get detailed information about a specific group",
        inputs.GetGroupInput,
        handlers.get_group,
    ),
    # Commands
    _tool(
        "youtrack_get_issue_commands",
        "Get available workflow commands for an issue",
        inputs.GetIssueCommandsInput,
        handlers.get_issue_commands,
    ),
    _tool(
        "youtrack_apply_workflow_command",
        "Apply a workflow command to an issue",
        inputs.ApplyCommandInput,
        handlers.apply_workflow_command,
        write=True,
    ),
    # Agile boards and sprints
    _tool(
        "youtrack_list_agile_boards",
        "List all agile boards",
        inputs.ListAgileBoardsInput,
        handlers.list_agile_boards,
    ),
    _tool(
        "youtrack_get_agile_board",
        "Get detailed information about a specific agile board",
        inputs.GetAgileBoardInput,
        handlers.get_agile_board,
    ),
    _tool(
        "youtrack_create_agile_board",
        "Create a new agile board",
        inputs.CreateAgileBoardInput,
        handlers.create_agile_board,
        write=True,
    ),
    _tool(
        "youtrack_update_agile_board",
        "Update an existing agile board",
        inputs.UpdateAgileBoardInput,
        handlers.update_agile_board,
        write=True,
    ),
    _tool(
        "youtrack_list_sprints",
        "List sprints for an agile board",
        inputs.ListSprintsInput,
        handlers.list_sprints,
    ),
    _tool(
        "youtrack_get_sprint",
        "Get detailed information about a specific sprint",
        inputs.GetSprintInput,
        handlers.get_sprint,
    ),
    _tool(
        "youtrack_create_sprint",
        "Create a new sprint",
        inputs.CreateSprintInput,
        handlers.create_sprint,
        write=True,
    ),
    _tool(
        "youtrack_update_sprint",
        "Update an existing sprint",
        inputs.UpdateSprintInput,
        handlers.update_sprint,
        write=True,
    ),
    # Tags and custom fields
    _tool(
        "youtrack_list_tags",
        "List tags visible to the current user",
        inputs.ListTagsInput,
        handlers.list_tags,
    ),
    _tool(
        "youtrack_get_tag",
        "Get detailed information about a specific tag",
        inputs.GetTagInput,
        handlers.get_tag,
    ),
    _tool(
        "youtrack_list_custom_fields",
        "List custom fields defined on the server",
        inputs.ListCustomFieldsInput,
        handlers.list_custom_fields,
    ),
    _tool(
        "youtrack_get_custom_field",
        "Get detailed information about a specific custom field",
        inputs.GetCustomFieldInput,
        handlers.get_custom_field,
    ),
    # Utility and reports
    _tool(
        "youtrack_ping",
        "Test YouTrack connection",
        inputs.EmptyInput,
        handlers.ping,
    ),
    _tool(
        "youtrack_get_server_info",
        "Get YouTrack server information",
        inputs.EmptyInput,
        handlers.get_server_info,
    ),
    _tool(
        "youtrack_get_project_statistics",
        "Get project statistics and metrics",
        inputs.GetProjectStatisticsInput,
        handlers.get_project_statistics,
    ),
    _tool(
        "youtrack_generate_report",
        "Generate custom reports",
        inputs.GenerateReportInput,
        handlers.generate_report,
    ),
]

TOOL_DEFINITIONS: dict[str, ToolDefinition] = {
    definition.name: definition for definition in _DEFINITIONS
}


def get_tool_definition(name: str) -> ToolDefinition:
    """
    Look up a tool by name.

    Raises:
        UnknownToolError: If no tool has that name
    """
    try:
        return TOOL_DEFINITIONS[name]
    except KeyError:
        raise UnknownToolError(name) from None


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "arguments"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def dispatch(
    fetcher: YouTrackFetcher,
    name: str,
    arguments: dict[str, Any] | None,
    read_only: bool = False,
) -> ToolResult:
    """
    Validate the arguments of a tool call and run its handler.

    Args:
        fetcher: Configured YouTrack client
        name: Tool name, e.g. 'youtrack_get_issue'
        arguments: Raw JSON arguments from the MCP client
        read_only: Refuse write tools when True

    Returns:
        The tool result; validation, read-only and API failures are
        reported as ``success=False``

    Raises:
        UnknownToolError: If the tool name is not registered
    """
    definition = get_tool_definition(name)

    try:
        params = definition.input_model.model_validate(arguments or {})
    except ValidationError as e:
        logger.warning(f"Invalid arguments for {name}: {e.error_count()} error(s)")
        return ToolResult.fail(
            f"Invalid arguments for {name}: {_format_validation_error(e)}"
        )

    if definition.write and read_only:
        logger.warning(f"Attempted to call tool '{name}' in read-only mode.")
        return ToolResult.fail(f"Cannot {definition.action} in read-only mode.")

    logger.debug(f"Dispatching {name}")
    try:
        return definition.handler(fetcher, params)
    except YouTrackApiError as e:
        logger.info(f"Tool {name} failed: {e.message}")
        return ToolResult.fail(e.message)
    except ValueError as e:
        return ToolResult.fail(str(e))


def describe_tools() -> list[dict[str, Any]]:
    """Return name, description and input schema of every registered tool."""
    return [
        {
            "name": definition.name,
            "description": definition.description,
            "inputSchema": definition.input_schema(),
        }
        for definition in TOOL_DEFINITIONS.values()
    ]
