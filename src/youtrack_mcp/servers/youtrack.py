"""YouTrack tool handlers.

Each handler receives a configured ``YouTrackFetcher`` and the validated
input model of its tool, calls the catalog and wraps the payload in a
``ToolResult``. API errors are not caught here; ``dispatch`` turns them
into failed results.
"""

import logging
from typing import Any

from youtrack_mcp.models import ToolResult
from youtrack_mcp.models.youtrack import (
    AddAttachmentInput,
    AddCommentInput,
    AddWorkItemInput,
    ApplyCommandInput,
    CreateAgileBoardInput,
    CreateIssueInput,
    CreateProjectInput,
    CreateSprintInput,
    DeleteCommentInput,
    DeleteIssueInput,
    DeleteProjectInput,
    DeleteWorkItemInput,
    EmptyInput,
    GenerateReportInput,
    GetAgileBoardInput,
    GetAttachmentsInput,
    GetCommentsInput,
    GetCurrentUserInput,
    GetCustomFieldInput,
    GetGroupInput,
    GetIssueCommandsInput,
    GetIssueInput,
    GetProjectCustomFieldsInput,
    GetProjectInput,
    GetProjectStatisticsInput,
    GetSprintInput,
    GetTagInput,
    GetUserInput,
    GetWorkItemsInput,
    ListAgileBoardsInput,
    ListCustomFieldsInput,
    ListGroupsInput,
    ListIssuesInput,
    ListProjectsInput,
    ListSprintsInput,
    ListTagsInput,
    ListUsersInput,
    SearchIssuesInput,
    UpdateAgileBoardInput,
    UpdateCommentInput,
    UpdateIssueInput,
    UpdateProjectInput,
    UpdateSprintInput,
    UpdateWorkItemInput,
)
from youtrack_mcp.youtrack import YouTrackFetcher
from youtrack_mcp.youtrack.constants import (
    DEFAULT_AGILE_FIELDS,
    DEFAULT_ATTACHMENT_FIELDS,
    DEFAULT_COMMENT_FIELDS,
    DEFAULT_ISSUE_FIELDS,
    DEFAULT_PROJECT_FIELDS,
    DEFAULT_SPRINT_FIELDS,
    DEFAULT_WORK_ITEM_FIELDS,
)

logger = logging.getLogger("mcp-youtrack")


def _label(entity: Any, key: str, fallback: str) -> str:
    """Pick a display label from a returned entity, e.g. ``idReadable``."""
    if isinstance(entity, dict) and entity.get(key):
        return str(entity[key])
    return fallback


# Issues


def list_issues(fetcher: YouTrackFetcher, params: ListIssuesInput) -> ToolResult:
    issues = fetcher.list_issues(
        project=params.project,
        query=params.query,
        assignee=params.assignee,
        state=params.state,
        priority=params.priority,
        skip=params.skip,
        top=params.top,
        fields=params.fields,
    )
    return ToolResult.ok(issues, f"Found {len(issues)} issues")


def get_issue(fetcher: YouTrackFetcher, params: GetIssueInput) -> ToolResult:
    issue = fetcher.get_issue(params.issue_id, fields=params.fields)
    return ToolResult.ok(
        issue, f"Retrieved issue {_label(issue, 'idReadable', params.issue_id)}"
    )


def create_issue(fetcher: YouTrackFetcher, params: CreateIssueInput) -> ToolResult:
    """Create an issue; the message names the readable id YouTrack assigned."""
    issue = fetcher.create_issue(
        project=params.project,
        summary=params.summary,
        description=params.description,
        assignee=params.assignee,
        priority=params.priority,
        issue_type=params.issue_type,
        tags=params.tags,
        fields=DEFAULT_ISSUE_FIELDS,
    )
    readable = _label(issue, "idReadable", _label(issue, "id", params.summary))
    return ToolResult.ok(issue, f"Created issue {readable}")


def update_issue(fetcher: YouTrackFetcher, params: UpdateIssueInput) -> ToolResult:
    issue = fetcher.update_issue(
        params.issue_id,
        summary=params.summary,
        description=params.description,
        assignee=params.assignee,
        priority=params.priority,
        state=params.state,
        tags=params.tags,
        uses_markdown=params.uses_markdown,
        fields=DEFAULT_ISSUE_FIELDS,
    )
    return ToolResult.ok(
        issue, f"Updated issue {_label(issue, 'idReadable', params.issue_id)}"
    )


def delete_issue(fetcher: YouTrackFetcher, params: DeleteIssueInput) -> ToolResult:
    fetcher.delete_issue(params.issue_id)
    return ToolResult.ok(message=f"Deleted issue {params.issue_id}")


def search_issues(fetcher: YouTrackFetcher, params: SearchIssuesInput) -> ToolResult:
    issues = fetcher.search_issues(
        params.query, skip=params.skip, top=params.top, fields=params.fields
    )
    return ToolResult.ok(
        issues, f'Found {len(issues)} issues matching "{params.query}"'
    )


# Comments and attachments


def get_comments(fetcher: YouTrackFetcher, params: GetCommentsInput) -> ToolResult:
    comments = fetcher.get_issue_comments(
        params.issue_id,
        skip=params.skip,
        top=params.top,
        fields=DEFAULT_COMMENT_FIELDS,
    )
    return ToolResult.ok(
        comments,
        f"Retrieved {len(comments)} comments for issue {params.issue_id}",
    )


def add_comment(fetcher: YouTrackFetcher, params: AddCommentInput) -> ToolResult:
    comment = fetcher.add_comment(
        params.issue_id,
        params.text,
        uses_markdown=params.uses_markdown,
        fields=DEFAULT_COMMENT_FIELDS,
    )
    return ToolResult.ok(comment, f"Added comment to issue {params.issue_id}")


def update_comment(fetcher: YouTrackFetcher, params: UpdateCommentInput) -> ToolResult:
    comment = fetcher.update_comment(
        params.issue_id,
        params.comment_id,
        params.text,
        uses_markdown=params.uses_markdown,
        fields=DEFAULT_COMMENT_FIELDS,
    )
    return ToolResult.ok(comment, f"Updated comment {params.comment_id}")


def delete_comment(fetcher: YouTrackFetcher, params: DeleteCommentInput) -> ToolResult:
    fetcher.delete_comment(params.issue_id, params.comment_id)
    return ToolResult.ok(message=f"Deleted comment {params.comment_id}")


def get_attachments(
    fetcher: YouTrackFetcher, params: GetAttachmentsInput
) -> ToolResult:
    attachments = fetcher.get_issue_attachments(
        params.issue_id,
        skip=params.skip,
        top=params.top,
        fields=DEFAULT_ATTACHMENT_FIELDS,
    )
    return ToolResult.ok(
        attachments,
        f"Retrieved {len(attachments)} attachments for issue {params.issue_id}",
    )


def add_attachment(fetcher: YouTrackFetcher, params: AddAttachmentInput) -> ToolResult:
    """Upload a base64-encoded file to an issue."""
    attachment = fetcher.add_attachment(
        params.issue_id, params.filename, params.decoded_content()
    )
    return ToolResult.ok(
        attachment, f"Attached {params.filename} to issue {params.issue_id}"
    )


# Time tracking


def get_work_items(fetcher: YouTrackFetcher, params: GetWorkItemsInput) -> ToolResult:
    work_items = fetcher.get_work_items(
        params.issue_id,
        skip=params.skip,
        top=params.top,
        fields=DEFAULT_WORK_ITEM_FIELDS,
    )
    return ToolResult.ok(
        work_items,
        f"Retrieved {len(work_items)} work items for issue {params.issue_id}",
    )


def add_work_item(fetcher: YouTrackFetcher, params: AddWorkItemInput) -> ToolResult:
    work_item = fetcher.add_work_item(
        params.issue_id,
        params.duration,
        description=params.description,
        date=params.date,
        work_type=params.work_type,
    )
    return ToolResult.ok(work_item, f"Added work item to issue {params.issue_id}")


def update_work_item(
    fetcher: YouTrackFetcher, params: UpdateWorkItemInput
) -> ToolResult:
    work_item = fetcher.update_work_item(
        params.issue_id,
        params.work_item_id,
        duration=params.duration,
        description=params.description,
        date=params.date,
        work_type=params.work_type,
    )
    return ToolResult.ok(work_item, f"Updated work item {params.work_item_id}")


def delete_work_item(
    fetcher: YouTrackFetcher, params: DeleteWorkItemInput
) -> ToolResult:
    fetcher.delete_work_item(params.issue_id, params.work_item_id)
    return ToolResult.ok(message=f"Deleted work item {params.work_item_id}")


# Projects


def list_projects(fetcher: YouTrackFetcher, params: ListProjectsInput) -> ToolResult:
    projects = fetcher.list_projects(
        skip=params.skip, top=params.top, fields=params.fields
    )
    return ToolResult.ok(projects, f"Retrieved {len(projects)} projects")


def get_project(fetcher: YouTrackFetcher, params: GetProjectInput) -> ToolResult:
    project = fetcher.get_project(params.project_id, fields=params.fields)
    return ToolResult.ok(
        project,
        f"Retrieved project {_label(project, 'shortName', params.project_id)}",
    )


def create_project(fetcher: YouTrackFetcher, params: CreateProjectInput) -> ToolResult:
    project = fetcher.create_project(
        name=params.name,
        short_name=params.short_name,
        description=params.description,
        leader=params.leader,
        fields=DEFAULT_PROJECT_FIELDS,
    )
    return ToolResult.ok(
        project,
        f"Created project {_label(project, 'shortName', params.short_name)}",
    )


def update_project(fetcher: YouTrackFetcher, params: UpdateProjectInput) -> ToolResult:
    project = fetcher.update_project(
        params.project_id,
        name=params.name,
        description=params.description,
        leader=params.leader,
        archived=params.archived,
        fields=DEFAULT_PROJECT_FIELDS,
    )
    return ToolResult.ok(
        project,
        f"Updated project {_label(project, 'shortName', params.project_id)}",
    )


def delete_project(fetcher: YouTrackFetcher, params: DeleteProjectInput) -> ToolResult:
    fetcher.delete_project(params.project_id)
    return ToolResult.ok(message=f"Deleted project {params.project_id}")


def get_project_custom_fields(
    fetcher: YouTrackFetcher, params: GetProjectCustomFieldsInput
) -> ToolResult:
    custom_fields = fetcher.get_project_custom_fields(
        params.project_id, fields=params.fields
    )
    return ToolResult.ok(
        custom_fields,
        f"Retrieved {len(custom_fields)} custom fields for project {params.project_id}",
    )


# Users and groups


def get_current_user(
    fetcher: YouTrackFetcher, params: GetCurrentUserInput
) -> ToolResult:
    user = fetcher.get_current_user(fields=params.fields)
    return ToolResult.ok(
        user, f"Retrieved current user {_label(user, 'login', 'unknown')}"
    )


def list_users(fetcher: YouTrackFetcher, params: ListUsersInput) -> ToolResult:
    users = fetcher.list_users(
        query=params.query, skip=params.skip, top=params.top, fields=params.fields
    )
    return ToolResult.ok(users, f"Retrieved {len(users)} users")


def get_user(fetcher: YouTrackFetcher, params: GetUserInput) -> ToolResult:
    user = fetcher.get_user(params.user_id, fields=params.fields)
    return ToolResult.ok(
        user, f"Retrieved user {_label(user, 'login', params.user_id)}"
    )


def list_groups(fetcher: YouTrackFetcher, params: ListGroupsInput) -> ToolResult:
    groups = fetcher.list_groups(
        skip=params.skip, top=params.top, fields=params.fields
    )
    return ToolResult.ok(groups, f"Retrieved {len(groups)} groups")


def get_group(fetcher: YouTrackFetcher, params: GetGroupInput) -> ToolResult:
    group = fetcher.get_group(params.group_id, fields=params.fields)
    return ToolResult.ok(
        group, f"Retrieved group {_label(group, 'name', params.group_id)}"
    )


# Commands


def get_issue_commands(
    fetcher: YouTrackFetcher, params: GetIssueCommandsInput
) -> ToolResult:
    commands = fetcher.get_available_commands(params.issue_id)
    return ToolResult.ok(
        commands, f"Retrieved available commands for issue {params.issue_id}"
    )


def apply_workflow_command(
    fetcher: YouTrackFetcher, params: ApplyCommandInput
) -> ToolResult:
    result = fetcher.apply_command(
        params.issue_id, params.command, comment=params.comment
    )
    return ToolResult.ok(
        result, f'Applied command "{params.command}" to issue {params.issue_id}'
    )


# Agile boards and sprints


def list_agile_boards(
    fetcher: YouTrackFetcher, params: ListAgileBoardsInput
) -> ToolResult:
    boards = fetcher.list_agile_boards(
        skip=params.skip, top=params.top, fields=params.fields
    )
    return ToolResult.ok(boards, f"Retrieved {len(boards)} agile boards")


def get_agile_board(fetcher: YouTrackFetcher, params: GetAgileBoardInput) -> ToolResult:
    board = fetcher.get_agile_board(params.board_id, fields=params.fields)
    return ToolResult.ok(
        board, f"Retrieved agile board {_label(board, 'name', params.board_id)}"
    )


def create_agile_board(
    fetcher: YouTrackFetcher, params: CreateAgileBoardInput
) -> ToolResult:
    board = fetcher.create_agile_board(
        params.name, params.projects, fields=DEFAULT_AGILE_FIELDS
    )
    return ToolResult.ok(
        board, f"Created agile board {_label(board, 'name', params.name)}"
    )


def update_agile_board(
    fetcher: YouTrackFetcher, params: UpdateAgileBoardInput
) -> ToolResult:
    board = fetcher.update_agile_board(
        params.board_id,
        name=params.name,
        projects=params.projects,
        fields=DEFAULT_AGILE_FIELDS,
    )
    return ToolResult.ok(
        board, f"Updated agile board {_label(board, 'name', params.board_id)}"
    )


def list_sprints(fetcher: YouTrackFetcher, params: ListSprintsInput) -> ToolResult:
    sprints = fetcher.list_sprints(
        params.board_id, skip=params.skip, top=params.top, fields=params.fields
    )
    return ToolResult.ok(
        sprints, f"Retrieved {len(sprints)} sprints for board {params.board_id}"
    )


def get_sprint(fetcher: YouTrackFetcher, params: GetSprintInput) -> ToolResult:
    sprint = fetcher.get_sprint(
        params.board_id, params.sprint_id, fields=params.fields
    )
    return ToolResult.ok(
        sprint, f"Retrieved sprint {_label(sprint, 'name', params.sprint_id)}"
    )


def create_sprint(fetcher: YouTrackFetcher, params: CreateSprintInput) -> ToolResult:
    sprint = fetcher.create_sprint(
        params.board_id,
        params.name,
        goal=params.goal,
        start=params.start,
        finish=params.finish,
        fields=DEFAULT_SPRINT_FIELDS,
    )
    return ToolResult.ok(
        sprint, f"Created sprint {_label(sprint, 'name', params.name)}"
    )


def update_sprint(fetcher: YouTrackFetcher, params: UpdateSprintInput) -> ToolResult:
    sprint = fetcher.update_sprint(
        params.board_id,
        params.sprint_id,
        name=params.name,
        goal=params.goal,
        start=params.start,
        finish=params.finish,
        archived=params.archived,
        fields=DEFAULT_SPRINT_FIELDS,
    )
    return ToolResult.ok(
        sprint, f"Updated sprint {_label(sprint, 'name', params.sprint_id)}"
    )


# Tags and custom fields


def list_tags(fetcher: YouTrackFetcher, params: ListTagsInput) -> ToolResult:
    tags = fetcher.list_tags(
        query=params.query, skip=params.skip, top=params.top, fields=params.fields
    )
    return ToolResult.ok(tags, f"Retrieved {len(tags)} tags")


def get_tag(fetcher: YouTrackFetcher, params: GetTagInput) -> ToolResult:
    tag = fetcher.get_tag(params.tag_id, fields=params.fields)
    return ToolResult.ok(tag, f"Retrieved tag {_label(tag, 'name', params.tag_id)}")


def list_custom_fields(
    fetcher: YouTrackFetcher, params: ListCustomFieldsInput
) -> ToolResult:
    custom_fields = fetcher.list_custom_fields(
        skip=params.skip, top=params.top, fields=params.fields
    )
    return ToolResult.ok(
        custom_fields, f"Retrieved {len(custom_fields)} custom fields"
    )


def get_custom_field(
    fetcher: YouTrackFetcher, params: GetCustomFieldInput
) -> ToolResult:
    custom_field = fetcher.get_custom_field(params.field_id, fields=params.fields)
    return ToolResult.ok(
        custom_field,
        f"Retrieved custom field {_label(custom_field, 'name', params.field_id)}",
    )


# Utility and reports


def ping(fetcher: YouTrackFetcher, params: EmptyInput) -> ToolResult:
    """Probe the connection; a failed probe is reported, not raised."""
    connected = fetcher.ping()
    return ToolResult(
        success=connected,
        message=(
            "YouTrack connection successful"
            if connected
            else "YouTrack connection failed"
        ),
    )


def get_server_info(fetcher: YouTrackFetcher, params: EmptyInput) -> ToolResult:
    info = fetcher.get_server_info()
    return ToolResult.ok(info, "Retrieved YouTrack server information")


def get_project_statistics(
    fetcher: YouTrackFetcher, params: GetProjectStatisticsInput
) -> ToolResult:
    statistics = fetcher.get_project_statistics(params.project_id)
    return ToolResult.ok(
        statistics, f"Retrieved statistics for project {params.project_id}"
    )


def generate_report(
    fetcher: YouTrackFetcher, params: GenerateReportInput
) -> ToolResult:
    report = fetcher.generate_report(params.report_type, params.parameters)
    return ToolResult.ok(report, f"Generated report of type {params.report_type}")
