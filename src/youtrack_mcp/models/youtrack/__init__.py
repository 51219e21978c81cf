"""
YouTrack tool input models.

One model per tool; the camelCase argument names used by MCP clients
are aliases of the snake_case attributes.
"""

from .agiles import (
    CreateAgileBoardInput,
    CreateSprintInput,
    GetAgileBoardInput,
    GetSprintInput,
    ListAgileBoardsInput,
    ListSprintsInput,
    UpdateAgileBoardInput,
    UpdateSprintInput,
)
from .comments import (
    AddAttachmentInput,
    AddCommentInput,
    DeleteCommentInput,
    GetAttachmentsInput,
    GetCommentsInput,
    UpdateCommentInput,
)
from .fields import (
    GetCustomFieldInput,
    GetTagInput,
    ListCustomFieldsInput,
    ListTagsInput,
)
from .issues import (
    CreateIssueInput,
    DeleteIssueInput,
    GetIssueInput,
    ListIssuesInput,
    SearchIssuesInput,
    UpdateIssueInput,
)
from .projects import (
    CreateProjectInput,
    DeleteProjectInput,
    GetProjectCustomFieldsInput,
    GetProjectInput,
    GetProjectStatisticsInput,
    ListProjectsInput,
    UpdateProjectInput,
)
from .users import (
    GetCurrentUserInput,
    GetGroupInput,
    GetUserInput,
    ListGroupsInput,
    ListUsersInput,
)
from .work_items import (
    AddWorkItemInput,
    DeleteWorkItemInput,
    GetWorkItemsInput,
    UpdateWorkItemInput,
)
from .workflow import (
    ApplyCommandInput,
    EmptyInput,
    GenerateReportInput,
    GetIssueCommandsInput,
)

__all__ = [
    "AddAttachmentInput",
    "AddCommentInput",
    "AddWorkItemInput",
    "ApplyCommandInput",
    "CreateAgileBoardInput",
    "CreateIssueInput",
    "CreateProjectInput",
    "CreateSprintInput",
    "DeleteCommentInput",
    "DeleteIssueInput",
    "DeleteProjectInput",
    "DeleteWorkItemInput",
    "EmptyInput",
    "GenerateReportInput",
    "GetAgileBoardInput",
    "GetAttachmentsInput",
    "GetCommentsInput",
    "GetCurrentUserInput",
    "GetCustomFieldInput",
    "GetGroupInput",
    "GetIssueCommandsInput",
    "GetIssueInput",
    "GetProjectCustomFieldsInput",
    "GetProjectInput",
    "GetProjectStatisticsInput",
    "GetSprintInput",
    "GetTagInput",
    "GetUserInput",
    "GetWorkItemsInput",
    "ListAgileBoardsInput",
    "ListCustomFieldsInput",
    "ListGroupsInput",
    "ListIssuesInput",
    "ListProjectsInput",
    "ListSprintsInput",
    "ListTagsInput",
    "ListUsersInput",
    "SearchIssuesInput",
    "UpdateAgileBoardInput",
    "UpdateCommentInput",
    "UpdateIssueInput",
    "UpdateProjectInput",
    "UpdateSprintInput",
    "UpdateWorkItemInput",
]
