"""YouTrack API module for youtrack_mcp.

This module provides the YouTrack REST client and its operation mixins.
"""

# flake8: noqa

from .agiles import AgilesMixin
from .attachments import AttachmentsMixin
from .client import YouTrackApiResponse, YouTrackClient
from .commands import CommandsMixin
from .comments import CommentsMixin
from .config import YouTrackConfig
from .custom_fields import CustomFieldsMixin
from .issues import IssuesMixin
from .projects import ProjectsMixin
from .reports import ReportsMixin
from .sprints import SprintsMixin
from .tags import TagsMixin
from .users import UsersMixin
from .work_items import WorkItemsMixin


class YouTrackFetcher(
    UsersMixin,
    ProjectsMixin,
    IssuesMixin,
    CommentsMixin,
    AttachmentsMixin,
    WorkItemsMixin,
    AgilesMixin,
    SprintsMixin,
    TagsMixin,
    CustomFieldsMixin,
    CommandsMixin,
    ReportsMixin,
):
    """
    The main YouTrack client class providing access to all YouTrack operations.

    This class inherits from multiple mixins that provide specific functionality:
    - UsersMixin: User and group operations
    - ProjectsMixin: Project administration
    - IssuesMixin: Issue listing, search and mutation
    - CommentsMixin: Comment operations
    - AttachmentsMixin: Attachment listing and upload
    - WorkItemsMixin: Time tracking work items
    - AgilesMixin: Agile board operations
    - SprintsMixin: Sprint operations
    - TagsMixin: Tag lookup
    - CustomFieldsMixin: Custom field settings
    - CommandsMixin: Command application
    - ReportsMixin: Statistics and reports

    Connectivity (``ping``) and server info come from ``YouTrackClient``.
    """

    pass


__all__ = ["YouTrackFetcher", "YouTrackConfig", "YouTrackClient", "YouTrackApiResponse"]
