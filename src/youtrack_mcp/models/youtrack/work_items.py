"""
Input models for the YouTrack time tracking tools.
"""

from typing import Any

from pydantic import Field, field_validator

from ..base import PaginatedInput
from .issues import IssueRef

WORK_ITEM_ID_DESCRIPTION = "Work item ID"
DURATION_ERROR = "duration must be a number of minutes or a time string"


class GetWorkItemsInput(IssueRef, PaginatedInput):
    """Arguments of ``youtrack_get_work_items``."""


class AddWorkItemInput(IssueRef):
    """Arguments of ``youtrack_add_work_item``."""

    duration: int | str = Field(
        description='Duration in minutes (number) or time string (e.g., "2h 30m")'
    )
    description: str | None = Field(default=None, description="Work description")
    date: int | None = Field(
        default=None, description="Work date as timestamp (default: current time)"
    )
    work_type: str | None = Field(
        default=None, alias="type", description="Work item type name or ID"
    )

    @field_validator("duration", mode="before")
    @classmethod
    def duration_not_bool(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError(DURATION_ERROR)
        return value


class UpdateWorkItemInput(IssueRef):
    """Arguments of ``youtrack_update_work_item``."""

    work_item_id: str = Field(alias="workItemId", description=WORK_ITEM_ID_DESCRIPTION)
    duration: int | str | None = Field(
        default=None,
        description='Updated duration in minutes (number) or time string (e.g., "2h 30m")',
    )
    description: str | None = Field(
        default=None, description="Updated work description"
    )
    date: int | None = Field(default=None, description="Updated work date as timestamp")
    work_type: str | None = Field(
        default=None, alias="type", description="Updated work item type name or ID"
    )

    @field_validator("duration", mode="before")
    @classmethod
    def duration_not_bool(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError(DURATION_ERROR)
        return value


class DeleteWorkItemInput(IssueRef):
    """Arguments of ``youtrack_delete_work_item``."""

    work_item_id: str = Field(alias="workItemId", description=WORK_ITEM_ID_DESCRIPTION)
