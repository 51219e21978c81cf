"""
Input models for the YouTrack agile board and sprint tools.
"""

from pydantic import Field

from youtrack_mcp.youtrack.constants import DEFAULT_AGILE_FIELDS, DEFAULT_SPRINT_FIELDS

from ..base import FIELDS_DESCRIPTION, PaginatedInput, ToolInput

BOARD_ID_DESCRIPTION = "Agile board ID"


class BoardRef(ToolInput):
    """Arguments that identify an agile board."""

    board_id: str = Field(alias="boardId", description=BOARD_ID_DESCRIPTION)


class ListAgileBoardsInput(PaginatedInput):
    """Arguments of ``youtrack_list_agile_boards``."""

    fields: str = Field(default=DEFAULT_AGILE_FIELDS, description=FIELDS_DESCRIPTION)


class GetAgileBoardInput(BoardRef):
    """Arguments of ``youtrack_get_agile_board``."""

    fields: str = Field(default=DEFAULT_AGILE_FIELDS, description=FIELDS_DESCRIPTION)


class CreateAgileBoardInput(ToolInput):
    """Arguments of ``youtrack_create_agile_board``."""

    name: str = Field(description="Board name")
    projects: list[str] = Field(
        description="List of project IDs to include in the board"
    )


class UpdateAgileBoardInput(BoardRef):
    """Arguments of ``youtrack_update_agile_board``."""

    name: str | None = Field(default=None, description="Updated board name")
    projects: list[str] | None = Field(
        default=None, description="Updated list of project IDs"
    )


class ListSprintsInput(BoardRef, PaginatedInput):
    """Arguments of ``youtrack_list_sprints``."""

    fields: str = Field(default=DEFAULT_SPRINT_FIELDS, description=FIELDS_DESCRIPTION)


class SprintRef(BoardRef):
    """Arguments that identify one sprint of a board."""

    sprint_id: str = Field(alias="sprintId", description="Sprint ID")


class GetSprintInput(SprintRef):
    """Arguments of ``youtrack_get_sprint``."""

    fields: str = Field(default=DEFAULT_SPRINT_FIELDS, description=FIELDS_DESCRIPTION)


class CreateSprintInput(BoardRef):
    """Arguments of ``youtrack_create_sprint``."""

    name: str = Field(description="Sprint name")
    goal: str | None = Field(default=None, description="Sprint goal")
    start: int | None = Field(
        default=None, description="Sprint start date as timestamp"
    )
    finish: int | None = Field(default=None, description="Sprint end date as timestamp")


class UpdateSprintInput(SprintRef):
    """Arguments of ``youtrack_update_sprint``."""

    name: str | None = Field(default=None, description="Updated sprint name")
    goal: str | None = Field(default=None, description="Updated sprint goal")
    start: int | None = Field(
        default=None, description="Updated sprint start date as timestamp"
    )
    finish: int | None = Field(
        default=None, description="Updated sprint end date as timestamp"
    )
    archived: bool | None = Field(
        default=None, description="Whether the sprint should be archived"
    )
