"""
Input models for the YouTrack command, report and utility tools.
"""

from typing import Any

from pydantic import Field

from ..base import ToolInput
from .issues import IssueRef


class GetIssueCommandsInput(IssueRef):
    """Arguments of ``youtrack_get_issue_commands``."""


class ApplyCommandInput(IssueRef):
    """Arguments of ``youtrack_apply_workflow_command``."""

    command: str = Field(
        description='Workflow command (e.g., "assignee me", "state Fixed")'
    )
    comment: str | None = Field(
        default=None, description="Optional comment to add with the command"
    )


class GenerateReportInput(ToolInput):
    """Arguments of ``youtrack_generate_report``."""

    report_type: str = Field(
        alias="reportType", description="Type of report to generate"
    )
    parameters: dict[str, Any] | None = Field(
        default=None, description="Report-specific parameters"
    )


class EmptyInput(ToolInput):
    """Tools that take no arguments."""
