"""Module for YouTrack statistics and report operations."""

from typing import Any

from .client import YouTrackClient
from .utils import path_segment


class ReportsMixin(YouTrackClient):
    """Mixin for YouTrack project statistics and reports."""

    def get_project_statistics(self, project_id: str) -> Any:
        """Get the statistics of a project."""
        return self.request(
            "GET", f"/admin/projects/{path_segment(project_id)}/statistics"
        ).data

    def generate_report(
        self, report_type: str, parameters: dict[str, Any] | None = None
    ) -> Any:
        """
        Generate a report.

        Args:
            report_type: Report type, used as the last path segment
            parameters: Optional report parameters sent as the JSON body

        Returns:
            The generated report
        """
        return self.request(
            "POST", f"/reports/{path_segment(report_type)}", body=parameters
        ).data
