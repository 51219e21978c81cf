"""Module for YouTrack tag operations."""

from typing import Any

from .client import YouTrackClient
from .utils import fields_params, pagination_params, path_segment


class TagsMixin(YouTrackClient):
    """Mixin for YouTrack tag operations."""

    def list_tags(
        self,
        query: str | None = None,
        skip: int | None = None,
        top: int | None = None,
        fields: str | None = None,
    ) -> list[dict[str, Any]]:
        """List the tags visible to the current user."""
        params = pagination_params(skip, top, fields)
        if query is not None:
            params["query"] = query
        return self.request("GET", "/tags", query=params).data or []

    def get_tag(self, tag_id: str, fields: str | None = None) -> dict[str, Any]:
        """Get a tag by id."""
        return self.request(
            "GET", f"/tags/{path_segment(tag_id)}", query=fields_params(fields)
        ).data
