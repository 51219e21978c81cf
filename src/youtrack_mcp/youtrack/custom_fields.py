"""Module for YouTrack global custom field operations."""

from typing import Any

from .client import YouTrackClient
from .utils import fields_params, pagination_params, path_segment

CUSTOM_FIELDS_PATH = "/admin/customFieldSettings/customFields"


class CustomFieldsMixin(YouTrackClient):
    """Mixin for YouTrack custom field settings."""

    def list_custom_fields(
        self,
        skip: int | None = None,
        top: int | None = None,
        fields: str | None = None,
    ) -> list[dict[str, Any]]:
        """List the custom fields defined on the server."""
        return (
            self.request(
                "GET", CUSTOM_FIELDS_PATH, query=pagination_params(skip, top, fields)
            ).data
            or []
        )

    def get_custom_field(
        self, field_id: str, fields: str | None = None
    ) -> dict[str, Any]:
        """Get a custom field definition by id."""
        return self.request(
            "GET",
            f"{CUSTOM_FIELDS_PATH}/{path_segment(field_id)}",
            query=fields_params(fields),
        ).data
