"""
Result envelope returned by every YouTrack tool.
"""

import json
from typing import Any

from pydantic import BaseModel


class ToolResult(BaseModel):
    """
    The ``{success, data, message, error}`` envelope of a tool call.

    A successful call carries ``data`` and usually a ``message``; a failed
    call carries ``error`` and ``success=False``.
    """

    success: bool
    data: Any = None
    message: str | None = None
    error: str | None = None

    @classmethod
    def ok(cls, data: Any = None, message: str | None = None) -> "ToolResult":
        """Build a successful result."""
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, error: str) -> "ToolResult":
        """Build a failed result."""
        return cls(success=False, error=error)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the envelope to a plain dictionary.

        Top-level keys that are None are omitted; the payload itself is
        passed through untouched.

        Returns:
            The envelope as a dictionary
        """
        envelope = {
            "success": self.success,
            "data": self.data,
            "message": self.message,
            "error": self.error,
        }
        return {key: value for key, value in envelope.items() if value is not None}

    def to_json(self) -> str:
        """Serialize the envelope as indented JSON text."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
