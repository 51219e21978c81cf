from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from youtrack_mcp.youtrack import YouTrackFetcher


@dataclass(frozen=True)
class MainAppContext:
    """
    Context holding the YouTrack client built from environment variables
    at server startup, together with the tool filters.
    """

    youtrack: YouTrackFetcher | None = None
    read_only: bool = False
    enabled_tools: list[str] | None = None
