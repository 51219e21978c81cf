"""
Pydantic models for the YouTrack MCP tools.

This package provides the input model of every tool and the result
envelope the tools return.
"""

from .base import PaginatedInput, ToolInput
from .results import ToolResult

__all__ = ["PaginatedInput", "ToolInput", "ToolResult"]
