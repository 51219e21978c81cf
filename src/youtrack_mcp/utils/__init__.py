"""
Utility functions for the YouTrack MCP server.
"""

from .io import is_read_only_mode
from .logging import mask_sensitive, setup_logging
from .ssl import SSLIgnoreAdapter, configure_ssl_verification
from .urls import is_youtrack_cloud_url, normalize_base_url

__all__ = [
    "SSLIgnoreAdapter",
    "configure_ssl_verification",
    "is_read_only_mode",
    "is_youtrack_cloud_url",
    "mask_sensitive",
    "normalize_base_url",
    "setup_logging",
]
