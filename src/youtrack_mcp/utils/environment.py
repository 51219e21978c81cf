"""Utility functions related to environment checking."""

import logging
import os

from .urls import is_youtrack_cloud_url

logger = logging.getLogger("mcp-youtrack.utils.environment")


def is_youtrack_configured() -> bool:
    """Determine whether the environment carries a usable YouTrack setup.

    A base URL plus either a permanent token or a username/password pair
    is required.
    """
    url = os.getenv("YOUTRACK_BASE_URL") or os.getenv("YOUTRACK_URL")
    if not url:
        logger.info("YouTrack is not configured: YOUTRACK_BASE_URL is missing.")
        return False

    deployment = "Cloud" if is_youtrack_cloud_url(url) else "Server"
    if os.getenv("YOUTRACK_TOKEN"):
        logger.info(f"Using YouTrack {deployment} permanent token authentication")
        return True
    if os.getenv("YOUTRACK_USERNAME") and os.getenv("YOUTRACK_PASSWORD"):
        logger.info(f"Using YouTrack {deployment} basic authentication")
        return True

    logger.info(
        "YouTrack is not configured or required environment variables are missing."
    )
    return False
