"""Logging utilities for the YouTrack MCP server.

All output goes to stderr so that the stdio transport's stdout stays a
clean JSON-RPC channel.
"""

import logging
import sys

APP_LOGGER = "mcp-youtrack"
LOG_FORMAT = "%(levelname)s - %(name)s - %(message)s"
NOT_PROVIDED = "Not Provided"

# Loggers whose level follows the CLI verbosity
APP_LOGGERS = (
    APP_LOGGER,
    "mcp.server",
    "mcp.server.lowlevel.server",
)


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Route all logging to a single stderr handler at the given level.

    Calling it again replaces the handler instead of adding a second one.

    Args:
        level: The minimum logging level to display (default: WARNING)

    Returns:
        The ``mcp-youtrack`` application logger
    """
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)
    root_logger.addHandler(stderr_handler)
    root_logger.setLevel(level)

    for name in APP_LOGGERS:
        logging.getLogger(name).setLevel(level)

    return logging.getLogger(APP_LOGGER)


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Hide the middle of a secret, e.g. 'perm*********1234'.

    Secrets no longer than ``2 * keep_chars`` are masked completely.
    """
    if not value:
        return NOT_PROVIDED
    hidden = len(value) - keep_chars * 2
    if hidden <= 0:
        return "*" * len(value)
    return value[:keep_chars] + "*" * hidden + value[-keep_chars:]


def log_config_param(
    logger: logging.Logger,
    param: str,
    value: str | None,
    sensitive: bool = False,
) -> None:
    """Log one YouTrack setting at INFO, masking secrets."""
    if sensitive:
        shown = mask_sensitive(value)
    else:
        shown = value or NOT_PROVIDED
    logger.info(f"YouTrack {param}: {shown}")
