"""Configuration module for YouTrack API interactions."""

import logging
import os
from dataclasses import dataclass
from typing import Literal

from ..utils.io import is_env_truthy
from ..utils.urls import normalize_base_url

DEFAULT_TIMEOUT_MS = 30000
DEFAULT_MAX_RETRIES = 3


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        error_msg = f"{name} must be an integer, got '{raw}'"
        raise ValueError(error_msg) from e


@dataclass(frozen=True)
class YouTrackConfig:
    """YouTrack API configuration.

    Authentication is either a permanent token (sent as a Bearer header) or
    a username/password pair (sent as HTTP basic auth). The instance is
    immutable once created and shared by every catalog operation.
    """

    url: str  # Base URL of the YouTrack instance, without the /api suffix
    auth_type: Literal["token", "basic"]
    token: str | None = None  # Permanent token
    username: str | None = None
    password: str | None = None
    timeout: int = DEFAULT_TIMEOUT_MS  # Request timeout in milliseconds
    max_retries: int = DEFAULT_MAX_RETRIES  # Accepted but not used by the transport
    debug: bool = False  # Log every API error body
    ssl_verify: bool = True
    cf_access_client_id: str | None = None  # Cloudflare Access service token id
    cf_access_client_secret: str | None = None
    http_proxy: str | None = None
    https_proxy: str | None = None
    no_proxy: str | None = None

    @property
    def api_url(self) -> str:
        """Root of the REST API, e.g. https://example.youtrack.cloud/api."""
        return f"{normalize_base_url(self.url)}/api"

    @property
    def timeout_seconds(self) -> float:
        return self.timeout / 1000

    @classmethod
    def from_env(cls) -> "YouTrackConfig":
        """Create configuration from environment variables.

        Returns:
            YouTrackConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing or invalid
        """
        url = os.getenv("YOUTRACK_BASE_URL") or os.getenv("YOUTRACK_URL")
        if not url:
            error_msg = "Missing required YOUTRACK_BASE_URL environment variable"
            raise ValueError(error_msg)

        token = os.getenv("YOUTRACK_TOKEN")
        username = os.getenv("YOUTRACK_USERNAME")
        password = os.getenv("YOUTRACK_PASSWORD")

        # Username/password takes precedence over a token when both are set
        if username and password:
            auth_type = "basic"
            token = None
        elif token:
            auth_type = "token"
            username = None
            password = None
        else:
            error_msg = (
                "YouTrack authentication requires YOUTRACK_TOKEN, "
                "or both YOUTRACK_USERNAME and YOUTRACK_PASSWORD"
            )
            raise ValueError(error_msg)

        return cls(
            url=normalize_base_url(url),
            auth_type=auth_type,
            token=token,
            username=username,
            password=password,
            timeout=_env_int("YOUTRACK_REQUEST_TIMEOUT", DEFAULT_TIMEOUT_MS),
            max_retries=_env_int("YOUTRACK_MAX_RETRIES", DEFAULT_MAX_RETRIES),
            debug=is_env_truthy("YOUTRACK_DEBUG"),
            ssl_verify=is_env_truthy("YOUTRACK_SSL_VERIFY", "true"),
            cf_access_client_id=os.getenv("CF_ACCESS_CLIENT_ID"),
            cf_access_client_secret=os.getenv("CF_ACCESS_CLIENT_SECRET"),
            http_proxy=os.getenv("YOUTRACK_HTTP_PROXY", os.getenv("HTTP_PROXY")),
            https_proxy=os.getenv("YOUTRACK_HTTPS_PROXY", os.getenv("HTTPS_PROXY")),
            no_proxy=os.getenv("YOUTRACK_NO_PROXY", os.getenv("NO_PROXY")),
        )

    def is_auth_configured(self) -> bool:
        """Check if the authentication configuration is complete.

        Returns:
            bool: True if authentication is fully configured, False otherwise.
        """
        logger = logging.getLogger("mcp-youtrack.config")
        if self.auth_type == "token":
            return bool(self.token)
        elif self.auth_type == "basic":
            return bool(self.username and self.password)
        logger.warning(
            f"Unknown or unsupported auth_type: {self.auth_type} in YouTrackConfig"
        )
        return False
