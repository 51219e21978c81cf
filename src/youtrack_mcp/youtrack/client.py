"""Base client module for YouTrack API interactions."""

import logging
from dataclasses import dataclass, field
from typing import Any

import requests
from requests import Session
from requests.auth import HTTPBasicAuth

from youtrack_mcp.exceptions import YouTrackApiError, YouTrackAuthenticationError
from youtrack_mcp.utils.ssl import configure_ssl_verification

from .config import YouTrackConfig
from .utils import clean_params, extract_error_message

# Configure logging
logger = logging.getLogger("mcp-youtrack")

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
    "Cache-Control": "no-cache",
}


@dataclass
class YouTrackApiResponse:
    """A successful response from the YouTrack API."""

    data: Any
    status: int
    status_text: str
    headers: dict[str, str] = field(default_factory=dict)


class YouTrackClient:
    """Base client for YouTrack API interactions.

    Owns one ``requests.Session`` configured from an immutable
    ``YouTrackConfig``. Every catalog method goes through ``request``.
    """

    config: YouTrackConfig
    session: Session

    def __init__(self, config: YouTrackConfig | None = None) -> None:
        """Initialize the YouTrack client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)

        Raises:
            ValueError: If configuration is invalid or required credentials are missing
        """
        self.config = config or YouTrackConfig.from_env()
        self.base_url = self.config.api_url

        self.session = Session()
        self.session.headers.update(DEFAULT_HEADERS)

        if self.config.auth_type == "token":
            if not self.config.token:
                error_msg = "Token authentication requires a YouTrack token"
                raise ValueError(error_msg)
            self.session.headers["Authorization"] = f"Bearer {self.config.token}"
        else:  # basic auth, applied by requests on every call
            if not (self.config.username and self.config.password):
                error_msg = "Basic authentication requires a username and password"
                raise ValueError(error_msg)
            self.session.auth = HTTPBasicAuth(
                self.config.username, self.config.password
            )

        if self.config.cf_access_client_id:
            self.session.headers["CF-Access-Client-Id"] = (
                self.config.cf_access_client_id
            )
        if self.config.cf_access_client_secret:
            self.session.headers["CF-Access-Client-Secret"] = (
                self.config.cf_access_client_secret
            )

        proxies = {}
        if self.config.http_proxy:
            proxies["http"] = self.config.http_proxy
        if self.config.https_proxy:
            proxies["https"] = self.config.https_proxy
        if self.config.no_proxy:
            proxies["no_proxy"] = self.config.no_proxy
        if proxies:
            self.session.proxies.update(proxies)

        configure_ssl_verification(
            url=self.config.url,
            session=self.session,
            ssl_verify=self.config.ssl_verify,
        )

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _send(self, method: str, path: str, **kwargs: Any) -> YouTrackApiResponse:
        """Perform one HTTP call and normalize every failure to YouTrackApiError."""
        try:
            response = self.session.request(
                method,
                self._url(path),
                timeout=self.config.timeout_seconds,
                **kwargs,
            )
        except requests.RequestException as e:
            if self.config.debug:
                logger.error(f"YouTrack API Error: {method} {path}: {e}")
            raise YouTrackApiError(str(e) or "Unknown YouTrack API error") from e

        if not response.ok:
            try:
                error_body = response.json()
            except ValueError:
                error_body = None
            fallback = (
                f"Request failed with status code {response.status_code}"
                + (f": {response.reason}" if response.reason else "")
            )
            message = extract_error_message(error_body, fallback)
            if self.config.debug:
                logger.error(
                    f"YouTrack API Error: {method} {path}: {error_body or response.text}"
                )
            error_cls = (
                YouTrackAuthenticationError
                if response.status_code in (401, 403)
                else YouTrackApiError
            )
            raise error_cls(message, status_code=response.status_code)

        data: Any = None
        if response.content:
            try:
                data = response.json()
            except ValueError as e:
                if self.config.debug:
                    logger.error(f"YouTrack API Error: malformed body for {path}")
                raise YouTrackApiError(
                    f"Malformed response from YouTrack: {e}",
                    status_code=response.status_code,
                ) from e

        return YouTrackApiResponse(
            data=data,
            status=response.status_code,
            status_text=response.reason or "",
            headers=dict(response.headers),
        )

    def request(
        self,
        method: str,
        path: str,
        body: Any | None = None,
        query: dict[str, Any] | None = None,
    ) -> YouTrackApiResponse:
        """Send one authenticated request to the YouTrack REST API.

        Args:
            method: HTTP method (GET, POST, DELETE)
            path: Path relative to the /api root (e.g. '/issues/DEMO-1')
            body: Optional JSON body
            query: Optional query parameters; keys with None values are dropped

        Returns:
            The parsed response

        Raises:
            YouTrackApiError: On network failure, non-2xx status or malformed body
        """
        kwargs: dict[str, Any] = {}
        params = clean_params(query)
        if params:
            kwargs["params"] = params
        if body is not None:
            kwargs["json"] = body
        logger.debug(f"YouTrack request: {method} {path} params={params}")
        return self._send(method, path, **kwargs)

    def upload(
        self, path: str, filename: str, content: bytes
    ) -> YouTrackApiResponse:
        """Upload a single file as multipart/form-data.

        Args:
            path: Path relative to the /api root
            filename: Name of the file as stored by YouTrack
            content: Raw file bytes

        Returns:
            The parsed response

        Raises:
            YouTrackApiError: On network failure, non-2xx status or malformed body
        """
        logger.debug(f"YouTrack upload: POST {path} file={filename}")
        # A None header value removes the JSON default so requests sets the boundary
        return self._send(
            "POST",
            path,
            files={"file": (filename, content)},
            headers={"Content-Type": None},
        )

    def ping(self) -> bool:
        """Check connectivity and credentials by fetching the current user.

        Returns:
            True if the probe succeeds, False on any API error
        """
        try:
            self.request("GET", "/users/me")
            return True
        except YouTrackApiError as e:
            logger.warning(f"YouTrack ping failed: {e}")
            return False

    def get_server_info(self) -> dict[str, Any]:
        """Get the global configuration of the YouTrack server."""
        return self.request("GET", "/config").data
