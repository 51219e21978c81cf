"""SSL-related utility functions for the YouTrack MCP server."""

import logging
import ssl
from typing import Any
from urllib.parse import urlparse

from requests.adapters import HTTPAdapter
from requests.sessions import Session
from urllib3.poolmanager import PoolManager

logger = logging.getLogger("mcp-youtrack")


class SSLIgnoreAdapter(HTTPAdapter):
    """HTTP adapter that skips certificate and hostname checks.

    Mounted only for the configured YouTrack host when the user turns SSL
    verification off, typically for self-hosted instances behind a
    self-signed certificate.
    """

    def init_poolmanager(
        self, connections: int, maxsize: int, block: bool = False, **pool_kwargs: Any
    ) -> None:
        unverified = ssl.create_default_context()
        # check_hostname must be cleared before verify_mode can be CERT_NONE
        unverified.check_hostname = False
        unverified.verify_mode = ssl.CERT_NONE
        pool_kwargs["ssl_context"] = unverified
        self.poolmanager = PoolManager(
            num_pools=connections, maxsize=maxsize, block=block, **pool_kwargs
        )

    def cert_verify(self, conn: Any, url: str, verify: bool, cert: Any | None) -> None:
        super().cert_verify(conn, url, verify=False, cert=cert)


def configure_ssl_verification(url: str, session: Session, ssl_verify: bool) -> None:
    """Mount an SSLIgnoreAdapter on the session when verification is off.

    Args:
        url: The base URL of the YouTrack instance
        session: The requests session to configure
        ssl_verify: Whether SSL verification should be enabled
    """
    if ssl_verify:
        return

    logger.warning(
        "YouTrack SSL verification disabled. This is insecure and should only be used in testing environments."
    )
    host = urlparse(url).netloc
    adapter = SSLIgnoreAdapter()
    for scheme in ("https", "http"):
        session.mount(f"{scheme}://{host}", adapter)
    session.verify = False
