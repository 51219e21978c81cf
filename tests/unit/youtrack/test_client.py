"""Tests for the YouTrack transport client."""

from unittest.mock import MagicMock, patch

import pytest
import requests
from requests.auth import HTTPBasicAuth

from youtrack_mcp.exceptions import YouTrackApiError, YouTrackAuthenticationError
from youtrack_mcp.utils.ssl import SSLIgnoreAdapter
from youtrack_mcp.youtrack.client import YouTrackClient
from youtrack_mcp.youtrack.config import YouTrackConfig

from tests.fixtures.youtrack_mocks import API_URL, BASE_URL, make_response, sent


@pytest.fixture
def client(youtrack_config):
    yt_client = YouTrackClient(config=youtrack_config)
    yt_client.session = MagicMock()
    return yt_client


def test_init_with_token(youtrack_config):
    """Test that token auth sets the bearer header and default headers."""
    client = YouTrackClient(config=youtrack_config)
    assert client.base_url == API_URL
    assert client.session.headers["Authorization"] == "Bearer perm:test-token"
    assert client.session.headers["Accept"] == "application/json"
    assert client.session.headers["Content-Type"] == "application/json"
    assert client.session.headers["Cache-Control"] == "no-cache"
    assert client.session.auth is None


def test_init_with_basic_auth():
    """Test that basic auth is handed to requests."""
    config = YouTrackConfig(
        url=BASE_URL, auth_type="basic", username="user", password="secret"
    )
    client = YouTrackClient(config=config)
    assert "Authorization" not in client.session.headers
    assert isinstance(client.session.auth, HTTPBasicAuth)
    assert client.session.auth.username == "user"
    assert client.session.auth.password == "secret"


def test_init_basic_auth_requires_password():
    config = YouTrackConfig(url=BASE_URL, auth_type="basic", username="user")
    with pytest.raises(ValueError, match="username and password"):
        YouTrackClient(config=config)


def test_init_cf_access_headers_and_proxies():
    """Test proxy-access headers and proxies are applied to the session."""
    config = YouTrackConfig(
        url=BASE_URL,
        auth_type="token",
        token="t",
        cf_access_client_id="cf-id",
        cf_access_client_secret="cf-secret",
        http_proxy="http://proxy:3128",
        https_proxy="http://secure-proxy:3128",
    )
    client = YouTrackClient(config=config)
    assert client.session.headers["CF-Access-Client-Id"] == "cf-id"
    assert client.session.headers["CF-Access-Client-Secret"] == "cf-secret"
    assert client.session.proxies["http"] == "http://proxy:3128"
    assert client.session.proxies["https"] == "http://secure-proxy:3128"


def test_init_without_ssl_verification():
    config = YouTrackConfig(url=BASE_URL, auth_type="token", token="t", ssl_verify=False)
    client = YouTrackClient(config=config)
    assert isinstance(client.session.get_adapter(f"{BASE_URL}/api"), SSLIgnoreAdapter)


def test_request_builds_url_and_drops_none_params(client):
    """Test that None query values are never sent and falsy ones are kept."""
    client.session.request.return_value = make_response({"id": "1"})

    response = client.request(
        "GET", "/issues", query={"fields": "id", "$skip": 0, "query": None}
    )

    method, url, kwargs = sent(client)
    assert method == "GET"
    assert url == f"{API_URL}/issues"
    assert kwargs["params"] == {"fields": "id", "$skip": 0}
    assert kwargs["timeout"] == 30.0
    assert "json" not in kwargs
    assert response.data == {"id": "1"}
    assert response.status == 200
    assert response.status_text == "OK"


def test_request_sends_json_body(client):
    client.session.request.return_value = make_response({"id": "1"})

    client.request("POST", "/issues", body={"summary": "Bug"})

    _, _, kwargs = sent(client)
    assert kwargs["json"] == {"summary": "Bug"}
    assert "params" not in kwargs


def test_request_empty_body_yields_none(client):
    """Test that an empty 2xx body (e.g. DELETE) gives data=None."""
    client.session.request.return_value = make_response(None)

    response = client.request("DELETE", "/issues/DEMO-1")

    assert response.data is None


def test_request_error_uses_error_description(client):
    """Test that the error description wins over the error code."""
    client.session.request.return_value = make_response(
        {"error": "Not Found", "error_description": "Issue not found"},
        status_code=404,
        reason="Not Found",
    )

    with pytest.raises(YouTrackApiError) as excinfo:
        client.request("GET", "/issues/NOPE-1")

    assert excinfo.value.message == "Issue not found"
    assert excinfo.value.status_code == 404
    assert str(excinfo.value) == "Issue not found"


def test_request_error_falls_back_to_error(client):
    client.session.request.return_value = make_response(
        {"error": "Bad Request"}, status_code=400, reason="Bad Request"
    )

    with pytest.raises(YouTrackApiError, match="Bad Request"):
        client.request("GET", "/issues")


def test_request_error_without_body(client):
    """Test the fallback message when the error body is not JSON."""
    client.session.request.return_value = make_response(
        status_code=500, reason="Internal Server Error", text="<html>oops</html>"
    )

    with pytest.raises(YouTrackApiError) as excinfo:
        client.request("GET", "/issues")

    assert excinfo.value.message == (
        "Request failed with status code 500: Internal Server Error"
    )


@pytest.mark.parametrize("status_code", [401, 403])
def test_request_auth_errors(client, status_code):
    client.session.request.return_value = make_response(
        {"error": "Unauthorized"}, status_code=status_code, reason="Unauthorized"
    )

    with pytest.raises(YouTrackAuthenticationError) as excinfo:
        client.request("GET", "/users/me")

    assert excinfo.value.status_code == status_code


def test_request_network_failure(client):
    client.session.request.side_effect = requests.ConnectionError("Connection refused")

    with pytest.raises(YouTrackApiError) as excinfo:
        client.request("GET", "/issues")

    assert excinfo.value.message == "Connection refused"
    assert excinfo.value.status_code is None


def test_request_malformed_success_body(client):
    client.session.request.return_value = make_response(text="not json")

    with pytest.raises(YouTrackApiError, match="Malformed response from YouTrack"):
        client.request("GET", "/issues")


def test_request_debug_logs_errors(youtrack_config):
    config = YouTrackConfig(url=BASE_URL, auth_type="token", token="t", debug=True)
    client = YouTrackClient(config=config)
    client.session = MagicMock()
    client.session.request.return_value = make_response(
        {"error": "Not Found"}, status_code=404, reason="Not Found"
    )

    with patch("youtrack_mcp.youtrack.client.logger") as mock_logger:
        with pytest.raises(YouTrackApiError):
            client.request("GET", "/issues/X-1")

    mock_logger.error.assert_called_once()
    assert "Not Found" in mock_logger.error.call_args[0][0]


def test_upload_sends_multipart(client):
    """Test that upload posts one file part without the JSON content type."""
    client.session.request.return_value = make_response([{"id": "att-1"}])

    response = client.upload("/issues/DEMO-1/attachments", "log.txt", b"hello")

    method, url, kwargs = sent(client)
    assert method == "POST"
    assert url == f"{API_URL}/issues/DEMO-1/attachments"
    assert kwargs["files"] == {"file": ("log.txt", b"hello")}
    assert kwargs["headers"] == {"Content-Type": None}
    assert response.data == [{"id": "att-1"}]


def test_ping_success(client):
    client.session.request.return_value = make_response({"login": "admin"})

    assert client.ping() is True
    _, url, _ = sent(client)
    assert url == f"{API_URL}/users/me"


def test_ping_failure(client):
    client.session.request.return_value = make_response(
        {"error": "Unauthorized"}, status_code=401, reason="Unauthorized"
    )

    assert client.ping() is False


def test_get_server_info(client):
    client.session.request.return_value = make_response({"version": "2024.3"})

    assert client.get_server_info() == {"version": "2024.3"}
    _, url, _ = sent(client)
    assert url == f"{API_URL}/config"
