"""Mock responses and request helpers shared by the YouTrack unit tests."""

import json
from unittest.mock import MagicMock

BASE_URL = "https://test.youtrack.cloud"
API_URL = f"{BASE_URL}/api"


def make_response(json_data=None, status_code=200, reason="OK", text=None):
    """Build a mock ``requests.Response``."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.reason = reason
    response.headers = {"Content-Type": "application/json"}
    if text is not None:
        response.content = text.encode()
        response.text = text
        response.json.side_effect = ValueError("Expecting value")
    elif json_data is None:
        response.content = b""
        response.text = ""
        response.json.side_effect = ValueError("Expecting value")
    else:
        response.text = json.dumps(json_data)
        response.content = response.text.encode()
        response.json.return_value = json_data
    return response


def sent(fetcher):
    """Return (method, url, kwargs) of the last request sent by ``fetcher``."""
    args, kwargs = fetcher.session.request.call_args
    return args[0], args[1], kwargs
