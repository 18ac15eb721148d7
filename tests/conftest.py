"""Pytest configuration and fixtures for helpdesk-client tests."""

import pytest
import httpx
import respx
from typing import Any, Dict, Optional
from unittest.mock import MagicMock

from helpdesk_client.client import HelpdeskClient
from helpdesk_client.http import HTTPClient


# ============================================================================
# Mock HTTP Responses
# ============================================================================


def create_mock_response(
    status_code: int = 200,
    json_data: Optional[Any] = None,
    text: str = "",
    headers: Optional[Dict[str, str]] = None,
) -> httpx.Response:
    """Create a mock httpx.Response for testing."""
    response = MagicMock(spec=httpx.Response)
    response.status_code = status_code
    response.is_success = 200 <= status_code < 300
    response.text = text if text else (str(json_data) if json_data else "")
    response.headers = headers or {}

    if json_data is not None:
        response.json.return_value = json_data
    else:
        response.json.side_effect = ValueError("No JSON content")

    return response


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def base_url():
    """Default account URL for testing."""
    return "https://example.zendesk.com"


@pytest.fixture
def mock_http():
    """HTTP client double recording do_* dispatch calls."""
    return MagicMock(spec=HTTPClient)


@pytest.fixture
def client(base_url, mock_http):
    """Client dispatching through the mocked HTTP client."""
    return HelpdeskClient(base_url, http_client=mock_http)


@pytest.fixture
def mock_user_data():
    """Mock user record."""
    return {
        "id": 123,
        "name": "Mr. Miyagi",
        "email": "miyagi@example.com",
        "role": "end-user",
    }


@pytest.fixture
def mock_users_list(mock_user_data):
    """Mock users listing."""
    return {
        "users": [
            mock_user_data,
            {"id": 124, "name": "Daniel LaRusso", "email": "daniel@example.com", "role": "end-user"},
        ],
        "next_page": None,
        "count": 2,
    }


@pytest.fixture
def api():
    """respx router intercepting all httpx traffic."""
    with respx.mock(assert_all_called=False) as router:
        yield router
