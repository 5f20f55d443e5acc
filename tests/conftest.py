"""Shared fixtures for the ONTRAPORT client tests."""

import json
from unittest.mock import Mock

import httpx
import pytest

from ontraport.core.models import Configuration


SAMPLE_META = {
    "code": 0,
    "data": {
        "0": {
            "name": "Contact",
            "fields": {
                "firstname": {"alias": "First Name", "type": "text"},
                "email": {"alias": "Email", "type": "email"},
            },
        },
        "14": {"name": "Tag", "fields": {"tag_name": {"alias": "Name", "type": "text"}}},
        "10000": {"name": "Custom Widget", "fields": {}},
    },
    "account_id": "12345",
}


def make_response(status_code=200, json_data=None, reason_phrase="OK", text=None):
    """Build a mock httpx.Response."""
    response = Mock(spec=httpx.Response)
    response.status_code = status_code
    response.reason_phrase = reason_phrase
    if text is None:
        text = json.dumps(json_data) if json_data is not None else ""
    response.text = text
    response.content = text.encode()
    response.json.side_effect = lambda: json.loads(text)
    response.request = Mock(spec=httpx.Request)
    return response


@pytest.fixture
def configuration():
    """Create a test configuration."""
    return Configuration(api_id="test_app_id", api_key="test_api_key")


@pytest.fixture
def sample_meta():
    """Sample /objects/meta response."""
    return json.loads(json.dumps(SAMPLE_META))


@pytest.fixture
def mock_http_client():
    """Create a mock HTTP client."""
    return Mock(spec=httpx.Client)
