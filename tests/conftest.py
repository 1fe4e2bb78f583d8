"""
conftest.py

Shared fixtures. HTTP traffic is faked by replacing `send` on a real
`requests.Session` with a Mock that returns prepared `requests.Response` objects.
"""

import json
from unittest.mock import Mock

import pytest
import requests

from covalent_sdk.api.executor import RequestExecutor
from covalent_sdk.utils.config import ClientConfig

VALID_KEY = "ckey_" + "0123456789abcdef0123456789a"
BASE_URL = "https://api.covalenthq.com"


def make_response(status_code=200, payload=None, body=None, url=None):
    """Build a real requests.Response carrying a JSON payload or raw body."""
    response = requests.Response()
    response.status_code = status_code
    if body is None:
        body = json.dumps(payload if payload is not None else {"data": None, "error": False})
    response._content = body.encode("utf-8") if isinstance(body, str) else body
    response._content_consumed = True
    response.url = url
    return response


def envelope(data=None, error=False, error_code=None, error_message=None):
    """Build an envelope payload."""
    return {
        "data": data,
        "error": error,
        "error_code": error_code,
        "error_message": error_message,
    }


def page_payload(items, has_more=None, page_number=None, links=None):
    """Build a list-shaped envelope payload."""
    data = {"items": items}
    if has_more is not None or page_number is not None:
        data["pagination"] = {"has_more": has_more, "page_number": page_number}
    if links is not None:
        data["links"] = links
    return envelope(data=data)


@pytest.fixture
def client_config():
    """A valid client configuration."""
    return ClientConfig(api_key=VALID_KEY, is_key_valid=True, base_url=BASE_URL)


@pytest.fixture
def session():
    """A real session whose send() is a Mock."""
    fake = requests.Session()
    fake.send = Mock()
    return fake


@pytest.fixture
def executor(client_config, session):
    """A request executor bound to the fake session."""
    return RequestExecutor(client_config, session=session)


def sent_urls(session):
    """URLs of every request passed to the fake session, in order."""
    return [c.args[0].url for c in session.send.call_args_list]
