"""
Shared pytest fixtures for Intervals.icu client testing.
"""
import json
import pytest
from unittest.mock import patch

import requests

from intervals_icu.client import IntervalsClient

BASE_URL = "https://intervals.icu/api/v1"


def make_response(
    status_code=200,
    json_body=None,
    text=None,
    headers=None,
    url=BASE_URL,
):
    """Build a real requests.Response so raise_for_status()/json() behave."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    if headers:
        response.headers.update(headers)

    if json_body is not None:
        response._content = json.dumps(json_body).encode()
        response.headers.setdefault("Content-Type", "application/json")
    elif text is not None:
        response._content = text.encode()
        response.headers.setdefault("Content-Type", "text/plain")
    else:
        response._content = b""
    return response


def call_kwargs(mock_request):
    """Return (method, url, kwargs) of the last session.request call."""
    args, kwargs = mock_request.call_args
    return args[0], args[1], kwargs


@pytest.fixture
def session():
    """A real requests.Session whose request() is mocked.

    Tests set session.request.return_value / side_effect.
    """
    s = requests.Session()
    with patch.object(s, "request") as mock_request:
        mock_request.return_value = make_response(200, json_body={})
        yield s


@pytest.fixture
def client(session):
    """Client with api key 'k' and the default athlete 'me'."""
    return IntervalsClient(api_key="k", session=session)
