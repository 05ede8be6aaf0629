"""
Pytest configuration and shared fixtures for the test suite.
"""

import json
from typing import Any, Optional
from unittest.mock import MagicMock, patch

import pytest
import requests

from docstore.client import DocStoreClient
from docstore.config import ClientSettings


BASE_URL = "http://localhost:9200"


def make_response(
    status_code: int = 200,
    payload: Any = None,
    body: Optional[bytes] = None,
) -> requests.Response:
    """Build a requests.Response with a tracked close()."""
    response = requests.Response()
    response.status_code = status_code
    if body is None:
        body = json.dumps(payload if payload is not None else {}).encode("utf-8")
    response._content = body
    response.encoding = "utf-8"
    response.headers["Content-Type"] = "application/json"
    response.close = MagicMock()
    return response


@pytest.fixture
def settings() -> ClientSettings:
    """Settings that ignore the environment and any .env file."""
    return ClientSettings(_env_file=None, URL=BASE_URL, TIMEOUT=5)


@pytest.fixture
def session():
    """A real session whose send() never touches the network."""
    session = requests.Session()
    with patch.object(session, "send") as send:
        send.return_value = make_response(payload={"docs": []})
        yield session


@pytest.fixture
def client(settings, session) -> DocStoreClient:
    return DocStoreClient(session=session, settings=settings)


def sent_request(session) -> requests.PreparedRequest:
    """The prepared request passed to the most recent send()."""
    args, _ = session.send.call_args
    return args[0]
