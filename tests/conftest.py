"""Test configuration for pytest.

Every test talks to a ``Mock`` standing in for a ``requests.Session``: the SDK
only ever calls ``session.request(method, url, data=..., headers=..., timeout=...)``
and reads ``status_code`` and ``text`` from the response.
"""

import json
from typing import Any, Callable
from unittest.mock import Mock

import jwt
import pytest

from litmus_sdk.domain import Credential_Context

ENDPOINT = "http://litmus.example.invalid:8080"
TEST_JWT_SECRET = "litmus-sdk-test-secret-with-enough-length"


def make_response(payload: Any = None, *, status_code: int = 200, text: str = None) -> Mock:
    response = Mock()
    response.status_code = status_code
    response.text = text if text is not None else json.dumps(payload)
    return response


def make_token(username: str = "admin") -> str:
    return jwt.encode({"username": username, "uid": "u-1"}, TEST_JWT_SECRET, algorithm="HS256")


def sent_json(session: Mock, index: int = -1) -> Any:
    """Decode the JSON body of a recorded ``session.request`` call."""
    _, kwargs = session.request.call_args_list[index]
    return json.loads(kwargs["data"])


@pytest.fixture
def mock_response() -> Callable[..., Mock]:
    return make_response


@pytest.fixture
def session() -> Mock:
    """A session whose next response must be configured by the test."""
    return Mock()


@pytest.fixture
def respond(session: Mock) -> Callable[..., Mock]:
    """Configure ``session`` to answer every call with the given GraphQL ``data``."""

    def _respond(data: Any = None, *, errors: Any = None, status_code: int = 200, text: str = None) -> Mock:
        payload = {"data": data}
        if errors is not None:
            payload["errors"] = errors
        session.request.return_value = make_response(payload, status_code=status_code, text=text)
        return session

    return _respond


@pytest.fixture
def token() -> str:
    return make_token()


@pytest.fixture
def credentials(token: str) -> Credential_Context:
    return Credential_Context(endpoint=ENDPOINT, token=token, project_id="project-1", username="admin")


@pytest.fixture
def credentials_without_project(token: str) -> Credential_Context:
    return Credential_Context(endpoint=ENDPOINT, token=token, username="admin")


@pytest.fixture
def endpoint() -> str:
    return ENDPOINT


@pytest.fixture
def request_body() -> Callable[..., Any]:
    return sent_json


@pytest.fixture
def token_for() -> Callable[[str], str]:
    return make_token
