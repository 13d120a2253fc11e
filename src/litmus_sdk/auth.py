"""Authenticator: exchange a username and password for a Credential_Context.

Login is a single REST call to ``{endpoint}/auth/login``. Malformed input is
rejected locally with ``LoginValidationError``; every remote or transport
failure surfaces as ``AuthenticationError`` carrying the server message.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from .constants import LOGIN_PATH
from .domain import Credential_Context
from .exceptions import AuthenticationError, LoginValidationError, TransportError
from .models import LoginRequest, LoginResponse
from .transport import send_request
from .utils import auth_endpoint, first_error_message, is_valid_endpoint, normalize_url

logger = logging.getLogger(__name__)


def _validate_login_input(endpoint: Any, username: Any, password: Any) -> None:
    if not is_valid_endpoint(endpoint):
        raise LoginValidationError(f"invalid endpoint URL: {endpoint!r}", {"endpoint": endpoint})
    if not isinstance(username, str) or not username:
        raise LoginValidationError("username cannot be empty")
    if not isinstance(password, str) or not password:
        raise LoginValidationError("password cannot be empty")


def extract_error_message(body: str) -> str:
    """Return the most specific error text found in an authentication server body.

    Recognised forms, in order: ``{"errors": [{"message"}]}``,
    ``{"error", "errorDescription"}``. Anything else is returned as-is.
    """
    try:
        payload = json.loads(body)
    except ValueError:
        return body.strip()

    if not isinstance(payload, dict):
        return body.strip()

    errors = payload.get("errors")
    if isinstance(errors, list) and errors:
        message = first_error_message(errors)
        if message:
            return message

    description = payload.get("errorDescription")
    error = payload.get("error")
    if description and error:
        return f"{error}: {description}"
    if description or error:
        return str(description or error)

    return body.strip()


def _decode_login_body(body: str) -> LoginResponse:
    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise AuthenticationError(f"unexpected login response: {exc}", {"body": body}) from exc

    if not isinstance(payload, dict):
        raise AuthenticationError("unexpected login response: not a JSON object", {"body": body})

    errors = payload.get("errors")
    if isinstance(errors, list) and errors:
        raise AuthenticationError(first_error_message(errors) or "login rejected", {"body": body})

    try:
        response = LoginResponse.model_validate(payload)
    except PydanticValidationError as exc:
        raise AuthenticationError(f"unexpected login response: {exc}", {"body": body}) from exc

    if not response.access_token:
        raise AuthenticationError("login response did not include an access token", {"body": body})
    return response


def login(
    endpoint: str,
    username: str,
    password: str,
    *,
    session: Optional[Any] = None,
    timeout: Optional[float] = None,
) -> LoginResponse:
    """Perform the login call and return the decoded response.

    Raises:
        LoginValidationError: If the endpoint or credentials are malformed (no request is sent)
        AuthenticationError: If the server rejects the login or cannot be reached
    """
    _validate_login_input(endpoint, username, password)

    url = auth_endpoint(endpoint, LOGIN_PATH)
    payload = LoginRequest(username=username, password=password).model_dump_json(by_alias=True).encode("utf-8")

    try:
        body = send_request("POST", url, body=payload, session=session, timeout=timeout)
    except TransportError as exc:
        if "status_code" in exc.context:
            message = extract_error_message(exc.context.get("body", ""))
            context = {"status_code": exc.context["status_code"], "url": url}
        else:
            message = exc.message
            context = {"url": url}
        logger.warning(f"Login failed for user {username}: {message}")
        raise AuthenticationError(message, context, prefix="authentication failed") from exc

    try:
        return _decode_login_body(body)
    except AuthenticationError as exc:
        logger.warning(f"Login failed for user {username}: {exc.message}")
        raise exc.with_prefix("authentication failed") from exc


def authenticate(
    endpoint: str,
    username: str,
    password: str,
    *,
    project_id: str = "",
    session: Optional[Any] = None,
    timeout: Optional[float] = None,
) -> Credential_Context:
    """Exchange ``username``/``password`` for a Credential_Context.

    Args:
        endpoint: Control plane base URL, e.g. ``http://localhost:8080``
        username: Login user name
        password: Login password
        project_id: Active project; when empty the project returned by login is used
        session: Optional ``requests.Session`` used for the call
        timeout: Seconds to wait for the login response

    Returns:
        Credential_Context with a non-empty token

    Raises:
        LoginValidationError: If the input is malformed (no request is sent)
        AuthenticationError: If the login is rejected or fails in transit
    """
    response = login(endpoint, username, password, session=session, timeout=timeout)
    credentials = Credential_Context(
        endpoint=normalize_url(endpoint),
        token=response.access_token,
        project_id=project_id or response.project_id or "",
        username=username,
    )
    logger.info(f"Authenticated as {username} against {credentials.endpoint}")
    return credentials


def decode_token_claims(token: str) -> Dict[str, Any]:
    """Decode the access token payload without verifying its signature.

    The server is the authority on token validity; the claims are only read
    to learn who the token was issued to.

    Raises:
        AuthenticationError: If the token is not a decodable JWT
    """
    try:
        return jwt.decode(token, options={"verify_signature": False})
    except jwt.InvalidTokenError as exc:
        raise AuthenticationError(f"access token could not be decoded: {exc}") from exc


def username_from_token(token: str) -> str:
    """Return the ``username`` claim of an access token.

    Raises:
        AuthenticationError: If the token cannot be decoded or carries no username
    """
    username = decode_token_claims(token).get("username")
    if not username:
        raise AuthenticationError("access token does not carry a username claim")
    return str(username)
