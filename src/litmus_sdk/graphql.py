"""Generic GraphQL executor.

``execute_graphql`` is the only place where GraphQL error semantics are
handled. Every resource operation calls it with a fixed query string, a
variables payload and the expected shape of ``data``:

1. encode ``{"query", "variables"}`` as JSON (``EncodingError`` on failure)
2. POST it with the bearer token (``TransportError`` on network failure or non-2xx)
3. decode the ``{"data", "errors"}`` envelope (``DecodingError`` on failure)
4. a non-empty ``errors`` list raises ``GraphQLError`` built from the first message
5. otherwise ``data`` is validated into the requested type and returned
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .exceptions import DecodingError, EncodingError, GraphQLError, LitmusSDKError
from .models.common import LitmusRequest
from .transport import send_request
from .utils import first_error_message

logger = logging.getLogger(__name__)

T = TypeVar("T")

Variables = Union[Mapping[str, Any], BaseModel, None]


def _jsonable(value: Any) -> Any:
    """Convert pydantic models (at any depth) into plain JSON-compatible data."""
    if isinstance(value, LitmusRequest):
        return value.to_variables()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, Mapping):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value


def encode_request(query: str, variables: Variables = None) -> bytes:
    """Serialize the request envelope.

    Raises:
        EncodingError: If the variables cannot be represented as JSON
    """
    try:
        envelope = {"query": query, "variables": _jsonable(variables) if variables is not None else {}}
        return json.dumps(envelope, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"error marshaling request: {exc}") from exc


def decode_response(body: str, response_type: Optional[Type[T]] = None) -> Any:
    """Decode a GraphQL response envelope and return its ``data``.

    Raises:
        DecodingError: If the body is not a JSON object or ``data`` does not match ``response_type``
        GraphQLError: If the envelope carries a non-empty ``errors`` list
    """
    try:
        envelope = json.loads(body)
    except ValueError as exc:
        raise DecodingError(f"error unmarshaling response: {exc}", {"body": body}) from exc

    if not isinstance(envelope, dict):
        raise DecodingError("GraphQL response was not a JSON object", {"body": body})

    errors = envelope.get("errors") or []
    if not isinstance(errors, list):
        errors = [errors]
    if errors:
        message = first_error_message(errors) or "unknown error"
        if len(errors) > 1:
            logger.debug(f"GraphQL response carried {len(errors)} errors; surfacing the first")
        raise GraphQLError(message, {"discarded_errors": len(errors) - 1}, prefix="GraphQL error")

    data = envelope.get("data")
    if response_type is None:
        return data

    try:
        return TypeAdapter(response_type).validate_python(data)
    except PydanticValidationError as exc:
        raise DecodingError(f"error unmarshaling response: {exc}", {"data": data}) from exc


def execute_graphql(
    endpoint: str,
    token: Optional[str],
    query: str,
    variables: Variables = None,
    error_context: str = "GraphQL request failed",
    *,
    response_type: Optional[Type[T]] = None,
    session: Optional[Any] = None,
    timeout: Optional[float] = None,
) -> T:
    """Execute one GraphQL operation and return ``data`` typed as ``response_type``.

    Args:
        endpoint: Full GraphQL URL
        token: Bearer token; omitted from headers when empty
        query: Query or mutation string
        variables: Mapping or pydantic model serialized as the ``variables`` object
        error_context: Prefix describing the attempted operation, added to every error
        response_type: Expected shape of ``data`` (pydantic model or any type
            ``TypeAdapter`` accepts); ``None`` returns the raw decoded ``data``
        session: Optional ``requests.Session`` used for the call
        timeout: Seconds to wait for the response; ``None`` waits indefinitely

    Raises:
        EncodingError, TransportError, DecodingError, GraphQLError
    """
    try:
        payload = encode_request(query, variables)
        body = send_request("POST", endpoint, token=token, body=payload, session=session, timeout=timeout)
        return decode_response(body, response_type)
    except LitmusSDKError as exc:
        if isinstance(exc, GraphQLError):
            logger.warning(f"{error_context}: {exc}")
        raise exc.with_prefix(error_context) from exc
