"""Exceptions raised by the Litmus SDK.

Every failure surfaced to callers is a subclass of ``LitmusSDKError`` and is
classified by where it happened:

- ``ValidationError``: a local precondition failed; no request was sent.
- ``AuthenticationError``: the login call was rejected.
- ``TransportError``: the HTTP call failed or returned a non-2xx status.
- ``EncodingError`` / ``DecodingError``: JSON (de)serialization failed locally.
- ``RemoteError`` / ``GraphQLError``: the server answered with a structured error list.
- ``OperationFailedError``: the call succeeded but the domain flag reported failure.
- ``NotFoundError``: the call succeeded but matched nothing.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Optional


class LitmusSDKError(Exception):
    """Base exception for all Litmus SDK errors.

    Attributes:
        message: The innermost, unprefixed error text.
        context: Dictionary with diagnostic details (status code, body, operation).
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None, *, prefix: Optional[str] = None):
        """Initialize the error.

        Args:
            message: Human-readable error message
            context: Optional dictionary with error details for debugging
            prefix: Optional short description of the attempted operation
        """
        super().__init__(f"{prefix}: {message}" if prefix else message)
        self.message = message
        self.context = context or {}

    def with_prefix(self, prefix: str) -> "LitmusSDKError":
        """Return a copy of this error, of the same class, with ``prefix`` prepended to ``str()``.

        ``message`` and ``context`` are carried over unchanged.
        """
        wrapped = copy.copy(self)
        wrapped.args = (f"{prefix}: {self}",)
        return wrapped


class ValidationError(LitmusSDKError):
    """Raised when a local precondition fails (empty identifier, invalid input).

    No network call is made when this error is raised.
    """


class AuthenticationError(LitmusSDKError):
    """Raised when the remote service rejects a login attempt."""


class LoginValidationError(ValidationError, AuthenticationError):
    """Raised when login input is malformed (empty fields, invalid endpoint URL)."""


class TransportError(LitmusSDKError):
    """Raised on network-level failures or non-2xx HTTP responses.

    For HTTP status failures ``context`` holds ``status_code`` and the raw ``body``.
    """


class EncodingError(LitmusSDKError):
    """Raised when a request payload cannot be serialized to JSON."""


class DecodingError(LitmusSDKError):
    """Raised when a response body cannot be decoded into the expected shape."""


class RemoteError(LitmusSDKError):
    """Raised when the server returns a structured ``errors`` list.

    Only the first error message is surfaced.
    """


class GraphQLError(RemoteError):
    """Raised when a GraphQL response carries a non-empty ``errors`` list.

    ``message`` is the first entry's message. Later entries are discarded; their
    count is kept in ``context["discarded_errors"]``.
    """


class OperationFailedError(LitmusSDKError):
    """Raised when the server accepted the call but reported the operation as unsuccessful."""


class NotFoundError(LitmusSDKError):
    """Raised when a lookup succeeded but matched no resource."""
