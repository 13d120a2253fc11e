"""Litmus SDK - a Python client for the LitmusChaos control plane.

This package authenticates against a Litmus control plane and exposes typed
operations for projects, environments, experiments, infrastructures and
probes through one client facade.
"""

from __future__ import annotations

from .auth import authenticate, username_from_token
from .client import LitmusClient, new_client
from .config import ClientOptions, ConfigValidationResult, ConfigurationError
from .domain import Credential_Context
from .exceptions import (
    AuthenticationError,
    DecodingError,
    EncodingError,
    GraphQLError,
    LitmusSDKError,
    LoginValidationError,
    NotFoundError,
    OperationFailedError,
    RemoteError,
    TransportError,
    ValidationError,
)
from .graphql import execute_graphql

__version__ = "0.1.0"

__all__ = [
    "AuthenticationError",
    "ClientOptions",
    "ConfigValidationResult",
    "ConfigurationError",
    "Credential_Context",
    "DecodingError",
    "EncodingError",
    "GraphQLError",
    "LitmusClient",
    "LitmusSDKError",
    "LoginValidationError",
    "NotFoundError",
    "OperationFailedError",
    "RemoteError",
    "TransportError",
    "ValidationError",
    "authenticate",
    "execute_graphql",
    "new_client",
    "username_from_token",
]
