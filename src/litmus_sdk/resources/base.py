"""Shared plumbing for credential-scoped resource clients."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Optional, Type, TypeVar

from ..domain import Credential_Context
from ..exceptions import ValidationError
from ..graphql import Variables, execute_graphql

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ResourceClient:
    """Base for one domain area of the control plane.

    A resource client holds its own copy of the Credential_Context taken at
    construction time and keeps no other state: every operation validates its
    input locally, then makes exactly one round trip through the executor.
    """

    def __init__(
        self,
        credentials: Credential_Context,
        *,
        session: Optional[Any] = None,
        timeout: Optional[float] = None,
    ) -> None:
        if not isinstance(credentials, Credential_Context):
            raise TypeError(f"credentials must be a Credential_Context, got {type(credentials).__name__}")
        self._credentials = replace(credentials)
        self._session = session
        self._timeout = timeout

    @property
    def credentials(self) -> Credential_Context:
        return self._credentials

    @staticmethod
    def _require(value: Any, name: str) -> str:
        """Return ``value`` if it is a non-empty string, else raise ``ValidationError``."""
        if not isinstance(value, str) or not value:
            raise ValidationError(f"{name} cannot be empty")
        return value

    def _project_id(self, project_id: Optional[str] = None) -> str:
        """Return an explicit project ID, falling back to the active project."""
        if project_id is not None:
            return self._require(project_id, "project ID")
        return self._credentials.require_project()

    def _graphql(
        self,
        query: str,
        variables: Variables,
        response_type: Optional[Type[T]],
        error_context: str,
        *,
        authenticated: bool = True,
    ) -> T:
        token = self._credentials.token if authenticated else None
        return execute_graphql(
            self._credentials.graphql_url,
            token,
            query,
            variables,
            error_context,
            response_type=response_type,
            session=self._session,
            timeout=self._timeout,
        )
