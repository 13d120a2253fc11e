"""Client facade: authenticate once, expose every resource client.

Example:
    >>> from litmus_sdk import ClientOptions, LitmusClient
    >>> client = LitmusClient.connect(ClientOptions("http://localhost:8080", "admin", "litmus"))
    >>> client.environments.list()
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .auth import authenticate
from .config import ClientOptions
from .domain import Credential_Context
from .exceptions import LoginValidationError, ValidationError
from .resources import (
    AuthClient,
    EnvironmentsClient,
    ExperimentsClient,
    InfrastructureClient,
    ProbesClient,
    ProjectsClient,
)

logger = logging.getLogger(__name__)


class LitmusClient:
    """One authenticated session against a Litmus control plane.

    All resource clients are built eagerly from the same Credential_Context and
    the facade never changes them afterwards. To switch project or obtain a
    fresh token, build a new facade with ``with_project`` or ``reauthenticate``.
    """

    def __init__(
        self,
        credentials: Credential_Context,
        *,
        options: Optional[ClientOptions] = None,
        session: Optional[Any] = None,
    ) -> None:
        if not isinstance(credentials, Credential_Context):
            raise TypeError(f"credentials must be a Credential_Context, got {type(credentials).__name__}")

        self._credentials = credentials
        self._options = options
        self._session = session
        timeout = options.timeout if options is not None else None

        self._auth = AuthClient(credentials, session=session, timeout=timeout)
        self._projects = ProjectsClient(credentials, session=session, timeout=timeout)
        self._environments = EnvironmentsClient(credentials, session=session, timeout=timeout)
        self._experiments = ExperimentsClient(credentials, session=session, timeout=timeout)
        self._infrastructure = InfrastructureClient(credentials, session=session, timeout=timeout)
        self._probes = ProbesClient(credentials, session=session, timeout=timeout)

    @classmethod
    def connect(cls, options: ClientOptions, *, session: Optional[Any] = None) -> LitmusClient:
        """Validate ``options``, log in once and return a ready client.

        Raises:
            LoginValidationError: If ``options`` is invalid (no request is sent)
            AuthenticationError: If the login is rejected
        """
        options.validate_or_raise(LoginValidationError)
        credentials = authenticate(
            options.normalized_endpoint,
            options.username,
            options.password,
            project_id=options.project_id,
            session=session,
            timeout=options.timeout,
        )
        return cls(credentials, options=options, session=session)

    @property
    def credentials(self) -> Credential_Context:
        return self._credentials

    @property
    def auth(self) -> AuthClient:
        return self._auth

    @property
    def projects(self) -> ProjectsClient:
        return self._projects

    @property
    def environments(self) -> EnvironmentsClient:
        return self._environments

    @property
    def experiments(self) -> ExperimentsClient:
        return self._experiments

    @property
    def infrastructure(self) -> InfrastructureClient:
        return self._infrastructure

    @property
    def probes(self) -> ProbesClient:
        return self._probes

    def with_project(self, project_id: str) -> LitmusClient:
        """Return a new client scoped to ``project_id``, sharing this session's token."""
        if not isinstance(project_id, str) or not project_id:
            raise ValidationError("project ID cannot be empty")
        return LitmusClient(self._credentials.with_project(project_id), options=self._options, session=self._session)

    def reauthenticate(self) -> LitmusClient:
        """Log in again with the original options and return a brand-new client.

        Raises:
            LoginValidationError: If this client was not created from ``ClientOptions``
        """
        if self._options is None:
            raise LoginValidationError("client was not created from ClientOptions; cannot re-authenticate")
        logger.info(f"Re-authenticating {self._options.username}")
        client = LitmusClient.connect(self._options, session=self._session)
        if self._credentials.project_id and not self._options.project_id:
            client = client.with_project(self._credentials.project_id)
        return client

    def __repr__(self) -> str:
        return f"LitmusClient(endpoint={self._credentials.endpoint!r}, project_id={self._credentials.project_id!r})"


def new_client(
    endpoint: str,
    username: str,
    password: str,
    *,
    project_id: str = "",
    timeout: Optional[float] = None,
    session: Optional[Any] = None,
) -> LitmusClient:
    """Authenticate and return a ``LitmusClient``."""
    options = ClientOptions(
        endpoint=endpoint,
        username=username,
        password=password,
        project_id=project_id,
        timeout=timeout,
    )
    return LitmusClient.connect(options, session=session)
