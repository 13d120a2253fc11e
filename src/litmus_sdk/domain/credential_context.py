"""Credential_Context domain object shared by every resource client.

The context is created once by the authenticator and is never mutated. Code
that needs a different project or a fresh token builds a new context.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from ..exceptions import ValidationError
from ..utils import auth_endpoint, graphql_endpoint, normalize_url


@dataclass(frozen=True)
class Credential_Context:
    """Immutable session credentials.

    Attributes:
        endpoint: Base URL of the control plane, without trailing slash
        token: Bearer token returned by login (never included in ``repr``)
        project_id: Active project; empty until a project is selected
        username: User the token was issued to (informational)
    """

    endpoint: str
    token: str = field(default="", repr=False)
    project_id: str = ""
    username: str = ""

    def __post_init__(self) -> None:
        """Validate required fields after initialization."""
        if self.endpoint is None:
            raise TypeError("endpoint field is required and cannot be None")
        if not isinstance(self.endpoint, str):
            raise TypeError("endpoint field must be a string")
        if self.endpoint == "":
            raise ValueError("endpoint field cannot be empty")
        if not isinstance(self.token, str):
            raise TypeError("token field must be a string")
        if not isinstance(self.project_id, str):
            raise TypeError("project_id field must be a string")

        # frozen: normalize through object.__setattr__
        object.__setattr__(self, "endpoint", normalize_url(self.endpoint))

    @property
    def graphql_url(self) -> str:
        return graphql_endpoint(self.endpoint)

    def auth_url(self, path: str = "") -> str:
        return auth_endpoint(self.endpoint, path)

    def with_project(self, project_id: str) -> Credential_Context:
        """Return a copy of this context scoped to ``project_id``."""
        return replace(self, project_id=project_id)

    def require_project(self) -> str:
        """Return the active project ID or raise ``ValidationError`` if none is selected."""
        if not self.project_id:
            raise ValidationError("project ID not set in credentials")
        return self.project_id
