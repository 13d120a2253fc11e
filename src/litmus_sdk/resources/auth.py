"""Read-only access to the session credentials."""

from __future__ import annotations

from ..domain import Credential_Context
from .base import ResourceClient


class AuthClient(ResourceClient):
    def get_token(self) -> str:
        return self._credentials.token

    def get_credentials(self) -> Credential_Context:
        return self._credentials
