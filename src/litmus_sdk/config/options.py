"""Client options for connecting to a Litmus control plane."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping, Optional

from ..constants import DEFAULT_ENDPOINT, DEFAULT_PASSWORD, DEFAULT_USERNAME
from ..utils import is_valid_endpoint, normalize_url
from .base import ConfigValidationResult, Configuration, SerializationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientOptions(Configuration):
    """Connection settings passed explicitly to the client facade.

    Attributes:
        endpoint: Base URL of the control plane (e.g. ``http://localhost:8080``)
        username: Login user name
        password: Login password (never included in ``repr``)
        project_id: Active project; empty means "use the project returned by login"
        timeout: Per-request timeout in seconds; ``None`` waits indefinitely
    """

    endpoint: str
    username: str
    password: str = field(repr=False)
    project_id: str = ""
    timeout: Optional[float] = None

    def validate(self) -> ConfigValidationResult:
        result = ConfigValidationResult.success_result()

        if not is_valid_endpoint(self.endpoint):
            result.add_error(f"endpoint must be an absolute http(s) URL, got {self.endpoint!r}")
        if not self.username:
            result.add_error("username cannot be empty")
        if not self.password:
            result.add_error("password cannot be empty")
        if not isinstance(self.project_id, str):
            result.add_error("project_id must be a string")
        if self.timeout is not None and (not isinstance(self.timeout, (int, float)) or self.timeout <= 0):
            result.add_error(f"timeout must be a positive number of seconds, got {self.timeout!r}")

        return result

    @property
    def normalized_endpoint(self) -> str:
        return normalize_url(self.endpoint)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ClientOptions:
        if not isinstance(data, dict):
            raise SerializationError(f"Expected a dictionary, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise SerializationError(f"Unknown client option(s): {', '.join(unknown)}")

        try:
            return cls(**data)
        except TypeError as exc:
            raise SerializationError(f"Invalid client options: {exc}") from exc

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ClientOptions:
        """Build options from ``LITMUS_*`` environment variables.

        Reads ``LITMUS_ENDPOINT``, ``LITMUS_USERNAME``, ``LITMUS_PASSWORD``,
        ``LITMUS_PROJECT_ID`` and ``LITMUS_TIMEOUT``. Nothing is cached; each call
        returns a new value.
        """
        env = os.environ if environ is None else environ

        timeout: Optional[float] = None
        raw_timeout = env.get("LITMUS_TIMEOUT", "").strip()
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise SerializationError(f"LITMUS_TIMEOUT must be a number, got {raw_timeout!r}") from exc

        options = cls(
            endpoint=env.get("LITMUS_ENDPOINT") or DEFAULT_ENDPOINT,
            username=env.get("LITMUS_USERNAME") or DEFAULT_USERNAME,
            password=env.get("LITMUS_PASSWORD") or DEFAULT_PASSWORD,
            project_id=env.get("LITMUS_PROJECT_ID", ""),
            timeout=timeout,
        )
        logger.debug(f"Loaded client options from environment (endpoint={options.endpoint})")
        return options
