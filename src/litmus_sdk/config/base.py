"""Configuration interface and validation results.

Client configuration objects implement ``Configuration`` so they can be
checked before any network call and round-tripped through plain dictionaries
(for example when loaded from a settings file).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List


class ConfigurationError(Exception):
    """Base exception for configuration loading errors."""


class SerializationError(ConfigurationError):
    """Raised when ``from_dict`` receives data it cannot turn into a configuration."""


@dataclass
class ConfigValidationResult:
    """Outcome of validating a configuration.

    Attributes:
        success: True if validation passed, False otherwise
        errors: Messages describing each failed check
    """

    success: bool
    errors: List[str]

    def add_error(self, error: str) -> None:
        """Record an error message and mark validation as failed."""
        self.errors.append(error)
        self.success = False

    @classmethod
    def success_result(cls) -> ConfigValidationResult:
        return cls(success=True, errors=[])


class Configuration(ABC):
    """Interface shared by SDK configuration types.

    Subclasses implement ``validate``, ``to_dict`` and ``from_dict``.
    ``validate_or_raise`` lets callers choose the exception raised on failure,
    so the client facade can surface bad options as its own error type.
    """

    @abstractmethod
    def validate(self) -> ConfigValidationResult:
        """Check every configuration value and report all failures."""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-compatible dictionary accepted by ``from_dict``."""

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any]) -> Configuration:
        """Create a configuration from dictionary data.

        Raises:
            SerializationError: If data cannot be deserialized
        """

    def validate_or_raise(self, error_cls: type = ConfigurationError) -> None:
        """Validate and raise ``error_cls`` listing every failure.

        Raises:
            error_cls: If configuration validation fails
        """
        result = self.validate()
        if not result.success:
            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {error}" for error in result.errors)
            raise error_cls(error_msg)
