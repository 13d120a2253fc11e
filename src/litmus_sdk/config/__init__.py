"""Configuration helpers for the Litmus SDK."""

from .base import ConfigValidationResult, Configuration, ConfigurationError, SerializationError
from .options import ClientOptions

__all__ = [
    "ClientOptions",
    "ConfigValidationResult",
    "Configuration",
    "ConfigurationError",
    "SerializationError",
]
