"""Domain objects for the Litmus SDK."""

from .credential_context import Credential_Context

__all__ = ["Credential_Context"]
