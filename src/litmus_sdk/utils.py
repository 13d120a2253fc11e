"""Shared helpers for the Litmus SDK."""

from __future__ import annotations

import re
from typing import Any, Iterable, Optional
from urllib.parse import urlparse

from .constants import AUTH_API_PATH, GQL_API_PATH


def normalize_url(url: str, *, strip_trailing_slash: bool = True) -> str:
    """Normalize URL by removing trailing slashes.

    Args:
        url: URL string to normalize
        strip_trailing_slash: If True (default), remove trailing slash

    Returns:
        Normalized URL string

    Examples:
        >>> normalize_url("http://localhost:8080/")
        'http://localhost:8080'
        >>> normalize_url("http://localhost:8080/", strip_trailing_slash=False)
        'http://localhost:8080/'
    """
    if not url:
        return url

    if strip_trailing_slash:
        return url.rstrip("/")

    return url


def is_valid_endpoint(url: Optional[str]) -> bool:
    """Return True if ``url`` is an absolute http(s) URL with a host.

    Examples:
        >>> is_valid_endpoint("http://127.0.0.1:39651")
        True
        >>> is_valid_endpoint("invalid-url")
        False
    """
    if not url or not isinstance(url, str) or url != url.strip():
        return False
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def graphql_endpoint(endpoint: str) -> str:
    """Construct the GraphQL endpoint URL from the control plane endpoint.

    Examples:
        >>> graphql_endpoint("http://localhost:8080/")
        'http://localhost:8080/api/query'
    """
    return f"{normalize_url(endpoint)}{GQL_API_PATH}"


def auth_endpoint(endpoint: str, path: str = "") -> str:
    """Construct an authentication server URL from the control plane endpoint.

    Examples:
        >>> auth_endpoint("http://localhost:8080", "/login")
        'http://localhost:8080/auth/login'
    """
    return f"{normalize_url(endpoint)}{AUTH_API_PATH}{path}"


def generate_name_id(name: str) -> str:
    """Derive a resource identifier from a display name.

    Runs of characters other than ASCII letters and digits become ``_`` and the
    result is lower-cased.

    Examples:
        >>> generate_name_id("My Prod Env")
        'my_prod_env'
        >>> generate_name_id("nginx-availability-test")
        'nginx_availability_test'
    """
    return re.sub(r"[^a-zA-Z0-9]+", "_", name).lower()


def check_key_value_format(value: str) -> bool:
    """Check a ``key1=value1,key2=value2`` selector string.

    Each comma separated element must contain exactly one ``=`` and no double quotes.
    """
    for element in value.split(","):
        parts = element.split("=")
        if len(parts) != 2:
            return False
        if '"' in parts[0] or '"' in parts[1]:
            return False
    return True


def first_error_message(errors: Iterable[Any]) -> Optional[str]:
    """Return the message of the first entry of a GraphQL/REST ``errors`` list."""
    for entry in errors:
        if isinstance(entry, dict):
            return str(entry.get("message") or entry)
        return str(entry)
    return None
