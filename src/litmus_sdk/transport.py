"""Blocking HTTP transport shared by the REST and GraphQL callers.

One call, one request: no retries, no backoff. Transport failures and non-2xx
statuses are classified as ``TransportError``; the response body of a failed
status is carried as diagnostic text and never parsed.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from .constants import USER_AGENT
from .exceptions import TransportError

logger = logging.getLogger(__name__)


def build_headers(token: Optional[str]) -> Dict[str, str]:
    """Return JSON request headers, with a bearer token when one is given."""
    headers = {
        "Content-Type": "application/json",
        "Accept": "application/json",
        "User-Agent": USER_AGENT,
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def send_request(
    method: str,
    url: str,
    *,
    token: Optional[str] = None,
    body: Optional[bytes] = None,
    session: Optional[Any] = None,
    timeout: Optional[float] = None,
) -> str:
    """Send one HTTP request and return the response body text on 2xx.

    Args:
        method: HTTP method (``GET`` / ``POST``)
        url: Absolute request URL
        token: Bearer token; the ``Authorization`` header is omitted when empty
        body: Already-encoded JSON payload
        session: Optional ``requests.Session`` (or compatible object); defaults to ``requests``
        timeout: Seconds to wait; ``None`` waits indefinitely

    Raises:
        TransportError: On connection failures or non-2xx responses
    """
    client = session or requests
    logger.debug(f"{method.upper()} {url}")

    try:
        response = client.request(
            method.upper(),
            url,
            data=body,
            headers=build_headers(token),
            timeout=timeout,
        )
    except requests.RequestException as exc:
        logger.error(f"{method.upper()} {url} failed: {exc}")
        raise TransportError(f"error sending request: {exc}", {"url": url}) from exc

    text = response.text or ""
    status = response.status_code
    if not 200 <= status < 300:
        logger.error(f"{method.upper()} {url} returned status {status}")
        logger.debug(f"Response body: {text[:500]}")
        raise TransportError(
            f"unmatched status code {status}: {text}",
            {"url": url, "status_code": status, "body": text},
        )

    return text
