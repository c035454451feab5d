"""Single-shot JSON requests against the secret server."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from vault_resolver.core.config.options import ResolvedConfig
from vault_resolver.core.exceptions import ServerError, TransportError
from vault_resolver.core.http.client import get_client

logger = logging.getLogger(__name__)

DEFAULT_HEADERS: Mapping[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}
"""Sent with every request, including auth logins."""


def _server_errors(response: httpx.Response) -> list[str] | None:
    """Return the ``errors`` list from a JSON error body, or ``None``."""
    try:
        errors = response.json().get("errors")
    except (ValueError, AttributeError):
        return None
    if not isinstance(errors, list):
        return None
    return [str(error) for error in errors]


def request(
    verb: str,
    uri: httpx.URL,
    config: ResolvedConfig,
    data: Any = None,
    headers: Mapping[str, str | None] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> Any:
    """Send one request and decode the JSON reply.

    Args:
        verb: HTTP method, e.g. ``"GET"``.
        uri: Fully built target URL.
        config: Resolved options used to configure the client.
        data: JSON-serializable request body (optional).
        headers: Extra headers; they override the defaults and entries
            set to ``None`` are dropped.
        transport: Optional transport override.

    Returns:
        The decoded JSON body of a 2xx response.

    Raises:
        TransportError: On any connection-level failure.
        ServerError: On a non-2xx response.
        json.JSONDecodeError: If a 2xx body is not valid JSON.
    """
    merged = httpx.Headers(DEFAULT_HEADERS)
    for name, value in (headers or {}).items():
        if value is None:
            merged.pop(name, None)
        else:
            merged[name] = value

    content = json.dumps(data) if data is not None else None

    logger.debug("%s %s", verb.upper(), uri)
    with get_client(uri, config, transport=transport) as client:
        try:
            response = client.request(verb.upper(), uri, headers=merged, content=content)
        except httpx.TransportError as exc:
            raise TransportError(str(uri), exc) from exc

    if not response.is_success:
        logger.debug("%s %s returned %d", verb.upper(), uri, response.status_code)
        raise ServerError(response.status_code, response.reason_phrase, _server_errors(response))

    return response.json()
