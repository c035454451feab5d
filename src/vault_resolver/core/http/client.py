"""Endpoint construction and TLS-gated client creation."""

from __future__ import annotations

import logging
import ssl

import httpx

from vault_resolver.core.config.options import ResolvedConfig
from vault_resolver.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

API_PREFIX = "v1"


def _join(*parts: str) -> str:
    """Join URL segments with exactly one slash at each seam."""
    head, *rest = parts
    if not rest:
        return head
    *middle, last = rest
    segments = [head.rstrip("/"), *(part.strip("/") for part in middle), last.lstrip("/")]
    return "/".join(segments)


def get_uri(config: ResolvedConfig, path: str | None = None) -> httpx.URL:
    """Build the API URL for a path on the configured server.

    Args:
        config: Resolved options providing ``server_url`` and ``path``.
        path: Path overriding ``config.path``, used for auth endpoints.

    Raises:
        ValidationError: If ``server_url`` does not form a valid URL.
    """
    target = path or config.path
    try:
        return httpx.URL(_join(config.server_url, API_PREFIX, target))
    except httpx.InvalidURL as exc:
        raise ValidationError(f"Invalid server_url {config.server_url}: {exc}") from exc


def tls_context(cacert: str) -> ssl.SSLContext:
    """Create a TLS 1.2 context trusting only the given CA bundle.

    The system trust store is never loaded and peer verification is
    always on.

    Raises:
        ValidationError: If the CA bundle cannot be loaded.
    """
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    context.minimum_version = ssl.TLSVersion.TLSv1_2
    context.maximum_version = ssl.TLSVersion.TLSv1_2
    context.verify_mode = ssl.CERT_REQUIRED
    context.check_hostname = True
    try:
        context.load_verify_locations(cafile=cacert)
    except OSError as exc:
        raise ValidationError(f"Unable to load cacert {cacert}: {exc}") from exc
    return context


def get_client(
    uri: httpx.URL,
    config: ResolvedConfig,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an HTTP client suitable for ``uri``.

    Plain ``http`` URLs get an unencrypted client. ``https`` URLs require
    ``config.cacert``; there is no fallback to the system trust store and
    no insecure downgrade.

    Args:
        uri: Target URL; only its scheme is inspected.
        config: Resolved options providing ``cacert`` and ``timeout``.
        transport: Optional transport override (e.g. ``httpx.MockTransport``).

    Raises:
        ValidationError: If the URL is https and no usable CA bundle is set.
    """
    kwargs: dict[str, object] = {}
    if config.timeout is not None:
        kwargs["timeout"] = config.timeout
    if transport is not None:
        kwargs["transport"] = transport

    if uri.scheme == "https":
        if not config.cacert:
            raise ValidationError("Vault plugin requires cacert to be configured when connecting over https")
        kwargs["verify"] = tls_context(config.cacert)
        logger.debug("Using CA bundle %s for %s", config.cacert, uri.host)

    return httpx.Client(**kwargs)  # type: ignore[arg-type]
