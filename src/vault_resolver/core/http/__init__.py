"""HTTP layer: endpoint construction, TLS gating, and JSON transport."""

from vault_resolver.core.http.client import API_PREFIX, get_client, get_uri, tls_context
from vault_resolver.core.http.transport import DEFAULT_HEADERS, request

__all__ = [
    "API_PREFIX",
    "DEFAULT_HEADERS",
    "get_client",
    "get_uri",
    "request",
    "tls_context",
]
