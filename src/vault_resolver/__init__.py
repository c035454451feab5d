"""Resolve secret references from a Vault server."""

from vault_resolver.core.exceptions import DataError, ServerError, TransportError, ValidationError, VaultError
from vault_resolver.runner.task import ReferenceResolver, resolve_reference

__version__ = "1.0.0"

__all__ = [
    "DataError",
    "ReferenceResolver",
    "ServerError",
    "TransportError",
    "ValidationError",
    "VaultError",
    "resolve_reference",
]
