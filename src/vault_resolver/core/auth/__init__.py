"""Auth methods: strategy base, built-in strategies, and dispatch."""

from vault_resolver.core.auth.base import AuthStrategy
from vault_resolver.core.auth.resolver import parse_auth, register_strategy, registered_methods, request_token
from vault_resolver.core.auth.strategies import TokenAuth, UserpassAuth

__all__ = [
    "AuthStrategy",
    "TokenAuth",
    "UserpassAuth",
    "parse_auth",
    "register_strategy",
    "registered_methods",
    "request_token",
]
