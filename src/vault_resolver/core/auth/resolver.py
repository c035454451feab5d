"""Dispatch from auth method names to strategies."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from vault_resolver.core.auth.base import AuthStrategy
from vault_resolver.core.auth.strategies import TokenAuth, UserpassAuth
from vault_resolver.core.config.options import ResolvedConfig
from vault_resolver.core.config.validator import validate_auth
from vault_resolver.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

_STRATEGIES: dict[str, type[AuthStrategy]] = {}


def register_strategy(strategy: type[AuthStrategy]) -> type[AuthStrategy]:
    """Register an auth strategy under its ``method`` name.

    Usable as a class decorator. A later registration for the same name
    replaces the earlier one.
    """
    _STRATEGIES[strategy.method] = strategy
    return strategy


def registered_methods() -> list[str]:
    """Return the names of all registered auth methods."""
    return sorted(_STRATEGIES)


def parse_auth(auth: Mapping[str, Any]) -> AuthStrategy:
    """Select, validate, and build the strategy for an auth mapping.

    Raises:
        ValidationError: If the method is unknown or a required key is missing.
    """
    method = auth.get("method")
    strategy = _STRATEGIES.get(method) if isinstance(method, str) else None
    if strategy is None:
        raise ValidationError(f"Unknown auth method: {method}")
    validate_auth(auth, strategy.required_keys)
    return strategy.from_options(auth)


def request_token(
    auth: Mapping[str, Any],
    config: ResolvedConfig,
    transport: httpx.BaseTransport | None = None,
) -> str:
    """Obtain a bearer credential using the configured auth method.

    Args:
        auth: Raw auth mapping with a ``method`` key.
        config: Resolved options; auth endpoints live on the same server.
        transport: Optional transport override for strategies that log in.

    Returns:
        The token to send as ``X-Vault-Token``.
    """
    strategy = parse_auth(auth)
    logger.debug("Requesting token with auth method '%s'", strategy.method)
    return strategy.request_token(config, transport=transport)


register_strategy(TokenAuth)
register_strategy(UserpassAuth)
