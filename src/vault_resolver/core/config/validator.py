"""Required-key validation for options and auth methods."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from vault_resolver.core.config.base import REQUIRED_OPTIONS
from vault_resolver.core.exceptions import ValidationError


def validate_options(options: Mapping[str, Any]) -> None:
    """Check that every required top-level option is set and well-typed.

    ``auth`` must be a mapping when present, and ``timeout`` a positive
    number of seconds.

    Raises:
        ValidationError: Naming the first missing or malformed option.
    """
    for key in REQUIRED_OPTIONS:
        if not options.get(key):
            raise ValidationError(f"Vault plugin requires {key} to be configured")

    auth = options.get("auth")
    if auth is not None and not isinstance(auth, Mapping):
        raise ValidationError(f"Vault plugin requires auth to be a mapping, got {type(auth).__name__}")

    timeout = options.get("timeout")
    if timeout is not None and (
        isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0
    ):
        raise ValidationError(f"Vault plugin requires timeout to be a positive number, got {timeout!r}")


def validate_auth(auth: Mapping[str, Any], required_keys: Iterable[str]) -> None:
    """Check that an auth mapping carries every key its method needs.

    Args:
        auth: Raw auth mapping, including ``method``.
        required_keys: Keys the method cannot work without.

    Raises:
        ValidationError: Naming the first missing key and the method.
    """
    for key in required_keys:
        if not auth.get(key):
            raise ValidationError(f"Expected key in {auth.get('method')} auth method: {key}")
