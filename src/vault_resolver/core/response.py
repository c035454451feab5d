"""Version-aware extraction of secret data from server replies."""

from __future__ import annotations

from typing import Any

from vault_resolver.core.config.options import ResolvedConfig
from vault_resolver.core.exceptions import DataError


def extract_v1(response: dict[str, Any]) -> dict[str, Any]:
    """Return the secret data of a v1 reply: ``response["data"]``."""
    return response["data"]


def extract_v2(response: dict[str, Any]) -> dict[str, Any]:
    """Return the secret data of a v2 reply: ``response["data"]["data"]``."""
    return response["data"]["data"]


def _is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    return isinstance(value, (str, list, dict)) and not value


def parse_response(response: dict[str, Any], config: ResolvedConfig) -> Any:
    """Select the secret data and, if configured, a single field from it.

    Args:
        response: Decoded JSON reply from the secret endpoint.
        config: Resolved options providing ``version`` and ``field``.

    Returns:
        The field value when ``config.field`` is set, otherwise the whole
        secret data mapping.

    Raises:
        DataError: If the field is missing, null, or empty.
    """
    data = extract_v2(response) if config.is_v2 else extract_v1(response)

    if not config.field:
        return data

    value = data.get(config.field)
    if _is_empty(value):
        raise DataError(config.field)
    return value
