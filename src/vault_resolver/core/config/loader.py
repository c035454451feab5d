"""Static configuration loading from HOCON using dataconf.

The static layer is an optional HOCON document whose keys mirror the
inventory options. Anything dataconf or :class:`StaticConfig` rejects is
reported as a :class:`~vault_resolver.core.exceptions.ValidationError`
naming where the document came from.
"""

from __future__ import annotations

import logging
from pathlib import Path

import dataconf

from vault_resolver.core.config.static import StaticConfig
from vault_resolver.core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def load_from_file(path: str | Path) -> StaticConfig:
    """Load the static layer from a HOCON file.

    Args:
        path: Path to the HOCON configuration file.

    Returns:
        The parsed :class:`StaticConfig`.

    Raises:
        ValidationError: If the file is unreadable or holds invalid options.

    Example:
        >>> static = load_from_file("vault.conf")
        >>> static.to_options()
        {'server_url': 'http://127.0.0.1:8200', 'version': 2}
    """
    logger.debug("Loading static configuration from %s", path)
    try:
        return dataconf.file(str(path), StaticConfig)
    except Exception as exc:
        raise ValidationError(f"Invalid static configuration in {path}: {exc}") from exc


def load_from_string(hocon_str: str) -> StaticConfig:
    """Load the static layer from a HOCON string.

    Example:
        >>> static = load_from_string('{ path: "secret/app", field: "password" }')
    """
    try:
        return dataconf.string(hocon_str, StaticConfig)
    except Exception as exc:
        raise ValidationError(f"Invalid static configuration: {exc}") from exc
