"""Layered option merging.

Three layers feed a resolution, lowest precedence first:

1. Environment defaults (``VAULT_ADDR``, ``VAULT_CACERT``, ``VAULT_TOKEN``)
2. Static configuration (HOCON file, see :mod:`~vault_resolver.core.config.loader`)
3. Inventory options supplied by the caller

Merging is shallow: each top-level key is taken from the highest layer that
sets it. ``auth`` is a single value like any other key, so a higher layer's
``auth`` replaces a lower one entirely and the two are never combined.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from vault_resolver.core.config.base import EnvVar

logger = logging.getLogger(__name__)


def env_defaults(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Build the lowest-precedence option layer from the environment.

    Args:
        environ: Environment mapping. Defaults to ``os.environ``.

    Returns:
        Options for every variable that is set. ``VAULT_TOKEN`` becomes an
        implicit ``token`` auth method.
    """
    if environ is None:
        environ = os.environ

    options: dict[str, Any] = {}
    if environ.get(EnvVar.ADDR.value):
        options["server_url"] = environ[EnvVar.ADDR.value]
    if environ.get(EnvVar.CACERT.value):
        options["cacert"] = environ[EnvVar.CACERT.value]
    if environ.get(EnvVar.TOKEN.value):
        options["auth"] = {"method": "token", "token": environ[EnvVar.TOKEN.value]}
    return options


def merge_options(
    env: Mapping[str, Any],
    static: Mapping[str, Any],
    inventory: Mapping[str, Any],
) -> dict[str, Any]:
    """Merge the three option layers, later layers winning key by key.

    A key set to ``None`` counts as unset and does not shadow lower layers.
    Inputs are left untouched.

    Args:
        env: Environment-derived defaults.
        static: Static configuration options.
        inventory: Caller-supplied options.

    Returns:
        A new merged options dictionary.
    """
    merged: dict[str, Any] = {}
    for layer in (env, static, inventory):
        for key, value in layer.items():
            if value is None:
                continue
            merged[key] = dict(value) if isinstance(value, Mapping) else value

    auth = merged.get("auth")
    if isinstance(auth, Mapping):
        logger.debug("Using auth method '%s'", auth.get("method"))
    return merged
