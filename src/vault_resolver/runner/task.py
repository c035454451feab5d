"""Secret reference resolution: merge, authenticate, fetch, unwrap."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import httpx

from vault_resolver.core.auth.resolver import request_token
from vault_resolver.core.config.loader import load_from_file
from vault_resolver.core.config.merge import env_defaults, merge_options
from vault_resolver.core.config.options import ResolvedConfig
from vault_resolver.core.config.static import StaticConfig
from vault_resolver.core.http.client import get_uri
from vault_resolver.core.http.transport import request
from vault_resolver.core.response import parse_response

logger = logging.getLogger(__name__)

TOKEN_HEADER = "X-Vault-Token"


def rewrite_v2_path(path: str) -> str:
    """Insert the ``data`` segment a v2 engine expects after the mount.

    ``secret/app/db`` becomes ``secret/data/app/db``. Only the first ``/``
    separates the mount from the rest.
    """
    mount, _, rest = path.partition("/")
    return "/".join(part for part in (mount, "data", rest) if part)


class ReferenceResolver:
    """Resolves secret references against a secret server.

    Holds the static configuration layer; each :meth:`resolve` call merges
    it with the environment and the caller's inventory options, then
    performs at most two sequential requests (login, then fetch). Nothing
    is cached between calls.

    Args:
        static: Static configuration layer (default: empty).
        environ: Environment mapping. Defaults to ``os.environ`` at call time.
        transport: Optional transport override for testing.
    """

    def __init__(
        self,
        static: StaticConfig | Mapping[str, Any] | None = None,
        environ: Mapping[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if isinstance(static, StaticConfig):
            static = static.to_options()
        self._static: Mapping[str, Any] = static or {}
        self._environ = environ
        self._transport = transport

    @classmethod
    def from_file(cls, path: str | Path, **kwargs: Any) -> ReferenceResolver:
        """Create a resolver whose static layer is read from a HOCON file.

        Args:
            path: Path to the HOCON file.
            **kwargs: Forwarded to the constructor.
        """
        static = load_from_file(path)
        return cls(static, **kwargs)

    def configure(self, inventory: Mapping[str, Any]) -> ResolvedConfig:
        """Merge all option layers and validate the result.

        Raises:
            ValidationError: If a required option is missing or malformed.
        """
        merged = merge_options(env_defaults(self._environ), self._static, inventory)
        return ResolvedConfig.from_mapping(merged)

    def resolve(self, inventory: Mapping[str, Any]) -> dict[str, Any]:
        """Resolve one secret reference.

        Args:
            inventory: Caller-supplied options; highest precedence.

        Returns:
            ``{"value": ...}`` holding the field value, or the whole secret
            data mapping when no field is configured.

        Raises:
            VaultError: On any configuration, transport, server, or data failure.
        """
        config = self.configure(inventory)

        headers: dict[str, str | None] = {}
        if config.auth is not None:
            headers[TOKEN_HEADER] = request_token(config.auth, config, transport=self._transport)
        else:
            logger.debug("No auth method configured; sending anonymous request")

        if config.is_v2:
            config = config.with_path(rewrite_v2_path(config.path))
            logger.debug("Rewrote path for v2 engine: %s", config.path)

        response = request("GET", get_uri(config), config, headers=headers, transport=self._transport)
        return {"value": parse_response(response, config)}


def resolve_reference(
    inventory: Mapping[str, Any],
    static: StaticConfig | Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> dict[str, Any]:
    """Resolve one secret reference with a throwaway :class:`ReferenceResolver`."""
    return ReferenceResolver(static, environ=environ, transport=transport).resolve(inventory)
