"""Resolved configuration model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from vault_resolver.core.config.base import KvVersion
from vault_resolver.core.config.validator import validate_options


@dataclass(frozen=True)
class ResolvedConfig:
    """Merged and validated options for one resolution.

    ``server_url`` and ``path`` are always set. Instances are built with
    :meth:`from_mapping`, which validates first.
    """

    server_url: str
    """Base URL of the secret server (required)"""

    path: str
    """Secret path below ``/v1`` (required)"""

    field: str | None = None
    """Single field to extract from the secret data (optional)"""

    version: int | None = None
    """Secret engine API version; only ``2`` changes behavior (optional)"""

    cacert: str | None = None
    """CA bundle used as the sole trust root for https (optional)"""

    auth: Mapping[str, Any] | None = None
    """Raw auth mapping with a ``method`` key (optional)"""

    timeout: float | None = None
    """Connect/read timeout in seconds; httpx default when unset (optional)"""

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> ResolvedConfig:
        """Validate a merged options mapping and build a config from it.

        Unrecognized keys are ignored.

        Raises:
            ValidationError: If a required option is missing or malformed.
        """
        validate_options(options)
        return cls(
            server_url=options["server_url"],
            path=options["path"],
            field=options.get("field"),
            version=options.get("version"),
            cacert=options.get("cacert"),
            auth=options.get("auth"),
            timeout=options.get("timeout"),
        )

    @property
    def is_v2(self) -> bool:
        """Return ``True`` when the secret engine uses the v2 envelope."""
        return self.version == KvVersion.V2

    def with_path(self, path: str) -> ResolvedConfig:
        """Return a copy addressing a different secret path."""
        return replace(self, path=path)

    def __repr__(self) -> str:
        auth = "None" if self.auth is None else f"<{self.auth.get('method')}>"
        return (
            f"ResolvedConfig("
            f"server_url={self.server_url!r}, "
            f"path={self.path!r}, "
            f"field={self.field!r}, "
            f"version={self.version!r}, "
            f"cacert={self.cacert!r}, "
            f"auth={auth}, "
            f"timeout={self.timeout!r})"
        )
