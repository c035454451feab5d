"""Static plugin configuration model."""

from dataclasses import asdict, dataclass
from typing import Any

from vault_resolver.core.config.base import KvVersion


@dataclass
class StaticConfig:
    """Options set once in a configuration file.

    Every field is optional: this layer sits between environment defaults
    and per-reference inventory options.
    """

    server_url: str | None = None
    """Base URL of the secret server (optional)"""

    path: str | None = None
    """Default secret path (optional)"""

    field: str | None = None
    """Default field to extract (optional)"""

    version: int | None = None
    """Secret engine API version, 1 or 2 (optional)"""

    cacert: str | None = None
    """CA bundle for https connections (optional)"""

    auth: dict[str, Any] | None = None
    """Auth method mapping, e.g. ``{method: userpass, user: ..., pass: ...}`` (optional)"""

    timeout: float | None = None
    """Connect/read timeout in seconds (optional)"""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.version is not None and self.version not in {v.value for v in KvVersion}:
            raise ValueError("version must be 1 or 2")

        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be positive")

    def to_options(self) -> dict[str, Any]:
        """Return the options this layer actually sets."""
        return {key: value for key, value in asdict(self).items() if value is not None}
