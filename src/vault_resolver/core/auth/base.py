"""Auth method abstractions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar

import httpx

from vault_resolver.core.config.options import ResolvedConfig


class AuthStrategy(ABC):
    """Base class for auth methods.

    Subclasses declare the ``method`` name they answer to and the
    ``required_keys`` their auth mapping must carry, then implement
    :meth:`from_options` and :meth:`request_token`.
    """

    method: ClassVar[str]
    """Value of the ``method`` key that selects this strategy."""

    required_keys: ClassVar[tuple[str, ...]] = ()
    """Keys validated before :meth:`from_options` is called."""

    @classmethod
    @abstractmethod
    def from_options(cls, options: Mapping[str, Any]) -> AuthStrategy:
        """Build the strategy from an already validated auth mapping."""
        ...

    @abstractmethod
    def request_token(
        self,
        config: ResolvedConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> str:
        """Obtain the bearer credential sent as ``X-Vault-Token``."""
        ...
