"""Built-in auth method implementations."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from vault_resolver.core.auth.base import AuthStrategy
from vault_resolver.core.config.options import ResolvedConfig
from vault_resolver.core.http.client import get_uri
from vault_resolver.core.http.transport import request

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenAuth(AuthStrategy):
    """Use a pre-issued token as-is. No network call is made."""

    method = "token"
    required_keys = ("token",)

    token: str

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> TokenAuth:
        return cls(token=options["token"])

    def request_token(
        self,
        config: ResolvedConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> str:
        return self.token

    def __repr__(self) -> str:
        return "TokenAuth(token=***)"


@dataclass(frozen=True)
class UserpassAuth(AuthStrategy):
    """Log in with a username and password to obtain a client token.

    Posts ``{"password": ...}`` to ``auth/userpass/login/<user>`` on the
    configured server and returns ``auth.client_token`` from the reply.
    A reply without that nesting raises ``KeyError``/``TypeError``.
    """

    method = "userpass"
    required_keys = ("user", "pass")

    user: str
    password: str

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> UserpassAuth:
        return cls(user=options["user"], password=options["pass"])

    @property
    def login_path(self) -> str:
        return f"auth/userpass/login/{self.user}"

    def request_token(
        self,
        config: ResolvedConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> str:
        uri = get_uri(config, self.login_path)
        logger.debug("Logging in as '%s' via userpass", self.user)
        response = request("POST", uri, config, data={"password": self.password}, transport=transport)
        return response["auth"]["client_token"]

    def __repr__(self) -> str:
        return f"UserpassAuth(user={self.user!r}, password=***)"
