"""Tests for the JSON request transport."""

from __future__ import annotations

import json

import certifi
import httpx
import pytest

from tests.factories import FakeVault, make_config
from vault_resolver.core.exceptions import CONNECT_ERROR, ServerError, TransportError, ValidationError
from vault_resolver.core.http.client import get_uri
from vault_resolver.core.http.transport import request


def _failing_transport(exc_type: type[httpx.TransportError]) -> httpx.MockTransport:
    def handler(req: httpx.Request) -> httpx.Response:
        raise exc_type("connection refused", request=req)

    return httpx.MockTransport(handler)


class TestRequestSuccess:
    def test_returns_decoded_json(self) -> None:
        vault = FakeVault({("GET", "/v1/foo/bar"): (200, {"data": {"foo": "bar"}})})
        config = make_config()

        result = request("GET", get_uri(config), config, transport=vault.transport)

        assert result == {"data": {"foo": "bar"}}

    def test_sends_default_headers(self) -> None:
        vault = FakeVault({("GET", "/v1/foo/bar"): (200, {})})
        config = make_config()

        request("GET", get_uri(config), config, transport=vault.transport)

        sent = vault.requests[0].headers
        assert sent["Content-Type"] == "application/json"
        assert sent["Accept"] == "application/json"

    def test_caller_headers_win(self) -> None:
        vault = FakeVault({("GET", "/v1/foo/bar"): (200, {})})
        config = make_config()

        request(
            "GET",
            get_uri(config),
            config,
            headers={"accept": "text/plain", "X-Vault-Token": "tok"},
            transport=vault.transport,
        )

        sent = vault.requests[0].headers
        assert sent.get_list("Accept") == ["text/plain"]
        assert sent["X-Vault-Token"] == "tok"

    def test_none_header_dropped(self) -> None:
        vault = FakeVault({("GET", "/v1/foo/bar"): (200, {})})
        config = make_config()

        request("GET", get_uri(config), config, headers={"X-Vault-Token": None}, transport=vault.transport)

        assert "X-Vault-Token" not in vault.requests[0].headers

    def test_posts_json_body(self) -> None:
        vault = FakeVault({("POST", "/v1/auth/userpass/login/bob"): (200, {"auth": {}})})
        config = make_config()

        request(
            "post",
            get_uri(config, "auth/userpass/login/bob"),
            config,
            data={"password": "hunter2"},
            transport=vault.transport,
        )

        assert vault.requests[0].method == "POST"
        assert vault.body_of(0) == {"password": "hunter2"}

    def test_any_2xx_accepted(self) -> None:
        vault = FakeVault({("GET", "/v1/foo/bar"): (202, {"ok": True})})
        config = make_config()

        assert request("GET", get_uri(config), config, transport=vault.transport) == {"ok": True}

    def test_https_with_cacert(self) -> None:
        vault = FakeVault({("GET", "/v1/foo/bar"): (200, {"data": {}})})
        config = make_config(server_url="https://127.0.0.1:8200", cacert=certifi.where())

        assert request("GET", get_uri(config), config, transport=vault.transport) == {"data": {}}


class TestRequestFailures:
    def test_connect_error_wrapped(self) -> None:
        config = make_config()
        uri = get_uri(config)

        with pytest.raises(TransportError) as excinfo:
            request("GET", uri, config, transport=_failing_transport(httpx.ConnectError))

        assert excinfo.value.kind == CONNECT_ERROR
        assert str(uri) in str(excinfo.value)
        assert "connection refused" in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, httpx.ConnectError)

    def test_timeout_wrapped(self) -> None:
        config = make_config()

        with pytest.raises(TransportError):
            request("GET", get_uri(config), config, transport=_failing_transport(httpx.ReadTimeout))

    def test_https_without_cacert_never_sends(self) -> None:
        vault = FakeVault()
        config = make_config(server_url="https://127.0.0.1:8200")

        with pytest.raises(ValidationError, match="https"):
            request("GET", get_uri(config), config, transport=vault.transport)

        assert vault.requests == []

    def test_server_error_with_errors_list(self) -> None:
        vault = FakeVault({("GET", "/v1/foo/bar"): (403, {"errors": ["permission denied"]})})
        config = make_config()

        with pytest.raises(ServerError) as excinfo:
            request("GET", get_uri(config), config, transport=vault.transport)

        assert str(excinfo.value) == '403 "Forbidden": permission denied'
        assert excinfo.value.status_code == 403

    def test_server_error_joins_multiple_errors(self) -> None:
        vault = FakeVault({("GET", "/v1/foo/bar"): (400, {"errors": ["one", "two"]})})
        config = make_config()

        with pytest.raises(ServerError, match="one;two"):
            request("GET", get_uri(config), config, transport=vault.transport)

    def test_server_error_with_non_json_body(self) -> None:
        vault = FakeVault({("GET", "/v1/foo/bar"): (502, "<html>bad gateway</html>")})
        config = make_config()

        with pytest.raises(ServerError) as excinfo:
            request("GET", get_uri(config), config, transport=vault.transport)

        assert str(excinfo.value) == '502 "Bad Gateway"'
        assert excinfo.value.errors is None

    def test_server_error_without_errors_key(self) -> None:
        vault = FakeVault({("GET", "/v1/foo/bar"): (500, {"message": "boom"})})
        config = make_config()

        with pytest.raises(ServerError) as excinfo:
            request("GET", get_uri(config), config, transport=vault.transport)

        assert str(excinfo.value) == '500 "Internal Server Error"'

    def test_invalid_json_on_success_propagates(self) -> None:
        vault = FakeVault({("GET", "/v1/foo/bar"): (200, "not json")})
        config = make_config()

        with pytest.raises(json.JSONDecodeError):
            request("GET", get_uri(config), config, transport=vault.transport)
