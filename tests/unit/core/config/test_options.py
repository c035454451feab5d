"""Tests for ResolvedConfig and StaticConfig models."""

from __future__ import annotations

import dataclasses

import pytest

from vault_resolver.core.config.options import ResolvedConfig
from vault_resolver.core.config.static import StaticConfig
from vault_resolver.core.exceptions import ValidationError


class TestResolvedConfig:
    def test_from_mapping(self) -> None:
        config = ResolvedConfig.from_mapping({
            "server_url": "http://vault:8200",
            "path": "kv/app",
            "field": "password",
            "version": 2,
            "ignored": True,
        })
        assert config.server_url == "http://vault:8200"
        assert config.path == "kv/app"
        assert config.field == "password"
        assert config.is_v2
        assert config.auth is None
        assert config.timeout is None

    def test_from_mapping_validates(self) -> None:
        with pytest.raises(ValidationError, match="path"):
            ResolvedConfig.from_mapping({"server_url": "http://vault:8200"})

    def test_from_mapping_rejects_negative_timeout(self) -> None:
        with pytest.raises(ValidationError, match="timeout"):
            ResolvedConfig.from_mapping({"server_url": "http://vault:8200", "path": "kv/app", "timeout": -3})

    def test_from_mapping_keeps_empty_auth(self) -> None:
        config = ResolvedConfig.from_mapping({"server_url": "http://vault:8200", "path": "kv/app", "auth": {}})
        assert config.auth == {}

    def test_frozen(self) -> None:
        config = ResolvedConfig(server_url="http://vault:8200", path="kv/app")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.path = "other"  # type: ignore[misc]

    def test_with_path_returns_copy(self) -> None:
        config = ResolvedConfig(server_url="http://vault:8200", path="kv/app")
        moved = config.with_path("kv/data/app")
        assert moved.path == "kv/data/app"
        assert config.path == "kv/app"

    def test_version_one_is_not_v2(self) -> None:
        assert not ResolvedConfig(server_url="u", path="p", version=1).is_v2

    def test_repr_masks_auth(self) -> None:
        config = ResolvedConfig(
            server_url="http://vault:8200",
            path="kv/app",
            auth={"method": "userpass", "user": "bob", "pass": "hunter2"},
        )
        text = repr(config)
        assert "hunter2" not in text
        assert "<userpass>" in text


class TestStaticConfig:
    def test_defaults_are_unset(self) -> None:
        assert StaticConfig().to_options() == {}

    def test_to_options_drops_unset(self) -> None:
        static = StaticConfig(server_url="http://vault:8200", version=2)
        assert static.to_options() == {"server_url": "http://vault:8200", "version": 2}

    def test_rejects_unknown_version(self) -> None:
        with pytest.raises(ValueError, match="version"):
            StaticConfig(version=3)

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ValueError, match="timeout"):
            StaticConfig(timeout=0)
