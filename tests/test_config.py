"""Tests for edgeclient.config -- file loading, env overrides, precedence, credentials."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from edgeclient.config import load_config, load_config_file, resolve_credential
from edgeclient.exceptions import ConfigError
from edgeclient.models import AuthConfig, ClientConfig


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


# ---------------------------------------------------------------------------
# load_config_file
# ---------------------------------------------------------------------------


class TestLoadConfigFile:
    def test_no_default_file_returns_empty(self, isolated_config: Path) -> None:
        assert load_config_file() == {}

    def test_reads_default_file_in_cwd(self, isolated_config: Path) -> None:
        _write_json(isolated_config / "edgeclient.json", {"base_url": "http://core-data:59880"})
        assert load_config_file() == {"base_url": "http://core-data:59880"}

    def test_explicit_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "conf" / "client.json"
        _write_json(cfg, {"timeout": 5})
        assert load_config_file(cfg) == {"timeout": 5}

    def test_explicit_missing_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config_file(tmp_path / "nope.json")

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        cfg = tmp_path / "bad.json"
        cfg.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid config file"):
            load_config_file(cfg)

    def test_non_object_raises(self, tmp_path: Path) -> None:
        cfg = tmp_path / "list.json"
        _write_json(cfg, [1, 2, 3])
        with pytest.raises(ConfigError, match="JSON object"):
            load_config_file(cfg)


# ---------------------------------------------------------------------------
# load_config precedence
# ---------------------------------------------------------------------------


class TestLoadConfig:
    def test_defaults(self, isolated_config: Path) -> None:
        config = load_config()
        assert config == ClientConfig()
        assert config.base_url == "http://localhost:59880"
        assert config.timeout == 30.0
        assert config.verify_ssl is True
        assert config.auth == AuthConfig()

    def test_file_values(self, isolated_config: Path) -> None:
        _write_json(
            isolated_config / "edgeclient.json",
            {
                "base_url": "https://metadata.plant:59881",
                "timeout": 12.5,
                "verify_ssl": False,
                "auth": {"type": "bearer", "source": "value:abc"},
            },
        )
        config = load_config()
        assert config.base_url == "https://metadata.plant:59881"
        assert config.timeout == 12.5
        assert config.verify_ssl is False
        assert config.auth.type == "bearer"
        assert config.auth.source == "value:abc"

    def test_env_overrides_file(
        self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        _write_json(isolated_config / "edgeclient.json", {"base_url": "http://file:1", "timeout": 1})
        monkeypatch.setenv("EDGECLIENT_BASE_URL", "http://env:2")
        monkeypatch.setenv("EDGECLIENT_TIMEOUT", "7")
        config = load_config()
        assert config.base_url == "http://env:2"
        assert config.timeout == 7.0

    def test_flags_override_env(
        self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("EDGECLIENT_BASE_URL", "http://env:2")
        config = load_config(base_url="http://flag:3", timeout=2.0)
        assert config.base_url == "http://flag:3"
        assert config.timeout == 2.0

    @pytest.mark.parametrize("value", ["0", "false", "No", " off "])
    def test_verify_ssl_false_values(
        self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        monkeypatch.setenv("EDGECLIENT_VERIFY_SSL", value)
        assert load_config().verify_ssl is False

    def test_verify_ssl_true_value(
        self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        _write_json(isolated_config / "edgeclient.json", {"verify_ssl": False})
        monkeypatch.setenv("EDGECLIENT_VERIFY_SSL", "1")
        assert load_config().verify_ssl is True

    def test_token_source_env_enables_bearer(
        self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("EDGECLIENT_TOKEN_SOURCE", "file:/run/secrets/token")
        config = load_config()
        assert config.auth == AuthConfig(type="bearer", source="file:/run/secrets/token")

    def test_invalid_timeout_raises_config_error(
        self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("EDGECLIENT_TIMEOUT", "soon")
        with pytest.raises(ConfigError, match="Invalid client configuration"):
            load_config()

    def test_explicit_path(self, isolated_config: Path, tmp_path: Path) -> None:
        cfg = tmp_path / "other" / "c.json"
        _write_json(cfg, {"base_url": "http://explicit:9"})
        assert load_config(cfg).base_url == "http://explicit:9"


# ---------------------------------------------------------------------------
# resolve_credential
# ---------------------------------------------------------------------------


class TestResolveCredential:
    def test_env_source(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MY_TOKEN", "secret123")
        assert resolve_credential("env:MY_TOKEN") == "secret123"

    def test_env_source_missing_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NONEXISTENT_VAR", raising=False)
        with pytest.raises(ConfigError, match="not set"):
            resolve_credential("env:NONEXISTENT_VAR")

    def test_file_source(self, tmp_path: Path) -> None:
        cred_file = tmp_path / "token.txt"
        cred_file.write_text("  my-secret-token  \n", encoding="utf-8")
        assert resolve_credential(f"file:{cred_file}") == "my-secret-token"

    def test_file_source_missing_raises(self) -> None:
        with pytest.raises(ConfigError, match="not found"):
            resolve_credential("file:/nonexistent/path/token.txt")

    def test_value_source(self) -> None:
        assert resolve_credential("value:tok:with:colons") == "tok:with:colons"

    def test_unknown_source_raises(self) -> None:
        with pytest.raises(ConfigError, match="Unknown credential source"):
            resolve_credential("magic:wand")
