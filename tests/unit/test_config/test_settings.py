"""Tests for configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from imageslots.config.settings import (
    DEFAULT_MAX_UPLOAD_BYTES,
    LoggingConfig,
    ServerConfig,
    Settings,
    load_settings,
)


class TestServerConfig:
    def test_defaults(self) -> None:
        config = ServerConfig()
        assert config.upload_dir == "uploads"
        assert config.script_path == "scripts/script.sh"
        assert config.listen_addr == ":8080"
        assert config.max_upload_bytes == 10 * 1024 * 1024 == DEFAULT_MAX_UPLOAD_BYTES

    def test_empty_host_binds_all(self) -> None:
        config = ServerConfig()
        assert config.host == "0.0.0.0"
        assert config.port == 8080

    def test_explicit_host(self) -> None:
        config = ServerConfig(listen_addr="127.0.0.1:9000")
        assert config.host == "127.0.0.1"
        assert config.port == 9000

    def test_ipv6_host(self) -> None:
        config = ServerConfig(listen_addr="[::1]:8081")
        assert config.host == "::1"
        assert config.port == 8081

    @pytest.mark.parametrize("addr", ["8080", "localhost:", "host:http", ":0", ":70000"])
    def test_invalid_listen_addr(self, addr: str) -> None:
        with pytest.raises(ValidationError):
            ServerConfig(listen_addr=addr)

    def test_max_upload_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            ServerConfig(max_upload_bytes=0)


class TestSettings:
    def test_default_settings(self) -> None:
        settings = Settings()
        assert settings.server.port == 8080
        assert settings.logging.level == "INFO"
        assert isinstance(settings.logging, LoggingConfig)

    def test_load_settings_missing_file(self, tmp_path: Path) -> None:
        settings = load_settings(tmp_path / "nonexistent.yaml")
        assert settings.server.upload_dir == "uploads"

    def test_load_settings_from_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "imageslots.yaml"
        path.write_text(
            "server:\n"
            "  upload_dir: /srv/images\n"
            "  listen_addr: 127.0.0.1:8181\n"
            "logging:\n"
            "  level: DEBUG\n"
        )
        settings = load_settings(path)
        assert settings.server.upload_dir == "/srv/images"
        assert settings.server.port == 8181
        assert settings.server.script_path == "scripts/script.sh"
        assert settings.logging.level == "DEBUG"

    def test_empty_yaml_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        settings = load_settings(path)
        assert settings.server.listen_addr == ":8080"

    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("IMAGESLOTS_SERVER__SCRIPT_PATH", "/opt/run.sh")
        settings = load_settings(tmp_path / "nonexistent.yaml")
        assert settings.server.script_path == "/opt/run.sh"
        assert settings.server.upload_dir == "uploads"
