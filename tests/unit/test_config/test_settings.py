"""Tests for configuration loading and validation."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from termsession.config.settings import (
    EndpointConfig,
    LoggingConfig,
    SessionConfig,
    Settings,
    load_settings,
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run each test away from any real .env file or TERMSESSION_ vars."""
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("TERMSESSION_"):
            monkeypatch.delenv(name)


class TestSettings:
    def test_default_settings(self) -> None:
        settings = Settings()
        assert settings.session.skip_login is False
        assert settings.session.commands_file is None
        assert settings.endpoint.port == 8080
        assert settings.client.base_url == "http://localhost:8080"
        assert settings.logging.level == "INFO"

    def test_endpoint_config_defaults(self) -> None:
        config = EndpointConfig()
        assert config.terminal_rows == 24
        assert config.terminal_cols == 80

    def test_invalid_port_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EndpointConfig(port=0)

    def test_session_config_path(self) -> None:
        config = SessionConfig(commands_file="config/commands.yaml")
        assert config.commands_file == Path("config/commands.yaml")

    def test_logging_config_defaults(self) -> None:
        assert LoggingConfig().file is None


class TestLoadSettings:
    def test_missing_file(self, tmp_path: Path) -> None:
        settings = load_settings(tmp_path / "nonexistent.yaml")
        assert settings.endpoint.port == 8080

    def test_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "termsession.yaml"
        path.write_text(
            "session:\n  skip_login: true\nendpoint:\n  port: 9000\n  terminal_rows: 40\n"
        )
        settings = load_settings(path)
        assert settings.session.skip_login is True
        assert settings.endpoint.port == 9000
        assert settings.endpoint.terminal_rows == 40
        assert settings.endpoint.terminal_cols == 80

    def test_empty_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_settings(path).session.skip_login is False

    def test_env_overrides_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "termsession.yaml"
        path.write_text("endpoint:\n  port: 9000\n  host: 0.0.0.0\n")
        monkeypatch.setenv("TERMSESSION_ENDPOINT__PORT", "9100")
        settings = load_settings(path)
        assert settings.endpoint.port == 9100
        assert settings.endpoint.host == "0.0.0.0"

    def test_env_without_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TERMSESSION_SESSION__SKIP_LOGIN", "true")
        settings = load_settings(tmp_path / "missing.yaml")
        assert settings.session.skip_login is True

    def test_invalid_yaml_value(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("endpoint:\n  port: 70000\n")
        with pytest.raises(ValidationError):
            load_settings(path)
