"""Configuration management for termsession.

Loads settings from a YAML configuration file with environment variable
overrides. Supports .env files.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/termsession.yaml")


class SessionConfig(BaseModel):
    skip_login: bool = Field(default=False, description="Start sessions already authenticated")
    commands_file: Path | None = Field(
        default=None, description="YAML file with extra command definitions"
    )


class EndpointConfig(BaseModel):
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8080, ge=1, le=65535)
    terminal_rows: int = Field(default=24, gt=0)
    terminal_cols: int = Field(default=80, gt=0)
    scrollback_lines: int = Field(default=1000, gt=0)


class ClientConfig(BaseModel):
    base_url: str = Field(default="http://localhost:8080")
    timeout: float = Field(default=10.0, gt=0)


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Root configuration for the termsession system.

    Loads from YAML file and supports environment variable overrides.
    Reads .env files automatically.
    """

    model_config = {
        "env_prefix": "TERMSESSION_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    session: SessionConfig = Field(default_factory=SessionConfig)
    endpoint: EndpointConfig = Field(default_factory=EndpointConfig)
    client: ClientConfig = Field(default_factory=ClientConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML + .env + environment variables.

    Priority: env vars > YAML file > defaults
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    yaml_data: dict = {}
    if path.exists():
        with open(path) as f:
            yaml_data = yaml.safe_load(f) or {}
        logger.info("Loaded configuration from %s", path)
    else:
        logger.warning("Config file %s not found, using defaults + env vars", path)

    _apply_env_overrides(yaml_data)

    return Settings(**yaml_data)


def _apply_env_overrides(yaml_data: dict) -> None:
    """Let prefixed env vars win over YAML values for the same section.

    Init kwargs outrank env vars in pydantic-settings, so YAML sections
    that are also set in the environment are dropped here.
    """
    prefix = Settings.model_config["env_prefix"]
    for section in ("session", "endpoint", "client", "logging"):
        values = yaml_data.get(section)
        if not isinstance(values, dict):
            continue
        for key in list(values):
            env_name = f"{prefix}{section.upper()}__{key.upper()}"
            if os.environ.get(env_name):
                logger.debug("Environment overrides %s.%s", section, key)
                del values[key]
