"""Configuration management for imageslots.

Loads settings from a YAML configuration file with environment variable
overrides (``IMAGESLOTS_`` prefix). Supports .env files.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/imageslots.yaml")

DEFAULT_MAX_UPLOAD_BYTES = 10 << 20


class ServerConfig(BaseModel):
    upload_dir: str = Field(default="uploads", description="Directory holding the slot images")
    script_path: str = Field(
        default="scripts/script.sh",
        description="Script run by /run-script, relative to the working directory",
    )
    listen_addr: str = Field(default=":8080", description="host:port, empty host binds all")
    max_upload_bytes: int = Field(default=DEFAULT_MAX_UPLOAD_BYTES, gt=0)

    @field_validator("listen_addr")
    @classmethod
    def _check_listen_addr(cls, value: str) -> str:
        _split_listen_addr(value)
        return value

    @property
    def host(self) -> str:
        return _split_listen_addr(self.listen_addr)[0]

    @property
    def port(self) -> int:
        return _split_listen_addr(self.listen_addr)[1]


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Root configuration for the imageslots server.

    Loads from YAML file and supports environment variable overrides.
    Reads .env files automatically.
    """

    model_config = {
        "env_prefix": "IMAGESLOTS_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML + .env + environment variables.

    Values present in the YAML file take precedence over environment
    variables for the same field.
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    yaml_data = {}
    if path.exists():
        with open(path) as f:
            yaml_data = yaml.safe_load(f) or {}
        logger.info("Loaded configuration from %s", path)
    else:
        logger.warning("Config file %s not found, using defaults + env vars", path)

    return Settings(**yaml_data)


def _split_listen_addr(addr: str) -> tuple[str, int]:
    """Split ``host:port`` into its parts. An empty host binds all interfaces."""
    host, sep, port = addr.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"listen address must look like 'host:port', got {addr!r}")
    port_num = int(port)
    if not 1 <= port_num <= 65535:
        raise ValueError(f"port out of range: {port_num}")
    host = host.strip("[]") or "0.0.0.0"
    return host, port_num
