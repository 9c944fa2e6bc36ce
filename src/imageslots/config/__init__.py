"""Configuration management for imageslots.

Loads and validates YAML-based configuration with Pydantic models.
Environment variables override anything the YAML file leaves unset.
"""

from imageslots.config.settings import LoggingConfig, ServerConfig, Settings, load_settings

__all__ = ["LoggingConfig", "ServerConfig", "Settings", "load_settings"]
