"""Configuration providers and models."""

from loom_downloader.infrastructure.config.models import AppConfig, LoggingConfig
from loom_downloader.infrastructure.config.yaml_provider import YamlConfigurationProvider

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "YamlConfigurationProvider",
]
