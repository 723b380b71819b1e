"""YAML-based configuration provider implementation."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from loom_downloader.domain.exceptions import ConfigurationError
from loom_downloader.domain.services.configuration_provider import ConfigurationProvider
from loom_downloader.infrastructure.config.models import AppConfig, LoggingConfig


class YamlConfigurationProvider(ConfigurationProvider):
    """
    Configuration provider that loads settings from YAML files.

    This implementation supports loading configuration from YAML files
    with environment variable substitution and validation using Pydantic models.
    Without a file, the built-in defaults are used.
    """

    def __init__(self, config_path: str | Path | None = None) -> None:
        """
        Initialize the YAML configuration provider.

        Args:
            config_path: Path to the YAML configuration file, or None for defaults

        Raises:
            ConfigurationError: If the configuration file cannot be loaded or is invalid
        """
        self.config_path = Path(config_path) if config_path else None
        self._config: AppConfig | None = None
        self._load_config()

    def _load_config(self) -> None:
        """Load and validate configuration from the YAML file, if any."""
        if self.config_path is None:
            self._config = AppConfig()
            return

        if not self.config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in configuration file: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

        if not raw_config:
            raise ConfigurationError("Configuration file is empty")
        if not isinstance(raw_config, dict):
            raise ConfigurationError("Configuration file must contain a mapping at the top level")

        # Perform environment variable substitution
        raw_config = self._substitute_env_vars(raw_config)

        try:
            self._config = AppConfig(**raw_config)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

    def _substitute_env_vars(self, obj: Any) -> Any:
        """
        Recursively substitute environment variables in configuration.

        Supports ${VAR_NAME} and ${VAR_NAME:default_value} syntax.
        """
        if isinstance(obj, dict):
            return {key: self._substitute_env_vars(value) for key, value in obj.items()}
        elif isinstance(obj, list):
            return [self._substitute_env_vars(item) for item in obj]
        elif isinstance(obj, str):
            return self._substitute_string_env_vars(obj)
        else:
            return obj

    def _substitute_string_env_vars(self, value: str) -> str:
        """Substitute environment variables in a string value."""
        # ${VAR_NAME} or ${VAR_NAME:default}
        pattern = r'\$\{([^}:]+)(?::([^}]*))?\}'

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.getenv(var_name, default_value)

        return re.sub(pattern, replace_var, value)

    @property
    def config(self) -> AppConfig:
        """Get the loaded configuration."""
        if self._config is None:
            raise ConfigurationError("Configuration not loaded")
        return self._config

    def get_tool_executables(self) -> dict[str, str]:
        """Get the external executables the downloader depends on."""
        return self.config.tools.as_dict()

    def get_format_selectors(self) -> list[str]:
        """Get the ordered format selectors for the fetch engine."""
        return list(self.config.download.format_selectors)

    def get_merge_output_format(self) -> str:
        """Get the container for merged streams."""
        return self.config.download.merge_output_format

    def get_output_template(self) -> str:
        """Get the output file naming template."""
        return self.config.download.output_template

    def get_prefer_free_formats(self) -> bool:
        """Get whether freely licensed codecs are preferred."""
        return self.config.download.prefer_free_formats

    def get_recheck_audio_on_failure(self) -> bool:
        """Get whether a failed download re-queries the source for audio."""
        return self.config.processing.recheck_audio_on_failure

    def get_verify_audio(self) -> bool:
        """Get whether downloaded files are probed for audio."""
        return self.config.processing.verify_audio

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        return self.config.logging
