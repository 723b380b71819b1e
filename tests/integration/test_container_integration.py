"""Integration tests for dependency injection container."""

from __future__ import annotations

from pathlib import Path

import pytest
from dependency_injector import containers

from loom_downloader.application.services.download_service import DefaultBatchDownloadService
from loom_downloader.application.services.verifier import PostDownloadVerifier
from loom_downloader.domain.exceptions import ConfigurationError
from loom_downloader.infrastructure.config.yaml_provider import YamlConfigurationProvider
from loom_downloader.infrastructure.container import (
    create_container,
    get_batch_service,
    get_configuration_provider,
    get_format_inspector,
    get_media_fetcher,
    get_stream_prober,
    get_tool_runner,
    get_verifier,
)
from loom_downloader.infrastructure.tools import (
    FfprobeStreamProber,
    YtDlpFormatInspector,
    YtDlpMediaFetcher,
)


class TestContainerIntegration:
    """Integration tests for the dependency injection container."""

    def test_create_container_success(self, temp_config_file: Path) -> None:
        """Test successful container creation."""
        container = create_container(temp_config_file)
        assert isinstance(container, containers.DynamicContainer)
        assert isinstance(get_configuration_provider(container), YamlConfigurationProvider)

    def test_create_container_defaults(self) -> None:
        """Test container creation without a config file."""
        container = create_container()
        config_provider = get_configuration_provider(container)
        assert config_provider.get_merge_output_format() == "mp4"

    def test_create_container_invalid_config(self) -> None:
        """Test container creation with invalid config file."""
        with pytest.raises(ConfigurationError):
            create_container("nonexistent.yml")

    def test_get_configuration_provider(self, temp_config_file: Path) -> None:
        """Test getting configuration provider from container."""
        container = create_container(temp_config_file)
        config_provider = get_configuration_provider(container)

        assert config_provider.get_format_selectors() == [
            "http-transcoded",
            "bestvideo+bestaudio",
            "best",
        ]
        assert config_provider is get_configuration_provider(container)

    def test_tool_runner_is_shared(self, temp_config_file: Path) -> None:
        """Test that all adapters share one runner."""
        container = create_container(temp_config_file)
        runner = get_tool_runner(container)

        assert get_format_inspector(container).runner is runner
        assert get_media_fetcher(container).runner is runner
        assert get_stream_prober(container).runner is runner

    def test_tool_adapters(self, temp_config_file: Path) -> None:
        """Test that adapters are built from the configured executables."""
        container = create_container(temp_config_file)

        inspector = get_format_inspector(container)
        fetcher = get_media_fetcher(container)
        prober = get_stream_prober(container)

        assert isinstance(inspector, YtDlpFormatInspector)
        assert isinstance(fetcher, YtDlpMediaFetcher)
        assert isinstance(prober, FfprobeStreamProber)
        assert inspector.executable == "yt-dlp"
        assert fetcher.prefer_free_formats is True
        assert prober.executable == "ffprobe"

    def test_get_verifier(self, temp_config_file: Path) -> None:
        """Test getting the post-download verifier."""
        container = create_container(temp_config_file)
        verifier = get_verifier(container)

        assert isinstance(verifier, PostDownloadVerifier)
        assert verifier.output_template == "%(title)s.%(ext)s"

    def test_get_batch_service(self, temp_config_file: Path) -> None:
        """Test getting batch service from container."""
        container = create_container(temp_config_file)
        batch_service = get_batch_service(container)

        assert isinstance(batch_service, DefaultBatchDownloadService)
        assert batch_service.config_provider is get_configuration_provider(container)
