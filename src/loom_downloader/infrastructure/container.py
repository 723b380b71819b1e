"""Dependency injection container configuration."""

from __future__ import annotations

from pathlib import Path

from dependency_injector import containers, providers

from loom_downloader.application.services.download_service import DefaultBatchDownloadService
from loom_downloader.application.services.verifier import PostDownloadVerifier
from loom_downloader.domain.services.configuration_provider import ConfigurationProvider
from loom_downloader.domain.services.download_reporter import DownloadReporter
from loom_downloader.domain.services.download_service import BatchDownloadService
from loom_downloader.domain.services.format_inspector import FormatInspector
from loom_downloader.domain.services.media_fetcher import MediaFetcher
from loom_downloader.domain.services.stream_prober import StreamProber
from loom_downloader.infrastructure.config.yaml_provider import YamlConfigurationProvider
from loom_downloader.infrastructure.tools.ffprobe_prober import FfprobeStreamProber
from loom_downloader.infrastructure.tools.runner import ToolRunner
from loom_downloader.infrastructure.tools.ytdlp_fetcher import YtDlpMediaFetcher
from loom_downloader.infrastructure.tools.ytdlp_inspector import YtDlpFormatInspector


class Container(containers.DeclarativeContainer):
    """
    Dependency injection container for the Loom Downloader application.

    This container manages the configuration provider and the shared tool
    runner; services that need configuration values are built lazily in
    the getter functions below.
    """

    # Configuration file (None selects built-in defaults)
    config_file_path = providers.Object(None)

    # Configuration Provider
    configuration_provider = providers.Singleton(
        YamlConfigurationProvider,
        config_path=config_file_path,
    )

    # Subprocess runner shared by all tool adapters
    tool_runner = providers.Singleton(ToolRunner)


def create_container(config_path: str | Path | None = None) -> Container:
    """
    Create and configure the dependency injection container.

    The configuration is loaded eagerly so that an invalid file is
    reported before any other startup check.

    Args:
        config_path: Path to the configuration file, or None for defaults

    Returns:
        Configured container instance

    Raises:
        ConfigurationError: If the configuration file is missing or invalid
    """
    container = Container()
    if config_path:
        container.config_file_path.override(str(config_path))
    container.configuration_provider()
    return container


def get_configuration_provider(container: Container) -> ConfigurationProvider:
    """
    Get the configuration provider from the container.

    Args:
        container: The dependency injection container

    Returns:
        Configuration provider instance
    """
    return container.configuration_provider()


def get_tool_runner(container: Container) -> ToolRunner:
    """Get the shared subprocess runner."""
    return container.tool_runner()


def get_format_inspector(container: Container) -> FormatInspector:
    """Get the yt-dlp format inspector."""
    tools = get_configuration_provider(container).get_tool_executables()
    return YtDlpFormatInspector(get_tool_runner(container), executable=tools["yt_dlp"])


def get_media_fetcher(container: Container) -> MediaFetcher:
    """Get the yt-dlp media fetcher."""
    config_provider = get_configuration_provider(container)
    tools = config_provider.get_tool_executables()
    return YtDlpMediaFetcher(
        get_tool_runner(container),
        executable=tools["yt_dlp"],
        prefer_free_formats=config_provider.get_prefer_free_formats(),
    )


def get_stream_prober(container: Container) -> StreamProber:
    """Get the ffprobe stream prober."""
    tools = get_configuration_provider(container).get_tool_executables()
    return FfprobeStreamProber(get_tool_runner(container), executable=tools["ffprobe"])


def get_verifier(container: Container) -> PostDownloadVerifier:
    """Get the post-download verifier."""
    config_provider = get_configuration_provider(container)
    return PostDownloadVerifier(
        fetcher=get_media_fetcher(container),
        prober=get_stream_prober(container),
        output_template=config_provider.get_output_template(),
    )


def get_batch_service(
    container: Container,
    reporter: DownloadReporter | None = None,
) -> BatchDownloadService:
    """Get the main batch download service."""
    return DefaultBatchDownloadService(
        inspector=get_format_inspector(container),
        fetcher=get_media_fetcher(container),
        verifier=get_verifier(container),
        config_provider=get_configuration_provider(container),
        reporter=reporter,
    )
