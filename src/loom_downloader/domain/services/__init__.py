"""Domain services: abstract collaborators and pure decision logic."""

from loom_downloader.domain.services.audio_classifier import has_audio
from loom_downloader.domain.services.configuration_provider import (
    ConfigurationProvider,
)
from loom_downloader.domain.services.download_reporter import DownloadReporter
from loom_downloader.domain.services.download_service import BatchDownloadService
from loom_downloader.domain.services.format_inspector import FormatInspector
from loom_downloader.domain.services.media_fetcher import MediaFetcher
from loom_downloader.domain.services.strategy_selector import select_strategy
from loom_downloader.domain.services.stream_prober import StreamProber

__all__ = [
    "FormatInspector",
    "MediaFetcher",
    "StreamProber",
    "ConfigurationProvider",
    "BatchDownloadService",
    "DownloadReporter",
    "has_audio",
    "select_strategy",
]
