"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, Mock

import pytest
import yaml

from loom_downloader.domain.models.formats import FormatEntry, FormatSet
from loom_downloader.domain.models.processing import BatchRun, VerificationResult
from loom_downloader.infrastructure.config.models import AppConfig

URL_WITH_AUDIO = "https://www.loom.com/share/aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa"
URL_SILENT = "https://www.loom.com/share/bbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb"
URL_BROKEN = "https://www.loom.com/share/cccccccccccccccccccccccccccccccc"


@pytest.fixture
def sample_config_data() -> dict[str, Any]:
    """Sample configuration data for testing."""
    return {
        "tools": {
            "yt_dlp": "yt-dlp",
            "ffmpeg": "ffmpeg",
            "ffprobe": "ffprobe",
        },
        "download": {
            "format_selectors": ["http-transcoded", "bestvideo+bestaudio", "best"],
            "merge_output_format": "mp4",
            "output_template": "%(title)s.%(ext)s",
            "prefer_free_formats": True,
        },
        "processing": {
            "recheck_audio_on_failure": True,
            "verify_audio": True,
        },
        "logging": {
            "level": "INFO",
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            "file_path": None,
            "max_file_size": 10485760,
            "backup_count": 5,
        },
    }


@pytest.fixture
def temp_config_file(sample_config_data: dict[str, Any]) -> Path:
    """Create a temporary configuration file for testing."""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yml", delete=False) as f:
        yaml.dump(sample_config_data, f)
        return Path(f.name)


@pytest.fixture
def app_config(sample_config_data: dict[str, Any]) -> AppConfig:
    """Create an AppConfig instance for testing."""
    return AppConfig(**sample_config_data)


@pytest.fixture
def url_with_audio() -> str:
    """URL of a recording with an audio track."""
    return URL_WITH_AUDIO


@pytest.fixture
def url_silent() -> str:
    """URL of a screen recording without audio."""
    return URL_SILENT


@pytest.fixture
def url_broken() -> str:
    """URL whose download fails."""
    return URL_BROKEN


@pytest.fixture
def format_set_with_audio() -> FormatSet:
    """Formats for a video with separate video and audio streams."""
    return FormatSet(
        url=URL_WITH_AUDIO,
        entries=(
            FormatEntry(video_codec="avc1.64001F", format_id="http-transcoded-video", ext="mp4"),
            FormatEntry(audio_codec="mp4a.40.2", format_id="hls-audio", ext="mp4"),
        ),
        title="Weekly Sync",
    )


@pytest.fixture
def format_set_silent() -> FormatSet:
    """Formats for a video-only recording."""
    return FormatSet(
        url=URL_SILENT,
        entries=(
            FormatEntry(video_codec="avc1.64001F", format_id="http-transcoded", ext="mp4"),
            FormatEntry(video_codec="vp9", format_id="hls-720p", ext="webm"),
        ),
        title="Screen Only",
    )


@pytest.fixture
def batch_run(tmp_path: Path) -> BatchRun:
    """Create a three-URL batch run writing into a temporary directory."""
    return BatchRun(
        urls=[URL_WITH_AUDIO, URL_SILENT, URL_BROKEN],
        output_dir=tmp_path,
    )


@pytest.fixture
def mock_inspector(format_set_with_audio: FormatSet) -> AsyncMock:
    """Create a mock format inspector."""
    mock = AsyncMock()
    mock.inspect.return_value = format_set_with_audio
    mock.list_formats.return_value = None
    return mock


@pytest.fixture
def mock_fetcher() -> AsyncMock:
    """Create a mock media fetcher."""
    mock = AsyncMock()
    mock.fetch.return_value = None
    mock.resolve_output_path.return_value = Path("Weekly Sync.mp4")
    return mock


@pytest.fixture
def mock_verifier() -> AsyncMock:
    """Create a mock post-download verifier."""
    mock = AsyncMock()
    mock.locate.return_value = Path("Weekly Sync.mp4")
    mock.verify.return_value = VerificationResult.CONFIRMED
    return mock


@pytest.fixture
def mock_reporter() -> Mock:
    """Create a mock download reporter."""
    return Mock()


@pytest.fixture
def mock_config_provider(app_config: AppConfig) -> Mock:
    """Create a mock configuration provider."""
    mock = Mock()
    mock.get_tool_executables.return_value = app_config.tools.as_dict()
    mock.get_format_selectors.return_value = app_config.download.format_selectors
    mock.get_merge_output_format.return_value = app_config.download.merge_output_format
    mock.get_output_template.return_value = app_config.download.output_template
    mock.get_prefer_free_formats.return_value = app_config.download.prefer_free_formats
    mock.get_recheck_audio_on_failure.return_value = app_config.processing.recheck_audio_on_failure
    mock.get_verify_audio.return_value = app_config.processing.verify_audio
    mock.get_logging_config.return_value = app_config.logging
    return mock
