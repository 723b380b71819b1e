"""Tests for the yt-dlp media fetcher."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

from loom_downloader.domain.exceptions import ExternalToolError, FetchError
from loom_downloader.domain.services.strategy_selector import select_strategy
from loom_downloader.infrastructure.tools.runner import ToolResult
from loom_downloader.infrastructure.tools.ytdlp_fetcher import YtDlpMediaFetcher

URL = "https://www.loom.com/share/0123456789abcdef0123456789abcdef"
TEMPLATE = "downloads/%(title)s.%(ext)s"


class TestYtDlpMediaFetcher:
    """Tests for YtDlpMediaFetcher."""

    @pytest.fixture
    def mock_runner(self) -> Mock:
        """Create a mock tool runner."""
        mock = Mock()
        mock.run = AsyncMock(return_value=ToolResult(args=("yt-dlp",), returncode=0))
        return mock

    @pytest.fixture
    def fetcher(self, mock_runner: Mock) -> YtDlpMediaFetcher:
        """Create a fetcher instance for testing."""
        return YtDlpMediaFetcher(mock_runner)

    def test_build_download_args(self, fetcher: YtDlpMediaFetcher) -> None:
        """Test the full download command line."""
        args = fetcher.build_download_args(URL, select_strategy(), TEMPLATE)

        assert args == [
            "yt-dlp",
            "--format",
            "http-transcoded/bestvideo+bestaudio/best",
            "--merge-output-format",
            "mp4",
            "--output",
            TEMPLATE,
            "--no-playlist",
            "--prefer-free-formats",
            "--progress",
            URL,
        ]

    def test_build_download_args_verbose(self, fetcher: YtDlpMediaFetcher) -> None:
        """Test that verbose mode swaps the progress flag."""
        args = fetcher.build_download_args(URL, select_strategy(), TEMPLATE, verbose=True)

        assert "--verbose" in args
        assert "--progress" not in args
        assert args[-1] == URL

    def test_build_download_args_without_free_formats(self, mock_runner: Mock) -> None:
        """Test disabling the free format preference."""
        fetcher = YtDlpMediaFetcher(mock_runner, executable="/opt/yt-dlp", prefer_free_formats=False)

        args = fetcher.build_download_args(URL, select_strategy(), TEMPLATE)

        assert args[0] == "/opt/yt-dlp"
        assert "--prefer-free-formats" not in args

    @pytest.mark.asyncio
    async def test_fetch_success(self, fetcher: YtDlpMediaFetcher, mock_runner: Mock) -> None:
        """Test a successful download passes output through to the terminal."""
        await fetcher.fetch(URL, select_strategy(), TEMPLATE)

        call = mock_runner.run.await_args
        assert call.args[0][-1] == URL
        assert call.kwargs == {"capture": False}

    @pytest.mark.asyncio
    async def test_fetch_nonzero_exit(self, fetcher: YtDlpMediaFetcher, mock_runner: Mock) -> None:
        """Test that a non-zero exit raises FetchError."""
        mock_runner.run.return_value = ToolResult(args=("yt-dlp",), returncode=1)

        with pytest.raises(FetchError) as exc_info:
            await fetcher.fetch(URL, select_strategy(), TEMPLATE)

        assert exc_info.value.exit_code == 1
        assert exc_info.value.url == URL

    @pytest.mark.asyncio
    async def test_fetch_launch_failure(self, fetcher: YtDlpMediaFetcher, mock_runner: Mock) -> None:
        """Test that a launch failure raises FetchError."""
        mock_runner.run.side_effect = ExternalToolError("yt-dlp", cause=FileNotFoundError())

        with pytest.raises(FetchError) as exc_info:
            await fetcher.fetch(URL, select_strategy(), TEMPLATE)

        assert exc_info.value.exit_code is None
        assert isinstance(exc_info.value.cause, ExternalToolError)

    @pytest.mark.asyncio
    async def test_resolve_output_path(self, fetcher: YtDlpMediaFetcher, mock_runner: Mock) -> None:
        """Test resolving the file name a template produces."""
        mock_runner.run.return_value = ToolResult(
            args=("yt-dlp",), returncode=0, stdout="\ndownloads/Weekly Sync.mp4\n"
        )

        path = await fetcher.resolve_output_path(URL, "downloads/%(title)s.mp4")

        assert path == Path("downloads/Weekly Sync.mp4")
        mock_runner.run.assert_awaited_once_with(
            ["yt-dlp", "--no-playlist", "--get-filename", "--output", "downloads/%(title)s.mp4", URL]
        )

    @pytest.mark.asyncio
    async def test_resolve_output_path_no_output(
        self, fetcher: YtDlpMediaFetcher, mock_runner: Mock
    ) -> None:
        """Test that an empty answer raises ExternalToolError."""
        mock_runner.run.return_value = ToolResult(args=("yt-dlp",), returncode=0, stdout="  \n")

        with pytest.raises(ExternalToolError, match="no filename printed"):
            await fetcher.resolve_output_path(URL, TEMPLATE)

    @pytest.mark.asyncio
    async def test_resolve_output_path_failure(
        self, fetcher: YtDlpMediaFetcher, mock_runner: Mock
    ) -> None:
        """Test that a failed query raises ExternalToolError."""
        mock_runner.run.return_value = ToolResult(
            args=("yt-dlp",), returncode=1, stderr="ERROR: private video"
        )

        with pytest.raises(ExternalToolError, match="private video"):
            await fetcher.resolve_output_path(URL, TEMPLATE)
