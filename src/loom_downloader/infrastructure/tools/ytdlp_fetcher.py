"""yt-dlp implementation of the media fetcher."""

from __future__ import annotations

import logging
from pathlib import Path

from loom_downloader.domain.exceptions import ExternalToolError, FetchError
from loom_downloader.domain.models.strategy import DownloadStrategy
from loom_downloader.domain.services.media_fetcher import MediaFetcher
from loom_downloader.infrastructure.tools.runner import ToolRunner

logger = logging.getLogger(__name__)


class YtDlpMediaFetcher(MediaFetcher):
    """
    Media fetcher that downloads and merges streams with yt-dlp.

    yt-dlp hands the merge of separate video and audio streams to ffmpeg,
    which must be on the PATH alongside it.
    """

    def __init__(
        self,
        runner: ToolRunner,
        executable: str = "yt-dlp",
        prefer_free_formats: bool = True,
    ) -> None:
        """
        Initialize the yt-dlp media fetcher.

        Args:
            runner: Runner used to launch yt-dlp
            executable: yt-dlp executable name or path
            prefer_free_formats: Prefer freely licensed codecs between equal options
        """
        self.runner = runner
        self.executable = executable
        self.prefer_free_formats = prefer_free_formats

    async def fetch(
        self,
        url: str,
        strategy: DownloadStrategy,
        output_template: str,
        verbose: bool = False,
    ) -> None:
        """
        Download a single video using the given strategy.

        yt-dlp output is passed through to the terminal.

        Args:
            url: Source URL
            strategy: Ordered format preferences and merge container
            output_template: yt-dlp output template rooted at the output directory
            verbose: Use yt-dlp's --verbose instead of --progress

        Raises:
            FetchError: If yt-dlp fails or cannot be launched
        """
        args = self.build_download_args(url, strategy, output_template, verbose)
        logger.info(f"Downloading {url} with formats {strategy}")

        try:
            result = await self.runner.run(args, capture=False)
        except ExternalToolError as e:
            raise FetchError(url, cause=e) from e

        if not result.ok:
            raise FetchError(url, result.returncode)

        logger.info(f"Download complete: {url}")

    async def resolve_output_path(self, url: str, output_template: str) -> Path:
        """
        Ask yt-dlp which file name a template resolves to for a URL.

        Args:
            url: Source URL
            output_template: yt-dlp output template

        Returns:
            Resolved output file path

        Raises:
            ExternalToolError: If yt-dlp fails or prints no filename
        """
        result = await self.runner.run(
            [
                self.executable,
                "--no-playlist",
                "--get-filename",
                "--output",
                output_template,
                url,
            ]
        )
        result.raise_for_status()

        filenames = [line.strip() for line in result.stdout.splitlines() if line.strip()]
        if not filenames:
            raise ExternalToolError(self.executable, result.returncode, "no filename printed")

        return Path(filenames[0])

    def build_download_args(
        self,
        url: str,
        strategy: DownloadStrategy,
        output_template: str,
        verbose: bool = False,
    ) -> list[str]:
        """
        Build the yt-dlp command line for a download.

        Args:
            url: Source URL
            strategy: Ordered format preferences and merge container
            output_template: yt-dlp output template
            verbose: Use --verbose instead of --progress

        Returns:
            Full argument list, executable first
        """
        args = [
            self.executable,
            "--format",
            strategy.format_expression,
            "--merge-output-format",
            strategy.merge_output_format,
            "--output",
            output_template,
            "--no-playlist",
        ]

        if self.prefer_free_formats:
            args.append("--prefer-free-formats")

        args.append("--verbose" if verbose else "--progress")
        args.append(url)
        return args
