"""Abstract base class for download engine operations."""

from abc import ABC, abstractmethod
from pathlib import Path

from loom_downloader.domain.models.strategy import DownloadStrategy


class MediaFetcher(ABC):
    """
    Abstract fetcher that drives the external download engine.

    Implementations handle process invocation, flag construction and
    mapping engine failures onto FetchError.
    """

    @abstractmethod
    async def fetch(
        self,
        url: str,
        strategy: DownloadStrategy,
        output_template: str,
        verbose: bool = False,
    ) -> None:
        """
        Download a single video using the given strategy.

        The engine is told to merge separate streams into the strategy's
        container, to ignore playlists (single video only) and to prefer
        freely licensed codecs between equivalent options.

        Args:
            url: Source URL
            strategy: Ordered format preferences and merge container
            output_template: Engine output template rooted at the output directory
            verbose: Enable the engine's detailed logging instead of the
                terse progress display

        Raises:
            FetchError: If the engine fails or cannot be launched
        """
        pass

    @abstractmethod
    async def resolve_output_path(self, url: str, output_template: str) -> Path:
        """
        Compute the file path the engine would write for a URL.

        This runs the engine in a dry-compute mode; nothing is downloaded.

        Args:
            url: Source URL
            output_template: Engine output template

        Returns:
            Resolved output file path

        Raises:
            ExternalToolError: If the engine fails or prints no filename
        """
        pass
