"""Post-download audio verification."""

from __future__ import annotations

import logging
from pathlib import Path

from loom_downloader.domain.exceptions import ExternalToolError, ProbeError
from loom_downloader.domain.models.processing import VerificationResult
from loom_downloader.domain.services.media_fetcher import MediaFetcher
from loom_downloader.domain.services.stream_prober import StreamProber

logger = logging.getLogger(__name__)


class PostDownloadVerifier:
    """
    Best-effort check that a downloaded file physically contains audio.

    The audio gate is the classifier that runs before the download; this
    check only confirms the result. Anything that prevents confirmation is
    reported as inconclusive and logged as a warning, never raised.
    """

    def __init__(
        self,
        fetcher: MediaFetcher,
        prober: StreamProber,
        output_template: str = "%(title)s.%(ext)s",
    ) -> None:
        """
        Initialize the verifier.

        Args:
            fetcher: Fetcher used to resolve the downloaded file's path
            prober: Prober used to inspect the file's audio stream
            output_template: Naming template the download used
        """
        self.fetcher = fetcher
        self.prober = prober
        self.output_template = output_template

    def expected_template(self, output_dir: Path, container: str) -> str:
        """
        Template of the merged file, with the extension pinned to the container.

        Args:
            output_dir: Directory downloads are written to
            container: Merge output container

        Returns:
            Output template rooted at ``output_dir``
        """
        template = self.output_template.replace("%(ext)s", container)
        return str(output_dir / template)

    async def locate(self, url: str, output_dir: Path, container: str) -> Path | None:
        """
        Resolve where the merged file for a URL was written.

        Args:
            url: Source URL
            output_dir: Directory downloads are written to
            container: Merge output container

        Returns:
            Resolved path, or None if it could not be computed
        """
        try:
            return await self.fetcher.resolve_output_path(
                url, self.expected_template(output_dir, container)
            )
        except ExternalToolError as e:
            logger.warning(f"Could not resolve downloaded file for {url}: {e}")
            return None

    async def verify(self, path: Path | None) -> VerificationResult:
        """
        Probe a downloaded file for an audio stream.

        Args:
            path: Downloaded file, or None if it could not be located

        Returns:
            CONFIRMED if an audio codec was found, INCONCLUSIVE otherwise
        """
        if path is None:
            logger.warning("Could not verify audio: downloaded file path unknown")
            return VerificationResult.INCONCLUSIVE

        if not path.is_file():
            logger.warning(f"Could not verify audio: file not found: {path}")
            return VerificationResult.INCONCLUSIVE

        try:
            codec = await self.prober.probe_audio_stream(path)
        except ProbeError as e:
            logger.warning(f"Could not verify audio in {path}: {e}")
            return VerificationResult.INCONCLUSIVE

        if not codec:
            logger.warning(f"Could not verify audio: no audio stream reported for {path}")
            return VerificationResult.INCONCLUSIVE

        logger.info(f"Audio verified in {path} ({codec})")
        return VerificationResult.CONFIRMED
