"""Default implementation of the batch download service."""

from __future__ import annotations

import logging
from pathlib import Path

from loom_downloader.application.services.verifier import PostDownloadVerifier
from loom_downloader.domain.exceptions import FetchError
from loom_downloader.domain.models.formats import FormatSet
from loom_downloader.domain.models.processing import (
    BatchRun,
    DownloadOutcome,
    VerificationResult,
)
from loom_downloader.domain.models.strategy import DownloadStrategy
from loom_downloader.domain.services.audio_classifier import has_audio
from loom_downloader.domain.services.configuration_provider import ConfigurationProvider
from loom_downloader.domain.services.download_reporter import DownloadReporter
from loom_downloader.domain.services.download_service import BatchDownloadService
from loom_downloader.domain.services.format_inspector import FormatInspector
from loom_downloader.domain.services.media_fetcher import MediaFetcher
from loom_downloader.domain.services.strategy_selector import select_strategy

logger = logging.getLogger(__name__)

NO_AUDIO_REASON = "No audio stream detected"


class DefaultBatchDownloadService(BatchDownloadService):
    """
    Default implementation of the batch download service.

    This service orchestrates the complete download workflow by coordinating
    between the format inspector, the fetch engine and the post-download
    verifier. URLs are processed strictly one after another; every per-URL
    error is caught and recorded so the batch always runs to the end.
    """

    def __init__(
        self,
        inspector: FormatInspector,
        fetcher: MediaFetcher,
        verifier: PostDownloadVerifier,
        config_provider: ConfigurationProvider,
        reporter: DownloadReporter | None = None,
    ) -> None:
        """
        Initialize the batch download service.

        Args:
            inspector: Inspector for source format metadata
            fetcher: Fetcher that drives the download engine
            verifier: Verifier for downloaded files
            config_provider: Provider for configuration settings
            reporter: Receiver for per-URL progress events (silent if None)
        """
        self.inspector = inspector
        self.fetcher = fetcher
        self.verifier = verifier
        self.config_provider = config_provider
        self.reporter = reporter or DownloadReporter()

    async def process_batch(self, run: BatchRun) -> BatchRun:
        """
        Process the URLs of a run one at a time, in input order.

        Args:
            run: The batch run to process

        Returns:
            The completed run with one outcome per processed URL
        """
        urls = run.pending_urls
        mode = "dry run of" if run.dry_run else "batch of"
        logger.info(f"Starting {mode} {len(urls)} URLs into {run.output_dir}")

        for url in urls:
            outcome = await self.process_url(url, run)
            run.record(outcome)
            self.reporter.url_finished(outcome)

        run.complete()

        stats = run.stats
        logger.info(
            f"Batch complete: {stats.succeeded} downloaded, "
            f"{stats.skipped} skipped, {stats.failed} failed"
        )
        return run

    async def process_url(self, url: str, run: BatchRun) -> DownloadOutcome:
        """
        Drive a single URL through the pipeline.

        Args:
            url: Source URL
            run: The batch run supplying output directory and mode flags

        Returns:
            DownloadOutcome for the URL
        """
        logger.info(f"Processing: {url}")
        self.reporter.url_started(url)

        try:
            return await self._run_pipeline(url, run)
        except Exception as e:
            logger.error(f"Unexpected error processing {url}: {e}")
            return DownloadOutcome.failed(url, f"Unexpected error: {e}")

    async def _run_pipeline(self, url: str, run: BatchRun) -> DownloadOutcome:
        """Inspect, classify, fetch and verify one URL."""
        if run.verbose:
            self.reporter.listing_formats(url)
            await self.inspector.list_formats(url)

        format_set = await self.inspector.inspect(url)

        if not has_audio(format_set):
            outcome = DownloadOutcome.skipped(url, self._skip_reason(format_set))
            logger.warning(f"Skipping {url}: {outcome.reason}")
            self.reporter.url_skipped(outcome, format_set)
            return outcome

        self.reporter.audio_detected(format_set)

        strategy = self._select_strategy()
        output_template = str(run.output_dir / self.config_provider.get_output_template())

        self.reporter.download_started(url, strategy)
        try:
            await self.fetcher.fetch(url, strategy, output_template, verbose=run.verbose)
        except FetchError as e:
            logger.error(f"Download failed for {url}: {e}")
            self.reporter.download_failed(url, e)
            return await self._classify_failure(url, e)

        self.reporter.download_succeeded(url)

        if not self.config_provider.get_verify_audio():
            return DownloadOutcome.success(url)

        path, verification = await self._verify(url, run.output_dir, strategy)
        self.reporter.verification_finished(verification, path)
        return DownloadOutcome.success(url, verification, path)

    async def _verify(
        self, url: str, output_dir: Path, strategy: DownloadStrategy
    ) -> tuple[Path | None, VerificationResult]:
        """Locate and probe the downloaded file."""
        path = await self.verifier.locate(url, output_dir, strategy.merge_output_format)
        verification = await self.verifier.verify(path)
        return path, verification

    async def _classify_failure(self, url: str, error: FetchError) -> DownloadOutcome:
        """
        Attribute a failed fetch to missing audio or to a download error.

        The source is re-queried so that a video whose audio vanished (or
        whose metadata is no longer reachable) is skipped rather than
        counted as a failure.
        """
        if not self.config_provider.get_recheck_audio_on_failure():
            return DownloadOutcome.failed(url, str(error))

        logger.info(f"Re-checking audio availability for {url}")
        format_set = await self.inspector.inspect(url)

        if not has_audio(format_set):
            outcome = DownloadOutcome.skipped(url, self._skip_reason(format_set))
            logger.warning(f"Failed download of {url} attributed to missing audio")
            return outcome

        return DownloadOutcome.failed(url, str(error))

    def _select_strategy(self) -> DownloadStrategy:
        return select_strategy(
            self.config_provider.get_format_selectors(),
            self.config_provider.get_merge_output_format(),
        )

    @staticmethod
    def _skip_reason(format_set: FormatSet) -> str:
        if format_set.inspection_failed:
            return f"{NO_AUDIO_REASON} ({format_set.inspection_error})"
        return NO_AUDIO_REASON
