"""Abstract base class for the batch download orchestration."""

from abc import ABC, abstractmethod

from loom_downloader.domain.models.processing import BatchRun, DownloadOutcome


class BatchDownloadService(ABC):
    """
    Abstract service for orchestrating the batch download workflow.

    This is the main business logic interface that coordinates the format
    inspector, the audio classifier, the fetch engine and the post-download
    verifier for every URL in a run.
    """

    @abstractmethod
    async def process_batch(self, run: BatchRun) -> BatchRun:
        """
        Process the URLs of a run one at a time, in input order.

        This is the main entry point for the download workflow. It should:
        1. Drive each pending URL through the pipeline
        2. Record exactly one outcome per URL on the run
        3. Never let a single URL's failure stop the batch

        In dry-run mode only the first URL is processed.

        Args:
            run: The batch run to process (mutated in place)

        Returns:
            The same run, completed, with every outcome recorded
        """
        pass

    @abstractmethod
    async def process_url(self, url: str, run: BatchRun) -> DownloadOutcome:
        """
        Drive a single URL through inspection, download and verification.

        This method should:
        1. Inspect the URL's formats and classify audio presence
        2. Skip the URL if no audio is available
        3. Fetch the video with the selected strategy
        4. Verify the downloaded file (warnings only)
        5. On a failed fetch, decide between skipped and failed

        Args:
            url: Source URL
            run: The batch run supplying output directory and mode flags

        Returns:
            DownloadOutcome for the URL (never raises for per-URL errors)
        """
        pass
