"""Hooks for reporting pipeline progress while a batch runs."""

from __future__ import annotations

from pathlib import Path

from loom_downloader.domain.models.formats import FormatSet
from loom_downloader.domain.models.processing import DownloadOutcome, VerificationResult
from loom_downloader.domain.models.strategy import DownloadStrategy


class DownloadReporter:
    """
    Receives per-URL pipeline events from the batch orchestrator.

    Every hook is a no-op here, so this base class doubles as the silent
    reporter; front ends override only the events they display.
    """

    def url_started(self, url: str) -> None:
        """A URL has been dequeued and is about to be inspected."""

    def listing_formats(self, url: str) -> None:
        """The verbose format table is about to be printed."""

    def audio_detected(self, format_set: FormatSet) -> None:
        """Inspection found at least one format with audio."""

    def url_skipped(self, outcome: DownloadOutcome, format_set: FormatSet) -> None:
        """The URL was skipped because no audio was found."""

    def download_started(self, url: str, strategy: DownloadStrategy) -> None:
        """The fetch engine is about to be invoked."""

    def download_succeeded(self, url: str) -> None:
        """The fetch engine reported success."""

    def download_failed(self, url: str, error: Exception) -> None:
        """The fetch engine reported failure."""

    def verification_finished(self, result: VerificationResult, path: Path | None) -> None:
        """The downloaded file was probed for audio."""

    def url_finished(self, outcome: DownloadOutcome) -> None:
        """The URL reached a terminal state and its outcome was recorded."""
