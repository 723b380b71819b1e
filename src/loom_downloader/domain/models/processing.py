"""Outcome and batch run models for tracking download operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path


class OutcomeKind(str, Enum):
    """Final outcome of processing one URL."""

    SUCCESS = "success"
    SKIPPED_NO_AUDIO = "skipped_no_audio"
    FAILED = "failed"


class VerificationResult(str, Enum):
    """Result of probing a downloaded file for an audio stream."""

    CONFIRMED = "confirmed"
    INCONCLUSIVE = "inconclusive"


@dataclass(frozen=True)
class DownloadOutcome:
    """
    Result of driving a single URL through the download pipeline.

    Outcomes are immutable once recorded. ``reason`` explains a skip or a
    failure; ``file_path`` and ``verification`` are only set on success.
    """

    url: str
    kind: OutcomeKind
    reason: str | None = None
    file_path: Path | None = None
    verification: VerificationResult | None = None
    processed_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def success(
        cls,
        url: str,
        verification: VerificationResult | None = None,
        file_path: Path | None = None,
    ) -> DownloadOutcome:
        """Create a successful outcome; verification is None when it did not run."""
        return cls(
            url=url,
            kind=OutcomeKind.SUCCESS,
            file_path=file_path,
            verification=verification,
        )

    @classmethod
    def skipped(cls, url: str, reason: str) -> DownloadOutcome:
        """Create an outcome for a URL skipped because it has no audio."""
        return cls(url=url, kind=OutcomeKind.SKIPPED_NO_AUDIO, reason=reason)

    @classmethod
    def failed(cls, url: str, reason: str) -> DownloadOutcome:
        """Create an outcome for a URL whose download failed."""
        return cls(url=url, kind=OutcomeKind.FAILED, reason=reason)

    @property
    def is_success(self) -> bool:
        """Whether the download succeeded."""
        return self.kind == OutcomeKind.SUCCESS

    @property
    def is_skipped(self) -> bool:
        """Whether the URL was skipped for lack of audio."""
        return self.kind == OutcomeKind.SKIPPED_NO_AUDIO

    @property
    def is_failure(self) -> bool:
        """Whether the download failed."""
        return self.kind == OutcomeKind.FAILED

    @property
    def is_verified(self) -> bool:
        """Whether audio was confirmed in the downloaded file."""
        return self.verification == VerificationResult.CONFIRMED

    def __str__(self) -> str:
        """Human-readable string representation."""
        status_emoji = {
            OutcomeKind.SUCCESS: "✅",
            OutcomeKind.SKIPPED_NO_AUDIO: "⏭️",
            OutcomeKind.FAILED: "❌",
        }
        emoji = status_emoji.get(self.kind, "❓")

        reason_part = f" - {self.reason}" if self.reason else ""
        return f"{emoji} {self.url} ({self.kind.value}){reason_part}"


@dataclass
class BatchStats:
    """
    Running tally for a batch download.

    Counts one entry per processed URL, split by outcome kind.
    """

    succeeded: int = 0
    skipped: int = 0
    failed: int = 0
    processing_time_seconds: float = 0.0
    started_at: datetime = field(default_factory=datetime.now)
    completed_at: datetime | None = None

    @property
    def total(self) -> int:
        """Number of URLs processed so far."""
        return self.succeeded + self.skipped + self.failed

    @property
    def success_rate(self) -> float:
        """Calculate the success rate as a percentage."""
        if self.total == 0:
            return 0.0
        return (self.succeeded / self.total) * 100

    @property
    def is_completed(self) -> bool:
        """Whether the batch is completed."""
        return self.completed_at is not None

    def add_outcome(self, outcome: DownloadOutcome) -> None:
        """Count an outcome in the tally."""
        if outcome.kind == OutcomeKind.SUCCESS:
            self.succeeded += 1
        elif outcome.kind == OutcomeKind.SKIPPED_NO_AUDIO:
            self.skipped += 1
        elif outcome.kind == OutcomeKind.FAILED:
            self.failed += 1

    def complete(self) -> None:
        """Mark the batch as completed."""
        self.completed_at = datetime.now()
        delta = self.completed_at - self.started_at
        self.processing_time_seconds = delta.total_seconds()

    def __str__(self) -> str:
        """Human-readable string representation."""
        return (
            f"BatchStats(total={self.total}, succeeded={self.succeeded}, "
            f"skipped={self.skipped}, failed={self.failed}, "
            f"success_rate={self.success_rate:.1f}%)"
        )


@dataclass
class BatchRun:
    """
    State of one downloader invocation.

    Built once from the parsed command line and handed to the orchestrator,
    which appends one outcome per URL after that URL's pipeline completes.
    """

    urls: list[str]
    output_dir: Path
    dry_run: bool = False
    verbose: bool = False
    outcomes: list[DownloadOutcome] = field(default_factory=list)
    stats: BatchStats = field(default_factory=BatchStats)

    @property
    def pending_urls(self) -> list[str]:
        """URLs the orchestrator should process in this run."""
        if self.dry_run:
            return self.urls[:1]
        return list(self.urls)

    @property
    def successful_outcomes(self) -> list[DownloadOutcome]:
        """Get only the successful outcomes."""
        return [o for o in self.outcomes if o.is_success]

    @property
    def skipped_outcomes(self) -> list[DownloadOutcome]:
        """Get only the skipped outcomes."""
        return [o for o in self.outcomes if o.is_skipped]

    @property
    def failed_outcomes(self) -> list[DownloadOutcome]:
        """Get only the failed outcomes."""
        return [o for o in self.outcomes if o.is_failure]

    def record(self, outcome: DownloadOutcome) -> None:
        """Record the final outcome for a URL and update the tally."""
        self.outcomes.append(outcome)
        self.stats.add_outcome(outcome)

    def complete(self) -> None:
        """Mark the run as completed."""
        self.stats.complete()

    def __str__(self) -> str:
        """Human-readable string representation."""
        mode = " (dry run)" if self.dry_run else ""
        return f"BatchRun{mode}: {self.stats}"
