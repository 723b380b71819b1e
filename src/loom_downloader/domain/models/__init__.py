"""Domain models for the Loom Downloader application."""

from loom_downloader.domain.models.formats import NO_CODEC, FormatEntry, FormatSet
from loom_downloader.domain.models.processing import (
    BatchRun,
    BatchStats,
    DownloadOutcome,
    OutcomeKind,
    VerificationResult,
)
from loom_downloader.domain.models.strategy import DownloadStrategy

__all__ = [
    "NO_CODEC",
    "FormatEntry",
    "FormatSet",
    "DownloadStrategy",
    "OutcomeKind",
    "VerificationResult",
    "DownloadOutcome",
    "BatchStats",
    "BatchRun",
]
