"""Loom Downloader - Batch video downloader that only keeps sources with audio."""

__version__ = "0.1.0"

from loom_downloader.domain.models import (
    BatchRun,
    DownloadOutcome,
    DownloadStrategy,
    FormatEntry,
    FormatSet,
    OutcomeKind,
)

__all__ = [
    "BatchRun",
    "DownloadOutcome",
    "DownloadStrategy",
    "FormatEntry",
    "FormatSet",
    "OutcomeKind",
]
