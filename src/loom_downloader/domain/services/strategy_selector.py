"""Download strategy selection."""

from __future__ import annotations

from collections.abc import Sequence

from loom_downloader.domain.models.strategy import DownloadStrategy

# Pre-merged file from the platform, then a client-side merge of the best
# separate streams, then whatever single format is best.
DEFAULT_FORMAT_SELECTORS: tuple[str, ...] = (
    "http-transcoded",
    "bestvideo+bestaudio",
    "best",
)
DEFAULT_MERGE_OUTPUT_FORMAT = "mp4"


def select_strategy(
    selectors: Sequence[str] = DEFAULT_FORMAT_SELECTORS,
    merge_output_format: str = DEFAULT_MERGE_OUTPUT_FORMAT,
) -> DownloadStrategy:
    """
    Build the ordered format preferences used for every URL.

    The strategy does not depend on the URL being downloaded; it is only
    requested once the classifier has found audio.

    Args:
        selectors: Format selectors in preference order
        merge_output_format: Container for merged output

    Returns:
        DownloadStrategy for the fetch engine
    """
    return DownloadStrategy(
        selectors=tuple(selectors),
        merge_output_format=merge_output_format,
    )
