"""Download strategy domain model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DownloadStrategy:
    """
    Ordered format preferences handed to the fetch engine.

    Each selector is a declarative preference; the engine evaluates them in
    order and downloads the first one that resolves. Merged output always
    lands in ``merge_output_format``.
    """

    selectors: tuple[str, ...]
    merge_output_format: str = "mp4"

    def __post_init__(self) -> None:
        """Validate strategy data after initialization."""
        if not self.selectors:
            raise ValueError("A download strategy needs at least one format selector")
        if any(not selector or "/" in selector for selector in self.selectors):
            raise ValueError(f"Invalid format selectors: {self.selectors}")
        if not self.merge_output_format:
            raise ValueError("Merge output format cannot be empty")

    @property
    def format_expression(self) -> str:
        """Selector expression in the engine's fallback syntax."""
        return "/".join(self.selectors)

    def __str__(self) -> str:
        """Human-readable string representation."""
        return f"{self.format_expression} -> {self.merge_output_format}"
