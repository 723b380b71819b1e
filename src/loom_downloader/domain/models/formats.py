"""Format entry and format set domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

NO_CODEC = "none"


@dataclass(frozen=True)
class FormatEntry:
    """
    One encoding variant a source platform offers for a video.

    Codec fields hold the engine's codec name, or the ``"none"`` sentinel
    when that stream dimension is absent from the format.
    """

    video_codec: str = NO_CODEC
    audio_codec: str = NO_CODEC
    format_id: str | None = None
    ext: str | None = None

    def __post_init__(self) -> None:
        """Validate codec fields after initialization."""
        if not self.video_codec:
            raise ValueError("Video codec cannot be empty (use 'none' for absent)")
        if not self.audio_codec:
            raise ValueError("Audio codec cannot be empty (use 'none' for absent)")

    @property
    def has_audio(self) -> bool:
        """Whether this format carries an audio stream."""
        return self.audio_codec != NO_CODEC

    def __str__(self) -> str:
        """Human-readable string representation."""
        label = self.format_id or "?"
        return f"{label}: video={self.video_codec}, audio={self.audio_codec}"


@dataclass(frozen=True)
class FormatSet:
    """
    Ordered formats available for one source URL.

    An empty set is valid and classifies as "no audio". When the set is
    empty because the metadata query itself failed, ``inspection_error``
    holds the reason so callers can tell it apart from a confirmed absence.
    """

    url: str
    entries: tuple[FormatEntry, ...] = field(default_factory=tuple)
    title: str | None = None
    inspection_error: str | None = None

    @classmethod
    def failed(cls, url: str, reason: str) -> FormatSet:
        """Create an empty set recording why inspection failed."""
        return cls(url=url, inspection_error=reason)

    @property
    def inspection_failed(self) -> bool:
        """Whether the set is empty because the metadata query failed."""
        return self.inspection_error is not None

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[FormatEntry]:
        return iter(self.entries)

    def __str__(self) -> str:
        """Human-readable string representation."""
        if self.inspection_failed:
            return f"FormatSet(url={self.url}, error='{self.inspection_error}')"
        return f"FormatSet(url={self.url}, formats={len(self.entries)})"
