"""Audio presence decision over a format set."""

from loom_downloader.domain.models.formats import FormatSet


def has_audio(format_set: FormatSet) -> bool:
    """
    Decide whether a source is worth downloading.

    A source has audio if at least one of its formats carries an audio
    stream, judged on the parsed codec field (a codec name that merely
    contains "none" still counts as audio). An empty set has no audio.

    Args:
        format_set: Formats offered for one URL

    Returns:
        True if any format has an audio codec other than the "none" sentinel
    """
    return any(entry.has_audio for entry in format_set.entries)
