"""Abstract base class for probing local media files."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional


class StreamProber(ABC):
    """Abstract prober for the stream layout of a downloaded file."""

    @abstractmethod
    async def probe_audio_stream(self, path: Path) -> Optional[str]:
        """
        Return the codec name of the first audio stream in a file.

        Args:
            path: Local media file

        Returns:
            Codec name (e.g. "aac"), or None if the file has no audio stream

        Raises:
            ProbeError: If the prober cannot be run or rejects the file
        """
        pass
