"""ffprobe implementation of the stream prober."""

from __future__ import annotations

from pathlib import Path

from loom_downloader.domain.exceptions import ExternalToolError, ProbeError
from loom_downloader.domain.services.stream_prober import StreamProber
from loom_downloader.infrastructure.tools.runner import ToolRunner


class FfprobeStreamProber(StreamProber):
    """Stream prober that asks ffprobe for the first audio stream's codec."""

    def __init__(self, runner: ToolRunner, executable: str = "ffprobe") -> None:
        self.runner = runner
        self.executable = executable

    async def probe_audio_stream(self, path: Path) -> str | None:
        """
        Return the codec name of the first audio stream in a file.

        Args:
            path: Local media file

        Returns:
            Codec name, or None if ffprobe reports no audio stream

        Raises:
            ProbeError: If ffprobe cannot be run or rejects the file
        """
        try:
            result = await self.runner.run(
                [
                    self.executable,
                    "-v",
                    "error",
                    "-select_streams",
                    "a:0",
                    "-show_entries",
                    "stream=codec_name",
                    "-of",
                    "default=noprint_wrappers=1:nokey=1",
                    str(path),
                ]
            )
            result.raise_for_status()
        except ExternalToolError as e:
            raise ProbeError(path, e) from e

        for line in result.stdout.splitlines():
            codec = line.strip()
            if codec:
                return codec
        return None
