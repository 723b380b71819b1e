"""External tool integrations (yt-dlp, ffprobe)."""

from loom_downloader.infrastructure.tools.ffprobe_prober import FfprobeStreamProber
from loom_downloader.infrastructure.tools.runner import ToolResult, ToolRunner
from loom_downloader.infrastructure.tools.ytdlp_fetcher import YtDlpMediaFetcher
from loom_downloader.infrastructure.tools.ytdlp_inspector import YtDlpFormatInspector

__all__ = [
    "ToolResult",
    "ToolRunner",
    "YtDlpFormatInspector",
    "YtDlpMediaFetcher",
    "FfprobeStreamProber",
]
