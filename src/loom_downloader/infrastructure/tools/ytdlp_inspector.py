"""yt-dlp implementation of the format inspector."""

from __future__ import annotations

import json
import logging
from typing import Any

from loom_downloader.domain.exceptions import (
    ExternalToolError,
    InspectionError,
    ValidationError,
)
from loom_downloader.domain.models.formats import NO_CODEC, FormatEntry, FormatSet
from loom_downloader.domain.services.format_inspector import FormatInspector
from loom_downloader.infrastructure.tools.runner import ToolRunner

logger = logging.getLogger(__name__)


class YtDlpFormatInspector(FormatInspector):
    """
    Format inspector backed by the yt-dlp metadata dump.

    Runs ``yt-dlp -J`` and maps every entry of the ``formats`` list onto a
    FormatEntry. Inspection never raises for per-URL problems: failures
    come back as an empty FormatSet carrying the error message.
    """

    def __init__(self, runner: ToolRunner, executable: str = "yt-dlp") -> None:
        """
        Initialize the yt-dlp format inspector.

        Args:
            runner: Runner used to launch yt-dlp
            executable: yt-dlp executable name or path
        """
        self.runner = runner
        self.executable = executable

    async def inspect(self, url: str) -> FormatSet:
        """
        Query the formats available for a URL.

        Args:
            url: Source URL

        Returns:
            FormatSet for the URL; empty with ``inspection_error`` set if the
            metadata query failed

        Raises:
            ValidationError: If the URL is empty
        """
        if not url or not url.strip():
            raise ValidationError("url", url, "URL cannot be empty")

        try:
            payload = await self._query_formats(url)
            format_set = self._parse_format_set(url, payload)
        except InspectionError as e:
            logger.warning(str(e))
            return FormatSet.failed(url, e.reason)

        logger.debug(f"Found {len(format_set)} formats for {url}")
        for entry in format_set:
            logger.debug(f"  {entry}")
        return format_set

    async def list_formats(self, url: str) -> None:
        """
        Print the yt-dlp format table for a URL.

        Args:
            url: Source URL
        """
        try:
            result = await self.runner.run(
                [self.executable, "-F", "--no-playlist", url],
                capture=False,
            )
        except ExternalToolError as e:
            logger.warning(f"Could not list formats for {url}: {e}")
            return

        if not result.ok:
            logger.warning(f"Format listing for {url} exited with status {result.returncode}")

    async def _query_formats(self, url: str) -> dict[str, Any]:
        """
        Run the yt-dlp metadata dump and decode its JSON.

        Raises:
            InspectionError: If yt-dlp fails or prints something other than a JSON object
        """
        try:
            result = await self.runner.run(
                [self.executable, "-J", "--no-playlist", url]
            )
            result.raise_for_status()
        except ExternalToolError as e:
            raise InspectionError(url, f"metadata query failed: {e}", e) from e

        try:
            payload = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise InspectionError(url, f"metadata query returned invalid JSON: {e}", e) from e

        if not isinstance(payload, dict):
            raise InspectionError(url, "metadata query returned an unexpected JSON document")

        return payload

    def _parse_format_set(self, url: str, payload: dict[str, Any]) -> FormatSet:
        """
        Parse a yt-dlp info dict into a FormatSet.

        Args:
            url: Source URL
            payload: Decoded ``yt-dlp -J`` output

        Returns:
            FormatSet with one entry per parseable format
        """
        # Collections resolve to their first video since playlists are never expanded
        if payload.get("_type") == "playlist":
            entries = [e for e in payload.get("entries") or [] if isinstance(e, dict)]
            if not entries:
                return FormatSet(url=url, title=payload.get("title"))
            payload = entries[0]

        raw_formats = payload.get("formats")
        if not raw_formats:
            if "acodec" in payload or "vcodec" in payload:
                raw_formats = [payload]
            else:
                raw_formats = []

        entries_parsed: list[FormatEntry] = []
        for item in raw_formats:
            entry = self._parse_format_entry(item)
            if entry:
                entries_parsed.append(entry)

        return FormatSet(
            url=url,
            entries=tuple(entries_parsed),
            title=payload.get("title"),
        )

    def _parse_format_entry(self, item: Any) -> FormatEntry | None:
        """
        Parse one yt-dlp format dict into a FormatEntry.

        Args:
            item: Element of the ``formats`` list

        Returns:
            FormatEntry, or None if the item is not a mapping
        """
        if not isinstance(item, dict):
            logger.debug(f"Ignoring malformed format item: {item!r}")
            return None

        format_id = item.get("format_id")
        ext = item.get("ext")
        return FormatEntry(
            video_codec=self._normalize_codec(item.get("vcodec")),
            audio_codec=self._normalize_codec(item.get("acodec")),
            format_id=str(format_id) if format_id is not None else None,
            ext=str(ext) if ext is not None else None,
        )

    @staticmethod
    def _normalize_codec(value: Any) -> str:
        """Map a yt-dlp codec field onto a codec name or the "none" sentinel."""
        if value is None:
            return NO_CODEC
        codec = str(value).strip()
        if not codec or codec.lower() == NO_CODEC:
            return NO_CODEC
        return codec
