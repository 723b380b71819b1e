"""Abstract base class for configuration management."""

from abc import ABC, abstractmethod
from typing import Any


class ConfigurationProvider(ABC):
    """
    Abstract service for providing application configuration.

    This interface defines the contract for loading and validating
    configuration data from various sources (files, environment variables,
    built-in defaults).
    """

    @abstractmethod
    def get_tool_executables(self) -> dict[str, str]:
        """
        Get the external executables the downloader depends on.

        Returns:
            Mapping of tool role ("yt_dlp", "ffmpeg", "ffprobe") to the
            executable name or path to look up on the PATH
        """
        pass

    @abstractmethod
    def get_format_selectors(self) -> list[str]:
        """
        Get the ordered format selectors for the fetch engine.

        Returns:
            Selectors in preference order (first resolvable one wins)
        """
        pass

    @abstractmethod
    def get_merge_output_format(self) -> str:
        """
        Get the container that merged video and audio streams are written to.

        Returns:
            Container extension (typically "mp4")
        """
        pass

    @abstractmethod
    def get_output_template(self) -> str:
        """
        Get the output file naming template, relative to the output directory.

        Returns:
            Engine output template (e.g. "%(title)s.%(ext)s")
        """
        pass

    @abstractmethod
    def get_prefer_free_formats(self) -> bool:
        """
        Get whether freely licensed codecs should win between equal options.

        Returns:
            True to pass the engine's free-format preference
        """
        pass

    @abstractmethod
    def get_recheck_audio_on_failure(self) -> bool:
        """
        Get whether a failed download re-queries the source for audio.

        When enabled, a failed fetch is attributed to missing audio
        (skipped) or to a genuine download error (failed) by running the
        inspector and classifier a second time.

        Returns:
            True to re-query after a failed fetch
        """
        pass

    @abstractmethod
    def get_verify_audio(self) -> bool:
        """
        Get whether downloaded files are probed for an audio stream.

        Returns:
            True to run post-download verification
        """
        pass

    @abstractmethod
    def get_logging_config(self) -> Any:
        """
        Get logging configuration.

        Returns:
            Logging settings (level, format, file handler options)
        """
        pass
