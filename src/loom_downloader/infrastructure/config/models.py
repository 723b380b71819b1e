"""Pydantic configuration models for application settings."""

from __future__ import annotations

from pydantic import BaseModel, Field, validator

from loom_downloader.domain.services.strategy_selector import (
    DEFAULT_FORMAT_SELECTORS,
    DEFAULT_MERGE_OUTPUT_FORMAT,
)


class ToolsConfig(BaseModel):
    """Executables for the external collaborators."""

    yt_dlp: str = Field(default="yt-dlp", min_length=1, description="Fetch engine executable")
    ffmpeg: str = Field(default="ffmpeg", min_length=1, description="Stream merger executable")
    ffprobe: str = Field(default="ffprobe", min_length=1, description="Stream prober executable")

    def as_dict(self) -> dict[str, str]:
        """Map tool roles to executables."""
        return {"yt_dlp": self.yt_dlp, "ffmpeg": self.ffmpeg, "ffprobe": self.ffprobe}

    class Config:
        """Pydantic configuration."""
        extra = "forbid"


class LoggingConfig(BaseModel):
    """Configuration for application logging."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string"
    )
    file_path: str | None = Field(default=None, description="Log file path (None for console only)")
    max_file_size: int = Field(default=10485760, ge=1024, description="Max log file size in bytes (10MB)")
    backup_count: int = Field(default=5, ge=1, description="Number of backup log files to keep")

    @validator("level")
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    class Config:
        """Pydantic configuration."""
        extra = "forbid"


class DownloadSettings(BaseModel):
    """Configuration for format selection and output naming."""

    format_selectors: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FORMAT_SELECTORS),
        min_length=1,
        description="Format selectors in preference order",
    )
    merge_output_format: str = Field(
        default=DEFAULT_MERGE_OUTPUT_FORMAT, description="Container for merged streams"
    )
    output_template: str = Field(
        default="%(title)s.%(ext)s", min_length=1, description="Output file naming template"
    )
    prefer_free_formats: bool = Field(default=True, description="Prefer freely licensed codecs")

    @validator("format_selectors")
    def validate_format_selectors(cls, v: list[str]) -> list[str]:
        """Validate format selectors."""
        if not v:
            raise ValueError("At least one format selector must be configured")
        for selector in v:
            if not selector.strip():
                raise ValueError("Format selectors cannot be blank")
            if "/" in selector:
                raise ValueError(f"List fallbacks as separate selectors, not with '/': {selector}")
        return [selector.strip() for selector in v]

    @validator("merge_output_format")
    def validate_merge_output_format(cls, v: str) -> str:
        """Validate merge container."""
        valid_formats = {"mp4", "mkv", "webm", "mov", "avi", "flv"}
        if v.lower() not in valid_formats:
            raise ValueError(f"Invalid merge output format: {v}. Must be one of {valid_formats}")
        return v.lower()

    @validator("output_template")
    def validate_output_template(cls, v: str) -> str:
        """Validate output template stays inside the output directory."""
        if v.startswith(("/", "\\")) or ".." in v.replace("\\", "/").split("/"):
            raise ValueError(f"Output template must be relative to the output directory: {v}")
        return v

    class Config:
        """Pydantic configuration."""
        extra = "forbid"


class ProcessingSettings(BaseModel):
    """Configuration for the per-URL pipeline."""

    recheck_audio_on_failure: bool = Field(
        default=True, description="Re-query audio presence after a failed download"
    )
    verify_audio: bool = Field(default=True, description="Probe downloaded files for audio")

    class Config:
        """Pydantic configuration."""
        extra = "forbid"


class AppConfig(BaseModel):
    """
    Main application configuration model.

    This is the root configuration object that contains all application settings,
    validated using Pydantic for type safety and runtime validation. Every
    section has defaults, so an empty configuration is valid.
    """

    tools: ToolsConfig = Field(default_factory=ToolsConfig)
    download: DownloadSettings = Field(default_factory=DownloadSettings)
    processing: ProcessingSettings = Field(default_factory=ProcessingSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    class Config:
        """Pydantic configuration."""
        extra = "forbid"
        validate_assignment = True
