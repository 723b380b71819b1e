"""Domain-specific exceptions for the Loom Downloader application."""

from pathlib import Path
from typing import Optional, Sequence


class LoomDownloaderError(Exception):
    """Base exception for all Loom Downloader errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(LoomDownloaderError):
    """Raised when there are configuration-related errors."""

    pass


class DependencyMissingError(LoomDownloaderError):
    """Raised when required external executables are not on the PATH."""

    def __init__(self, missing: Sequence[str]) -> None:
        message = f"Required tools not found on PATH: {', '.join(missing)}"
        super().__init__(message)
        self.missing = list(missing)


class InputFileError(LoomDownloaderError):
    """Raised when the URL list file cannot be found or read."""

    def __init__(self, path: Path, cause: Optional[Exception] = None) -> None:
        message = f"File '{path}' not found!"
        super().__init__(message, cause)
        self.path = path


class ExternalToolError(LoomDownloaderError):
    """Raised when an external executable cannot be launched or exits non-zero."""

    def __init__(
        self,
        tool: str,
        exit_code: Optional[int] = None,
        stderr: str = "",
        cause: Optional[Exception] = None,
    ) -> None:
        if exit_code is None:
            message = f"Failed to run {tool}"
        else:
            message = f"{tool} exited with status {exit_code}"
        if stderr.strip():
            message = f"{message}: {stderr.strip().splitlines()[-1]}"
        super().__init__(message, cause)
        self.tool = tool
        self.exit_code = exit_code
        self.stderr = stderr


class InspectionError(LoomDownloaderError):
    """Raised when the format metadata for a URL cannot be queried or parsed."""

    def __init__(self, url: str, reason: str, cause: Optional[Exception] = None) -> None:
        message = f"Failed to inspect formats for {url}: {reason}"
        super().__init__(message, cause)
        self.url = url
        self.reason = reason


class FetchError(LoomDownloaderError):
    """Raised when the download engine fails to produce a file."""

    def __init__(
        self,
        url: str,
        exit_code: Optional[int] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        if exit_code is None:
            message = f"Download failed for {url}"
        else:
            message = f"Download failed for {url} (exit status {exit_code})"
        super().__init__(message, cause)
        self.url = url
        self.exit_code = exit_code


class ProbeError(LoomDownloaderError):
    """Raised when a downloaded file cannot be probed for its streams."""

    def __init__(self, path: Path, cause: Optional[Exception] = None) -> None:
        message = f"Failed to probe streams of {path}"
        super().__init__(message, cause)
        self.path = path


class ValidationError(LoomDownloaderError):
    """Raised when data validation fails."""

    def __init__(self, field: str, value: str, reason: str) -> None:
        message = f"Validation failed for {field}='{value}': {reason}"
        super().__init__(message)
        self.field = field
        self.value = value
        self.reason = reason
