"""Use case for checking that the external tools are installed."""

from __future__ import annotations

import shutil
from typing import Callable, Optional

from loom_downloader.domain.exceptions import DependencyMissingError
from loom_downloader.domain.services.configuration_provider import ConfigurationProvider

INSTALL_HINTS = {
    "yt_dlp": "brew install yt-dlp",
    "ffmpeg": "brew install ffmpeg",
    "ffprobe": "brew install ffmpeg",
}


class CheckDependenciesUseCase:
    """
    Use case for verifying the fetch engine, merger and prober are on the PATH.

    Any missing executable is fatal at startup; no URL is processed.
    """

    def __init__(
        self,
        config_provider: ConfigurationProvider,
        which: Callable[[str], Optional[str]] = shutil.which,
    ) -> None:
        """
        Initialize the dependency check.

        Args:
            config_provider: Provider naming the executables to look up
            which: PATH lookup function
        """
        self.config_provider = config_provider
        self.which = which

    def execute(self) -> list[str]:
        """
        Find the configured executables that cannot be located.

        Returns:
            Executable names that are missing, in check order (empty if all found)
        """
        missing: list[str] = []
        for executable in self.config_provider.get_tool_executables().values():
            if self.which(executable) is None:
                missing.append(executable)
        return missing

    def ensure(self) -> None:
        """
        Require every executable to be present.

        Raises:
            DependencyMissingError: If any executable is missing
        """
        missing = self.execute()
        if missing:
            raise DependencyMissingError(missing)

    def install_hint(self, executable: str) -> str | None:
        """
        Suggest how to install a missing executable.

        Args:
            executable: Executable name as configured

        Returns:
            Install command, or None if the executable is not a known tool
        """
        for role, configured in self.config_provider.get_tool_executables().items():
            if configured == executable:
                return INSTALL_HINTS.get(role)
        return None
