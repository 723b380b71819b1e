"""Async runner for external command-line tools."""

from __future__ import annotations

import asyncio
import logging
import shlex
from dataclasses import dataclass
from typing import Sequence

from loom_downloader.domain.exceptions import ExternalToolError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolResult:
    """Exit status and captured output of one tool invocation."""

    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        """Whether the tool exited successfully."""
        return self.returncode == 0

    @property
    def tool(self) -> str:
        """Executable that was run."""
        return self.args[0] if self.args else ""

    def raise_for_status(self) -> None:
        """Raise ExternalToolError if the tool exited non-zero."""
        if not self.ok:
            raise ExternalToolError(self.tool, self.returncode, self.stderr)


class ToolRunner:
    """
    Runs external executables as blocking steps of the pipeline.

    Each call waits for the process to exit; there is no timeout. Output is
    either captured for parsing or passed straight through to the terminal
    so the operator sees the tool's own progress display.
    """

    async def run(self, args: Sequence[str], capture: bool = True) -> ToolResult:
        """
        Run a command and wait for it to finish.

        Args:
            args: Executable followed by its arguments
            capture: Capture stdout/stderr (True) or inherit the terminal (False)

        Returns:
            ToolResult with the exit status and any captured output

        Raises:
            ExternalToolError: If the executable cannot be launched
        """
        if not args:
            raise ValueError("Command cannot be empty")

        command = tuple(str(arg) for arg in args)
        logger.debug(f"Running: {shlex.join(command)}")

        pipe = asyncio.subprocess.PIPE if capture else None
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=pipe,
                stderr=pipe,
            )
        except OSError as e:
            raise ExternalToolError(command[0], cause=e) from e

        stdout, stderr = await process.communicate()
        returncode = process.returncode if process.returncode is not None else -1

        result = ToolResult(
            args=command,
            returncode=returncode,
            stdout=self._decode(stdout),
            stderr=self._decode(stderr),
        )

        if not result.ok:
            logger.debug(f"{result.tool} exited with status {returncode}")

        return result

    @staticmethod
    def _decode(data: bytes | None) -> str:
        if not data:
            return ""
        return data.decode("utf-8", errors="replace")
