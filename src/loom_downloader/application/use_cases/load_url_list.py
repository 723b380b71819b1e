"""Use case for reading the list of source URLs."""

from __future__ import annotations

from pathlib import Path

from loom_downloader.domain.exceptions import InputFileError

DEFAULT_INPUT_FILE = "loomurls.txt"


def is_url_line(line: str) -> bool:
    """Whether a line of the input file names a URL (not blank, not a comment)."""
    stripped = line.strip()
    return bool(stripped) and not stripped.startswith("#")


class LoadUrlListUseCase:
    """
    Use case for loading source URLs from a text file.

    The file holds one URL per line. Blank lines and lines whose first
    non-space character is ``#`` are ignored; surrounding whitespace is
    stripped. Order is preserved.
    """

    def __init__(self, input_file: str | Path = DEFAULT_INPUT_FILE) -> None:
        """
        Initialize the use case.

        Args:
            input_file: Path to the URL list
        """
        self.input_file = Path(input_file)

    def execute(self) -> list[str]:
        """
        Read the URLs from the input file.

        Returns:
            URLs in file order

        Raises:
            InputFileError: If the file does not exist or cannot be read
        """
        if not self.input_file.is_file():
            raise InputFileError(self.input_file)

        try:
            text = self.input_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise InputFileError(self.input_file, e) from e

        return [line.strip() for line in text.splitlines() if is_url_line(line)]
