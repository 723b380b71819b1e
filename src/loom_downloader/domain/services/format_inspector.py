"""Abstract base class for querying the formats a source offers."""

from abc import ABC, abstractmethod

from loom_downloader.domain.models.formats import FormatSet


class FormatInspector(ABC):
    """
    Abstract inspector for remote media format metadata.

    This interface defines the contract for asking the fetch engine which
    encodings a URL offers. Implementations run the engine's metadata query
    and map its structured output onto FormatEntry values.
    """

    @abstractmethod
    async def inspect(self, url: str) -> FormatSet:
        """
        Query the formats available for a URL.

        Failures are folded into the result rather than raised: a URL whose
        metadata cannot be queried yields an empty FormatSet with
        ``inspection_error`` set, so that classification degrades to
        "no audio" instead of aborting the batch.

        Args:
            url: Source URL (must be non-empty)

        Returns:
            FormatSet describing the available formats, possibly empty

        Raises:
            ValidationError: If the URL is empty
        """
        pass

    @abstractmethod
    async def list_formats(self, url: str) -> None:
        """
        Print the engine's human-readable format table for a URL.

        This is an operator-visibility side channel used in verbose mode;
        its output is never parsed. Failures are logged and ignored.

        Args:
            url: Source URL
        """
        pass
