"""Output strategy base class defining how a scan result is rendered."""

from abc import ABC, abstractmethod
from typing import Iterator

from foldertree.folder_tree.scan_result import ScanResult
from foldertree.folder_tree.tree_node import TruncationMarker


class OutputStrategy(ABC):
    """Abstract base class for rendering a scanned folder tree in some output format.

    Strategies produce output one line at a time so that callers can write it out as it
    is generated. Lines are yielded without trailing newlines.

    Example:
        >>> class PathListStrategy(OutputStrategy):
        ...     def render(self, result):
        ...         for node in result.iter_nodes():
        ...             yield node.rel_path
        ...
        ...     def get_file_extension(self) -> str:
        ...         return ".txt"
    """

    @abstractmethod
    def render(self, result: ScanResult) -> Iterator[str]:
        """Render a scan result.

        Args:
            result: The scan result to render.

        Yields:
            Output lines, without trailing newlines.
        """
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get the file extension for this output format, including the leading dot."""
        pass

    @staticmethod
    def describe_marker(marker: TruncationMarker) -> str:
        """Short label for a truncation marker, e.g. "... (6 more)"."""
        return f"{marker.name} ({marker.omitted_count} more)"
