"""Markdown bullet-list output."""

from typing import Iterator

from foldertree.folder_tree.scan_result import ScanResult
from foldertree.folder_tree.tree_node import EntryNode, TruncationMarker

from .base_strategy import OutputStrategy


class MarkdownOutputStrategy(OutputStrategy):
    """Render a scan result as a nested Markdown list.

    Each level is indented by two spaces. Folder names are bold and a truncation
    marker becomes an italic "... (N more)" item.

    Example:
        >>> from foldertree.folder_tree.scan_result import ScanResult
        >>> from foldertree.folder_tree.tree_node import EntryNode, TruncationMarker
        >>> from foldertree.types import NodeKind
        >>> root = EntryNode("project", "", NodeKind.FOLDER)
        >>> docs = EntryNode("docs", "docs", NodeKind.FOLDER, parent=root)
        >>> _ = EntryNode("index.md", "docs/index.md", NodeKind.FILE, parent=docs)
        >>> _ = TruncationMarker("docs/...", 3, parent=docs)
        >>> result = ScanResult(root=root, path="/tmp/project", file_limit=2, count=3)
        >>> print("\\n".join(MarkdownOutputStrategy().render(result)))
        - **docs/**
          - index.md
          - *... (2 more)*
    """

    def render(self, result: ScanResult) -> Iterator[str]:
        for node in result.iter_nodes():
            indent = "  " * (node.depth - 1)
            if isinstance(node, TruncationMarker):
                yield f"{indent}- *{self.describe_marker(node)}*"
            elif isinstance(node, EntryNode) and node.is_folder:
                yield f"{indent}- **{node.name}/**"
            else:
                yield f"{indent}- {node.name}"

    def get_file_extension(self) -> str:
        return ".md"
