"""Plain-text tree output, in the style of the Unix `tree` command."""

from typing import Iterator

from foldertree.folder_tree.scan_result import ScanResult
from foldertree.folder_tree.tree_node import EntryNode, TreeNode, TruncationMarker

from .base_strategy import OutputStrategy


class TextOutputStrategy(OutputStrategy):
    """Render a scan result as a tree drawn with box-drawing characters.

    The first line is the scan root's name followed by "/". Folders are suffixed with
    "/" and a truncation marker is shown as "... (N more)".

    Example:
        >>> from foldertree.folder_tree.scan_result import ScanResult
        >>> from foldertree.folder_tree.tree_node import EntryNode
        >>> from foldertree.types import NodeKind
        >>> root = EntryNode("project", "", NodeKind.FOLDER)
        >>> src = EntryNode("src", "src", NodeKind.FOLDER, parent=root)
        >>> _ = EntryNode("main.py", "src/main.py", NodeKind.FILE, parent=src)
        >>> _ = EntryNode("a.txt", "a.txt", NodeKind.FILE, parent=root)
        >>> result = ScanResult(root=root, path="/tmp/project", file_limit=20, count=3)
        >>> print("\\n".join(TextOutputStrategy().render(result)))
        project/
        ├── src/
        │   └── main.py
        └── a.txt
    """

    def render(self, result: ScanResult) -> Iterator[str]:
        yield f"{result.root.name}/"
        yield from self._render_children(result.root, "")

    def _render_children(self, node: TreeNode, prefix: str) -> Iterator[str]:
        children = node.children
        for i, child in enumerate(children):
            is_last = i == len(children) - 1
            connector = "└── " if is_last else "├── "
            yield f"{prefix}{connector}{self._label(child)}"
            if child.children:
                yield from self._render_children(child, prefix + ("    " if is_last else "│   "))

    def _label(self, node: TreeNode) -> str:
        if isinstance(node, TruncationMarker):
            return self.describe_marker(node)
        if isinstance(node, EntryNode) and node.is_folder:
            return f"{node.name}/"
        return node.name

    def get_file_extension(self) -> str:
        return ".txt"
