"""Result of a bounded folder scan."""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Tuple

from anytree import PreOrderIter

from foldertree.folder_tree.tree_node import EntryNode, TreeNode


@dataclass(frozen=True)
class ReadFailure:
    """A directory whose listing failed during a scan and was treated as empty.

    Attributes:
        path: Path of the directory relative to the scan root ("" for the root itself).
        message: Description of the underlying OS error.
    """

    path: str
    message: str


@dataclass(frozen=True)
class ScanResult:
    """Complete, immutable outcome of scanning one directory.

    Attributes:
        root: Synthetic folder node for the scan root; its children are the structure.
        path: Resolved absolute path that was scanned.
        file_limit: Per-directory limit that was applied.
        count: Number of nodes in the structure, truncation markers included.
        read_failures: Directories that could not be listed.
    """

    root: EntryNode
    path: str
    file_limit: int
    count: int
    read_failures: Tuple[ReadFailure, ...] = ()

    @property
    def structure(self) -> Tuple[TreeNode, ...]:
        """Root-level nodes of the scanned tree, in display order."""
        return tuple(self.root.children)

    def iter_nodes(self) -> Iterator[TreeNode]:
        """Iterate every node of the structure in pre-order, excluding the synthetic root."""
        return PreOrderIter(self.root, filter_=lambda node: node is not self.root)

    def to_dict(self) -> Dict[str, Any]:
        """Build the response body for a successful scan."""
        return {
            "structure": [node.to_dict() for node in self.structure],
            "path": self.path,
            "count": self.count,
            "fileLimit": self.file_limit,
        }
