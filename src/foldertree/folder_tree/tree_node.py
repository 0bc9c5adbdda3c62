"""Node types making up a scanned folder tree."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from anytree import NodeMixin

from foldertree.types import NodeKind


class TreeNode(NodeMixin, ABC):  # type: ignore
    """Common base of the two node variants in a folder tree.

    Extends anytree.NodeMixin so that parent/children links, ancestor walks and
    iteration come from anytree. Concrete nodes are either an EntryNode (a real file
    or folder) or a TruncationMarker (stand-in for entries left out by the limit).

    Attributes:
        name (str): Base name shown for the node.
        rel_path (str): Path relative to the scan root, joined with "/". Serialized as "path";
            anytree already uses `path` for the tuple of ancestor nodes.
        truncated (bool): True only for truncation markers.
    """

    truncated = False

    def __init__(self, name: str, rel_path: str, parent: Optional["TreeNode"] = None) -> None:
        self.name = name
        self.rel_path = rel_path
        self.parent = parent

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Serialize the node (and its subtree) to plain JSON-compatible data."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rel_path={self.rel_path!r})"


class EntryNode(TreeNode):
    """A real file or folder found in a directory listing.

    Attributes:
        kind (NodeKind): FILE or FOLDER.

    Example:
        >>> root = EntryNode("project", "", NodeKind.FOLDER)
        >>> src = EntryNode("src", "src", NodeKind.FOLDER, parent=root)
        >>> main = EntryNode("main.py", "src/main.py", NodeKind.FILE, parent=src)
        >>> src.to_dict()["children"]
        [{'name': 'main.py', 'path': 'src/main.py', 'type': 'file'}]
        >>> "children" in main.to_dict()
        False
    """

    def __init__(self, name: str, rel_path: str, kind: NodeKind, parent: Optional[TreeNode] = None) -> None:
        super().__init__(name, rel_path, parent)
        self.kind = NodeKind(kind)

    @property
    def is_folder(self) -> bool:
        return self.kind is NodeKind.FOLDER

    def to_dict(self) -> Dict[str, Any]:
        # Empty folders carry no "children" key at all
        data: Dict[str, Any] = {"name": self.name, "path": self.rel_path, "type": self.kind.value}
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data

    def __repr__(self) -> str:
        return f"EntryNode(rel_path={self.rel_path!r}, kind={self.kind.value!r})"


class TruncationMarker(TreeNode):
    """Sentinel appended to a directory listing that exceeded the file limit.

    The marker takes the last slot of the listing. It is named "..." and its path is
    the directory's path joined with that name.

    Attributes:
        total_count (int): Number of entries the directory had after filtering, before truncation.

    Example:
        >>> folder = EntryNode("logs", "logs", NodeKind.FOLDER)
        >>> marker = TruncationMarker("logs/...", 40, parent=folder)
        >>> marker.to_dict()
        {'name': '...', 'path': 'logs/...', 'type': 'folder', 'truncated': True, 'totalCount': 40}
        >>> marker.omitted_count
        40
    """

    NAME = "..."
    truncated = True

    def __init__(self, rel_path: str, total_count: int, parent: Optional[TreeNode] = None) -> None:
        super().__init__(self.NAME, rel_path, parent)
        self.total_count = total_count

    @property
    def omitted_count(self) -> int:
        """Number of entries of the directory that are not shown."""
        shown = len(self.siblings) if self.parent is not None else 0
        return self.total_count - shown

    def to_dict(self) -> Dict[str, Any]:
        # Markers are reported as folders on the wire
        return {
            "name": self.name,
            "path": self.rel_path,
            "type": NodeKind.FOLDER.value,
            "truncated": True,
            "totalCount": self.total_count,
        }
