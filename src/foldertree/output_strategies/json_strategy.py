"""JSON output of a scan result."""

import json
from typing import Iterator, Optional

from foldertree.folder_tree.scan_result import ScanResult

from .base_strategy import OutputStrategy


class JSONOutputStrategy(OutputStrategy):
    """Render a scan result as the JSON response body of a successful request.

    The document has the keys "structure", "path", "count" and "fileLimit". Entry
    nodes carry "name", "path", "type" and, for non-empty folders, "children";
    truncation markers additionally carry "truncated" and "totalCount".

    Attributes:
        indent: Indentation passed to the JSON encoder; None produces a single line.

    Example:
        >>> from foldertree.folder_tree.scan_result import ScanResult
        >>> from foldertree.folder_tree.tree_node import EntryNode
        >>> from foldertree.types import NodeKind
        >>> root = EntryNode("project", "", NodeKind.FOLDER)
        >>> _ = EntryNode("a.txt", "a.txt", NodeKind.FILE, parent=root)
        >>> result = ScanResult(root=root, path="/tmp/project", file_limit=20, count=1)
        >>> document = json.loads("".join(JSONOutputStrategy(indent=None).render(result)))
        >>> document["structure"]
        [{'name': 'a.txt', 'path': 'a.txt', 'type': 'file'}]
        >>> document["count"], document["fileLimit"]
        (1, 20)
    """

    def __init__(self, indent: Optional[int] = 2) -> None:
        self.indent = indent

    def render(self, result: ScanResult) -> Iterator[str]:
        yield from json.dumps(result.to_dict(), indent=self.indent, ensure_ascii=False).splitlines()

    def get_file_extension(self) -> str:
        return ".json"
