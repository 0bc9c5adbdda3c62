"""Bounded, depth-first scanning of a directory into a folder tree.

This module provides the FolderScanner class, which lists a directory and all of its
sub-directories, leaves out hidden and noise entries, orders the rest folders-first,
and caps every directory's listing at a fixed number of nodes.
"""

import os
import posixpath
from functools import lru_cache
from typing import List, NamedTuple, Optional, Tuple

from pyuca import Collator

from foldertree.exclusion_rules.base_rules import BaseExclusionRules
from foldertree.exclusion_rules.composite_rules import CompositeExclusionRules
from foldertree.exclusion_rules.noise_rules import NoiseExclusionRules
from foldertree.folder_tree.scan_result import ReadFailure, ScanResult
from foldertree.folder_tree.tree_node import EntryNode, TruncationMarker
from foldertree.types import NodeKind, PathType

DEFAULT_FILE_LIMIT = 20
MIN_FILE_LIMIT = 1
MAX_FILE_LIMIT = 100


class _Entry(NamedTuple):
    name: str
    rel_path: str
    kind: NodeKind


class FolderScanner:
    """Builds a size-limited folder tree from an already authorized directory.

    Every directory is listed once. Hidden entries, "node_modules" and ".git" are always
    left out; additional exclusion rules can be stacked on top. The remaining entries
    are ordered folders first, then files, each group in locale-aware
    (Unicode collation) name order.

    The file limit applies to each directory on its own. A directory with at most
    `file_limit` entries shows all of them. A larger one shows its first
    `file_limit - 1` entries followed by a TruncationMarker that records how many
    entries the directory had, so no listing ever exceeds `file_limit` nodes.

    A directory that cannot be listed (permission denied, removed during the scan) is
    shown without children and recorded in the result's read_failures; it never aborts
    the scan. Symbolic links are not followed and appear as files.

    Traversal keeps pending directories on an explicit stack, so deep trees do not
    grow the interpreter's call stack. `max_depth` optionally stops the descent.

    Attributes:
        file_limit (int): Maximum number of nodes emitted per directory.
        exclusion_rules (BaseExclusionRules): Rules deciding which entries are left out.
        max_depth (Optional[int]): Deepest level whose contents are listed; None for no limit.

    Example:
        >>> scanner = FolderScanner(file_limit=20)  # doctest: +SKIP
        >>> result = scanner.scan("/tmp/project")  # doctest: +SKIP
        >>> [node.rel_path for node in result.structure]  # doctest: +SKIP
        ['src', 'a.txt']
    """

    def __init__(
        self,
        file_limit: int = DEFAULT_FILE_LIMIT,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        max_depth: Optional[int] = None,
    ) -> None:
        """Initialize a FolderScanner.

        Args:
            file_limit: Maximum number of nodes per directory listing. Must be positive.
            exclusion_rules: Extra rules applied on top of the hidden/noise filtering.
            max_depth: Number of directory levels to list below the root. None lists all.

        Raises:
            ValueError: If file_limit or max_depth is less than 1.
        """
        if file_limit < MIN_FILE_LIMIT:
            raise ValueError(f"file_limit must be at least {MIN_FILE_LIMIT}, got {file_limit}")
        if max_depth is not None and max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")

        self.file_limit = file_limit
        self.max_depth = max_depth
        if exclusion_rules is None:
            self.exclusion_rules: BaseExclusionRules = NoiseExclusionRules()
        else:
            self.exclusion_rules = CompositeExclusionRules([NoiseExclusionRules(), exclusion_rules])

    def scan(self, root_path: PathType) -> ScanResult:
        """Scan a directory and return its bounded tree.

        Args:
            root_path: Absolute path of an authorized directory.

        Returns:
            The scan result holding the tree, node count and read failures.
        """
        root_path = os.fspath(root_path)
        root = EntryNode(os.path.basename(os.path.normpath(root_path)) or root_path, "", NodeKind.FOLDER)
        read_failures: List[ReadFailure] = []
        count = 0

        pending: List[Tuple[str, EntryNode, int]] = [(root_path, root, 0)]
        while pending:
            directory, node, depth = pending.pop()

            try:
                entries = self._list_entries(directory, node.rel_path)
            except OSError as e:
                read_failures.append(ReadFailure(node.rel_path, str(e)))
                continue

            for entry in self._select(entries):
                child = EntryNode(entry.name, entry.rel_path, entry.kind, parent=node)
                count += 1
                if child.is_folder and (self.max_depth is None or depth + 1 < self.max_depth):
                    pending.append((os.path.join(directory, entry.name), child, depth + 1))

            if len(entries) > self.file_limit:
                TruncationMarker(_join(node.rel_path, TruncationMarker.NAME), len(entries), parent=node)
                count += 1

        return ScanResult(
            root=root,
            path=root_path,
            file_limit=self.file_limit,
            count=count,
            read_failures=tuple(sorted(read_failures, key=lambda failure: failure.path)),
        )

    def _list_entries(self, directory: str, prefix: str) -> List[_Entry]:
        """List, filter and sort the immediate entries of one directory.

        Raises:
            OSError: If the directory cannot be listed.
        """
        entries = []
        with os.scandir(directory) as it:
            for dir_entry in it:
                kind = _entry_kind(dir_entry)
                relative_path = _join(prefix, dir_entry.name)
                rule_path = relative_path + "/" if kind is NodeKind.FOLDER else relative_path
                if self.exclusion_rules.exclude(rule_path):
                    continue
                entries.append(_Entry(dir_entry.name, relative_path, kind))

        entries.sort(key=_sort_key)
        return entries

    def _select(self, entries: List[_Entry]) -> List[_Entry]:
        # The marker takes the last slot, so one entry that would fit is left out
        if len(entries) <= self.file_limit:
            return entries
        return entries[: self.file_limit - 1]


@lru_cache(maxsize=None)
def _collator() -> Collator:
    # One collator per process, built on first use
    return Collator()


def _sort_key(entry: _Entry) -> Tuple[bool, Tuple[int, ...], str]:
    # Folders first, then Unicode collation order, then the raw name as a tie-break
    return entry.kind is NodeKind.FILE, _collator().sort_key(entry.name), entry.name


def _entry_kind(dir_entry: "os.DirEntry[str]") -> NodeKind:
    try:
        is_dir = dir_entry.is_dir(follow_symlinks=False)
    except OSError:
        is_dir = False
    return NodeKind.FOLDER if is_dir else NodeKind.FILE


def _join(prefix: str, name: str) -> str:
    return posixpath.join(prefix, name) if prefix else name
