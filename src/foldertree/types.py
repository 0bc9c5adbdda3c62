from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class NodeKind(str, Enum):
    """Kind of filesystem entry represented by a tree node.

    Attributes:
        FILE: Anything that is not a directory, including symbolic links
        FOLDER: Directory
    """

    FILE = "file"
    FOLDER = "folder"
