"""Folder-structure requests: authorize a path, scan it, report the bounded tree.

This module is the request/response contract exposed to presentation layers. A request
carries a raw `path` and an optional `fileLimit`; a response is either the scanned tree
with its node count, or an error body whose category maps to a status code.
"""

import math
import os
import re
from collections.abc import Mapping
from typing import Any, Dict, Optional, Tuple

from foldertree.authorization.allow_list_policy import AllowListPolicy
from foldertree.authorization.path_authorizer import PathAuthorizer
from foldertree.exceptions import FolderTreeError, InvalidInputError, ScanInternalError
from foldertree.exclusion_rules.base_rules import BaseExclusionRules
from foldertree.folder_tree.folder_scanner import DEFAULT_FILE_LIMIT, MAX_FILE_LIMIT, MIN_FILE_LIMIT, FolderScanner
from foldertree.folder_tree.scan_result import ScanResult
from foldertree.types import PathType

_LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")


def clamp_file_limit(value: Any) -> int:
    """Turn any caller-supplied file limit into a limit within [1, 100].

    Integers are clamped, floats are truncated first, and strings use their leading
    integer. Anything else, including non-numeric strings and booleans, falls back to
    the default of 20 before clamping. This never raises.

    Args:
        value: The raw file limit, typically straight from a request body.

    Returns:
        The limit to apply.

    Example:
        >>> [clamp_file_limit(v) for v in (0, -5, "abc", 500, "12abc", 7.9, None)]
        [1, 1, 20, 100, 12, 7, 20]
    """
    if isinstance(value, bool) or value is None:
        limit = DEFAULT_FILE_LIMIT
    elif isinstance(value, int):
        limit = value
    elif isinstance(value, float):
        limit = int(value) if math.isfinite(value) else DEFAULT_FILE_LIMIT
    elif isinstance(value, str):
        match = _LEADING_INTEGER.match(value)
        limit = int(match.group(1)) if match else DEFAULT_FILE_LIMIT
    else:
        limit = DEFAULT_FILE_LIMIT
    return max(MIN_FILE_LIMIT, min(MAX_FILE_LIMIT, limit))


def scan_folder_structure(
    path: Any,
    file_limit: Any = DEFAULT_FILE_LIMIT,
    *,
    working_directory: Optional[PathType] = None,
    policy: Optional[AllowListPolicy] = None,
    exclusion_rules: Optional[BaseExclusionRules] = None,
    max_depth: Optional[int] = None,
) -> ScanResult:
    """Authorize a raw path and scan it into a bounded tree.

    Args:
        path: Raw directory path, relative or absolute.
        file_limit: Raw per-directory limit; clamped with clamp_file_limit.
        working_directory: Directory relative paths resolve against and that the POSIX
            policy always allows. Defaults to the process's current directory.
        policy: Allow-list policy. Defaults to the host platform's policy.
        exclusion_rules: Extra exclusion rules on top of the hidden/noise filtering.
        max_depth: Number of directory levels to list. None lists all.

    Returns:
        The scan result.

    Raises:
        InvalidInputError: If path is missing or empty.
        AccessDeniedError: If the resolved path is outside the allow-list.
        PathNotFoundError: If the resolved path does not exist.
        PathNotADirectoryError: If the resolved path is not a directory.
        ScanInternalError: If scanning fails unexpectedly.
    """
    limit = clamp_file_limit(file_limit)
    authorizer = PathAuthorizer(working_directory if working_directory is not None else os.getcwd(), policy)
    resolved = authorizer.authorize(path)

    scanner = FolderScanner(limit, exclusion_rules=exclusion_rules, max_depth=max_depth)
    try:
        return scanner.scan(resolved)
    except Exception as e:
        raise ScanInternalError(path=resolved) from e


def handle_request(
    payload: Any,
    *,
    working_directory: Optional[PathType] = None,
    policy: Optional[AllowListPolicy] = None,
) -> Tuple[int, Dict[str, Any]]:
    """Answer one folder-structure request.

    Args:
        payload: Decoded request body with a required "path" and an optional "fileLimit".
        working_directory: See scan_folder_structure.
        policy: See scan_folder_structure.

    Returns:
        A (status, body) pair. On success the status is 200 and the body holds
        "structure", "path", "count" and "fileLimit"; otherwise the status comes from the
        error category and the body holds "error" and "category".
    """
    try:
        if not isinstance(payload, Mapping):
            raise InvalidInputError("Request body must be an object")
        result = scan_folder_structure(
            payload.get("path"),
            payload.get("fileLimit", DEFAULT_FILE_LIMIT),
            working_directory=working_directory,
            policy=policy,
        )
    except FolderTreeError as e:
        return e.category.status, e.to_dict()
    except Exception:
        error = ScanInternalError()
        return error.category.status, error.to_dict()

    return 200, result.to_dict()
