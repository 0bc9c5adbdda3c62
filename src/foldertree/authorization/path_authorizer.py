"""Resolution and authorization of caller-supplied scan paths."""

import os
import stat
from typing import Any, Optional

from foldertree.exceptions import (
    AccessDeniedError,
    InvalidInputError,
    PathNotADirectoryError,
    PathNotFoundError,
)
from foldertree.types import PathType

from .allow_list_policy import AllowListPolicy, Platform


class PathAuthorizer:
    """Turns an untrusted path string into an authorized absolute directory path.

    Relative paths are resolved against an explicit working directory rather than the
    process's current directory. Resolution is purely lexical: "." and ".." segments are
    collapsed and separators normalized, but symbolic links are not followed. No
    filesystem access happens before the allow-list policy has accepted the path.

    Attributes:
        working_directory (str): Canonical absolute directory relative paths resolve against.
        policy (AllowListPolicy): Allow-list applied to every resolved path.

    Example:
        >>> authorizer = PathAuthorizer("/home/me/projects")  # doctest: +SKIP
        >>> authorizer.authorize("./site")  # doctest: +SKIP
        '/home/me/projects/site'
        >>> authorizer.authorize("/etc")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        foldertree.exceptions.AccessDeniedError: Access to this path is not allowed: /etc
    """

    def __init__(self, working_directory: PathType, policy: Optional[AllowListPolicy] = None) -> None:
        """
        Args:
            working_directory: Directory relative paths resolve against. A relative value is
                made absolute against the process directory when the policy targets the host.
            policy: Allow-list policy. Defaults to the host platform's policy.

        Raises:
            ValueError: If working_directory is relative and the policy targets another platform.
        """
        self.policy = policy if policy is not None else AllowListPolicy()
        self._flavour = self.policy.platform.flavour

        working_directory = os.fspath(working_directory)
        if not self._flavour.isabs(working_directory):
            if self.policy.platform is not Platform.host():
                raise ValueError(f"working_directory must be absolute, got {working_directory!r}")
            working_directory = os.path.abspath(working_directory)
        self.working_directory = self._flavour.normpath(working_directory)

    def resolve(self, raw_path: Any) -> str:
        """Resolve a raw path string to a canonical absolute path without touching the filesystem.

        Args:
            raw_path: Path as supplied by the caller; relative or absolute, either separator.

        Returns:
            The canonical absolute path.

        Raises:
            InvalidInputError: If raw_path is not a non-empty string.
        """
        if not isinstance(raw_path, str) or not raw_path.strip():
            raise InvalidInputError()
        if "\x00" in raw_path:
            raise InvalidInputError("Path must not contain NUL characters", raw_path)

        if raw_path.startswith(".") or not self._flavour.isabs(raw_path):
            target = self._flavour.join(self.working_directory, raw_path)
        else:
            target = raw_path
        return self._flavour.normpath(target)

    def authorize(self, raw_path: Any) -> str:
        """Resolve a raw path and check it against the policy and the filesystem.

        Args:
            raw_path: Path as supplied by the caller.

        Returns:
            The resolved absolute path of an existing, allowed directory.

        Raises:
            InvalidInputError: If raw_path is missing or empty.
            AccessDeniedError: If the resolved path is outside the allow-list.
            PathNotFoundError: If the resolved path does not exist.
            PathNotADirectoryError: If the resolved path is not a directory.
        """
        resolved = self.resolve(raw_path)

        if not self.policy.allows(resolved, self.working_directory):
            raise AccessDeniedError(resolved)

        try:
            mode = os.stat(resolved).st_mode
        except OSError:
            raise PathNotFoundError(resolved)

        if not stat.S_ISDIR(mode):
            raise PathNotADirectoryError(resolved)

        return resolved
