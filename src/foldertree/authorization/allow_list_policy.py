"""Platform-specific allow-list of locations that may be scanned."""

import ntpath
import os
import posixpath
import string
from enum import Enum
from types import ModuleType
from typing import Optional, Sequence, Tuple

# Locations a POSIX host may scan in addition to the working directory
DEFAULT_POSIX_PREFIXES: Tuple[str, ...] = ("/tmp", "/home", "/Users", "/var/tmp")


class Platform(str, Enum):
    """Path convention the policy applies to.

    Values:
        POSIX: Single rooted namespace with "/" separators
        WINDOWS: Drive-letter paths with "\\" separators
    """

    POSIX = "posix"
    WINDOWS = "windows"

    @classmethod
    def host(cls) -> "Platform":
        """Return the convention of the running interpreter."""
        return cls.WINDOWS if os.name == "nt" else cls.POSIX

    @property
    def flavour(self) -> ModuleType:
        """The os.path implementation matching this convention."""
        return ntpath if self is Platform.WINDOWS else posixpath


class AllowListPolicy:
    """String-prefix allow-list deciding which resolved paths may be scanned.

    On a POSIX platform a path is allowed when it equals, or lies beneath, the working
    directory or one of the configured prefixes. Matching is done per path segment,
    so "/tmpfoo" is not beneath "/tmp". On a drive-letter platform every path that
    starts with a drive letter and ":" is allowed.

    This is advisory only: it compares strings and does not look at symbolic links,
    so a link beneath an allowed prefix can still point anywhere.

    Attributes:
        platform (Platform): Path convention in use.
        prefixes (Tuple[str, ...]): Allowed POSIX prefixes besides the working directory.

    Example:
        >>> policy = AllowListPolicy(Platform.POSIX)
        >>> policy.allows("/tmp/project", working_directory="/srv/app")
        True
        >>> policy.allows("/etc", working_directory="/srv/app")
        False
        >>> AllowListPolicy(Platform.WINDOWS).allows("D:\\\\data", working_directory="C:\\\\")
        True
    """

    def __init__(
        self,
        platform: Optional[Platform] = None,
        prefixes: Sequence[str] = DEFAULT_POSIX_PREFIXES,
    ) -> None:
        self.platform = Platform(platform) if platform is not None else Platform.host()
        self.prefixes = tuple(prefixes)

    def allows(self, resolved_path: str, working_directory: str) -> bool:
        """Check a resolved absolute path against the policy.

        Args:
            resolved_path: Canonical absolute path to check.
            working_directory: Canonical absolute working directory, always allowed on POSIX.

        Returns:
            True if the path may be scanned.
        """
        if self.platform is Platform.WINDOWS:
            return self._allows_drive(resolved_path)
        return any(_is_within(resolved_path, prefix) for prefix in (working_directory, *self.prefixes))

    @staticmethod
    def _allows_drive(resolved_path: str) -> bool:
        drive, _ = ntpath.splitdrive(resolved_path)
        return len(drive) == 2 and drive[0].upper() in string.ascii_uppercase and drive[1] == ":"


def _is_within(path: str, prefix: str) -> bool:
    prefix = prefix.rstrip("/")
    return path == prefix or path.startswith(prefix + "/")
