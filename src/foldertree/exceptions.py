"""Error categories and exceptions raised while authorizing and scanning folders."""

from enum import Enum
from typing import Optional


class ErrorCategory(str, Enum):
    """Failure categories reported to callers.

    Each category maps to an HTTP-style status for request/response transports
    and to a process exit code for the command-line interface.

    Values:
        INVALID_INPUT: The requested path was missing or empty
        ACCESS_DENIED: The resolved path is outside the allow-list policy
        NOT_FOUND: The resolved path does not exist
        NOT_A_DIRECTORY: The resolved path exists but is not a directory
        PARTIAL_READ_FAILURE: A sub-directory could not be listed (recovered, never raised)
        INTERNAL_ERROR: Any other unexpected failure
    """

    INVALID_INPUT = "InvalidInput"
    ACCESS_DENIED = "AccessDenied"
    NOT_FOUND = "NotFound"
    NOT_A_DIRECTORY = "NotADirectory"
    PARTIAL_READ_FAILURE = "PartialReadFailure"
    INTERNAL_ERROR = "InternalError"

    @property
    def status(self) -> int:
        """HTTP-style status code for this category."""
        return _STATUS_CODES[self]

    @property
    def exit_code(self) -> int:
        """Process exit code used by the command-line interface for this category."""
        return _EXIT_CODES[self]


_STATUS_CODES = {
    ErrorCategory.INVALID_INPUT: 400,
    ErrorCategory.ACCESS_DENIED: 403,
    ErrorCategory.NOT_FOUND: 404,
    ErrorCategory.NOT_A_DIRECTORY: 400,
    ErrorCategory.PARTIAL_READ_FAILURE: 200,
    ErrorCategory.INTERNAL_ERROR: 500,
}

_EXIT_CODES = {
    ErrorCategory.INVALID_INPUT: 2,
    ErrorCategory.ACCESS_DENIED: 126,
    ErrorCategory.NOT_FOUND: 3,
    ErrorCategory.NOT_A_DIRECTORY: 4,
    ErrorCategory.PARTIAL_READ_FAILURE: 0,
    ErrorCategory.INTERNAL_ERROR: 1,
}


class FolderTreeError(Exception):
    """
    Base class for errors that abort a folder-structure request.

    Attributes:
        category (ErrorCategory): Failure category of the error.
        message (str): Short human-readable description.
        path (Optional[str]): The requested or resolved path involved, if any.

    Example:
        >>> error = PathNotFoundError("/missing")
        >>> error.category.value
        'NotFound'
        >>> error.category.status
        404
    """

    category = ErrorCategory.INTERNAL_ERROR

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)

    def to_dict(self) -> dict:
        """Build the error body returned to request/response callers."""
        return {"error": self.message, "category": self.category.value}


class InvalidInputError(FolderTreeError):
    """Raised when the requested path is missing, empty or not a string."""

    category = ErrorCategory.INVALID_INPUT

    def __init__(self, message: str = "Path is required", path: Optional[str] = None) -> None:
        super().__init__(message, path)


class AccessDeniedError(FolderTreeError):
    """
    Raised when a resolved path falls outside the allow-list policy.

    Example:
        >>> str(AccessDeniedError("/etc"))
        'Access to this path is not allowed: /etc'
    """

    category = ErrorCategory.ACCESS_DENIED

    def __init__(self, path: str) -> None:
        super().__init__(f"Access to this path is not allowed: {path}", path)


class PathNotFoundError(FolderTreeError):
    """Raised when the resolved path does not exist."""

    category = ErrorCategory.NOT_FOUND

    def __init__(self, path: str) -> None:
        super().__init__(f"Directory not found: {path}", path)


class PathNotADirectoryError(FolderTreeError):
    """Raised when the resolved path exists but is not a directory."""

    category = ErrorCategory.NOT_A_DIRECTORY

    def __init__(self, path: str) -> None:
        super().__init__(f"Path must be a directory: {path}", path)


class ScanInternalError(FolderTreeError):
    """Raised when scanning fails for a reason outside the other categories."""

    category = ErrorCategory.INTERNAL_ERROR

    def __init__(self, message: str = "Internal server error", path: Optional[str] = None) -> None:
        super().__init__(message, path)
