"""Custom exceptions for pathwright.

Every filesystem failure is raised as an ``FsError`` subclass carrying the
offending path and a classified ``ErrorKind``. Batch operations catch these
and turn them into per-path outcomes; only preconditions and invalid paths
reach the caller as exceptions.
"""

import errno
from enum import Enum
from pathlib import Path
from typing import Any


class ErrorKind(str, Enum):
    """Classification of filesystem failures.

    Attributes:
        NOT_FOUND: Path (or one of its parents) does not exist
        ALREADY_EXISTS: Path exists where it must not
        PERMISSION_DENIED: Access refused, or writability could not be confirmed
        NOT_A_DIRECTORY: A path component exists but is not a directory
        UNSUPPORTED: Entry is neither a regular file nor a directory
        INVALID_PATH: Empty or relative path where an absolute one is required
        OTHER: Any unclassified OS error (see ``code``)
    """

    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    PERMISSION_DENIED = "permission_denied"
    NOT_A_DIRECTORY = "not_a_directory"
    UNSUPPORTED = "unsupported"
    INVALID_PATH = "invalid_path"
    OTHER = "other"


class PathwrightError(Exception):
    """Base exception for all pathwright errors."""

    pass


class FsError(PathwrightError):
    """A classified filesystem failure for a single path.

    Attributes:
        kind: Error classification
        path: The offending path (None when no path could be determined)
        reason: Human-readable description
        code: OS errno when the failure came from the operating system
    """

    kind: ErrorKind = ErrorKind.OTHER

    def __init__(
        self,
        path: Path | str | None,
        reason: str,
        code: int | None = None,
    ) -> None:
        self.path = Path(path) if path else None
        self.reason = reason
        self.code = code
        super().__init__(f"{path}: {reason}" if path else reason)

    @classmethod
    def from_os_error(cls, exc: OSError, path: Path | str) -> "FsError":
        """Classify an OSError by errno.

        Args:
            exc: The error raised by the operating system
            path: Path the failing call operated on

        Returns:
            The matching FsError subclass instance
        """
        reason = exc.strerror or str(exc)
        error_cls = _ERRNO_MAP.get(exc.errno or -1, FsError)
        return error_cls(path, reason, code=exc.errno)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for rendering and logging."""
        result: dict[str, Any] = {
            "error": self.kind.value,
            "path": str(self.path) if self.path else None,
            "reason": self.reason,
        }
        if self.code is not None:
            result["code"] = self.code
        return result

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(path={str(self.path)!r}, "
            f"reason={self.reason!r}, code={self.code})"
        )


class NotFoundError(FsError):
    kind = ErrorKind.NOT_FOUND


class AlreadyExistsError(FsError):
    kind = ErrorKind.ALREADY_EXISTS


class PermissionDeniedError(FsError):
    kind = ErrorKind.PERMISSION_DENIED


class NotADirectoryFsError(FsError):
    kind = ErrorKind.NOT_A_DIRECTORY


class UnsupportedEntryError(FsError):
    kind = ErrorKind.UNSUPPORTED


class InvalidPathError(FsError):
    kind = ErrorKind.INVALID_PATH


_ERRNO_MAP: dict[int, type[FsError]] = {
    errno.ENOENT: NotFoundError,
    errno.EEXIST: AlreadyExistsError,
    errno.EACCES: PermissionDeniedError,
    errno.EPERM: PermissionDeniedError,
    errno.ENOTDIR: NotADirectoryFsError,
}
