"""Exception hierarchy and OS error mapping for localdrive."""

from __future__ import annotations

import errno
from typing import Any, Optional


class LocalDriveError(Exception):
    """
    Base exception for localdrive.

    Attributes:
        details: Optional structured information (e.g., path, errno).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class InvalidRootError(LocalDriveError):
    """Raised when the drive root is empty or not an absolute path."""


class AccessDeniedError(LocalDriveError):
    """Raised when a policy check fails or the OS refuses access."""


class NotFoundError(LocalDriveError):
    """Raised when the target path does not exist."""


class DriveIOError(LocalDriveError):
    """Raised for other filesystem failures (disk full, busy, etc.)."""


class InvalidArgumentError(LocalDriveError):
    """Raised when call arguments are invalid (bad name, cyclic copy, etc.)."""


_NOT_FOUND_ERRNOS: frozenset[int] = frozenset({errno.ENOENT, errno.ENOTDIR})
_ACCESS_ERRNOS: frozenset[int] = frozenset({errno.EACCES, errno.EPERM, errno.EROFS})


def map_os_error(
    exc: OSError,
    *,
    path: Optional[str] = None,
) -> LocalDriveError:
    """
    Map an OSError raised by the host filesystem to a localdrive exception.

    Policy:
        - FileNotFoundError / ENOENT / ENOTDIR -> NotFoundError
        - PermissionError / EACCES / EPERM / EROFS -> AccessDeniedError
        - otherwise -> DriveIOError
    """
    details: dict[str, Any] = {"errno": exc.errno}
    if path is not None:
        details["path"] = path
    elif exc.filename is not None:
        details["path"] = exc.filename

    message = exc.strerror or str(exc) or exc.__class__.__name__

    if isinstance(exc, (FileNotFoundError, NotADirectoryError)) or exc.errno in _NOT_FOUND_ERRNOS:
        return NotFoundError(message, details=details, cause=exc)
    if isinstance(exc, PermissionError) or exc.errno in _ACCESS_ERRNOS:
        return AccessDeniedError(message, details=details, cause=exc)

    return DriveIOError(message, details=details, cause=exc)
