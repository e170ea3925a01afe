"""Public error exports for localdrive."""

from __future__ import annotations

from .exceptions import (
    AccessDeniedError,
    DriveIOError,
    InvalidArgumentError,
    InvalidRootError,
    LocalDriveError,
    NotFoundError,
    map_os_error,
)

__all__ = [
    "LocalDriveError",
    "InvalidRootError",
    "AccessDeniedError",
    "NotFoundError",
    "DriveIOError",
    "InvalidArgumentError",
    "map_os_error",
]
