"""localdrive public API."""

from __future__ import annotations

from localdrive.drive import LocalDrive
from localdrive.errors import (
    AccessDeniedError,
    DriveIOError,
    InvalidArgumentError,
    InvalidRootError,
    LocalDriveError,
    NotFoundError,
    map_os_error,
)
from localdrive.local import PathResolver, normalize_id, resolve_name
from localdrive.models import (
    DEFAULT_IGNORED_NAMES,
    DriveConfig,
    DriveStats,
    Entry,
    ListConfig,
    OperationConfig,
    ignore_names,
)
from localdrive.policy import (
    AllowAllPolicy,
    CombinedPolicy,
    DenyAllPolicy,
    ForceRootPolicy,
    Operation,
    Policy,
    ReadOnlyPolicy,
)

__all__ = [
    # High-level
    "LocalDrive",
    "PathResolver",
    "normalize_id",
    "resolve_name",
    # Policies
    "Operation",
    "Policy",
    "AllowAllPolicy",
    "DenyAllPolicy",
    "ReadOnlyPolicy",
    "ForceRootPolicy",
    "CombinedPolicy",
    # Models
    "Entry",
    "ListConfig",
    "OperationConfig",
    "DriveConfig",
    "DriveStats",
    "DEFAULT_IGNORED_NAMES",
    "ignore_names",
    # Errors
    "LocalDriveError",
    "InvalidRootError",
    "AccessDeniedError",
    "NotFoundError",
    "DriveIOError",
    "InvalidArgumentError",
    "map_os_error",
]
