"""Public model exports for localdrive."""

from __future__ import annotations

from .config import (
    DEFAULT_IGNORED_NAMES,
    DriveConfig,
    DriveStats,
    EntryPredicate,
    ListConfig,
    OperationConfig,
    ignore_names,
)
from .entry import Entry

__all__ = [
    "Entry",
    "EntryPredicate",
    "ListConfig",
    "OperationConfig",
    "DriveConfig",
    "DriveStats",
    "DEFAULT_IGNORED_NAMES",
    "ignore_names",
]
