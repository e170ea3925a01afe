"""Configuration and result models for drive operations."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Optional

from .entry import Entry

EntryPredicate = Callable[[Entry], bool]

DEFAULT_IGNORED_NAMES: tuple[str, ...] = (".DS_Store", ".git")


@dataclass(frozen=True)
class OperationConfig:
    """Options for mutating operations (write/make/copy/move)."""

    prevent_name_collision: bool = False


@dataclass(frozen=True)
class ListConfig:
    """
    Options for list/search.

    include/exclude receive the candidate Entry. An entry is kept only if it
    is not excluded and, when include is set, include returns True.
    """

    skip_files: bool = False
    sub_folders: bool = False
    nested: bool = False

    include: Optional[EntryPredicate] = None
    exclude: Optional[EntryPredicate] = None

    def with_include(self, predicate: EntryPredicate) -> ListConfig:
        """Return a copy whose include also requires predicate (AND)."""
        current = self.include
        if current is None:
            return replace(self, include=predicate)
        return replace(self, include=lambda entry: current(entry) and predicate(entry))

    def with_exclude(self, predicate: EntryPredicate) -> ListConfig:
        """Return a copy whose exclude also drops predicate matches (OR)."""
        current = self.exclude
        if current is None:
            return replace(self, exclude=predicate)
        return replace(self, exclude=lambda entry: current(entry) or predicate(entry))


@dataclass(frozen=True)
class DriveConfig:
    """
    Drive-wide options fixed at construction.

    Attributes:
        verbose: Emit operation traces at INFO level instead of DEBUG.
        exclude: Drive-wide exclude predicate, OR-ed with per-call excludes.
    """

    verbose: bool = False
    exclude: Optional[EntryPredicate] = None


def ignore_names(*names: str) -> EntryPredicate:
    """Build an exclude predicate that drops entries with one of the names."""
    ignored = frozenset(names)
    return lambda entry: entry.name in ignored


@dataclass(slots=True)
class DriveStats:
    """Space usage of the volume holding the drive root, in bytes."""

    used: int = 0
    free: int = 0
