"""Authorization and argument validation helpers for LocalDrive."""

from __future__ import annotations

import os

from localdrive.errors import AccessDeniedError, InvalidArgumentError
from localdrive.policy import Operation, Policy


def validate_access(policy: Policy, path: str, operation: Operation) -> None:
    if not policy.comply(path, operation):
        raise AccessDeniedError(
            "Access Denied",
            details={"operation": operation.value},
        )


def validate_not_root(root: str, path: str, action: str) -> None:
    if os.path.normpath(path) == root:
        raise AccessDeniedError(f"Root is protected: cannot {action} root")


def validate_entry_name(name: str) -> None:
    """A new entry name must be a single, non-empty path component."""
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgumentError("Name must be a non-empty string")
    if name in (".", "..") or "/" in name or os.sep in name or "\0" in name:
        raise InvalidArgumentError("Name must be a single path component",
                                   details={"name": name})


def validate_no_cycle(source: str, target: str, action: str) -> None:
    """
    Reject copying/moving a folder into itself or its own subtree.

    Both paths are normalised host paths.
    """
    prefix = source if source.endswith(os.sep) else source + os.sep
    if target == source or target.startswith(prefix):
        raise InvalidArgumentError(
            f"{action} would place a folder inside itself",
        )
