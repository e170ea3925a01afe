"""Access policies: predicates over (host path, operation)."""

from __future__ import annotations

import os
from enum import Enum
from typing import Optional


class Operation(str, Enum):
    """Operation kinds checked by policies."""

    READ = "READ"
    WRITE = "WRITE"


class Policy:
    """
    Base policy. Subclasses implement comply(); instances are immutable.

    Policies compose with ``&``: ``a & b`` is a CombinedPolicy(a, b).
    """

    __slots__ = ()

    def comply(self, path: str, operation: Operation) -> bool:
        raise NotImplementedError

    def __and__(self, other: Policy) -> CombinedPolicy:
        return CombinedPolicy(self, other)


class AllowAllPolicy(Policy):
    __slots__ = ()

    def comply(self, path: str, operation: Operation) -> bool:
        return True


class DenyAllPolicy(Policy):
    __slots__ = ()

    def comply(self, path: str, operation: Operation) -> bool:
        return False


class ReadOnlyPolicy(Policy):
    __slots__ = ()

    def comply(self, path: str, operation: Operation) -> bool:
        return operation is Operation.READ


class ForceRootPolicy(Policy):
    """
    Allow only paths equal to root or located under it.

    Both the normalised path and its realpath must stay inside, so a symlink
    pointing outside the root is rejected as well as a ``..`` escape.
    """

    __slots__ = ("_root", "_real_root")

    def __init__(self, root: str) -> None:
        self._root = os.path.normpath(root)
        self._real_root = os.path.realpath(self._root)

    @property
    def root(self) -> str:
        return self._root

    def comply(self, path: str, operation: Operation) -> bool:
        if "\0" in path:
            return False
        normalized = os.path.normpath(path)
        if not _is_within(normalized, self._root):
            return False
        return _is_within(os.path.realpath(normalized), self._real_root)


class CombinedPolicy(Policy):
    """Logical AND of member policies, short-circuiting on the first denial."""

    __slots__ = ("_policies",)

    def __init__(self, *policies: Policy) -> None:
        self._policies: tuple[Policy, ...] = tuple(policies)

    @property
    def policies(self) -> tuple[Policy, ...]:
        return self._policies

    def comply(self, path: str, operation: Operation) -> bool:
        return all(p.comply(path, operation) for p in self._policies)


def build_policy(root: str, policy: Optional[Policy] = None) -> Policy:
    """
    Build the effective drive policy.

    ForceRootPolicy(root) always comes first, so a caller-supplied policy can
    only narrow the sandbox, never widen it.
    """
    force_root = ForceRootPolicy(root)
    if policy is None:
        return force_root
    return CombinedPolicy(force_root, policy)


def _is_within(path: str, root: str) -> bool:
    if path == root:
        return True
    prefix = root if root.endswith(os.sep) else root + os.sep
    return path.startswith(prefix)
