"""Conversion between virtual ids and host paths."""

from __future__ import annotations

import os
import posixpath
import re

from localdrive.errors import AccessDeniedError, InvalidArgumentError, InvalidRootError

_IS_WINDOWS = os.sep == "\\"
_WINDOWS_ROOT_RE = re.compile(r"^[A-Z]:\\", re.IGNORECASE)


def normalize_id(virtual_id: str) -> str:
    """
    Canonical form of a virtual id.

    "/"-separated, leading "/", no trailing "/", "." and ".." resolved.
    ".." never climbs above "/" here; escape detection is done on host paths.
    """
    value = virtual_id.replace("\\", "/") if _IS_WINDOWS else virtual_id
    return posixpath.normpath("/" + value.lstrip("/"))


def validate_root(root: str) -> str:
    """
    Validate and canonicalize a drive root.

    Raises:
        InvalidRootError: if root is empty or not absolute for this platform.
    """
    if not root or not isinstance(root, str):
        raise InvalidRootError("Invalid root folder: empty root")
    if _IS_WINDOWS:
        if not _WINDOWS_ROOT_RE.match(root):
            raise InvalidRootError("Invalid root folder", details={"root": root})
    elif not root.startswith("/"):
        raise InvalidRootError("Invalid root folder", details={"root": root})

    # /some/path/ => /some/path, /root/some/../../other => /root/other
    return os.path.realpath(os.path.normpath(root))


class PathResolver:
    """Map virtual ids onto an absolute, canonical host root and back."""

    def __init__(self, root: str) -> None:
        self._root = validate_root(root)

    @property
    def root(self) -> str:
        return self._root

    def to_host(self, virtual_id: str) -> str:
        """
        Join the id onto the root and normalise.

        The result may lie outside the root for ids like "../../etc";
        ForceRootPolicy rejects those before any filesystem access.

        Raises:
            InvalidArgumentError: if the id contains a NUL byte.
        """
        if "\0" in virtual_id:
            raise InvalidArgumentError("Invalid id: embedded NUL byte")
        relative = virtual_id.replace("/", os.sep).lstrip("/\\")
        return os.path.normpath(os.path.join(self._root, relative))

    def to_id(self, host_path: str) -> str:
        """
        Strip the root prefix and convert separators to "/".

        Raises:
            AccessDeniedError: if host_path is not the root or under it.
        """
        path = os.path.normpath(host_path)
        if path == self._root:
            return "/"

        prefix = self._root if self._root.endswith(os.sep) else self._root + os.sep
        if not path.startswith(prefix):
            raise AccessDeniedError("Access Denied", details={"reason": "outside root"})

        relative = path[len(prefix):]
        return "/" + relative.replace(os.sep, "/")
