"""Host filesystem controller (internal use only)."""

from __future__ import annotations

import errno
import os
import shutil
import stat as stat_mod
from dataclasses import dataclass
from datetime import datetime
from typing import BinaryIO, Callable, Optional, TypeVar, Union

from localdrive.errors import DriveIOError, NotFoundError, map_os_error
from localdrive.util.time import from_timestamp

T = TypeVar("T")

_COPY_BUFFER_SIZE = 1024 * 1024


@dataclass(frozen=True)
class FileStat:
    """Subset of lstat() results used by the drive."""

    is_directory: bool
    size: int
    modified_at: datetime


class FileSystemController:
    """
    Thin wrapper over os/shutil (internal only).

    Notes:
        - Paths are absolute host paths; authorization happens in LocalDrive.
        - Every OSError is mapped through map_os_error, so callers only see
          localdrive errors (NotFoundError, AccessDeniedError, DriveIOError).
        - Symlinks are never followed by stat().
    """

    # ----------------------------
    # Queries
    # ----------------------------
    def stat(self, path: str) -> FileStat:
        st = self._execute(lambda: os.lstat(path), path)
        return FileStat(
            is_directory=stat_mod.S_ISDIR(st.st_mode),
            size=st.st_size,
            modified_at=from_timestamp(st.st_mtime),
        )

    def read_dir(self, path: str) -> list[str]:
        names = self._execute(lambda: os.listdir(path), path)
        return [n for n in names if n not in (".", "..")]

    def path_exists(self, path: str) -> bool:
        return os.path.lexists(path)

    def is_dir(self, path: str) -> bool:
        """True if path is an existing directory (symlinks not followed)."""
        try:
            st = os.lstat(path)
        except (FileNotFoundError, NotADirectoryError):
            return False
        except OSError as exc:
            raise map_os_error(exc, path=path) from exc
        return stat_mod.S_ISDIR(st.st_mode)

    def realpath(self, path: str) -> str:
        """Canonical path. Raises NotFoundError if path is missing."""
        if not os.path.lexists(path):
            raise NotFoundError("Path does not exist", details={"path": path})
        return self._execute(lambda: os.path.realpath(path), path)

    def disk_usage(self, path: str) -> tuple[int, int]:
        """Return (used, free) bytes for the volume holding path."""
        usage = self._execute(lambda: shutil.disk_usage(path), path)
        return usage.used, usage.free

    # ----------------------------
    # Streams
    # ----------------------------
    def open_read(self, path: str) -> BinaryIO:
        return self._execute(lambda: open(path, "rb"), path)

    def write_stream(self, path: str, data: Union[bytes, BinaryIO]) -> None:
        """Write bytes or the remaining content of a binary stream to path."""

        def _write() -> None:
            with open(path, "wb") as out:
                if isinstance(data, (bytes, bytearray, memoryview)):
                    out.write(data)
                else:
                    shutil.copyfileobj(data, out, _COPY_BUFFER_SIZE)

        self._execute(_write, path)

    def create_file(self, path: str) -> None:
        """Create an empty file (truncates an existing one)."""
        self.write_stream(path, b"")

    # ----------------------------
    # Mutations
    # ----------------------------
    def ensure_dir(self, path: str) -> None:
        self._execute(lambda: os.makedirs(path, exist_ok=True), path)

    def copy(self, source: str, target: str) -> None:
        """Copy a file, or a folder recursively (symlinks copied as links)."""
        self._ensure_not_dir(target)
        if self.is_dir(source):
            self._execute(lambda: shutil.copytree(source, target, symlinks=True), source)
        else:
            self._execute(lambda: shutil.copy2(source, target, follow_symlinks=False), source)

    def move(self, source: str, target: str) -> None:
        """
        Move source to target.

        Across devices this is copy + delete; a failure in between is
        surfaced as-is (no rollback).
        """
        self._ensure_not_dir(target)
        self._execute(lambda: shutil.move(source, target), source)

    def remove(self, path: str) -> None:
        if not os.path.lexists(path):
            raise NotFoundError("Path does not exist", details={"path": path})
        if self.is_dir(path):
            self._execute(lambda: shutil.rmtree(path), path)
        else:
            self._execute(lambda: os.remove(path), path)

    # ----------------------------
    # Internals
    # ----------------------------
    def _ensure_not_dir(self, target: str) -> None:
        # shutil would silently nest the source inside an existing folder.
        if self.is_dir(target):
            raise DriveIOError(
                "Target folder already exists",
                details={"path": target, "errno": errno.EEXIST},
            )

    def _execute(self, func: Callable[[], T], path: Optional[str] = None) -> T:
        try:
            return func()
        except OSError as exc:
            raise map_os_error(exc, path=path) from exc
