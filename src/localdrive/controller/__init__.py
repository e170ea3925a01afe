"""Internal controller exports for localdrive."""

from __future__ import annotations

from .fs_controller import FileStat, FileSystemController

__all__ = ["FileSystemController", "FileStat"]
