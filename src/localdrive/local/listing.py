"""ListingEngine: directory walk, filtering and ordering of Entries."""

from __future__ import annotations

import os
from typing import Callable, Optional

from localdrive.controller import FileSystemController
from localdrive.models import Entry, ListConfig
from localdrive.util.filetypes import FOLDER, classify

from .resolver import PathResolver


def sort_key(entry: Entry) -> tuple[bool, str, str]:
    """Folders first, then case-insensitive name, then exact name."""
    return (not entry.is_folder, entry.name.upper(), entry.name)


class ListingEngine:
    """
    Build Entry records for a directory, optionally for its whole subtree.

    Traversal uses an explicit stack of pending directories, so deep trees
    do not hit the recursion limit. Errors raised while reading a directory
    (permission, vanished path) propagate to the caller.
    """

    def __init__(
        self,
        controller: FileSystemController,
        resolver: PathResolver,
        classify_name: Callable[[str], str] = classify,
    ) -> None:
        self._controller = controller
        self._resolver = resolver
        self._classify = classify_name

    def entry_for(self, host_path: str, name: Optional[str] = None) -> Entry:
        """Build the Entry for a single host path (lstat, no symlink follow)."""
        st = self._controller.stat(host_path)
        if name is None:
            name = os.path.basename(host_path)
        return Entry(
            name=name,
            id=self._resolver.to_id(host_path),
            size=st.size,
            modified_at=st.modified_at,
            kind=FOLDER if st.is_directory else self._classify(name),
        )

    def list(self, host_path: str, config: Optional[ListConfig] = None) -> list[Entry]:
        """
        List the children of host_path.

        Rules:
            - exclude drops an entry and prunes its subtree.
            - sub_folders descends into folders; nested attaches the subtree
              as children, otherwise descendants join the top-level sequence.
            - skip_files omits files, folders are still traversed.
            - include filters each entry after its subtree is built, so a
              nested folder is tested with its children set. In flat mode
              the descendants of a folder failing include are still listed.
            - every produced sequence is sorted folders first, then by name
              (case-insensitive). A flat result is sorted once, as a whole.
        """
        cfg = config or ListConfig()

        result: list[Entry] = []
        pending: list[tuple[str, list[Entry]]] = [(host_path, result)]
        # (sequence, candidates) per visited folder, parents before children
        frames: list[tuple[list[Entry], list[Entry]]] = []

        while pending:
            folder, target = pending.pop()
            candidates: list[Entry] = []
            frames.append((target, candidates))
            for name in self._controller.read_dir(folder):
                child_path = os.path.join(folder, name)
                entry = self.entry_for(child_path, name)

                if cfg.exclude is not None and cfg.exclude(entry):
                    continue

                if entry.is_folder:
                    if cfg.sub_folders:
                        if cfg.nested:
                            entry.children = []
                            pending.append((child_path, entry.children))
                        else:
                            pending.append((child_path, target))
                elif cfg.skip_files:
                    continue

                candidates.append(entry)

        for target, candidates in reversed(frames):
            target.extend(e for e in candidates if cfg.include is None or cfg.include(e))
            if cfg.nested:
                target.sort(key=sort_key)

        if not cfg.nested:
            result.sort(key=sort_key)
        return result
