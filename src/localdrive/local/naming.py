"""Collision-safe naming: pick a free "name(N).ext" inside a directory."""

from __future__ import annotations

import re
from collections.abc import Collection

_COUNTER_SUFFIX_RE = re.compile(r"\((\d+)\)$")


def split_name(name: str, is_folder: bool) -> tuple[str, str]:
    """
    Split a name into (stem, extension).

    Files: the extension starts at the first dot, so "archive.tar.gz" gives
    ("archive", ".tar.gz"). A leading dot (".env") belongs to the stem.
    Folders have no extension.
    """
    if is_folder:
        return name, ""
    dot = name.find(".", 1)
    if dot == -1:
        return name, ""
    return name[:dot], name[dot:]


def resolve_name(existing: Collection[str], desired: str, is_folder: bool) -> str:
    """
    Return a name that does not collide with any of existing.

    A free name is returned unchanged. Otherwise "(N)" is appended to the
    stem, starting after the stem's own "(N)" suffix if it has one, and the
    counter grows until the name is free.
    """
    if desired not in existing:
        return desired

    stem, ext = split_name(desired, is_folder)

    counter = 1
    match = _COUNTER_SUFFIX_RE.search(stem)
    if match:
        stem = stem[: match.start()]
        counter = int(match.group(1)) + 1

    while True:
        candidate = f"{stem}({counter}){ext}"
        if candidate not in existing:
            return candidate
        counter += 1
