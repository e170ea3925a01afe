"""Data model for drive entries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from localdrive.util.filetypes import is_folder
from localdrive.util.time import to_rfc3339


@dataclass(slots=True)
class Entry:
    """
    Metadata record for a file or folder returned by listing/info.

    Notes:
        - id is the virtual id (root-relative, "/"-separated), never a host path.
        - children is only set for folders in a nested listing.
        - Built fresh on every call; reflects the filesystem at that instant.
    """

    name: str
    id: str
    size: int
    modified_at: datetime
    kind: str

    children: Optional[list[Entry]] = None

    @property
    def is_folder(self) -> bool:
        return is_folder(self.kind)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping (children included when present)."""
        data: dict[str, Any] = {
            "name": self.name,
            "id": self.id,
            "size": self.size,
            "modified_at": to_rfc3339(self.modified_at),
            "kind": self.kind,
        }
        if self.children is not None:
            data["children"] = [child.to_dict() for child in self.children]
        return data
