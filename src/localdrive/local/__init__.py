"""Path resolution, naming and listing for localdrive."""

from __future__ import annotations

from .listing import ListingEngine, sort_key
from .naming import resolve_name, split_name
from .resolver import PathResolver, normalize_id, validate_root

__all__ = [
    "PathResolver",
    "normalize_id",
    "validate_root",
    "ListingEngine",
    "sort_key",
    "resolve_name",
    "split_name",
]
