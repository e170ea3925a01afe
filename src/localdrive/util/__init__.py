from .filetypes import DEFAULT_FILE_TYPE, FOLDER, classify, is_folder
from .time import from_timestamp, normalize_dt, to_rfc3339

__all__ = [
    "FOLDER",
    "DEFAULT_FILE_TYPE",
    "classify",
    "is_folder",
    "from_timestamp",
    "to_rfc3339",
    "normalize_dt",
]
