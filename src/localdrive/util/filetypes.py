from __future__ import annotations

import os

FOLDER: str = "folder"
DEFAULT_FILE_TYPE: str = "file"

# Keyed by the last extension, lower-case, without the dot.
_TYPES_BY_EXTENSION: dict[str, str] = {
    # plain text
    "txt": "text",
    "md": "text",
    "log": "text",
    "csv": "text",
    "ini": "text",
    "cfg": "text",
    "rtf": "text",
    # source code / markup
    "py": "code",
    "js": "code",
    "ts": "code",
    "json": "code",
    "html": "code",
    "htm": "code",
    "css": "code",
    "xml": "code",
    "yml": "code",
    "yaml": "code",
    "toml": "code",
    "sh": "code",
    "c": "code",
    "h": "code",
    "cpp": "code",
    "java": "code",
    "go": "code",
    "rs": "code",
    "php": "code",
    "sql": "code",
    # images
    "jpg": "image",
    "jpeg": "image",
    "png": "image",
    "gif": "image",
    "bmp": "image",
    "svg": "image",
    "webp": "image",
    "ico": "image",
    "tif": "image",
    "tiff": "image",
    # video
    "mp4": "video",
    "avi": "video",
    "mov": "video",
    "mkv": "video",
    "webm": "video",
    "wmv": "video",
    # audio
    "mp3": "audio",
    "wav": "audio",
    "ogg": "audio",
    "flac": "audio",
    "aac": "audio",
    "m4a": "audio",
    # archives
    "zip": "archive",
    "rar": "archive",
    "7z": "archive",
    "tar": "archive",
    "gz": "archive",
    "bz2": "archive",
    "xz": "archive",
    # office documents
    "doc": "doc",
    "docx": "doc",
    "odt": "doc",
    "xls": "excel",
    "xlsx": "excel",
    "ods": "excel",
    "ppt": "pp",
    "pptx": "pp",
    "odp": "pp",
    "pdf": "pdf",
}


def classify(file_name: str) -> str:
    """
    Return the file-type tag for a file name.

    Lookup is keyed by the last extension (``app.css.gz`` -> ``gz``) and is
    case-insensitive. Unknown or missing extensions yield DEFAULT_FILE_TYPE.
    """
    _, ext = os.path.splitext(file_name)
    if not ext:
        return DEFAULT_FILE_TYPE
    return _TYPES_BY_EXTENSION.get(ext[1:].lower(), DEFAULT_FILE_TYPE)


def is_folder(kind: str) -> bool:
    return kind == FOLDER
