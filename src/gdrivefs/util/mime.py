from __future__ import annotations

import mimetypes
from typing import Optional

FOLDER_MIME: str = "application/vnd.google-apps.folder"

DEFAULT_FILE_MIME: str = "text/plain"


def is_folder(mime_type: Optional[str]) -> bool:
    return mime_type == FOLDER_MIME


def mime_type_for_extension(
    extension: Optional[str],
    default: str = DEFAULT_FILE_MIME,
) -> str:
    """
    Look up the MIME type for a file extension such as ".pdf".

    Missing or unknown extensions map to `default`.
    """
    if not extension:
        return default

    ext = extension if extension.startswith(".") else f".{extension}"
    mime_type, _ = mimetypes.guess_type(f"file{ext.lower()}", strict=False)
    return mime_type or default
