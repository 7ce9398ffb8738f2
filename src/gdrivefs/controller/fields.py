"""Field definitions for Google Drive API responses."""

from __future__ import annotations

FILE_FIELDS: str = (
    "id,"
    "name,"
    "kind,"
    "parents,"
    "createdTime,"
    "modifiedTime,"
    "mimeType,"
    "md5Checksum,"
    "size,"
    "contentRestrictions"
)

LIST_FIELDS: str = f"nextPageToken,files({FILE_FIELDS})"

ID_ONLY_LIST_FIELDS: str = "files(id)"
