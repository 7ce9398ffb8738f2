"""Data model for Drive items as returned by the API."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from gdrivefs.util.mime import is_folder


@dataclass(slots=True, frozen=True)
class RemoteNode:
    """
    A single Drive item (file or folder).

    Notes:
        - The folder MIME type is the only thing that distinguishes folders
          from files.
        - `md5_checksum` and `size` are only reported for binary files.
        - `read_only` is derived from the item's content restrictions.
    """

    id: str
    name: str
    mime_type: str

    kind: Optional[str] = None
    parents: list[str] = field(default_factory=list)
    created_time: Optional[datetime] = None
    modified_time: Optional[datetime] = None
    md5_checksum: Optional[str] = None
    size: Optional[int] = None
    read_only: bool = False

    @property
    def is_folder(self) -> bool:
        return is_folder(self.mime_type)
