"""Link-info contract shared by all file-system backends."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol, runtime_checkable


class HashAlgorithm(str, enum.Enum):
    MD5 = "md5"


@dataclass(frozen=True)
class FileHash:
    """Content hash reported by a backend."""

    algorithm: HashAlgorithm
    value: str


@runtime_checkable
class StructureLinkInfo(Protocol):
    """Immutable snapshot describing a file or directory."""

    @property
    def full_name(self) -> str: ...

    @property
    def exists(self) -> bool: ...

    @property
    def is_directory(self) -> bool: ...

    @property
    def creation_time(self) -> Optional[datetime]: ...

    @property
    def last_write_time(self) -> Optional[datetime]: ...

    @property
    def is_hidden(self) -> bool: ...

    @property
    def is_read_only(self) -> bool: ...


@runtime_checkable
class FileLinkInfo(StructureLinkInfo, Protocol):
    """Snapshot of a file, adding content hash and size."""

    @property
    def hash(self) -> Optional[FileHash]: ...

    @property
    def length(self) -> int: ...

    @property
    def content_path(self) -> Optional[str]: ...
