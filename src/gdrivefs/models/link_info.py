"""Link-info values built from Drive items."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Union

from gdrivefs.fs.info import FileHash, HashAlgorithm

from .remote_node import RemoteNode


def join_full_name(parent_full_name: Optional[str], name: str) -> str:
    if parent_full_name:
        return f"{parent_full_name}/{name}"
    return name


class _DriveLinkInfo:
    """Private base for infos that know their Drive file ID."""

    _node: RemoteNode

    @property
    def _drive_id(self) -> str:
        return self._node.id

    @property
    def _drive_parents(self) -> list[str]:
        return list(self._node.parents)

    @property
    def exists(self) -> bool:
        return True

    @property
    def is_hidden(self) -> bool:
        return False

    @property
    def creation_time(self) -> Optional[datetime]:
        return self._node.created_time

    @property
    def last_write_time(self) -> Optional[datetime]:
        return self._node.modified_time


@dataclass(frozen=True)
class FileInfo(_DriveLinkInfo):
    """Snapshot of a Drive file."""

    full_name: str
    _node: RemoteNode = field(repr=False, compare=False)

    @classmethod
    def from_node(cls, node: RemoteNode, parent_full_name: Optional[str]) -> "FileInfo":
        return cls(full_name=join_full_name(parent_full_name, node.name), _node=node)

    @property
    def is_directory(self) -> bool:
        return False

    @property
    def is_read_only(self) -> bool:
        return False

    @property
    def hash(self) -> Optional[FileHash]:
        if self._node.md5_checksum is None:
            return None
        return FileHash(HashAlgorithm.MD5, self._node.md5_checksum)

    @property
    def length(self) -> int:
        return self._node.size or 0

    @property
    def content_path(self) -> Optional[str]:
        return self._node.parents[0] if self._node.parents else None


@dataclass(frozen=True)
class DirectoryInfo(_DriveLinkInfo):
    """Snapshot of a Drive folder."""

    full_name: str
    _node: RemoteNode = field(repr=False, compare=False)

    @classmethod
    def from_node(cls, node: RemoteNode, parent_full_name: Optional[str]) -> "DirectoryInfo":
        return cls(full_name=join_full_name(parent_full_name, node.name), _node=node)

    @property
    def is_directory(self) -> bool:
        return True

    @property
    def is_read_only(self) -> bool:
        return self._node.read_only


LinkInfo = Union[FileInfo, DirectoryInfo]


def link_info_from_node(node: RemoteNode, parent_full_name: Optional[str]) -> LinkInfo:
    """Build a FileInfo or DirectoryInfo depending on the item's MIME type."""
    if node.is_folder:
        return DirectoryInfo.from_node(node, parent_full_name)
    return FileInfo.from_node(node, parent_full_name)


def drive_id_of(info: object) -> Optional[str]:
    """Return the Drive file ID behind an info value, or None for foreign infos."""
    if isinstance(info, _DriveLinkInfo):
        return info._drive_id or None
    return None


def drive_parents_of(info: object) -> list[str]:
    if isinstance(info, _DriveLinkInfo):
        return info._drive_parents
    return []
