"""File-system links: a path plus an optional resolved info snapshot."""

from __future__ import annotations

import posixpath
from typing import Optional

from gdrivefs.util.guard import argument_not_empty, argument_not_none

from .info import FileLinkInfo, StructureLinkInfo


class FileSystemStructureLink:
    """
    Handle for a file or directory path.

    Notes:
        - `info` is None for entries that do not exist (yet).
        - `parent` is optional; when absent, the parent path is derived
          from `full_name` and the parent carries no resolved identity.
        - The empty path denotes the root directory.
    """

    is_directory: bool = False

    def __init__(
        self,
        full_name: str,
        info: Optional[StructureLinkInfo] = None,
        parent: Optional["DirectoryLink"] = None,
    ) -> None:
        argument_not_none(full_name, "full_name")
        self._full_name = full_name
        self._info = info
        self._parent = parent

    @property
    def full_name(self) -> str:
        return self._full_name

    @property
    def name(self) -> str:
        return self._full_name.rsplit("/", 1)[-1]

    @property
    def info(self) -> Optional[StructureLinkInfo]:
        return self._info

    @property
    def parent(self) -> Optional["DirectoryLink"]:
        return self._parent

    @property
    def parent_full_name(self) -> Optional[str]:
        if self._parent is not None:
            return self._parent.full_name
        if "/" not in self._full_name:
            return None
        return self._full_name.rsplit("/", 1)[0] or None

    @property
    def exists(self) -> bool:
        return self._info is not None and self._info.exists

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._full_name!r}, exists={self.exists})"


class FileLink(FileSystemStructureLink):
    """Link to a file."""

    def __init__(
        self,
        full_name: str,
        info: Optional[FileLinkInfo] = None,
        parent: Optional["DirectoryLink"] = None,
    ) -> None:
        argument_not_empty(full_name, "full_name")
        super().__init__(full_name, info, parent)

    @property
    def info(self) -> Optional[FileLinkInfo]:
        return self._info  # type: ignore[return-value]

    @property
    def extension(self) -> Optional[str]:
        ext = posixpath.splitext(self.name)[1]
        return ext or None


class DirectoryLink(FileSystemStructureLink):
    """Link to a directory."""

    is_directory = True

    @classmethod
    def root(cls) -> "DirectoryLink":
        return cls("")

    @property
    def is_root(self) -> bool:
        return self._full_name == ""
