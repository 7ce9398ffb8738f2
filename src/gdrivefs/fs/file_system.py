"""FileSystem: path-based facade over a FileSystemOperations backend."""

from __future__ import annotations

import io
from typing import BinaryIO, Optional, Union

from gdrivefs.errors import InvalidArgumentError
from gdrivefs.util.guard import argument_not_empty, argument_not_none

from .info import StructureLinkInfo
from .links import DirectoryLink, FileLink, FileSystemStructureLink
from .operations import FileSystemOperations
from .options import LinkMetadata, ListingOptions

FileLike = Union[FileLink, str]
DirectoryLike = Union[DirectoryLink, str]


class FileSystem:
    """
    Resolve paths into links and forward operations to the backend.

    Notes:
        - Links returned here carry the info snapshot observed at the time of
          the call; they are not refreshed when the remote side changes.
        - Parent links are resolved one level only (the parent's own parent
          is left unresolved).
    """

    def __init__(self, operations: FileSystemOperations) -> None:
        argument_not_none(operations, "operations")
        self._operations = operations

    @property
    def operations(self) -> FileSystemOperations:
        return self._operations

    # ----------------------------
    # Lookup
    # ----------------------------
    def get_link_info(self, path: str) -> Optional[StructureLinkInfo]:
        argument_not_empty(path, "path")
        return self._operations.get_link_info(self._operations.correct_path(path))

    def get_file(self, path: str) -> FileLink:
        argument_not_empty(path, "path")
        path = self._operations.correct_path(path)
        info = self._operations.get_link_info(path)
        if info is not None and info.is_directory:
            raise InvalidArgumentError("Path is a directory", details={"path": path})
        return FileLink(path, info, self._resolve_parent(path))  # type: ignore[arg-type]

    def get_directory(self, path: str) -> DirectoryLink:
        if not path:
            return DirectoryLink.root()
        path = self._operations.correct_path(path)
        info = self._operations.get_link_info(path)
        if info is not None and not info.is_directory:
            raise InvalidArgumentError("Path is a file", details={"path": path})
        return DirectoryLink(path, info, self._resolve_parent(path))

    # ----------------------------
    # Files
    # ----------------------------
    async def read_file(self, file: FileLike) -> BinaryIO:
        return await self._operations.read_file(self._as_file(file))

    async def read_bytes(self, file: FileLike) -> bytes:
        stream = await self.read_file(file)
        return stream.read()

    async def write_file(
        self,
        file: FileLike,
        content: Union[bytes, BinaryIO],
        *,
        overwrite: bool = True,
    ) -> FileLink:
        link = self._as_file(file)
        stream = io.BytesIO(content) if isinstance(content, (bytes, bytearray)) else content
        info = await self._operations.write_file(link, stream, overwrite)
        return FileLink(link.full_name, info, link.parent)

    async def move_file(
        self,
        source: FileLike,
        destination: FileLike,
        *,
        overwrite: bool = False,
    ) -> FileLink:
        dst = self._as_file(destination)
        info = await self._operations.move_file(self._as_file(source), dst, overwrite)
        return FileLink(dst.full_name, info, dst.parent)

    async def delete_file(self, file: FileLike) -> None:
        await self._operations.delete_file(self._as_file(file))

    # ----------------------------
    # Directories
    # ----------------------------
    async def create_directory(self, directory: DirectoryLike) -> DirectoryLink:
        link = self._as_directory(directory)
        if link.exists or link.is_root:
            return link
        info = await self._operations.create_directory(link)
        return DirectoryLink(link.full_name, info, link.parent)

    async def move_directory(
        self,
        source: DirectoryLike,
        destination: DirectoryLike,
    ) -> DirectoryLink:
        dst = self._as_directory(destination)
        info = await self._operations.move_directory(self._as_directory(source), dst)
        return DirectoryLink(dst.full_name, info, dst.parent)

    async def delete_directory(
        self,
        directory: DirectoryLike,
        *,
        recursive: bool = False,
    ) -> None:
        await self._operations.delete_directory(self._as_directory(directory), recursive)

    async def get_links(
        self,
        directory: Optional[DirectoryLike] = None,
        options: Optional[ListingOptions] = None,
    ) -> list[FileSystemStructureLink]:
        parent = self._as_directory(directory or "")
        infos = await self._operations.get_links(parent, options or ListingOptions())

        links: list[FileSystemStructureLink] = []
        for info in infos:
            if info.is_directory:
                links.append(DirectoryLink(info.full_name, info, parent))
            else:
                links.append(FileLink(info.full_name, info, parent))  # type: ignore[arg-type]
        return links

    async def update_metadata(
        self,
        link: FileSystemStructureLink,
        metadata: LinkMetadata,
    ) -> Optional[StructureLinkInfo]:
        return await self._operations.update_metadata(link, metadata)

    # ----------------------------
    # Internals
    # ----------------------------
    def _resolve_parent(self, path: str) -> Optional[DirectoryLink]:
        if "/" not in path:
            return None
        parent_path = path.rsplit("/", 1)[0]
        if not parent_path:
            return None
        return DirectoryLink(parent_path, self._operations.get_link_info(parent_path))

    def _as_file(self, file: FileLike) -> FileLink:
        if isinstance(file, FileLink):
            return file
        return self.get_file(file)

    def _as_directory(self, directory: DirectoryLike) -> DirectoryLink:
        if isinstance(directory, DirectoryLink):
            return directory
        return self.get_directory(directory)
