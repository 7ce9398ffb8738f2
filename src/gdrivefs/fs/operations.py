"""Backend contract implemented by file-system providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO, Optional

from .info import FileLinkInfo, StructureLinkInfo
from .links import DirectoryLink, FileLink, FileSystemStructureLink
from .options import LinkMetadata, ListingOptions


class MetadataSupport(ABC):
    """Which link metadata a backend can change independently."""

    @property
    @abstractmethod
    def supports_is_hidden_metadata(self) -> bool: ...

    @property
    @abstractmethod
    def supports_is_read_only_metadata(self) -> bool: ...

    @property
    @abstractmethod
    def supports_last_write_time_metadata(self) -> bool: ...


class FileSystemOperations(ABC):
    """
    Operations a backend provides to `FileSystem`.

    `get_link_info` is a synchronous lookup; every other operation is a
    coroutine that suspends only across remote I/O.
    """

    def correct_path(self, path: str) -> str:
        return path

    @abstractmethod
    def get_link_info(self, full_name: str) -> Optional[StructureLinkInfo]: ...

    @abstractmethod
    async def read_file(self, file: FileLink) -> BinaryIO: ...

    @abstractmethod
    async def write_file(
        self,
        file: FileLink,
        stream: BinaryIO,
        overwrite: bool,
    ) -> FileLinkInfo: ...

    @abstractmethod
    async def move_file(
        self,
        source: FileLink,
        destination: FileLink,
        overwrite: bool,
    ) -> FileLinkInfo: ...

    @abstractmethod
    async def delete_file(self, file: FileLink) -> None: ...

    @abstractmethod
    async def create_directory(self, directory: DirectoryLink) -> StructureLinkInfo: ...

    @abstractmethod
    async def move_directory(
        self,
        source: DirectoryLink,
        destination: DirectoryLink,
    ) -> StructureLinkInfo: ...

    @abstractmethod
    async def delete_directory(self, directory: DirectoryLink, recursive: bool) -> None: ...

    @abstractmethod
    async def get_links(
        self,
        directory: DirectoryLink,
        options: ListingOptions,
    ) -> list[StructureLinkInfo]: ...

    @abstractmethod
    async def update_metadata(
        self,
        link: FileSystemStructureLink,
        metadata: LinkMetadata,
    ) -> Optional[StructureLinkInfo]: ...
