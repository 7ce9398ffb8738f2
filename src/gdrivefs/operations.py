"""GoogleDriveFileSystemOperations: file-system operations on Google Drive."""

from __future__ import annotations

import asyncio
import functools
import logging
from typing import Any, BinaryIO, Callable, Optional, TypeVar

from gdrivefs.auth import AuthInfo
from gdrivefs.config import DriveFsConfig
from gdrivefs.controller import DriveController
from gdrivefs.errors import DirectoryNotEmptyError, MissingIdentityError
from gdrivefs.fs import (
    DirectoryLink,
    FileLink,
    FileSystemOperations,
    FileSystemStructureLink,
    LinkMetadata,
    ListingOptions,
    MetadataSupport,
)
from gdrivefs.models import DirectoryInfo, FileInfo, LinkInfo, RemoteNode, link_info_from_node
from gdrivefs.models.link_info import drive_id_of, drive_parents_of
from gdrivefs.resolver import PathResolver
from gdrivefs.util.guard import argument_not_blank, argument_not_none
from gdrivefs.util.mime import FOLDER_MIME, mime_type_for_extension
from gdrivefs.util.query import Query

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Drive alias for the authenticated user's My Drive root folder.
ROOT_ALIAS = "root"


class GoogleDriveFileSystemOperations(FileSystemOperations, MetadataSupport):
    """
    File-system operations backed by the Drive v3 API.

    Links passed in carry the Drive identity discovered earlier (through
    `get_link_info` or a previous operation), so each operation needs at
    most the item ID and its parent's ID and never re-resolves a path.

    Blocking Drive calls run in the event loop's default executor; every
    operation except `get_link_info` is a coroutine. The controller lets
    one request at a time use its transport, so gathered operations queue
    instead of overlapping.
    """

    def __init__(
        self,
        api_key: str,
        application_name: str,
        *,
        config: Optional[DriveFsConfig] = None,
    ) -> None:
        argument_not_blank(api_key, "api_key")
        argument_not_blank(application_name, "application_name")

        use_config = config or DriveFsConfig()
        controller = DriveController(
            AuthInfo.from_api_key(api_key, application_name),
            supports_all_drives=use_config.supports_all_drives,
            page_size=use_config.page_size,
        )
        self._init(controller, use_config)

    @classmethod
    def from_auth_info(
        cls,
        auth_info: AuthInfo,
        *,
        config: Optional[DriveFsConfig] = None,
    ) -> "GoogleDriveFileSystemOperations":
        """Create operations from AuthInfo (e.g. OAuth user credentials)."""
        argument_not_none(auth_info, "auth_info")
        use_config = config or DriveFsConfig()
        controller = DriveController(
            auth_info,
            scopes=use_config.scopes,
            supports_all_drives=use_config.supports_all_drives,
            page_size=use_config.page_size,
        )
        return cls.from_controller(controller, config=use_config)

    @classmethod
    def from_controller(
        cls,
        controller: DriveController,
        *,
        config: Optional[DriveFsConfig] = None,
    ) -> "GoogleDriveFileSystemOperations":
        """Create operations with an injected controller (useful for tests)."""
        obj = cls.__new__(cls)
        obj._init(controller, config or DriveFsConfig())
        return obj

    def _init(self, controller: DriveController, config: DriveFsConfig) -> None:
        self._controller = controller
        self._config = config
        self._resolver = PathResolver(
            controller,
            mask_errors=config.mask_resolution_errors,
            include_trashed=config.include_trashed,
        )

    # ----------------------------
    # Metadata support
    # ----------------------------
    @property
    def supports_is_hidden_metadata(self) -> bool:
        return False

    @property
    def supports_is_read_only_metadata(self) -> bool:
        return False

    @property
    def supports_last_write_time_metadata(self) -> bool:
        return False

    # ----------------------------
    # Lookup
    # ----------------------------
    def get_link_info(self, full_name: str) -> Optional[LinkInfo]:
        return self._resolver.resolve(full_name)

    # ----------------------------
    # Files
    # ----------------------------
    async def read_file(self, file: FileLink) -> BinaryIO:
        argument_not_none(file, "file")
        file_id = _require_id(file)
        return await self._run(self._controller.download, file_id)

    async def write_file(
        self,
        file: FileLink,
        stream: BinaryIO,
        overwrite: bool = True,
    ) -> FileInfo:
        """
        Create or overwrite a file.

        A link without a Drive ID creates a new item under its parent (or
        the root when the parent has no ID). A link with an ID updates that
        item in place. `overwrite` is not checked separately.
        """
        argument_not_none(file, "file")
        argument_not_none(stream, "stream")

        mime_type = mime_type_for_extension(file.extension, self._config.default_mime_type)
        file_id = drive_id_of(file.info)

        if not file_id:
            node = await self._run(
                self._controller.create,
                file.name,
                mime_type,
                parent_id=_parent_id(file),
                stream=stream,
            )
        else:
            node = await self._run(
                self._controller.update,
                file_id,
                name=file.name,
                mime_type=mime_type,
                stream=stream,
            )

        return FileInfo.from_node(node, file.parent_full_name)

    async def move_file(
        self,
        source: FileLink,
        destination: FileLink,
        overwrite: bool = False,
    ) -> FileInfo:
        node = await self._move(source, destination)
        return FileInfo.from_node(node, destination.parent_full_name)

    async def delete_file(self, file: FileLink) -> None:
        argument_not_none(file, "file")
        file_id = _require_id(file)
        await self._run(self._controller.delete, file_id)

    # ----------------------------
    # Directories
    # ----------------------------
    async def create_directory(self, directory: DirectoryLink) -> DirectoryInfo:
        argument_not_none(directory, "directory")
        node = await self._run(
            self._controller.create,
            directory.name,
            FOLDER_MIME,
            parent_id=_parent_id(directory),
        )
        return DirectoryInfo.from_node(node, directory.parent_full_name)

    async def move_directory(
        self,
        source: DirectoryLink,
        destination: DirectoryLink,
    ) -> DirectoryInfo:
        node = await self._move(source, destination)
        return DirectoryInfo.from_node(node, destination.parent_full_name)

    async def delete_directory(self, directory: DirectoryLink, recursive: bool = False) -> None:
        """
        Delete a folder.

        Drive deletes folder contents along with the folder, so a
        non-recursive delete first checks for children and refuses when any
        exist.
        """
        argument_not_none(directory, "directory")
        directory_id = _require_id(directory)

        if not recursive:
            has_children = await self._run(
                self._controller.exists_any,
                self._children_query(directory_id),
            )
            if has_children:
                raise DirectoryNotEmptyError(
                    "Directory is not empty",
                    details={"path": directory.full_name},
                )

        await self._run(self._controller.delete, directory_id)

    async def get_links(
        self,
        directory: DirectoryLink,
        options: ListingOptions,
    ) -> list[LinkInfo]:
        """
        List the children of a directory (the root when it has no Drive ID).

        Notes:
            - The kind filter is applied server-side when options ask for
              only files or only directories.
            - `options.search_pattern` is not applied.
        """
        argument_not_none(directory, "directory")
        argument_not_none(options, "options")

        query = self._children_query(drive_id_of(directory.info) or ROOT_ALIAS)

        if options.has_search_pattern:
            logger.debug("Search pattern %r is not applied by Drive listing", options.search_pattern)

        if options.search_for_files != options.search_for_directories:
            if options.search_for_files:
                query = query & Query.mime_type_not_equals(FOLDER_MIME)
            else:
                query = query & Query.mime_type_equals(FOLDER_MIME)

        nodes = await self._run(self._controller.find, query)
        parent_full_name = directory.full_name
        return [link_info_from_node(node, parent_full_name) for node in nodes]

    async def update_metadata(
        self,
        link: FileSystemStructureLink,
        metadata: LinkMetadata,
    ) -> Optional[LinkInfo]:
        """Metadata is not settable on Drive; the current info is returned."""
        argument_not_none(link, "link")
        argument_not_none(metadata, "metadata")
        return link.info  # type: ignore[return-value]

    # ----------------------------
    # Internals
    # ----------------------------
    async def _move(
        self,
        source: FileSystemStructureLink,
        destination: FileSystemStructureLink,
    ) -> RemoteNode:
        argument_not_none(source, "source")
        argument_not_none(destination, "destination")
        file_id = _require_id(source)

        new_name = destination.name if source.name != destination.name else None

        add_parents: Optional[str] = None
        remove_parents: Optional[str] = None
        source_parent_id = _parent_id(source)
        destination_parent_id = _parent_id(destination)
        if source_parent_id != destination_parent_id:
            add_parents = destination_parent_id or ROOT_ALIAS
            if source_parent_id:
                remove_parents = source_parent_id
            else:
                old = [p for p in drive_parents_of(source.info) if p != add_parents]
                remove_parents = ",".join(old) or None

        return await self._run(
            self._controller.update,
            file_id,
            name=new_name,
            add_parents=add_parents,
            remove_parents=remove_parents,
        )

    def _children_query(self, parent_id: str) -> Query:
        query = Query.in_parents(parent_id)
        if not self._config.include_trashed:
            query = query & Query.not_trashed()
        return query

    async def _run(self, func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, functools.partial(func, *args, **kwargs))


def _require_id(link: FileSystemStructureLink) -> str:
    file_id = drive_id_of(link.info)
    if not file_id:
        raise MissingIdentityError(
            "Link has no Drive file ID",
            details={"path": link.full_name},
        )
    return file_id


def _parent_id(link: FileSystemStructureLink) -> Optional[str]:
    if link.parent is None:
        return None
    return drive_id_of(link.parent.info)
