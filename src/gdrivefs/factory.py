"""Entry points returning a ready-to-use FileSystem over Google Drive."""

from __future__ import annotations

from typing import Optional

from gdrivefs.auth import AuthInfo
from gdrivefs.config import DriveFsConfig
from gdrivefs.fs import FileSystem
from gdrivefs.operations import GoogleDriveFileSystemOperations


def create_file_system(
    api_key: str,
    application_name: str,
    *,
    config: Optional[DriveFsConfig] = None,
) -> FileSystem:
    """
    Create a FileSystem backed by Drive, authenticated with an API key.

    Raises:
        InvalidArgumentError: if api_key or application_name is blank.
    """
    return FileSystem(
        GoogleDriveFileSystemOperations(api_key, application_name, config=config)
    )


def create_file_system_from_auth_info(
    auth_info: AuthInfo,
    *,
    config: Optional[DriveFsConfig] = None,
) -> FileSystem:
    """Create a FileSystem backed by Drive using AuthInfo (API key or OAuth)."""
    return FileSystem(GoogleDriveFileSystemOperations.from_auth_info(auth_info, config=config))
