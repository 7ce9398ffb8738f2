"""gdrivefs public API."""

from __future__ import annotations

from gdrivefs.auth import AuthInfo, OAuthClient
from gdrivefs.config import DriveFsConfig
from gdrivefs.errors import (
    AmbiguousPathError,
    ApiError,
    AuthError,
    ConflictError,
    DirectoryNotEmptyError,
    GDriveFsError,
    HttpErrorInfo,
    InvalidArgumentError,
    MissingIdentityError,
    NetworkError,
    NotFoundError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    ResolutionError,
    map_http_error,
)
from gdrivefs.factory import create_file_system, create_file_system_from_auth_info
from gdrivefs.fs import (
    DirectoryLink,
    FileHash,
    FileLink,
    FileSystem,
    HashAlgorithm,
    LinkMetadata,
    ListingOptions,
)
from gdrivefs.models import DirectoryInfo, FileInfo, RemoteNode
from gdrivefs.operations import GoogleDriveFileSystemOperations

__all__ = [
    # High-level
    "create_file_system",
    "create_file_system_from_auth_info",
    "FileSystem",
    "GoogleDriveFileSystemOperations",
    "DriveFsConfig",
    # Auth
    "AuthInfo",
    "OAuthClient",
    # Links / Models
    "FileLink",
    "DirectoryLink",
    "ListingOptions",
    "LinkMetadata",
    "FileHash",
    "HashAlgorithm",
    "FileInfo",
    "DirectoryInfo",
    "RemoteNode",
    # Errors
    "GDriveFsError",
    "InvalidArgumentError",
    "AmbiguousPathError",
    "MissingIdentityError",
    "DirectoryNotEmptyError",
    "ResolutionError",
    "AuthError",
    "PermissionError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "QuotaExceededError",
    "NetworkError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]
