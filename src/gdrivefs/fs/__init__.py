"""Generic file-system contract used by gdrivefs."""

from __future__ import annotations

from .file_system import FileSystem
from .info import FileHash, FileLinkInfo, HashAlgorithm, StructureLinkInfo
from .links import DirectoryLink, FileLink, FileSystemStructureLink
from .operations import FileSystemOperations, MetadataSupport
from .options import LinkMetadata, ListingOptions

__all__ = [
    "FileSystem",
    "FileSystemOperations",
    "MetadataSupport",
    "FileSystemStructureLink",
    "FileLink",
    "DirectoryLink",
    "StructureLinkInfo",
    "FileLinkInfo",
    "FileHash",
    "HashAlgorithm",
    "ListingOptions",
    "LinkMetadata",
]
