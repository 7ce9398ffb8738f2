"""Public model exports for gdrivefs."""

from __future__ import annotations

from .link_info import DirectoryInfo, FileInfo, LinkInfo, link_info_from_node
from .remote_node import RemoteNode

__all__ = [
    "RemoteNode",
    "FileInfo",
    "DirectoryInfo",
    "LinkInfo",
    "link_info_from_node",
]
