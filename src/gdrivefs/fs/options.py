"""Listing options and metadata requests."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class ListingOptions:
    """
    What to include when listing a directory.

    Notes:
        - When both `search_for_files` and `search_for_directories` are
          False, no kind filter is applied.
    """

    search_for_files: bool = True
    search_for_directories: bool = True
    search_pattern: Optional[str] = None

    @property
    def has_search_pattern(self) -> bool:
        return bool(self.search_pattern)


@dataclass(frozen=True)
class LinkMetadata:
    """Requested metadata changes; None means "leave unchanged"."""

    is_hidden: Optional[bool] = None
    is_read_only: Optional[bool] = None
    last_write_time: Optional[datetime] = None
