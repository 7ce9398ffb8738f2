"""Runtime options for the Drive file-system adapter."""

from __future__ import annotations

from dataclasses import dataclass

from gdrivefs.auth.service import DEFAULT_SCOPES
from gdrivefs.util.mime import DEFAULT_FILE_MIME


@dataclass(frozen=True)
class DriveFsConfig:
    """
    Options applied to every Drive request.

    Attributes:
        supports_all_drives: Send `supportsAllDrives` (and
            `includeItemsFromAllDrives` on list calls) so shared drives work.
        page_size: Page size requested from `files.list`.
        include_trashed: When False, list queries add `trashed = false`.
        mask_resolution_errors: When True, API errors during path resolution
            are reported as "not found" (None). When False they raise
            ResolutionError.
        default_mime_type: MIME type for new files with an unknown extension.
        scopes: OAuth scopes used when building the service from AuthInfo.
    """

    supports_all_drives: bool = True
    page_size: int = 100
    include_trashed: bool = False
    mask_resolution_errors: bool = True
    default_mime_type: str = DEFAULT_FILE_MIME
    scopes: tuple[str, ...] = DEFAULT_SCOPES

    def __post_init__(self) -> None:
        if not isinstance(self.page_size, int) or not 1 <= self.page_size <= 1000:
            raise ValueError("DriveFsConfig.page_size must be an int in [1, 1000]")
        if not isinstance(self.default_mime_type, str) or not self.default_mime_type.strip():
            raise ValueError("DriveFsConfig.default_mime_type must be a non-empty string")
        if not self.scopes or not all(isinstance(s, str) and s.strip() for s in self.scopes):
            raise ValueError("DriveFsConfig.scopes must be a non-empty sequence of strings")
