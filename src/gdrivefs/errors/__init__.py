"""Public error exports for gdrivefs."""

from __future__ import annotations

from .exceptions import (
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

__all__ = [
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
