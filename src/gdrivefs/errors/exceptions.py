"""Errors raised by the Drive file-system adapter, and HTTP status mapping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class GDriveFsError(Exception):
    """
    Root of every error raised by gdrivefs.

    Attributes:
        details: Context for the failure, e.g. the path being resolved or
            the HTTP status and Drive reason code.
        cause: The lower-level exception (HttpError, OSError, ...) when the
            error was translated from one.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


# Caller errors and path-model errors


class InvalidArgumentError(GDriveFsError):
    """A None/blank argument, or a request Drive rejected with HTTP 400."""


class AmbiguousPathError(GDriveFsError):
    """Two or more items in one folder share the name of a path segment."""


class MissingIdentityError(GDriveFsError):
    """The link was never resolved to a Drive item, so there is no ID to act on."""


class DirectoryNotEmptyError(GDriveFsError, OSError):
    """Non-recursive delete of a folder that still has children."""


class ResolutionError(GDriveFsError):
    """Resolving a path hit an API or transport failure (raised only when unmasked)."""


# Drive API / transport errors


class AuthError(GDriveFsError):
    """Credentials are missing, expired or rejected (HTTP 401), or service setup failed."""


class PermissionError(GDriveFsError):
    """The caller may not read or change the item (HTTP 403)."""


class NotFoundError(GDriveFsError):
    """The Drive ID no longer refers to an item (HTTP 404)."""


class ConflictError(GDriveFsError):
    """Drive refused the change because the item changed underneath (HTTP 409/412)."""


class RateLimitError(GDriveFsError):
    """Too many requests (HTTP 429); surfaced to the caller without back-off."""


class QuotaExceededError(GDriveFsError):
    """HTTP 403 whose Drive reason names a usage or storage quota."""


class NetworkError(GDriveFsError):
    """The request never got an HTTP answer (socket error, timeout)."""


class ApiError(GDriveFsError):
    """Any other Drive failure: 5xx, unlisted 4xx, or a malformed response."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Status, Drive reason code and message pulled out of an HttpError."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


_STATUS_ERRORS: dict[int, type[GDriveFsError]] = {
    400: InvalidArgumentError,
    401: AuthError,
    403: PermissionError,
    404: NotFoundError,
    409: ConflictError,
    412: ConflictError,
    429: RateLimitError,
}

# Substrings of Drive `errors[].reason` values that turn a 403 into a quota error.
_QUOTA_REASON_KEYWORDS: tuple[str, ...] = (
    "quota",
    "rateLimitExceeded",
    "userRateLimitExceeded",
    "dailyLimitExceeded",
    "usageLimits",
    "storageQuotaExceeded",
)


def _is_quota_reason(reason: str | None) -> bool:
    if not reason:
        return False
    lowered = reason.lower()
    return any(key.lower() in lowered for key in _QUOTA_REASON_KEYWORDS)


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> GDriveFsError:
    """
    Translate a Drive HTTP failure into a gdrivefs error.

    The status picks the class from `_STATUS_ERRORS`; a 403 whose reason
    mentions a quota becomes QuotaExceededError, and unlisted statuses
    (including all 5xx) become ApiError. The Drive message is kept as the
    error text, and status/reason go into `details`.
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "reason": info.reason,
    }
    if info.details:
        details.update(info.details)

    message = info.message or f"HTTP error {info.status_code}"

    if info.status_code == 403 and _is_quota_reason(info.reason):
        error_cls: type[GDriveFsError] = QuotaExceededError
    else:
        error_cls = _STATUS_ERRORS.get(info.status_code, ApiError)
    return error_cls(message, details=details, cause=cause)
