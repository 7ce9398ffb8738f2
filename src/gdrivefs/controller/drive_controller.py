"""Google Drive API controller (internal use only)."""

from __future__ import annotations

import functools
import io
import json
import logging
import threading
from typing import Any, BinaryIO, Callable, Optional, Sequence, TypeVar

from gdrivefs.auth import AuthInfo, build_drive_service
from gdrivefs.errors import (
    ApiError,
    GDriveFsError,
    HttpErrorInfo,
    NetworkError,
    map_http_error,
)
from gdrivefs.models import RemoteNode
from gdrivefs.util.query import Query
from gdrivefs.util.time import parse_rfc3339_or_none

from .fields import FILE_FIELDS, ID_ONLY_LIST_FIELDS, LIST_FIELDS

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _serialized(method: Callable[..., T]) -> Callable[..., T]:
    """Run a public controller method while holding the controller lock."""

    @functools.wraps(method)
    def wrapper(self: "DriveController", *args: Any, **kwargs: Any) -> T:
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper


class DriveController:
    """
    Drive API controller (internal only).

    Notes:
        - The Drive `service` object is NOT exposed.
        - `supports_all_drives` is applied to all requests consistently.
        - Every request asks for the same field set (see `fields.py`).
        - Errors are mapped to gdrivefs exceptions; nothing is retried.
        - The service wraps a single httplib2 transport, which is not
          thread-safe. Public methods hold `_lock`, so callers on executor
          threads issue one request at a time.
    """

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        scopes: Optional[Sequence[str]] = None,
        supports_all_drives: bool = True,
        page_size: int = 100,
    ) -> None:
        self._supports_all_drives = supports_all_drives
        self._lock = threading.RLock()
        self._page_size = page_size
        self._service = build_drive_service(auth_info, scopes)

    @classmethod
    def from_service(
        cls,
        service: Any,
        *,
        supports_all_drives: bool = True,
        page_size: int = 100,
    ) -> "DriveController":
        """Create controller from a pre-built Drive service (useful for tests)."""
        obj = cls.__new__(cls)
        obj._supports_all_drives = supports_all_drives
        obj._lock = threading.RLock()
        obj._page_size = page_size
        obj._service = service
        return obj

    # ----------------------------
    # Public API
    # ----------------------------
    @_serialized
    def find(self, query: Query) -> list[RemoteNode]:
        """Return every item matching `query`, following page tokens to the end."""
        all_nodes: list[RemoteNode] = []
        page_token: Optional[str] = None

        while True:
            nodes, page_token = self.find_page(query, page_token=page_token)
            all_nodes.extend(nodes)
            if not page_token:
                break

        return all_nodes

    @_serialized
    def find_page(
        self,
        query: Query,
        *,
        page_token: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> tuple[list[RemoteNode], Optional[str]]:
        """Return one page of items matching `query` and the next page token."""
        data = self._list(
            query,
            fields=LIST_FIELDS,
            page_token=page_token,
            page_size=page_size or self._page_size,
        )
        nodes = [_to_node(f) for f in _files_of(data)]
        return nodes, data.get("nextPageToken") or None

    @_serialized
    def exists_any(self, query: Query) -> bool:
        """Return True if at least one item matches `query`."""
        data = self._list(query, fields=ID_ONLY_LIST_FIELDS, page_token=None, page_size=1)
        return bool(_files_of(data))

    @_serialized
    def create(
        self,
        name: str,
        mime_type: str,
        *,
        parent_id: Optional[str] = None,
        stream: Optional[BinaryIO] = None,
    ) -> RemoteNode:
        """Create a file or folder; without `parent_id` it lands in My Drive root."""
        body: dict[str, Any] = {"name": name, "mimeType": mime_type}
        if parent_id:
            body["parents"] = [parent_id]

        kwargs: dict[str, Any] = {}
        if stream is not None:
            kwargs["media_body"] = _media_upload(stream, mime_type)

        logger.debug("files.create name=%r parent=%s mime=%s", name, parent_id, mime_type)
        req = self._service.files().create(
            body=body,
            fields=FILE_FIELDS,
            **kwargs,
            **self._common_write_kwargs(),
        )
        data = self._execute(req.execute)
        return _to_node(data)

    @_serialized
    def update(
        self,
        file_id: str,
        *,
        name: Optional[str] = None,
        mime_type: Optional[str] = None,
        stream: Optional[BinaryIO] = None,
        add_parents: Optional[str] = None,
        remove_parents: Optional[str] = None,
    ) -> RemoteNode:
        """
        Update metadata and/or content of an existing item in one request.

        Only the given arguments are sent; parent changes use the
        `addParents` / `removeParents` query parameters.
        """
        body: dict[str, Any] = {}
        if name is not None:
            body["name"] = name
        if mime_type is not None:
            body["mimeType"] = mime_type

        kwargs: dict[str, Any] = {}
        if stream is not None:
            kwargs["media_body"] = _media_upload(stream, mime_type)
        if add_parents:
            kwargs["addParents"] = add_parents
        if remove_parents:
            kwargs["removeParents"] = remove_parents

        logger.debug(
            "files.update %s body=%s add=%s remove=%s media=%s",
            file_id,
            body,
            add_parents,
            remove_parents,
            stream is not None,
        )
        req = self._service.files().update(
            fileId=file_id,
            body=body,
            fields=FILE_FIELDS,
            **kwargs,
            **self._common_write_kwargs(),
        )
        data = self._execute(req.execute)
        return _to_node(data)

    @_serialized
    def delete(self, file_id: str) -> None:
        """Permanently delete an item. Deleting a folder deletes its contents."""
        logger.debug("files.delete %s", file_id)
        req = self._service.files().delete(
            fileId=file_id,
            **self._common_write_kwargs(),
        )
        self._execute(req.execute)

    @_serialized
    def download(self, file_id: str) -> io.BytesIO:
        """Download file content into memory; the buffer is rewound."""
        from googleapiclient.http import MediaIoBaseDownload

        logger.debug("files.get_media %s", file_id)
        req = self._service.files().get_media(
            fileId=file_id,
            **self._common_get_kwargs(),
        )

        buffer = io.BytesIO()
        downloader = MediaIoBaseDownload(buffer, req)
        done = False
        while not done:
            _, done = self._execute(downloader.next_chunk)

        buffer.seek(0)
        return buffer

    # ----------------------------
    # Internals
    # ----------------------------
    def _common_get_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True}

    def _common_list_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True, "includeItemsFromAllDrives": True}

    def _common_write_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True}

    def _list(
        self,
        query: Query,
        *,
        fields: str,
        page_token: Optional[str],
        page_size: int,
    ) -> dict[str, Any]:
        kwargs: dict[str, Any] = dict(self._common_list_kwargs())
        if query:
            kwargs["q"] = str(query)
        if page_token:
            kwargs["pageToken"] = page_token

        logger.debug("files.list q=%r page_token=%s", kwargs.get("q"), page_token)
        req = self._service.files().list(
            fields=fields,
            pageSize=page_size,
            **kwargs,
        )
        return self._execute(req.execute)

    def _execute(self, func: Callable[[], T]) -> T:
        try:
            return func()
        except GDriveFsError:
            raise
        except Exception as exc:
            raise self._map_exception(exc) from exc

    def _map_exception(self, exc: Exception) -> GDriveFsError:
        from googleapiclient.errors import HttpError

        if isinstance(exc, HttpError):
            info = _http_error_to_info(exc)
            return map_http_error(info, cause=exc)

        if isinstance(exc, (OSError, TimeoutError)):
            return NetworkError("Network error", cause=exc)

        return ApiError("Drive API error", cause=exc)


def _media_upload(stream: BinaryIO, mime_type: Optional[str]):
    from googleapiclient.http import MediaIoBaseUpload

    return MediaIoBaseUpload(
        stream,
        mimetype=mime_type or "application/octet-stream",
        resumable=True,
    )


def _is_read_only(restrictions: Any) -> bool:
    if not isinstance(restrictions, list):
        return False
    return any(isinstance(r, dict) and r.get("readOnly") is True for r in restrictions)


def _files_of(data: Any) -> list[Any]:
    if not isinstance(data, dict):
        raise ApiError("Unexpected files.list response", details={"payload": repr(data)[:200]})
    files = data.get("files") or []
    if not isinstance(files, list):
        raise ApiError("Unexpected files.list response", details={"files": repr(files)[:200]})
    return files


def _to_node(data: Any) -> RemoteNode:
    if not isinstance(data, dict):
        raise ApiError("Unexpected file resource in response", details={"item": repr(data)[:200]})
    return _file_dict_to_node(data)


def _file_dict_to_node(data: dict[str, Any]) -> RemoteNode:
    file_id = data.get("id")
    name = data.get("name", "")
    mime_type = data.get("mimeType", "")
    kind = data.get("kind")
    parents = data.get("parents", []) or []

    size = None
    if isinstance(data.get("size"), str) and data["size"].isdigit():
        size = int(data["size"])
    elif isinstance(data.get("size"), int):
        size = data["size"]

    md5 = data.get("md5Checksum")

    return RemoteNode(
        id=file_id if isinstance(file_id, str) else "",
        name=name if isinstance(name, str) else "",
        mime_type=mime_type if isinstance(mime_type, str) else "",
        kind=kind if isinstance(kind, str) else None,
        parents=list(parents) if isinstance(parents, list) else [],
        created_time=parse_rfc3339_or_none(data.get("createdTime")),
        modified_time=parse_rfc3339_or_none(data.get("modifiedTime")),
        md5_checksum=md5 if isinstance(md5, str) else None,
        size=size,
        read_only=_is_read_only(data.get("contentRestrictions")),
    )


def _http_error_to_info(exc: Any) -> HttpErrorInfo:
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)

    message = None
    details: dict[str, Any] = {}

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        try:
            payload = json.loads(content.decode("utf-8"))
        except ValueError:
            payload = None
        err = payload.get("error", {}) if isinstance(payload, dict) else {}
        if isinstance(err, dict):
            message = err.get("message") or None
            errors = err.get("errors") or []
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                details["domain"] = errors[0].get("domain")
                details["reason_detail"] = errors[0].get("reason")
                if isinstance(errors[0].get("reason"), str):
                    reason = errors[0]["reason"]

    if not isinstance(status_code, int):
        status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message,
        details=details or None,
    )
