"""Path resolution over Drive's ID-addressed item graph."""

from __future__ import annotations

import logging
from typing import Optional

from gdrivefs.controller import DriveController
from gdrivefs.errors import AmbiguousPathError, GDriveFsError, ResolutionError
from gdrivefs.models import LinkInfo, RemoteNode, link_info_from_node
from gdrivefs.util.guard import argument_not_empty
from gdrivefs.util.query import Query

logger = logging.getLogger(__name__)


class PathResolver:
    """
    Resolve slash-delimited paths to Drive items, one segment at a time.

    Each segment costs one `files.list` call (more if Drive returns
    partial pages): the first segment is matched by name only, later
    segments by name and the previous segment's ID as parent.

    Notes:
        - Drive does not enforce unique names per folder. A segment with
          more than one match raises AmbiguousPathError and resolution stops.
        - With `mask_errors=True`, API/transport errors are logged and
          reported as "not found" (None), so an outage looks like absence.
          With `mask_errors=False` they raise ResolutionError.
    """

    def __init__(
        self,
        controller: DriveController,
        *,
        mask_errors: bool = True,
        include_trashed: bool = False,
    ) -> None:
        self._controller = controller
        self._mask_errors = mask_errors
        self._include_trashed = include_trashed

    def resolve(self, full_name: str) -> Optional[LinkInfo]:
        """Return the info for `full_name`, or None if any segment is missing."""
        argument_not_empty(full_name, "full_name")

        try:
            return self._walk(full_name)
        except AmbiguousPathError:
            raise
        except GDriveFsError as exc:
            if not self._mask_errors:
                raise ResolutionError(
                    "Failed to resolve path",
                    details={"path": full_name},
                    cause=exc,
                ) from exc
            logger.warning("Resolving %r failed, treating as not found: %s", full_name, exc)
            return None

    def _walk(self, full_name: str) -> Optional[LinkInfo]:
        parts = full_name.split("/")
        parent_id: Optional[str] = None

        for i, part in enumerate(parts):
            query = Query.name_equals(part)
            if parent_id is not None:
                query = query & Query.in_parents(parent_id)
            if not self._include_trashed:
                query = query & Query.not_trashed()

            nodes = self._first_matches(query)
            if not nodes:
                logger.debug("Path %r: segment %r not found", full_name, part)
                return None
            if len(nodes) > 1:
                raise AmbiguousPathError(
                    "More than one item matches path segment",
                    details={"path": full_name, "segment": part, "index": i},
                )

            node = nodes[0]
            if i == len(parts) - 1:
                return link_info_from_node(node, "/".join(parts[:-1]))
            parent_id = node.id

        return None

    def _first_matches(self, query: Query) -> list[RemoteNode]:
        """
        Collect up to two matches for `query`.

        Two are enough to detect ambiguity. Drive may return short or empty
        pages while a page token is set, so paging continues until two
        matches are seen or the token runs out.
        """
        nodes: list[RemoteNode] = []
        page_token: Optional[str] = None
        while True:
            page, page_token = self._controller.find_page(
                query, page_token=page_token, page_size=2
            )
            nodes.extend(page)
            if len(nodes) > 1 or not page_token:
                return nodes
