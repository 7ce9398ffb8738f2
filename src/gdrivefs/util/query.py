"""Builder for Drive API `q` search expressions."""

from __future__ import annotations

from dataclasses import dataclass


def quote(value: str) -> str:
    """Render a string literal for a Drive query, escaping `\\` and `'`."""
    if not isinstance(value, str):
        raise TypeError("query literal must be a string")
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


@dataclass(frozen=True)
class Query:
    """
    Conjunction of Drive search terms.

    Terms are combined with `&` and rendered with `str()`:

        q = Query.in_parents(folder_id) & Query.not_trashed()
        str(q)  # "'<id>' in parents and trashed = false"
    """

    terms: tuple[str, ...] = ()

    def __and__(self, other: "Query") -> "Query":
        if not isinstance(other, Query):
            return NotImplemented
        return Query(self.terms + other.terms)

    def __bool__(self) -> bool:
        return bool(self.terms)

    def __str__(self) -> str:
        return " and ".join(self.terms)

    @classmethod
    def all_of(cls, *queries: "Query") -> "Query":
        result = cls()
        for q in queries:
            result = result & q
        return result

    @classmethod
    def name_equals(cls, name: str) -> "Query":
        return cls((f"name = {quote(name)}",))

    @classmethod
    def in_parents(cls, parent_id: str) -> "Query":
        return cls((f"{quote(parent_id)} in parents",))

    @classmethod
    def mime_type_equals(cls, mime_type: str) -> "Query":
        return cls((f"mimeType = {quote(mime_type)}",))

    @classmethod
    def mime_type_not_equals(cls, mime_type: str) -> "Query":
        return cls((f"mimeType != {quote(mime_type)}",))

    @classmethod
    def not_trashed(cls) -> "Query":
        return cls(("trashed = false",))
