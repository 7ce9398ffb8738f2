"""Argument validation helpers."""

from __future__ import annotations

from typing import Any

from gdrivefs.errors import InvalidArgumentError


def _describe(value: Any) -> str:
    if value is None:
        return "None"
    if value == "":
        return "empty string"
    return repr(value)


def argument_not_none(value: Any, name: str) -> None:
    if value is None:
        raise InvalidArgumentError(
            f"'{name}' must not be None",
            details={"argument": name},
        )


def argument_not_empty(value: Any, name: str) -> None:
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError(
            f"{_describe(value)} is not a valid value for '{name}'",
            details={"argument": name},
        )


def argument_not_blank(value: Any, name: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(
            f"{_describe(value)} is not a valid value for '{name}'",
            details={"argument": name},
        )
