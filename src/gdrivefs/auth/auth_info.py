"""Authentication information for gdrivefs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

_REQUIRED_KEYS: dict[str, tuple[str, ...]] = {
    "api_key": ("api_key", "application_name"),
    "oauth": ("client_secrets_file", "token_file"),
}


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Authentication information.

    Supported kinds:
        kind = "api_key"
            data must include:
                - api_key
                - application_name
        kind = "oauth"
            data must include:
                - client_secrets_file
                - token_file
            and may include:
                - application_name
    """

    kind: str
    data: dict[str, Any]

    def __post_init__(self) -> None:
        if self.kind not in _REQUIRED_KEYS:
            raise ValueError("AuthInfo.kind must be 'api_key' or 'oauth'")

        if not isinstance(self.data, dict):
            raise TypeError("AuthInfo.data must be a dict")

        for key in _REQUIRED_KEYS[self.kind]:
            value = self.data.get(key)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"AuthInfo.data['{key}'] must be a non-empty string")

    @classmethod
    def from_api_key(cls, api_key: str, application_name: str) -> "AuthInfo":
        return cls(
            kind="api_key",
            data={"api_key": api_key, "application_name": application_name},
        )

    @property
    def api_key(self) -> str:
        """Drive API key (kind='api_key' only)."""
        return str(self.data["api_key"])

    @property
    def application_name(self) -> Optional[str]:
        """Application name sent as the HTTP user agent."""
        value = self.data.get("application_name")
        return str(value) if value else None

    @property
    def client_secrets_file(self) -> str:
        """Path to OAuth client secrets JSON."""
        return str(self.data["client_secrets_file"])

    @property
    def token_file(self) -> str:
        """Path to OAuth token JSON (authorized user)."""
        return str(self.data["token_file"])
