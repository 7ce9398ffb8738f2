"""Public auth exports for gdrivefs."""

from __future__ import annotations

from .auth_info import AuthInfo
from .oauth_client import OAuthClient
from .service import DEFAULT_SCOPES, build_drive_service

__all__ = ["AuthInfo", "OAuthClient", "DEFAULT_SCOPES", "build_drive_service"]
