"""Drive v3 service construction."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from gdrivefs.errors import AuthError

from .auth_info import AuthInfo
from .oauth_client import OAuthClient

logger = logging.getLogger(__name__)

DEFAULT_SCOPES: tuple[str, ...] = ("https://www.googleapis.com/auth/drive",)


def build_drive_service(
    auth_info: AuthInfo,
    scopes: Optional[Sequence[str]] = None,
):
    """
    Build a Drive API service resource.

    API-key auth sends the key with every request; OAuth auth wraps the
    transport with the user's credentials. The application name, when
    given, is sent as the User-Agent.

    Returns:
        googleapiclient.discovery.Resource
    """
    import httplib2
    from googleapiclient.discovery import build
    from googleapiclient.http import set_user_agent

    http = httplib2.Http()
    if auth_info.application_name:
        http = set_user_agent(http, auth_info.application_name)

    kwargs = {}
    if auth_info.kind == "api_key":
        kwargs["developerKey"] = auth_info.api_key
    else:
        from google_auth_httplib2 import AuthorizedHttp

        use_scopes = list(scopes) if scopes is not None else list(DEFAULT_SCOPES)
        creds = OAuthClient(auth_info).get_credentials(use_scopes, ensure_valid=True)
        http = AuthorizedHttp(creds, http=http)

    logger.debug("Building Drive v3 service (auth kind=%s)", auth_info.kind)
    try:
        return build("drive", "v3", http=http, cache_discovery=False, **kwargs)
    except Exception as exc:
        raise AuthError("Failed to build Drive service", cause=exc) from exc
