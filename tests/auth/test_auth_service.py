import unittest
from unittest.mock import Mock, patch

from gdrivefs.auth import AuthInfo, build_drive_service
from gdrivefs.errors import AuthError


class TestBuildDriveService(unittest.TestCase):
    def test_api_key_service_sends_developer_key(self) -> None:
        service = Mock()
        with patch("googleapiclient.discovery.build", return_value=service) as build:
            result = build_drive_service(AuthInfo.from_api_key("KEY", "my-app"))

        self.assertIs(result, service)
        args, kwargs = build.call_args
        self.assertEqual(args, ("drive", "v3"))
        self.assertEqual(kwargs["developerKey"], "KEY")
        self.assertFalse(kwargs["cache_discovery"])
        self.assertIn("http", kwargs)

    def test_oauth_service_wraps_transport_with_credentials(self) -> None:
        from google_auth_httplib2 import AuthorizedHttp

        info = AuthInfo(
            kind="oauth",
            data={"client_secrets_file": "cs.json", "token_file": "token.json"},
        )
        creds = Mock()
        with patch(
            "gdrivefs.auth.service.OAuthClient.get_credentials", return_value=creds
        ) as get_credentials, patch("googleapiclient.discovery.build") as build:
            build_drive_service(info, scopes=["scope-a"])

        get_credentials.assert_called_once_with(["scope-a"], ensure_valid=True)
        kwargs = build.call_args.kwargs
        self.assertNotIn("developerKey", kwargs)
        self.assertIsInstance(kwargs["http"], AuthorizedHttp)
        self.assertIs(kwargs["http"].credentials, creds)

    def test_build_failure_maps_to_auth_error(self) -> None:
        with patch("googleapiclient.discovery.build", side_effect=RuntimeError("boom")):
            with self.assertRaises(AuthError):
                build_drive_service(AuthInfo.from_api_key("KEY", "my-app"))


if __name__ == "__main__":
    unittest.main()
