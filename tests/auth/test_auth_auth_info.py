import unittest

from gdrivefs.auth import AuthInfo


class TestAuthInfo(unittest.TestCase):
    def test_auth_info_valid_oauth(self) -> None:
        info = AuthInfo(
            kind="oauth",
            data={
                "client_secrets_file": "/tmp/client_secrets.json",
                "token_file": "/tmp/token.json",
            },
        )
        self.assertEqual(info.kind, "oauth")
        self.assertEqual(info.token_file, "/tmp/token.json")
        self.assertIsNone(info.application_name)

    def test_auth_info_valid_api_key(self) -> None:
        info = AuthInfo.from_api_key("KEY", "my-app")
        self.assertEqual(info.kind, "api_key")
        self.assertEqual(info.api_key, "KEY")
        self.assertEqual(info.application_name, "my-app")

    def test_auth_info_invalid_kind(self) -> None:
        with self.assertRaises(ValueError):
            AuthInfo(kind="service_account", data={})

    def test_auth_info_missing_keys(self) -> None:
        with self.assertRaises(ValueError):
            AuthInfo(kind="oauth", data={"client_secrets_file": "x"})
        with self.assertRaises(ValueError):
            AuthInfo(kind="api_key", data={"api_key": "KEY"})

    def test_auth_info_blank_values(self) -> None:
        with self.assertRaises(ValueError):
            AuthInfo.from_api_key("  ", "my-app")

    def test_auth_info_data_must_be_dict(self) -> None:
        with self.assertRaises(TypeError):
            AuthInfo(kind="oauth", data=[])  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
