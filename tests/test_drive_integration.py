import argparse
import asyncio
import os
import unittest
import uuid

from gdrivefs import AuthInfo, DirectoryNotEmptyError, create_file_system_from_auth_info
from gdrivefs.config import DriveFsConfig


DEFAULT_SCOPES = ("https://www.googleapis.com/auth/drive",)


def _env(name: str) -> str:
    value = os.environ.get(name, "").strip()
    if not value:
        raise unittest.SkipTest(f"Missing env var: {name}")
    return value


class TestGoogleDriveIntegration(unittest.TestCase):
    """
    Integration test with real Google Drive.

    Required env vars:
        - GDRIVEFS_CLIENT_SECRETS: path to OAuth client secrets json
        - GDRIVEFS_TOKEN_FILE: path to token json (will be created/updated)

    Optional:
        - GDRIVEFS_SCOPES: comma-separated scopes (default: full drive)

    Everything is created under a uniquely named top-level folder in My
    Drive and deleted recursively at the end.
    """

    @classmethod
    def setUpClass(cls) -> None:
        client_secrets = _env("GDRIVEFS_CLIENT_SECRETS")
        token_file = _env("GDRIVEFS_TOKEN_FILE")

        scopes_raw = os.environ.get("GDRIVEFS_SCOPES", "").strip()
        if scopes_raw:
            scopes = tuple(s.strip() for s in scopes_raw.split(",") if s.strip())
        else:
            scopes = DEFAULT_SCOPES

        auth_info = AuthInfo(
            kind="oauth",
            data={
                "client_secrets_file": client_secrets,
                "token_file": token_file,
            },
        )
        cls.fs = create_file_system_from_auth_info(
            auth_info,
            config=DriveFsConfig(scopes=scopes, mask_resolution_errors=False),
        )

    def test_round_trip_smoke(self) -> None:
        asyncio.run(self._round_trip())

    async def _round_trip(self) -> None:
        root = f"gdrivefs_it_{uuid.uuid4().hex[:8]}"
        fs = self.fs

        await fs.create_directory(root)
        try:
            # write -> read -> rename -> list
            written = await fs.write_file(f"{root}/hello.txt", b"hello from gdrivefs\n")
            self.assertEqual(written.info.length, 20)

            data = await fs.read_bytes(f"{root}/hello.txt")
            self.assertEqual(data, b"hello from gdrivefs\n")

            await fs.move_file(f"{root}/hello.txt", f"{root}/hello_renamed.txt")
            names = [link.full_name for link in await fs.get_links(root)]
            self.assertEqual(names, [f"{root}/hello_renamed.txt"])

            with self.assertRaises(DirectoryNotEmptyError):
                await fs.delete_directory(root)
        finally:
            await fs.delete_directory(root, recursive=True)

        self.assertIsNone(fs.get_link_info(root))


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose unittest output",
    )
    return parser.parse_args()


if __name__ == "__main__":
    args = _parse_args()
    unittest.main(verbosity=2 if args.verbose else 1)
