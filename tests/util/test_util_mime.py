import unittest

from gdrivefs.util.mime import (
    DEFAULT_FILE_MIME,
    FOLDER_MIME,
    is_folder,
    mime_type_for_extension,
)


class TestUtilMime(unittest.TestCase):
    def test_is_folder(self) -> None:
        self.assertTrue(is_folder(FOLDER_MIME))
        self.assertFalse(is_folder("text/plain"))
        self.assertFalse(is_folder("application/vnd.google-apps.document"))
        self.assertFalse(is_folder(None))

    def test_known_extensions(self) -> None:
        self.assertEqual(mime_type_for_extension(".txt"), "text/plain")
        self.assertEqual(mime_type_for_extension(".pdf"), "application/pdf")
        self.assertEqual(mime_type_for_extension(".PNG"), "image/png")
        self.assertEqual(mime_type_for_extension("html"), "text/html")

    def test_missing_or_unknown_extension_uses_default(self) -> None:
        self.assertEqual(mime_type_for_extension(None), DEFAULT_FILE_MIME)
        self.assertEqual(mime_type_for_extension(""), DEFAULT_FILE_MIME)
        self.assertEqual(mime_type_for_extension(".nosuchext"), DEFAULT_FILE_MIME)
        self.assertEqual(
            mime_type_for_extension(".nosuchext", default="application/octet-stream"),
            "application/octet-stream",
        )


if __name__ == "__main__":
    unittest.main()
