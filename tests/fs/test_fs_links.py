import unittest

from gdrivefs.errors import InvalidArgumentError
from gdrivefs.fs import DirectoryLink, FileLink, ListingOptions


class TestFileLink(unittest.TestCase):
    def test_name_and_extension(self) -> None:
        link = FileLink("A/B/report.final.pdf")
        self.assertEqual(link.name, "report.final.pdf")
        self.assertEqual(link.extension, ".pdf")
        self.assertIsNone(FileLink("A/README").extension)

    def test_parent_full_name_from_path(self) -> None:
        self.assertEqual(FileLink("A/B/c.txt").parent_full_name, "A/B")
        self.assertIsNone(FileLink("c.txt").parent_full_name)

    def test_parent_link_wins_over_path(self) -> None:
        parent = DirectoryLink("X")
        self.assertEqual(FileLink("A/c.txt", None, parent).parent_full_name, "X")

    def test_without_info_does_not_exist(self) -> None:
        link = FileLink("c.txt")
        self.assertFalse(link.exists)
        self.assertFalse(link.is_directory)

    def test_empty_path_is_rejected(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            FileLink("")
        with self.assertRaises(InvalidArgumentError):
            FileLink(None)  # type: ignore[arg-type]


class TestDirectoryLink(unittest.TestCase):
    def test_root(self) -> None:
        root = DirectoryLink.root()
        self.assertTrue(root.is_root)
        self.assertTrue(root.is_directory)
        self.assertEqual(root.full_name, "")
        self.assertIsNone(root.parent_full_name)

    def test_nested(self) -> None:
        link = DirectoryLink("A/B")
        self.assertFalse(link.is_root)
        self.assertEqual(link.name, "B")
        self.assertEqual(link.parent_full_name, "A")
        self.assertIn("A/B", repr(link))


class TestListingOptions(unittest.TestCase):
    def test_defaults(self) -> None:
        options = ListingOptions()
        self.assertTrue(options.search_for_files)
        self.assertTrue(options.search_for_directories)
        self.assertFalse(options.has_search_pattern)
        self.assertTrue(ListingOptions(search_pattern="*.txt").has_search_pattern)


if __name__ == "__main__":
    unittest.main()
