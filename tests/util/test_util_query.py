import unittest

from gdrivefs.util.query import Query, quote


class TestQuote(unittest.TestCase):
    def test_plain_value(self) -> None:
        self.assertEqual(quote("report.txt"), "'report.txt'")

    def test_escapes_single_quote_and_backslash(self) -> None:
        self.assertEqual(quote("it's"), "'it\\'s'")
        self.assertEqual(quote("a\\b"), "'a\\\\b'")
        self.assertEqual(quote("\\'"), "'\\\\\\''")

    def test_rejects_non_string(self) -> None:
        with self.assertRaises(TypeError):
            quote(1)  # type: ignore[arg-type]


class TestQuery(unittest.TestCase):
    def test_single_terms(self) -> None:
        self.assertEqual(str(Query.name_equals("A")), "name = 'A'")
        self.assertEqual(str(Query.in_parents("P1")), "'P1' in parents")
        self.assertEqual(
            str(Query.mime_type_equals("text/plain")), "mimeType = 'text/plain'"
        )
        self.assertEqual(
            str(Query.mime_type_not_equals("text/plain")), "mimeType != 'text/plain'"
        )
        self.assertEqual(str(Query.not_trashed()), "trashed = false")

    def test_and_combination(self) -> None:
        q = Query.name_equals("b.txt") & Query.in_parents("P1") & Query.not_trashed()
        self.assertEqual(str(q), "name = 'b.txt' and 'P1' in parents and trashed = false")

    def test_all_of(self) -> None:
        q = Query.all_of(Query.in_parents("P1"), Query.mime_type_equals("x/y"))
        self.assertEqual(str(q), "'P1' in parents and mimeType = 'x/y'")

    def test_empty_query_is_falsy(self) -> None:
        self.assertFalse(Query())
        self.assertEqual(str(Query()), "")
        self.assertTrue(Query.not_trashed())

    def test_quote_in_name_cannot_break_out(self) -> None:
        q = Query.name_equals("x' or name = 'y")
        self.assertEqual(str(q), "name = 'x\\' or name = \\'y'")
        self.assertEqual(len(q.terms), 1)


if __name__ == "__main__":
    unittest.main()
