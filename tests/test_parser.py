import unittest
from chordid.parser import parse_notes, parse_numeric_notes


class TestParseNotes(unittest.TestCase):
    def test_mixed_separators(self):
        self.assertEqual(parse_notes("C, E G"), ["C", "E", "G"])
        self.assertEqual(parse_notes(",C,,E\tG\n"), ["C", "E", "G"])
        self.assertEqual(parse_notes("Db , F , Ab"), ["Db", "F", "Ab"])

    def test_blank(self):
        self.assertEqual(parse_notes("  "), [])
        self.assertEqual(parse_notes(""), [])
        self.assertEqual(parse_notes(" , ,"), [])

    def test_tokens_not_validated(self):
        # Validation happens in the matcher, not the parser
        self.assertEqual(parse_notes("X y"), ["X", "y"])


class TestParseNumericNotes(unittest.TestCase):
    def test_plain(self):
        self.assertEqual(parse_numeric_notes("1 3 5"), [1, 3, 5])
        self.assertEqual(parse_numeric_notes("1,3,5"), [1, 3, 5])

    def test_accidental_suffix_tolerated(self):
        # The accidental is accepted but not applied
        self.assertEqual(parse_numeric_notes("1, 3b, 5#"), [1, 3, 5])

    def test_non_integers_dropped(self):
        self.assertEqual(parse_numeric_notes("1 x 5"), [1, 5])
        self.assertEqual(parse_numeric_notes("3#b 2.5 b3"), [])

    def test_signed_and_out_of_range_kept(self):
        # Range checking belongs to the numeric entry point
        self.assertEqual(parse_numeric_notes("-1 +2 9"), [-1, 2, 9])

    def test_blank(self):
        self.assertEqual(parse_numeric_notes("   "), [])


if __name__ == "__main__":
    unittest.main()
