import unittest
import io
import os
import sys
from unittest.mock import patch

# Ensure project root and scripts are importable
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)
sys.path.insert(0, os.path.join(ROOT, "scripts"))

import identify_chord as cli


def _run(argv):
    args = cli.build_parser().parse_args(argv + ["--no-color"])
    with patch("sys.stdout", new_callable=io.StringIO) as out, \
         patch("sys.stderr", new_callable=io.StringIO):
        code = cli.run(args)
    return code, out.getvalue()


class TestIdentifyChordScript(unittest.TestCase):
    def test_letter_notes(self):
        code, out = _run(["C", "E", "G"])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "C Major")

    def test_comma_separated_single_argument(self):
        code, out = _run(["E, G, C"])
        self.assertEqual(out.strip(), "C Major/E")

    def test_no_inversions(self):
        code, out = _run(["E", "G", "C", "--no-inversions"])
        self.assertEqual(out.strip(), "C Major")

    def test_detailed(self):
        code, out = _run(["E", "G", "C", "--detailed"])
        self.assertEqual(out.strip(), "First inversion (bass: 3rd) - C Major/E")

    def test_numeric(self):
        code, out = _run(["1", "3", "5", "--numeric", "--key", "G"])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "G Major")

    def test_numeric_default_key(self):
        code, out = _run(["2", "4b", "6", "--numeric"])
        self.assertEqual(out.strip(), "D Minor")

    def test_failures_exit_non_zero(self):
        code, out = _run([])
        self.assertEqual(code, 1)
        self.assertEqual(out.strip(), "No notes provided")
        code, out = _run(["C", "X"])
        self.assertEqual(code, 1)
        code, out = _run(["1", "3", "5", "--numeric", "--key", "H"])
        self.assertEqual((code, out.strip()), (1, "Invalid key"))

    def test_unknown_with_suggestion(self):
        code, out = _run(["C", "D", "E", "G", "--suggest"])
        self.assertEqual(code, 1)
        lines = out.strip().splitlines()
        self.assertEqual(lines[0], "Unknown chord")
        self.assertIn("nearest: C 9th", lines[1])

    def test_spell(self):
        code, out = _run(["--spell", "G", "Dominant 7th"])
        self.assertEqual((code, out.strip()), (0, "G B D F"))
        code, out = _run(["--spell", "G", "Dominant 13th"])
        self.assertEqual(code, 1)

    def test_lists(self):
        code, out = _run(["--list-keys"])
        self.assertEqual(out.strip(), "C C# D D# E F F# G G# A A# B")
        code, out = _run(["--list-types"])
        self.assertIn("Half-Diminished 7th", out.splitlines())

    def test_detailed_with_numeric_rejected(self):
        with patch("sys.stderr", new_callable=io.StringIO) as err:
            with self.assertRaises(SystemExit) as ctx:
                cli.parse_args(["1", "3", "5", "--numeric", "--detailed"])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("--detailed", err.getvalue())

    def test_parse_args_letter_mode(self):
        args = cli.parse_args(["E", "G", "C", "--detailed"])
        self.assertTrue(args.detailed)
        self.assertEqual(args.notes, ["E", "G", "C"])

    def test_main_exits_with_status(self):
        with patch("sys.stdout", new_callable=io.StringIO):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["C", "E", "G", "--no-color"])
        self.assertEqual(ctx.exception.code, 0)


if __name__ == "__main__":
    unittest.main()
