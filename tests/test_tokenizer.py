import unittest

from swctree.exceptions import *
from swctree.tokenizer import SwcTokenizer


class TestTokenizer(unittest.TestCase):
    def test_read_numbers(self):
        t = SwcTokenizer("1 -2 +3 4.5 -.5 1e3 2.5E-1\n")
        self.assertEqual(1, t.read_int())
        self.assertEqual(-2, t.read_int())
        self.assertEqual(3, t.read_int())
        self.assertEqual(4.5, t.read_float())
        self.assertEqual(-0.5, t.read_float())
        self.assertEqual(1000.0, t.read_float())
        self.assertEqual(0.25, t.read_float())
        self.assertTrue(t.consume_line_and_trailing_comments())
        self.assertTrue(t.done())

    def test_skip_comments(self):
        t = SwcTokenizer("# header\n\n   # indented comment\n\t 42 # trailing\n")
        self.assertEqual(42, t.read_int())
        self.assertEqual(4, t.line_number, "number is on the fourth line")
        self.assertTrue(t.consume_line_and_trailing_comments())
        self.assertTrue(t.done())
        self.assertEqual(5, t.line_number)

    def test_numbers_across_lines(self):
        t = SwcTokenizer("1\n\n2")
        self.assertEqual(1, t.read_int())
        self.assertEqual(2, t.read_int())
        self.assertEqual(3, t.line_number)

    def test_carriage_returns(self):
        t = SwcTokenizer("1\r\n2\r\n")
        self.assertEqual(1, t.read_int())
        self.assertTrue(t.consume_line_and_trailing_comments())
        self.assertEqual(2, t.read_int())
        self.assertEqual(2, t.line_number)

    def test_no_newline(self):
        t = SwcTokenizer("1 2\n")
        t.read_int()
        self.assertFalse(
            t.consume_line_and_trailing_comments(), "Next value is on the same line"
        )
        self.assertFalse(t.done())

    def test_end_of_input_counts_as_newline(self):
        t = SwcTokenizer("7   ")
        t.read_int()
        self.assertTrue(t.consume_line_and_trailing_comments())
        self.assertTrue(t.done())

    def test_early_end_of_file(self):
        t = SwcTokenizer("1\n# just a comment\n")
        t.read_int()
        with self.assertRaises(EarlyEndOfFileError):
            t.read_int()

    def test_empty(self):
        t = SwcTokenizer("")
        self.assertTrue(t.done())
        with self.assertRaises(EarlyEndOfFileError):
            t.read_float()

    def test_non_parsable(self):
        t = SwcTokenizer("\nabc\n", path="bad.swc")
        with self.assertRaises(LineNonParsableError) as cm:
            t.read_int()
        self.assertTrue(str(cm.exception).startswith("bad.swc:2: "), str(cm.exception))
        self.assertIsInstance(cm.exception, RawDataError)

    def test_lone_sign(self):
        t = SwcTokenizer("- 1\n")
        with self.assertRaises(LineNonParsableError):
            t.read_int()

    def test_int_stops_at_decimal_point(self):
        t = SwcTokenizer("1.5\n")
        self.assertEqual(1, t.read_int())
        self.assertEqual(0.5, t.read_float())
