"""Tests for range specification parsing."""

import unittest

from kurva_pkg import config
from kurva_pkg.ranges import parse_range
from kurva_pkg.types import Range, ValidationError


class TestParseRange(unittest.TestCase):
    """Test well-formed ranges."""

    def test_square_brackets(self):
        r = parse_range("[0,10]", step=1)
        self.assertEqual(r, Range(0, 10, 1.0, x_min_inclusive=True, x_max_exclusive=True))

    def test_round_brackets(self):
        r = parse_range("(0,10)", step=1)
        self.assertFalse(r.x_min_inclusive)
        self.assertFalse(r.x_max_exclusive)

    def test_mixed_brackets(self):
        r = parse_range("[-5, 5)")
        self.assertTrue(r.x_min_inclusive)
        self.assertFalse(r.x_max_exclusive)
        self.assertEqual((r.x_min, r.x_max), (-5, 5))

    def test_whitespace_tolerated(self):
        r = parse_range("  (  -3 ,\t+7 ]  ")
        self.assertEqual((r.x_min, r.x_max), (-3, 7))
        self.assertTrue(r.x_max_exclusive)

    def test_default_step(self):
        self.assertEqual(parse_range("[0,1]").step, config.STEP)

    def test_empty_interval_allowed(self):
        r = parse_range("[5,5]")
        self.assertEqual(r.x_min, r.x_max)


class TestRangeErrors(unittest.TestCase):
    """Test structural range errors."""

    def assertRangeError(self, text, code, step=None):
        with self.assertRaises(ValidationError) as ctx:
            parse_range(text, step)
        self.assertEqual(ctx.exception.code, code)
        return ctx.exception

    def test_missing_opening_bracket(self):
        err = self.assertRangeError("0,10]", "RANGE_FORMAT")
        self.assertIn("[a,b]", str(err))

    def test_missing_closing_bracket(self):
        self.assertRangeError("[0,10", "RANGE_FORMAT")

    def test_non_integer_bound(self):
        self.assertRangeError("[a,10]", "RANGE_FORMAT")
        self.assertRangeError("[0,1.5]", "RANGE_FORMAT")

    def test_bounds_outside_int_range(self):
        err = self.assertRangeError("[-" + "9" * 400 + ",0]", "RANGE_FORMAT")
        self.assertIn("outside", str(err))
        self.assertRangeError("[0," + "9" * 5000 + "]", "RANGE_FORMAT")
        self.assertRangeError("[0,2147483648]", "RANGE_FORMAT")
        self.assertRangeError("[-2147483649,0]", "RANGE_FORMAT")

    def test_int_range_limits_accepted(self):
        r = parse_range("[-2147483648,2147483647]")
        self.assertEqual((r.x_min, r.x_max), (-(2**31), 2**31 - 1))
        r = parse_range("[" + "0" * 5000 + "7,+0010]")
        self.assertEqual((r.x_min, r.x_max), (7, 10))

    def test_bad_separator(self):
        err = self.assertRangeError("[0;10]", "RANGE_SEPARATOR")
        self.assertEqual(str(err), "Separator must be comma")

    def test_inverted_bounds(self):
        err = self.assertRangeError("[10,0]", "RANGE_BOUNDS")
        self.assertIn("x_min cannot be greater than x_max", str(err))

    def test_trailing_text(self):
        self.assertRangeError("[0,10] extra", "RANGE_FORMAT")

    def test_empty(self):
        self.assertRangeError("", "RANGE_FORMAT")

    def test_invalid_step(self):
        self.assertRangeError("[0,10]", "INVALID_STEP", step=0)
        self.assertRangeError("[0,10]", "INVALID_STEP", step=-0.5)
        self.assertRangeError("[0,10]", "INVALID_STEP", step=float("nan"))


if __name__ == "__main__":
    unittest.main()
