from __future__ import print_function

import unittest

import numpy as np

from rangesort.errors import SortRangeError, RangeSortError
from rangesort.ranges import validate_range, range_bounds, SortRange
from .support import TestCase


class TestValidateRange(TestCase):

    def test_defaults(self):
        self.assertEqual(validate_range(10), (0, 10))
        self.assertEqual(validate_range(10, 4), (4, 6))
        self.assertEqual(validate_range(10, start=None), (0, 10))
        self.assertEqual(validate_range(0), (0, 0))
        self.assertIsInstance(validate_range(3), SortRange)

    def test_valid_windows(self):
        self.assertEqual(validate_range(10, 0, 10), (0, 10))
        self.assertEqual(validate_range(10, 10, 0), (10, 0))
        self.assertEqual(validate_range(10, 3, 0), (3, 0))
        self.assertEqual(validate_range(10, 9, 1), (9, 1))
        r = validate_range(100, np.int64(10), np.int32(20))
        self.assertEqual(r, (10, 20))
        self.assertIs(type(r.start), int)
        self.assertIs(type(r.count), int)

    def test_invalid_windows(self):
        for start, count in [(-1, 2), (0, -1), (0, 11), (5, 6), (11, 0),
                             (11, None), (-3, None)]:
            with self.assertRaises(SortRangeError) as raises:
                validate_range(10, start, count)
            exc = raises.exception
            self.assertEqual((exc.length, exc.start), (10, start))
            self.assertIn("out of bounds", str(exc))
            # Usable wherever an IndexError is expected
            self.assertIsInstance(exc, IndexError)
            self.assertIsInstance(exc, RangeSortError)

    def test_non_integers(self):
        for start, count in [(1.0, 2), (0, 2.5), ("0", 1), (True, 1),
                             (0, False)]:
            with self.assertRaises(TypeError):
                validate_range(10, start, count)

    def test_range_bounds(self):
        self.assertEqual(range_bounds(SortRange(0, 1)), (0, 0))
        self.assertEqual(range_bounds(SortRange(3, 7)), (3, 9))
        self.assertEqual(range_bounds((1, 2)), (1, 2))


if __name__ == '__main__':
    unittest.main()
