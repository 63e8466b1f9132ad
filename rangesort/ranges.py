"""
Validation of the (start, count) window shared by every sort.
"""
from __future__ import print_function, division, absolute_import

import collections

from rangesort.errors import SortRangeError
from rangesort.utils import is_integer


SortRange = collections.namedtuple('SortRange', ('start', 'count'))


def validate_range(length, start=0, count=None):
    """
    Normalize and check a window of a sequence of *length* elements.

    *start* defaults to 0 and *count* to the number of elements from *start*
    to the end.  A SortRange(start, count) is returned; SortRangeError is
    raised if ``start < 0``, ``count < 0`` or ``start + count > length``.
    """
    if start is None:
        start = 0
    if not is_integer(start):
        raise TypeError("start must be an integer, not %s"
                        % type(start).__name__)
    if count is not None and not is_integer(count):
        raise TypeError("count must be an integer, not %s"
                        % type(count).__name__)
    start = int(start)
    if start < 0 or start > length:
        raise SortRangeError(length, start, count)
    if count is None:
        count = length - start
    count = int(count)
    if count < 0 or start + count > length:
        raise SortRangeError(length, start, count)
    return SortRange(start, count)


def range_bounds(sort_range):
    """
    Return the inclusive (low, high) kernel bounds of a non-empty SortRange.
    """
    start, count = sort_range
    assert count > 0, "range_bounds(): empty range"
    return start, start + count - 1
