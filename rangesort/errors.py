"""
Errors raised by the sorting front-end.  All of them are programming errors
(bad arguments) and are raised before the sequence is modified.
"""
from __future__ import print_function, division, absolute_import

__all__ = ["RangeSortError", "SortRangeError", "KeyBoundError",
           "JitUnavailableError"]


class RangeSortError(Exception):
    "Base class for rangesort errors"


class SortRangeError(RangeSortError, IndexError):
    """
    Raised when a (start, count) pair does not describe a window of the
    sequence.
    """

    def __init__(self, length, start, count):
        self.length = length
        self.start = start
        self.count = count
        super(SortRangeError, self).__init__(str(self))

    def __str__(self):
        return ("range (start=%s, count=%s) is out of bounds for a sequence "
                "of length %s" % (self.start, self.count, self.length))


class KeyBoundError(RangeSortError, ValueError):
    """
    Raised by counting sort for an invalid key bound, or for a key that
    falls outside of the declared bound.
    """

    def __init__(self, min_key, max_key, key=None, index=None):
        self.min_key = min_key
        self.max_key = max_key
        self.key = key
        self.index = index
        super(KeyBoundError, self).__init__(str(self))

    def __str__(self):
        if self.index is None:
            return ("invalid key bound [%s, %s]: min_key must not exceed "
                    "max_key" % (self.min_key, self.max_key))
        return ("key %r at index %d is outside of the declared bound "
                "[%s, %s]" % (self.key, self.index, self.min_key,
                              self.max_key))


class JitUnavailableError(RangeSortError, RuntimeError):
    "Raised when compiled kernels are requested for an unsupported sequence"
