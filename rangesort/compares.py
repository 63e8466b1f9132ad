"""
Comparison primitives: three-way comparators, their adaptation into the
strict "less-than" predicate used by every kernel, and a few helpers built on
top of it.
"""
from __future__ import print_function, division, absolute_import

import enum


class Ordering(enum.IntEnum):
    """
    Outcome of a three-way comparison.
    """
    LESS = -1
    EQUAL = 0
    GREATER = 1


def natural_order(a, b):
    """
    Three-way comparison using the elements' own ``<``.
    """
    if a < b:
        return Ordering.LESS
    if b < a:
        return Ordering.GREATER
    return Ordering.EQUAL


def reverse_order(cmp=None):
    """
    Return a comparator for the order opposite to *cmp* (natural order by
    default).  Equal elements stay equal, so stable sorts remain stable.
    """
    if cmp is None:
        cmp = natural_order

    def reversed_cmp(a, b):
        return cmp(b, a)

    return reversed_cmp


def default_lt(a, b):
    """
    Trivial comparison function between two keys.
    """
    return a < b


def make_lt(cmp=None, key=None, reverse=False, wrap=None):
    """
    Build the strict less-than predicate for the given ordering.

    *cmp* is a three-way comparator (negative, zero or positive result),
    *key* extracts the value compared, *reverse* flips the order.  None is
    returned for the natural ascending order, in which case kernels use their
    own inlined ``<``.  *wrap* is applied to every function built here (the
    compiled kernels need the whole predicate chain compiled).
    """
    if cmp is None and key is None and not reverse:
        return None
    if wrap is None:
        wrap = lambda f: f

    if cmp is not None:
        if key is not None:
            @wrap
            def base_lt(a, b):
                return cmp(key(a), key(b)) < 0
        else:
            @wrap
            def base_lt(a, b):
                return cmp(a, b) < 0
    elif key is not None:
        @wrap
        def base_lt(a, b):
            return key(a) < key(b)
    else:
        base_lt = wrap(default_lt)

    if not reverse:
        return base_lt

    @wrap
    def lt(a, b):
        return base_lt(b, a)

    return lt


def median_of_three(a, b, c, lt=None):
    """
    Return the middle value of *a*, *b* and *c* according to *lt*.

    A standalone helper for callers choosing a pivot of their own; the
    partitioning kernels order the three candidates in place instead.
    """
    if lt is None:
        lt = default_lt
    if lt(a, b):
        if lt(b, c):
            return b
        return c if lt(a, c) else a
    if lt(a, c):
        return a
    return c if lt(b, c) else b


def swap(A, i, j):
    """
    Exchange A[i] and A[j].

    A standalone helper: kernels swap inline, which compiled code handles
    without a call.
    """
    A[i], A[j] = A[j], A[i]


class CountingComparator(object):
    """
    A three-way comparator wrapper counting how many times it is invoked.

        cmp = CountingComparator()
        intro_sort(seq, cmp)
        cmp.calls
    """

    def __init__(self, cmp=None):
        self.cmp = cmp if cmp is not None else natural_order
        self.calls = 0

    def __call__(self, a, b):
        self.calls += 1
        return self.cmp(a, b)

    def reset(self):
        self.calls = 0
