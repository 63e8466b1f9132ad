"""
Linear and binary insertion sort.  Both are stable; they serve as the
small-range terminal of the partitioning sorts and as the run extension step
of the run-merge sort.
"""
from __future__ import print_function, absolute_import, division

import collections

from rangesort.compares import default_lt
from rangesort.kernels import py_wrap, jit_wrap


InsertionsortImplementation = collections.namedtuple(
    'InsertionsortImplementation',
    ('compile', 'insertion_sort', 'binary_insertion_sort'))


def make_insertionsort_impl(wrap, lt=None):

    LT = lt if lt is not None else wrap(default_lt)

    @wrap
    def insertion_sort(A, low, high):
        """
        Insertion sort A[low:high + 1]. Note the inclusive bounds.
        """
        assert low >= 0
        if high <= low:
            return

        for i in range(low + 1, high + 1):
            v = A[i]
            # Insert v into A[low:i]
            j = i
            while j > low and LT(v, A[j - 1]):
                # Make place for moving A[i] downwards
                A[j] = A[j - 1]
                j -= 1
            A[j] = v

    @wrap
    def binary_insertion_sort(A, lo, hi, start):
        """
        [lo, hi) is a contiguous slice of A, and is sorted via binary
        insertion.  On entry, must have lo <= start <= hi, and that
        [lo, start) is already sorted (pass start == lo if you don't know!).
        """
        assert lo <= start and start <= hi, "Bad input for binary_insertion_sort()"
        if lo == start:
            start += 1
        while start < hi:
            pivot = A[start]
            # Bisect to find where to insert `pivot`
            l = lo
            r = start
            # Invariants:
            # pivot >= all in [lo, l).
            # pivot  < all in [r, start).
            while l < r:
                p = l + ((r - l) >> 1)
                if LT(pivot, A[p]):
                    r = p
                else:
                    l = p + 1

            # pivot belongs at l; equal elements stay before it, which is
            # what makes this sort stable.
            for p in range(start, l, -1):
                A[p] = A[p - 1]
            A[l] = pivot

            start += 1

    return InsertionsortImplementation(wrap,
                                       insertion_sort, binary_insertion_sort)


def make_py_insertionsort(*args, **kwargs):
    return make_insertionsort_impl(py_wrap, *args, **kwargs)


def make_jit_insertionsort(*args, **kwargs):
    return make_insertionsort_impl(jit_wrap(), *args, **kwargs)
