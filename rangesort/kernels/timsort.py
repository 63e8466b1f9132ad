"""
Natural-run merge sort ("timsort" without galloping).  Mostly adapted from
CPython's listobject.c; see listsort.txt in CPython's source tree.

Runs are detected left to right, short ones are extended by binary
insertion, and a stack of pending runs is merged with merge sort's stable
merge step so that the stack stays logarithmic in depth.
"""

from __future__ import print_function, absolute_import, division

import collections

from rangesort import config
from rangesort.compares import default_lt
from rangesort.kernels import py_wrap, jit_wrap
from rangesort.kernels.insertionsort import make_insertionsort_impl
from rangesort.kernels.mergesort import make_mergesort_impl
from rangesort.utils import make_temp_area as _make_temp_area
from rangesort.utils import make_temp_array


TimsortImplementation = collections.namedtuple(
    'TimsortImplementation',
    (# The compile function itself
     'compile',
     # All subroutines exercised by the tests
     'count_run', 'reverse_slice', 'binary_insertion_sort',
     'merge_compute_minrun', 'merge_runs', 'merge_at', 'merge_collapse',
     'merge_force_collapse',
     # The top-level function
     'run_timsort',
     ))


# A run descriptor: the run is A[start:start + size]
MergeRun = collections.namedtuple('MergeRun', ('start', 'size'))

# The run-length invariants keep the pending runs' sizes growing at least
# as fast as the Fibonacci numbers, so this is plenty for any 64-bit size
MAX_MERGE_PENDING = 85


def make_timsort_impl(wrap, make_temp_area, lt=None, min_run=None):
    """
    Build the run-merge sort kernels.  *min_run* forces a fixed minimum
    run length (MIN_RUN by default; 0 means computed from the range size).
    """
    if min_run is None:
        min_run = config.MIN_RUN
    fixed_minrun = max(min_run, 0)

    LT = lt if lt is not None else wrap(default_lt)

    binary_insertion_sort = make_insertionsort_impl(
        wrap, LT).binary_insertion_sort
    merge_runs = make_mergesort_impl(wrap, make_temp_area, LT).merge_runs
    make_temp_area = wrap(make_temp_area)

    @wrap
    def count_run(A, lo, hi):
        """
        Return the length of the run beginning at lo, in the slice [lo, hi).
        lo < hi is required on entry.  "A run" is the longest ascending
        sequence, with

            lo[0] <= lo[1] <= lo[2] <= ...

        or the longest descending sequence, with

            lo[0] > lo[1] > lo[2] > ...

        A tuple (length, descending) is returned.  The strictness of the
        definition of "descending" is needed so that the caller can safely
        reverse a descending sequence without violating stability.
        """
        assert lo < hi, "Bad input for count_run()"
        if lo + 1 == hi:
            # Trivial 1-long run
            return 1, False
        if LT(A[lo + 1], A[lo]):
            # Descending run
            for k in range(lo + 2, hi):
                if not LT(A[k], A[k - 1]):
                    return k - lo, True
            return hi - lo, True
        else:
            # Ascending run
            for k in range(lo + 2, hi):
                if LT(A[k], A[k - 1]):
                    return k - lo, False
            return hi - lo, False

    @wrap
    def reverse_slice(A, lo, hi):
        """
        Reverse A[lo:hi] in place.
        """
        hi -= 1
        while lo < hi:
            A[lo], A[hi] = A[hi], A[lo]
            lo += 1
            hi -= 1

    @wrap
    def merge_compute_minrun(n):
        """
        Compute a good value for the minimum run length; natural runs shorter
        than this are boosted artificially via binary insertion.

        If n < 64, return n (it's too small to bother with fancy stuff).
        Else if n is an exact power of 2, return 32.
        Else return an int k, 32 <= k <= 64, such that n/k is close to, but
        strictly less than, an exact power of 2.
        """
        r = 0
        assert n >= 0
        while n >= 64:
            r |= n & 1
            n >>= 1
        return n + r

    @wrap
    def merge_at(A, ws, pending, n, i):
        """
        Merge the two runs at stack indices i and i + 1 of the *n* pending
        runs.  i must be n - 2 or n - 3.  The new stack size is returned.
        """
        assert n >= 2
        assert i >= 0
        assert i == n - 2 or i == n - 3

        a = pending[i]
        b = pending[i + 1]
        assert a.size > 0 and b.size > 0
        assert a.start + a.size == b.start

        merge_runs(A, ws, a.start, b.start, b.start + b.size)
        # Record the length of the combined runs; if i is the 3rd-last
        # run now, also slide over the last run (which isn't involved
        # in this merge).  The current run i + 1 goes away in any case.
        pending[i] = MergeRun(a.start, a.size + b.size)
        if i == n - 3:
            pending[i + 1] = pending[i + 2]
        return n - 1

    @wrap
    def merge_collapse(A, ws, pending, n):
        """
        Examine the stack of runs waiting to be merged, merging adjacent runs
        until the stack invariants are re-established:

        1. len[-3] > len[-2] + len[-1]
        2. len[-2] > len[-1]

        The new stack size is returned.
        """
        while n > 1:
            i = n - 2
            if ((i > 0 and pending[i - 1].size <= pending[i].size + pending[i + 1].size) or
                (i > 1 and pending[i - 2].size <= pending[i - 1].size + pending[i].size)):
                if pending[i - 1].size < pending[i + 1].size:
                    # Merge smaller one first
                    i -= 1
                n = merge_at(A, ws, pending, n, i)
            elif pending[i].size <= pending[i + 1].size:
                n = merge_at(A, ws, pending, n, i)
            else:
                break
        return n

    @wrap
    def merge_force_collapse(A, ws, pending, n):
        """
        Regardless of invariants, merge all runs on the stack until only one
        remains.  This is used at the end of the sort.  The new stack size
        (1) is returned.
        """
        while n > 1:
            i = n - 2
            if i > 0:
                if pending[i - 1].size < pending[i + 1].size:
                    # Merge the smaller one first
                    i -= 1
            n = merge_at(A, ws, pending, n, i)
        return n

    @wrap
    def run_timsort(A, low, high):
        """
        Run-merge sort A[low:high + 1]. Note the inclusive bounds.
        """
        if high <= low:
            return

        lo = low
        hi = high + 1
        nremaining = hi - lo
        if fixed_minrun > 0:
            minrun = fixed_minrun
        else:
            minrun = merge_compute_minrun(nremaining)

        ws = make_temp_area(A, nremaining)
        pending = [MergeRun(lo, 0)] * MAX_MERGE_PENDING
        n = 0

        while nremaining > 0:
            # Identify next run
            run_len, desc = count_run(A, lo, hi)
            if desc:
                # Descending run => reverse
                reverse_slice(A, lo, lo + run_len)
            # If short, extend it to min(minrun, nremaining)
            if run_len < minrun:
                force = min(minrun, nremaining)
                binary_insertion_sort(A, lo, lo + force, lo + run_len)
                run_len = force
            # Push run onto stack, and maybe merge.
            assert n < MAX_MERGE_PENDING
            pending[n] = MergeRun(lo, run_len)
            n += 1
            n = merge_collapse(A, ws, pending, n)
            # Advance to find next run.
            lo += run_len
            nremaining -= run_len

        n = merge_force_collapse(A, ws, pending, n)
        assert n == 1
        assert pending[0].start == low and pending[0].size == high - low + 1

    return TimsortImplementation(
        wrap,
        count_run, reverse_slice, binary_insertion_sort,
        merge_compute_minrun, merge_runs, merge_at, merge_collapse,
        merge_force_collapse,
        run_timsort)


def make_py_timsort(*args, **kwargs):
    return make_timsort_impl(py_wrap, _make_temp_area, *args, **kwargs)


def make_jit_timsort(*args, **kwargs):
    return make_timsort_impl(jit_wrap(), make_temp_array, *args, **kwargs)
