"""
Introspective sort: quick sort partitioning with a depth budget.  Ranges
whose budget runs out are heap sorted, small ranges are insertion sorted,
which bounds the worst case to O(n log n) comparisons.
"""
from __future__ import print_function, absolute_import, division

import collections

from rangesort import config
from rangesort.compares import default_lt
from rangesort.kernels import py_wrap, jit_wrap
from rangesort.kernels.heapsort import make_heapsort_impl
from rangesort.kernels.quicksort import make_quicksort_impl, MAX_STACK


IntrosortImplementation = collections.namedtuple(
    'IntrosortImplementation',
    ('compile',
     'partition', 'insertion_sort', 'heap_sort',
     'run_introsort',
     ))


# A pending range together with its remaining depth budget
IntroPartition = collections.namedtuple('IntroPartition',
                                        ('start', 'stop', 'depth'))


def make_introsort_impl(wrap, lt=None, small=None):
    if small is None:
        small = config.INSERTION_CUTOFF
    small = max(small, 1)

    LT = lt if lt is not None else wrap(default_lt)

    quicksort = make_quicksort_impl(wrap, LT, small)
    partition = quicksort.partition
    insertion_sort = quicksort.insertion_sort
    heap_sort = make_heapsort_impl(wrap, LT).heap_sort

    @wrap
    def run_introsort(A, low, high, depth_limit):
        """
        Intro sort A[low:high + 1] (inclusive bounds) with *depth_limit*
        partitioning steps allowed along any path.  The number of ranges
        handed over to heap sort is returned.
        """
        fallbacks = 0
        if high <= low:
            return fallbacks

        stack = [IntroPartition(low, low, depth_limit)] * MAX_STACK
        stack[0] = IntroPartition(low, high, depth_limit)
        n = 1

        while n > 0:
            n -= 1
            low, high, depth = stack[n]
            while high - low >= small and depth > 0:
                assert n < MAX_STACK
                depth -= 1
                i = partition(A, low, high)
                # Push largest partition on the stack, with the budget left
                # at this level
                if high - i > i - low:
                    if high > i:
                        stack[n] = IntroPartition(i + 1, high, depth)
                        n += 1
                    high = i - 1
                else:
                    if i > low:
                        stack[n] = IntroPartition(low, i - 1, depth)
                        n += 1
                    low = i + 1

            if high - low >= small:
                # Depth budget exhausted on a large range
                heap_sort(A, low, high)
                fallbacks += 1
            else:
                insertion_sort(A, low, high)

        return fallbacks

    return IntrosortImplementation(wrap,
                                   partition, insertion_sort, heap_sort,
                                   run_introsort)


def make_py_introsort(*args, **kwargs):
    return make_introsort_impl(py_wrap, *args, **kwargs)


def make_jit_introsort(*args, **kwargs):
    return make_introsort_impl(jit_wrap(), *args, **kwargs)
