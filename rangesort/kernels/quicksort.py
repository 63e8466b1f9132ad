
from __future__ import print_function, absolute_import, division

import collections

from rangesort import config
from rangesort.compares import default_lt
from rangesort.kernels import py_wrap, jit_wrap
from rangesort.kernels.insertionsort import make_insertionsort_impl


QuicksortImplementation = collections.namedtuple(
    'QuicksortImplementation',
    (# The compile function itself
     'compile',
     # All subroutines exercised by the tests
     'partition', 'insertion_sort',
     # The top-level function
     'run_quicksort',
     ))


Partition = collections.namedtuple('Partition', ('start', 'stop'))

# The larger partition is pushed and the smaller one worked on, so the
# stack never holds more than log2(n) entries
MAX_STACK = 100


def make_quicksort_impl(wrap, lt=None, small=None):
    """
    Build the quick sort kernels.  Partitions of at most *small* elements
    (INSERTION_CUTOFF by default) are finished by insertion sort.
    """
    if small is None:
        small = config.INSERTION_CUTOFF
    # Partitioning needs at least two elements
    small = max(small, 1)

    LT = lt if lt is not None else wrap(default_lt)

    insertion_sort = make_insertionsort_impl(wrap, LT).insertion_sort

    @wrap
    def partition(A, low, high):
        """
        Partition A[low:high + 1] around a chosen pivot.  The pivot's index
        is returned.
        """
        assert low >= 0
        assert high > low

        mid = (low + high) >> 1
        # NOTE: the pattern of swaps below for the pivot choice and the
        # partitioning gives good results (i.e. regular O(n log n))
        # on sorted, reverse-sorted, and uniform arrays.  Subtle changes
        # risk breaking this property.

        # median of three {low, middle, high}
        if LT(A[mid], A[low]):
            A[low], A[mid] = A[mid], A[low]
        if LT(A[high], A[mid]):
            A[high], A[mid] = A[mid], A[high]
        if LT(A[mid], A[low]):
            A[low], A[mid] = A[mid], A[low]
        pivot = A[mid]

        A[high], A[mid] = A[mid], A[high]
        i = low
        j = high - 1
        while True:
            # Both scans stop on elements equal to the pivot
            while i < high and LT(A[i], pivot):
                i += 1
            while j >= low and LT(pivot, A[j]):
                j -= 1
            if i >= j:
                break
            A[i], A[j] = A[j], A[i]
            i += 1
            j -= 1
        A[i], A[high] = A[high], A[i]
        return i

    @wrap
    def run_quicksort(A, low, high):
        """
        Quick sort A[low:high + 1]. Note the inclusive bounds.
        """
        if high <= low:
            return

        stack = [Partition(low, low)] * MAX_STACK
        stack[0] = Partition(low, high)
        n = 1

        while n > 0:
            n -= 1
            low, high = stack[n]
            # Partition until it becomes more efficient to do an insertion sort
            while high - low >= small:
                assert n < MAX_STACK
                i = partition(A, low, high)
                # Push largest partition on the stack
                if high - i > i - low:
                    # Right is larger
                    if high > i:
                        stack[n] = Partition(i + 1, high)
                        n += 1
                    high = i - 1
                else:
                    if i > low:
                        stack[n] = Partition(low, i - 1)
                        n += 1
                    low = i + 1

            insertion_sort(A, low, high)

    return QuicksortImplementation(wrap,
                                   partition, insertion_sort,
                                   run_quicksort)


def make_py_quicksort(*args, **kwargs):
    return make_quicksort_impl(py_wrap, *args, **kwargs)


def make_jit_quicksort(*args, **kwargs):
    return make_quicksort_impl(jit_wrap(), *args, **kwargs)
