"""
In-place heap sort over a binary max-heap view of A[low:high + 1].
"""
from __future__ import print_function, absolute_import, division

import collections

from rangesort.compares import default_lt
from rangesort.kernels import py_wrap, jit_wrap


HeapsortImplementation = collections.namedtuple(
    'HeapsortImplementation',
    ('compile', 'sift_down', 'heapify', 'heap_sort'))


def make_heapsort_impl(wrap, lt=None):

    LT = lt if lt is not None else wrap(default_lt)

    @wrap
    def sift_down(A, low, pos, size):
        """
        Restore the max-heap property below local index *pos* of the heap
        A[low:low + size], whose children are both valid heaps.  Local index
        i has its children at 2i + 1 and 2i + 2.
        """
        item = A[low + pos]
        child = 2 * pos + 1
        while child < size:
            # Pick the larger child
            right = child + 1
            if right < size and LT(A[low + child], A[low + right]):
                child = right
            if not LT(item, A[low + child]):
                break
            A[low + pos] = A[low + child]
            pos = child
            child = 2 * pos + 1
        A[low + pos] = item

    @wrap
    def heapify(A, low, high):
        """
        Turn A[low:high + 1] into a max-heap, bottom-up from the last parent.
        """
        size = high - low + 1
        for pos in range(size // 2 - 1, -1, -1):
            sift_down(A, low, pos, size)

    @wrap
    def heap_sort(A, low, high):
        """
        Heap sort A[low:high + 1]. Note the inclusive bounds.
        """
        assert low >= 0
        if high <= low:
            return

        heapify(A, low, high)
        for last in range(high, low, -1):
            # Move the maximum after the shrinking heap
            A[low], A[last] = A[last], A[low]
            sift_down(A, low, 0, last - low)

    return HeapsortImplementation(wrap, sift_down, heapify, heap_sort)


def make_py_heapsort(*args, **kwargs):
    return make_heapsort_impl(py_wrap, *args, **kwargs)


def make_jit_heapsort(*args, **kwargs):
    return make_heapsort_impl(jit_wrap(), *args, **kwargs)
