"""
Top-down stable merge sort over A[low:high + 1] with a single workspace
allocated per call.
"""
from collections import namedtuple

from rangesort import config
from rangesort.compares import default_lt
from rangesort.kernels import py_wrap, jit_wrap
from rangesort.kernels.insertionsort import make_insertionsort_impl
from rangesort.utils import make_temp_area as _make_temp_area
from rangesort.utils import make_temp_array


MergesortImplementation = namedtuple('MergesortImplementation', [
    'compile', 'merge_runs', 'insertion_sort', 'run_mergesort',
])


def make_mergesort_impl(wrap, make_temp_area, lt=None, small=None):
    """
    Build the merge sort kernels.  *make_temp_area(A, n)* allocates the
    workspace; ranges of at most *small* elements (MERGESORT_CUTOFF by
    default) are insertion sorted, which keeps the sort stable.
    """
    if small is None:
        small = config.MERGESORT_CUTOFF
    # A single element is its own base case
    small = max(small, 1)

    LT = lt if lt is not None else wrap(default_lt)

    make_temp_area = wrap(make_temp_area)
    insertion_sort = make_insertionsort_impl(wrap, LT).insertion_sort

    @wrap
    def merge_runs(A, ws, lo, mid, hi):
        """
        Merge the sorted runs A[lo:mid] and A[mid:hi] (half-open bounds) in
        place, in a stable way.  ws must hold at least mid - lo items.
        """
        na = mid - lo
        # Copy left run into workspace so we don't overwrite it
        for k in range(na):
            ws[k] = A[lo + k]

        i = 0
        j = mid
        k = lo
        while i < na and j < hi:
            # On ties the left run wins
            if LT(A[j], ws[i]):
                A[k] = A[j]
                j += 1
            else:
                A[k] = ws[i]
                i += 1
            k += 1

        # Leftovers of the right run are already in place
        while i < na:
            A[k] = ws[i]
            i += 1
            k += 1

    @wrap
    def mergesort_inner(A, ws, low, high):
        if high - low < small:
            insertion_sort(A, low, high)
            return

        mid = low + ((high - low) >> 1)
        mergesort_inner(A, ws, low, mid)
        mergesort_inner(A, ws, mid + 1, high)
        # Nothing to do if the halves are already in order
        if not LT(A[mid + 1], A[mid]):
            return
        merge_runs(A, ws, low, mid + 1, high + 1)

    @wrap
    def run_mergesort(A, low, high):
        "Inplace"
        if high <= low:
            return
        ws = make_temp_area(A, high - low + 1)
        mergesort_inner(A, ws, low, high)

    return MergesortImplementation(wrap, merge_runs, insertion_sort,
                                   run_mergesort)


def make_py_mergesort(*args, **kwargs):
    return make_mergesort_impl(py_wrap, _make_temp_area, *args, **kwargs)


def make_jit_mergesort(*args, **kwargs):
    # Compiled kernels only ever see NumPy arrays
    return make_mergesort_impl(jit_wrap(), make_temp_array, *args, **kwargs)
