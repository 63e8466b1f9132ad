"""
Expose top-level symbols that are safe for import *
"""

from ._version import __version__

from rangesort import config, errors
from rangesort import runtests

# Re-export error classes
from rangesort.errors import *

from rangesort.compares import (Ordering, natural_order, reverse_order,
                                median_of_three, swap, CountingComparator)
from rangesort.ranges import validate_range
from rangesort.sorting import (SortKind, sort, insertion_sort, quick_sort,
                               merge_sort, heap_sort, intro_sort, tim_sort,
                               counting_sort, is_sorted,
                               clear_kernel_cache)

test = runtests.main


__all__ = """
    Ordering
    natural_order
    reverse_order
    median_of_three
    swap
    CountingComparator
    validate_range
    SortKind
    sort
    insertion_sort
    quick_sort
    merge_sort
    heap_sort
    intro_sort
    tim_sort
    counting_sort
    is_sorted
    clear_kernel_cache
    """.split() + errors.__all__
