"""
Public sorting front-end.

Every sort has the same shape::

    quick_sort(seq, cmp=None, start=0, count=None, key=None, reverse=False,
               jit=False)

and sorts ``seq[start:start + count]`` in place.  Arguments are checked
here, before anything is written; the kernels themselves trust their
inputs.

Kernels are built once per ordering and configuration and kept in a
bounded cache (the 128 most recent).  The cache holds strong references to
the comparators and key functions it was built with, so these stay alive
after the call returns until evicted; `clear_kernel_cache()` drops them.
"""
from __future__ import print_function, division, absolute_import

import enum
import functools
import logging
import sys

import numpy as np

from rangesort import config
from rangesort.compares import make_lt
from rangesort.errors import KeyBoundError, JitUnavailableError
from rangesort.kernels import is_jitted
from rangesort.kernels import countingsort, heapsort, insertionsort
from rangesort.kernels import introsort, mergesort, quicksort, timsort
from rangesort.ranges import validate_range, range_bounds
from rangesort.utils import floor_log2, is_integer


def _make_logger():
    logger = logging.getLogger(__name__)
    # is logging configured?
    if not logger.hasHandlers():
        # read user config
        lvl = str(config.LOG_LEVEL).upper()
        lvl = getattr(logging, lvl, None)
        if not isinstance(lvl, int):
            # default to critical level
            lvl = logging.CRITICAL
        logger.setLevel(lvl)
        # did user specify a level?
        if config.LOG_LEVEL:
            # create a simple handler that prints to stderr
            handler = logging.StreamHandler(sys.stderr)
            fmt = '== RANGESORT [%(relativeCreated)d] %(levelname)5s -- %(message)s'
            handler.setFormatter(logging.Formatter(fmt=fmt))
            logger.addHandler(handler)
        else:
            # otherwise, put a null handler
            logger.addHandler(logging.NullHandler())
    return logger


_logger = _make_logger()


class SortKind(enum.Enum):
    """
    The closed set of comparison sort strategies.
    """
    INSERTION = 'insertion'
    QUICK = 'quick'
    MERGE = 'merge'
    HEAP = 'heap'
    INTRO = 'intro'
    TIM = 'tim'


# kind -> (py factory, jit factory, name of the top-level kernel)
_FACTORIES = {
    SortKind.INSERTION: (insertionsort.make_py_insertionsort,
                         insertionsort.make_jit_insertionsort,
                         'insertion_sort'),
    SortKind.QUICK: (quicksort.make_py_quicksort,
                     quicksort.make_jit_quicksort,
                     'run_quicksort'),
    SortKind.MERGE: (mergesort.make_py_mergesort,
                     mergesort.make_jit_mergesort,
                     'run_mergesort'),
    SortKind.HEAP: (heapsort.make_py_heapsort,
                    heapsort.make_jit_heapsort,
                    'heap_sort'),
    SortKind.INTRO: (introsort.make_py_introsort,
                     introsort.make_jit_introsort,
                     'run_introsort'),
    SortKind.TIM: (timsort.make_py_timsort,
                   timsort.make_jit_timsort,
                   'run_timsort'),
}


def _config_key():
    # Kernels capture these values when built
    return (config.INSERTION_CUTOFF, config.MERGESORT_CUTOFF, config.MIN_RUN,
            config.DISABLE_JIT)


def _as_jitted(func):
    if func is None or is_jitted(func):
        return func
    from numba import njit
    return njit(func)


@functools.lru_cache(maxsize=128)
def _get_kernel(kind, cmp, key, reverse, jit, config_key):
    """
    Build (once per ordering and configuration) the top-level kernel of
    the given sort kind.
    """
    py_factory, jit_factory, entry = _FACTORIES[kind]
    if jit and not config.DISABLE_JIT:
        from numba import njit
        lt = make_lt(_as_jitted(cmp), _as_jitted(key), reverse, wrap=njit)
        factory = jit_factory
    else:
        lt = make_lt(cmp, key, reverse)
        factory = py_factory
    _logger.debug("building %s kernels (jit=%s, cmp=%r, key=%r, reverse=%s)",
                  kind.value, jit, cmp, key, reverse)
    return getattr(factory(lt), entry)


@functools.lru_cache(maxsize=128)
def _get_counting_kernel(key, jit, config_key):
    if jit and not config.DISABLE_JIT:
        impl = countingsort.make_jit_countingsort(_as_jitted(key))
    else:
        impl = countingsort.make_py_countingsort(key)
    _logger.debug("building counting kernels (jit=%s, key=%r)", jit, key)
    return impl.run_countingsort


def clear_kernel_cache():
    """
    Forget every cached kernel, releasing the comparators and key functions
    they hold.
    """
    _get_kernel.cache_clear()
    _get_counting_kernel.cache_clear()


def _hashable(*funcs):
    # Callables defining __eq__ without __hash__ cannot key the cache
    try:
        hash(funcs)
    except TypeError:
        return False
    return True


def _check_jit_sequence(seq):
    if not isinstance(seq, np.ndarray) or seq.ndim != 1:
        raise JitUnavailableError("compiled kernels need a 1-d NumPy array, "
                                  "got %s" % type(seq).__name__)


def _run_sort(kind, seq, cmp, start, count, key, reverse, jit):
    window = validate_range(len(seq), start, count)
    count = window.count
    _logger.debug("%s sort: start=%d count=%d", kind.value, window.start,
                  count)
    if count <= 1:
        return
    if jit:
        _check_jit_sequence(seq)

    args = (kind, cmp, key, bool(reverse), bool(jit), _config_key())
    if _hashable(cmp, key):
        kernel = _get_kernel(*args)
    else:
        kernel = _get_kernel.__wrapped__(*args)
    low, high = range_bounds(window)
    if kind is SortKind.INTRO:
        depth_limit = config.DEPTH_FACTOR * floor_log2(count)
        fallbacks = kernel(seq, low, high, depth_limit)
        if fallbacks:
            _logger.debug("intro sort: %d range(s) handed over to heap sort "
                          "(depth limit %d)", fallbacks, depth_limit)
    else:
        kernel(seq, low, high)


def insertion_sort(seq, cmp=None, start=0, count=None, key=None,
                   reverse=False, jit=False):
    """
    Stable insertion sort of seq[start:start + count].  Best for small or
    nearly sorted ranges.
    """
    _run_sort(SortKind.INSERTION, seq, cmp, start, count, key, reverse, jit)


def quick_sort(seq, cmp=None, start=0, count=None, key=None,
               reverse=False, jit=False):
    """
    Quick sort (median-of-three pivot) of seq[start:start + count].
    Not stable.
    """
    _run_sort(SortKind.QUICK, seq, cmp, start, count, key, reverse, jit)


def merge_sort(seq, cmp=None, start=0, count=None, key=None,
               reverse=False, jit=False):
    """
    Stable top-down merge sort of seq[start:start + count].
    """
    _run_sort(SortKind.MERGE, seq, cmp, start, count, key, reverse, jit)


def heap_sort(seq, cmp=None, start=0, count=None, key=None,
              reverse=False, jit=False):
    """
    Heap sort of seq[start:start + count], O(1) extra space.  Not stable.
    """
    _run_sort(SortKind.HEAP, seq, cmp, start, count, key, reverse, jit)


def intro_sort(seq, cmp=None, start=0, count=None, key=None,
               reverse=False, jit=False):
    """
    Introspective sort of seq[start:start + count]: quick sort with a heap
    sort fallback, O(n log n) in the worst case.  Not stable.
    """
    _run_sort(SortKind.INTRO, seq, cmp, start, count, key, reverse, jit)


def tim_sort(seq, cmp=None, start=0, count=None, key=None,
             reverse=False, jit=False):
    """
    Stable natural-run merge sort of seq[start:start + count]; close to
    linear on partially ordered data.
    """
    _run_sort(SortKind.TIM, seq, cmp, start, count, key, reverse, jit)


def sort(seq, cmp=None, start=0, count=None, key=None, reverse=False,
         kind=SortKind.INTRO, jit=False):
    """
    Sort seq[start:start + count] in place with the strategy *kind*, a
    SortKind or its name ('insertion', 'quick', 'merge', 'heap', 'intro',
    'tim').
    """
    kind = SortKind(kind)
    _run_sort(kind, seq, cmp, start, count, key, reverse, jit)


def counting_sort(seq, min_key, max_key, key=None, start=0, count=None,
                  jit=False):
    """
    Stable counting sort of seq[start:start + count] for integer keys
    (the elements themselves, or key(element)) within [min_key, max_key].

    KeyBoundError is raised, before anything is written, if the bound is
    inverted or a key falls outside of it; TypeError if a key is not an
    integer.
    """
    start, count = validate_range(len(seq), start, count)
    if not is_integer(min_key) or not is_integer(max_key):
        raise TypeError("key bounds must be integers, got %r and %r"
                        % (min_key, max_key))
    if min_key > max_key:
        raise KeyBoundError(min_key, max_key)
    _logger.debug("counting sort: start=%d count=%d keys=[%d, %d]",
                  start, count, min_key, max_key)
    if count <= 1:
        return
    if jit:
        _check_jit_sequence(seq)
        if key is None and seq.dtype.kind not in 'iu':
            raise TypeError("counting sort keys must be integers, got an "
                            "array of %s" % seq.dtype)

    args = (key, bool(jit), _config_key())
    if _hashable(key):
        kernel = _get_counting_kernel(*args)
    else:
        kernel = _get_counting_kernel.__wrapped__(*args)
    low, high = range_bounds((start, count))
    bad = kernel(seq, low, high, int(min_key), int(max_key))
    if bad >= 0:
        value = seq[bad]
        raise KeyBoundError(min_key, max_key,
                            key(value) if key is not None else value, bad)


def is_sorted(seq, cmp=None, start=0, count=None, key=None, reverse=False):
    """
    Whether seq[start:start + count] is in non-decreasing order for the
    given ordering.
    """
    start, count = validate_range(len(seq), start, count)
    lt = make_lt(cmp, key, reverse)
    for i in range(start + 1, start + count):
        if lt is None:
            if seq[i] < seq[i - 1]:
                return False
        elif lt(seq[i], seq[i - 1]):
            return False
    return True
