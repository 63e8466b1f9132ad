"""
Counting sort for integer keys within a declared bound.  Not a comparison
sort: only the key function and the bound matter.
"""
from __future__ import print_function, absolute_import, division

import collections

import numpy as np

from rangesort.kernels import py_wrap, jit_wrap
from rangesort.utils import make_temp_area as _make_temp_area
from rangesort.utils import make_temp_array, is_integer


CountingsortImplementation = collections.namedtuple(
    'CountingsortImplementation',
    ('compile', 'count_keys', 'scatter', 'run_countingsort'))


def identity_key(x):
    return x


def make_countingsort_impl(wrap, make_temp_area, key=None):
    """
    Build the counting sort kernels.  *key* maps an element to its integer
    key (the element itself by default) and must already be compatible with
    *wrap*.
    """
    KEY = key if key is not None else wrap(identity_key)

    make_temp_area = wrap(make_temp_area)

    @wrap
    def count_keys(A, low, high, min_key, counts):
        """
        Add the key frequencies of A[low:high + 1] to *counts*, which is
        indexed by key - min_key.  The index of the first element whose key
        is out of bounds is returned, or -1 if all keys fit.
        """
        span = len(counts)
        for i in range(low, high + 1):
            k = KEY(A[i]) - min_key
            if k < 0 or k >= span:
                return i
            counts[k] += 1
        return -1

    @wrap
    def scatter(A, low, high, min_key, counts):
        """
        Given complete key frequencies in *counts*, rearrange A[low:high + 1]
        by key.  Elements with equal keys keep their relative order.
        """
        # Turn frequencies into starting offsets
        total = 0
        for k in range(len(counts)):
            c = counts[k]
            counts[k] = total
            total += c

        n = high - low + 1
        out = make_temp_area(A, n)
        for i in range(low, high + 1):
            k = KEY(A[i]) - min_key
            out[counts[k]] = A[i]
            counts[k] += 1

        for i in range(n):
            A[low + i] = out[i]

    @wrap
    def run_countingsort(A, low, high, min_key, max_key):
        """
        Counting sort A[low:high + 1] (inclusive bounds) for keys in
        [min_key, max_key].  Nothing is written unless every key fits; the
        index of the first offending element is returned in that case,
        -1 otherwise.
        """
        assert min_key <= max_key
        if high < low:
            return -1
        counts = np.zeros(max_key - min_key + 1, np.intp)
        bad = count_keys(A, low, high, min_key, counts)
        if bad >= 0:
            return bad
        scatter(A, low, high, min_key, counts)
        return -1

    return CountingsortImplementation(wrap, count_keys, scatter,
                                      run_countingsort)


def make_int_key(key=None):
    """
    Wrap *key* so that it returns a Python int.  Offsets computed from it
    can then neither wrap around nor overflow in a small NumPy integer
    dtype.  A non-integer key raises TypeError.
    """
    if key is None:
        key = identity_key

    def int_key(x):
        k = key(x)
        if not is_integer(k):
            raise TypeError("counting sort keys must be integers, got %r"
                            % (k,))
        return int(k)

    return int_key


def make_py_countingsort(key=None):
    return make_countingsort_impl(py_wrap, _make_temp_area, make_int_key(key))


def make_jit_countingsort(key=None):
    wrap = jit_wrap()
    if wrap is py_wrap:
        # jit disabled: the plain Python kernels need Python int keys
        return make_py_countingsort(key)
    return make_countingsort_impl(wrap, make_temp_array, key)
