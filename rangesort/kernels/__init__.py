"""
Sort kernels.

Every module exposes a factory ``make_<algo>_impl(wrap, ...)`` building the
algorithm around a "less-than" predicate, plus ``make_py_<algo>()`` (plain
Python functions) and ``make_jit_<algo>()`` (Numba nopython functions).
Kernels take inclusive (low, high) bounds and trust their arguments; checking
is the front-end's job.
"""
from __future__ import print_function, division, absolute_import

from rangesort import config


def py_wrap(f):
    return f


def jit_wrap():
    """
    Return the decorator used for compiled kernels: Numba's njit, or the
    identity when jit is disabled in the configuration.
    """
    if config.DISABLE_JIT:
        return py_wrap
    from numba import njit
    return njit


def is_jitted(f):
    """
    Whether *f* is already a compiled function (a Numba dispatcher).
    """
    return hasattr(f, 'py_func')
