from __future__ import print_function, division, absolute_import

import numbers

import numpy as np


INT_TYPES = (int, np.integer)


# Django's cached_property
# see https://docs.djangoproject.com/en/dev/ref/utils/#django.utils.functional.cached_property    # noqa: E501

class cached_property(object):
    """
    Decorator that converts a method with a single self argument into a
    property cached on the instance.

    Optional ``name`` argument allows you to make cached properties of other
    methods. (e.g.  url = cached_property(get_absolute_url, name='url') )
    """
    def __init__(self, func, name=None):
        self.func = func
        self.name = name or func.__name__

    def __get__(self, instance, type=None):
        if instance is None:
            return self
        res = instance.__dict__[self.name] = self.func(instance)
        return res


def is_integer(value):
    """
    Whether *value* is usable as an index (bools excluded).
    """
    return (isinstance(value, numbers.Integral)
            and not isinstance(value, (bool, np.bool_)))


def bit_length(intval):
    """
    Return the number of bits necessary to represent integer `intval`.
    """
    assert isinstance(intval, INT_TYPES)
    intval = int(intval)
    if intval >= 0:
        return len(bin(intval)) - 2
    else:
        return len(bin(-intval - 1)) - 2


def floor_log2(n):
    """
    Return floor(log2(n)) for a positive integer, computed exactly.
    """
    assert n > 0, "floor_log2(): n must be positive"
    return bit_length(n) - 1


def make_temp_list(keys, n):
    return [None] * n


def make_temp_array(keys, n):
    return np.empty(n, keys.dtype)


def make_temp_area(keys, n):
    """
    Allocate a scratch buffer of *n* items able to hold elements of *keys*:
    a NumPy array of the same dtype for arrays, a list otherwise.
    """
    if isinstance(keys, np.ndarray):
        return make_temp_array(keys, n)
    return make_temp_list(keys, n)
