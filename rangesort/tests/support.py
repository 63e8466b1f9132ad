"""
Assorted utilities for use in tests.
"""
from __future__ import print_function

import collections
import contextlib
import math
import os
import random
import shutil
import tempfile
import unittest

import numpy as np

from rangesort import config, utils


class TestCase(unittest.TestCase):

    longMessage = True

    # A random state yielding the same random numbers for any test case.
    # Use as `self.random.<method name>`
    @utils.cached_property
    def random(self):
        return np.random.RandomState(42)

    #
    # Input factories
    #

    def random_list(self, n, offset=10):
        l = list(range(offset, offset + n))
        random.Random(42).shuffle(l)
        return l

    def sorted_list(self, n, offset=10):
        return list(range(offset, offset + n))

    def revsorted_list(self, n, offset=10):
        return list(range(offset, offset + n))[::-1]

    def initially_sorted_list(self, n, m=None, offset=10):
        if m is None:
            m = n // 2
        l = self.sorted_list(m, offset)
        l += self.random_list(n - m, offset=l[-1] + offset)
        return l

    def duprandom_list(self, n, factor=None, offset=10):
        if factor is None:
            factor = int(math.sqrt(n))
        l = (list(range(offset, offset + (n // factor) + 1)) * (factor + 1))[:n]
        assert len(l) == n
        random.Random(42).shuffle(l)
        return l

    def dupsorted_list(self, n, factor=None, offset=10):
        if factor is None:
            factor = int(math.sqrt(n))
        l = (list(range(offset, offset + (n // factor) + 1)) * (factor + 1))[:n]
        assert len(l) == n, (len(l), n)
        l.sort()
        return l

    def organ_pipe_list(self, n, offset=10):
        half = n // 2
        return (list(range(offset, offset + half)) +
                list(range(offset + n - half - 1, offset - 1, -1)))

    def random_int32_list(self, n):
        """
        *n* random integers drawn from the whole signed 32-bit range.
        """
        ints = self.random.randint(-2 ** 31, 2 ** 31, size=n, dtype=np.int64)
        return [int(x) for x in ints]

    def all_lists(self, n):
        """
        The usual input shapes, each of length *n*.
        """
        return [self.random_list(n), self.sorted_list(n),
                self.revsorted_list(n), self.initially_sorted_list(n),
                self.duprandom_list(n), self.dupsorted_list(n),
                self.organ_pipe_list(n), [7] * n]

    #
    # Assertions
    #

    def assertSorted(self, orig, result):
        self.assertEqual(len(result), len(orig))
        # sorted() returns a list, so make sure we compare to another list
        self.assertEqual(list(result), sorted(orig))

    def assertOrdered(self, orig, result, key=None, reverse=False):
        """
        Check that *result* is a permutation of *orig* in non-decreasing
        order of *key* (non-increasing if *reverse*).  Equal elements may
        come in any order.
        """
        self.assertEqual(len(result), len(orig))
        self.assertEqual(collections.Counter(result),
                         collections.Counter(orig))
        if key is None:
            key = lambda x: x
        keys = [key(x) for x in result]
        for i in range(len(keys) - 1):
            a, b = keys[i], keys[i + 1]
            if reverse:
                self.assertGreaterEqual(a, b, (i, keys))
            else:
                self.assertLessEqual(a, b, (i, keys))

    def assertStable(self, orig, result, key=None, reverse=False):
        """
        Check that *result* is exactly what Python's own stable sort makes
        of *orig*.
        """
        self.assertEqual(list(result), sorted(orig, key=key, reverse=reverse))

    def assertSortedRange(self, orig, result, start, count):
        """
        Check that only result[start:start + count] was touched, and that it
        is now sorted.
        """
        stop = start + count
        self.assertEqual(len(result), len(orig))
        self.assertEqual(list(result[:start]), list(orig[:start]))
        self.assertEqual(list(result[stop:]), list(orig[stop:]))
        self.assertEqual(list(result[start:stop]), sorted(orig[start:stop]))

    @contextlib.contextmanager
    def override_env(self, **values):
        """
        Set RANGESORT_* environment variables and reload the configuration
        for the duration of the block.
        """
        saved = {}
        for name, value in values.items():
            name = 'RANGESORT_' + name
            saved[name] = os.environ.get(name)
            os.environ[name] = str(value)
        try:
            config.reload_config()
            yield
        finally:
            for name, value in saved.items():
                if value is None:
                    del os.environ[name]
                else:
                    os.environ[name] = value
            config.reload_config()

    @contextlib.contextmanager
    def temporary_cwd(self):
        """
        Run the block in a fresh temporary directory.
        """
        old_cwd = os.getcwd()
        path = tempfile.mkdtemp(prefix='rangesort-test-')
        try:
            os.chdir(path)
            yield path
        finally:
            os.chdir(old_cwd)
            shutil.rmtree(path, ignore_errors=True)


class QuicksortAdversary(object):
    """
    M. D. McIlroy's adversary for quick sort ("A Killer Adversary for
    Quicksort", 1999).  The values to sort are the indices 0..n-1; their
    order is decided lazily, as comparisons are made, so that every pivot
    choice turns out to be a bad one.  The decisions are consistent, so
    the final result can be checked against the frozen keys.
    """

    def __init__(self, n):
        self.gas = n
        self.keys = [n] * n
        self.nsolid = 0
        self.candidate = 0
        self.calls = 0

    def freeze(self, x):
        self.keys[x] = self.nsolid
        self.nsolid += 1

    def __call__(self, x, y):
        self.calls += 1
        keys = self.keys
        if keys[x] == self.gas and keys[y] == self.gas:
            if x == self.candidate:
                self.freeze(x)
            else:
                self.freeze(y)
        if keys[x] == self.gas:
            self.candidate = x
        elif keys[y] == self.gas:
            self.candidate = y
        return keys[x] - keys[y]
