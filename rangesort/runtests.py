"""
Entry point of the test-suite: ``python -m rangesort.runtests`` or
``rangesort.test()``.  Arguments are unittest's command line options.
"""
from __future__ import print_function, division, absolute_import

import sys
import unittest
from os.path import dirname, join


def main(*argv, **kwds):
    """
    Discover and run the rangesort tests; return whether they all passed.
    """
    top_level_dir = dirname(dirname(__file__))
    tests_dir = join(dirname(__file__), 'tests')
    argv = (['rangesort.runtests', 'discover',
             '-s', tests_dir, '-t', top_level_dir] + list(argv))
    prog = unittest.main(module=None, argv=argv, exit=False, **kwds)
    return prog.result.wasSuccessful()


if __name__ == '__main__':
    sys.exit(0 if main(*sys.argv[1:]) else 1)
