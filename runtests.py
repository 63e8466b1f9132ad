#!/usr/bin/env python
import runpy
import os

# run the test-suite with a predictable logging setup
os.environ.setdefault('RANGESORT_LOG_LEVEL', 'CRITICAL')


if __name__ == "__main__":
    runpy.run_module('rangesort.runtests', run_name='__main__')
