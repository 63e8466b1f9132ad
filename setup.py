import re
import sys

from setuptools import find_packages, setup

_version_module = None
try:
    from packaging import version as _version_module
except ImportError:
    try:
        from setuptools._vendor.packaging import version as _version_module
    except ImportError:
        pass


min_python_version = "3.8"
min_numpy_run_version = "1.22"
min_numba_version = "0.57"


def _guard_py_ver():
    if _version_module is None:
        return

    parse = _version_module.parse

    min_py = parse(min_python_version)
    cur_py = parse('.'.join(map(str, sys.version_info[:3])))

    if not min_py <= cur_py:
        msg = ('Cannot install on Python version {}; only versions >={} '
               'are supported.')
        raise RuntimeError(msg.format(cur_py, min_py))


_guard_py_ver()


def get_version():
    with open('rangesort/_version.py') as f:
        m = re.search(r"^__version__ = ['\"]([^'\"]+)['\"]", f.read(), re.M)
    return m.group(1)


packages = find_packages(include=["rangesort", "rangesort.*"])

install_requires = [
    'numpy >={}'.format(min_numpy_run_version),
    'numba >={}'.format(min_numba_version),
]

extras_require = {
    # file based configuration (.rangesort_config.yaml)
    'yaml': ['pyyaml'],
    'test': ['pytest', 'pyyaml'],
}

metadata = dict(
    name='rangesort',
    description="in-place, range-scoped sorting algorithms for Python "
                "sequences and NumPy arrays",
    version=get_version(),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries",
    ],
    packages=packages,
    install_requires=install_requires,
    extras_require=extras_require,
    python_requires=">={}".format(min_python_version),
    license="BSD",
)

with open('README.rst') as f:
    metadata['long_description'] = f.read()

setup(**metadata)
