from __future__ import print_function, division, absolute_import

import os
import warnings

# YAML needed to use file based rangesort config
try:
    import yaml
    _HAVE_YAML = True
except ImportError:
    _HAVE_YAML = False

# this is the name of the user supplied configuration file
_config_fname = '.rangesort_config.yaml'

_ENV_PREFIX = 'RANGESORT_'


def _parse_cutoff(text):
    """
    Parse a size threshold; it must be a non-negative integer.
    """
    value = int(text)
    if value < 0:
        raise ValueError("cutoff must be non-negative, got %d" % value)
    return value


def _parse_factor(text):
    """
    Parse the intro sort depth factor; it must be a positive integer.
    """
    value = int(text)
    if value <= 0:
        raise ValueError("depth factor must be positive, got %d" % value)
    return value


class _EnvReloader(object):

    def __init__(self):
        self.reset()

    def reset(self):
        self.old_environ = {}
        self.update(force=True)

    def update(self, force=False):
        new_environ = {}

        # first check if there's a .rangesort_config.yaml and use values
        # from that
        if os.path.exists(_config_fname) and os.path.isfile(_config_fname):
            if not _HAVE_YAML:
                msg = ("A rangesort config file is found but YAML parsing "
                       "capabilities appear to be missing. "
                       "To use this feature please install `pyyaml`. e.g. "
                       "`pip install pyyaml`.")
                warnings.warn(msg)
            else:
                with open(_config_fname, 'rt') as f:
                    y_conf = yaml.safe_load(f)
                if y_conf is not None:
                    for k, v in y_conf.items():
                        new_environ[_ENV_PREFIX + k.upper()] = v

        # clobber file based config with any locally defined env vars
        for name, value in os.environ.items():
            if name.startswith(_ENV_PREFIX):
                new_environ[name] = value
        # We update the config variables if at least one RANGESORT environment
        # variable was modified.  This lets the user modify values
        # directly in the config module without having them when
        # reload_config() is called.
        if force or self.old_environ != new_environ:
            self.process_environ(new_environ)
            # Store a copy
            self.old_environ = dict(new_environ)

    def process_environ(self, environ):
        def _readenv(name, ctor, default):
            value = environ.get(name)
            if value is None:
                return default() if callable(default) else default
            try:
                return ctor(value)
            except Exception:
                warnings.warn("environ %s defined but failed to parse '%s'" %
                              (name, value), RuntimeWarning)
                return default

        # Ranges of at most this many elements are finished by insertion
        # sort inside quick sort and intro sort
        INSERTION_CUTOFF = _readenv("RANGESORT_INSERTION_CUTOFF",
                                    _parse_cutoff, 16)

        # Ranges of at most this many elements are insertion sorted by
        # merge sort instead of being split further
        MERGESORT_CUTOFF = _readenv("RANGESORT_MERGESORT_CUTOFF",
                                    _parse_cutoff, 16)

        # Fixed minimum run length for the run-merge sort.
        #   0 = computed from the range size (default)
        MIN_RUN = _readenv("RANGESORT_MIN_RUN", _parse_cutoff, 0)

        # Intro sort depth budget is DEPTH_FACTOR * floor(log2(count))
        DEPTH_FACTOR = _readenv("RANGESORT_DEPTH_FACTOR", _parse_factor, 2)

        # rangesort logging level
        # Any level name from the *logging* module.  Case insensitive.
        # Defaults to CRITICAL if not set or invalid.
        # Note: This setting only applies when logging is not configured.
        #       Any existing logging configuration is preserved.
        LOG_LEVEL = _readenv("RANGESORT_LOG_LEVEL", str, '')

        # Disable jit for debugging: make_jit_* factories hand back the
        # plain Python kernels
        DISABLE_JIT = _readenv("RANGESORT_DISABLE_JIT", int, 0)

        # Inject the configuration values into the module globals
        for name, value in locals().copy().items():
            if name.isupper():
                globals()[name] = value


_env_reloader = _EnvReloader()


def reload_config():
    """
    Reload the configuration from environment variables, if necessary.
    """
    _env_reloader.update()
