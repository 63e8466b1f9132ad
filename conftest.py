
def uses_jit(item):
    """ Checks whether a test exercises compiled kernels
    """
    cls = getattr(item, "cls", None)
    return bool(getattr(cls, "uses_jit", False))


def pytest_addoption(parser):
    parser.addoption("--runtype", action="store", default="all",
                     help="run 'all' tests, only the pure Python ones "
                          "('common') or only the compiled kernel ones "
                          "('jit')")


def pytest_collection_modifyitems(session, config, items):

    ty = config.getoption("runtype")
    keep = []
    if ty == "all":
        keep.extend(items)
    elif ty == "common":
        keep.extend(item for item in items if not uses_jit(item))
    elif ty == "jit":
        keep.extend(item for item in items if uses_jit(item))
    else:
        raise ValueError("Unknown type specified in `--runtype`: %s" % ty)

    # clobber existing items
    items[:] = keep

    print("\n", "-" * 80)
    print("Test target '%s' has: %s active tests." % (ty, len(items)))
