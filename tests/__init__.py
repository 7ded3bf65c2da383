# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

import os
import unittest
import tempfile
import shutil
import atexit
from pathlib import Path

try:
    import pytest
except ImportError as e:
    raise SystemExit("pytest missing: pip install pytest") from e

from senf import fsnative
from unittest import TestCase as OrigTestCase


FI_BASE_PATH = Path(__file__).parent.parent


class TestCase(OrigTestCase):
    """Adds aliases for equality-type methods.
    Also swaps first and second parameters to support our mostly-favoured
    assertion style e.g. `assertEqual(actual, expected)`"""

    def assertEqual(self, first, second, msg=None):
        super().assertEqual(second, first, msg)

    def assertNotEqual(self, first, second, msg=None):
        super().assertNotEqual(second, first, msg)

    def assertAlmostEqual(self, first, second, places=None, msg=None,
                          delta=None):
        super().assertAlmostEqual(second, first, places, msg, delta)


skip = unittest.skip
skipUnless = unittest.skipUnless
skipIf = unittest.skipIf

_TEMP_DIR = None


def _wrap_tempfile(func):
    def wrap(*args, **kwargs):
        if kwargs.get("dir") is None and _TEMP_DIR is not None:
            assert isinstance(_TEMP_DIR, fsnative)
            kwargs["dir"] = _TEMP_DIR
        return func(*args, **kwargs)

    return wrap


NamedTemporaryFile = _wrap_tempfile(tempfile.NamedTemporaryFile)


def mkdtemp(*args, **kwargs):
    path = _wrap_tempfile(tempfile.mkdtemp)(*args, **kwargs)
    assert isinstance(path, fsnative)
    return path


def mkstemp(*args, **kwargs):
    fd, filename = _wrap_tempfile(tempfile.mkstemp)(*args, **kwargs)
    assert isinstance(filename, fsnative)
    return (fd, filename)


def init_test_environ():
    """This needs to be called before any test can be run.

    Before exiting the process call exit_test_environ() to clean up
    any resources created.
    """

    global _TEMP_DIR

    _TEMP_DIR = tempfile.mkdtemp(prefix=fsnative("FI-TEST-"))

    # don't pick up a user config
    os.environ.pop("FLACINFO_CONFIG", None)

    from flacinfo import config
    config.init()


def exit_test_environ():
    """Call after init_test_environ() and all tests are finished"""

    global _TEMP_DIR

    try:
        shutil.rmtree(_TEMP_DIR)
    except OSError:
        pass


# we have to do this on import so the tests work with other test runners
# like py.test which don't know about out setup code and just import
init_test_environ()
atexit.register(exit_test_environ)


def unit(run=None, exitfirst=False):
    """Returns 0 if everything passed"""

    run = run or []
    args = []

    if run:
        args.append("-k")
        args.append(" or ".join(run))

    if exitfirst:
        args.append("-x")

    args.append(str(FI_BASE_PATH / "tests"))

    return pytest.main(args=args)
