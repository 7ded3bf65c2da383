#!/usr/bin/env python3
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

import os
import sys
import types

from setuptools import setup


def exec_module(path):
    """Executes the Python file at `path` and returns it as the module"""

    globals_ = {}
    with open(path, encoding="utf-8") as h:
        exec(h.read(), globals_)
    module = types.ModuleType("")
    module.__dict__.update(globals_)
    return module


def main():
    assert sys.version_info >= (3, 10), "flacinfo needs Python 3.10+"

    # setuptools depends on setup.py being executed from the same dir
    os.chdir(os.path.dirname(os.path.realpath(__file__)))

    const = exec_module(os.path.join("flacinfo", "const.py"))
    version_string = ".".join(map(str, const.VERSION_TUPLE))

    package_path = "flacinfo"
    packages = []
    for root, _dirnames, filenames in os.walk(package_path):
        if "__init__.py" in filenames:
            relpath = os.path.relpath(root, os.path.dirname(package_path))
            package_name = relpath.replace(os.sep, ".")
            packages.append(package_name)
    assert packages

    setup_kwargs = {
        "name": "flacinfo",
        "version": version_string,
        "description": "read and edit the metadata blocks of FLAC files",
        "license": "GPL-2.0-or-later",
        "packages": packages,
        "python_requires": ">=3.10",
        "install_requires": [
            "senf>=1.4",
        ],
        "extras_require": {
            "tests": [
                "pytest",
                "mutagen>=1.45",
            ],
        },
        "entry_points": {
            "console_scripts": [
                "flacinfo = flacinfo.cli.main:main",
            ],
        },
    }
    setup(**setup_kwargs)


if __name__ == "__main__":
    main()
