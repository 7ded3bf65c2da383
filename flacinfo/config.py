# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

import os

from flacinfo import const
from flacinfo.util.config import Config, Error
from flacinfo.util import print_d, print_w, print_exc


# this defines the initial and default values
INITIAL: dict[str, dict[str, str]] = {
    "editing": {
        # joins the values of repeated comment keys in FLACInfo.tags
        "separator": ", ",
        # size of padding blocks created without an explicit size
        "default_padding": "4096",
        # grow/shrink the comment block into the padding if possible,
        # instead of rewriting everything following it
        "allow_padding_shuffle": "true",
    },
    "cli": {
        # file name used by image-extract if there is no ALBUM tag
        "picture_basename": "flacimage",
    },
}

# global instance
_config = Config()

get = _config.get
getboolean = _config.getboolean
getint = _config.getint
set = _config.set

_filename = None
"""The filename last used for loading"""


def init_defaults():
    """Fills in the defaults, so they are guaranteed to be available"""

    _config.defaults.clear()
    for section, values in INITIAL.items():
        _config.defaults.add_section(section)
        for key, value in values.items():
            _config.defaults.set(section, key, value)


def init(filename=None):
    """Resets the active config and reads `filename` if given.

    Without a filename the one in $FLACINFO_CONFIG is used, if set.
    """

    global _filename

    if not _config.is_empty():
        _config.clear()

    if filename is None:
        filename = os.environ.get(const.CONFIG_ENV) or None

    _filename = filename

    if filename is not None:
        try:
            _config.read(filename)
        except Error:
            print_exc()
            print_w(f"Reading config file {filename!r} failed.")


def save(filename=None):
    """Writes the active config to filename, ignoring all possible errors.

    If no filename is given the one used for loading is used.
    """

    if filename is None:
        filename = _filename
        if filename is None:
            return

    print_d("Writing config...")
    try:
        _config.write(filename)
    except OSError:
        print_w("Unable to write config.")


init_defaults()
