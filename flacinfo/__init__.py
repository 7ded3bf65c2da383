# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

from .util.dprint import print_d, print_e, print_w
from .const import VERSION
from .metadata import FLACInfoError, UsageError, DecodeError, NotFLACError, \
    WriteError, ErrorKind, WriteStrategy
from .info import FLACInfo


_cli_initialized = False


def init_cli(config_file=None):
    """Loads the config, call before using the command line interface.

    Without `config_file` the one named by $FLACINFO_CONFIG is used.
    """

    global _cli_initialized

    if _cli_initialized and config_file is None:
        return

    from . import config
    config.init_defaults()
    config.init(config_file)
    print_d("Initialized flacinfo %s" % VERSION)

    _cli_initialized = True


print_d, print_e, print_w, VERSION, FLACInfoError, UsageError, DecodeError, \
    NotFLACError, WriteError, ErrorKind, WriteStrategy, FLACInfo
