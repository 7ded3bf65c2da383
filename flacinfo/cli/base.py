# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

import sys
from optparse import OptionParser

from flacinfo.info import FLACInfo
from flacinfo.metadata import FLACInfoError
from flacinfo.util import print_


class CommandError(Exception):
    """Ends a command, the message is shown to the user"""


class Command:
    """A sub command of the flacinfo tool.

    Subclasses set NAME, DESCRIPTION and USAGE, add their options in
    _add_options() and do the work in _execute(). Library errors raised
    there are turned into CommandError.
    """

    NAME = ""
    DESCRIPTION = ""
    USAGE = ""
    COMMANDS: "list[type[Command]]" = []

    @classmethod
    def register(cls, cmd_cls):
        cls.COMMANDS.append(cmd_cls)
        cls.COMMANDS.sort(key=lambda c: c.NAME)
        return cmd_cls

    @classmethod
    def find(cls, name):
        """The registered command class called `name` or None"""

        for cmd_cls in cls.COMMANDS:
            if cmd_cls.NAME == name:
                return cmd_cls
        return None

    def __init__(self, main_cmd, options=None):
        self._main_cmd = main_cmd
        self._parser = OptionParser(
            usage=f"{main_cmd} {self.NAME} {self.USAGE}",
            description=self.DESCRIPTION)
        self._add_options(self._parser)
        self._global_options = options

    def _add_options(self, parser):
        pass

    @property
    def verbose(self):
        return bool(getattr(self._global_options, "verbose", False))

    @verbose.setter
    def verbose(self, value):
        if self._global_options is None:
            self._global_options = self._parser.get_default_values()
        self._global_options.verbose = bool(value)

    def log(self, text):
        """Print to stderr with --verbose or --dry-run"""

        if self.verbose:
            print_(text, file=sys.stderr)

    def load_file(self, path):
        """Returns the FLACInfo for `path`, raises CommandError"""

        self.log(f"Load file: {path!r}")
        try:
            return FLACInfo(path)
        except (FLACInfoError, OSError) as e:
            raise CommandError(f"Failed to load file {path!r}: {e}") from e

    def _execute(self, options, args):
        raise NotImplementedError

    def print_help(self, file=None):
        if file is None:
            file = sys.stdout
        self._parser.print_help(file=file)

    def execute(self, args):
        """Parses the command arguments and runs the command"""

        options, args = self._parser.parse_args(args)
        try:
            self._execute(options, args)
        except FLACInfoError as e:
            raise CommandError(e) from e
