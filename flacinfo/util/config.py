# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""Simple proxy to a Python ConfigParser

Values are stored as text, everything that isn't text gets converted with
str() on set(). Reading and writing uses utf-8 with surrogateescape so
arbitrary bytes survive a round trip.
"""

import collections
import os
from configparser import Error, NoSectionError
from configparser import RawConfigParser as ConfigParser
from io import StringIO
from typing import Any, cast

from flacinfo.util import print_d, print_w


# RawConfigParser only uses items() for writing, sort them so entries are
# easy to find in the written file.
class _sorted_dict(collections.OrderedDict):  # noqa
    def items(self):
        return sorted(super().items())


class _Default:
    pass


_DEFAULT: _Default = _Default()


class Config:
    """A wrapper around RawConfigParser.

    Provides a ``defaults`` attribute of the same type which can be used
    to set default values.
    """

    def __init__(self, _defaults: bool = True):
        self._config = ConfigParser(dict_type=_sorted_dict)
        self.defaults = None
        if _defaults:
            self.defaults = Config(_defaults=False)

    def options(self, section: str) -> list[str]:
        """Returns a list of options available in the specified section."""

        try:
            options = self._config.options(section)
        except NoSectionError:
            if self.defaults:
                return self.defaults.options(section)
            raise
        else:
            if self.defaults:
                try:
                    for option in self.defaults.options(section):
                        if option not in options:
                            options.append(option)
                except NoSectionError:
                    pass
            return options

    def get(self, section: str, option: str,
            default: str | _Default = _DEFAULT) -> str:
        """If default is not given or set, raises Error in case of an error"""

        try:
            return self._config.get(section, option)
        except Error as e:
            if default is _DEFAULT:
                if self.defaults is not None:
                    try:
                        return self.defaults.get(section, option)
                    except Error:
                        pass
                raise
            if "No section:" in str(e):
                print_w(f"Config problem: {e}")
            return cast(str, default)

    def getboolean(self, section: str, option: str,
                   default: bool | _Default = _DEFAULT) -> bool:
        """If default is not given or set, raises Error in case of an error"""

        try:
            return self._config.getboolean(section, option)
        except (Error, ValueError) as e:
            if default is _DEFAULT:
                if self.defaults is not None:
                    try:
                        return self.defaults.getboolean(section, option)
                    except Error:
                        pass
                raise Error(str(e)) from e
            return cast(bool, default)

    def getint(self, section: str, option: str,
               default: int | _Default = _DEFAULT) -> int:
        """If default is not given or set, raises Error in case of an error"""

        try:
            return int(self._config.getfloat(section, option))
        except (Error, ValueError) as e:
            if default is _DEFAULT:
                if self.defaults is not None:
                    try:
                        return self.defaults.getint(section, option)
                    except Error:
                        pass
                raise Error(str(e)) from e
            return cast(int, default)

    def set(self, section: str, option: str, value: Any) -> None:
        """Saves the string representation for the passed value"""

        if isinstance(value, bytes):
            raise TypeError("pass text, not bytes")

        if not isinstance(value, str):
            value = str(value)

        try:
            self._config.set(section, option, value)
        except NoSectionError:
            if self.defaults and self.defaults.has_section(section):
                self._config.add_section(section)
                self._config.set(section, option, value)
            else:
                raise

    def write(self, filename) -> None:
        """Write config to filename.

        :raises EnvironmentError: When writing the file fails.
        """

        dirname = os.path.dirname(filename)
        if dirname:
            os.makedirs(dirname, exist_ok=True)

        temp = StringIO()
        self._config.write(temp)
        data = temp.getvalue().encode("utf-8", "surrogateescape")
        with open(filename, "wb") as fileobj:
            fileobj.write(data)

    def clear(self) -> None:
        """Remove all sections."""

        for section in self._config.sections():
            self._config.remove_section(section)

    def is_empty(self) -> bool:
        """Whether the config has any sections"""

        return not self._config.sections()

    def read(self, filename) -> None:
        """Reads the config from `filename` if the file exists,
        otherwise does nothing

        Can raise Error.
        """

        try:
            with open(filename, "rb") as fileobj:
                io = StringIO(fileobj.read().decode("utf-8", "surrogateescape"))
        except OSError:
            print_d(f"No config file found at {filename!r}, using defaults")
            return

        self._config.read_file(io, filename)

    def has_option(self, section: str, option: str) -> bool:
        """If the given section exists, and contains the given option"""

        return self._config.has_option(section, option) or (
            self.defaults is not None and
            self.defaults.has_option(section, option))

    def has_section(self, section: str) -> bool:
        """If the given section exists"""

        return self._config.has_section(section) or (
            self.defaults is not None and self.defaults.has_section(section))

    def add_section(self, section: str) -> None:
        """Add a section to the instance if it doesn't already exist."""

        if not self._config.has_section(section):
            self._config.add_section(section)
