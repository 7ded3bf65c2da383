# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

import sys
import os
from optparse import OptionParser

import flacinfo
from flacinfo import const
from flacinfo.util.dprint import print_

from .base import Command, CommandError
from . import commands

commands  # noqa


def _print_help(main_cmd, parser, file=None):
    """Print the global options followed by all commands"""

    if file is None:
        file = sys.stdout

    parser.print_help(file=file)

    cl = ["", "Commands:"]
    for command in Command.COMMANDS:
        cl.append("   %-17s %s" % (command.NAME, command.DESCRIPTION))
    cl.append("")
    cl.append("See '%s help <command>' for more information "
              "on a specific command." % main_cmd)

    print_("\n".join(cl), file=file)


def _build_parser(main_cmd):
    usage = ("%s [--version] [--help] [--verbose] [--config <file>] "
             "<command> [<args>]" % main_cmd)
    parser = OptionParser(usage=usage)

    parser.remove_option("--help")
    parser.add_option("-h", "--help", action="store_true")
    parser.add_option("--version", action="store_true",
                      help="print version")
    parser.add_option("-v", "--verbose", action="store_true",
                      help="verbose output")
    parser.add_option("--debug", action="store_true",
                      help="print debug messages")
    parser.add_option("--config", action="store", type="string",
                      help="read settings from this file")
    return parser


def _split_args(args):
    """Splits the arguments into the global options and the rest, which
    starts with the command name. The rest is empty if there is no command.
    """

    i = 0
    while i < len(args) and args[i].startswith("-"):
        # --config takes a value
        i += 2 if args[i] == "--config" else 1
    return args[:i], args[i:]


def main(argv=None):
    """Runs the command line interface, returns the exit status"""

    if argv is None:
        argv = sys.argv

    main_cmd = os.path.basename(argv[0])
    parser = _build_parser(main_cmd)

    if len(argv) <= 1:
        _print_help(main_cmd, parser, file=sys.stderr)
        return 1

    global_args, rest = _split_args(argv[1:])
    options = parser.parse_args(global_args)[0]

    if options.debug:
        const.DEBUG = True
    flacinfo.init_cli(options.config)

    if options.help:
        _print_help(main_cmd, parser)
        return 0

    if options.version:
        print_("%s version %s" % (main_cmd, const.VERSION))
        return 0

    if not rest:
        _print_help(main_cmd, parser, file=sys.stderr)
        return 1

    name, args = rest[0], rest[1:]
    if name == "help" and not args:
        _print_help(main_cmd, parser)
        return 0

    command = Command.find(name)
    if command is None:
        print_("Unknown command '%s'. See '%s help'." % (name, main_cmd),
               file=sys.stderr)
        return 1

    try:
        command(main_cmd, options).execute(args)
    except CommandError as e:
        print_("%s: %s" % (command.NAME, e), file=sys.stderr)
        return 1
    return 0
