# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

import sys

from senf import fsn2text

from flacinfo.util import print_, format_size, format_time

from .base import Command, CommandError
from .util import print_table, print_terse_table, list_comments, \
    streaminfo_lines, seektable_lines, block_lines


def _check_args(args, minimum, maximum=None):
    if len(args) < minimum:
        raise CommandError("Not enough arguments")
    elif maximum is not None and len(args) > maximum:
        raise CommandError("Too many arguments")


@Command.register
class ListCommand(Command):
    NAME = "list"
    DESCRIPTION = "List all metadata blocks"
    USAGE = "<file>"

    def _execute(self, options, args):
        _check_args(args, 1, 1)

        info = self.load_file(args[0])
        lines = []
        for index, (descriptor, content) in enumerate(info.chain):
            lines.extend(block_lines(index, descriptor, content))
        print_("\n".join(lines))


@Command.register
class TagsCommand(Command):
    NAME = "tags"
    DESCRIPTION = "List the comments of a file"
    USAGE = "[-t] <file>"

    def _add_options(self, p):
        p.add_option("-t", "--terse", action="store_true",
                     help="Print terse output")

    def _execute(self, options, args):
        _check_args(args, 1, 1)

        info = self.load_file(args[0])
        if info.vorbis_comment is None:
            raise CommandError("File has no VORBIS_COMMENT block")

        tags = list_comments(info.comments, terse=options.terse)
        if options.terse:
            print_terse_table(tags)
        else:
            print_table(tags, ["Tag", "Value"])


@Command.register
class InfoCommand(Command):
    NAME = "info"
    DESCRIPTION = "List stream information"
    USAGE = "[-t] <file>"

    def _add_options(self, p):
        p.add_option("-t", "--terse", action="store_true",
                     help="Print terse output")

    def _execute(self, options, args):
        _check_args(args, 1, 1)

        info = self.load_file(args[0])
        stream = info.streaminfo

        if options.terse:
            rows = [(field, str(getattr(stream, field)))
                    for field in stream._fields]
            rows.append(("length", str(stream.length)))
            print_terse_table(rows)
        else:
            rows = [line.split(": ", 1) for line in streaminfo_lines(stream)]
            rows.append(["length", format_time(stream.length)])
            if info.padding is not None:
                rows.append(["padding", format_size(info.padding.size)])
            print_table(rows, ["Description", "Value"])


@Command.register
class SeekTableCommand(Command):
    NAME = "seektable"
    DESCRIPTION = "List the seek points"
    USAGE = "<file>"

    def _execute(self, options, args):
        _check_args(args, 1, 1)

        info = self.load_file(args[0])
        if info.seektable is None:
            raise CommandError("File has no SEEKTABLE block")
        print_("\n".join(seektable_lines(info.seektable)))


@Command.register
class AddCommand(Command):
    NAME = "add"
    DESCRIPTION = "Add comments"
    USAGE = "[--dry-run] <file> <name=value> [<name=value>...]"

    def _add_options(self, p):
        p.add_option("--dry-run", action="store_true",
                     help="Show changes, don't apply them")

    def _execute(self, options, args):
        _check_args(args, 2)

        if options.dry_run:
            self.verbose = True

        info = self.load_file(args[0])
        for comment in args[1:]:
            comment = fsn2text(comment)
            self.log("Add %r" % comment)
            info.comment_add(comment)

        if not options.dry_run:
            strategy = info.update()
            self.log("Written using %s" % strategy.name)


@Command.register
class RemoveCommand(Command):
    NAME = "remove"
    DESCRIPTION = "Remove all comments with a name or name=value"
    USAGE = "[--dry-run] <file> <name|name=value> [...]"

    def _add_options(self, p):
        p.add_option("--dry-run", action="store_true",
                     help="Show changes, don't apply them")

    def _execute(self, options, args):
        _check_args(args, 2)

        if options.dry_run:
            self.verbose = True

        info = self.load_file(args[0])
        for target in args[1:]:
            target = fsn2text(target)
            if info.comment_del(target):
                self.log("Removed %r" % target)
            else:
                self.log("Nothing matches %r" % target)

        if info.is_dirty and not options.dry_run:
            strategy = info.update()
            self.log("Written using %s" % strategy.name)


def _add_size_option(p):
    p.add_option("-s", "--size", action="store", type="int",
                 help="Padding size in bytes (defaults to the config value)")


@Command.register
class PaddingAddCommand(Command):
    NAME = "padding-add"
    DESCRIPTION = "Add a padding block"
    USAGE = "[-s <size>] <file>"

    def _add_options(self, p):
        _add_size_option(p)

    def _execute(self, options, args):
        _check_args(args, 1, 1)

        info = self.load_file(args[0])
        info.add_padding(options.size)
        self.log("Padding is now %d bytes" % info.padding.size)


@Command.register
class PaddingRemoveCommand(Command):
    NAME = "padding-remove"
    DESCRIPTION = "Remove the padding block"
    USAGE = "<file>"

    def _execute(self, options, args):
        _check_args(args, 1, 1)

        info = self.load_file(args[0])
        if not info.remove_padding():
            raise CommandError("File has no PADDING block")


@Command.register
class PaddingResizeCommand(Command):
    NAME = "padding-resize"
    DESCRIPTION = "Resize the padding block, add one if missing"
    USAGE = "[-s <size>] <file>"

    def _add_options(self, p):
        _add_size_option(p)

    def _execute(self, options, args):
        _check_args(args, 1, 1)

        info = self.load_file(args[0])
        info.resize_padding(options.size)
        self.log("Padding is now %d bytes" % info.padding.size)


@Command.register
class ImageExtractCommand(Command):
    NAME = "image-extract"
    DESCRIPTION = (
        "Extract an embedded image to <album><n>.(jpeg|png|..) "
        "or <output>.(jpeg|png|..)")
    USAGE = "[-n <index>] [-o <output>] <file>"

    def _add_options(self, p):
        p.add_option("-n", "--number", action="store", type="int", default=1,
                     help="Image to extract, starting with 1")
        p.add_option("-o", "--output", action="store", type="string",
                     help="Output file name without extension")

    def _execute(self, options, args):
        _check_args(args, 1, 1)

        info = self.load_file(args[0])
        path = info.extract_picture(options.number, options.output)
        print_(path)


@Command.register
class DumpFileCommand(Command):
    NAME = "dump-file"
    DESCRIPTION = "Dump the data of an embedded 'Flac File'"
    USAGE = "[-o <output>] <file>"

    def _add_options(self, p):
        p.add_option("-o", "--output", action="store", type="string",
                     help="Write the data to a file instead of stdout")

    def _execute(self, options, args):
        _check_args(args, 1, 1)

        info = self.load_file(args[0])
        if options.output is not None:
            info.dump_embedded_file(options.output)
            return

        embedded = info.embedded_file
        if embedded is None:
            raise CommandError("No 'Flac File' data present")
        if not embedded.is_text:
            raise CommandError(
                "Data of type %r may be binary, use -o" % embedded.mime_type)
        print_(embedded.data.decode("utf-8", "replace"), end="",
               file=sys.stdout)


@Command.register
class HelpCommand(Command):
    NAME = "help"
    DESCRIPTION = "Display help information"
    USAGE = "[<command>]"

    def _execute(self, options, args):
        _check_args(args, 1, 1)

        cmd = Command.find(args[0])
        if cmd is None:
            raise CommandError("Unknown command")
        cmd(self._main_cmd).print_help()
