# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

from senf import path2fsn

from flacinfo import config
from flacinfo.util import print_d
from flacinfo.metadata import BlockType, VorbisComment, UsageError, \
    parse, validate_comment, split_comment, translate_write_errors
from flacinfo.metadata import writer


class FLACInfo:
    """The metadata of a FLAC file.

    The file is parsed on creation and after every write. Comment
    changes through comment_add() and comment_del() are kept in memory
    until update() is called.

    Raises NotFLACError or DecodeError if the file can't be parsed,
    OSError if it can't be read.
    """

    def __init__(self, filename):
        self.filename = path2fsn(filename)
        self._chain = None
        self._comment = None
        self._dirty = False
        self.reload()

    def __repr__(self):
        return "<%s %s>" % (type(self).__name__, " ".join(
            "(%s size=%d offset=%d)" % (d.type.name, d.size, d.offset)
            for d in self._chain.blocks))

    def reload(self):
        """Parses the file again, discarding pending comment changes"""

        self._chain = parse(self.filename)
        comment = self._chain.vorbis_comment
        if comment is not None:
            self._comment = VorbisComment(comment.vendor, comment.comments)
        else:
            self._comment = None
        self._dirty = False

    @property
    def chain(self):
        return self._chain

    @property
    def blocks(self):
        """Descriptors of all metadata blocks in file order"""

        return self._chain.blocks

    @property
    def streaminfo(self):
        return self._chain.streaminfo

    @property
    def seektable(self):
        return self._chain.seektable

    @property
    def padding(self):
        return self._chain.padding

    @property
    def cuesheet(self):
        return self._chain.cuesheet

    @property
    def applications(self):
        return self._chain.applications

    @property
    def application(self):
        """The first application block or None"""

        applications = self.applications
        return applications[0] if applications else None

    @property
    def embedded_file(self):
        """The first embedded file or None"""

        for app in self.applications:
            if app.embedded_file is not None:
                return app.embedded_file
        return None

    @property
    def pictures(self):
        return self._chain.pictures

    @property
    def picture_count(self):
        return len(self.pictures)

    def picture(self, n):
        """Returns the n-th picture, counting from 1"""

        pictures = self.pictures
        if not 1 <= n <= len(pictures):
            raise UsageError(
                "No picture #%d (file has %d)" % (n, len(pictures)),
                block_type=BlockType.PICTURE)
        return pictures[n - 1]

    @property
    def vorbis_comment(self):
        """The comment block including pending changes or None"""

        return self._comment

    @property
    def vendor(self):
        if self._comment is None:
            return None
        return self._comment.vendor

    @property
    def comments(self):
        """A copy of the raw 'KEY=VALUE' comments"""

        if self._comment is None:
            return []
        return list(self._comment.comments)

    @property
    def tags(self):
        """Upper cased comment keys mapped to their values. Values of
        repeated keys are joined.
        """

        if self._comment is None:
            return {}
        return self._comment.to_dict(config.get("editing", "separator"))

    def has_tag(self, key):
        return key.upper() in self.tags

    def get_tag(self, key, default=None):
        return self.tags.get(key.upper(), default)

    @property
    def is_dirty(self):
        """If there are comment changes not written to the file"""

        return self._dirty

    def _get_comment(self):
        if self._comment is None:
            raise UsageError("File has no VORBIS_COMMENT block")
        return self._comment

    def comment_add(self, comment):
        """Appends a 'KEY=VALUE' comment.

        Raises UsageError if the comment is malformed.
        """

        vc = self._get_comment()
        validate_comment(comment)
        vc.comments.append(comment)
        self._dirty = True

    def comment_del(self, target):
        """Removes comments.

        `target` is either a key, which removes all comments with exactly
        that key, or 'KEY=VALUE', which removes all identical comments.
        Returns True if anything was removed.
        """

        vc = self._get_comment()
        if "=" in target:
            def matches(comment):
                return comment == target
        else:
            def matches(comment):
                return split_comment(comment)[0] == target

        kept = [c for c in vc.comments if not matches(c)]
        if len(kept) == len(vc.comments):
            return False
        vc.comments[:] = kept
        self._dirty = True
        return True

    def update(self):
        """Writes pending comment changes and parses the file again.

        Returns the WriteStrategy used. Raises UsageError if there is
        nothing to write, WriteError if writing failed.
        """

        if not self._dirty:
            raise UsageError("No changes to write")

        strategy = writer.write_comment(
            self.filename, self._chain, self._get_comment(),
            config.getboolean("editing", "allow_padding_shuffle"))
        self.reload()
        return strategy

    def _check_clean(self):
        if self._dirty:
            raise UsageError(
                "Comment changes pending, call update() first")

    def _padding_size(self, size):
        if size is None:
            return config.getint("editing", "default_padding")
        return size

    def add_padding(self, size=None):
        """Adds a padding block after the last block.

        Raises UsageError if there already is one.
        """

        self._check_clean()
        writer.add_padding(
            self.filename, self._chain, self._padding_size(size))
        self.reload()

    def remove_padding(self):
        """Returns False if there was no padding block"""

        self._check_clean()
        if not writer.remove_padding(self.filename, self._chain):
            return False
        self.reload()
        return True

    def resize_padding(self, size=None):
        self._check_clean()
        writer.resize_padding(
            self.filename, self._chain, self._padding_size(size))
        self.reload()

    def extract_picture(self, n=1, outfile=None):
        """Writes the data of the n-th picture to a file and returns its
        path.

        The file is named '<outfile>.<ext>' or, without `outfile`,
        '<album><n>.<ext>' with the ALBUM tag or a configured fallback.
        """

        picture = self.picture(n)
        if outfile is None:
            base = self.get_tag("ALBUM") or \
                config.get("cli", "picture_basename")
            path = "%s%d.%s" % (base, n, picture.extension)
        else:
            path = "%s.%s" % (outfile, picture.extension)

        data = picture.read_data(self.filename)
        print_d("Writing picture #%d to %r" % (n, path))
        with translate_write_errors(path), open(path, "wb") as h:
            h.write(data)
        return path

    def dump_embedded_file(self, outfile):
        """Writes the data of the embedded file to `outfile`.

        Raises UsageError if there is no embedded file.
        """

        embedded = self.embedded_file
        if embedded is None:
            raise UsageError("No 'Flac File' data present",
                             block_type=BlockType.APPLICATION)

        with translate_write_errors(outfile), open(outfile, "wb") as h:
            h.write(embedded.data)
        return outfile

    def describe(self):
        """Returns (index, descriptor) for every block"""

        return list(enumerate(self._chain.blocks))
