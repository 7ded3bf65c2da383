# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""Vorbis comments as found in FLAC files.

Unlike the rest of the FLAC metadata all lengths in here are little
endian, and FLAC doesn't use the framing bit of Ogg Vorbis.

Comment text is kept as str decoded with utf-8/surrogateescape, so
invalid utf-8 survives a decode/encode round trip unchanged.

See http://www.xiph.org/vorbis/doc/v-comment.html
"""

import struct

from ._misc import DecodeError, UsageError


def _decode(data):
    return data.decode("utf-8", "surrogateescape")


def _encode(text):
    return text.encode("utf-8", "surrogateescape")


def is_valid_key(key):
    """Return true if a string is a valid Vorbis comment key.

    Valid Vorbis comment keys are printable ASCII between 0x20 (space)
    and 0x7D ('}'), excluding '='.
    """

    if not key:
        return False

    for c in key:
        if c < " " or c > "}" or c == "=":
            return False
    return True


def split_comment(comment):
    """Splits a raw comment into (key, value) at the first '='.

    Entries without '=' are returned as (comment, None).
    """

    key, sep, value = comment.partition("=")
    if not sep:
        return comment, None
    return key, value


def validate_comment(comment):
    """Raises UsageError if `comment` isn't of the form 'key=value'.

    An empty value ('key=') is fine.
    """

    key, value = split_comment(comment)
    if value is None:
        raise UsageError("Comments must be in the form 'name=value'")
    if not is_valid_key(key):
        raise UsageError("%r is not a valid comment name" % key)


class VorbisComment:
    """The vendor string and the ordered list of raw 'KEY=VALUE' comments.

    `comments` is the editable source of truth, duplicates are allowed
    and their order is kept.
    """

    def __init__(self, vendor="", comments=None):
        self.vendor = vendor
        self.comments = list(comments or [])

    def __eq__(self, other):
        try:
            return (self.vendor == other.vendor and
                    self.comments == other.comments)
        except AttributeError:
            return False

    __hash__ = object.__hash__

    def __repr__(self):
        return "<%s vendor=%r comments=%r>" % (
            type(self).__name__, self.vendor, self.comments)

    def to_dict(self, separator=", "):
        """Maps upper cased keys to values.

        Values of repeated keys are joined with `separator`, keys keep the
        order they were first seen in. Entries without '=' are skipped.
        """

        tags = {}
        for comment in self.comments:
            key, value = split_comment(comment)
            if value is None:
                continue
            key = key.upper()
            if key in tags:
                tags[key] = tags[key] + separator + value
            else:
                tags[key] = value
        return tags

    def write(self):
        """Returns the encoded block body"""

        vendor = _encode(self.vendor)
        data = [struct.pack("<I", len(vendor)), vendor,
                struct.pack("<I", len(self.comments))]
        for comment in self.comments:
            comment = _encode(comment)
            data.append(struct.pack("<I", len(comment)))
            data.append(comment)
        return b"".join(data)


def _read_string(reader, size):
    length = reader.uint(4, "little")
    if reader.get_position() // 8 + length > size:
        raise DecodeError("Comment length exceeds block size")
    return _decode(reader.bytes(length))


def decode_vorbis_comment(reader, size):
    vendor = _read_string(reader, size)
    count = reader.uint(4, "little")
    if count > size // 4:
        raise DecodeError("Invalid comment count %d" % count)

    comments = []
    for i in range(count):
        comments.append(_read_string(reader, size))

    return VorbisComment(vendor, comments)
