# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

from typing import NamedTuple

from flacinfo.const import HEADER_SIZE, MAX_BLOCK_SIZE
from flacinfo.util import enum

from ._misc import DecodeError, UsageError


@enum
class BlockType(int):
    """The 7 bit type field of a metadata block header"""

    STREAMINFO = 0
    PADDING = 1
    APPLICATION = 2
    SEEKTABLE = 3
    VORBIS_COMMENT = 4
    CUESHEET = 5
    PICTURE = 6


class BlockHeader(NamedTuple):
    """The 4 byte header in front of every metadata block"""

    type: BlockType
    size: int
    is_last: bool

    @classmethod
    def decode(cls, data, offset=None):
        """Parses 4 header bytes.

        Raises DecodeError for short data or an unknown block type.
        """

        if len(data) != HEADER_SIZE:
            raise DecodeError("Truncated block header", offset)

        byte = data[0]
        try:
            type_ = BlockType.value_of(byte & 0x7F)
        except ValueError:
            raise DecodeError(
                "Invalid block header type %d" % (byte & 0x7F),
                offset) from None

        size = int.from_bytes(data[1:], "big")
        return cls(type_, size, bool(byte & 0x80))

    @classmethod
    def read(cls, fileobj):
        offset = fileobj.tell()
        return cls.decode(fileobj.read(HEADER_SIZE), offset)

    def encode(self):
        return encode_header(self.type, self.size, self.is_last)


def encode_header(type_, size, is_last):
    """Returns the 4 byte header for a block"""

    if not 0 <= size <= MAX_BLOCK_SIZE:
        raise UsageError(
            "Block size %d doesn't fit into 24 bits" % size,
            block_type=BlockType.value_of(type_))

    return bytes([(0x80 if is_last else 0) | type_]) + size.to_bytes(3, "big")


class MetadataBlockDescriptor(NamedTuple):
    """Position of one metadata block in the file.

    `offset` and `size` don't include the block header.
    """

    type: BlockType
    is_last: bool
    offset: int
    size: int

    @property
    def header_offset(self):
        return self.offset - HEADER_SIZE

    @property
    def end(self):
        """Offset of the first byte after the block"""

        return self.offset + self.size

    def __str__(self):
        return "%s size=%d offset=%d%s" % (
            self.type.name, self.size, self.offset,
            " last" if self.is_last else "")
