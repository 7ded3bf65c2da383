# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

import os

from flacinfo.const import FLAC_MAGIC
from flacinfo.util import print_d, print_w
from flacinfo.util.bitreader import BitReader

from ._misc import DecodeError, NotFLACError, translate_decode_errors
from ._header import BlockType, BlockHeader, MetadataBlockDescriptor
from ._blocks import decode_padding, decode_seektable, decode_cuesheet
from .streaminfo import decode_streaminfo
from .application import decode_application
from .vorbis import decode_vorbis_comment
from .picture import decode_picture


DECODERS = {
    BlockType.STREAMINFO: decode_streaminfo,
    BlockType.PADDING: decode_padding,
    BlockType.APPLICATION: decode_application,
    BlockType.SEEKTABLE: decode_seektable,
    BlockType.VORBIS_COMMENT: decode_vorbis_comment,
    BlockType.CUESHEET: decode_cuesheet,
    BlockType.PICTURE: decode_picture,
}
"""Block decoders by type. Each one gets a BitReader over the block body
and the declared body size and returns the decoded block."""

assert set(DECODERS) == BlockType.values, "every block type needs a decoder"


class MetadataChain:
    """The metadata blocks of a FLAC file in file order.

    `blocks` holds a descriptor for each block, `contents` the decoded
    block for the descriptor at the same index. Only the first padding
    and comment block are exposed as `padding` and `vorbis_comment`.
    """

    def __init__(self, entries):
        entries = list(entries)
        assert entries
        self.blocks = tuple(d for d, c in entries)
        self.contents = tuple(c for d, c in entries)

        assert self.blocks[0].type == BlockType.STREAMINFO
        assert [d.is_last for d in self.blocks].count(True) == 1
        assert self.blocks[-1].is_last

    def __len__(self):
        return len(self.blocks)

    def __iter__(self):
        return iter(zip(self.blocks, self.contents))

    def __repr__(self):
        return "<%s %s>" % (
            type(self).__name__, " ".join("(%s)" % (d,) for d in self.blocks))

    def find(self, type_):
        """Returns a list of (descriptor, content) for all blocks of the
        given type
        """

        return [(d, c) for d, c in self if d.type == type_]

    def first(self, type_):
        """Returns (descriptor, content) of the first block of the given
        type or (None, None)
        """

        for d, c in self:
            if d.type == type_:
                return d, c
        return None, None

    def index(self, descriptor):
        return self.blocks.index(descriptor)

    @property
    def last(self):
        """Descriptor of the block carrying the last-block flag"""

        return self.blocks[-1]

    @property
    def audio_offset(self):
        """Offset of the first audio frame"""

        return self.last.end

    @property
    def streaminfo(self):
        return self.contents[0]

    @property
    def padding(self):
        return self.first(BlockType.PADDING)[1]

    @property
    def vorbis_comment(self):
        return self.first(BlockType.VORBIS_COMMENT)[1]

    @property
    def seektable(self):
        return self.first(BlockType.SEEKTABLE)[1]

    @property
    def cuesheet(self):
        return self.first(BlockType.CUESHEET)[1]

    @property
    def applications(self):
        return [c for d, c in self.find(BlockType.APPLICATION)]

    @property
    def pictures(self):
        return [c for d, c in self.find(BlockType.PICTURE)]


def _file_size(fileobj):
    pos = fileobj.tell()
    fileobj.seek(0, os.SEEK_END)
    size = fileobj.tell()
    fileobj.seek(pos, os.SEEK_SET)
    return size


def _read_block(fileobj, header, offset):
    data = fileobj.read(header.size)
    if len(data) != header.size:
        raise DecodeError("Truncated block", offset, header.type)

    reader = BitReader(data, offset)
    with translate_decode_errors(header.type, offset):
        return DECODERS[header.type](reader, header.size)


def read_chain(fileobj):
    """Parses all metadata blocks starting at the current position, which
    has to be the start of the FLAC file.

    Raises NotFLACError or DecodeError.
    """

    start = fileobj.tell()
    if fileobj.read(len(FLAC_MAGIC)) != FLAC_MAGIC:
        raise NotFLACError("Not a valid FLAC file", start)

    file_size = _file_size(fileobj)
    entries = []
    seen_comment = False

    while True:
        header = BlockHeader.read(fileobj)
        offset = fileobj.tell()

        if not entries and header.type != BlockType.STREAMINFO:
            raise DecodeError("STREAMINFO block not found", offset,
                              header.type)
        elif entries and header.type == BlockType.STREAMINFO:
            raise DecodeError("More than one STREAMINFO block", offset,
                              header.type)

        if offset + header.size > file_size:
            raise DecodeError("Block exceeds the end of the file", offset,
                              header.type)

        content = _read_block(fileobj, header, offset)
        descriptor = MetadataBlockDescriptor(
            header.type, header.is_last, offset, header.size)
        print_d("Found %s" % (descriptor,))

        if header.type == BlockType.VORBIS_COMMENT:
            if seen_comment:
                print_w("Ignoring additional VORBIS_COMMENT block at %d" %
                        offset)
            seen_comment = True

        entries.append((descriptor, content))

        if header.is_last:
            break

    return MetadataChain(entries)


def parse(filename):
    """Returns the MetadataChain of the FLAC file at `filename`.

    Raises NotFLACError, DecodeError or OSError.
    """

    print_d("Parsing %r" % filename)
    with open(filename, "rb") as fileobj:
        return read_chain(fileobj)
