# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""In place modification of FLAC metadata.

All functions take the MetadataChain of the file as it is on disk and
leave re-parsing to the caller. Nothing here is transactional, an error
while writing can leave the file half updated.
"""

from flacinfo.const import HEADER_SIZE, MAX_BLOCK_SIZE
from flacinfo.util import enum, print_d

from ._misc import UsageError, translate_write_errors
from ._header import BlockType, encode_header


@enum
class WriteStrategy(int):
    """How a new comment block ended up in the file"""

    # the comment block grew into or shrank out of the padding block,
    # everything after the padding is untouched
    SHUFFLE = 0
    # everything following the comment block was moved
    REWRITE = 1


def choose_strategy(growth, padding_size):
    """Returns the WriteStrategy for a comment block growing by `growth`
    bytes (negative if it shrinks).

    `padding_size` is the size of the padding block following the comment
    block or None if there is none. The growth, not the full new block
    size, is compared against it, so a block growing by exactly the
    padding size leaves a 0 byte padding block.
    """

    if padding_size is None:
        return WriteStrategy.REWRITE
    if growth <= padding_size and padding_size - growth <= MAX_BLOCK_SIZE:
        return WriteStrategy.SHUFFLE
    return WriteStrategy.REWRITE


def _splice(fileobj, offset, old_size, data):
    """Replaces `old_size` bytes at `offset` with `data`, moving the rest
    of the file and truncating it.
    """

    fileobj.seek(offset + old_size)
    tail = fileobj.read()
    fileobj.seek(offset)
    fileobj.write(data)
    fileobj.write(tail)
    fileobj.truncate()


def _set_last_flag(fileobj, descriptor, is_last):
    fileobj.seek(descriptor.header_offset)
    fileobj.write(encode_header(descriptor.type, descriptor.size, is_last))


def _trailing_padding(chain, comment):
    """The first padding block if it comes after the comment block"""

    padding, content = chain.first(BlockType.PADDING)
    if padding is not None and padding.offset > comment.offset:
        return padding
    return None


def write_comment(filename, chain, vorbis_comment, allow_shuffle=True):
    """Replaces the first comment block of the file with `vorbis_comment`.

    Returns the WriteStrategy used. Raises UsageError if the file has no
    comment block or the new one is too large, WriteError if writing
    failed.
    """

    comment, old = chain.first(BlockType.VORBIS_COMMENT)
    if comment is None:
        raise UsageError("File has no VORBIS_COMMENT block")

    body = vorbis_comment.write()
    header = encode_header(
        BlockType.VORBIS_COMMENT, len(body), comment.is_last)
    growth = len(body) - comment.size

    padding = _trailing_padding(chain, comment) if allow_shuffle else None
    strategy = choose_strategy(
        growth, padding.size if padding is not None else None)
    print_d("Writing %d byte comment block (%+d) using %s" % (
        len(body), growth, strategy.name))

    with translate_write_errors(filename), open(filename, "rb+") as h:
        if strategy == WriteStrategy.SHUFFLE:
            h.seek(comment.end)
            middle = h.read(padding.header_offset - comment.end)
            h.seek(comment.header_offset)
            h.write(header)
            h.write(body)
            h.write(middle)
            h.write(encode_header(
                BlockType.PADDING, padding.size - growth, padding.is_last))
            if growth < 0:
                h.write(b"\x00" * -growth)
        else:
            _splice(h, comment.header_offset, comment.size + HEADER_SIZE,
                    header + body)

    return strategy


def add_padding(filename, chain, size):
    """Appends a zeroed padding block of `size` bytes after the last
    metadata block.

    Raises UsageError if there is a padding block already.
    """

    if chain.padding is not None:
        raise UsageError("File already has a padding block",
                         block_type=BlockType.PADDING)

    header = encode_header(BlockType.PADDING, size, True)
    last = chain.last
    print_d("Adding %d bytes of padding after %s" % (size, last))

    with translate_write_errors(filename), open(filename, "rb+") as h:
        _splice(h, last.end, 0, header + b"\x00" * size)
        _set_last_flag(h, last, False)


def remove_padding(filename, chain):
    """Removes the first padding block.

    Returns False if there was nothing to remove.
    """

    padding, content = chain.first(BlockType.PADDING)
    if padding is None:
        return False

    print_d("Removing %s" % (padding,))
    with translate_write_errors(filename), open(filename, "rb+") as h:
        if padding.is_last:
            previous = chain.blocks[chain.index(padding) - 1]
            _set_last_flag(h, previous, True)
        _splice(h, padding.header_offset, padding.size + HEADER_SIZE, b"")

    return True


def resize_padding(filename, chain, size):
    """Sets the size of the first padding block, adds one if missing"""

    padding, content = chain.first(BlockType.PADDING)
    if padding is None:
        add_padding(filename, chain, size)
        return

    header = encode_header(BlockType.PADDING, size, padding.is_last)
    print_d("Resizing %s to %d bytes" % (padding, size))

    with translate_write_errors(filename), open(filename, "rb+") as h:
        _splice(h, padding.header_offset, padding.size + HEADER_SIZE,
                header + b"\x00" * size)
