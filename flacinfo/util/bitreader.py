# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.


class BitReaderError(Exception):
    pass


class BitReader:
    """A read cursor over the body of a metadata block.

    Most fields are whole byte integers read with uint(), the few bit
    fields (STREAMINFO) with bits(). Reading past the end of `data`
    raises BitReaderError, so a decoder can't leave its block.

    `offset` is the position of the first byte of `data` in the file and
    only used by tell().
    """

    def __init__(self, data, offset=0):
        self._data = bytes(data)
        self._offset = offset
        self._pos = 0

    def _check(self, count):
        if count < 0:
            raise ValueError("negative count: %d" % count)
        if self._pos + count > len(self._data) * 8:
            raise BitReaderError(
                "not enough data, %d bits left" % self.remaining())

    def uint(self, size, byteorder="big"):
        """Reads a `size` byte unsigned integer in the given byte order"""

        return int.from_bytes(self.bytes(size), byteorder)

    def bits(self, count):
        """Reads `count` bits and returns an uint, MSB read first"""

        self._check(count)
        if not count:
            return 0

        end = self._pos + count
        first, last = self._pos // 8, (end + 7) // 8
        chunk = int.from_bytes(self._data[first:last], "big")
        self._pos = end
        return (chunk >> (last * 8 - end)) & ((1 << count) - 1)

    def bytes(self, count):
        """Returns bytes of length `count`. Works unaligned."""

        self._check(count * 8)
        if self.is_aligned():
            start = self._pos // 8
            self._pos += count * 8
            return self._data[start:start + count]
        return self.bits(count * 8).to_bytes(count, "big")

    def skip(self, count):
        """Skip `count` bits"""

        self._check(count)
        self._pos += count

    def remaining(self):
        """Number of bits left"""

        return len(self._data) * 8 - self._pos

    def get_position(self):
        """Returns the amount of bits read or skipped so far"""

        return self._pos

    def tell(self):
        """Returns the absolute byte offset in the file, needs alignment"""

        assert self.is_aligned()
        return self._offset + self._pos // 8

    def align(self):
        """Align to the next byte, returns the amount of bits skipped"""

        skipped = -self._pos % 8
        self._pos += skipped
        return skipped

    def is_aligned(self):
        return self._pos % 8 == 0
