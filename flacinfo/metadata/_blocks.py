# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

from typing import NamedTuple

from flacinfo.const import PLACEHOLDER_SAMPLE, SEEKPOINT_SIZE
from flacinfo.util import print_w


class Padding(NamedTuple):
    """Empty space for metadata blocks.

    Padding lets the comment block grow or shrink without rewriting the
    whole file. Only the first padding block is used for that.
    """

    size: int


class CueSheet(NamedTuple):
    """A cue sheet block. The content is not parsed."""

    size: int


class SeekPoint(NamedTuple):
    """A single seek point of the seek table.

    * sample_number -- first sample of the target frame or
      PLACEHOLDER_SAMPLE
    * byte_offset -- offset from the first frame header to the target
      frame header
    * frame_samples -- number of samples in the target frame
    """

    sample_number: int
    byte_offset: int
    frame_samples: int

    @property
    def is_placeholder(self):
        return self.sample_number == PLACEHOLDER_SAMPLE


class SeekTable:
    """The seek points of a seek table block, in file order"""

    def __init__(self, points):
        self.points = list(points)

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]

    def __repr__(self):
        return "<%s (%d points)>" % (type(self).__name__, len(self.points))


def decode_padding(reader, size):
    return Padding(size)


def decode_cuesheet(reader, size):
    return CueSheet(size)


def decode_seektable(reader, size):
    count, rest = divmod(size, SEEKPOINT_SIZE)
    if rest:
        print_w("Seek table has %d trailing bytes" % rest)

    points = []
    for i in range(count):
        points.append(SeekPoint(reader.uint(8), reader.uint(8), reader.uint(2)))
    return SeekTable(points)
