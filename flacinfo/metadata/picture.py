# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

import quopri
from typing import NamedTuple

from flacinfo.util import enum

from ._misc import DecodeError


@enum
class PictureType(int):
    """Picture roles as defined for ID3v2 APIC frames, reused by FLAC"""

    OTHER = 0
    FILE_ICON = 1
    OTHER_FILE_ICON = 2
    COVER_FRONT = 3
    COVER_BACK = 4
    LEAFLET_PAGE = 5
    MEDIA = 6
    LEAD_ARTIST = 7
    ARTIST = 8
    CONDUCTOR = 9
    BAND = 10
    COMPOSER = 11
    LYRICIST = 12
    RECORDING_LOCATION = 13
    DURING_RECORDING = 14
    DURING_PERFORMANCE = 15
    SCREEN_CAPTURE = 16
    FISH = 17
    ILLUSTRATION = 18
    BAND_LOGOTYPE = 19
    PUBLISHER_LOGOTYPE = 20

    @property
    def description(self):
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = [
    "Other", "32x32 pixels file icon", "Other file icon", "Cover (front)",
    "Cover (back)", "Leaflet page", "Media",
    "Lead artist/lead performer/soloist", "Artist/performer", "Conductor",
    "Band/Orchestra", "Composer", "Lyricist/text writer",
    "Recording Location", "During recording", "During performance",
    "Movie/video screen capture", "A bright coloured fish", "Illustration",
    "Band/artist logotype", "Publisher/Studio logotype",
]


class Picture(NamedTuple):
    """An embedded picture.

    The image data itself isn't loaded, `data_offset` and `data_length`
    locate it in the file. Use read_data() to get it.
    """

    type: PictureType
    mime_type: str
    description: str
    width: int
    height: int
    colour_depth: int
    colours: int
    data_offset: int
    data_length: int

    @property
    def type_name(self):
        return self.type.description

    @property
    def extension(self):
        """File extension derived from the MIME type, e.g. "jpeg" """

        subtype = self.mime_type.partition("/")[2]
        return subtype.split(";")[0].strip() or "bin"

    def read_data(self, filename):
        """Returns the image data, read from `filename`.

        Raises OSError.
        """

        with open(filename, "rb") as h:
            h.seek(self.data_offset)
            data = h.read(self.data_length)
        if len(data) != self.data_length:
            raise OSError("Picture data truncated in %r" % filename)
        return data


def _read_string(reader, size):
    length = reader.uint(4)
    if reader.get_position() // 8 + length > size:
        raise DecodeError("String length exceeds block size")
    return reader.bytes(length)


def decode_picture(reader, size):
    try:
        type_ = PictureType.value_of(reader.uint(4))
    except ValueError as e:
        raise DecodeError("Invalid picture type: %s" % e) from e

    mime_type = _read_string(reader, size).decode("ascii", "replace")
    description = _read_string(reader, size)
    description = quopri.decodestring(description).decode("utf-8", "replace")
    width = reader.uint(4)
    height = reader.uint(4)
    colour_depth = reader.uint(4)
    colours = reader.uint(4)
    data_length = reader.uint(4)
    data_offset = reader.tell()

    if reader.get_position() // 8 + data_length > size:
        raise DecodeError("Picture data exceeds block size")
    reader.skip(data_length * 8)

    return Picture(
        type_, mime_type, description, width, height, colour_depth,
        colours, data_offset, data_length)
