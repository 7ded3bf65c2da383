# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

from typing import NamedTuple

from flacinfo.const import APPLICATION_IDS, EMBEDDED_FILE_ID

from ._misc import DecodeError


class EmbeddedFile(NamedTuple):
    """Payload of a 'Flac File' application block, an arbitrary file with
    a description and a MIME type. See http://firestuff.org/flacfile/
    """

    description: str
    mime_type: str
    data: bytes

    @property
    def is_text(self):
        return self.mime_type.startswith("text")


class Application(NamedTuple):
    """An application block.

    `id` is the registered application id as 8 hex characters. For
    embedded files the payload is decoded into `embedded_file` and
    `data` is None, otherwise `data` holds the raw payload.
    """

    id: str
    data: bytes | None
    embedded_file: EmbeddedFile | None = None

    @property
    def name(self):
        """Name of the registered application or an empty string"""

        return APPLICATION_IDS.get(self.id, "")


def _decode_embedded_file(reader, size):
    desc_length = reader.uint(1)
    description = reader.bytes(desc_length)
    mime_length = reader.uint(1)
    mime_type = reader.bytes(mime_length)
    remaining = size - 2 - desc_length - mime_length
    if remaining < 0:
        raise DecodeError("Embedded file header exceeds block size")
    data = reader.bytes(remaining)

    return EmbeddedFile(
        description.decode("utf-8", "replace"),
        mime_type.decode("ascii", "replace"),
        data)


def decode_application(reader, size):
    if size < 4:
        raise DecodeError("APPLICATION block too small (%d bytes)" % size)

    app_id = reader.bytes(4).hex()
    if app_id == EMBEDDED_FILE_ID:
        return Application(
            app_id, None, _decode_embedded_file(reader, size - 4))
    return Application(app_id, reader.bytes(size - 4))
