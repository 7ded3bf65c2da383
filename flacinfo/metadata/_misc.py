# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

import contextlib
import struct

from flacinfo.util import enum
from flacinfo.util.bitreader import BitReaderError


@enum
class ErrorKind(int):
    """What a failure means for the file on disk"""

    # bad arguments or state, nothing was touched
    USAGE = 0
    # the file could not be parsed, the FLACInfo instance is unusable
    DECODE = 1
    # writing failed midway, the file may be corrupt
    WRITE = 2


class FLACInfoError(Exception):
    """Base error. `offset` and `block_type` locate the failure in the file
    if known.
    """

    kind = None

    def __init__(self, message, offset=None, block_type=None):
        super().__init__(message)
        self.message = message
        self.offset = offset
        self.block_type = block_type

    def __str__(self):
        context = []
        if self.block_type is not None:
            context.append(self.block_type.name)
        if self.offset is not None:
            context.append("offset %d" % self.offset)
        if context:
            return "%s (%s)" % (self.message, ", ".join(context))
        return self.message


class UsageError(FLACInfoError):
    """Invalid arguments or an operation that doesn't apply to the file"""

    kind = ErrorKind.USAGE


class DecodeError(FLACInfoError):
    """Malformed or truncated metadata"""

    kind = ErrorKind.DECODE


class NotFLACError(DecodeError):
    """The file doesn't start with the FLAC signature"""


class WriteError(FLACInfoError):
    """Writing to the file failed, it might be left partially updated"""

    kind = ErrorKind.WRITE


@contextlib.contextmanager
def translate_decode_errors(block_type, offset):
    """Context manager for block decoders. Turns low level parsing errors
    into a DecodeError for the given block and fills in the location of
    errors raised by the decoder itself.
    """

    try:
        yield
    except FLACInfoError as e:
        if e.block_type is None:
            e.block_type = block_type
        if e.offset is None:
            e.offset = offset
        raise
    except (BitReaderError, struct.error, ValueError, EOFError) as e:
        raise DecodeError(
            "Could not parse block: %s" % (e or type(e).__name__),
            offset, block_type) from e


@contextlib.contextmanager
def translate_write_errors(filename):
    """Context manager for file surgery. Turns IO errors into WriteError."""

    try:
        yield
    except FLACInfoError:
        raise
    except OSError as e:
        raise WriteError(
            "Error writing new data to %r: %s" % (filename, e)) from e
