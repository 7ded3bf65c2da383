# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""Reading and writing of FLAC metadata blocks"""

from ._misc import ErrorKind, FLACInfoError, UsageError, DecodeError, \
    NotFLACError, WriteError, translate_decode_errors, translate_write_errors
from ._header import BlockType, BlockHeader, MetadataBlockDescriptor, \
    encode_header
from ._blocks import Padding, CueSheet, SeekPoint, SeekTable
from .streaminfo import StreamInfo
from .application import Application, EmbeddedFile
from .vorbis import VorbisComment, is_valid_key, split_comment, \
    validate_comment
from .picture import Picture, PictureType
from .chain import MetadataChain, DECODERS, parse, read_chain
from .writer import WriteStrategy, choose_strategy, write_comment, \
    add_padding, remove_padding, resize_padding


__all__ = [
    "ErrorKind", "FLACInfoError", "UsageError", "DecodeError",
    "NotFLACError", "WriteError", "translate_decode_errors",
    "translate_write_errors", "BlockType", "BlockHeader",
    "MetadataBlockDescriptor", "encode_header", "Padding", "CueSheet",
    "SeekPoint", "SeekTable", "StreamInfo", "Application", "EmbeddedFile",
    "VorbisComment", "is_valid_key", "split_comment", "validate_comment",
    "Picture", "PictureType", "MetadataChain", "DECODERS", "parse",
    "read_chain", "WriteStrategy", "choose_strategy", "write_comment",
    "add_padding", "remove_padding", "resize_padding",
]
