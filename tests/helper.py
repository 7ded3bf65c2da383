# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

import os
import contextlib
import sys
import errno
import struct
from io import StringIO

from senf import environ
from mutagen.flac import StreamInfo, SeekTable, SeekPoint, VCFLACDict, \
    Picture


@contextlib.contextmanager
def preserve_environ():
    old = environ.copy()
    yield
    for key, value in list(environ.items()):
        if key not in old:
            del environ[key]
    for key, value in old.items():
        if key not in environ or environ[key] != value:
            environ[key] = value


@contextlib.contextmanager
def capture_output():
    """
    with capture_output() as (stdout, stderr):
        some_action()
    print stdout.getvalue(), stderr.getvalue()
    """

    err = StringIO()
    out = StringIO()
    old_err = sys.stderr
    old_out = sys.stdout
    sys.stderr = err
    sys.stdout = out

    try:
        yield (out, err)
    finally:
        sys.stderr = old_err
        sys.stdout = old_out


@contextlib.contextmanager
def temp_filename(*args, **kwargs):
    """Creates an empty file and removes it when done.

        with temp_filename() as filename:
            with open(filename, 'w') as h:
                h.write("foo")
            do_stuff(filename)
    """

    from tests import mkstemp

    fd, filename = mkstemp(*args, **kwargs)
    os.close(fd)

    yield filename

    try:
        os.remove(filename)
    except OSError as e:
        if e.errno != errno.ENOENT:
            raise


# block types, spelled out so the tests don't depend on the code under test
STREAMINFO = 0
PADDING = 1
APPLICATION = 2
SEEKTABLE = 3
VORBIS_COMMENT = 4
CUESHEET = 5
PICTURE = 6

MD5 = 0x0123456789ABCDEF0123456789ABCDEF

VENDOR = "reference libFLAC 1.3.2 20170101"

# doesn't need to be valid audio, only recognizable
AUDIO = b"\xff\xf8\x69\x08" + bytes(range(256)) * 4

# valid empty cue sheet: catalog, lead-in, flags, reserved, no tracks
CUESHEET_BODY = b"\x00" * 396


def streaminfo_body(sample_rate=44100, channels=2, bits_per_sample=16,
                    total_samples=441000):
    """A STREAMINFO body as written by mutagen"""

    info = StreamInfo(None)
    info.min_blocksize = 4096
    info.max_blocksize = 4096
    info.min_framesize = 14
    info.max_framesize = 8237
    info.sample_rate = sample_rate
    info.channels = channels
    info.bits_per_sample = bits_per_sample
    info.total_samples = total_samples
    info.md5_signature = MD5
    return info.write()


def comment_body(comments, vendor=VENDOR):
    """A VORBIS_COMMENT body for a list of 'KEY=VALUE' strings"""

    vc = VCFLACDict()
    vc.vendor = vendor
    for comment in comments:
        key, value = comment.split("=", 1)
        vc.append((key, value))
    return vc.write()


def picture_body(type_=3, mime="image/png", desc="front", data=b"PNGDATA",
                 width=300, height=200, depth=24, colors=0):
    pic = Picture()
    pic.type = type_
    pic.mime = mime
    pic.desc = desc
    pic.width = width
    pic.height = height
    pic.depth = depth
    pic.colors = colors
    pic.data = data
    return pic.write()


def seektable_body(points):
    table = SeekTable(None)
    table.seekpoints = [SeekPoint(*p) for p in points]
    return table.write()


def application_body(app_id, payload):
    return app_id + payload


def embedded_file_body(description, mime, data):
    """A 'Flac File' application block body"""

    return (b"ATCH" + bytes([len(description)]) + description +
            bytes([len(mime)]) + mime + data)


def build_flac(blocks, audio=AUDIO):
    """Returns the bytes of a FLAC file with the given (type, body) blocks.

    The last block gets the last-block flag.
    """

    data = [b"fLaC"]
    for i, (type_, body) in enumerate(blocks):
        if i == len(blocks) - 1:
            type_ |= 0x80
        data.append(bytes([type_]) + struct.pack(">I", len(body))[-3:])
        data.append(body)
    data.append(audio)
    return b"".join(data)


def default_blocks(comments=None, padding=4096):
    """STREAMINFO, VORBIS_COMMENT and optionally PADDING"""

    if comments is None:
        comments = ["TITLE=Song", "ARTIST=Someone", "ALBUM=Record"]
    blocks = [(STREAMINFO, streaminfo_body()),
              (VORBIS_COMMENT, comment_body(comments))]
    if padding is not None:
        blocks.append((PADDING, b"\x00" * padding))
    return blocks


def write_flac(filename, blocks=None, audio=AUDIO):
    if blocks is None:
        blocks = default_blocks()
    with open(filename, "wb") as h:
        h.write(build_flac(blocks, audio))


def read_file(filename):
    with open(filename, "rb") as h:
        return h.read()
