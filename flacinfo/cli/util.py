# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

from flacinfo.util import print_
from flacinfo.util.dprint import Colorise
from flacinfo.metadata import BlockType


def print_table(rows, headers):
    """Print a fancy table"""

    rows = [headers] + [list(r) for r in rows]

    widths = []
    for c in range(len(headers)):
        widths.append(max(map(lambda r: len(r[c]), rows)))

    seperator = " %s " % Colorise.gray("|")
    format_string = seperator.join(["%%-%ds" % w for w in widths])

    header = []
    for i, h in enumerate(rows.pop(0)):
        header.append(h.ljust(widths[i], " "))
    line_width = len("   ".join(header)) + 2
    header = [Colorise.bold(h) for h in header]
    header_line = " " + (" %s " % Colorise.gray("|")).join(header)

    print_(header_line.rstrip())
    print_(Colorise.gray("-" * line_width))

    for row in rows:
        print_(" " + (format_string % tuple(row)).rstrip())


def print_terse_table(rows):
    """Print a terse table"""

    for row in rows:
        row = [r.replace("\\", "\\\\") for r in row]
        row = [r.replace(":", r"\:") for r in row]
        print_(":".join(row))


def list_comments(comments, terse=False):
    """Return a list of key, value pairs in file order"""

    tags = []
    for comment in comments:
        key, sep, value = comment.partition("=")
        if not terse:
            # keep the table layout intact
            value = value.rstrip("\r").replace("\t", " ")
            value = value.replace("\n", " ")
        tags.append((key, value))
    return tags


def streaminfo_lines(info):
    return [
        "minimum blocksize: %d samples" % info.min_blocksize,
        "maximum blocksize: %d samples" % info.max_blocksize,
        "minimum framesize: %d bytes" % info.min_framesize,
        "maximum framesize: %d bytes" % info.max_framesize,
        "sample rate: %d Hz" % info.sample_rate,
        "channels: %d" % info.channels,
        "bits-per-sample: %d" % info.bits_per_sample,
        "total samples: %d" % info.total_samples,
        "MD5 signature: %s" % info.md5_signature,
    ]


def seektable_lines(seektable):
    lines = ["seek points: %d" % len(seektable)]
    for i, point in enumerate(seektable):
        if point.is_placeholder:
            lines.append("  point %d: PLACEHOLDER" % i)
        else:
            lines.append(
                "  point %d: sample number: %d, stream offset: %d, "
                "frame samples: %d" % (
                    i, point.sample_number, point.byte_offset,
                    point.frame_samples))
    return lines


def _application_lines(app):
    lines = ["id: %s" % app.id, "application name: %s" % app.name]
    embedded = app.embedded_file
    if embedded is not None:
        lines.append("  description: %s" % embedded.description)
        lines.append("  mime type: %s" % embedded.mime_type)
        if embedded.is_text:
            lines.append("  raw data:")
            text = embedded.data.decode("utf-8", "replace")
            lines.extend("    " + l for l in text.splitlines())
        else:
            lines.append("  data: %d bytes, use 'dump-file' to extract"
                         % len(embedded.data))
    else:
        lines.append("  data: %d bytes" % len(app.data))
    return lines


def _comment_lines(vc):
    lines = ["vendor string: %s" % vc.vendor,
             "comments: %d" % len(vc.comments)]
    for i, comment in enumerate(vc.comments):
        lines.append("  comment[%d]: %s" % (i, comment))
    return lines


def _picture_lines(picture):
    return [
        "type: %d (%s)" % (picture.type, picture.type_name),
        "mime type: %s" % picture.mime_type,
        "description: %s" % picture.description,
        "width: %d" % picture.width,
        "height: %d" % picture.height,
        "depth: %d" % picture.colour_depth,
        "colors: %d" % picture.colours,
        "data length: %d" % picture.data_length,
    ]


def block_lines(index, descriptor, content):
    """Describes a single block in the style of 'metaflac --list'"""

    lines = [
        "METADATA block #%d" % index,
        "  type: %d (%s)" % (descriptor.type, descriptor.type.name),
        "  is last: %s" % ("true" if descriptor.is_last else "false"),
        "  length: %d" % descriptor.size,
    ]

    type_ = descriptor.type
    if type_ == BlockType.STREAMINFO:
        body = streaminfo_lines(content)
    elif type_ == BlockType.APPLICATION:
        body = _application_lines(content)
    elif type_ == BlockType.SEEKTABLE:
        body = seektable_lines(content)
    elif type_ == BlockType.VORBIS_COMMENT:
        body = _comment_lines(content)
    elif type_ == BlockType.PICTURE:
        body = _picture_lines(content)
    else:
        body = []

    lines.extend("  " + l for l in body)
    return lines
