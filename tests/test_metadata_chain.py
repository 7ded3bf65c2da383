# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

import os
from io import BytesIO

from tests import TestCase, mkdtemp
from .helper import build_flac, write_flac, default_blocks, \
    streaminfo_body, comment_body, picture_body, seektable_body, \
    application_body, embedded_file_body, CUESHEET_BODY, STREAMINFO, \
    PADDING, APPLICATION, SEEKTABLE, VORBIS_COMMENT, CUESHEET, PICTURE, \
    AUDIO

from flacinfo.metadata import BlockType, DECODERS, DecodeError, \
    NotFLACError, MetadataChain, MetadataBlockDescriptor, parse, read_chain


def all_blocks():
    return [
        (STREAMINFO, streaminfo_body()),
        (APPLICATION, application_body(b"xmcd", b"data")),
        (SEEKTABLE, seektable_body([(0, 0, 4096)])),
        (VORBIS_COMMENT, comment_body(["TITLE=t"])),
        (CUESHEET, CUESHEET_BODY),
        (PICTURE, picture_body()),
        (PICTURE, picture_body(type_=4, mime="image/jpeg")),
        (APPLICATION, embedded_file_body(b"d", b"text/plain", b"x")),
        (PADDING, b"\x00" * 100),
    ]


def read(data):
    return read_chain(BytesIO(data))


class TDecoders(TestCase):

    def test_exhaustive(self):
        self.assertEqual(set(DECODERS), set(BlockType.values))


class TChain(TestCase):

    def test_minimal(self):
        chain = read(build_flac([(STREAMINFO, streaminfo_body())]))
        self.assertEqual(len(chain), 1)
        self.assertEqual(chain.blocks[0], MetadataBlockDescriptor(
            BlockType.STREAMINFO, True, 8, 34))
        self.assertEqual(chain.streaminfo.sample_rate, 44100)
        self.assertTrue(chain.vorbis_comment is None)
        self.assertTrue(chain.padding is None)
        self.assertTrue(chain.seektable is None)
        self.assertTrue(chain.cuesheet is None)
        self.assertEqual(chain.pictures, [])
        self.assertEqual(chain.applications, [])
        self.assertEqual(chain.audio_offset, 42)

    def test_all_types(self):
        chain = read(build_flac(all_blocks()))
        types = [d.type for d in chain.blocks]
        self.assertEqual(types, [b[0] for b in all_blocks()])
        self.assertEqual([d.is_last for d in chain.blocks],
                         [False] * 8 + [True])
        self.assertEqual(chain.last.type, BlockType.PADDING)
        self.assertEqual(chain.padding.size, 100)
        self.assertEqual(chain.vorbis_comment.comments, ["TITLE=t"])
        self.assertEqual(len(chain.seektable), 1)
        self.assertEqual(chain.cuesheet.size, 396)
        self.assertEqual(len(chain.pictures), 2)
        self.assertEqual(chain.pictures[1].mime_type, "image/jpeg")
        self.assertEqual(len(chain.applications), 2)
        self.assertTrue(chain.applications[1].embedded_file is not None)

    def test_offsets_contiguous(self):
        data = build_flac(all_blocks())
        chain = read(data)
        offset = 4
        for d in chain.blocks:
            self.assertEqual(d.header_offset, offset)
            offset = d.end
        self.assertEqual(chain.audio_offset, len(data) - len(AUDIO))

    def test_find_first(self):
        chain = read(build_flac(all_blocks()))
        pictures = chain.find(BlockType.PICTURE)
        self.assertEqual(len(pictures), 2)
        self.assertEqual(pictures[0][0].type, BlockType.PICTURE)
        self.assertEqual(chain.first(BlockType.PADDING)[0], chain.last)
        chain = read(build_flac([(STREAMINFO, streaminfo_body())]))
        self.assertEqual(chain.first(BlockType.PADDING), (None, None))
        self.assertEqual(chain.find(BlockType.PICTURE), [])

    def test_duplicate_comment_first_wins(self):
        chain = read(build_flac([
            (STREAMINFO, streaminfo_body()),
            (VORBIS_COMMENT, comment_body(["A=1"])),
            (VORBIS_COMMENT, comment_body(["B=2"])),
        ]))
        self.assertEqual(chain.vorbis_comment.comments, ["A=1"])
        self.assertEqual(len(chain.find(BlockType.VORBIS_COMMENT)), 2)

    def test_first_padding(self):
        chain = read(build_flac([
            (STREAMINFO, streaminfo_body()),
            (PADDING, b"\x00" * 10),
            (PADDING, b"\x00" * 20),
        ]))
        self.assertEqual(chain.padding.size, 10)

    def test_stops_at_last_block(self):
        # whatever follows the last block is audio
        data = build_flac([(STREAMINFO, streaminfo_body())],
                          audio=b"\x07\x00\x00\x00garbage")
        chain = read(data)
        self.assertEqual(len(chain), 1)

    def test_not_flac(self):
        self.assertRaises(NotFLACError, read, b"OggS" + b"\x00" * 100)
        self.assertRaises(NotFLACError, read, b"")
        self.assertRaises(NotFLACError, read, b"fLa")

    def test_first_not_streaminfo(self):
        data = build_flac([(VORBIS_COMMENT, comment_body([])),
                           (STREAMINFO, streaminfo_body())])
        with self.assertRaises(DecodeError) as ctx:
            read(data)
        self.assertEqual(ctx.exception.block_type, BlockType.VORBIS_COMMENT)

    def test_second_streaminfo(self):
        data = build_flac([(STREAMINFO, streaminfo_body()),
                           (STREAMINFO, streaminfo_body())])
        self.assertRaises(DecodeError, read, data)

    def test_streaminfo_too_small(self):
        data = build_flac([(STREAMINFO, streaminfo_body()[:20])])
        with self.assertRaises(DecodeError) as ctx:
            read(data)
        self.assertEqual(ctx.exception.block_type, BlockType.STREAMINFO)

    def test_invalid_block_type(self):
        blocks = default_blocks()
        blocks.insert(1, (7, b"\x00" * 8))
        self.assertRaises(DecodeError, read, build_flac(blocks))

    def test_missing_last_flag(self):
        data = build_flac([(STREAMINFO, streaminfo_body()),
                           (PADDING, b"")], audio=b"")
        # clear the flag of the padding block
        data = data[:42] + b"\x01" + data[43:]
        self.assertRaises(DecodeError, read, data)

    def test_truncated_block(self):
        data = build_flac(default_blocks(), audio=b"")
        self.assertRaises(DecodeError, read, data[:-10])

    def test_corrupt_block_body(self):
        blocks = default_blocks()
        blocks[1] = (VORBIS_COMMENT, b"\xff\xff\xff\x7f")
        with self.assertRaises(DecodeError) as ctx:
            read(build_flac(blocks))
        self.assertEqual(ctx.exception.block_type, BlockType.VORBIS_COMMENT)
        self.assertEqual(ctx.exception.offset, 46)

    def test_decoder_stays_in_block(self):
        # the description length reaches into the comment block
        blocks = default_blocks()
        blocks.insert(1, (APPLICATION, b"ATCH\x20ab"))
        with self.assertRaises(DecodeError) as ctx:
            read(build_flac(blocks))
        self.assertEqual(ctx.exception.block_type, BlockType.APPLICATION)
        self.assertEqual(ctx.exception.offset, 46)

    def test_decoder_error_translated(self):
        # the MIME type length points past the end of the block
        blocks = default_blocks()
        blocks.insert(1, (PICTURE, picture_body()[:10]))
        self.assertRaises(DecodeError, read, build_flac(blocks))

    def test_repr(self):
        chain = read(build_flac(default_blocks()))
        self.assertTrue("VORBIS_COMMENT" in repr(chain))

    def test_invariants(self):
        self.assertRaises(AssertionError, MetadataChain, [])


class TParse(TestCase):

    def setUp(self):
        self.dir = mkdtemp()
        self.filename = os.path.join(self.dir, "test.flac")

    def tearDown(self):
        os.remove(self.filename)
        os.rmdir(self.dir)

    def test_parse(self):
        write_flac(self.filename)
        chain = parse(self.filename)
        self.assertEqual([d.type for d in chain.blocks], [
            BlockType.STREAMINFO, BlockType.VORBIS_COMMENT,
            BlockType.PADDING])
        self.assertEqual(chain.padding.size, 4096)

    def test_missing(self):
        with open(self.filename, "wb"):
            pass
        self.assertRaises(OSError, parse, self.filename + "nope")
        self.assertRaises(NotFLACError, parse, self.filename)
