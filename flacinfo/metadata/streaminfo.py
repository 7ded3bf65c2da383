# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

from typing import NamedTuple

from flacinfo.const import STREAMINFO_SIZE

from ._misc import DecodeError


class StreamInfo(NamedTuple):
    """FLAC stream information.

    Describes the audio stream; the only block every FLAC file must have
    and always the first one.

    Attributes:

    * min_blocksize, max_blocksize -- audio block sizes in samples
    * min_framesize, max_framesize -- frame sizes in bytes, 0 if unknown
    * sample_rate -- sample rate in Hz
    * channels -- number of channels
    * bits_per_sample -- bits per sample
    * total_samples -- samples per channel, 0 if unknown
    * md5_signature -- MD5 of the unencoded audio as 32 hex characters
    """

    min_blocksize: int
    max_blocksize: int
    min_framesize: int
    max_framesize: int
    sample_rate: int
    channels: int
    bits_per_sample: int
    total_samples: int
    md5_signature: str

    @property
    def length(self):
        """Audio length in seconds"""

        if not self.sample_rate:
            return 0.0
        return self.total_samples / float(self.sample_rate)


def decode_streaminfo(reader, size):
    if size < STREAMINFO_SIZE:
        raise DecodeError("STREAMINFO block too small (%d bytes)" % size)

    min_blocksize = reader.uint(2)
    max_blocksize = reader.uint(2)
    min_framesize = reader.uint(3)
    max_framesize = reader.uint(3)
    # 64 bits MSB first
    sample_rate = reader.bits(20)
    channels = reader.bits(3) + 1
    bits_per_sample = reader.bits(5) + 1
    total_samples = reader.bits(36)
    md5_signature = reader.bytes(16).hex()

    return StreamInfo(
        min_blocksize, max_blocksize, min_framesize, max_framesize,
        sample_rate, channels, bits_per_sample, total_samples,
        md5_signature)
