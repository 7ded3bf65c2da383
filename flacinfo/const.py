# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

import os
import sys

VERSION_TUPLE = (0, 3, 0)
VERSION = ".".join(map(str, VERSION_TUPLE))

DEBUG = ("--debug" in sys.argv or "FLACINFO_DEBUG" in os.environ)
"""Enables debug output of print_d()"""

CONFIG_ENV = "FLACINFO_CONFIG"
"""Environment variable pointing to an optional config file"""

FLAC_MAGIC = b"fLaC"

HEADER_SIZE = 4
"""Every metadata block header is 4 bytes, no matter the type"""

MAX_BLOCK_SIZE = 2 ** 24 - 1
"""Block sizes are stored as 24 bit integers"""

STREAMINFO_SIZE = 34

SEEKPOINT_SIZE = 18

PLACEHOLDER_SAMPLE = 0xFFFFFFFFFFFFFFFF
"""Sample number of a placeholder seek point"""

EMBEDDED_FILE_ID = "41544348"
"""Registered application id of the 'Flac File' embedded file format"""

APPLICATION_IDS = {
    "41544348": "Flac File",
    "43756573": "GoldWave Cue Points",
    "4d754d4c": "MusicML",
    "46696361": "CUE Splitter",
    "46746f6c": "flac-tools",
    "5346464c": "Sound Font FLAC",
    "7065656d": "Parseable Embedded Extensible Metadata",
    "74756e65": "TagTuner",
    "786d6364": "xmcd",
}
"""Registered application ids, see https://xiph.org/flac/id.html"""
