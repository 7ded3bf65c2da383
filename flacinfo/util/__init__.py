# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

from senf import print_

from flacinfo.util.dprint import print_d, print_e, print_w, print_exc
from .enum import enum


# flake8
print_, print_d, print_e, print_w, print_exc, enum


def format_size(size):
    """Turn an integer size value into something human-readable."""

    if size >= 1024 ** 2:
        return "%.1f MB" % (float(size) / 1024 ** 2)
    elif size >= 1024:
        return "%.1f KB" % (float(size) / 1024)
    return "%d B" % size


def format_time(seconds):
    """Turn a time value in seconds into m:ss or h:mm:ss."""

    seconds = int(seconds)
    if seconds >= 3600:
        return "%d:%02d:%02d" % (
            seconds // 3600, (seconds % 3600) // 60, seconds % 60)
    return "%d:%02d" % (seconds // 60, seconds % 60)
