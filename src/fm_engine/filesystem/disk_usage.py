"""Disk-usage accounting.

Reported sizes are the storage actually consumed, not the apparent length,
wherever the platform exposes block counts. The accessor is chosen once at
import time.
"""

import os

# st_blocks is always counted in 512-byte units, independent of st_blksize.
BLOCK_UNIT = 512


def block_usage(stat_result: os.stat_result) -> int:
    """Return allocated blocks times the block unit."""
    return stat_result.st_blocks * BLOCK_UNIT


def logical_size(stat_result: os.stat_result) -> int:
    """Return the logical file length."""
    return stat_result.st_size


if hasattr(os.stat_result, "st_blocks"):
    disk_usage = block_usage
else:
    disk_usage = logical_size
