"""Fixed bounds, sentinels and diagnostic messages shared by the structures.

The serialised encodings and the capacity-overflow behaviour depend on these
exact values, so they are plain module constants rather than runtime options.
"""

from __future__ import annotations

HEAP_CAPACITY = 100
EMPTY_HEAP_SENTINEL = -999999
INFINITY_DISTANCE = 999999
EMPTY_READ_SENTINEL = -1
NO_PARENT = -1
HASH_BUCKET_COUNT = 10

# Host integer range of the visualiser the encodings were designed for.
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

NO_ROTATION_MESSAGE = "No rotations performed"
LEFT_ROTATION_TEMPLATE = "Left rotation on node {value}"
RIGHT_ROTATION_TEMPLATE = "Right rotation on node {value}"

__all__ = [
    "EMPTY_HEAP_SENTINEL",
    "EMPTY_READ_SENTINEL",
    "HASH_BUCKET_COUNT",
    "HEAP_CAPACITY",
    "INFINITY_DISTANCE",
    "INT32_MAX",
    "INT32_MIN",
    "LEFT_ROTATION_TEMPLATE",
    "NO_PARENT",
    "NO_ROTATION_MESSAGE",
    "RIGHT_ROTATION_TEMPLATE",
]
