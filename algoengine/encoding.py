"""Canonical text encodings for structure snapshots.

Every structure exposes its state through one of these bracketed formats. The
format is consumed verbatim by existing callers, so there is no escaping,
whitespace or versioning: integers are rendered in base 10 with a leading
``-`` for negatives and items are joined with bare commas.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

__all__ = [
    "format_buckets",
    "format_int_list",
    "format_matrix",
    "format_pairs",
    "require_int",
]


def require_int(value: object, label: str = "value") -> int:
    """Return *value* unchanged when it is a plain integer.

    ``bool`` is rejected even though it subclasses ``int`` so that flags are
    never silently stored as keys or weights.
    """

    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{label} must be an integer")
    return value


def format_int_list(values: Iterable[int]) -> str:
    """Render *values* as ``[v1,v2,...]``."""

    return "[" + ",".join(str(value) for value in values) + "]"


def format_matrix(rows: Iterable[Sequence[int]]) -> str:
    """Render a row-major matrix as ``[[r0],[r1],...]``."""

    return "[" + ",".join(format_int_list(row) for row in rows) + "]"


def format_pairs(pairs: Iterable[Tuple[int, int]]) -> str:
    """Render ``(key, value)`` pairs as ``[k1:v1,k2:v2,...]``."""

    return "[" + ",".join(f"{key}:{value}" for key, value in pairs) + "]"


def format_buckets(buckets: Iterable[Iterable[Tuple[int, int]]]) -> str:
    """Render a sequence of pair lists as ``[[k:v,...],[...],...]``."""

    return "[" + ",".join(format_pairs(bucket) for bucket in buckets) + "]"
