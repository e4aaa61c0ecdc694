"""Fixed-size chaining hash table from integer keys to integer values."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterator, List, Optional, Tuple

from .config import EMPTY_READ_SENTINEL, HASH_BUCKET_COUNT, INT32_MIN
from .encoding import format_buckets, require_int

logger = logging.getLogger(__name__)

__all__ = ["HashNode", "HashTable"]


@dataclass(slots=True)
class HashNode:
    """Chain link holding one ``key -> value`` pair."""

    key: int
    value: int
    next: Optional["HashNode"] = None


class HashTable:
    """Ten-bucket hash map resolving collisions by chaining.

    New keys are prepended to their bucket's chain, so ``get_table`` lists
    each bucket newest-first. ``search`` returns ``-1`` for a missing key,
    which callers cannot tell apart from a stored ``-1``.
    """

    __slots__ = ("_buckets",)

    def __init__(self) -> None:
        self._buckets: List[Optional[HashNode]] = [None] * HASH_BUCKET_COUNT

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    @staticmethod
    def bucket_index(key: int) -> int:
        key = require_int(key, "key")
        if key == INT32_MIN:
            # A 32-bit host overflows on negation here; unbounded ints do not.
            logger.warning(
                "Key %d has no 32-bit absolute value; bucket computed with unbounded arithmetic",
                key,
            )
        return abs(key) % HASH_BUCKET_COUNT

    def insert(self, key: int, value: int) -> None:
        """Store *value* under *key*, replacing any existing value in place."""

        value = require_int(value, "value")
        index = self.bucket_index(key)
        current = self._buckets[index]
        while current is not None:
            if current.key == key:
                current.value = value
                return
            current = current.next
        self._buckets[index] = HashNode(key, value, self._buckets[index])

    def search(self, key: int) -> int:
        current = self._buckets[self.bucket_index(key)]
        while current is not None:
            if current.key == key:
                return current.value
            current = current.next
        return EMPTY_READ_SENTINEL

    def get_table(self) -> str:
        return format_buckets(list(self._chain(head)) for head in self._buckets)

    def clear(self) -> None:
        self._buckets = [None] * HASH_BUCKET_COUNT

    def __len__(self) -> int:
        return sum(1 for head in self._buckets for _ in self._chain(head))

    @staticmethod
    def _chain(head: Optional[HashNode]) -> Iterator[Tuple[int, int]]:
        current = head
        while current is not None:
            yield current.key, current.value
            current = current.next
