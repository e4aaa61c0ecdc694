"""Array-backed binary heap with switchable min/max ordering.

The heap stores at most :data:`~algoengine.config.HEAP_CAPACITY` integers in a
1-indexed list (slot 0 unused), so the children of slot ``i`` live at ``2i``
and ``2i + 1``. Switching modes re-heapifies the occupied prefix bottom-up in
``O(n)``.

Overflow and empty reads are not errors: inserting into a full heap is a
no-op and extracting from an empty heap returns ``-999999``.
"""

from __future__ import annotations

import logging
from typing import List

from .config import EMPTY_HEAP_SENTINEL, HEAP_CAPACITY
from .encoding import format_int_list, require_int

logger = logging.getLogger(__name__)

__all__ = ["BinaryHeap"]


class BinaryHeap:
    """Binary heap over integers, ordered as a min-heap or a max-heap."""

    __slots__ = ("_array", "_size", "_capacity", "_is_min")

    def __init__(self, min_heap: bool = True) -> None:
        self._capacity = HEAP_CAPACITY
        self._array: List[int] = [0] * (self._capacity + 1)
        self._size = 0
        self._is_min = bool(min_heap)

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------
    def insert(self, value: int) -> None:
        """Append *value* and restore heap order by sifting it up."""

        value = require_int(value)
        if self._size == self._capacity:
            logger.debug("Heap at capacity %d; ignoring %d", self._capacity, value)
            return
        self._size += 1
        self._array[self._size] = value
        self._sift_up(self._size)

    def extract_top(self) -> int:
        """Remove and return the root, or ``-999999`` when empty."""

        if self._size == 0:
            return EMPTY_HEAP_SENTINEL
        root = self._array[1]
        self._array[1] = self._array[self._size]
        self._size -= 1
        if self._size > 0:
            self._sift_down(1)
        return root

    def convert_to_min_heap(self) -> None:
        self._is_min = True
        self._build_heap()

    def convert_to_max_heap(self) -> None:
        self._is_min = False
        self._build_heap()

    @property
    def is_min_heap(self) -> bool:
        return self._is_min

    def clear(self) -> None:
        """Forget every element; the backing storage is reused."""

        self._size = 0

    def get_array(self) -> str:
        """Return the occupied slots in level order, e.g. ``[1,3,8,5]``."""

        return format_int_list(self._array[1 : self._size + 1])

    def __len__(self) -> int:
        return self._size

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _outranks(self, a: int, b: int) -> bool:
        return a < b if self._is_min else a > b

    def _sift_up(self, index: int) -> None:
        array = self._array
        while index > 1:
            parent = index // 2
            if not self._outranks(array[index], array[parent]):
                break
            array[index], array[parent] = array[parent], array[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        array = self._array
        while True:
            target = index
            left = 2 * index
            right = left + 1
            if left <= self._size and self._outranks(array[left], array[target]):
                target = left
            if right <= self._size and self._outranks(array[right], array[target]):
                target = right
            if target == index:
                return
            array[index], array[target] = array[target], array[index]
            index = target

    def _build_heap(self) -> None:
        for index in range(self._size // 2, 0, -1):
            self._sift_down(index)
