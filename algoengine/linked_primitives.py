"""Queue, stack and priority-queue primitives backing the graph algorithms.

``Queue`` and ``Stack`` are singly linked containers of integers. ``MinHeap``
is a fixed-capacity, 1-indexed binary heap of ``(vertex, key)`` entries used by
Dijkstra and Prim. It deliberately has no decrease-key: callers push a fresh
entry on every relaxation and skip stale entries when they are popped.

Reads from an empty container never raise. They return the sentinels defined
in :mod:`algoengine.config` so callers that care must check ``empty()`` first.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import List, Optional

from .config import EMPTY_READ_SENTINEL, INFINITY_DISTANCE
from .encoding import require_int

logger = logging.getLogger(__name__)

__all__ = [
    "ListNode",
    "MinHeap",
    "PQEntry",
    "Queue",
    "Stack",
]


@dataclass(slots=True)
class ListNode:
    """Singly linked node owning its successor."""

    data: int
    next: Optional["ListNode"] = None


class Queue:
    """FIFO queue of integers backed by a singly linked list."""

    __slots__ = ("_front", "_rear", "_size")

    def __init__(self) -> None:
        self._front: Optional[ListNode] = None
        self._rear: Optional[ListNode] = None
        self._size = 0

    def enqueue(self, data: int) -> None:
        node = ListNode(require_int(data, "data"))
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> None:
        """Drop the front element; a no-op on an empty queue."""

        if self._front is None:
            return
        self._front = self._front.next
        if self._front is None:
            self._rear = None
        self._size -= 1

    def front(self) -> int:
        """Return the front element or ``-1`` when the queue is empty."""

        if self._front is None:
            return EMPTY_READ_SENTINEL
        return self._front.data

    def empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size


class Stack:
    """LIFO stack of integers backed by a singly linked list."""

    __slots__ = ("_top", "_size")

    def __init__(self) -> None:
        self._top: Optional[ListNode] = None
        self._size = 0

    def push(self, data: int) -> None:
        self._top = ListNode(require_int(data, "data"), self._top)
        self._size += 1

    def pop(self) -> None:
        """Drop the top element; a no-op on an empty stack."""

        if self._top is None:
            return
        self._top = self._top.next
        self._size -= 1

    def top(self) -> int:
        """Return the top element or ``-1`` when the stack is empty."""

        if self._top is None:
            return EMPTY_READ_SENTINEL
        return self._top.data

    def empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size


@dataclass(frozen=True, slots=True)
class PQEntry:
    """Priority-queue entry ordering *vertex* by *key*."""

    vertex: int
    key: int


EMPTY_ENTRY = PQEntry(vertex=-1, key=INFINITY_DISTANCE)


class MinHeap:
    """Fixed-capacity binary min-heap of :class:`PQEntry` items.

    Comparisons are strict, so entries with equal keys keep their relative
    heap positions. Duplicate entries for the same vertex may coexist.
    """

    __slots__ = ("_heap", "_size", "_capacity")

    def __init__(self, capacity: int) -> None:
        self._capacity = max(require_int(capacity, "capacity"), 0)
        # Slot 0 is unused so that children of i sit at 2i and 2i + 1.
        self._heap: List[PQEntry] = [EMPTY_ENTRY] * (self._capacity + 1)
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, vertex: int, key: int) -> None:
        """Add an entry; silently dropped once the heap is full."""

        if self._size >= self._capacity:
            logger.debug("Priority queue full (%d); dropping vertex %d", self._capacity, vertex)
            return
        self._size += 1
        self._heap[self._size] = PQEntry(require_int(vertex, "vertex"), require_int(key, "key"))
        self._sift_up(self._size)

    def pop(self) -> PQEntry:
        """Remove and return the minimum entry, or ``PQEntry(-1, 999999)``."""

        if self._size == 0:
            return EMPTY_ENTRY
        top = self._heap[1]
        self._heap[1] = self._heap[self._size]
        self._size -= 1
        if self._size > 0:
            self._sift_down(1)
        return top

    def empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 1 and heap[index].key < heap[index // 2].key:
            parent = index // 2
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        while True:
            smallest = index
            left = 2 * index
            right = left + 1
            if left <= self._size and heap[left].key < heap[smallest].key:
                smallest = left
            if right <= self._size and heap[right].key < heap[smallest].key:
                smallest = right
            if smallest == index:
                return
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest
