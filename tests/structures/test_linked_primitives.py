from __future__ import annotations

import pytest

from algoengine.linked_primitives import MinHeap, PQEntry, Queue, Stack


def test_queue_is_first_in_first_out() -> None:
    queue = Queue()
    for value in (3, -1, 7):
        queue.enqueue(value)

    drained = []
    while not queue.empty():
        drained.append(queue.front())
        queue.dequeue()

    assert drained == [3, -1, 7]
    assert len(queue) == 0


def test_queue_empty_reads_return_sentinel() -> None:
    queue = Queue()
    assert queue.front() == -1
    queue.dequeue()  # no-op
    assert queue.empty()
    queue.enqueue(5)
    queue.dequeue()
    queue.enqueue(6)
    assert queue.front() == 6


def test_stack_is_last_in_first_out() -> None:
    stack = Stack()
    for value in (1, 2, 3):
        stack.push(value)

    assert len(stack) == 3
    drained = []
    while not stack.empty():
        drained.append(stack.top())
        stack.pop()
    assert drained == [3, 2, 1]


def test_stack_empty_reads_return_sentinel() -> None:
    stack = Stack()
    assert stack.top() == -1
    stack.pop()  # no-op
    assert len(stack) == 0


def test_min_heap_pops_in_key_order_with_duplicates() -> None:
    heap = MinHeap(10)
    for vertex, key in ((0, 5), (1, 2), (2, 9), (1, 1), (3, 2)):
        heap.push(vertex, key)

    keys = []
    while not heap.empty():
        keys.append(heap.pop().key)
    assert keys == [1, 2, 2, 5, 9]


def test_min_heap_equal_keys_pop_in_heap_position_order() -> None:
    heap = MinHeap(8)
    for vertex in (5, 6, 7, 8):
        heap.push(vertex, 1)

    # Strict comparisons never swap equal keys, so the last leaf moved to the
    # root on each pop is the next one out.
    vertices = [heap.pop().vertex for _ in range(4)]
    assert vertices == [5, 8, 7, 6]


def test_min_heap_drops_pushes_beyond_capacity() -> None:
    heap = MinHeap(2)
    heap.push(0, 3)
    heap.push(1, 1)
    heap.push(2, 0)

    assert len(heap) == 2
    assert heap.pop() == PQEntry(1, 1)
    assert heap.pop() == PQEntry(0, 3)


def test_min_heap_pop_on_empty_returns_sentinel_entry() -> None:
    heap = MinHeap(4)
    assert heap.pop() == PQEntry(vertex=-1, key=999999)


@pytest.mark.parametrize("payload", ["1", 1.5, True, None])
def test_primitives_reject_non_integer_payloads(payload: object) -> None:
    with pytest.raises(TypeError):
        Queue().enqueue(payload)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Stack().push(payload)  # type: ignore[arg-type]
