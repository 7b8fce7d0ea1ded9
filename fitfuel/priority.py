"""A max-priority queue of arbitrary items."""

from __future__ import annotations

from typing import Any, NamedTuple


class _Entry(NamedTuple):
    priority: int
    data: Any


class PriorityQueue:
    """Binary max-heap: the item with the highest priority is on top."""

    def __init__(self):
        self._heap: list[_Entry] = []

    def push(self, data, priority) -> None:
        """Add an item with the given priority."""
        heap = self._heap
        heap.append(_Entry(priority, data))
        now = len(heap) - 1
        while now > 0:
            parent = (now - 1) // 2
            if not heap[parent].priority < priority:
                break
            heap[now] = heap[parent]
            now = parent
        heap[now] = _Entry(priority, data)

    def top(self):
        """The item with the highest priority, or None when empty."""
        return self._heap[0].data if self._heap else None

    def pop(self):
        """Remove and return the item with the highest priority."""
        heap = self._heap
        if not heap:
            raise IndexError("pop from an empty priority queue")
        top = heap[0]
        last = heap.pop()
        if heap:
            heap[0] = last
            self._sift_down(last.priority)
        return top.data

    def _sift_down(self, priority) -> None:
        heap = self._heap
        size = len(heap)
        now = 1
        while (now < size and heap[now].priority > priority) or (
            now + 1 < size and heap[now + 1].priority > priority
        ):
            parent = (now - 1) // 2
            if now + 1 < size and heap[now].priority < heap[now + 1].priority:
                now += 1
            heap[parent], heap[now] = heap[now], heap[parent]
            now = now * 2 + 1

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)