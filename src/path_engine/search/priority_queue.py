# search/priority_queue.py

import heapq
from collections import Counter
from collections.abc import Hashable
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class PriorityQueue(Generic[T]):
    """
    Min-priority queue over (element, priority) pairs.
    Equal priorities come out in insertion order (FIFO tie-break).
    Duplicate elements are separate entries; no decrease-key.
    """

    def __init__(self):
        self._q: list[tuple[float, int, T]] = []
        self._seq = 0
        self._live: Counter[T] = Counter()

    def enqueue(self, element: T, priority: float) -> None:
        self._seq += 1
        heapq.heappush(self._q, (priority, self._seq, element))
        self._live[element] += 1

    def dequeue(self) -> T:
        if not self._q:
            raise IndexError("dequeue from empty PriorityQueue")
        _, _, element = heapq.heappop(self._q)
        self._live[element] -= 1
        if self._live[element] <= 0:
            del self._live[element]
        return element

    def peek_priority(self) -> float | None:
        return self._q[0][0] if self._q else None

    def is_empty(self) -> bool:
        return not self._q

    def contains(self, element: T) -> bool:
        return element in self._live

    def __contains__(self, element: object) -> bool:
        return element in self._live

    def __len__(self) -> int:
        return len(self._q)

    def __bool__(self) -> bool:
        return bool(self._q)
