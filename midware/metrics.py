"""Priority queues over plain values and scored metrics."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class Metrics:
    """A named score."""

    id: str
    score: float


class _Entry:
    __slots__ = ("priority", "seq", "item", "largest_first")

    def __init__(self, priority, seq: int, item, largest_first: bool) -> None:
        self.priority = priority
        self.seq = seq
        self.item = item
        self.largest_first = largest_first

    def __lt__(self, other: "_Entry") -> bool:
        if self.priority == other.priority:
            return self.seq < other.seq
        if self.largest_first:
            return other.priority < self.priority
        return self.priority < other.priority


class PriorityQueue(Generic[T]):
    """Heap-backed queue yielding the largest (or smallest) key first."""

    def __init__(
        self,
        key: Optional[Callable[[T], Any]] = None,
        largest_first: bool = True,
    ) -> None:
        self._key = key if key is not None else (lambda item: item)
        self._largest_first = largest_first
        self._heap: list[_Entry] = []
        self._counter = itertools.count()

    def push(self, item: T) -> None:
        entry = _Entry(self._key(item), next(self._counter), item, self._largest_first)
        heapq.heappush(self._heap, entry)

    def pop(self) -> T:
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        return heapq.heappop(self._heap).item

    def peek(self) -> T:
        if not self._heap:
            raise IndexError("peek at an empty priority queue")
        return self._heap[0].item

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def drain(self) -> Iterator[T]:
        """Pop items until the queue is empty."""
        while self._heap:
            yield self.pop()


def _score(metrics: Metrics) -> float:
    return metrics.score


def main(argv=None) -> int:
    """Show max- and min-ordered queues of numbers and of metrics."""
    nums_max: PriorityQueue[int] = PriorityQueue()
    nums_min: PriorityQueue[int] = PriorityQueue(largest_first=False)
    for n in (2, 1, 7, 3):
        nums_max.push(n)
        nums_min.push(n)

    print("Nums max heap: ")
    for n in nums_max.drain():
        print(n)
    print("Nums min heap: ")
    for n in nums_min.drain():
        print(n)

    metrics_max: PriorityQueue[Metrics] = PriorityQueue(key=_score)
    metrics_min: PriorityQueue[Metrics] = PriorityQueue(key=_score, largest_first=False)
    for score in (3.14, 1.41, 2.71):
        metrics_max.push(Metrics("", score))
        metrics_min.push(Metrics("", score))

    print("Nums max heap: ")
    for m in metrics_max.drain():
        print(f"{m.score:g}")
    print("Nums min heap: ")
    for m in metrics_min.drain():
        print(f"{m.score:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())