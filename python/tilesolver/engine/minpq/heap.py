"""Binary-heap min-priority queue ordered by a caller-supplied key."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

from tilesolver.errors import UnderflowError

T = TypeVar("T")


class HeapMinPQ(Generic[T]):
    """Min-priority queue backed by :mod:`heapq`.

    Items are ordered by ``key(item)``.  Items with equal keys come out in
    insertion order, so the extraction sequence is a deterministic
    function of the insertion sequence.
    """

    def __init__(self, key: Callable[[T], Any]) -> None:
        self._key = key
        self._heap: list[tuple[Any, int, T]] = []
        self._counter = itertools.count()

    def insert(self, item: T) -> None:
        heapq.heappush(self._heap, (self._key(item), next(self._counter), item))

    def min(self) -> T:
        if not self._heap:
            raise UnderflowError("Priority queue underflow.")
        return self._heap[0][2]

    def del_min(self) -> T:
        if not self._heap:
            raise UnderflowError("Priority queue underflow.")
        return heapq.heappop(self._heap)[2]

    def size(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __iter__(self) -> Iterator[T]:
        return (item for _, _, item in self._heap)
