import logging
from typing import Iterable, Iterator, Optional, TypeVar

from dynamic_array import DynamicArray
from priority_queue import EmptyQueueError, PriorityQueue

T = TypeVar('T')

logger = logging.getLogger(__name__)


def parent(i: int) -> int:
    return (i - 1) // 2


def left(i: int) -> int:
    return 2 * i + 1


def right(i: int) -> int:
    return 2 * i + 2


class BinaryHeap(PriorityQueue[T]):
    """Min-heap kept in a growable array; index 0 holds the minimum."""

    def __init__(self, values: Optional[Iterable[T]] = None, capacity: int = 0) -> None:
        self._data: DynamicArray[T] = DynamicArray(capacity)
        if values is not None:
            for value in values:
                self.add(value)

    @classmethod
    def from_sequence(cls, values: Iterable[T]) -> 'BinaryHeap[T]':
        """Build a heap by adding each value in turn.

        Note: the input is not modified; O(n log n).
        """
        values = list(values)
        return cls(values, capacity=len(values))

    def add(self, value: T) -> None:
        if value is None:
            raise ValueError("cannot add None to heap")
        self._data.push_back(value)
        self._percolate_up(self._data.size() - 1)

    def peek(self) -> T:
        if self._data.empty():
            raise EmptyQueueError("peek from empty heap")
        return self._data[0]

    def poll(self) -> T:
        if self._data.empty():
            raise EmptyQueueError("poll from empty heap")
        result = self._data[0]
        last = self._data.pop_back()
        if not self._data.empty():
            self._data[0] = last
            if self._data.size() > 1:
                self._push_down_root(0)
        return result

    def remove(self) -> T:
        return self.poll()

    def size(self) -> int:
        return self._data.size()

    def is_empty(self) -> bool:
        return self._data.empty()

    def capacity(self) -> int:
        return self._data.capacity()

    def clear(self) -> None:
        logger.debug("clearing heap of %d elements", self._data.size())
        self._data.clear()

    def copy(self) -> 'BinaryHeap[T]':
        clone: BinaryHeap[T] = BinaryHeap()
        clone._data = self._data.copy()
        return clone

    def _percolate_up(self, leaf: int) -> None:
        data = self._data
        value = data[leaf]
        while leaf > 0:
            up = parent(leaf)
            if not value < data[up]:
                break
            data[leaf] = data[up]
            leaf = up
        data[leaf] = value

    def _push_down_root(self, root: int) -> None:
        data = self._data
        size = data.size()
        value = data[root]
        while left(root) < size:
            child = left(root)
            # left child wins ties
            if right(root) < size and data[right(root)] < data[child]:
                child = right(root)
            if not data[child] < value:
                break
            data[root] = data[child]
            root = child
        data[root] = value

    def __len__(self) -> int:
        return self._data.size()

    def __bool__(self) -> bool:
        return not self._data.empty()

    def __repr__(self) -> str:
        return f"BinaryHeap({list(self._data)})"

    def __str__(self) -> str:
        return f"BinaryHeap(size={self._data.size()})"

    def __iter__(self) -> Iterator[T]:
        heap_copy = self.copy()
        while not heap_copy.is_empty():
            yield heap_copy.poll()
