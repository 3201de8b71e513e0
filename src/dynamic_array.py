import logging
from typing import Generic, Iterator, List, Optional, TypeVar

T = TypeVar('T')

logger = logging.getLogger(__name__)


class DynamicArray(Generic[T]):
    def __init__(self, capacity: int = 0) -> None:
        if not isinstance(capacity, int) or capacity < 0:
            raise ValueError("capacity must be a non-negative integer")
        self._size = 0
        self._capacity = capacity
        self._data: List[Optional[T]] = [None] * capacity

    def _check_index(self, index: int, method: str) -> None:
        if index < 0 or index >= self._size:
            raise IndexError(f"DynamicArray.{method}: index out of range")

    def at(self, index: int) -> T:
        self._check_index(index, "at")
        return self._data[index]

    def set_at(self, index: int, value: T) -> None:
        self._check_index(index, "set_at")
        self._data[index] = value

    def __getitem__(self, index: int) -> T:
        self._check_index(index, "__getitem__")
        return self._data[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._check_index(index, "__setitem__")
        self._data[index] = value

    def back(self) -> T:
        if self._size == 0:
            raise IndexError("DynamicArray.back: array is empty")
        return self._data[self._size - 1]

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return self._capacity

    def empty(self) -> bool:
        return self._size == 0

    def reserve(self, new_cap: int) -> None:
        if new_cap <= self._capacity:
            return
        logger.debug("growing backing store from %d to %d slots", self._capacity, new_cap)
        new_data: List[Optional[T]] = [None] * new_cap
        for i in range(self._size):
            new_data[i] = self._data[i]
        self._data = new_data
        self._capacity = new_cap

    def push_back(self, value: T) -> None:
        if self._size == self._capacity:
            self.reserve(1 if self._capacity == 0 else self._capacity * 2)
        self._data[self._size] = value
        self._size += 1

    def pop_back(self) -> T:
        if self._size == 0:
            raise IndexError("DynamicArray.pop_back: array is empty")
        self._size -= 1
        value = self._data[self._size]
        # vacated slot must not keep the element alive
        self._data[self._size] = None
        return value

    def clear(self) -> None:
        for i in range(self._size):
            self._data[i] = None
        self._size = 0

    def copy(self) -> 'DynamicArray[T]':
        clone: DynamicArray[T] = DynamicArray(self._capacity)
        for i in range(self._size):
            clone._data[i] = self._data[i]
        clone._size = self._size
        return clone

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._data[i]

    def __repr__(self) -> str:
        return f"DynamicArray({self._data[:self._size]})"
