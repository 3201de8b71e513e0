"""
Priority Queue -- capability contract for minimum-priority queues.

A priority queue hands back its smallest element first. Implementations
order elements by the elements' own ``<``; there is no comparator to inject.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar('T')


class EmptyQueueError(IndexError):
    """Raised when an element is requested from an empty queue."""


class PriorityQueue(ABC, Generic[T]):
    """Base class for minimum-priority queues."""

    @abstractmethod
    def peek(self) -> T:
        """Return the minimum element without removing it."""
        pass

    @abstractmethod
    def poll(self) -> T:
        """Remove and return the minimum element."""
        pass

    @abstractmethod
    def add(self, value: T) -> None:
        pass

    @abstractmethod
    def size(self) -> int:
        pass

    @abstractmethod
    def is_empty(self) -> bool:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass
