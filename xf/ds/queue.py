"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Queue(Generic[T]):
    """A FIFO queue; ``dequeue`` and ``peek`` give ``None`` when it is empty."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """The items from front to back."""
        return iter(self._items)

    def count(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def enqueue(self, value: T) -> None:
        """Add an item at the back."""
        self._items.append(value)

    def dequeue(self) -> Optional[T]:
        """Take the item at the front, if any."""
        return self._items.popleft() if self._items else None

    def peek(self) -> Optional[T]:
        """The item at the front, if any, without removing it."""
        return self._items[0] if self._items else None