"""A queue split into a sending and a receiving end."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from xf.ds.queue import Queue

T = TypeVar("T")


class FifoTx(Generic[T]):
    """The sending end of a ``Fifo``."""

    def __init__(self, queue: Queue[T]) -> None:
        self._queue = queue

    def enqueue(self, value: T) -> None:
        self._queue.enqueue(value)


class FifoRx(Generic[T]):
    """The receiving end of a ``Fifo``."""

    def __init__(self, queue: Queue[T]) -> None:
        self._queue = queue

    def dequeue(self) -> Optional[T]:
        return self._queue.dequeue()


class Fifo(Generic[T]):
    """A queue whose two ends can be handed out separately."""

    def __init__(self) -> None:
        queue: Queue[T] = Queue()
        self.tx = FifoTx(queue)
        self.rx = FifoRx(queue)

    def enqueue(self, value: T) -> None:
        self.tx.enqueue(value)

    def dequeue(self) -> Optional[T]:
        return self.rx.dequeue()

    def split(self) -> tuple[FifoTx[T], FifoRx[T]]:
        """The sending and receiving ends."""
        return self.tx, self.rx