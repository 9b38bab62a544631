"""Thread-safe queues."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, List, Optional, TypeVar

T = TypeVar("T")


class QueueEmptyError(Exception):
    """Raised when popping from an empty queue without blocking."""


class BlockingQueue(Generic[T]):
    """FIFO queue with blocking and non-blocking put and pop.

    ``size`` is the capacity; zero or less means unbounded.
    """

    def __init__(self, size: int = 0) -> None:
        self._capacity = size
        self._items: Deque[T] = deque()
        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._not_full = threading.Condition(self._lock)

    def _full(self) -> bool:
        return self._capacity > 0 and len(self._items) >= self._capacity

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def try_put(self, item: T) -> bool:
        """Add ``item`` if the queue is free and has room; report whether it was added."""
        if not self._lock.acquire(blocking=False):
            return False
        try:
            if self._full():
                return False
            self._items.append(item)
            self._not_empty.notify()
            return True
        finally:
            self._lock.release()

    def put(self, item: T) -> bool:
        """Add ``item``, blocking until there is room."""
        with self._not_full:
            self._not_full.wait_for(lambda: not self._full())
            self._items.append(item)
            self._not_empty.notify()
            return True

    def try_pop(self) -> T:
        """Remove and return the head; raise QueueEmptyError if there is none."""
        with self._lock:
            if not self._items:
                raise QueueEmptyError("queue is empty")
            item = self._items.popleft()
            self._not_full.notify()
            return item

    def pop(self) -> T:
        """Remove and return the head, blocking until one is available."""
        with self._not_empty:
            self._not_empty.wait_for(lambda: bool(self._items))
            item = self._items.popleft()
            self._not_full.notify()
            return item


class RingBuffer(Generic[T]):
    """Fixed-size ring buffer whose capacity is a power of two."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0 or capacity & (capacity - 1):
            raise ValueError("capacity must be a positive power of two")
        self._capacity = capacity
        self._mask = capacity - 1
        self._slots: List[Optional[T]] = [None] * capacity
        self._read = 0
        self._write = 0
        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._not_full = threading.Condition(self._lock)

    def push(self, item: T) -> None:
        """Append ``item``, blocking while the buffer is full."""
        with self._not_full:
            self._not_full.wait_for(lambda: self._read + self._capacity > self._write)
            self._slots[self._write & self._mask] = item
            self._write += 1
            self._not_empty.notify_all()

    def pop(self) -> T:
        """Remove and return the oldest item, blocking while the buffer is empty."""
        with self._not_empty:
            self._not_empty.wait_for(lambda: self._read < self._write)
            index = self._read & self._mask
            item = self._slots[index]
            self._slots[index] = None
            self._read += 1
            self._not_full.notify_all()
            return item