"""Bounded FIFO ring buffers for single- and multi-producer hand-off."""

from __future__ import annotations

import threading
from typing import Generic, List, Optional, TypeVar

__all__ = ["SPSCRingBuffer", "MPSCRingBuffer"]

T = TypeVar("T")


class _Ring(Generic[T]):
    """Fixed-capacity circular FIFO; one slot is kept free to tell full from empty."""

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"capacity must be an int, not {type(capacity).__name__}")
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._size = capacity + 1
        self._slots: List[Optional[T]] = [None] * self._size
        self._head = 0
        self._tail = 0

    def push(self, value: T) -> bool:
        if value is None:
            raise TypeError("None cannot be stored; it marks an empty buffer")
        tail = self._tail
        next_tail = (tail + 1) % self._size
        if next_tail == self._head:
            return False
        self._slots[tail] = value
        # Publishing the new tail last makes the slot visible only once filled.
        self._tail = next_tail
        return True

    def pop(self) -> Optional[T]:
        head = self._head
        if head == self._tail:
            return None
        value = self._slots[head]
        self._slots[head] = None
        self._head = (head + 1) % self._size
        return value

    def drain(self) -> None:
        while self.pop() is not None:
            pass

    def __len__(self) -> int:
        return (self._tail - self._head) % self._size


class SPSCRingBuffer(Generic[T]):
    """Ring buffer for exactly one producer thread and one consumer thread."""

    def __init__(self, capacity: int) -> None:
        self._ring: _Ring[T] = _Ring(capacity)

    def enqueue(self, value: T) -> bool:
        """Append a value; return False if the buffer is full."""
        return self._ring.push(value)

    def dequeue(self) -> Optional[T]:
        """Remove and return the oldest value, or None if the buffer is empty."""
        return self._ring.pop()

    def clear(self) -> None:
        """Drop every pending value (consumer side)."""
        self._ring.drain()

    def capacity(self) -> int:
        """Maximum number of values the buffer holds at once."""
        return self._ring.capacity

    def __len__(self) -> int:
        return len(self._ring)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity()}, len={len(self)})"


class MPSCRingBuffer(Generic[T]):
    """Ring buffer for any number of producer threads and one consumer thread."""

    def __init__(self, capacity: int) -> None:
        self._ring: _Ring[T] = _Ring(capacity)
        self._producer_lock = threading.Lock()

    def enqueue(self, value: T) -> bool:
        """Append a value; return False if the buffer is full. Safe from many threads."""
        with self._producer_lock:
            return self._ring.push(value)

    def dequeue(self) -> Optional[T]:
        """Remove and return the oldest value, or None if the buffer is empty.

        Only one thread may consume at a time.
        """
        return self._ring.pop()

    def clear(self) -> None:
        """Drop every pending value (consumer side)."""
        self._ring.drain()

    def capacity(self) -> int:
        """Maximum number of values the buffer holds at once."""
        return self._ring.capacity

    def __len__(self) -> int:
        return len(self._ring)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity()}, len={len(self)})"