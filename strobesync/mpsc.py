"""Bounded multi-producer, single-consumer channels."""

from __future__ import annotations

from typing import Generic, Optional, Tuple, TypeVar

from strobesync.ring_buffer import MPSCRingBuffer

__all__ = ["Sender", "Receiver", "channel"]

T = TypeVar("T")


class Sender(Generic[T]):
    """Sending half of a channel; may be shared freely between threads."""

    __slots__ = ("_buffer",)

    def __init__(self, buffer: MPSCRingBuffer[T]) -> None:
        self._buffer = buffer

    def send(self, value: T) -> bool:
        """Queue a value; return False if the channel is full."""
        return self._buffer.enqueue(value)

    def __repr__(self) -> str:
        return f"Sender({self._buffer!r})"


class Receiver(Generic[T]):
    """Receiving half of a channel; only one thread may receive at a time."""

    __slots__ = ("_buffer",)

    def __init__(self, buffer: MPSCRingBuffer[T]) -> None:
        self._buffer = buffer

    def recv(self) -> Optional[T]:
        """Take the oldest pending value, or None if nothing is pending."""
        return self._buffer.dequeue()

    def __repr__(self) -> str:
        return f"Receiver({self._buffer!r})"


def channel(capacity: int) -> Tuple[Sender[T], Receiver[T]]:
    """Create a channel holding at most ``capacity`` pending values."""
    buffer: MPSCRingBuffer[T] = MPSCRingBuffer(capacity)
    return Sender(buffer), Receiver(buffer)