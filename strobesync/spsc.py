"""Bounded single-producer, single-consumer channels with closable ends."""

from __future__ import annotations

import threading
from typing import Any, Generic, Optional, Tuple, TypeVar

from strobesync.ring_buffer import SPSCRingBuffer

__all__ = ["Sender", "Receiver", "SharedReceiver", "channel"]

T = TypeVar("T")


class _ChannelState(Generic[T]):
    """Queue shared by both ends; pending values are dropped once both close."""

    def __init__(self, capacity: int) -> None:
        self.buffer: SPSCRingBuffer[T] = SPSCRingBuffer(capacity)
        self._lock = threading.Lock()
        self._open_ends = 2

    def release(self) -> None:
        with self._lock:
            self._open_ends -= 1
            last = self._open_ends == 0
        if last:
            self.buffer.clear()


class _Endpoint(Generic[T]):
    def __init__(self, state: _ChannelState[T]) -> None:
        self._state: Optional[_ChannelState[T]] = state

    def _require_state(self) -> _ChannelState[T]:
        if self._state is None:
            raise ValueError(f"{type(self).__name__} is closed")
        return self._state

    def close(self) -> None:
        state, self._state = self._state, None
        if state is not None:
            state.release()

    @property
    def closed(self) -> bool:
        return self._state is None


class Sender(_Endpoint[T]):
    """Sending half of a channel; used by a single producer thread."""

    def send(self, value: T) -> bool:
        """Queue a value; return False if the channel is full."""
        return self._require_state().buffer.enqueue(value)

    def close(self) -> None:
        """Give up this end; closing both ends drops pending values."""
        super().close()

    def __enter__(self) -> "Sender[T]":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class Receiver(_Endpoint[T]):
    """Receiving half of a channel; used by a single consumer thread."""

    def recv(self) -> Optional[T]:
        """Take the oldest pending value, or None if nothing is pending."""
        return self._require_state().buffer.dequeue()

    def close(self) -> None:
        """Give up this end; closing both ends drops pending values."""
        super().close()

    def __enter__(self) -> "Receiver[T]":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class SharedReceiver(Generic[T]):
    """Receiver that can be handed to several threads; receives are serialised."""

    def __init__(self, receiver: Receiver[T]) -> None:
        state = receiver._require_state()
        receiver._state = None  # ownership moves here without closing the end
        self._state = state
        self._lock = threading.Lock()

    def recv(self) -> Optional[T]:
        """Take the oldest pending value, or None if nothing is pending."""
        with self._lock:
            return self._state.buffer.dequeue()


def channel(capacity: int) -> Tuple[Sender[T], Receiver[T]]:
    """Create a channel holding at most ``capacity`` pending values."""
    state: _ChannelState[T] = _ChannelState(capacity)
    return Sender(state), Receiver(state)