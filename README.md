# strobesync

Bounded FIFO ring buffers and channels for handing values from producer
threads to a consumer thread. Pure Python, no dependencies.

## Installation

```
pip install .
```

## Ring buffers

`strobesync.ring_buffer` has two fixed-capacity FIFO buffers:

- `SPSCRingBuffer(capacity)`: one producer thread, one consumer thread.
- `MPSCRingBuffer(capacity)`: any number of producer threads, one consumer
  thread. Calls to `enqueue` are serialised by a lock.

Both have the same methods:

- `enqueue(value)` appends a value and returns `True`, or returns `False`
  without blocking when the buffer is full.
- `dequeue()` removes and returns the oldest value, or returns `None` when the
  buffer is empty.
- `clear()` drops every pending value.
- `capacity()` is the most values the buffer holds at once.
- `len(buf)` is the number of values pending.

`None` marks an empty buffer, so it cannot be stored: `enqueue(None)` raises
`TypeError`. The capacity must be a non-negative `int`; anything else raises
`TypeError` or `ValueError`.

```python
from strobesync.ring_buffer import MPSCRingBuffer

buf = MPSCRingBuffer(4)
for i in range(1, 5):
    assert buf.enqueue(i)
assert not buf.enqueue(5)        # full
assert buf.capacity() == 4
assert len(buf) == 4
assert buf.dequeue() == 1
buf.clear()
assert buf.dequeue() is None     # empty
```

## Channels

A channel is a sender and a receiver that share one bounded buffer.
`send(value)` returns `False` when the channel is full; `recv()` returns
`None` when nothing is pending.

### Multiple producers

`strobesync.mpsc.channel(capacity)` returns a `(Sender, Receiver)` pair.
Several threads can share one sender; only one thread may receive at a time.

```python
import threading
from strobesync import mpsc

tx, rx = mpsc.channel(1024)

def produce():
    for i in range(100):
        while not tx.send(i):
            pass

threads = [threading.Thread(target=produce) for _ in range(4)]
for t in threads:
    t.start()

received = 0
while received < 400:
    if rx.recv() is not None:
        received += 1
for t in threads:
    t.join()
```

### Single producer

`strobesync.spsc.channel(capacity)` returns a `(Sender, Receiver)` pair for
one producer and one consumer. Each end can be closed with `close()` or used
as a context manager, and has a `closed` property. Sending or receiving on a
closed end raises `ValueError`. Once both ends are closed, values still
pending are dropped.

```python
from strobesync import spsc

tx, rx = spsc.channel(4)
with tx, rx:
    tx.send("a")
    tx.send("b")
    assert rx.recv() == "a"
    assert rx.recv() == "b"
    assert rx.recv() is None
```

`SharedReceiver(receiver)` takes over a `Receiver` so that it can be used from
several threads; its `recv()` calls are serialised by a lock. The wrapped
receiver is left closed and can no longer be used on its own.

```python
from strobesync.spsc import SharedReceiver, channel

tx, rx = channel(8)
shared = SharedReceiver(rx)
tx.send(1)
assert shared.recv() == 1
```

## What it does not do

- Nothing blocks: there is no waiting send or receive and no timeout. Callers
  that must wait retry in a loop.
- An `mpsc` channel has no notion of closing or disconnection; its ends live
  as long as they are referenced.
- There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```