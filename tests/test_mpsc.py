import threading
import weakref

import pytest

from strobesync.mpsc import Receiver, Sender, channel


@pytest.mark.parametrize("capacity", [8, 4])
def test_new_channel_is_empty(capacity):
    _, receiver = channel(capacity)
    assert receiver.recv() is None


def test_single_send():
    sender, _ = channel(4)
    assert sender.send(1) is True


def test_send_until_full_then_receive_in_order():
    sender, receiver = channel(4)
    assert [sender.send(v) for v in range(1, 6)] == [True] * 4 + [False]
    assert [receiver.recv() for _ in range(5)] == [1, 2, 3, 4, None]


def test_values_released_after_recv():
    # Sets support weak references, so they show when the channel lets go.
    sender, receiver = channel(4)
    payloads = [{n} for n in range(1, 5)]
    refs = [weakref.ref(p) for p in payloads]
    assert all(sender.send(p) for p in payloads)
    del payloads
    assert all(ref() is not None for ref in refs)
    assert [receiver.recv() for _ in range(4)] == [{1}, {2}, {3}, {4}]
    assert all(ref() is None for ref in refs)


def test_channel_returns_halves():
    pair = channel(2)
    assert [type(half) for half in pair] == [Sender, Receiver]
    assert pair[0].send("a")
    assert pair[1].recv() == "a"


def test_none_cannot_be_sent():
    sender, _ = channel(2)
    with pytest.raises(TypeError):
        sender.send(None)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        channel(-1)


@pytest.mark.parametrize(
    "capacity, producers, per_producer",
    [(1024, 4, 5_000), (16384, 128, 100)],
    ids=["multi_producer", "lots_of_producers"],
)
def test_many_producers_single_consumer(capacity, producers, per_producer):
    sender, receiver = channel(capacity)
    total = producers * per_producer
    sent = []
    seen = []

    def produce():
        for i in range(per_producer):
            while not sender.send(i):
                pass
        sent.append(per_producer)

    def consume():
        while len(seen) < total:
            value = receiver.recv()
            if value is not None:
                seen.append(value)

    threads = [threading.Thread(target=consume)]
    threads += [threading.Thread(target=produce) for _ in range(producers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sum(sent) == total
    assert len(seen) == total
    assert set(seen) == set(range(per_producer))
    assert receiver.recv() is None