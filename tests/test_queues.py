import pytest

from dsakit.queues import (
    ArrayQueue,
    CircularLinkedQueue,
    CircularQueue,
    LinkedQueue,
    QueueEmpty,
    QueueFull,
)

FACTORIES = {
    "array": lambda: ArrayQueue(100),
    "circular": lambda: CircularQueue(100),
    "linked": LinkedQueue,
    "circular_linked": CircularLinkedQueue,
}


@pytest.mark.parametrize("kind", FACTORIES)
def test_fifo_order(kind):
    q = FACTORIES[kind]()
    values = [34, 4, 7, 69, 45]
    for value in values:
        q.enqueue(value)
    assert list(q) == values
    assert len(q) == len(values)
    assert q.dequeue() == 34
    assert q.dequeue() == 4
    assert list(q) == values[2:]


@pytest.mark.parametrize("kind", FACTORIES)
def test_drain_and_reuse(kind):
    q = FACTORIES[kind]()
    q.enqueue(1)
    assert q.dequeue() == 1
    assert q.is_empty()
    assert list(q) == []
    q.enqueue(2)
    q.enqueue(3)
    assert list(q) == [2, 3]


@pytest.mark.parametrize("kind", FACTORIES)
def test_empty_raises(kind):
    q = FACTORIES[kind]()
    assert q.is_empty()
    with pytest.raises(QueueEmpty):
        q.dequeue()


def test_array_queue_slots_are_not_reused():
    q = ArrayQueue(2)
    q.enqueue(1)
    q.enqueue(2)
    assert q.is_full()
    assert q.dequeue() == 1
    assert q.is_full()
    with pytest.raises(QueueFull):
        q.enqueue(3)


def test_circular_queue_holds_one_less_than_size():
    q = CircularQueue(4)
    for value in range(3):
        q.enqueue(value)
    assert q.is_full()
    assert len(q) == 3
    with pytest.raises(QueueFull):
        q.enqueue(99)


def test_circular_queue_reuses_slots():
    q = CircularQueue(3)
    q.enqueue(1)
    q.enqueue(2)
    assert q.dequeue() == 1
    q.enqueue(3)
    assert list(q) == [2, 3]


def test_circular_queue_rejects_zero_size():
    with pytest.raises(ValueError):
        CircularQueue(0)