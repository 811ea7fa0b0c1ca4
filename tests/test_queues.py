import pytest

from algokit.queues import (
    ArrayQueue,
    CircularArrayQueue,
    CircularLinkedQueue,
    LinkedQueue,
    QueueEmptyError,
    QueueFullError,
)


def test_array_queue_source_example():
    queue = ArrayQueue(4)
    for value in range(4):
        queue.enqueue(value)
    assert list(queue) == [0, 1, 2, 3]
    assert queue.dequeue() == 0
    assert list(queue) == [1, 2, 3]


def test_array_queue_full_even_after_partial_dequeue():
    queue = ArrayQueue(3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    queue.dequeue()
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(4)


def test_array_queue_resets_when_drained():
    queue = ArrayQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.dequeue() == 1
    assert queue.dequeue() == 2
    assert queue.is_empty()
    queue.enqueue(3)
    queue.enqueue(4)
    assert list(queue) == [3, 4]


def test_array_queue_dequeue_empty_raises():
    with pytest.raises(QueueEmptyError):
        ArrayQueue(2).dequeue()


def test_linked_queue_source_example():
    queue = LinkedQueue()
    for value in range(5):
        queue.enqueue(value)
    assert [queue.dequeue() for _ in range(3)] == [0, 1, 2]
    assert list(queue) == [3, 4]
    assert len(queue) == 2


def test_linked_queue_empty_then_reuse():
    queue = LinkedQueue()
    with pytest.raises(QueueEmptyError):
        queue.dequeue()
    queue.enqueue(7)
    assert queue.dequeue() == 7
    assert queue.is_empty()
    queue.enqueue(8)
    assert list(queue) == [8]


def test_circular_array_queue_fills_to_capacity():
    queue = CircularArrayQueue(5)
    for value in range(1, 6):
        queue.enqueue(value)
    assert queue.is_full()
    assert list(queue) == [1, 2, 3, 4, 5]
    with pytest.raises(QueueFullError):
        queue.enqueue(6)


def test_circular_array_queue_wraps_around():
    queue = CircularArrayQueue(3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.dequeue() == 1
    queue.enqueue(4)
    assert list(queue) == [2, 3, 4]
    assert len(queue) == 3
    assert queue.is_full()


def test_circular_array_queue_empty_raises():
    queue = CircularArrayQueue(2)
    with pytest.raises(QueueEmptyError):
        queue.dequeue()
    queue.enqueue(1)
    assert queue.dequeue() == 1
    assert queue.is_empty()
    assert list(queue) == []


def test_circular_array_queue_rejects_zero_capacity():
    with pytest.raises(ValueError):
        CircularArrayQueue(0)


def test_circular_linked_queue_source_example():
    queue = CircularLinkedQueue()
    for value in range(1, 6):
        queue.enqueue(value)
    assert list(queue) == [1, 2, 3, 4, 5]
    assert queue.dequeue() == 1
    assert queue.dequeue() == 2
    assert list(queue) == [3, 4, 5]


def test_circular_linked_queue_single_node_returns_value():
    queue = CircularLinkedQueue()
    queue.enqueue(42)
    assert queue.dequeue() == 42
    assert queue.is_empty()
    assert len(queue) == 0
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


@pytest.mark.parametrize(
    "factory",
    [lambda: ArrayQueue(10), LinkedQueue, lambda: CircularArrayQueue(10), CircularLinkedQueue],
)
def test_fifo_round_trip(factory):
    queue = factory()
    values = [9, 3, 7, 1]
    for value in values:
        queue.enqueue(value)
    assert len(queue) == len(values)
    assert [queue.dequeue() for _ in values] == values
    assert queue.is_empty()