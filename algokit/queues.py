"""FIFO queues: linear and circular, array-backed and linked."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


class QueueEmptyError(IndexError):
    """Raised when removing from an empty queue."""


class QueueFullError(OverflowError):
    """Raised when adding to a queue that has no room left."""


@dataclass
class _Node:
    data: int
    next: _Node | None = None


class ArrayQueue:
    """A linear bounded queue.

    Slots freed at the front are not reused until the queue drains
    completely, so the queue reports full once ``capacity`` values have
    been enqueued since it was last empty.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[int] = []
        self._head = 0

    def is_empty(self) -> bool:
        return self._head >= len(self._items)

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def enqueue(self, value: int) -> None:
        if self.is_full():
            raise QueueFullError("Queue is full!")
        self._items.append(value)

    def dequeue(self) -> int:
        if self.is_empty():
            raise QueueEmptyError("Queue is empty! Nothing to delete")
        value = self._items[self._head]
        self._head += 1
        if self._head == len(self._items):
            self._items.clear()
            self._head = 0
        return value

    def __iter__(self) -> Iterator[int]:
        return iter(self._items[self._head:])

    def __len__(self) -> int:
        return len(self._items) - self._head


class LinkedQueue:
    """An unbounded queue built from linked nodes."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._front is None

    def enqueue(self, value: int) -> None:
        node = _Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> int:
        if self._front is None:
            raise QueueEmptyError("the queue is empty!")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.data

    def __iter__(self) -> Iterator[int]:
        current = self._front
        while current is not None:
            yield current.data
            current = current.next

    def __len__(self) -> int:
        return self._size


class CircularArrayQueue:
    """A bounded ring-buffer queue whose indices wrap around."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._slots: list[int | None] = [None] * capacity
        self._front = -1
        self._rear = -1

    def is_empty(self) -> bool:
        return self._front == -1

    def is_full(self) -> bool:
        return (self._rear + 1) % self._capacity == self._front

    def enqueue(self, value: int) -> None:
        if self.is_full():
            raise QueueFullError("the queue is full!")
        if self.is_empty():
            self._front = self._rear = 0
        else:
            self._rear = (self._rear + 1) % self._capacity
        self._slots[self._rear] = value

    def dequeue(self) -> int:
        if self.is_empty():
            raise QueueEmptyError("Queue is empty!")
        value = self._slots[self._front]
        self._slots[self._front] = None
        if self._front == self._rear:
            self._front = self._rear = -1
        else:
            self._front = (self._front + 1) % self._capacity
        assert value is not None
        return value

    def __iter__(self) -> Iterator[int]:
        if self.is_empty():
            return
        index = self._front
        while True:
            value = self._slots[index]
            assert value is not None
            yield value
            if index == self._rear:
                break
            index = (index + 1) % self._capacity

    def __len__(self) -> int:
        if self.is_empty():
            return 0
        return (self._rear - self._front) % self._capacity + 1


class CircularLinkedQueue:
    """An unbounded queue whose rear node links back to the front."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._front is None

    def enqueue(self, value: int) -> None:
        node = _Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        node.next = self._front
        self._size += 1

    def dequeue(self) -> int:
        if self._front is None or self._rear is None:
            raise QueueEmptyError("the queue is empty! Nothing to delete")
        node = self._front
        if self._front is self._rear:
            self._front = self._rear = None
        else:
            self._front = node.next
            self._rear.next = self._front
        node.next = None
        self._size -= 1
        return node.data

    def __iter__(self) -> Iterator[int]:
        if self._front is None:
            return
        current = self._front
        while True:
            yield current.data
            current = current.next  # type: ignore[assignment]
            if current is self._front:
                break

    def __len__(self) -> int:
        return self._size