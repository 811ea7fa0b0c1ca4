"""Stacks backed by a fixed-size array and by a singly linked list."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


class StackEmptyError(IndexError):
    """Raised when popping or peeking an empty stack."""


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that has reached its capacity."""


class ArrayStack:
    """A bounded stack stored in a list of fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[int] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def push(self, value: int) -> None:
        if self.is_full():
            raise StackFullError(f"Stack is full! Cannot push {value}.")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if self.is_empty():
            raise StackEmptyError("Stack is empty! Nothing to delete!")
        return self._items.pop()

    def peek(self, index: int) -> int:
        """Return the value at ``index`` counted from the bottom (0)."""
        if self.is_empty():
            raise StackEmptyError("Stack is empty! Nothing to peek!")
        if not 0 <= index < len(self._items):
            raise IndexError(f"invalid stack index {index}")
        return self._items[index]

    def __iter__(self) -> Iterator[int]:
        """Yield values from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class _Node:
    data: int
    next: _Node | None = None


class LinkedStack:
    """An unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._top is None

    def push(self, value: int) -> None:
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> int:
        """Remove and return the top value."""
        if self._top is None:
            raise StackEmptyError("Stack underflow!")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self, index: int) -> int:
        """Return the value at 1-based position ``index`` from the top.

        Positions below 1 refer to the top itself.
        """
        if self._top is None:
            raise StackEmptyError("Stack underflow!")
        if index > self._size:
            raise IndexError("Invalid Index!")
        current = self._top
        for _ in range(index - 1):
            current = current.next  # type: ignore[assignment]
        return current.data

    def __iter__(self) -> Iterator[int]:
        """Yield values from the top of the stack down to the bottom."""
        current = self._top
        while current is not None:
            yield current.data
            current = current.next

    def __len__(self) -> int:
        return self._size