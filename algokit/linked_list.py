"""A singly linked list of integers with classic list algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """One link of the list: a value and the node after it."""

    data: int
    next: Node | None = None


def _find_middle(head: Node) -> Node:
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    return slow


def _merge(left: Node | None, right: Node | None) -> Node | None:
    anchor = Node(0)
    tail = anchor
    while left is not None and right is not None:
        if left.data <= right.data:
            tail.next, left = left, left.next
        else:
            tail.next, right = right, right.next
        tail = tail.next
    tail.next = left if left is not None else right
    return anchor.next


def _merge_sort(head: Node | None) -> Node | None:
    if head is None or head.next is None:
        return head
    middle = _find_middle(head)
    right = middle.next
    middle.next = None
    return _merge(_merge_sort(head), _merge_sort(right))


class LinkedList:
    """A singly linked list that may be turned circular."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[Node]:
        current = self.head
        while current is not None:
            yield current
            current = current.next

    def _require_linear(self) -> None:
        if self.has_cycle():
            raise ValueError("the list is circular")

    def _last_node(self) -> Node | None:
        self._require_linear()
        last = None
        for last in self._nodes():
            pass
        return last

    def __iter__(self) -> Iterator[int]:
        """Yield the values from head to tail; circular lists are refused."""
        self._require_linear()
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, key: object) -> bool:
        return any(value == key for value in self)

    def count_recursive(self) -> int:
        """Count the nodes recursively."""
        self._require_linear()

        def count(node: Node | None) -> int:
            return 0 if node is None else 1 + count(node.next)

        return count(self.head)

    def total(self) -> int:
        """Return the sum of all values."""
        return sum(self)

    def total_recursive(self) -> int:
        """Sum the values recursively."""
        self._require_linear()

        def add(node: Node | None) -> int:
            return 0 if node is None else node.data + add(node.next)

        return add(self.head)

    def move_to_front(self, key: int) -> bool:
        """Find ``key`` and move its node to the head; return whether found."""
        self._require_linear()
        if self.head is None:
            return False
        if self.head.data == key:
            return True
        prev = self.head
        current = self.head.next
        while current is not None:
            if current.data == key:
                prev.next = current.next
                current.next = self.head
                self.head = current
                return True
            prev, current = current, current.next
        return False

    def insert_first(self, value: int) -> None:
        self.head = Node(value, self.head)

    def insert_at(self, position: int, value: int) -> None:
        """Insert ``value`` so that it ends up at index ``position``."""
        if not 0 <= position <= len(self):
            raise IndexError(f"Invalid position {position}")
        if position == 0:
            self.insert_first(value)
            return
        current = self.head
        for _ in range(position - 1):
            current = current.next  # type: ignore[union-attr]
        assert current is not None
        current.next = Node(value, current.next)

    def append(self, value: int) -> None:
        last = self._last_node()
        node = Node(value)
        if last is None:
            self.head = node
        else:
            last.next = node

    def delete(self, value: int) -> None:
        """Remove the first node holding ``value``, if any."""
        self._require_linear()
        if self.head is None:
            return
        if self.head.data == value:
            self.head = self.head.next
            return
        prev = self.head
        current = self.head.next
        while current is not None:
            if current.data == value:
                prev.next = current.next
                return
            prev, current = current, current.next

    def bubble_sort(self) -> None:
        """Sort in place by swapping the values of adjacent nodes."""
        length = len(self)
        for done in range(length - 1):
            current = self.head
            for _ in range(length - done - 1):
                assert current is not None and current.next is not None
                if current.data > current.next.data:
                    current.data, current.next.data = current.next.data, current.data
                current = current.next

    def sort(self) -> None:
        """Sort in place by relinking the nodes with merge sort."""
        self._require_linear()
        self.head = _merge_sort(self.head)

    def remove_duplicates(self) -> list[int]:
        """Drop nodes equal to their predecessor; return the dropped values."""
        self._require_linear()
        removed: list[int] = []
        current = self.head
        while current is not None and current.next is not None:
            if current.data == current.next.data:
                removed.append(current.next.data)
                current.next = current.next.next
            else:
                current = current.next
        return removed

    def reverse_values(self) -> None:
        """Reverse the order by rewriting the values held in each node."""
        values = list(self)
        for node, value in zip(self._nodes(), reversed(values)):
            node.data = value

    def reverse(self) -> None:
        """Reverse the order by flipping the links between nodes."""
        self._require_linear()
        previous: Node | None = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = previous
            previous, current = current, following
        self.head = previous

    def concat(self, other: LinkedList) -> None:
        """Link ``other``'s nodes onto the end of this list (nodes are shared)."""
        last = self._last_node()
        if last is None:
            self.head = other.head
        else:
            last.next = other.head

    def minimum(self) -> int:
        if self.head is None:
            raise ValueError("minimum of an empty list")
        return min(self)

    def maximum(self) -> int:
        if self.head is None:
            raise ValueError("maximum of an empty list")
        return max(self)

    def has_cycle(self) -> bool:
        """Detect a loop with the slow/fast pointer technique."""
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next  # type: ignore[union-attr]
            fast = fast.next.next
            if slow is fast:
                return True
        return False

    def make_circular(self) -> None:
        """Link the last node back to the head."""
        last = self._last_node()
        if last is not None:
            last.next = self.head

    def nth(self, n: int) -> int:
        """Return the value of the ``n``-th node, counted from 1.

        ``0`` is treated like ``1`` and gives the head.
        """
        if n < 0:
            raise IndexError("Invalid index!")
        current = self.head
        for _ in range(max(n - 1, 0)):
            if current is None:
                break
            current = current.next
        if current is None:
            raise IndexError(f"no node at position {n}")
        return current.data

    def iter_circular(self) -> Iterator[int]:
        """Yield each value once, going round from the head until back at it."""
        current = self.head
        if current is None:
            return
        while True:
            yield current.data
            current = current.next
            if current is None or current is self.head:
                break