"""A fixed-size integer hash set using linear probing and tombstones."""

from __future__ import annotations

from enum import Enum


class HashSetFullError(Exception):
    """Raised when no slot is left for a new value."""


class SlotState(Enum):
    EMPTY = "E"
    OCCUPIED = "O"
    DELETED = "T"


class HashSet:
    """Open-addressing set of integers with a fixed number of slots."""

    def __init__(self, size: int = 10) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self._size = size
        self._values: list[int | None] = [None] * size
        self._states: list[SlotState] = [SlotState.EMPTY] * size

    def _probe(self, value: int):
        start = value % self._size
        for step in range(self._size):
            yield (start + step) % self._size

    def add(self, value: int) -> bool:
        """Insert ``value``; return False if it was already present."""
        first_deleted: int | None = None
        for index in self._probe(value):
            state = self._states[index]
            if state is SlotState.EMPTY:
                target = index if first_deleted is None else first_deleted
                self._store(target, value)
                return True
            if state is SlotState.DELETED:
                if first_deleted is None:
                    first_deleted = index
            elif self._values[index] == value:
                return False
        if first_deleted is not None:
            self._store(first_deleted, value)
            return True
        raise HashSetFullError(f"Hash table is full, cannot insert {value}")

    def _store(self, index: int, value: int) -> None:
        self._values[index] = value
        self._states[index] = SlotState.OCCUPIED

    def discard(self, value: int) -> None:
        """Remove ``value`` if present, leaving a tombstone behind."""
        for index in self._probe(value):
            state = self._states[index]
            if state is SlotState.EMPTY:
                return
            if state is SlotState.OCCUPIED and self._values[index] == value:
                self._values[index] = None
                self._states[index] = SlotState.DELETED
                return

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        for index in self._probe(value):
            state = self._states[index]
            if state is SlotState.EMPTY:
                return False
            if state is SlotState.OCCUPIED and self._values[index] == value:
                return True
        return False

    def slots(self) -> list[tuple[SlotState, int | None]]:
        """Return each slot's state and stored value in table order."""
        return list(zip(self._states, self._values))

    def render(self) -> str:
        """Show the table as ``[E]`` empty, ``[T]`` tombstone or ``[value]``."""
        cells = []
        for state, value in self.slots():
            if state is SlotState.OCCUPIED:
                cells.append(f"[{value}]")
            else:
                cells.append(f"[{state.value}]")
        return " ".join(cells)