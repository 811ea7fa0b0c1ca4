"""Setting, clearing, toggling and testing single bits of an integer."""

from __future__ import annotations

from dataclasses import dataclass


def _mask(k: int) -> int:
    if k < 0:
        raise ValueError("bit position must not be negative")
    return 1 << k


@dataclass
class BitManipulator:
    """Holds an integer and changes it one bit at a time."""

    number: int

    def set_bit(self, k: int) -> None:
        self.number |= _mask(k)

    def clear_bit(self, k: int) -> None:
        self.number &= ~_mask(k)

    def toggle_bit(self, k: int) -> None:
        self.number ^= _mask(k)

    def is_bit_set(self, k: int) -> bool:
        return bool(self.number & _mask(k))