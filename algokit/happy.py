"""Happy numbers, detected with Floyd's cycle-finding algorithm."""

from __future__ import annotations


def sum_of_squared_digits(number: int) -> int:
    """Return the sum of the squares of the decimal digits of ``number``."""
    return sum(int(digit) ** 2 for digit in str(abs(number)))


def is_happy(number: int) -> bool:
    """Return True if repeatedly summing squared digits reaches 1."""
    slow = fast = number
    while True:
        slow = sum_of_squared_digits(slow)
        fast = sum_of_squared_digits(sum_of_squared_digits(fast))
        if slow == fast:
            return slow == 1