"""Conversion of Roman numerals to integers."""

from __future__ import annotations

_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def roman_to_int(roman: str) -> int:
    """Return the value of ``roman``; a symbol before a larger one is subtracted."""
    try:
        values = [_VALUES[symbol] for symbol in roman]
    except KeyError as exc:
        raise ValueError(f"not a Roman numeral symbol: {exc.args[0]!r}") from None
    total = 0
    for current, following in zip(values, values[1:] + [0]):
        total += -current if current < following else current
    return total