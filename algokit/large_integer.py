"""Non-negative integers of up to 100 decimal digits with wrap-around arithmetic."""

from __future__ import annotations

MAX_DIGITS = 100
_MODULUS = 10**MAX_DIGITS


class LargeInteger:
    """A fixed-width decimal number of ``MAX_DIGITS`` digits.

    Addition drops a final carry and subtraction a final borrow, so results
    wrap around modulo ``10 ** MAX_DIGITS``.
    """

    def __init__(self, digits: str = "0") -> None:
        if not digits or not digits.isascii() or not digits.isdigit():
            raise ValueError(f"not a string of decimal digits: {digits!r}")
        if len(digits) > MAX_DIGITS:
            raise ValueError(f"Input exceeds {MAX_DIGITS} digits!")
        self._value = int(digits)

    @classmethod
    def _from_int(cls, value: int) -> LargeInteger:
        result = cls()
        result._value = value % _MODULUS
        return result

    def __add__(self, other: LargeInteger) -> LargeInteger:
        if not isinstance(other, LargeInteger):
            return NotImplemented
        return self._from_int(self._value + other._value)

    def __sub__(self, other: LargeInteger) -> LargeInteger:
        if not isinstance(other, LargeInteger):
            return NotImplemented
        return self._from_int(self._value - other._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LargeInteger):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __int__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"LargeInteger({str(self)!r})"

    def padded(self) -> str:
        """Return all ``MAX_DIGITS`` digits, with leading zeros."""
        return f"{self._value:0{MAX_DIGITS}d}"

    def reversed_digits(self) -> str:
        """Return the digits least significant first, padded with zeros."""
        return self.padded()[::-1]