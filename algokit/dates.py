"""Calendar dates with validation and leap-year checks."""

from __future__ import annotations

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class InvalidDateError(ValueError):
    """Raised when a day, month and year do not form a real date."""


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_valid_date(day: int, month: int, year: int) -> bool:
    """Return True if ``day`` exists in ``month`` of ``year``."""
    if not 1 <= month <= 12:
        return False
    last_day = _DAYS_IN_MONTH[month - 1]
    if month == 2 and is_leap_year(year):
        last_day = 29
    return 1 <= day <= last_day


class MyDate:
    """A validated date, 12.12.2012 unless given another."""

    def __init__(self, day: int = 12, month: int = 12, year: int = 2012) -> None:
        self.day = 12
        self.month = 12
        self.year = 2012
        self.set_date(day, month, year)

    def set_date(self, day: int, month: int, year: int) -> None:
        """Replace the date; an invalid one raises and leaves it unchanged."""
        if not is_valid_date(day, month, year):
            raise InvalidDateError(f"The date {day}.{month}.{year} is not valid")
        self.day, self.month, self.year = day, month, year

    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    def __str__(self) -> str:
        return f"{self.day:02d}.{self.month:02d}.{self.year}"