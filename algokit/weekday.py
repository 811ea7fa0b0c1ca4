"""Days of the week, with stepping forwards and backwards."""

from __future__ import annotations

DAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


class Weekday:
    """The current day of the week, Sunday unless told otherwise."""

    def __init__(self, today: str = "Sunday") -> None:
        self.today = "Sunday"
        self.set_day(today)

    def set_day(self, name: str) -> None:
        """Set the current day; an unknown name resets it to Sunday and raises."""
        if name not in DAYS:
            self.today = "Sunday"
            raise ValueError(f"Invalid day {name!r}! Defaulting to Sunday.")
        self.today = name

    def _index(self) -> int:
        return DAYS.index(self.today)

    def next_day(self) -> str:
        return self.days_ahead(1)

    def previous_day(self) -> str:
        return self.days_ahead(-1)

    def days_ahead(self, count: int) -> str:
        """Return the day ``count`` days after today (negative counts go back)."""
        return DAYS[(self._index() + count) % len(DAYS)]