"""A 24-hour clock and a clock that shows local time in another zone."""

from __future__ import annotations


class Clock:
    """Time of day as hours, minutes and seconds."""

    def __init__(self, hours: int = 0, minutes: int = 0, seconds: int = 0) -> None:
        self.hours = hours
        self.minutes = minutes
        self.seconds = seconds

    def set_time(self, hours: int, minutes: int, seconds: int) -> None:
        """Set the time; any part out of range is set to 0 instead."""
        self.hours = hours if 0 <= hours < 24 else 0
        self.minutes = minutes if 0 <= minutes < 60 else 0
        self.seconds = seconds if 0 <= seconds < 60 else 0

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"


class WorldClock(Clock):
    """A GMT clock that also knows a time-zone offset in whole hours."""

    def __init__(
        self,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        offset: int = 0,
        zone_name: str = "GMT",
    ) -> None:
        super().__init__(hours, minutes, seconds)
        self.offset = 0
        self.zone_name = zone_name
        self.set_time_zone(offset, zone_name)

    def set_time_zone(self, offset: int, zone_name: str) -> None:
        """Set the zone; an offset outside -12..12 becomes 0."""
        self.offset = offset if -12 <= offset <= 12 else 0
        self.zone_name = zone_name

    def local_hours(self) -> int:
        """Return the hour of day in the clock's zone."""
        return (self.hours + self.offset) % 24

    def __str__(self) -> str:
        return (
            f"Local Time ({self.zone_name}): "
            f"{self.local_hours():02d}:{self.minutes:02d}:{self.seconds:02d}"
        )