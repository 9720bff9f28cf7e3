"""
Domain models for weekly hours, closures and date overrides.
"""

from dataclasses import dataclass
from datetime import date, time
from enum import Enum
from typing import Union


class Weekday(Enum):
    """Days of the week, numbered like ``date.weekday()`` (0=Monday)."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def of(cls, day: date) -> "Weekday":
        """Return the weekday a calendar date falls on."""
        return cls(day.weekday())

    @classmethod
    def parse(cls, name: str) -> "Weekday":
        """
        Resolve an English day name (case-insensitive) to a Weekday.

        Raises:
            ValueError: If the name is not a day of the week
        """
        key = name.strip().upper()
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown day of the week: '{name}'") from None

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class OpenHours:
    """
    Opening interval within a single day.

    Invariant: open must be before close.
    """
    open: time
    close: time

    def __post_init__(self):
        if self.open >= self.close:
            raise ValueError(f"Opening time {self.open} must be before closing time {self.close}")

    @property
    def is_open(self) -> bool:
        return True

    @classmethod
    def full_day(cls) -> "OpenHours":
        """Return the maximal interval 00:00:00 - 23:59:59."""
        return cls(open=time.min, close=time(23, 59, 59))

    def __str__(self) -> str:
        return f"{self.open.strftime('%H:%M')} - {self.close.strftime('%H:%M')}"


@dataclass(frozen=True)
class ClosedHours:
    """Marker for a day or date without service."""

    @property
    def is_open(self) -> bool:
        return False

    def __str__(self) -> str:
        return "closed"


CLOSED = ClosedHours()

WorkHours = Union[OpenHours, ClosedHours]
