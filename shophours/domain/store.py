"""
Thread-safe storage for the weekly schedule and per-date overrides.
"""

import threading
from datetime import date
from typing import Dict, Generic, Hashable, Optional, TypeVar

from .models import OpenHours, Weekday, WorkHours

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class AtomicMap(Generic[K, V]):
    """
    Mapping whose reads and writes are serialized by an internal lock.

    Callers never take the lock themselves; every public method is atomic.
    """

    def __init__(self, initial: Optional[Dict[K, V]] = None):
        self._lock = threading.Lock()
        self._data: Dict[K, V] = dict(initial or {})

    def get(self, key: K) -> Optional[V]:
        with self._lock:
            return self._data.get(key)

    def compare_and_swap(self, key: K, expected: V, new: V) -> bool:
        """
        Replace the value for ``key`` only if it is still ``expected``.

        Identity is compared, so a concurrent write of an equal value still
        counts as a change. Missing keys are never created.
        """
        with self._lock:
            if key not in self._data or self._data[key] is not expected:
                return False
            self._data[key] = new
            return True

    def put(self, key: K, value: V) -> V:
        """Insert or replace ``key`` and return the stored value."""
        with self._lock:
            self._data[key] = value
            return value

    def snapshot(self) -> Dict[K, V]:
        """Return a point-in-time copy of the mapping."""
        with self._lock:
            return dict(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


def as_plain_date(day: date) -> date:
    """Normalize pendulum/datetime values to a plain ``date`` key."""
    return date(day.year, day.month, day.day)


class ScheduleStore:
    """
    The shop schedule: seven weekday entries plus sparse date overrides.

    The weekday key set is fixed once initialized. Writes go through
    ``swap_weekday`` and ``put_date_override`` only.
    """

    def __init__(self):
        self._weekly: AtomicMap[Weekday, WorkHours] = AtomicMap()
        self._overrides: AtomicMap[date, WorkHours] = AtomicMap()

    @classmethod
    def initialize(cls) -> "ScheduleStore":
        """Create a store with every weekday open for the full day."""
        store = cls()
        store._weekly = AtomicMap({day: OpenHours.full_day() for day in Weekday})
        return store

    def get_weekday(self, day: Weekday) -> Optional[WorkHours]:
        return self._weekly.get(day)

    def get_date_override(self, day: date) -> Optional[WorkHours]:
        return self._overrides.get(as_plain_date(day))

    def effective_hours(self, day: date) -> Optional[WorkHours]:
        """Return the override for ``day`` if any, else its weekday entry."""
        override = self.get_date_override(day)
        if override is not None:
            return override
        return self.get_weekday(Weekday.of(day))

    def swap_weekday(self, day: Weekday, expected: WorkHours, new: WorkHours) -> bool:
        return self._weekly.compare_and_swap(day, expected, new)

    def put_date_override(self, day: date, hours: WorkHours) -> WorkHours:
        return self._overrides.put(as_plain_date(day), hours)

    def weekly_snapshot(self) -> Dict[Weekday, WorkHours]:
        return self._weekly.snapshot()

    def overrides_snapshot(self) -> Dict[date, WorkHours]:
        return self._overrides.snapshot()
