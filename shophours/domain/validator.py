"""
Liveness check run before the completion calculator.
"""

from datetime import date

from .store import ScheduleStore, as_plain_date


class ScheduleValidator:
    """
    Decides whether the schedule has any open hours at all.

    The check is sufficient, not exhaustive: an open override years ahead
    passes even though the calculator's day-count guard may still stop
    before reaching it.
    """

    def __init__(self, store: ScheduleStore):
        self._store = store

    def has_any_schedule(self, reference_date: date) -> bool:
        """
        True if any weekday is open, or any override strictly after
        ``reference_date`` is open.
        """
        if any(hours.is_open for hours in self._store.weekly_snapshot().values()):
            return True

        reference = as_plain_date(reference_date)
        return any(
            hours.is_open and day > reference
            for day, hours in self._store.overrides_snapshot().items()
        )
