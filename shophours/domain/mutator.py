"""
Update operations over the schedule store.

Single-entry updates are atomic. Batch updates are best effort: they stop
at the first failure and keep whatever was already applied.
"""

import logging
from datetime import date
from typing import Iterable, Optional

from .models import CLOSED, Weekday, WorkHours
from .store import ScheduleStore

logger = logging.getLogger(__name__)


class ScheduleMutator:
    """Applies hour changes to a ScheduleStore using compare-and-swap."""

    def __init__(self, store: ScheduleStore):
        self._store = store

    def update_weekday(self, day: Weekday, new_hours: Optional[WorkHours] = None) -> bool:
        """
        Replace the hours of one weekday.

        Args:
            day: Weekday to update
            new_hours: New hours, or None to close the day

        Returns:
            False if the day is unknown or the entry changed concurrently
            between the read and the swap. The caller decides whether to retry.
        """
        current = self._store.get_weekday(day)
        if current is None:
            logger.warning("Ignoring update for unrecognized day %r", day)
            return False

        target = new_hours if new_hours is not None else CLOSED
        if not self._store.swap_weekday(day, current, target):
            logger.warning("Concurrent update detected for %s, hours left unchanged", day)
            return False

        logger.debug("Set %s hours to %s", day, target)
        return True

    def update_week(
        self,
        new_hours: Optional[WorkHours] = None,
        days: Optional[Iterable[Weekday]] = None
    ) -> bool:
        """Apply ``update_weekday`` to ``days`` (all seven when None)."""
        targets = list(Weekday) if days is None else list(days)

        for day in targets:
            if not self.update_weekday(day, new_hours):
                return False

        return True

    def add_date(self, day: date, hours: Optional[WorkHours] = None) -> WorkHours:
        """Insert or replace the override for ``day``; None closes it."""
        stored = self._store.put_date_override(day, hours if hours is not None else CLOSED)
        logger.debug("Set override for %s to %s", day, stored)
        return stored

    def add_dates(self, days: Iterable[date], hours: Optional[WorkHours] = None) -> bool:
        for day in days:
            if self.add_date(day, hours) is None:
                return False
        return True
