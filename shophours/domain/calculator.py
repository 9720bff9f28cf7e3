"""
Completion-time calculation over the shop schedule.

This is the heart of the application - pure domain logic that walks forward
through the schedule one calendar day at a time.
"""

import logging
from datetime import date, datetime, time

import pendulum
from pendulum import DateTime

from .exceptions import NoScheduleError, RolloverLimitError
from .store import ScheduleStore, as_plain_date
from .validator import ScheduleValidator

logger = logging.getLogger(__name__)

# Roughly ten years of calendar days.
DEFAULT_MAX_ROLLOVER_DAYS = 3660

TIMESTAMP_FORMAT = "ddd MMM DD HH:mm:ss YYYY"

SECONDS_PER_MINUTE = 60


def _seconds_of_day(value: time | datetime) -> int:
    return value.hour * 3600 + value.minute * 60 + value.second


def format_timestamp(value: datetime) -> str:
    """Render a completion time, e.g. ``Fri Nov 08 11:00:00 2024``."""
    if not isinstance(value, DateTime):
        value = pendulum.instance(value)
    return value.format(TIMESTAMP_FORMAT, locale="en")


class CompletionCalculator:
    """
    Computes when a service of a given duration is guaranteed to be done.

    Algorithm, per calendar day starting at the requested instant:
    1. Resolve the effective hours (date override, else weekday entry)
    2. Closed day, or current time already past closing: move to the next
       day at 00:00:00 without consuming minutes
    3. Start at max(current time, opening) and add the remaining minutes
    4. Finish if that is not after closing, otherwise carry the overflow
       (whole minutes) to the next day at 00:00:00
    """

    def __init__(
        self,
        store: ScheduleStore,
        validator: ScheduleValidator | None = None,
        max_rollover_days: int = DEFAULT_MAX_ROLLOVER_DAYS
    ):
        if max_rollover_days <= 0:
            raise ValueError(f"max_rollover_days must be greater than zero, got {max_rollover_days}")

        self._store = store
        self._validator = validator or ScheduleValidator(store)
        self.max_rollover_days = max_rollover_days

    def completion(self, minutes: int, start: datetime) -> DateTime:
        """
        Find the completion date-time for ``minutes`` of work from ``start``.

        Args:
            minutes: Service duration, must not be negative
            start: Date and wall-clock time the service begins

        Returns:
            Naive pendulum DateTime within some day's open interval

        Raises:
            NoScheduleError: If no open hours exist forward of the start date
            RolloverLimitError: If no completion is found within
                ``max_rollover_days`` calendar days
        """
        if minutes < 0:
            raise ValueError(f"Duration must not be negative, got {minutes}")

        current_date = pendulum.Date(start.year, start.month, start.day)

        if not self._validator.has_any_schedule(current_date):
            raise NoScheduleError()

        current = _seconds_of_day(start)
        remaining = minutes

        for _ in range(self.max_rollover_days):
            hours = self._store.effective_hours(current_date)

            if hours is not None and hours.is_open:
                opening = _seconds_of_day(hours.open)
                closing = _seconds_of_day(hours.close)

                if current <= closing:
                    end = max(current, opening) + remaining * SECONDS_PER_MINUTE
                    if end <= closing:
                        return self._to_datetime(current_date, end)
                    remaining = (end - closing) // SECONDS_PER_MINUTE

            current_date = current_date.add(days=1)
            current = 0

        logger.info(
            "No completion for %d minutes from %s within %d days",
            minutes, start, self.max_rollover_days
        )
        raise RolloverLimitError(
            f"No opening hours found within {self.max_rollover_days} days of {as_plain_date(start).isoformat()}."
        )

    @staticmethod
    def _to_datetime(day: date, seconds: int) -> DateTime:
        return pendulum.naive(
            day.year,
            day.month,
            day.day,
            seconds // 3600,
            seconds % 3600 // 60,
            seconds % 60
        )
