"""
Application service exposing the schedule operations.

The service owns the one ScheduleStore for its lifetime and wires the
mutator, validator and calculator around it. Presenting layers (the CLI)
talk to this class only; they never reach into the store.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Dict, Iterable, Optional

from ..config import AppConfig
from ..domain.calculator import DEFAULT_MAX_ROLLOVER_DAYS, CompletionCalculator, format_timestamp
from ..domain.exceptions import InternalScheduleError, ScheduleError
from ..domain.models import Weekday, WorkHours
from ..domain.mutator import ScheduleMutator
from ..domain.store import ScheduleStore
from ..domain.validator import ScheduleValidator

logger = logging.getLogger(__name__)


class ScheduleService:
    """
    Configures the shop schedule and answers completion-time queries.

    Create one instance at start-up; it needs no teardown.
    """

    def __init__(self, max_rollover_days: int = DEFAULT_MAX_ROLLOVER_DAYS) -> None:
        self._store = ScheduleStore.initialize()
        self._mutator = ScheduleMutator(self._store)
        self._validator = ScheduleValidator(self._store)
        self._calculator = CompletionCalculator(
            self._store,
            validator=self._validator,
            max_rollover_days=max_rollover_days,
        )

    @classmethod
    def initialize_schedule(cls, config: Optional[AppConfig] = None) -> "ScheduleService":
        """
        Build a service, optionally seeding the schedule from configuration.

        Configured weekday hours are applied first, then closed days, then
        date hours and closed dates.
        """
        if config is None:
            return cls()

        service = cls(max_rollover_days=config.max_rollover_days)

        for day, hours in config.weekly_hours().items():
            service.set_weekday_hours(day, hours)
        if config.closed_days:
            service.close_days(config.closed_weekdays())
        for day, hours in config.date_hours().items():
            service.set_date_hours(day, hours)
        if config.closed_dates:
            service.close_dates(config.closed_dates)

        return service

    def set_week_hours(
        self,
        hours: Optional[WorkHours],
        days: Optional[Iterable[Weekday]] = None,
    ) -> bool:
        """Set ``hours`` on ``days``, or on the whole week when None."""
        return self._mutator.update_week(hours, days)

    def set_weekday_hours(self, day: Weekday, hours: Optional[WorkHours] = None) -> bool:
        return self._mutator.update_weekday(day, hours)

    def set_date_hours(self, day: date, hours: Optional[WorkHours] = None) -> WorkHours:
        return self._mutator.add_date(day, hours)

    def set_dates_hours(self, days: Iterable[date], hours: Optional[WorkHours] = None) -> bool:
        return self._mutator.add_dates(days, hours)

    def close_days(self, days: Iterable[Weekday]) -> bool:
        """Mark the given weekdays closed."""
        return self._mutator.update_week(None, days)

    def close_dates(self, days: Iterable[date]) -> bool:
        """Mark the given dates closed regardless of their weekday hours."""
        return self._mutator.add_dates(days, None)

    def compute_completion(self, minutes: int, start: datetime) -> str:
        """
        Return the formatted completion timestamp for a service.

        Raises:
            NoScheduleError: The schedule has no open hours forward of ``start``
            RolloverLimitError: No completion within the day-count guard
            InternalScheduleError: Date arithmetic failed (e.g. past year 9999)
            ValueError: ``minutes`` is negative
        """
        if minutes < 0:
            raise ValueError(f"Duration must not be negative, got {minutes}")

        try:
            finish = self._calculator.completion(minutes, start)
            return format_timestamp(finish)
        except ScheduleError as exc:
            logger.info("Cannot schedule %d minutes from %s: %s", minutes, start, exc)
            raise
        except (OverflowError, ValueError) as exc:
            logger.exception("Unexpected failure computing completion")
            raise InternalScheduleError(f"Unable to compute completion date: {exc}") from exc

    def weekly_hours(self) -> Dict[Weekday, WorkHours]:
        """Current weekday hours in Monday-to-Sunday order."""
        snapshot = self._store.weekly_snapshot()
        return {day: snapshot[day] for day in Weekday if day in snapshot}

    def date_overrides(self) -> Dict[date, WorkHours]:
        """Current date overrides in date order."""
        return dict(sorted(self._store.overrides_snapshot().items()))
