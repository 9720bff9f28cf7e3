"""
Tests for schedule update operations.
"""

import threading
from datetime import date, time

import pytest

from shophours.domain.models import CLOSED, OpenHours, Weekday
from shophours.domain.mutator import ScheduleMutator
from shophours.domain.store import ScheduleStore


@pytest.fixture
def store():
    return ScheduleStore.initialize()


@pytest.fixture
def mutator(store):
    return ScheduleMutator(store)


@pytest.fixture
def working_hours():
    return OpenHours(open=time(9, 0), close=time(18, 0))


class TestUpdateWeekday:
    """Tests for single-weekday updates."""

    def test_update_weekday(self, store, mutator, working_hours):
        """Test replacing one weekday's hours."""
        assert mutator.update_weekday(Weekday.MONDAY, working_hours)

        assert store.get_weekday(Weekday.MONDAY) == working_hours
        assert store.get_weekday(Weekday.TUESDAY) == OpenHours.full_day()

    def test_update_weekday_without_hours_closes_it(self, store, mutator):
        assert mutator.update_weekday(Weekday.SUNDAY)

        assert store.get_weekday(Weekday.SUNDAY) is CLOSED

    @pytest.mark.parametrize("day", [7, "Monday", None])
    def test_unrecognized_day_fails_without_creating_entry(self, store, mutator, working_hours, day):
        """Test that unknown keys return False and leave the week unchanged."""
        before = store.weekly_snapshot()

        assert not mutator.update_weekday(day, working_hours)

        assert store.weekly_snapshot() == before
        assert len(store.weekly_snapshot()) == 7

    def test_lost_race_returns_false(self, store, mutator, working_hours, monkeypatch):
        """Test that a value changed between read and swap is not overwritten."""
        current = store.get_weekday(Weekday.MONDAY)
        # Simulate a reader that observed an older value.
        monkeypatch.setattr(store, "get_weekday", lambda day: OpenHours.full_day())

        assert not mutator.update_weekday(Weekday.MONDAY, working_hours)

        monkeypatch.undo()
        assert store.get_weekday(Weekday.MONDAY) is current

    def test_concurrent_updates_on_different_days(self, store, mutator):
        """Test that writers on distinct days never interfere."""
        barrier = threading.Barrier(len(Weekday))
        results = {}

        def writer(day: Weekday):
            hours = OpenHours(open=time(day.value + 1, 0), close=time(20, 0))
            barrier.wait()
            results[day] = mutator.update_weekday(day, hours)

        threads = [threading.Thread(target=writer, args=(day,)) for day in Weekday]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert all(results.values())
        for day in Weekday:
            assert store.get_weekday(day).open == time(day.value + 1, 0)


class TestUpdateWeek:
    """Tests for batch weekday updates."""

    def test_update_whole_week(self, store, mutator, working_hours):
        """Test that omitting days updates all seven."""
        assert mutator.update_week(working_hours)

        assert all(hours == working_hours for hours in store.weekly_snapshot().values())

    def test_update_subset_keeps_other_days(self, store, mutator, working_hours):
        """Test that untouched weekdays keep their prior values."""
        assert mutator.update_week(working_hours, [Weekday.MONDAY, Weekday.FRIDAY])

        weekly = store.weekly_snapshot()
        assert weekly[Weekday.MONDAY] == working_hours
        assert weekly[Weekday.FRIDAY] == working_hours
        assert weekly[Weekday.TUESDAY] == OpenHours.full_day()
        assert weekly[Weekday.SUNDAY] == OpenHours.full_day()

    def test_update_week_without_hours_closes_days(self, store, mutator):
        assert mutator.update_week(days=[Weekday.SATURDAY, Weekday.SUNDAY])

        assert store.get_weekday(Weekday.SATURDAY) is CLOSED
        assert store.get_weekday(Weekday.SUNDAY) is CLOSED
        assert store.get_weekday(Weekday.MONDAY).is_open

    def test_stops_at_first_failure_without_rollback(self, store, mutator, working_hours):
        """Test best-effort semantics: earlier days stay updated."""
        result = mutator.update_week(working_hours, [Weekday.MONDAY, 7, Weekday.TUESDAY])

        assert not result
        assert store.get_weekday(Weekday.MONDAY) == working_hours
        assert store.get_weekday(Weekday.TUESDAY) == OpenHours.full_day()


class TestAddDates:
    """Tests for date overrides."""

    def test_add_date_returns_stored_hours(self, store, mutator, working_hours):
        stored = mutator.add_date(date(2024, 11, 8), working_hours)

        assert stored == working_hours
        assert store.get_date_override(date(2024, 11, 8)) == working_hours

    def test_add_date_without_hours_closes_it(self, store, mutator):
        assert mutator.add_date(date(2024, 11, 8)) is CLOSED
        assert store.get_date_override(date(2024, 11, 8)) is CLOSED

    def test_add_date_replaces_existing_override(self, store, mutator, working_hours):
        mutator.add_date(date(2024, 11, 8))
        mutator.add_date(date(2024, 11, 8), working_hours)

        assert store.get_date_override(date(2024, 11, 8)) == working_hours
        assert len(store.overrides_snapshot()) == 1

    def test_add_dates(self, store, mutator, working_hours):
        days = [date(2024, 11, 8), date(2024, 11, 9)]

        assert mutator.add_dates(days, working_hours)

        assert store.overrides_snapshot() == {day: working_hours for day in days}

    def test_add_dates_empty_list(self, mutator):
        assert mutator.add_dates([])
