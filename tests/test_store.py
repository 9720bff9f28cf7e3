"""
Tests for the thread-safe schedule store.
"""

import threading
from datetime import date, time

import pendulum

from shophours.domain.models import CLOSED, OpenHours, Weekday
from shophours.domain.store import AtomicMap, ScheduleStore


class TestAtomicMap:
    """Tests for AtomicMap."""

    def test_compare_and_swap_succeeds_on_observed_value(self):
        """Test swapping when the value is unchanged since the read."""
        original = OpenHours.full_day()
        atomic = AtomicMap({"key": original})

        assert atomic.compare_and_swap("key", original, CLOSED)
        assert atomic.get("key") is CLOSED

    def test_compare_and_swap_fails_on_changed_value(self):
        """Test that a stale expected value leaves the entry untouched."""
        current = OpenHours.full_day()
        stale = OpenHours.full_day()
        atomic = AtomicMap({"key": current})

        assert not atomic.compare_and_swap("key", stale, CLOSED)
        assert atomic.get("key") is current

    def test_compare_and_swap_never_creates_keys(self):
        """Test that a missing key is not inserted."""
        atomic = AtomicMap()

        assert not atomic.compare_and_swap("missing", None, CLOSED)
        assert "missing" not in atomic
        assert len(atomic) == 0

    def test_put_inserts_and_replaces(self):
        atomic = AtomicMap()

        assert atomic.put("key", CLOSED) is CLOSED
        hours = OpenHours(open=time(9, 0), close=time(12, 0))
        assert atomic.put("key", hours) is hours
        assert atomic.snapshot() == {"key": hours}

    def test_snapshot_is_a_copy(self):
        atomic = AtomicMap({"key": CLOSED})

        snapshot = atomic.snapshot()
        snapshot["other"] = CLOSED

        assert "other" not in atomic

    def test_concurrent_swaps_on_one_key_have_one_winner(self):
        """Test that racing writers that read the same value cannot both win."""
        original = OpenHours.full_day()
        atomic = AtomicMap({"key": original})
        barrier = threading.Barrier(8)
        results = []
        results_lock = threading.Lock()

        def writer(index: int):
            new = OpenHours(open=time(index, 0), close=time(20, 0))
            barrier.wait()
            won = atomic.compare_and_swap("key", original, new)
            with results_lock:
                results.append((won, new))

        threads = [threading.Thread(target=writer, args=(i,)) for i in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        winners = [new for won, new in results if won]
        assert len(winners) == 1
        assert atomic.get("key") is winners[0]


class TestScheduleStore:
    """Tests for ScheduleStore."""

    def test_initialize_opens_every_weekday_fully(self):
        """Test that all seven weekdays default to 00:00:00 - 23:59:59."""
        store = ScheduleStore.initialize()

        weekly = store.weekly_snapshot()

        assert set(weekly) == set(Weekday)
        for hours in weekly.values():
            assert hours == OpenHours(open=time(0, 0, 0), close=time(23, 59, 59))

    def test_no_overrides_after_initialize(self):
        store = ScheduleStore.initialize()

        assert store.overrides_snapshot() == {}
        assert store.get_date_override(date(2024, 11, 8)) is None

    def test_unknown_weekday_lookup_returns_none(self):
        store = ScheduleStore.initialize()

        assert store.get_weekday(7) is None
        assert store.get_weekday("Funday") is None

    def test_effective_hours_prefers_override(self):
        """Test that a date override wins over the weekday entry."""
        store = ScheduleStore.initialize()
        store.put_date_override(date(2024, 11, 8), CLOSED)

        assert store.effective_hours(date(2024, 11, 8)) is CLOSED
        assert store.effective_hours(date(2024, 11, 15)) == OpenHours.full_day()

    def test_pendulum_dates_share_keys_with_plain_dates(self):
        """Test that override keys are normalized across date types."""
        store = ScheduleStore.initialize()
        store.put_date_override(pendulum.date(2024, 11, 8), CLOSED)

        assert store.get_date_override(date(2024, 11, 8)) is CLOSED
        assert list(store.overrides_snapshot()) == [date(2024, 11, 8)]
        assert type(list(store.overrides_snapshot())[0]) is date
