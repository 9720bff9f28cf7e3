"""
Domain layer - Pure business logic without external dependencies.
"""

from .calculator import CompletionCalculator, format_timestamp
from .exceptions import (
    InputFormatError,
    InternalScheduleError,
    NoScheduleError,
    RolloverLimitError,
    ScheduleError,
)
from .models import CLOSED, ClosedHours, OpenHours, Weekday, WorkHours
from .mutator import ScheduleMutator
from .store import AtomicMap, ScheduleStore
from .validator import ScheduleValidator

__all__ = [
    "CLOSED",
    "AtomicMap",
    "ClosedHours",
    "CompletionCalculator",
    "InputFormatError",
    "InternalScheduleError",
    "NoScheduleError",
    "OpenHours",
    "RolloverLimitError",
    "ScheduleError",
    "ScheduleMutator",
    "ScheduleStore",
    "ScheduleValidator",
    "Weekday",
    "WorkHours",
    "format_timestamp",
]
