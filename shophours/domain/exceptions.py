"""
Domain-specific exception hierarchy for the shophours application.
"""


class ScheduleError(Exception):
    """Base class for all scheduling errors raised by the core."""


class NoScheduleError(ScheduleError):
    """Raised when the schedule has no open hours forward of the start date."""

    def __init__(self, message: str = "The shop doesn't have opening hours for the indicated date."):
        super().__init__(message)


class RolloverLimitError(ScheduleError):
    """Raised when the completion search exceeds the day-count guard."""


class InternalScheduleError(ScheduleError):
    """Raised when date arithmetic fails unexpectedly (e.g. out of range)."""


class InputFormatError(ValueError):
    """Raised by the presenting layer when raw input cannot be parsed."""
