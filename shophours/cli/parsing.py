"""
Parsing of raw command-line input into typed schedule values.

Every function raises InputFormatError with a message that can be shown
to the user as-is.
"""

from datetime import date, datetime, time
from typing import List, Tuple

import pendulum

from ..domain.exceptions import InputFormatError
from ..domain.models import OpenHours, Weekday

LIST_SEPARATOR = ","
DATE_FORMAT = "YYYY-MM-DD"
TIME_FORMAT = "HH:mm"
DATETIME_FORMAT = "YYYY-MM-DD HH:mm"


def parse_weekday(value: str) -> Weekday:
    try:
        return Weekday.parse(value)
    except ValueError:
        raise InputFormatError(
            f"The day of the week '{value}' is not valid. "
            f"Please provide a valid day (e.g., 'Monday', 'Tuesday')."
        ) from None


def parse_weekdays(value: str) -> List[Weekday]:
    """Parse a comma-separated list such as 'Sunday, Wednesday'."""
    return [parse_weekday(item) for item in value.split(LIST_SEPARATOR)]


def parse_time(value: str) -> time:
    try:
        parsed = pendulum.from_format(value.strip(), TIME_FORMAT)
    except ValueError:
        raise InputFormatError(f"The hour format is incorrect: {value}. It must be 'HH:mm'.") from None
    return time(parsed.hour, parsed.minute)


def parse_date(value: str) -> date:
    try:
        parsed = pendulum.from_format(value.strip(), DATE_FORMAT)
    except ValueError:
        raise InputFormatError(
            f"The date format is incorrect: {value}. It must be in 'yyyy-MM-dd' format."
        ) from None
    return date(parsed.year, parsed.month, parsed.day)


def parse_dates(value: str) -> List[date]:
    """Parse a comma-separated list of 'yyyy-MM-dd' dates."""
    return [parse_date(item) for item in value.split(LIST_SEPARATOR)]


def parse_datetime(value: str) -> datetime:
    try:
        parsed = pendulum.from_format(value.strip(), DATETIME_FORMAT)
    except ValueError:
        raise InputFormatError(
            f"The date and time format is incorrect: {value}. It must be in 'yyyy-MM-dd HH:mm' format."
        ) from None
    return parsed.naive()


def parse_hours(opening: str, closing: str) -> OpenHours:
    """Parse an opening/closing pair, rejecting empty or inverted intervals."""
    open_time = parse_time(opening)
    close_time = parse_time(closing)

    if close_time <= open_time:
        raise InputFormatError(
            f"The closing hour ({close_time:%H:%M}) cannot be equal to or earlier "
            f"than the opening hour ({open_time:%H:%M})."
        )

    return OpenHours(open=open_time, close=close_time)


def parse_hours_range(value: str) -> OpenHours:
    """Parse 'HH:mm-HH:mm'."""
    opening, sep, closing = value.partition("-")
    if not sep:
        raise InputFormatError(f"The hours range '{value}' must look like '09:00-18:00'.")
    return parse_hours(opening, closing)


def parse_day_hours(value: str) -> Tuple[Weekday, OpenHours]:
    """Parse 'Monday=09:00-18:00'."""
    day, sep, hours = value.partition("=")
    if not sep:
        raise InputFormatError(f"'{value}' must look like 'Monday=09:00-18:00'.")
    return parse_weekday(day), parse_hours_range(hours)


def parse_date_hours(value: str) -> Tuple[date, OpenHours]:
    """Parse '2024-12-24=09:00-13:00'."""
    day, sep, hours = value.partition("=")
    if not sep:
        raise InputFormatError(f"'{value}' must look like '2024-12-24=09:00-13:00'.")
    return parse_date(day), parse_hours_range(hours)


def parse_minutes(value: int) -> int:
    if value < 0:
        raise InputFormatError(
            "The duration in minutes cannot be negative. Please provide a valid positive number."
        )
    return value
