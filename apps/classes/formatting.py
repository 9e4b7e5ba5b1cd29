"""Human-readable labels for class dates, times and sizes (en-US style)."""
from datetime import time
from typing import Union

from .progress import parse_date

TimeLike = Union[time, str]


def parse_time(value: TimeLike) -> time:
    """Coerce `HH:MM` / `HH:MM:SS` strings or time objects to a time."""
    if isinstance(value, time):
        return value
    try:
        return time.fromisoformat(value.strip())
    except (AttributeError, ValueError):
        raise ValueError(f"Invalid time: {value!r}")


def format_date(value) -> str:
    """`Jan 5`"""
    d = parse_date(value)
    return f"{d:%b} {d.day}"


def format_date_range(start, end) -> str:
    """`Jan 5 - Feb 2`, or a single date when both ends fall on the same day."""
    start_date = parse_date(start)
    end_date = parse_date(end)
    if start_date == end_date:
        return format_date(start_date)
    return f"{format_date(start_date)} - {format_date(end_date)}"


def format_time(value: TimeLike) -> str:
    """`9:00 AM`"""
    t = parse_time(value)
    hour = t.hour % 12 or 12
    suffix = "AM" if t.hour < 12 else "PM"
    return f"{hour}:{t.minute:02d} {suffix}"


def format_time_range(start: TimeLike, end: TimeLike) -> str:
    return f"{format_time(start)} - {format_time(end)}"


def format_duration(start: TimeLike, end: TimeLike) -> str:
    """
    Length of a session: `1 hr 30 min`, `2 hours`, `1 hour`, `45 min`.

    An end before the start counts as zero, which reads `0 minutes`.
    """
    start_time = parse_time(start)
    end_time = parse_time(end)
    minutes = max(
        (end_time.hour * 60 + end_time.minute) - (start_time.hour * 60 + start_time.minute),
        0,
    )
    if minutes == 0:
        return "0 minutes"

    hours, remaining_minutes = divmod(minutes, 60)
    if hours and remaining_minutes:
        return f"{hours} hr {remaining_minutes} min"
    if hours:
        return "1 hour" if hours == 1 else f"{hours} hours"
    return f"{remaining_minutes} min"


def weeks_label(weeks: int) -> str:
    return f"{weeks} {'week' if weeks == 1 else 'weeks'}"


def spots_label(spots_left: int) -> str:
    return f"{spots_left} spot{'' if spots_left == 1 else 's'} left"
