"""
Class progress: where a weekly class stands relative to a given day.

A class meets once a week, `weeks` times, starting on `start_date` and never
after `end_date`. Given a reference day this module works out whether the
class is upcoming, in progress or completed, how many of its sessions have
already happened, and on which dates the remaining sessions fall.

Everything here is pure date arithmetic on calendar dates (no times, no
time zones). Records only need `start_date`, `end_date` and `weeks`
attributes, so both LearningClass instances and ClassWithMeta DTOs work.
"""
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import List, Optional, Union

from django.utils import timezone

DAYS_PER_WEEK = 7

DateLike = Union[date, str]


class ClassProgressStatus(str, Enum):
    UPCOMING = 'upcoming'
    IN_PROGRESS = 'in_progress'
    COMPLETED = 'completed'


@dataclass(frozen=True)
class ClassProgress:
    total_occurrences: int
    completed_occurrences: int
    remaining_occurrences: int
    status: ClassProgressStatus


def parse_date(value: DateLike) -> date:
    """
    Coerce a `YYYY-MM-DD` string, date or datetime to a date.

    Raises:
        ValueError: malformed string or unsupported type
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            raise ValueError(f"Invalid date: {value!r}")
    raise ValueError(f"Invalid date: {value!r}")


def today() -> date:
    """Current date in the club's time zone."""
    return timezone.localdate()


def _reference_day(reference_date: Optional[DateLike]) -> date:
    return today() if reference_date is None else parse_date(reference_date)


def get_class_progress(record, reference_date: Optional[DateLike] = None) -> ClassProgress:
    """
    Classify a class against `reference_date` (default: today) and count its sessions.

    - completed:   the class ended before the reference day; every session is done
    - upcoming:    the class starts after the reference day; no session is done
    - in_progress: otherwise; the sessions of every started week count as done,
                   including the current week's, capped at the total

    The total is `weeks`, but never less than one session.
    """
    total = max(int(record.weeks or 0), 1)
    current = _reference_day(reference_date)
    start = parse_date(record.start_date)
    end = parse_date(record.end_date)

    if end < current:
        return ClassProgress(total, total, 0, ClassProgressStatus.COMPLETED)

    if start > current:
        return ClassProgress(total, 0, total, ClassProgressStatus.UPCOMING)

    elapsed_days = (current - start).days
    completed = min(total, elapsed_days // DAYS_PER_WEEK + 1)
    return ClassProgress(total, completed, max(total - completed, 0), ClassProgressStatus.IN_PROGRESS)


def get_upcoming_session_dates(record, reference_date: Optional[DateLike] = None) -> List[date]:
    """
    Dates of the sessions that have not happened yet, in order.

    Sessions are weekly from `start_date`; the first remaining one is the
    session after the completed ones. Dates past `end_date` are dropped, so a
    class whose date range is shorter than `weeks` simply yields fewer dates.
    """
    progress = get_class_progress(record, reference_date)
    if progress.remaining_occurrences <= 0:
        return []

    start = parse_date(record.start_date)
    end = parse_date(record.end_date)
    offset = progress.total_occurrences - progress.remaining_occurrences

    sessions = []
    for index in range(progress.remaining_occurrences):
        session_date = start + timedelta(days=(offset + index) * DAYS_PER_WEEK)
        if session_date > end:
            break
        sessions.append(session_date)
    return sessions
