"""Recurrence date generation for repeating transactions"""

from datetime import date, timedelta
from typing import Iterable, List, Optional

from cashflow_engine.domain.models import RecurrenceRule, ScheduledOccurrence
from cashflow_engine.utils.date_utils import clamp_day, end_of_year, shift_month

WEEKLY = "weekly"
MONTHLY = "monthly"
YEARLY = "yearly"

DEFAULT_MAX_COUNT = 24


def next_occurrence(current_date: date, pattern: Optional[str], target_day: Optional[int] = None) -> date:
    """
    Return the date following current_date in a recurring series.

    - weekly: +7 days, target_day ignored
    - yearly: same month next year
    - monthly (also any unknown or missing pattern): next calendar month

    For monthly and yearly the day is target_day when given, else the current
    day, pulled back to the month's last day (Jan 31 -> Feb 28).
    """
    if pattern == WEEKLY:
        return current_date + timedelta(days=7)

    day = target_day if target_day is not None else current_date.day

    if pattern == YEARLY:
        return clamp_day(current_date.year + 1, current_date.month, day)

    year, month = shift_month(current_date.year, current_date.month, 1)
    return clamp_day(year, month, day)


def generate_series(
    anchor_date: date,
    pattern: Optional[str],
    target_day: Optional[int] = None,
    boundary: Optional[date] = None,
    max_count: int = DEFAULT_MAX_COUNT,
    today: Optional[date] = None,
) -> List[ScheduledOccurrence]:
    """
    Expand a recurrence into the dates that follow anchor_date.

    Stops at the first date past boundary or after max_count occurrences,
    whichever comes first. Without a boundary the series runs to the end of
    today's year. The anchor itself is never emitted; it holds index 1, so
    generated occurrences start at index 2. A series that would run past
    the last representable date (9999-12-31) ends there.

    Example:
        anchor 2025-01-31, monthly, target_day 31, max_count 3
        -> 2025-02-28 (2), 2025-03-31 (3), 2025-04-30 (4)
    """
    if boundary is None:
        boundary = end_of_year(today or date.today())

    occurrences = []
    current = anchor_date
    while len(occurrences) < max_count:
        try:
            current = next_occurrence(current, pattern, target_day)
        except (ValueError, OverflowError):
            # Stepped past date.max, so nothing more fits before any boundary
            break
        if current > boundary:
            break
        occurrences.append(ScheduledOccurrence(date=current, index=len(occurrences) + 2))

    return occurrences


def generate_rule_series(
    rule: RecurrenceRule,
    boundary: Optional[date] = None,
    max_count: int = DEFAULT_MAX_COUNT,
    today: Optional[date] = None,
) -> List[ScheduledOccurrence]:
    """generate_series for a RecurrenceRule record"""
    return generate_series(rule.anchor_date, rule.pattern, rule.target_day, boundary, max_count, today)


def occurrence_key(series_id: str, occurrence: ScheduledOccurrence) -> str:
    """Stable upsert key for a persisted occurrence: one instance per series and date"""
    return f"{series_id}:{occurrence.date.isoformat()}"


def filter_new_occurrences(
    occurrences: Iterable[ScheduledOccurrence],
    existing_dates: Iterable[date],
) -> List[ScheduledOccurrence]:
    """Drop occurrences whose date already has a persisted instance"""
    taken = set(existing_dates)
    return [occ for occ in occurrences if occ.date not in taken]
