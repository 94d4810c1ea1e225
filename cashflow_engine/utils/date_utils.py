"""Calendar helpers shared by the recurrence and billing paths"""

from calendar import monthrange
from datetime import date


def last_day_of_month(year: int, month: int) -> int:
    """Number of days in the given month (month is 1-12)"""
    return monthrange(year, month)[1]


def clamp_day(year: int, month: int, day: int) -> date:
    """Build a date, pulling day back to the month's last day when it overflows"""
    return date(year, month, min(day, last_day_of_month(year, month)))


def shift_month(year: int, month: int, months: int) -> tuple[int, int]:
    """Move (year, month) forward by a number of months, rolling over years"""
    month_index = month - 1 + months
    return year + month_index // 12, month_index % 12 + 1


def end_of_year(on: date) -> date:
    """31 December of the given date's year"""
    return date(on.year, 12, 31)
