"""Date manipulation utilities"""

import math
from datetime import date
from typing import List


def days_between(start: date, end: date) -> int:
    """Signed whole days from start to end (negative when end is earlier)"""
    return (end - start).days


def consecutive_gaps(dates: List[date]) -> List[int]:
    """Day differences between each date and the one before it"""
    return [(later - earlier).days for earlier, later in zip(dates, dates[1:])]


def periods_left(days: int, period_days: int) -> int:
    """Whole periods needed to cover the given days (partial periods count)"""
    return math.ceil(days / period_days)


def week_of_month(day: date, max_week: int = 4) -> int:
    """1-based week of the month, days 29-31 fold into the last week"""
    return min(max_week, math.ceil(day.day / 7))
