"""Goal progress engine - completion, pace and status toward a target"""

from datetime import date
from typing import List, Optional
from socia_finance.domain.models import GoalProgress, GoalProjection, MonthlyPace
from socia_finance.domain.policy import (
    PROGRESS_BANDS,
    DAYS_PER_WEEK,
    DAYS_PER_MONTH,
    WEEKS_PER_MONTH,
)
from socia_finance.utils.date_utils import days_between, periods_left
from socia_finance.utils.numbers import clamp, round_half_up


def progress_percentage(current: float, target: Optional[float]) -> int:
    """Rounded completion in [0, 100]; no target configured means 0"""
    if not target or target <= 0:
        return 0
    return int(clamp(round_half_up(current / target * 100), 0, 100))


def required_pace(amount_remaining: float, periods: int) -> float:
    """Amount to make per period; the denominator is floored at 1"""
    return amount_remaining / max(1, periods)


def classify_status(percentage: int) -> str:
    """Map a completion percentage to its motivational band"""
    for lower_bound, status in PROGRESS_BANDS:
        if percentage >= lower_bound:
            return status
    return PROGRESS_BANDS[-1][1]


def compute_progress(
    current: float,
    target: Optional[float],
    deadline: Optional[date] = None,
    today: Optional[date] = None,
) -> GoalProgress:
    """
    Compute progress toward a monetary target with an optional deadline.

    Requirements:
    - Percentage rounded and clamped to [0, 100], 0 when target is missing
    - Days remaining is signed; negative means the deadline has passed
    - Pace per day / week / month spreads the remaining amount over the
      periods left, at least one period

    Args:
        current: Amount accumulated so far
        target: Goal amount (None or 0 when no goal is configured)
        deadline: Goal deadline
        today: Reference date (default: today)
    """
    if today is None:
        today = date.today()

    percentage = progress_percentage(current, target)
    amount_remaining = max(0.0, (target or 0) - current)
    days_remaining = days_between(today, deadline) if deadline else 0

    return GoalProgress(
        percentage=percentage,
        days_remaining=days_remaining,
        amount_remaining=amount_remaining,
        pace_per_day=required_pace(amount_remaining, days_remaining),
        pace_per_week=required_pace(amount_remaining, periods_left(days_remaining, DAYS_PER_WEEK)),
        pace_per_month=required_pace(amount_remaining, periods_left(days_remaining, DAYS_PER_MONTH)),
        status=classify_status(percentage),
    )


def project_goal(
    current: float,
    target: float,
    weekly_totals: List[float],
    deadline: Optional[date],
    today: Optional[date] = None,
) -> GoalProjection:
    """
    Extrapolate the average recorded week until the deadline.

    The weekly average is the accumulated total over the number of weekly
    snapshots on record; with no deadline or no weeks left the projection
    is simply the current total.
    """
    if today is None:
        today = date.today()

    days = days_between(today, deadline) if deadline else 0
    weeks_left = periods_left(days, DAYS_PER_WEEK)
    # Average over every recorded week, not just the last eight on the chart
    weekly_average = current / len(weekly_totals) if weekly_totals else 0.0
    projected_total = current + weekly_average * weeks_left if weeks_left > 0 else current

    return GoalProjection(
        weeks_left=weeks_left,
        weekly_average=weekly_average,
        projected_total=projected_total,
        on_track=projected_total >= target,
    )


def monthly_pace(target_income: float) -> MonthlyPace:
    """Weekly and daily sales needed for a monthly income goal"""
    weekly_needed = target_income / WEEKS_PER_MONTH if target_income > 0 else 0.0
    return MonthlyPace(weekly_needed=weekly_needed, daily_needed=weekly_needed / DAYS_PER_WEEK)


def monthly_goal_percentage(month_sales: float, target_income: float) -> float:
    """Unrounded share of the monthly goal reached, capped at 100"""
    if target_income <= 0:
        return 0.0
    return min(100.0, month_sales / target_income * 100)
