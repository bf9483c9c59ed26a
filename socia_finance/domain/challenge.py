"""Scoring of the four-week "Reto" guide (daily tasks)"""

from datetime import date
from typing import Optional, Set, Tuple
from socia_finance.domain.models import ChallengeScore, WeekStatus
from socia_finance.domain.policy import (
    GUIDE_WEEKS,
    GUIDE_DAYS_PER_WEEK,
    POINTS_PER_TASK,
    POINTS_PER_FULL_WEEK,
)
from socia_finance.utils.date_utils import week_of_month


def week_status(completed: int, week: int, current_week: int) -> str:
    if completed == GUIDE_DAYS_PER_WEEK:
        return "complete"
    elif completed > 0:
        return "in-progress"
    elif week <= current_week:
        return "behind"
    else:
        return "upcoming"


def score_challenge(completed_tasks: Set[Tuple[int, int]], today: Optional[date] = None) -> ChallengeScore:
    """
    Points earned on the guide.

    Each completed (week, day) task is worth 10 points and a fully completed
    week earns a 30 point bonus. Tasks outside the 4x7 grid are ignored.
    """
    if today is None:
        today = date.today()
    current_week = week_of_month(today, GUIDE_WEEKS)

    total_points = 0
    weeks = []
    for week in range(1, GUIDE_WEEKS + 1):
        completed = sum(
            1 for day in range(1, GUIDE_DAYS_PER_WEEK + 1) if (week, day) in completed_tasks
        )
        total_points += completed * POINTS_PER_TASK
        if completed == GUIDE_DAYS_PER_WEEK:
            total_points += POINTS_PER_FULL_WEEK
        weeks.append(WeekStatus(week=week, completed=completed, status=week_status(completed, week, current_week)))

    return ChallengeScore(total_points=total_points, weeks=weeks)
