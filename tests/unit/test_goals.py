"""Unit tests for the goal progress engine"""

import pytest
from datetime import date, timedelta
from socia_finance.domain.goals import (
    progress_percentage,
    required_pace,
    classify_status,
    compute_progress,
    project_goal,
    monthly_pace,
    monthly_goal_percentage,
)


TODAY = date(2024, 3, 1)


def test_compute_progress_example():
    """Test 4450 of 10000 with 30 days left"""
    progress = compute_progress(4450, 10000, TODAY + timedelta(days=30), TODAY)

    assert progress.percentage == 45  # 44.5 rounds half up
    assert progress.days_remaining == 30
    assert progress.amount_remaining == pytest.approx(5550.0)
    assert progress.pace_per_day == pytest.approx(185.0)
    assert progress.pace_per_week == pytest.approx(5550 / 5)  # ceil(30 / 7) = 5 weeks
    assert progress.pace_per_month == pytest.approx(5550.0)
    assert progress.status == "started"


def test_compute_progress_without_target():
    """Test missing target reports 0% and the earliest band"""
    progress = compute_progress(1500, None, None, TODAY)

    assert progress.percentage == 0
    assert progress.amount_remaining == 0
    assert progress.status == "early"


def test_compute_progress_exceeded_target_is_clamped():
    progress = compute_progress(12000, 10000, TODAY + timedelta(days=10), TODAY)

    assert progress.percentage == 100
    assert progress.amount_remaining == 0
    assert progress.status == "complete"


def test_compute_progress_past_deadline():
    """Test negative days remaining and pace over a single period"""
    progress = compute_progress(2000, 10000, TODAY - timedelta(days=5), TODAY)

    assert progress.days_remaining == -5
    assert progress.pace_per_day == pytest.approx(8000.0)
    assert progress.pace_per_week == pytest.approx(8000.0)


def test_progress_percentage_negative_current_is_clamped():
    assert progress_percentage(-100, 1000) == 0


def test_required_pace_floors_periods_at_one():
    assert required_pace(900, 0) == 900
    assert required_pace(900, 3) == 300


@pytest.mark.parametrize(
    "percentage,expected",
    [
        (100, "complete"),
        (99, "near"),
        (76, "near"),
        (75, "halfway-plus"),
        (51, "halfway-plus"),
        (50, "started"),
        (26, "started"),
        (25, "early"),
        (0, "early"),
    ],
)
def test_classify_status_bands(percentage, expected):
    assert classify_status(percentage) == expected


def test_project_goal_on_track():
    """Test weekly average extrapolated over the weeks left"""
    projection = project_goal(6000, 10000, [1500, 1500, 1500, 1500], TODAY + timedelta(days=21), TODAY)

    assert projection.weeks_left == 3
    assert projection.weekly_average == pytest.approx(1500.0)
    assert projection.projected_total == pytest.approx(10500.0)
    assert projection.on_track is True


def test_project_goal_behind():
    projection = project_goal(1000, 10000, [500, 500], TODAY + timedelta(days=14), TODAY)

    assert projection.projected_total == pytest.approx(2000.0)
    assert projection.on_track is False


def test_project_goal_averages_every_recorded_week():
    """Test twelve weeks of history divide by twelve, not by the eight charted weeks"""
    projection = project_goal(12000, 20000, [1000] * 12, TODAY + timedelta(days=7), TODAY)

    assert projection.weekly_average == pytest.approx(1000.0)
    assert projection.projected_total == pytest.approx(13000.0)


def test_project_goal_without_weeks_or_deadline():
    projection = project_goal(3000, 10000, [], None, TODAY)

    assert projection.weeks_left == 0
    assert projection.weekly_average == 0
    assert projection.projected_total == 3000


def test_monthly_pace():
    """Test 8000 a month -> 2000 a week -> ~285.71 a day"""
    pace = monthly_pace(8000)

    assert pace.weekly_needed == pytest.approx(2000.0)
    assert pace.daily_needed == pytest.approx(2000 / 7)


def test_monthly_pace_without_goal():
    pace = monthly_pace(0)
    assert pace.weekly_needed == 0
    assert pace.daily_needed == 0


def test_monthly_goal_percentage_is_capped():
    assert monthly_goal_percentage(3000, 8000) == pytest.approx(37.5)
    assert monthly_goal_percentage(9000, 8000) == 100
    assert monthly_goal_percentage(9000, 0) == 0


def test_compute_progress_fifteen_days_left():
    progress = compute_progress(4500, 10000, TODAY + timedelta(days=15), TODAY)

    assert progress.percentage == 45
    assert progress.amount_remaining == pytest.approx(5500.0)
    assert progress.days_remaining == 15


@pytest.mark.parametrize(
    "current,target,expected",
    [(0, 10000, 0), (10000, 10000, 100), (250, 250, 100), (800, 0, 0), (800, None, 0)],
)
def test_progress_percentage_bounds(current, target, expected):
    assert progress_percentage(current, target) == expected


@pytest.mark.parametrize("target", [1, 999, 10000, 37500.5])
def test_progress_percentage_never_drops_as_savings_grow(target):
    """Test percentage is non-decreasing in current and stays within 0..100"""
    steps = [target * i / 40 for i in range(0, 49)]
    percentages = [progress_percentage(current, target) for current in steps]

    assert percentages == sorted(percentages)
    assert all(0 <= p <= 100 for p in percentages)
