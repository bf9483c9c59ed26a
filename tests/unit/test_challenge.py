"""Unit tests for the challenge guide scoring"""

from datetime import date
from socia_finance.domain.challenge import score_challenge, week_status


def test_score_challenge_points_and_bonus():
    """Test 10 points per task plus 30 for a full week"""
    full_week = {(1, day) for day in range(1, 8)}
    tasks = full_week | {(2, 1), (2, 2)}

    score = score_challenge(tasks, date(2024, 5, 10))

    assert score.total_points == 7 * 10 + 30 + 2 * 10
    assert [w.completed for w in score.weeks] == [7, 2, 0, 0]
    assert [w.status for w in score.weeks] == ["complete", "in-progress", "upcoming", "upcoming"]


def test_score_challenge_ignores_tasks_outside_grid():
    score = score_challenge({(5, 1), (1, 8), (0, 0)}, date(2024, 5, 1))
    assert score.total_points == 0


def test_score_challenge_late_month_is_week_four():
    """Test days 29-31 fold into week 4, so every empty week is behind"""
    score = score_challenge(set(), date(2024, 5, 30))
    assert all(w.status == "behind" for w in score.weeks)


def test_week_status():
    assert week_status(0, 1, 2) == "behind"
    assert week_status(0, 2, 2) == "behind"
    assert week_status(0, 3, 2) == "upcoming"
    assert week_status(3, 3, 2) == "in-progress"
    assert week_status(7, 4, 1) == "complete"
