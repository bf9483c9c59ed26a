"""Unit tests for purchase cycles and cross-sell suggestions"""

from datetime import date
from socia_finance.domain.clients import (
    compute_cycle,
    is_due_soon,
    due_soon_clients,
    suggest_complement,
    last_category_by_client,
    GENERIC_SUGGESTION,
)
from socia_finance.domain.models import ClientCycleProfile


TODAY = date(2024, 1, 27)


def test_compute_cycle_two_purchases():
    """Test 14-day gap, last purchase 12 days ago -> due in 2 days"""
    profile = compute_cycle([date(2024, 1, 1), date(2024, 1, 15)], TODAY)

    assert profile.average_gap_days == 14
    assert profile.days_since_last == 12
    assert profile.days_until_next == 2
    assert is_due_soon(profile) is True


def test_compute_cycle_rounds_average_half_up():
    """Test gaps 10 and 11 average 10.5 -> 11"""
    profile = compute_cycle([date(2024, 1, 1), date(2024, 1, 11), date(2024, 1, 22)], TODAY)
    assert profile.average_gap_days == 11


def test_compute_cycle_needs_two_purchases():
    assert compute_cycle([], TODAY) is None
    assert compute_cycle([date(2024, 1, 1)], TODAY) is None


def test_compute_cycle_overdue_client_is_negative():
    profile = compute_cycle([date(2023, 12, 1), date(2023, 12, 11)], TODAY)

    assert profile.average_gap_days == 10
    assert profile.days_until_next == -37
    assert is_due_soon(profile) is False


def test_is_due_soon_window_edges():
    """Test the window is +/- 3 days inclusive"""
    assert is_due_soon(ClientCycleProfile(average_gap_days=20, days_since_last=17, days_until_next=3)) is True
    assert is_due_soon(ClientCycleProfile(average_gap_days=20, days_since_last=23, days_until_next=-3)) is True
    assert is_due_soon(ClientCycleProfile(average_gap_days=20, days_since_last=16, days_until_next=4)) is False
    assert is_due_soon(ClientCycleProfile(average_gap_days=20, days_since_last=24, days_until_next=-4)) is False


def test_is_due_soon_same_day_purchases():
    """Test a zero-day cycle never counts as due"""
    profile = compute_cycle([TODAY, TODAY], TODAY)
    assert profile.average_gap_days == 0
    assert is_due_soon(profile) is False


def test_is_due_soon_without_profile():
    assert is_due_soon(None) is False


def test_due_soon_clients_sorts_dates_per_client():
    """Test dates are sorted before the cycle is computed"""
    dates_by_client = {
        "ana": [date(2024, 1, 15), date(2024, 1, 1)],
        "bety": [date(2024, 1, 20)],
        "caro": [date(2023, 11, 1), date(2023, 11, 5)],
    }

    results = due_soon_clients(dates_by_client, TODAY)

    assert [client_id for client_id, _ in results] == ["ana"]
    assert results[0][1].days_until_next == 2


def test_suggest_complement_known_categories():
    assert suggest_complement("Tenis") == "Bolso, Blusa o Jeans"
    assert suggest_complement("Jeans") == "Botines, Tacones o Bolso"
    assert suggest_complement("Lencería") == "Fragancia o Maquillaje"


def test_suggest_complement_unknown_category():
    assert suggest_complement("Perfume") == GENERIC_SUGGESTION
    assert suggest_complement("") == GENERIC_SUGGESTION


def test_last_category_by_client_keeps_latest():
    items = [
        ("ana", date(2024, 1, 1), "Tenis"),
        ("ana", date(2024, 1, 20), "Vestido"),
        ("ana", date(2024, 1, 10), "Jeans"),
        ("bety", date(2024, 1, 5), "Pijama"),
    ]

    latest = last_category_by_client(items)

    assert latest["ana"] == ("Vestido", date(2024, 1, 20))
    assert latest["bety"] == ("Pijama", date(2024, 1, 5))
    assert suggest_complement(latest["ana"][0]) == "Botines, Tacones o Bolso"
