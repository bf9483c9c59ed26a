"""Unit tests for credit payment schedules"""

import pytest
from datetime import date, timedelta
from socia_finance.domain.installments import generate_payment_schedule


def test_generate_payment_schedule_equal_split():
    """Test schedule with evenly divisible amount"""
    schedule = generate_payment_schedule(1200.0, 4)

    assert len(schedule) == 4
    assert all(inst.amount == pytest.approx(300.0) for inst in schedule)
    assert [inst.payment_number for inst in schedule] == [1, 2, 3, 4]


def test_generate_payment_schedule_rounding():
    """Test last installment absorbs the remainder"""
    schedule = generate_payment_schedule(1100.0, 3)

    assert schedule[0].amount == pytest.approx(366.66)
    assert schedule[1].amount == pytest.approx(366.66)
    assert schedule[2].amount == pytest.approx(366.68)  # Last absorbs +2 cents
    assert sum(inst.amount for inst in schedule) == pytest.approx(1100.0)


def test_generate_payment_schedule_dates():
    """Test bi-weekly due dates (14 days apart)"""
    start = date(2024, 3, 15)
    schedule = generate_payment_schedule(400.0, 4, start_date=start)

    assert schedule[0].due_date == start
    assert schedule[1].due_date == start + timedelta(days=14)
    assert schedule[2].due_date == start + timedelta(days=28)
    assert schedule[3].due_date == start + timedelta(days=42)


def test_generate_payment_schedule_default_start():
    """Test first payment defaults to one interval from today"""
    schedule = generate_payment_schedule(300.0, 2, interval_days=7)
    assert schedule[0].due_date == date.today() + timedelta(days=7)


def test_generate_payment_schedule_single_payment():
    schedule = generate_payment_schedule(999.99, 1, start_date=date(2024, 1, 1))

    assert len(schedule) == 1
    assert schedule[0].amount == pytest.approx(999.99)


def test_generate_payment_schedule_zero_amount():
    """Test handling of zero amount"""
    assert generate_payment_schedule(0, 4) == []
    assert generate_payment_schedule(100, 0) == []


def test_generate_payment_schedule_sub_cent_amount():
    """Test an amount that rounds to zero cents yields no installments"""
    assert generate_payment_schedule(0.004, 3) == []
