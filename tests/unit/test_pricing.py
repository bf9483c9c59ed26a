"""Unit tests for the sale simulator"""

import pytest
from socia_finance.domain.models import PricingConfig, CostSplitPreference
from socia_finance.domain.pricing import (
    compute_split,
    split_sale_amount,
    suggested_markup_pct,
    classify_markup,
    is_healthy_preference,
    validate_preference,
)
from socia_finance.domain.exceptions import InvalidPreferenceError


def test_compute_split_cash_percent_markup():
    """Test base 850 at +54% cash -> 1309 split 65/30/5"""
    result = compute_split(PricingConfig(base_price=850, markup_mode="percent", markup_value=54))

    assert result.active is True
    assert result.markup_amount == pytest.approx(459.0)
    assert result.client_price == pytest.approx(1309.0)
    assert result.commission_amount == 0
    assert result.product_share == pytest.approx(850.85)
    assert result.profit_share == pytest.approx(392.70)
    assert result.expense_share == pytest.approx(65.45)
    assert result.installment_amount == pytest.approx(1309.0)


def test_compute_split_fixed_amount_markup():
    """Test markup given as a fixed amount"""
    result = compute_split(PricingConfig(base_price=500, markup_mode="amount", markup_value=250))

    assert result.markup_amount == 250
    assert result.client_price == pytest.approx(750.0)


def test_compute_split_credit_commission_and_installments():
    """Test credit commission is added on top and spread over installments"""
    result = compute_split(
        PricingConfig(
            base_price=1000,
            markup_value=50,
            sale_mode="credit",
            credit_commission_pct=10,
            installment_count=4,
        )
    )

    assert result.price_before_commission == pytest.approx(1500.0)
    assert result.commission_amount == pytest.approx(150.0)
    assert result.client_price == pytest.approx(1650.0)
    assert result.installment_amount == pytest.approx(412.5)


def test_compute_split_cash_ignores_commission():
    """Test commission percentage has no effect on cash sales"""
    result = compute_split(PricingConfig(base_price=100, markup_value=50, credit_commission_pct=20))
    assert result.client_price == pytest.approx(150.0)


def test_compute_split_shares_sum_to_client_price():
    """Test the three shares always add back to the client price"""
    result = compute_split(PricingConfig(base_price=333.33, markup_value=37))
    total = result.product_share + result.profit_share + result.expense_share
    assert total == pytest.approx(result.client_price)


def test_compute_split_zero_base_is_inactive():
    """Test base price 0 returns an inactive all-zero result"""
    result = compute_split(PricingConfig(base_price=0, markup_value=54))

    assert result.active is False
    assert result.client_price == 0
    assert result.product_share == 0
    assert result.profit_share == 0
    assert result.expense_share == 0


def test_split_sale_amount_uses_profile_percentages():
    """Test a recorded sale is split with the socia's own percentages"""
    preference = CostSplitPreference(pct_reposicion=60, pct_ganancia=35, pct_ahorro=10)
    result = split_sale_amount(1000, preference)

    assert result.product_share == pytest.approx(600.0)
    assert result.profit_share == pytest.approx(350.0)
    assert result.expense_share == pytest.approx(50.0)


def test_suggested_markup_for_default_profit():
    """Test 30% profit needs a +54% markup over cost"""
    assert suggested_markup_pct(30) == 54


def test_suggested_markup_grows_with_profit():
    assert suggested_markup_pct(40) > suggested_markup_pct(30) > suggested_markup_pct(20)


@pytest.mark.parametrize(
    "markup,expected",
    [(60, "covers-all"), (50, "covers-all"), (40, "check-expenses"), (35, "check-expenses"), (20, "too-low")],
)
def test_classify_markup(markup, expected):
    assert classify_markup(markup) == expected


def test_is_healthy_preference():
    """Test product below 50% or profit below 10% is flagged"""
    assert is_healthy_preference(CostSplitPreference()) is True
    assert is_healthy_preference(CostSplitPreference(pct_reposicion=45, pct_ganancia=50)) is False
    assert is_healthy_preference(CostSplitPreference(pct_reposicion=90, pct_ganancia=5)) is False


def test_validate_preference_rejects_overflowing_buckets():
    """Test product + profit above 100 cannot split a sale"""
    with pytest.raises(InvalidPreferenceError):
        validate_preference(CostSplitPreference(pct_reposicion=80, pct_ganancia=30))


def test_validate_preference_rejects_out_of_range():
    with pytest.raises(InvalidPreferenceError):
        validate_preference(CostSplitPreference(pct_ahorro=120))


def test_default_preference_has_five_percent_expenses():
    preference = validate_preference(CostSplitPreference())
    assert preference.pct_gastos == pytest.approx(5.0)


def test_compute_split_credit_without_markup():
    """Test base 1000, no markup, 10% commission over 3 installments"""
    result = compute_split(
        PricingConfig(base_price=1000, markup_value=0, sale_mode="credit", credit_commission_pct=10, installment_count=3)
    )

    assert result.client_price == pytest.approx(1100.0)
    assert result.installment_amount == pytest.approx(366.67, abs=0.01)


@pytest.mark.parametrize("base_price", [1, 49.99, 850, 1234.56, 20000])
@pytest.mark.parametrize("markup_value", [0, 15, 54, 120])
@pytest.mark.parametrize("sale_mode", ["cash", "credit"])
def test_compute_split_shares_always_add_up(base_price, markup_value, sale_mode):
    result = compute_split(
        PricingConfig(
            base_price=base_price,
            markup_value=markup_value,
            sale_mode=sale_mode,
            credit_commission_pct=12,
            installment_count=4,
        )
    )

    total = result.product_share + result.profit_share + result.expense_share
    assert total == pytest.approx(result.client_price)
    assert result.installment_amount * 4 == pytest.approx(result.client_price)
