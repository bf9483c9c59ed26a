"""Sale simulator - client price, commission and 3C split of a sale"""

from socia_finance.domain.models import PricingConfig, SplitResult, CostSplitPreference
from socia_finance.domain.exceptions import InvalidPreferenceError
from socia_finance.domain.policy import (
    C3_PRODUCT_SHARE,
    C3_PROFIT_SHARE,
    C3_EXPENSE_SHARE,
    MARKUP_COVERS_ALL_PCT,
    MARKUP_CHECK_EXPENSES_PCT,
    MIN_HEALTHY_REPOSICION_PCT,
    MIN_HEALTHY_GANANCIA_PCT,
)
from socia_finance.utils.numbers import round_half_up


def compute_split(config: PricingConfig) -> SplitResult:
    """
    Derive the client-facing price and its 3C split from a base cost.

    Requirements:
    - Markup is a percentage of the base price or a fixed amount
    - Credit sales add a commission on top of the marked-up price
    - Split is always the canonical 65/30/5, regardless of profile preferences
    - Full precision is kept; rounding belongs to presentation

    Args:
        config: Base price (what the socia pays), markup and sale mode

    Returns:
        SplitResult; with a base price of 0 the simulator is inactive and
        every figure is 0

    Example:
        base 850, +54%, cash -> client price 1309
        1309 -> 850.85 product / 392.70 profit / 65.45 expenses
    """
    if config.base_price <= 0:
        return SplitResult(
            client_price=0.0,
            product_share=0.0,
            profit_share=0.0,
            expense_share=0.0,
            active=False,
        )

    if config.markup_mode == "percent":
        markup_amount = config.base_price * config.markup_value / 100
    else:
        markup_amount = config.markup_value

    price_before_commission = config.base_price + markup_amount

    if config.sale_mode == "credit":
        commission_amount = price_before_commission * config.credit_commission_pct / 100
    else:
        commission_amount = 0.0
    client_price = price_before_commission + commission_amount

    installment_amount = (
        client_price / config.installment_count
        if config.installment_count > 1
        else client_price
    )

    return SplitResult(
        client_price=client_price,
        product_share=client_price * C3_PRODUCT_SHARE,
        profit_share=client_price * C3_PROFIT_SHARE,
        expense_share=client_price * C3_EXPENSE_SHARE,
        markup_amount=markup_amount,
        price_before_commission=price_before_commission,
        commission_amount=commission_amount,
        installment_amount=installment_amount,
    )


def split_sale_amount(amount: float, preference: CostSplitPreference) -> SplitResult:
    """Split a recorded sale with the socia's own reposicion / ganancia / gastos percentages"""
    return SplitResult(
        client_price=amount,
        product_share=amount * preference.pct_reposicion / 100,
        profit_share=amount * preference.pct_ganancia / 100,
        expense_share=amount * preference.pct_gastos / 100,
        price_before_commission=amount,
        installment_amount=amount,
        active=amount > 0,
    )


def suggested_markup_pct(pct_ganancia: float) -> int:
    """
    Markup over cost that leaves the requested profit after product and expenses.

    The product bucket is whatever remains after profit and the 5% expense
    share, so price = cost / reposicion and markup = 1 / reposicion - 1.
    30% profit -> 65% reposicion -> +54%.
    """
    reposicion = 1 - pct_ganancia / 100 - C3_EXPENSE_SHARE
    return round_half_up((1 / reposicion - 1) * 100)


def classify_markup(markup_pct: float) -> str:
    if markup_pct >= MARKUP_COVERS_ALL_PCT:
        return "covers-all"
    elif markup_pct >= MARKUP_CHECK_EXPENSES_PCT:
        return "check-expenses"
    else:
        return "too-low"


def is_healthy_preference(preference: CostSplitPreference) -> bool:
    """All three buckets stay filled"""
    return (
        preference.pct_reposicion >= MIN_HEALTHY_REPOSICION_PCT
        and preference.pct_ganancia >= MIN_HEALTHY_GANANCIA_PCT
    )


def validate_preference(preference: CostSplitPreference) -> CostSplitPreference:
    """
    Reject percentages that cannot describe a split of one sale.

    Raises:
        InvalidPreferenceError: A percentage outside [0, 100], or product
            and profit together above 100
    """
    for name in ("pct_reposicion", "pct_ganancia", "pct_ahorro"):
        value = getattr(preference, name)
        if not 0 <= value <= 100:
            raise InvalidPreferenceError(f"{name} must be between 0 and 100, got {value}")
    if preference.pct_reposicion + preference.pct_ganancia > 100:
        raise InvalidPreferenceError("pct_reposicion + pct_ganancia cannot exceed 100")
    return preference
