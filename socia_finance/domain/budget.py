"""Budget allocator - needs / wants / savings of the profit share"""

from socia_finance.domain.models import BudgetSplit
from socia_finance.domain.policy import NEEDS_SHARE_OF_SPENDING, WANTS_SHARE_OF_SPENDING


def compute_budget_split(profit_share: float, savings_pct: float) -> BudgetSplit:
    """
    Split profit into needs, wants and savings.

    Savings is carved out first; the rest keeps the 50/30 ratio of the
    50/30/20 rule, i.e. needs 62.5% and wants 37.5% of the remainder.

    Example:
        392.70 profit at 20% savings -> 78.54 savings,
        314.16 left -> 196.35 needs / 117.81 wants
    """
    non_savings_pct = 100 - savings_pct
    needs_pct = non_savings_pct * NEEDS_SHARE_OF_SPENDING
    wants_pct = non_savings_pct * WANTS_SHARE_OF_SPENDING

    return BudgetSplit(
        needs=profit_share * needs_pct / 100,
        wants=profit_share * wants_pct / 100,
        savings=profit_share * savings_pct / 100,
        needs_pct=needs_pct,
        wants_pct=wants_pct,
        savings_pct=savings_pct,
    )
