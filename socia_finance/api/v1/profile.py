"""GET/PUT /v1/profile/* - the socia's cost-split preference"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from socia_finance.api.v1.schemas import (
    PercentagesSchema,
    PercentagesResponse,
    DistributionResponse,
    BudgetSplitSchema,
)
from socia_finance.api.dependencies import get_current_user
from socia_finance.infrastructure.clients.auth import AuthUser
from socia_finance.infrastructure.database.session import get_db
from socia_finance.infrastructure.database.repositories import ProfileRepository
from socia_finance.domain.models import CostSplitPreference
from socia_finance.domain.pricing import split_sale_amount, is_healthy_preference
from socia_finance.domain.budget import compute_budget_split

router = APIRouter()


def _percentages_response(preference: CostSplitPreference) -> PercentagesResponse:
    budget = compute_budget_split(0, preference.pct_ahorro)
    return PercentagesResponse(
        pct_reposicion=preference.pct_reposicion,
        pct_ganancia=preference.pct_ganancia,
        pct_ahorro=preference.pct_ahorro,
        pct_gastos=preference.pct_gastos,
        pct_necesidades=budget.needs_pct,
        pct_deseos=budget.wants_pct,
        healthy=is_healthy_preference(preference),
    )


@router.get("/profile/percentages", response_model=PercentagesResponse)
def get_percentages(
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Stored percentages (65/30/20 until customized) with derived buckets"""
    return _percentages_response(ProfileRepository(db).get_preference(user.user_id))


@router.put("/profile/percentages", response_model=PercentagesResponse)
def update_percentages(
    request_body: PercentagesSchema,
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    preference = CostSplitPreference(
        pct_reposicion=request_body.pct_reposicion,
        pct_ganancia=request_body.pct_ganancia,
        pct_ahorro=request_body.pct_ahorro,
    )
    ProfileRepository(db).upsert_percentages(user.user_id, preference)
    db.commit()
    return _percentages_response(preference)


@router.get("/profile/distribution", response_model=DistributionResponse)
def get_distribution(
    amount: float = Query(1000, ge=0, description="Sale amount to distribute"),
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Where each peso of a sale goes under the socia's own percentages.

    Returns:
        Product / profit / expense shares and the needs / wants / savings
        split of the profit
    """
    preference = ProfileRepository(db).get_preference(user.user_id)
    split = split_sale_amount(amount, preference)
    budget = compute_budget_split(split.profit_share, preference.pct_ahorro)

    return DistributionResponse(
        amount=amount,
        product_share=split.product_share,
        profit_share=split.profit_share,
        expense_share=split.expense_share,
        budget=BudgetSplitSchema(**vars(budget)),
    )
