"""/v1/finances - weekly snapshots and monthly income goal"""

from datetime import date
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from socia_finance.api.v1.schemas import (
    WeeklyFinanceRequest,
    MonthlyGoalRequest,
    MonthlySummaryResponse,
    WeekSummary,
)
from socia_finance.api.dependencies import get_current_user
from socia_finance.infrastructure.clients.auth import AuthUser
from socia_finance.infrastructure.database.session import get_db
from socia_finance.infrastructure.database.repositories import FinanceRepository
from socia_finance.domain.models import PricingConfig
from socia_finance.domain.pricing import compute_split
from socia_finance.domain.goals import monthly_pace, monthly_goal_percentage
from socia_finance.domain.policy import WEEKS_PER_MONTH

router = APIRouter()


def _month_summary(repo: FinanceRepository, user_id: str, year: int, month: int) -> MonthlySummaryResponse:
    recorded = {w.week: w for w in repo.list_month(user_id, year, month)}

    weeks = []
    for week in range(1, WEEKS_PER_MONTH + 1):
        row = recorded.get(week)
        total_sales = float(row.total_sales) if row else 0.0
        product_cost = float(row.product_cost) if row else 0.0
        # Recorded weekly sales are already client prices: no markup, no commission
        split = compute_split(PricingConfig(base_price=total_sales))
        weeks.append(
            WeekSummary(
                week=week,
                total_sales=total_sales,
                product_cost=product_cost,
                product_share=split.product_share,
                profit_share=split.profit_share,
                expense_share=split.expense_share,
                over_cost_limit=product_cost > split.product_share,
            )
        )

    month_total = sum(w.total_sales for w in weeks)
    goal = repo.get_monthly_goal(user_id, year, month)
    target_income = float(goal.target_income) if goal else 0.0
    pace = monthly_pace(target_income)

    return MonthlySummaryResponse(
        year=year,
        month=month,
        weeks=weeks,
        month_total=month_total,
        target_income=target_income,
        goal_percentage=monthly_goal_percentage(month_total, target_income),
        weekly_needed=pace.weekly_needed,
        daily_needed=pace.daily_needed,
    )


@router.put("/finances/weekly", response_model=MonthlySummaryResponse)
def save_week(
    request_body: WeeklyFinanceRequest,
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Record sales and product cost of one week; last write wins"""
    repo = FinanceRepository(db)
    repo.upsert_week(
        user_id=user.user_id,
        year=request_body.year,
        month=request_body.month,
        week=request_body.week,
        total_sales=request_body.total_sales,
        product_cost=request_body.product_cost,
    )
    db.commit()
    return _month_summary(repo, user.user_id, request_body.year, request_body.month)


@router.put("/finances/monthly-goal", response_model=MonthlySummaryResponse)
def save_monthly_goal(
    request_body: MonthlyGoalRequest,
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    repo = FinanceRepository(db)
    repo.upsert_monthly_goal(user.user_id, request_body.year, request_body.month, request_body.target_income)
    db.commit()
    return _month_summary(repo, user.user_id, request_body.year, request_body.month)


@router.get("/finances/monthly", response_model=MonthlySummaryResponse)
def get_month(
    year: int | None = Query(None, ge=2000, le=2100),
    month: int | None = Query(None, ge=1, le=12),
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Month summary: four weeks with their 3C split, monthly goal progress
    and the weekly / daily sales needed. Defaults to the current month.
    """
    today = date.today()
    return _month_summary(FinanceRepository(db), user.user_id, year or today.year, month or today.month)
