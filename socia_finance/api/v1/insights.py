"""GET /v1/insights/* - dashboard alerts and business tips"""

from collections import defaultdict
from datetime import date
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from socia_finance.api.v1.schemas import (
    DashboardResponse,
    TipsResponse,
    CycleClientSchema,
    CrossSellSchema,
    TopClientSchema,
)
from socia_finance.api.dependencies import get_current_user
from socia_finance.infrastructure.clients.auth import AuthUser
from socia_finance.infrastructure.database.session import get_db
from socia_finance.infrastructure.database.repositories import (
    ClientRepository,
    FinanceRepository,
    GoalRepository,
    ProfileRepository,
    PurchaseRepository,
    to_purchase_record,
)
from socia_finance.domain.clients import due_soon_clients, last_category_by_client, suggest_complement
from socia_finance.domain.goals import progress_percentage
from socia_finance.domain.policy import DEFAULT_TARGET_AMOUNT
from socia_finance.domain.receivables import (
    active_clients,
    assess_margin,
    average_margin,
    best_weekday,
    count_inactive_clients,
    count_overdue_credits,
    days_since_last_sale,
    estimate_profit,
    needs_sale_nudge,
    top_category,
    top_clients,
)
from socia_finance.utils.date_utils import days_between
from socia_finance.utils.numbers import round_half_up

router = APIRouter()

CROSS_SELL_LIMIT = 3


@router.get("/insights/dashboard", response_model=DashboardResponse)
def get_dashboard(
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Challenge headline plus overdue-credit, inactivity and no-sales alerts"""
    today = date.today()
    goal = GoalRepository(db).get_latest(user.user_id)
    total_sales = sum(float(w.total_sales) for w in FinanceRepository(db).list_all(user.user_id))
    target = float(goal.target_amount) if goal else DEFAULT_TARGET_AMOUNT

    purchases = [to_purchase_record(p) for p in PurchaseRepository(db).list_purchases(user.user_id)]
    clients = ClientRepository(db).list_clients(user.user_id)
    since_last = days_since_last_sale([p.purchase_date for p in purchases], today)

    return DashboardResponse(
        total_sales=total_sales,
        target_amount=target,
        percentage=progress_percentage(total_sales, target),
        days_remaining=days_between(today, goal.deadline) if goal else 0,
        has_deadline=goal is not None,
        overdue_credits=count_overdue_credits(purchases, today),
        inactive_clients=count_inactive_clients([c.last_purchase_date for c in clients], today),
        estimated_profit=estimate_profit(purchases),
        days_since_last_sale=since_last,
        sale_nudge=needs_sale_nudge(since_last),
    )


@router.get("/insights/tips", response_model=TipsResponse)
def get_tips(
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Business intelligence for the current month.

    Returns:
        Clients due to buy again, cross-sell suggestions, top clients,
        best category and weekday, and the realized margin against the
        socia's profit percentage
    """
    today = date.today()
    month_start = today.replace(day=1)
    purchase_repo = PurchaseRepository(db)
    clients = {str(c.id): c for c in ClientRepository(db).list_clients(user.user_id)}

    all_purchases = [to_purchase_record(p) for p in purchase_repo.list_purchases(user.user_id)]
    month_purchases = [p for p in all_purchases if p.purchase_date >= month_start]

    # Purchase cycles over the whole history
    dates_by_client = defaultdict(list)
    for p in all_purchases:
        if p.client_id:
            dates_by_client[p.client_id].append(p.purchase_date)
    due_soon = [
        CycleClientSchema(
            client_id=client_id,
            name=clients[client_id].name,
            phone=clients[client_id].phone,
            cycle_days=profile.average_gap_days,
            days_until_next=profile.days_until_next,
        )
        for client_id, profile in due_soon_clients(dict(dates_by_client), today)
        if client_id in clients
    ]

    # Cross-sell from each client's latest category, most recent first
    items = purchase_repo.list_item_categories(user.user_id)
    latest = last_category_by_client([i for i in items if i[0]])
    ranked = sorted(latest.items(), key=lambda kv: kv[1][1], reverse=True)
    cross_sell = [
        CrossSellSchema(
            client_id=client_id,
            name=clients[client_id].name,
            phone=clients[client_id].phone,
            category=category,
            days_ago=days_between(purchased_on, today),
            suggestion=suggest_complement(category),
        )
        for client_id, (category, purchased_on) in ranked[:CROSS_SELL_LIMIT]
        if client_id in clients
    ]

    preference = ProfileRepository(db).get_preference(user.user_id)
    avg_margin = average_margin(month_purchases)
    month_categories = [category for _, purchased_on, category in items if purchased_on >= month_start]

    return TipsResponse(
        due_soon=due_soon,
        cross_sell=cross_sell,
        top_clients=[
            TopClientSchema(client_id=t.client_id, name=clients[t.client_id].name, total=t.total, count=t.count)
            for t in top_clients(month_purchases)
            if t.client_id in clients
        ],
        top_category=top_category(month_categories),
        best_day=best_weekday([p.purchase_date for p in month_purchases]),
        average_margin=avg_margin,
        target_margin=round_half_up(preference.pct_ganancia),
        margin_assessment=assess_margin(avg_margin, preference.pct_ganancia),
        active_clients=active_clients(month_purchases, today),
    )
