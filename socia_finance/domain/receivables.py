"""Receivables, margins and sales activity derived from purchase rows"""

from collections import Counter
from datetime import date, timedelta
from typing import Dict, List, Optional
from socia_finance.domain.models import PurchaseRecord, ClientBalance, ClientTotal
from socia_finance.domain.policy import (
    DEFAULT_COST_RATIO,
    OVERDUE_CREDIT_GRACE_DAYS,
    INACTIVE_CLIENT_DAYS,
    ACTIVE_CLIENT_DAYS,
    MARGIN_TOLERANCE_POINTS,
    SALE_NUDGE_DAYS,
)
from socia_finance.utils.date_utils import days_between
from socia_finance.utils.numbers import round_half_up

WEEKDAY_NAMES = ["Lunes", "Martes", "Miércoles", "Jueves", "Viernes", "Sábado", "Domingo"]


def client_balance(purchases: List[PurchaseRecord], today: Optional[date] = None) -> ClientBalance:
    """
    Summarize what a client owes and what has been collected.

    Pending balance counts only unpaid credit sales, net of partial payments.
    Overdue days are measured from the earliest due date among them.
    """
    if today is None:
        today = date.today()

    unpaid = [p for p in purchases if p.is_credit and not p.credit_paid]
    paid = [p for p in purchases if p.is_credit and p.credit_paid]

    pending = sum(p.amount - (p.credit_paid_amount or 0) for p in unpaid)
    due_dates = sorted(p.credit_due_date for p in unpaid if p.credit_due_date)
    earliest_due = due_dates[0] if due_dates else None
    overdue_days = max(0, days_between(earliest_due, today)) if earliest_due else 0

    paid_dates = sorted(p.purchase_date for p in paid)

    return ClientBalance(
        pending_balance=pending,
        earliest_due_date=earliest_due,
        overdue_days=overdue_days,
        total_collected=sum(p.amount for p in paid),
        last_paid_date=paid_dates[-1] if paid_dates else None,
    )


def is_overdue(purchase: PurchaseRecord, today: Optional[date] = None) -> bool:
    """Unpaid credit sale past its due date"""
    if today is None:
        today = date.today()
    return (
        purchase.is_credit
        and not purchase.credit_paid
        and purchase.credit_due_date is not None
        and purchase.credit_due_date < today
    )


def count_overdue_credits(purchases: List[PurchaseRecord], today: Optional[date] = None) -> int:
    """Unpaid credits more than the grace window past their due date"""
    if today is None:
        today = date.today()
    cutoff = today - timedelta(days=OVERDUE_CREDIT_GRACE_DAYS)
    return sum(
        1 for p in purchases
        if p.is_credit and not p.credit_paid and p.credit_due_date and p.credit_due_date < cutoff
    )


def count_inactive_clients(last_purchase_dates: List[Optional[date]], today: Optional[date] = None) -> int:
    """Clients whose last purchase is older than the inactivity window"""
    if today is None:
        today = date.today()
    cutoff = today - timedelta(days=INACTIVE_CLIENT_DAYS)
    return sum(1 for d in last_purchase_dates if d is not None and d < cutoff)


def estimate_profit(purchases: List[PurchaseRecord], default_cost_ratio: float = DEFAULT_COST_RATIO) -> float:
    """Total profit; sales without a cost price assume cost = amount * default_cost_ratio"""
    total = 0.0
    for p in purchases:
        cost = p.cost_price if p.cost_price is not None else p.amount * default_cost_ratio
        total += p.amount - cost
    return total


def average_margin(purchases: List[PurchaseRecord]) -> Optional[int]:
    """Rounded mean margin (%) of sales with a known cost, None without any"""
    with_cost = [p for p in purchases if p.cost_price and p.cost_price > 0 and p.amount > 0]
    if not with_cost:
        return None
    total_margin = sum((p.amount - p.cost_price) / p.amount * 100 for p in with_cost)
    return round_half_up(total_margin / len(with_cost))


def assess_margin(avg_margin: Optional[int], pct_ganancia: float) -> Optional[str]:
    """Compare the realized margin with the target profit percentage"""
    if avg_margin is None:
        return None
    target = round_half_up(pct_ganancia)
    if avg_margin >= target:
        return "excellent"
    elif avg_margin >= target - MARGIN_TOLERANCE_POINTS:
        return "improvable"
    else:
        return "review-prices"


def top_clients(purchases: List[PurchaseRecord], limit: int = 3) -> List[ClientTotal]:
    """Clients ranked by total amount bought"""
    grouped: Dict[str, ClientTotal] = {}
    for p in purchases:
        if not p.client_id:
            continue
        entry = grouped.setdefault(p.client_id, ClientTotal(client_id=p.client_id, total=0.0, count=0))
        entry.total += p.amount
        entry.count += 1
    return sorted(grouped.values(), key=lambda c: c.total, reverse=True)[:limit]


def best_weekday(dates: List[date]) -> Optional[str]:
    if not dates:
        return None
    weekday, _ = Counter(d.weekday() for d in dates).most_common(1)[0]
    return WEEKDAY_NAMES[weekday]


def top_category(categories: List[str]) -> Optional[str]:
    if not categories:
        return None
    category, _ = Counter(categories).most_common(1)[0]
    return category


def active_clients(purchases: List[PurchaseRecord], today: Optional[date] = None) -> int:
    """Distinct clients who bought within the activity window"""
    if today is None:
        today = date.today()
    cutoff = today - timedelta(days=ACTIVE_CLIENT_DAYS)
    return len({p.client_id for p in purchases if p.client_id and p.purchase_date >= cutoff})


def days_since_last_sale(dates: List[date], today: Optional[date] = None) -> Optional[int]:
    if not dates:
        return None
    if today is None:
        today = date.today()
    return days_between(max(dates), today)


def needs_sale_nudge(days_since: Optional[int]) -> bool:
    """No sale for a few days (or never) deserves a reminder"""
    return days_since is None or days_since >= SALE_NUDGE_DAYS


def in_collection_view(balance: ClientBalance, view: str) -> bool:
    """
    Client list views: "cobranza" has money still owed, "cobrado" has
    collected at least one credit sale, "all" keeps everyone.
    """
    if view == "cobranza":
        return balance.pending_balance > 0
    elif view == "cobrado":
        return balance.total_collected > 0
    return True
