"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional


@dataclass
class PricingConfig:
    """Inputs of the sale simulator"""

    base_price: float
    markup_mode: str = "percent"  # "percent" or "amount"
    markup_value: float = 0.0
    sale_mode: str = "cash"  # "cash" or "credit"
    credit_commission_pct: float = 0.0
    installment_count: int = 1


@dataclass
class SplitResult:
    """Client price and its product / profit / expense shares"""

    client_price: float
    product_share: float
    profit_share: float
    expense_share: float
    markup_amount: float = 0.0
    price_before_commission: float = 0.0
    commission_amount: float = 0.0
    installment_amount: float = 0.0
    active: bool = True


@dataclass
class BudgetSplit:
    """Profit share divided into needs, wants and savings"""

    needs: float
    wants: float
    savings: float
    needs_pct: float
    wants_pct: float
    savings_pct: float


@dataclass
class CostSplitPreference:
    """Per-user percentages stored on the profile"""

    pct_reposicion: float = 65.0
    pct_ganancia: float = 30.0
    pct_ahorro: float = 20.0

    @property
    def pct_gastos(self) -> float:
        return max(0.0, 100.0 - self.pct_reposicion - self.pct_ganancia)


@dataclass
class GoalProgress:
    """Derived progress toward a goal (never persisted)"""

    percentage: int
    days_remaining: int
    amount_remaining: float
    pace_per_day: float
    pace_per_week: float
    pace_per_month: float
    status: str


@dataclass
class GoalProjection:
    """Where the current weekly rhythm lands by the deadline"""

    weeks_left: int
    weekly_average: float
    projected_total: float
    on_track: bool


@dataclass
class MonthlyPace:
    """Sales needed per week and per day to hit a monthly income goal"""

    weekly_needed: float
    daily_needed: float


@dataclass
class PurchaseRecord:
    """A sale as read from the purchases table"""

    amount: float
    purchase_date: date
    client_id: Optional[str] = None
    is_credit: bool = False
    credit_paid: bool = False
    credit_due_date: Optional[date] = None
    cost_price: Optional[float] = None
    credit_paid_amount: float = 0.0


@dataclass
class ClientCycleProfile:
    """Purchase cadence of one client"""

    average_gap_days: int
    days_since_last: int
    days_until_next: int


@dataclass
class ClientBalance:
    """Receivables (cobranza) summary for one client"""

    pending_balance: float
    earliest_due_date: Optional[date]
    overdue_days: int
    total_collected: float
    last_paid_date: Optional[date]


@dataclass
class ClientTotal:
    client_id: str
    total: float
    count: int


@dataclass
class Installment:
    """Single payment in a credit schedule"""

    payment_number: int
    due_date: date
    amount: float


@dataclass
class WeekStatus:
    week: int
    completed: int
    status: str


@dataclass
class ChallengeScore:
    """Points earned on the four-week challenge guide"""

    total_points: int
    weeks: List[WeekStatus] = field(default_factory=list)
