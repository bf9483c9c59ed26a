"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field, model_validator
from datetime import date
from typing import List, Literal, Optional


# Simulator

class SimulationRequest(BaseModel):
    """Request body for POST /v1/simulator/split"""

    base_price: float = Field(..., ge=0, description="What the socia pays for the product")
    markup_mode: Literal["percent", "amount"] = "percent"
    markup_value: float = Field(0, ge=0)
    sale_mode: Literal["cash", "credit"] = "cash"
    credit_commission_pct: float = Field(0, ge=0)
    installment_count: int = Field(1, ge=1)
    savings_pct: Optional[float] = Field(None, ge=0, le=100, description="Also split the profit share")


class BudgetSplitSchema(BaseModel):
    needs: float
    wants: float
    savings: float
    needs_pct: float
    wants_pct: float
    savings_pct: float


class SimulationResponse(BaseModel):
    """Response for POST /v1/simulator/split"""

    active: bool
    markup_amount: float
    price_before_commission: float
    commission_amount: float
    client_price: float
    installment_amount: float
    product_share: float
    profit_share: float
    expense_share: float
    budget: Optional[BudgetSplitSchema] = None


class BudgetRequest(BaseModel):
    """Request body for POST /v1/simulator/budget"""

    profit_share: float = Field(..., ge=0)
    savings_pct: float = Field(..., ge=0, le=100)


class MarkupSuggestionResponse(BaseModel):
    pct_ganancia: float
    suggested_markup_pct: int
    assessment: str


# Profile

class PercentagesSchema(BaseModel):
    """Cost-split preference stored on the profile"""

    pct_reposicion: float = Field(..., ge=0, le=100)
    pct_ganancia: float = Field(..., ge=0, le=100)
    pct_ahorro: float = Field(..., ge=0, le=100)

    @model_validator(mode="after")
    def buckets_fit(self):
        if self.pct_reposicion + self.pct_ganancia > 100:
            raise ValueError("pct_reposicion + pct_ganancia cannot exceed 100")
        return self


class PercentagesResponse(PercentagesSchema):
    pct_gastos: float
    pct_necesidades: float
    pct_deseos: float
    healthy: bool


class DistributionResponse(BaseModel):
    """Response for GET /v1/profile/distribution"""

    amount: float
    product_share: float
    profit_share: float
    expense_share: float
    budget: BudgetSplitSchema


# Goals

class GoalRequest(BaseModel):
    """Request body for PUT /v1/goal"""

    target_amount: float = Field(..., gt=0)
    deadline: date
    target_name: Optional[str] = None


class GoalResponse(BaseModel):
    goal_id: str
    target_amount: float
    deadline: date
    target_name: Optional[str] = None


class ProjectionSchema(BaseModel):
    weeks_left: int
    weekly_average: float
    projected_total: float
    on_track: bool


class GoalProgressResponse(BaseModel):
    """Response for GET /v1/goal/progress"""

    has_goal: bool
    current_amount: float
    target_amount: float
    deadline: Optional[date] = None
    percentage: int
    days_remaining: int
    amount_remaining: float
    pace_per_day: float
    pace_per_week: float
    pace_per_month: float
    status: str
    projection: Optional[ProjectionSchema] = None


# Finances

class WeeklyFinanceRequest(BaseModel):
    """Request body for PUT /v1/finances/weekly"""

    year: int = Field(..., ge=2000, le=2100)
    month: int = Field(..., ge=1, le=12)
    week: int = Field(..., ge=1, le=4)
    total_sales: float = Field(0, ge=0)
    product_cost: float = Field(0, ge=0)


class MonthlyGoalRequest(BaseModel):
    """Request body for PUT /v1/finances/monthly-goal"""

    year: int = Field(..., ge=2000, le=2100)
    month: int = Field(..., ge=1, le=12)
    target_income: float = Field(..., ge=0)


class WeekSummary(BaseModel):
    week: int
    total_sales: float
    product_cost: float
    product_share: float
    profit_share: float
    expense_share: float
    over_cost_limit: bool


class MonthlySummaryResponse(BaseModel):
    """Response for GET /v1/finances/monthly"""

    year: int
    month: int
    weeks: List[WeekSummary]
    month_total: float
    target_income: float
    goal_percentage: float
    weekly_needed: float
    daily_needed: float


# Clients & sales

class ClientCreateRequest(BaseModel):
    name: str = Field(..., min_length=1)
    phone: Optional[str] = None


class ClientResponse(BaseModel):
    client_id: str
    name: str
    phone: Optional[str] = None
    last_purchase_date: Optional[date] = None
    pending_balance: float = 0.0
    earliest_due_date: Optional[date] = None
    overdue_days: int = 0
    total_collected: float = 0.0
    last_paid_date: Optional[date] = None


class ClientListResponse(BaseModel):
    """Clients in the requested view; total_pending always spans every client"""

    filter: Literal["all", "cobranza", "cobrado"]
    clients: List[ClientResponse]
    total_pending: float


class SaleItemSchema(BaseModel):
    category: str = Field(..., min_length=1)
    quantity: int = Field(1, ge=1)


class SaleRequest(BaseModel):
    """Request body for POST /v1/sales"""

    client_id: str
    amount: float = Field(..., gt=0)
    cost_price: Optional[float] = Field(None, ge=0)
    description: Optional[str] = None
    purchase_date: Optional[date] = None
    is_credit: bool = False
    credit_due_date: Optional[date] = None
    installment_count: int = Field(1, ge=1, le=52)
    items: List[SaleItemSchema] = Field(default_factory=list)


class InstallmentSchema(BaseModel):
    """Single installment in a credit schedule"""

    payment_number: int
    due_date: date
    amount: float
    paid: bool = False


class SaleResponse(BaseModel):
    """Response for POST /v1/sales"""

    purchase_id: str
    client_id: str
    amount: float
    purchase_date: date
    is_credit: bool
    credit_paid: bool
    credit_due_date: Optional[date] = None
    installments: List[InstallmentSchema] = Field(default_factory=list)


# Insights

class CycleClientSchema(BaseModel):
    client_id: str
    name: str
    phone: Optional[str] = None
    cycle_days: int
    days_until_next: int


class CrossSellSchema(BaseModel):
    client_id: str
    name: str
    phone: Optional[str] = None
    category: str
    days_ago: int
    suggestion: str


class TopClientSchema(BaseModel):
    client_id: str
    name: str
    total: float
    count: int


class TipsResponse(BaseModel):
    """Response for GET /v1/insights/tips"""

    due_soon: List[CycleClientSchema]
    cross_sell: List[CrossSellSchema]
    top_clients: List[TopClientSchema]
    top_category: Optional[str] = None
    best_day: Optional[str] = None
    average_margin: Optional[int] = None
    target_margin: int
    margin_assessment: Optional[str] = None
    active_clients: int


class DashboardResponse(BaseModel):
    """Response for GET /v1/insights/dashboard"""

    total_sales: float
    target_amount: float
    percentage: int
    days_remaining: int
    has_deadline: bool
    overdue_credits: int
    inactive_clients: int
    estimated_profit: float
    days_since_last_sale: Optional[int] = None
    sale_nudge: bool


# Challenge guide

class WeekStatusSchema(BaseModel):
    week: int
    completed: int
    status: str


class RetoProgressResponse(BaseModel):
    total_points: int
    weeks: List[WeekStatusSchema]


class TaskToggleResponse(BaseModel):
    week: int
    day: int
    completed: bool
    total_points: int


# Inventory

class InventoryItemRequest(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    partner_price: float = Field(0, ge=0)
    sale_price: float = Field(0, ge=0)
    quantity: int = Field(0, ge=0)


class InventoryItemSchema(InventoryItemRequest):
    item_id: str


class InventoryResponse(BaseModel):
    items: List[InventoryItemSchema]
    total_units: int
    total_value: float
