"""POST /v1/simulator/* - price simulator and budget allocator"""

from fastapi import APIRouter, Query

from socia_finance.api.v1.schemas import (
    SimulationRequest,
    SimulationResponse,
    BudgetRequest,
    BudgetSplitSchema,
    MarkupSuggestionResponse,
)
from socia_finance.domain.models import PricingConfig
from socia_finance.domain.pricing import compute_split, suggested_markup_pct, classify_markup
from socia_finance.domain.budget import compute_budget_split
from socia_finance.infrastructure.observability.metrics import simulation_counter

router = APIRouter()


@router.post("/simulator/split", response_model=SimulationResponse)
def simulate_split(request_body: SimulationRequest):
    """
    Client price, commission and 3C split for a product.

    Returns every figure at full precision; an inactive simulation (base
    price 0) comes back with active=false and zeros.
    """
    split = compute_split(
        PricingConfig(
            base_price=request_body.base_price,
            markup_mode=request_body.markup_mode,
            markup_value=request_body.markup_value,
            sale_mode=request_body.sale_mode,
            credit_commission_pct=request_body.credit_commission_pct,
            installment_count=request_body.installment_count,
        )
    )
    simulation_counter.labels(sale_mode=request_body.sale_mode).inc()

    budget = None
    if split.active and request_body.savings_pct is not None:
        budget = BudgetSplitSchema(**vars(compute_budget_split(split.profit_share, request_body.savings_pct)))

    return SimulationResponse(
        active=split.active,
        markup_amount=split.markup_amount,
        price_before_commission=split.price_before_commission,
        commission_amount=split.commission_amount,
        client_price=split.client_price,
        installment_amount=split.installment_amount,
        product_share=split.product_share,
        profit_share=split.profit_share,
        expense_share=split.expense_share,
        budget=budget,
    )


@router.post("/simulator/budget", response_model=BudgetSplitSchema)
def simulate_budget(request_body: BudgetRequest):
    """Needs / wants / savings of a profit share"""
    return BudgetSplitSchema(**vars(compute_budget_split(request_body.profit_share, request_body.savings_pct)))


@router.get("/simulator/markup", response_model=MarkupSuggestionResponse)
def suggest_markup(pct_ganancia: float = Query(30, ge=0, le=90, description="Desired profit percentage")):
    """Markup over cost needed to keep the desired profit and the 5% expense share"""
    markup = suggested_markup_pct(pct_ganancia)
    return MarkupSuggestionResponse(
        pct_ganancia=pct_ganancia,
        suggested_markup_pct=markup,
        assessment=classify_markup(markup),
    )
