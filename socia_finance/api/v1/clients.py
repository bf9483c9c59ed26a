"""/v1/clients and /v1/sales - clients, sales registration and cobranza"""

import time
import logging
from datetime import date, timedelta
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Literal

from socia_finance.api.v1.schemas import (
    ClientCreateRequest,
    ClientListResponse,
    ClientResponse,
    SaleRequest,
    SaleResponse,
    InstallmentSchema,
)
from socia_finance.api.dependencies import get_current_user, get_request_id, parse_uuid
from socia_finance.config import settings
from socia_finance.infrastructure.clients.auth import AuthUser
from socia_finance.infrastructure.database.models import Client, Purchase
from socia_finance.infrastructure.database.session import get_db
from socia_finance.infrastructure.database.repositories import (
    ClientRepository,
    PurchaseRepository,
    to_purchase_record,
)
from socia_finance.infrastructure.observability.logging import log_sale
from socia_finance.infrastructure.observability.metrics import record_sale
from socia_finance.domain.installments import generate_payment_schedule
from socia_finance.domain.models import ClientBalance
from socia_finance.domain.receivables import client_balance, in_collection_view

router = APIRouter()


def _balance(purchases: List[Purchase], today: date) -> ClientBalance:
    return client_balance([to_purchase_record(p) for p in purchases], today)


def _client_response(client: Client, balance: ClientBalance) -> ClientResponse:
    return ClientResponse(
        client_id=str(client.id),
        name=client.name,
        phone=client.phone,
        last_purchase_date=client.last_purchase_date,
        pending_balance=balance.pending_balance,
        earliest_due_date=balance.earliest_due_date,
        overdue_days=balance.overdue_days,
        total_collected=balance.total_collected,
        last_paid_date=balance.last_paid_date,
    )


def _sale_response(purchase: Purchase) -> SaleResponse:
    return SaleResponse(
        purchase_id=str(purchase.id),
        client_id=str(purchase.client_id),
        amount=purchase.amount,
        purchase_date=purchase.purchase_date,
        is_credit=purchase.is_credit,
        credit_paid=purchase.credit_paid,
        credit_due_date=purchase.credit_due_date,
        installments=[
            InstallmentSchema(
                payment_number=p.payment_number,
                due_date=p.due_date,
                amount=p.amount,
                paid=p.paid,
            )
            for p in purchase.payments
        ],
    )


@router.post("/clients", response_model=ClientResponse, status_code=201)
def create_client(
    request_body: ClientCreateRequest,
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    client = ClientRepository(db).create_client(user.user_id, request_body.name.strip(), request_body.phone)
    db.commit()
    return _client_response(client, _balance([], date.today()))


@router.get("/clients", response_model=ClientListResponse)
def list_clients(
    view: Literal["all", "cobranza", "cobrado"] = Query("all", alias="filter"),
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Clients by name, each with pending balance and collection status.

    The filter narrows the list to clients with money owed (cobranza) or
    with collected credit (cobrado); total_pending covers every client.
    """
    purchase_repo = PurchaseRepository(db)
    today = date.today()
    rows = [
        (c, _balance(purchase_repo.list_client_purchases(user.user_id, c.id), today))
        for c in ClientRepository(db).list_clients(user.user_id)
    ]
    return ClientListResponse(
        filter=view,
        clients=[_client_response(c, balance) for c, balance in rows if in_collection_view(balance, view)],
        total_pending=sum(balance.pending_balance for _, balance in rows),
    )


@router.post("/sales", response_model=SaleResponse, status_code=201)
def record_sale_endpoint(
    request_body: SaleRequest,
    request: Request,
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Register a sale to a client.

    Flow:
    1. Check the client belongs to the socia
    2. Build the payment schedule for credit sales in several installments
    3. Persist sale, items and schedule; touch the client's last purchase
    4. Record metrics and logs
    """
    start_time = time.time()
    request_id = get_request_id(request)
    client_id = parse_uuid(request_body.client_id, "client")

    client = ClientRepository(db).get_client(user.user_id, client_id)
    if client is None:
        raise HTTPException(status_code=404, detail="Client not found")

    purchase_date = request_body.purchase_date or date.today()
    interval = settings.credit_installment_interval_days

    installments = []
    credit_due_date = request_body.credit_due_date
    if request_body.is_credit and request_body.installment_count > 1:
        installments = generate_payment_schedule(
            request_body.amount,
            request_body.installment_count,
            interval_days=interval,
            start_date=credit_due_date or purchase_date + timedelta(days=interval),
        )
        # Sale is due when its last installment is
        if installments:
            credit_due_date = installments[-1].due_date

    try:
        purchase = PurchaseRepository(db).create_sale(
            user_id=user.user_id,
            client=client,
            amount=request_body.amount,
            purchase_date=purchase_date,
            categories=[(item.category, item.quantity) for item in request_body.items],
            installments=installments,
            cost_price=request_body.cost_price,
            description=request_body.description,
            is_credit=request_body.is_credit,
            credit_due_date=credit_due_date,
        )
        db.commit()

    except SQLAlchemyError as e:
        db.rollback()
        logging.error(f"Database error recording sale: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    record_sale(request_body.is_credit, request_body.amount)
    log_sale(
        request_id,
        user.user_id,
        str(purchase.id),
        request_body.amount,
        request_body.is_credit,
        len(installments),
        (time.time() - start_time) * 1000,
    )

    return _sale_response(purchase)


@router.post("/sales/{purchase_id}/paid", response_model=SaleResponse)
def mark_sale_paid(
    purchase_id: str,
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Mark a credit sale (and its open installments) as collected"""
    purchase_repo = PurchaseRepository(db)
    purchase = purchase_repo.get_purchase(user.user_id, parse_uuid(purchase_id, "purchase"))

    if not purchase:
        raise HTTPException(status_code=404, detail="Sale not found")
    if not purchase.is_credit:
        raise HTTPException(status_code=409, detail="Cash sales have nothing to collect")

    purchase_repo.mark_paid(purchase, date.today())
    db.commit()
    return _sale_response(purchase)
