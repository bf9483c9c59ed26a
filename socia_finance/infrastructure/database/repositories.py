"""Data access layer - every query is scoped to one socia (user_id)"""

import uuid
from datetime import date
from typing import List, Optional, Set, Tuple
from sqlalchemy.orm import Session
from socia_finance.infrastructure.database.models import (
    Profile,
    Client,
    Purchase,
    SaleItem,
    CreditPayment,
    ChallengeGoal,
    MonthlyGoal,
    WeeklyFinance,
    RetoProgress,
    InventoryItem,
)
from socia_finance.domain.models import CostSplitPreference, Installment, PurchaseRecord
from socia_finance.domain.policy import DEFAULT_PCT_REPOSICION, DEFAULT_PCT_GANANCIA, DEFAULT_PCT_AHORRO
from socia_finance.domain.pricing import validate_preference


def to_purchase_record(purchase: Purchase) -> PurchaseRecord:
    """Map a purchases row to the calculators' input type"""
    return PurchaseRecord(
        amount=float(purchase.amount),
        purchase_date=purchase.purchase_date,
        client_id=str(purchase.client_id) if purchase.client_id else None,
        is_credit=bool(purchase.is_credit),
        credit_paid=bool(purchase.credit_paid),
        credit_due_date=purchase.credit_due_date,
        cost_price=float(purchase.cost_price) if purchase.cost_price is not None else None,
        credit_paid_amount=float(purchase.credit_paid_amount or 0),
    )


class ProfileRepository:
    """Repository for socia profiles"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_user(self, user_id: str) -> Optional[Profile]:
        return self.db.query(Profile).filter(Profile.user_id == user_id).first()

    def get_preference(self, user_id: str) -> CostSplitPreference:
        """
        Stored percentages, falling back to 65/30/20 for unset fields.

        Raises:
            InvalidPreferenceError: Stored values do not describe a valid split
        """
        profile = self.get_by_user(user_id)
        if profile is None:
            return CostSplitPreference()
        return validate_preference(
            CostSplitPreference(
                pct_reposicion=profile.pct_reposicion if profile.pct_reposicion is not None else DEFAULT_PCT_REPOSICION,
                pct_ganancia=profile.pct_ganancia if profile.pct_ganancia is not None else DEFAULT_PCT_GANANCIA,
                pct_ahorro=profile.pct_ahorro if profile.pct_ahorro is not None else DEFAULT_PCT_AHORRO,
            )
        )

    def upsert_percentages(self, user_id: str, preference: CostSplitPreference) -> Profile:
        profile = self.get_by_user(user_id)
        if profile is None:
            profile = Profile(user_id=user_id, name="")
            self.db.add(profile)
        profile.pct_reposicion = preference.pct_reposicion
        profile.pct_ganancia = preference.pct_ganancia
        profile.pct_ahorro = preference.pct_ahorro
        self.db.flush()
        return profile


class ClientRepository:
    """Repository for clients"""

    def __init__(self, db: Session):
        self.db = db

    def create_client(self, user_id: str, name: str, phone: Optional[str] = None) -> Client:
        db_client = Client(user_id=user_id, name=name, phone=phone)
        self.db.add(db_client)
        self.db.flush()
        return db_client

    def get_client(self, user_id: str, client_id: uuid.UUID) -> Optional[Client]:
        return (
            self.db.query(Client)
            .filter(Client.user_id == user_id, Client.id == client_id)
            .first()
        )

    def list_clients(self, user_id: str) -> List[Client]:
        return (
            self.db.query(Client)
            .filter(Client.user_id == user_id)
            .order_by(Client.name)
            .all()
        )


class PurchaseRepository:
    """Repository for sales, their items and credit schedules"""

    def __init__(self, db: Session):
        self.db = db

    def create_sale(
        self,
        user_id: str,
        client: Client,
        amount: float,
        purchase_date: date,
        categories: List[Tuple[str, int]],
        installments: List[Installment],
        cost_price: Optional[float] = None,
        description: Optional[str] = None,
        is_credit: bool = False,
        credit_due_date: Optional[date] = None,
    ) -> Purchase:
        """Persist a sale with its items and payment schedule, and touch the client's last purchase date"""
        db_purchase = Purchase(
            user_id=user_id,
            client_id=client.id,
            amount=amount,
            cost_price=cost_price,
            description=description,
            purchase_date=purchase_date,
            is_credit=is_credit,
            credit_due_date=credit_due_date if is_credit else None,
            credit_paid=False,
            credit_paid_amount=0,
        )
        self.db.add(db_purchase)
        self.db.flush()  # Get ID without committing

        for category, quantity in categories:
            self.db.add(SaleItem(purchase_id=db_purchase.id, category=category, quantity=quantity))

        for inst in installments:
            self.db.add(
                CreditPayment(
                    purchase_id=db_purchase.id,
                    payment_number=inst.payment_number,
                    due_date=inst.due_date,
                    amount=inst.amount,
                )
            )

        if client.last_purchase_date is None or purchase_date > client.last_purchase_date:
            client.last_purchase_date = purchase_date

        self.db.flush()
        return db_purchase

    def get_purchase(self, user_id: str, purchase_id: uuid.UUID) -> Optional[Purchase]:
        return (
            self.db.query(Purchase)
            .filter(Purchase.user_id == user_id, Purchase.id == purchase_id)
            .first()
        )

    def mark_paid(self, purchase: Purchase, paid_on: date) -> Purchase:
        """Settle a credit sale and every open installment of it"""
        purchase.credit_paid = True
        purchase.credit_paid_amount = 0
        for payment in purchase.payments:
            if not payment.paid:
                payment.paid = True
                payment.paid_date = paid_on
        self.db.flush()
        return purchase

    def list_purchases(self, user_id: str, since: Optional[date] = None) -> List[Purchase]:
        query = self.db.query(Purchase).filter(Purchase.user_id == user_id)
        if since is not None:
            query = query.filter(Purchase.purchase_date >= since)
        return query.order_by(Purchase.purchase_date.asc()).all()

    def list_client_purchases(self, user_id: str, client_id: uuid.UUID) -> List[Purchase]:
        return (
            self.db.query(Purchase)
            .filter(Purchase.user_id == user_id, Purchase.client_id == client_id)
            .order_by(Purchase.purchase_date.desc())
            .all()
        )

    def list_item_categories(self, user_id: str, since: Optional[date] = None) -> List[Tuple[Optional[str], date, str]]:
        """(client_id, purchase_date, category) for every sale item"""
        query = (
            self.db.query(Purchase.client_id, Purchase.purchase_date, SaleItem.category)
            .join(SaleItem, SaleItem.purchase_id == Purchase.id)
            .filter(Purchase.user_id == user_id)
        )
        if since is not None:
            query = query.filter(Purchase.purchase_date >= since)
        return [
            (str(client_id) if client_id else None, purchase_date, category)
            for client_id, purchase_date, category in query.all()
        ]


class GoalRepository:
    """Repository for the challenge goal (one active goal per socia)"""

    def __init__(self, db: Session):
        self.db = db

    def get_latest(self, user_id: str) -> Optional[ChallengeGoal]:
        return (
            self.db.query(ChallengeGoal)
            .filter(ChallengeGoal.user_id == user_id)
            .order_by(ChallengeGoal.created_at.desc())
            .first()
        )

    def upsert_goal(
        self,
        user_id: str,
        target_amount: float,
        deadline: date,
        target_name: Optional[str] = None,
    ) -> Tuple[ChallengeGoal, bool]:
        """Replace the current goal in place; returns (goal, created)"""
        goal = self.get_latest(user_id)
        created = goal is None
        if created:
            goal = ChallengeGoal(user_id=user_id)
            self.db.add(goal)
        goal.target_amount = target_amount
        goal.deadline = deadline
        goal.target_name = target_name
        self.db.flush()
        return goal, created


class FinanceRepository:
    """Repository for weekly snapshots and monthly income goals"""

    def __init__(self, db: Session):
        self.db = db

    def upsert_week(
        self,
        user_id: str,
        year: int,
        month: int,
        week: int,
        total_sales: float,
        product_cost: float,
    ) -> WeeklyFinance:
        row = (
            self.db.query(WeeklyFinance)
            .filter(
                WeeklyFinance.user_id == user_id,
                WeeklyFinance.year == year,
                WeeklyFinance.month == month,
                WeeklyFinance.week == week,
            )
            .first()
        )
        if row is None:
            row = WeeklyFinance(user_id=user_id, year=year, month=month, week=week)
            self.db.add(row)
        row.total_sales = total_sales
        row.product_cost = product_cost
        self.db.flush()
        return row

    def list_month(self, user_id: str, year: int, month: int) -> List[WeeklyFinance]:
        return (
            self.db.query(WeeklyFinance)
            .filter(
                WeeklyFinance.user_id == user_id,
                WeeklyFinance.year == year,
                WeeklyFinance.month == month,
            )
            .order_by(WeeklyFinance.week)
            .all()
        )

    def list_all(self, user_id: str) -> List[WeeklyFinance]:
        return (
            self.db.query(WeeklyFinance)
            .filter(WeeklyFinance.user_id == user_id)
            .order_by(WeeklyFinance.year, WeeklyFinance.month, WeeklyFinance.week)
            .all()
        )

    def get_monthly_goal(self, user_id: str, year: int, month: int) -> Optional[MonthlyGoal]:
        return (
            self.db.query(MonthlyGoal)
            .filter(
                MonthlyGoal.user_id == user_id,
                MonthlyGoal.year == year,
                MonthlyGoal.month == month,
            )
            .first()
        )

    def upsert_monthly_goal(self, user_id: str, year: int, month: int, target_income: float) -> MonthlyGoal:
        goal = self.get_monthly_goal(user_id, year, month)
        if goal is None:
            goal = MonthlyGoal(user_id=user_id, year=year, month=month)
            self.db.add(goal)
        goal.target_income = target_income
        self.db.flush()
        return goal


class RetoRepository:
    """Repository for completed challenge-guide tasks"""

    def __init__(self, db: Session):
        self.db = db

    def completed_tasks(self, user_id: str) -> Set[Tuple[int, int]]:
        rows = (
            self.db.query(RetoProgress.week, RetoProgress.day)
            .filter(RetoProgress.user_id == user_id, RetoProgress.completed.is_(True))
            .all()
        )
        return {(week, day) for week, day in rows}

    def toggle_task(self, user_id: str, week: int, day: int) -> bool:
        """Flip a task; returns whether it is now completed"""
        row = (
            self.db.query(RetoProgress)
            .filter(RetoProgress.user_id == user_id, RetoProgress.week == week, RetoProgress.day == day)
            .first()
        )
        if row is not None:
            self.db.delete(row)
            self.db.flush()
            return False
        self.db.add(RetoProgress(user_id=user_id, week=week, day=day, completed=True))
        self.db.flush()
        return True


class InventoryRepository:
    """Repository for stock"""

    def __init__(self, db: Session):
        self.db = db

    def create_item(
        self,
        user_id: str,
        name: str,
        partner_price: float,
        sale_price: float,
        quantity: int,
        description: Optional[str] = None,
    ) -> InventoryItem:
        item = InventoryItem(
            user_id=user_id,
            name=name,
            description=description,
            partner_price=partner_price,
            sale_price=sale_price,
            quantity=quantity,
        )
        self.db.add(item)
        self.db.flush()
        return item

    def list_items(self, user_id: str) -> List[InventoryItem]:
        return (
            self.db.query(InventoryItem)
            .filter(InventoryItem.user_id == user_id)
            .order_by(InventoryItem.name)
            .all()
        )

    def get_item(self, user_id: str, item_id: uuid.UUID) -> Optional[InventoryItem]:
        return (
            self.db.query(InventoryItem)
            .filter(InventoryItem.user_id == user_id, InventoryItem.id == item_id)
            .first()
        )

    def update_item(
        self,
        item: InventoryItem,
        name: str,
        partner_price: float,
        sale_price: float,
        quantity: int,
        description: Optional[str] = None,
    ) -> InventoryItem:
        item.name = name
        item.description = description
        item.partner_price = partner_price
        item.sale_price = sale_price
        item.quantity = quantity
        self.db.flush()
        return item

    def delete_item(self, item: InventoryItem) -> None:
        self.db.delete(item)
        self.db.flush()
