"""SQLAlchemy ORM models matching the hosted backend schema"""

import uuid
from sqlalchemy import Column, String, Boolean, Numeric, DateTime, Date, Integer, ForeignKey, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()

# Money columns come back as float; full precision stays in the calculators
Money = Numeric(12, 2, asdecimal=False)


class Profile(Base):
    """Socia profile with cost-split percentages"""

    __tablename__ = "profiles"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, unique=True, index=True)
    name = Column(Text, nullable=False, default="")
    phone = Column(String(20), nullable=True)
    partner_number = Column(Text, nullable=True)
    metodologia = Column(Text, nullable=True, default="recomendada")
    pct_reposicion = Column(Numeric(5, 2, asdecimal=False), nullable=True)
    pct_ganancia = Column(Numeric(5, 2, asdecimal=False), nullable=True)
    pct_ahorro = Column(Numeric(5, 2, asdecimal=False), nullable=True)
    tour_completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())


class Client(Base):
    """A client (clienta) of the socia"""

    __tablename__ = "clients"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=False)
    phone = Column(String(20), nullable=True)
    last_purchase_date = Column(Date, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    purchases = relationship("Purchase", back_populates="client", cascade="all, delete-orphan")


class Purchase(Base):
    """A sale to a client, cash or credit"""

    __tablename__ = "purchases"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    client_id = Column(UUID(as_uuid=True), ForeignKey("clients.id", ondelete="CASCADE"), nullable=True, index=True)
    amount = Column(Money, nullable=False)
    cost_price = Column(Money, nullable=True)
    description = Column(Text, nullable=True)
    purchase_date = Column(Date, nullable=False, server_default=func.current_date())
    is_credit = Column(Boolean, nullable=False, default=False)
    credit_due_date = Column(Date, nullable=True)
    credit_paid = Column(Boolean, nullable=False, default=False)
    credit_paid_amount = Column(Money, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    client = relationship("Client", back_populates="purchases")
    items = relationship("SaleItem", back_populates="purchase", cascade="all, delete-orphan")
    payments = relationship(
        "CreditPayment",
        back_populates="purchase",
        cascade="all, delete-orphan",
        order_by="CreditPayment.payment_number",
    )


class SaleItem(Base):
    """Product category line of a sale"""

    __tablename__ = "sale_items"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    purchase_id = Column(UUID(as_uuid=True), ForeignKey("purchases.id", ondelete="CASCADE"), nullable=False)
    category = Column(Text, nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    purchase = relationship("Purchase", back_populates="items")


class CreditPayment(Base):
    """Scheduled installment (abono) of a credit sale"""

    __tablename__ = "credit_payments"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    purchase_id = Column(UUID(as_uuid=True), ForeignKey("purchases.id", ondelete="CASCADE"), nullable=False)
    payment_number = Column(Integer, nullable=False)
    due_date = Column(Date, nullable=False)
    amount = Column(Money, nullable=False)
    paid = Column(Boolean, nullable=False, default=False)
    paid_date = Column(Date, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    purchase = relationship("Purchase", back_populates="payments")


class ChallengeGoal(Base):
    """Target of the "Reto 0 a 10,000" challenge"""

    __tablename__ = "challenge_goals"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    target_amount = Column(Money, nullable=False)
    target_name = Column(Text, nullable=True)
    deadline = Column(Date, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())


class MonthlyGoal(Base):
    """Income goal for one month"""

    __tablename__ = "monthly_goals"
    __table_args__ = (UniqueConstraint("user_id", "year", "month"),)

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    year = Column(Integer, nullable=False)
    month = Column(Integer, nullable=False)
    target_income = Column(Money, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class WeeklyFinance(Base):
    """Sales and product cost snapshot of one week of a month"""

    __tablename__ = "weekly_finances"
    __table_args__ = (UniqueConstraint("user_id", "year", "month", "week"),)

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    year = Column(Integer, nullable=False)
    month = Column(Integer, nullable=False)
    week = Column(Integer, nullable=False)
    total_sales = Column(Money, nullable=False, default=0)
    product_cost = Column(Money, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())


class RetoProgress(Base):
    """Completed task of the challenge guide"""

    __tablename__ = "reto_progress"
    __table_args__ = (UniqueConstraint("user_id", "week", "day"),)

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    week = Column(Integer, nullable=False)
    day = Column(Integer, nullable=False)
    completed = Column(Boolean, nullable=False, default=True)
    completed_at = Column(DateTime(timezone=True), nullable=True, server_default=func.now())


class InventoryItem(Base):
    """Product in stock"""

    __tablename__ = "inventory"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    partner_price = Column(Money, nullable=False, default=0)
    sale_price = Column(Money, nullable=False, default=0)
    quantity = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
