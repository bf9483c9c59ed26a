"""Pytest fixtures for testing"""

import pytest
from datetime import date, timedelta
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from socia_finance.api.main import create_app
from socia_finance.api.dependencies import get_current_user
from socia_finance.infrastructure.clients.auth import AuthUser
from socia_finance.infrastructure.database.models import Base
from socia_finance.infrastructure.database.session import get_db
from socia_finance.domain.models import PurchaseRecord


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_USER_ID = "user_test"


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database and a signed-in socia"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_current_user] = lambda: AuthUser(user_id=TEST_USER_ID, email="socia@example.com")
    return TestClient(app)


@pytest.fixture
def anonymous_client(db: Session) -> TestClient:
    """Test client without the auth override"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def sample_purchases() -> list[PurchaseRecord]:
    """A month of sales: two clients, some on credit"""
    today = date.today()
    return [
        PurchaseRecord(amount=1000.0, purchase_date=today - timedelta(days=40), client_id="ana", cost_price=650.0),
        PurchaseRecord(amount=600.0, purchase_date=today - timedelta(days=20), client_id="ana", cost_price=None),
        PurchaseRecord(
            amount=1200.0,
            purchase_date=today - timedelta(days=30),
            client_id="bety",
            is_credit=True,
            credit_due_date=today - timedelta(days=20),
            cost_price=800.0,
        ),
        PurchaseRecord(
            amount=300.0,
            purchase_date=today - timedelta(days=2),
            client_id="bety",
            is_credit=True,
            credit_paid=True,
            credit_due_date=today + timedelta(days=12),
        ),
    ]
