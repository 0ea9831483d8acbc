from __future__ import annotations

import os

os.environ.setdefault("APP_ENV", "test")

import warnings  # noqa: E402
from decimal import Decimal  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from inventory_api.core.config import settings  # noqa: E402
from inventory_api.db import session as db_session  # noqa: E402
from inventory_api.db.base_class import Base  # noqa: E402
from inventory_api.db.session import SessionLocal  # noqa: E402
from inventory_api.models import models  # noqa: E402,F401 - registers tables

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")

test_engine = create_engine(
    TEST_DATABASE_URL,
    future=True,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Ensure application code uses the test engine
settings.DATABASE_URL = TEST_DATABASE_URL  # type: ignore[attr-defined]
settings.ENV = "test"  # type: ignore[attr-defined]
db_session.engine = test_engine  # type: ignore[assignment]
SessionLocal.configure(bind=test_engine)

# Suppress known third-party deprecation warnings (passlib crypt removal) to keep test output clean.
warnings.filterwarnings("ignore", category=DeprecationWarning, module="passlib.utils")

from inventory_api.api.main import app  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_database_state():
    """Ensure each test sees a fresh database schema."""
    Base.metadata.drop_all(bind=test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield


@pytest.fixture
def db_session():
    """Provide a database session bound to the test engine."""
    session = SessionLocal()
    try:
        yield session
        session.commit()
    finally:
        session.close()


@pytest.fixture
def client():
    """Provide a FastAPI TestClient bound to the application."""
    return TestClient(app)


@pytest.fixture
def auth_headers(client):
    """Register and log in a user; return the bearer header."""
    creds = {"email": "tester@example.com", "password": "secret123"}
    reg = client.post("/auth/register", json=creds)
    assert reg.status_code == 201, reg.text
    login = client.post("/auth/login", json=creds)
    assert login.status_code == 200, login.text
    return {"Authorization": f"Bearer {login.json()['token']}"}


# (name, quantity, category) used by the alert and low-stock tests
SEED_PRODUCTS = [
    ("Laptop Dell XPS 13", 15, "Electronics"),
    ("iPhone 14 Pro", 8, "Electronics"),
    ("Office Desk", 25, "Furniture"),
    ("Executive Chair", 12, "Furniture"),
    ("Samsung 4K Monitor", 20, "Electronics"),
    ("Mechanical Keyboard", 30, "Electronics"),
    ("Wireless Mouse", 45, "Electronics"),
    ("LED Lamp", 18, "Lighting"),
    ("Automatic Coffee Maker", 10, "Appliances"),
    ("Bluetooth Headphones", 35, "Electronics"),
    ("iPad Pro Tablet", 3, "Electronics"),
    ("Laser Printer", 2, "Office Equipment"),
    ("HD Webcam", 4, "Electronics"),
    ("SSD Drive", 1, "Electronics"),
    ("WiFi 6 Router", 0, "Electronics"),
]


@pytest.fixture
def seeded_products(db_session):
    """Insert the example catalog directly through the ORM."""
    products = [
        models.Product(name=name, description="", quantity=quantity, price=Decimal("10.00"), category=category)
        for name, quantity, category in SEED_PRODUCTS
    ]
    db_session.add_all(products)
    db_session.commit()
    return products


@pytest.fixture
def seed_catalog():
    """(name, quantity, category) rows of the example catalog."""
    return list(SEED_PRODUCTS)
