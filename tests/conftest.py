# tests/conftest.py
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, get_db
from main import app
from services import product_ledger


# --------------------------- fixtures ---------------------------

@pytest.fixture
def engine():
    """Fresh in-memory database per test, shared by every session."""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def _override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def widget(db):
    return product_ledger.create_product(
        db, name="Widget", initial_stock=100, buying_price="2.00", selling_price="5.00"
    )


@pytest.fixture
def gadget(db):
    return product_ledger.create_product(
        db, name="Gadget", initial_stock=10, buying_price="7.50", selling_price="12.00"
    )


@pytest.fixture
def sale_day():
    return date(2026, 10, 1)
