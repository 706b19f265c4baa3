"""
Test fixtures - in-memory SQLite database, row factories and a FastAPI
TestClient bound to the same session.
"""
import itertools
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from app.core.auth import create_access_token, hash_password
from app.database import get_session
from app.main import app
from app.models.demand import CancelledOrder, DailyNeed, ExtraOrder
from app.models.product import Product
from app.models.staff import Staff
from app.models.vendor import Vendor


@pytest.fixture()
def session():
    """Fresh in-memory SQLite database for each test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)

    with Session(engine) as session:
        yield session

    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture()
def client(session):
    """TestClient whose get_session dependency yields the test session"""

    def override_get_session():
        yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


# -------- Row factories --------


@pytest.fixture()
def make_vendor(session):
    counter = itertools.count(1)

    def _make(name=None, address="12 Market Road", is_active=True, phone=None):
        n = next(counter)
        vendor = Vendor(
            name=name or f"Vendor {n}",
            phone=phone or f"98765000{n:02d}",
            address=address,
            city="Pune",
            state="MH",
            pincode="411001",
            vendor_type="street_food",
            is_active=is_active,
        )
        session.add(vendor)
        session.commit()
        session.refresh(vendor)
        return vendor

    return _make


@pytest.fixture()
def make_product(session):
    def _make(name, price, unit="kg", is_active=True, category="vegetables", **kwargs):
        product = Product(
            name=name,
            price=price,
            unit=unit,
            is_active=is_active,
            category=category,
            **kwargs,
        )
        session.add(product)
        session.commit()
        session.refresh(product)
        return product

    return _make


@pytest.fixture()
def add_need(session):
    def _add(vendor, product, quantity):
        need = DailyNeed(vendor_id=vendor.id, product_id=product.id, quantity=quantity)
        session.add(need)
        session.commit()
        return need

    return _add


@pytest.fixture()
def add_extra(session):
    def _add(vendor, product, quantity, order_date, notes=None):
        extra = ExtraOrder(
            vendor_id=vendor.id,
            product_id=product.id,
            quantity=quantity,
            order_date=order_date,
            notes=notes,
        )
        session.add(extra)
        session.commit()
        return extra

    return _add


@pytest.fixture()
def cancel(session):
    def _cancel(vendor, cancel_date, reason=None):
        row = CancelledOrder(vendor_id=vendor.id, cancel_date=cancel_date, reason=reason)
        session.add(row)
        session.commit()
        return row

    return _cancel


# -------- Auth helpers --------


@pytest.fixture()
def staff(session):
    member = Staff(
        name="Warehouse Admin",
        email="admin@example.com",
        password_hash=hash_password("adminpass123"),
    )
    session.add(member)
    session.commit()
    session.refresh(member)
    return member


@pytest.fixture()
def admin_headers(staff):
    token = create_access_token({"staff_id": staff.id, "role": staff.role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def vendor_headers():
    def _headers(vendor):
        token = create_access_token({"vendor_id": vendor.id})
        return {"Authorization": f"Bearer {token}"}

    return _headers
