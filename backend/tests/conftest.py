"""
Pytest fixtures for the Caffissimo admin backend.

Small explicit datasets for the pure functions, a freshly seeded DataStore
per test for service and API flows, and a TestClient wired to that store.
"""
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from caffissimo.database import DataStore, get_store
from caffissimo.models import (
    Branch,
    EntrySource,
    ExternalSalesEntry,
    Order,
    OrderItem,
    OrderSource,
    OrderStatus,
    PaymentMethod,
    Role,
)
from caffissimo.schemas.scope import DateInterval, DatePreset, SalesScope, SessionContext
from caffissimo.seed import generate_seed_data

REFERENCE = datetime(2026, 2, 5, 12, 0, 0)


@pytest.fixture
def reference():
    return REFERENCE


@pytest.fixture
def make_order():
    """Factory for a valid order; the single line item carries the whole total."""
    def _make(
        order_id,
        total,
        created_at,
        branch_id="branch-1",
        source=OrderSource.POS,
        status=OrderStatus.COMPLETED,
        items=None,
    ):
        if items is None:
            items = [OrderItem(
                id=f"{order_id}-item",
                product_id="prod-1",
                product_name="Caffissimo Latte",
                quantity=1,
                unit_price=total,
                total_price=total,
            )]
        is_delivery = source in (OrderSource.UBER_EATS, OrderSource.DOORDASH)
        return Order(
            id=order_id,
            order_number=f"ORD-{order_id}",
            branch_id=branch_id,
            source=source,
            status=status,
            items=items,
            subtotal=total,
            tax=0.0,
            discount=0.0,
            total=total,
            payment_method=PaymentMethod.EXTERNAL if is_delivery else PaymentMethod.CARD,
            is_read_only=is_delivery,
            created_at=created_at,
            updated_at=created_at,
        )
    return _make


@pytest.fixture
def make_item():
    def _make(product_id, quantity, unit_price, name=None):
        return OrderItem(
            id=f"item-{product_id}-{quantity}",
            product_id=product_id,
            product_name=name or product_id,
            quantity=quantity,
            unit_price=unit_price,
            total_price=round(quantity * unit_price, 2),
        )
    return _make


@pytest.fixture
def make_entry():
    def _make(entry_id, platform, day, total_sales, branch_id="branch-1", order_count=0):
        return ExternalSalesEntry(
            id=entry_id,
            branch_id=branch_id,
            platform=platform,
            date=day,
            total_sales=total_sales,
            order_count=order_count,
            source=EntrySource.MANUAL,
            created_at=datetime.combine(day, datetime.min.time()),
        )
    return _make


@pytest.fixture
def make_branch():
    def _make(branch_id, name):
        created = datetime(2024, 1, 1)
        return Branch(
            id=branch_id,
            name=name,
            address="1 Test Street",
            phone="(555) 000-0000",
            email=f"{branch_id}@caffissimo.com",
            created_at=created,
            updated_at=created,
        )
    return _make


@pytest.fixture
def week_interval():
    """The 7 days ending on the reference day, inclusive."""
    return DateInterval(
        date_from=datetime(2026, 1, 30, 0, 0, 0),
        date_to=datetime(2026, 2, 5, 23, 59, 59, 999999),
    )


@pytest.fixture
def all_branches_scope(week_interval):
    return SalesScope(branch_id=None, interval=week_interval)


@pytest.fixture
def store():
    """Freshly seeded store; writes in one test never leak into another."""
    return DataStore(generate_seed_data())


@pytest.fixture
def session_for():
    def _make(role, assigned=None, selected=None, preset=DatePreset.LAST_30_DAYS, custom_range=None):
        return SessionContext(
            role=role,
            assigned_branch_id=assigned,
            selected_branch_id=selected,
            preset=preset,
            custom_range=custom_range,
            user_id="user-test",
            user_name="Test User",
        )
    return _make


@pytest.fixture
def super_admin(session_for):
    return session_for(Role.SUPER_ADMIN)


@pytest.fixture
def owner(session_for):
    return session_for(Role.BRANCH_OWNER, assigned="branch-1")


@pytest.fixture
def supervisor(session_for):
    return session_for(Role.SUPERVISOR, assigned="branch-1")


@pytest.fixture
def cashier(session_for):
    return session_for(Role.CASHIER, assigned="branch-1")


# -- API ----------------------------------------------------------------------


@pytest.fixture
def client(store):
    from caffissimo.main import app, limiter

    limiter.reset()
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def super_admin_headers():
    return {"X-Role": "super_admin", "X-User-Id": "user-1", "X-User-Name": "Alex Johnson"}


@pytest.fixture
def owner_headers():
    return {
        "X-Role": "branch_owner",
        "X-Assigned-Branch-Id": "branch-1",
        "X-User-Id": "user-2",
        "X-User-Name": "Maria Garcia",
    }


@pytest.fixture
def supervisor_headers():
    return {
        "X-Role": "supervisor",
        "X-Assigned-Branch-Id": "branch-1",
        "X-User-Id": "user-5",
        "X-User-Name": "Michael Brown",
    }


@pytest.fixture
def cashier_headers():
    return {"X-Role": "cashier", "X-Assigned-Branch-Id": "branch-1", "X-User-Id": "user-7"}


@pytest.fixture
def seed_window():
    """Custom date window covering the whole seeded data set."""
    return {"preset": "custom", "date_from": "2026-01-01T00:00:00", "date_to": "2026-02-05T23:59:59"}
