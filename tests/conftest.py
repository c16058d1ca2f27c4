"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Generator
from datetime import date

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from textile_ledger.api.dependencies import get_today
from textile_ledger.api.main import app
from textile_ledger.config import reset_settings

# Every test evaluates against this date instead of the wall clock
TODAY = date(2026, 10, 19)


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None, None, None]:
    """Drop cached settings so env changes in one test do not leak."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Create sync test client with a fixed clock."""
    app.dependency_overrides[get_today] = lambda: TODAY
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.pop(get_today, None)


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client with a fixed clock."""
    app.dependency_overrides[get_today] = lambda: TODAY
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.pop(get_today, None)


@pytest.fixture
def sample_order_data() -> dict:
    """Sales order in progress, due in 3 days, 40% dispatched."""
    return {
        "id": "so-1",
        "order_number": "SO-0001",
        "order_type": "sales",
        "status": "in_progress",
        "order_date": "2026-10-01",
        "expected_delivery_date": "2026-10-22",
        "discount_type": "percentage",
        "discount_value": "10",
        "gst_rate": "5",
        "lines": [
            {
                "product_name": "Cotton Poplin",
                "required_quantity": 60,
                "dispatched_quantity": 30,
                "unit_rate": 10,
                "line_total": 600,
            },
            {
                "product_name": "Rayon Slub",
                "required_quantity": 40,
                "dispatched_quantity": 10,
                "unit_rate": 10,
                "line_total": 400,
            },
        ],
    }


@pytest.fixture
def sample_invoice_data() -> dict:
    """Intra-state GST invoice, partly paid, due in 5 days."""
    return {
        "id": "inv-1",
        "invoice_number": "INV-0001",
        "invoice_type": "sales",
        "status": "partially_paid",
        "invoice_date": "2026-10-10",
        "due_date": "2026-10-24",
        "tax_type": "gst",
        "discount_type": "percentage",
        "discount_value": "10",
        "subtotal_amount": "1000",
        "discount_amount": "100",
        "taxable_amount": "900",
        "total_cgst_amount": "22.50",
        "total_sgst_amount": "22.50",
        "round_off_amount": "0",
        "total_amount": "945",
        "outstanding_amount": "500",
    }
