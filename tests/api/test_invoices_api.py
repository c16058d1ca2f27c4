"""API tests for invoice endpoints."""

from httpx import AsyncClient


class TestInvoiceSummaryAPI:
    """Tests for POST /api/invoices/summary."""

    async def test_summary(self, async_client: AsyncClient, sample_invoice_data: dict):
        response = await async_client.post(
            "/api/invoices/summary", json={"invoice": sample_invoice_data}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["total_amount"] == 945.0
        assert data["outstanding_amount"] == 500.0
        assert data["paid_amount"] == 445.0
        assert data["payment_progress_percent"] == 47
        assert data["display_status"]["status"] == "partially_paid"
        assert data["info"] == "Due in 5 days • Outstanding: 500"
        assert data["rows"][0] == {
            "kind": "subtotal",
            "label": "Subtotal",
            "amount": 1000.0,
            "formatted_amount": "1,000",
        }
        assert data["rows"][-1]["kind"] == "grand_total"

    async def test_overdue_invoice(self, async_client: AsyncClient, sample_invoice_data: dict):
        sample_invoice_data["due_date"] = "2026-10-01"
        response = await async_client.post(
            "/api/invoices/summary", json={"invoice": sample_invoice_data}
        )
        status = response.json()["display_status"]
        assert status["status"] == "overdue"
        assert status["text"] == "Overdue by 18 days"
        assert status["is_overdue"] is True

    async def test_past_due_without_outstanding_is_overdue(self, async_client: AsyncClient):
        response = await async_client.post(
            "/api/invoices/summary",
            json={"invoice": {"status": "open", "due_date": "2026-10-01", "total_amount": 1000}},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["display_status"] == {
            "status": "overdue",
            "text": "Overdue by 18 days",
            "is_overdue": True,
        }
        assert data["info"] == "Overdue by 18 days"

    async def test_legacy_settled_status(self, async_client: AsyncClient, sample_invoice_data: dict):
        sample_invoice_data.update(status="settled", outstanding_amount=0)
        response = await async_client.post(
            "/api/invoices/summary", json={"invoice": sample_invoice_data}
        )
        assert response.json()["display_status"]["status"] == "paid"

    async def test_null_amounts(self, async_client: AsyncClient):
        response = await async_client.post(
            "/api/invoices/summary",
            json={"invoice": {"status": "open", "total_amount": None, "outstanding_amount": None}},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["total_amount"] == 0.0
        assert data["payment_progress_percent"] == 0
        assert data["amount_in_words"] == "zero rupees only"


class TestInvoiceDisplayStatusAPI:
    """Tests for POST /api/invoices/display-status."""

    async def test_paid_is_absorbing(self, async_client: AsyncClient):
        response = await async_client.post(
            "/api/invoices/display-status",
            json={"status": "paid", "due_date": "2020-01-01"},
        )
        assert response.json() == {"status": "paid", "text": "Paid", "is_overdue": False}

    async def test_open_past_due(self, async_client: AsyncClient):
        response = await async_client.post(
            "/api/invoices/display-status",
            json={"status": "open", "due_date": "2026-10-18", "outstanding_amount": "10"},
        )
        assert response.json()["status"] == "overdue"

    async def test_invalid_status(self, async_client: AsyncClient):
        response = await async_client.post(
            "/api/invoices/display-status",
            json={"status": "void"},
        )
        assert response.status_code == 422
