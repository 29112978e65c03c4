"""Integration tests for Invoice and Payment API endpoints"""

import copy

import pytest
from httpx import AsyncClient
from sqlmodel import select, func

from config import ApplicationConfig
from src.app.services.payment_gateway import (
    CheckoutSessionRequest,
    PaymentGateway,
    PaymentGatewayError,
)
from src.depends import get_payment_gateway
from src.domain.invoice import Invoice
from src.domain.owner import Owner

INVOICE_PAYLOAD = {
    "userDetails": {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "company": "Doe Consulting",
        "address": "1 Main St, Springfield",
        "phone": "",
        "logo": "",
    },
    "billTo": {
        "name": "Acme Corp",
        "email": "ap@acme.com",
        "address": "500 Market St, Metropolis",
    },
    "invoiceDetails": {
        "issueDate": "2024-01-15",
        "dueDate": "2024-02-14",
        "frequency": "once",
    },
    "items": [
        {
            "activityType": "Consulting",
            "date": "2024-01-10",
            "description": "Architecture review",
            "duration": "2",
            "rate": "50",
            "amount": "",
        },
        {
            "activityType": "Expenses",
            "date": "2024-01-11",
            "description": "Travel",
            "duration": "",
            "rate": "",
            "amount": "45.50",
        },
    ],
    "total": 1,
}


class RecordingPaymentGateway(PaymentGateway):
    def __init__(self, url: str = "https://checkout.stripe.com/c/pay/cs_test_123", error: Exception = None):
        self.url = url
        self.error = error
        self.requests = []

    async def create_checkout_session(self, request: CheckoutSessionRequest) -> str:
        self.requests.append(request)
        if self.error:
            raise self.error
        return self.url


@pytest.fixture
def invoice_payload():
    return copy.deepcopy(INVOICE_PAYLOAD)


class TestInvoiceAPIIntegration:
    """Integration test suite for /api/invoices"""

    @pytest.mark.asyncio
    async def test_create_invoice_success(self, client: AsyncClient, invoice_payload):
        # Act
        response = await client.post("/api/invoices", json=invoice_payload)

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["invoice"]["number"] == "INV-00001"
        assert data["invoice"]["id"]

    @pytest.mark.asyncio
    async def test_sequential_numbers(self, client: AsyncClient, invoice_payload):
        # Act
        first = await client.post("/api/invoices", json=invoice_payload)
        second = await client.post("/api/invoices", json=invoice_payload)

        # Assert
        assert first.json()["invoice"]["number"] == "INV-00001"
        assert second.json()["invoice"]["number"] == "INV-00002"

    @pytest.mark.asyncio
    async def test_get_invoice_returns_recomputed_total(self, client: AsyncClient, invoice_payload):
        # Arrange
        created = await client.post("/api/invoices", json=invoice_payload)
        invoice_id = created.json()["invoice"]["id"]

        # Act
        response = await client.get(f"/api/invoices/{invoice_id}")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == invoice_id
        assert data["number"] == "INV-00001"
        assert data["status"] == "pending"
        assert data["total"] == 145.5
        assert data["subtotal"] == 145.5
        assert data["tax"] == 0
        assert data["userDetails"]["company"] == "Doe Consulting"
        assert data["userDetails"]["phone"] is None
        assert data["billTo"]["email"] == "ap@acme.com"
        assert data["invoiceDetails"] == {
            "issueDate": "2024-01-15",
            "dueDate": "2024-02-14",
            "frequency": "once",
        }
        assert [item["activityType"] for item in data["items"]] == ["Consulting", "Expenses"]
        assert data["items"][0]["amount"] == "100.00"
        assert data["items"][0]["duration"] == "2"
        assert data["items"][0]["rate"] == "50"
        assert data["items"][1]["amount"] == "45.50"
        assert data["items"][1]["duration"] is None
        assert data["items"][0]["date"] == "2024-01-10"

    @pytest.mark.asyncio
    async def test_get_unknown_invoice_returns_404(self, client: AsyncClient):
        # Act
        response = await client.get("/api/invoices/does-not-exist")

        # Assert
        assert response.status_code == 404
        data = response.json()
        assert data["code"] == "INVOICE_NOT_FOUND"
        assert "does-not-exist" in data["error"]

    @pytest.mark.asyncio
    async def test_empty_items_rejected_before_persistence(
        self, client: AsyncClient, invoice_payload, db_session
    ):
        # Arrange
        invoice_payload["items"] = []

        # Act
        response = await client.post("/api/invoices", json=invoice_payload)

        # Assert
        assert response.status_code == 422
        data = response.json()
        assert data["code"] == "VALIDATION_ERROR"
        assert any(detail["field"] == "items" for detail in data["details"])

        owners = await db_session.execute(select(func.count()).select_from(Owner))
        invoices = await db_session.execute(select(func.count()).select_from(Invoice))
        assert owners.scalar_one() == 0
        assert invoices.scalar_one() == 0

    @pytest.mark.asyncio
    async def test_line_amount_too_large_is_validation_error(
        self, client: AsyncClient, invoice_payload, db_session
    ):
        # Arrange
        invoice_payload["items"][0]["duration"] = "1e30"
        invoice_payload["items"][0]["rate"] = "1"

        # Act
        response = await client.post("/api/invoices", json=invoice_payload)

        # Assert
        assert response.status_code == 422
        data = response.json()
        assert data["code"] == "VALIDATION_ERROR"
        assert any(detail["field"] == "items.0" for detail in data["details"])

        invoices = await db_session.execute(select(func.count()).select_from(Invoice))
        assert invoices.scalar_one() == 0

    @pytest.mark.asyncio
    async def test_invalid_email_reports_field(self, client: AsyncClient, invoice_payload):
        # Arrange
        invoice_payload["billTo"]["email"] = "not-an-email"

        # Act
        response = await client.post("/api/invoices", json=invoice_payload)

        # Assert
        assert response.status_code == 422
        fields = [detail["field"] for detail in response.json()["details"]]
        assert "billTo.email" in fields


class TestPaymentAPIIntegration:
    """Integration test suite for /api/create-payment"""

    @pytest.mark.asyncio
    async def test_create_payment_success(self, app, client: AsyncClient):
        # Arrange
        gateway = RecordingPaymentGateway()
        app.dependency_overrides[get_payment_gateway] = lambda: gateway

        # Act
        response = await client.post(
            "/api/create-payment",
            json={"amount": 49.99, "invoiceId": "invoice-1", "description": "Payment for invoice #INV-00001"},
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {"url": "https://checkout.stripe.com/c/pay/cs_test_123"}

        request = gateway.requests[0]
        base_url = ApplicationConfig.APP_BASE_URL.rstrip("/")
        assert request.unit_amount == 4999
        assert request.currency == "usd"
        assert request.success_url == f"{base_url}/invoices/invoice-1/success"
        assert request.cancel_url == f"{base_url}/invoices/invoice-1"
        assert request.metadata == {"invoiceId": "invoice-1"}

    @pytest.mark.asyncio
    async def test_create_payment_provider_error(self, app, client: AsyncClient):
        # Arrange
        gateway = RecordingPaymentGateway(error=PaymentGatewayError("Stripe returned HTTP 402"))
        app.dependency_overrides[get_payment_gateway] = lambda: gateway

        # Act
        response = await client.post(
            "/api/create-payment",
            json={"amount": 10, "invoiceId": "invoice-1", "description": "Payment"},
        )

        # Assert
        assert response.status_code == 500
        assert response.json()["error"] == "Error creating payment session"
        assert len(gateway.requests) == 1

    @pytest.mark.asyncio
    async def test_create_payment_validation_error(self, app, client: AsyncClient):
        # Arrange
        gateway = RecordingPaymentGateway()
        app.dependency_overrides[get_payment_gateway] = lambda: gateway

        # Act
        response = await client.post("/api/create-payment", json={"amount": -1, "invoiceId": ""})

        # Assert
        assert response.status_code == 422
        assert gateway.requests == []

    @pytest.mark.asyncio
    async def test_create_payment_amount_too_large(self, app, client: AsyncClient):
        # Arrange
        gateway = RecordingPaymentGateway()
        app.dependency_overrides[get_payment_gateway] = lambda: gateway

        # Act
        response = await client.post("/api/create-payment", json={"amount": 1e30, "invoiceId": "invoice-1"})

        # Assert
        assert response.status_code == 422
        data = response.json()
        assert data["code"] == "VALIDATION_ERROR"
        assert any(detail["field"] == "amount" for detail in data["details"])
        assert gateway.requests == []


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
