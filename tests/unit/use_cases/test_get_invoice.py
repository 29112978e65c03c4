"""Unit tests for GetInvoice use case"""

import pytest
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.invoicing.get_invoice import GetInvoice
from src.domain.client import Client
from src.domain.invoice import Invoice, InvoiceFrequency, InvoiceStatus
from src.domain.invoice_line import InvoiceLine
from src.domain.owner import Owner


@pytest.fixture
def sample_owner():
    return Owner(id="owner-1", name="Jane Doe", email="jane@example.com", address="1 Main St")


@pytest.fixture
def sample_client():
    return Client(id="client-1", name="Acme Corp", email="ap@acme.com", address="500 Market St")


@pytest.fixture
def sample_invoice():
    return Invoice(
        id="invoice-1",
        number="INV-00007",
        owner_id="owner-1",
        client_id="client-1",
        subtotal=Decimal("145.50"),
        tax=Decimal("0"),
        total=Decimal("145.50"),
        issue_date=date(2024, 1, 15),
        due_date=date(2024, 2, 14),
        frequency=InvoiceFrequency.WEEKLY,
        status=InvoiceStatus.PENDING,
        created_at=datetime(2024, 1, 15, 10, 0, 0),
    )


@pytest.fixture
def sample_lines():
    return [
        InvoiceLine(
            invoice_id="invoice-1",
            position=0,
            activity_type="Consulting",
            service_date=date(2024, 1, 10),
            description="Architecture review",
            duration=Decimal("2"),
            rate=Decimal("50"),
            amount=Decimal("100.00"),
        ),
        InvoiceLine(
            invoice_id="invoice-1",
            position=1,
            activity_type="Expenses",
            service_date=date(2024, 1, 11),
            description="Travel",
            amount=Decimal("45.50"),
        ),
    ]


@pytest.fixture
def repos(sample_owner, sample_client, sample_invoice, sample_lines):
    owner_repo = MagicMock()
    owner_repo.get_by_id = AsyncMock(return_value=sample_owner)
    client_repo = MagicMock()
    client_repo.get_by_id = AsyncMock(return_value=sample_client)
    invoice_repo = MagicMock()
    invoice_repo.get_by_id = AsyncMock(return_value=sample_invoice)
    invoice_line_repo = MagicMock()
    invoice_line_repo.get_by_invoice_id = AsyncMock(return_value=sample_lines)
    return owner_repo, client_repo, invoice_repo, invoice_line_repo


@pytest.mark.asyncio
class TestGetInvoice:

    async def test_returns_display_shape(self, repos):
        # Act
        result = await GetInvoice(*repos).execute("invoice-1")

        # Assert
        assert result.is_ok()
        invoice = result.value
        assert invoice.id == "invoice-1"
        assert invoice.number == "INV-00007"
        assert invoice.user_details.name == "Jane Doe"
        assert invoice.bill_to.name == "Acme Corp"
        assert invoice.invoice_details.frequency == InvoiceFrequency.WEEKLY
        assert invoice.total == Decimal("145.50")
        assert invoice.status == "pending"
        assert [item.description for item in invoice.items] == ["Architecture review", "Travel"]

    async def test_serializes_with_frontend_keys(self, repos):
        # Act
        result = await GetInvoice(*repos).execute("invoice-1")
        data = result.value.model_dump(by_alias=True, mode="json")

        # Assert
        assert set(data) >= {"id", "number", "userDetails", "billTo", "invoiceDetails", "items", "total", "status"}
        assert data["invoiceDetails"] == {"issueDate": "2024-01-15", "dueDate": "2024-02-14", "frequency": "weekly"}
        assert data["items"][0]["activityType"] == "Consulting"
        assert data["items"][0]["date"] == "2024-01-10"
        assert data["items"][1]["duration"] is None
        assert data["items"][0]["duration"] == "2"
        assert data["items"][0]["amount"] == "100.00"
        assert data["items"][1]["amount"] == "45.50"
        assert data["total"] == 145.5
        assert data["tax"] == 0

    async def test_invoice_not_found(self, repos):
        # Arrange
        owner_repo, client_repo, invoice_repo, invoice_line_repo = repos
        invoice_repo.get_by_id = AsyncMock(return_value=None)

        # Act
        result = await GetInvoice(*repos).execute("missing")

        # Assert
        assert result.is_err()
        assert result.error.code == "INVOICE_NOT_FOUND"
        assert "missing" in result.error.message
        invoice_line_repo.get_by_invoice_id.assert_not_called()

    async def test_repository_error(self, repos):
        # Arrange
        _, _, invoice_repo, _ = repos
        invoice_repo.get_by_id = AsyncMock(side_effect=Exception("Database error"))

        # Act
        result = await GetInvoice(*repos).execute("invoice-1")

        # Assert
        assert result.is_err()
        assert result.error.code == "GET_INVOICE_FAILED"
