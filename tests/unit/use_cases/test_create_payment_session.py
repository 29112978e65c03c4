"""Unit tests for CreatePaymentSession use case"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.services.payment_gateway import CheckoutSessionRequest, PaymentGatewayError
from src.app.use_cases.invoicing.create_payment_session import CreatePaymentSession
from src.app.use_cases.invoicing.dtos import CreatePaymentCommandDTO

BASE_URL = "https://invoices.example.com"


@pytest.fixture
def mock_gateway():
    gateway = MagicMock()
    gateway.create_checkout_session = AsyncMock(return_value="https://checkout.stripe.com/c/pay/cs_test_123")
    return gateway


@pytest.fixture
def use_case(mock_gateway):
    return CreatePaymentSession(mock_gateway, BASE_URL + "/")


@pytest.fixture
def sample_command():
    return CreatePaymentCommandDTO(
        amount=Decimal("49.99"),
        invoice_id="invoice-1",
        description="Payment for invoice #INV-00001",
    )


class TestBuildRequest:
    """Test checkout session request construction"""

    def test_minor_unit_price(self, use_case, sample_command):
        request = use_case.build_request(sample_command)

        assert request.unit_amount == 4999

    def test_fixed_currency_and_single_item(self, use_case, sample_command):
        request = use_case.build_request(sample_command)

        assert request.currency == "usd"
        assert request.quantity == 1
        assert request.mode == "payment"
        assert request.product_name == "Invoice #invoice-1"
        assert request.product_description == "Payment for invoice #INV-00001"

    def test_redirect_urls(self, use_case, sample_command):
        request = use_case.build_request(sample_command)

        assert request.success_url == f"{BASE_URL}/invoices/invoice-1/success"
        assert request.cancel_url == f"{BASE_URL}/invoices/invoice-1"

    def test_invoice_id_metadata(self, use_case, sample_command):
        request = use_case.build_request(sample_command)

        assert request.metadata == {"invoiceId": "invoice-1"}


@pytest.mark.asyncio
class TestCreatePaymentSession:

    async def test_returns_checkout_url(self, use_case, mock_gateway, sample_command):
        # Act
        result = await use_case.execute(sample_command)

        # Assert
        assert result.is_ok()
        assert result.value.url == "https://checkout.stripe.com/c/pay/cs_test_123"
        mock_gateway.create_checkout_session.assert_called_once()
        request = mock_gateway.create_checkout_session.call_args.args[0]
        assert isinstance(request, CheckoutSessionRequest)

    async def test_gateway_error_is_not_retried(self, use_case, mock_gateway, sample_command):
        # Arrange
        mock_gateway.create_checkout_session = AsyncMock(side_effect=PaymentGatewayError("card_declined"))

        # Act
        result = await use_case.execute(sample_command)

        # Assert
        assert result.is_err()
        assert result.error.code == "PAYMENT_SESSION_FAILED"
        assert result.error.message == "Error creating payment session"
        mock_gateway.create_checkout_session.assert_called_once()

    async def test_unexpected_error(self, use_case, mock_gateway, sample_command):
        # Arrange
        mock_gateway.create_checkout_session = AsyncMock(side_effect=RuntimeError("boom"))

        # Act
        result = await use_case.execute(sample_command)

        # Assert
        assert result.is_err()
        assert result.error.code == "PAYMENT_SESSION_FAILED"
        assert result.error.reason == "boom"

    async def test_amount_too_large_for_minor_units(self, use_case, mock_gateway):
        # Arrange
        command = CreatePaymentCommandDTO(amount=Decimal("1e30"), invoice_id="invoice-1")

        # Act
        result = await use_case.execute(command)

        # Assert
        assert result.is_err()
        assert result.error.code == "PAYMENT_SESSION_FAILED"
        assert "too large" in result.error.reason
        mock_gateway.create_checkout_session.assert_not_called()
