"""CreatePaymentSession Use Case

Starts a hosted checkout for an invoice and returns the redirect URL.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.payment_gateway import (
    CheckoutSessionRequest,
    PaymentGateway,
    PaymentGatewayError,
)
from src.domain.pricing import to_minor_units
from .dtos import CreatePaymentCommandDTO, PaymentSessionResponseDTO

logger = logging.getLogger(__name__)

CHECKOUT_CURRENCY = "usd"


class CreatePaymentSession:
    """
    Use Case: Create a checkout session for an invoice payment

    Business Rules:
    1. Currency is always USD
    2. One line item priced at round(amount * 100) minor units
    3. Success redirects to /invoices/{id}/success, cancel to /invoices/{id}
    4. invoiceId is attached as session metadata for reconciliation
    5. Single attempt; failures are reported, never retried
    """

    def __init__(self, payment_gateway: PaymentGateway, app_base_url: str):
        self.payment_gateway = payment_gateway
        self.app_base_url = app_base_url.rstrip("/")

    def build_request(self, command: CreatePaymentCommandDTO) -> CheckoutSessionRequest:
        invoice_url = f"{self.app_base_url}/invoices/{command.invoice_id}"
        return CheckoutSessionRequest(
            currency=CHECKOUT_CURRENCY,
            product_name=f"Invoice #{command.invoice_id}",
            product_description=command.description,
            unit_amount=to_minor_units(command.amount),
            quantity=1,
            success_url=f"{invoice_url}/success",
            cancel_url=invoice_url,
            metadata={"invoiceId": command.invoice_id},
        )

    async def execute(self, command: CreatePaymentCommandDTO) -> Result[PaymentSessionResponseDTO]:
        """
        Execute payment session creation

        Args:
            command: CreatePaymentCommandDTO with amount, invoice_id, description

        Returns:
            Result[PaymentSessionResponseDTO]: Success with checkout URL or error
        """
        try:
            request = self.build_request(command)
            url = await self.payment_gateway.create_checkout_session(request)
        except PaymentGatewayError as e:
            logger.error(f"Payment session for invoice {command.invoice_id} failed: {e}")
            return Return.err(
                Error(
                    code="PAYMENT_SESSION_FAILED",
                    message="Error creating payment session",
                    reason=str(e),
                )
            )
        except Exception as e:
            logger.exception(f"Unexpected error creating payment session for invoice {command.invoice_id}")
            return Return.err(
                Error(
                    code="PAYMENT_SESSION_FAILED",
                    message="Error creating payment session",
                    reason=str(e),
                )
            )

        return Return.ok(PaymentSessionResponseDTO(url=url))
