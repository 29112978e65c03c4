"""Stripe Checkout Payment Gateway

Creates hosted checkout sessions through the Stripe REST API.
"""

import logging
from typing import Dict, Optional
import httpx
from src.app.services.payment_gateway import (
    CheckoutSessionRequest,
    PaymentGateway,
    PaymentGatewayError,
)

logger = logging.getLogger(__name__)


class StripePaymentGateway(PaymentGateway):
    """
    Payment gateway backed by Stripe Checkout

    Sends a form-encoded POST to /v1/checkout/sessions authenticated with
    the secret key. Single attempt, no retry.
    """

    def __init__(
        self,
        secret_key: str,
        api_base: str = "https://api.stripe.com",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Stripe payment gateway

        Args:
            secret_key: Stripe secret API key
            api_base: Stripe API base URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used in tests)
        """
        self.secret_key = secret_key
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @staticmethod
    def build_form(request: CheckoutSessionRequest) -> Dict[str, str]:
        """Flatten a checkout request into Stripe's bracketed form fields"""
        form = {
            "mode": request.mode,
            "success_url": request.success_url,
            "cancel_url": request.cancel_url,
            "line_items[0][quantity]": str(request.quantity),
            "line_items[0][price_data][currency]": request.currency,
            "line_items[0][price_data][unit_amount]": str(request.unit_amount),
            "line_items[0][price_data][product_data][name]": request.product_name,
        }

        # Stripe rejects an empty product description
        if request.product_description:
            form["line_items[0][price_data][product_data][description]"] = request.product_description

        for index, method in enumerate(request.payment_method_types):
            form[f"payment_method_types[{index}]"] = method

        for key, value in request.metadata.items():
            form[f"metadata[{key}]"] = value

        return form

    async def create_checkout_session(self, request: CheckoutSessionRequest) -> str:
        if not self.secret_key:
            raise PaymentGatewayError("Stripe secret key is not configured")

        url = f"{self.api_base}/v1/checkout/sessions"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    url,
                    data=self.build_form(request),
                    auth=(self.secret_key, ""),
                )
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Stripe rejected checkout session request: "
                f"status={e.response.status_code} body={e.response.text}"
            )
            raise PaymentGatewayError(f"Stripe returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"Failed to reach Stripe: {e}")
            raise PaymentGatewayError(f"Stripe request failed: {e}") from e
        except ValueError as e:
            logger.error(f"Stripe returned a non-JSON response: {e}")
            raise PaymentGatewayError("Stripe returned an invalid response") from e

        session_url = payload.get("url")
        if not session_url:
            raise PaymentGatewayError("Stripe response did not include a checkout URL")

        logger.info(f"Created Stripe checkout session {payload.get('id')} for metadata {request.metadata}")
        return session_url
