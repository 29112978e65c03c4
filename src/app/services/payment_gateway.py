"""Payment Gateway Interface

Defines the contract for creating hosted checkout sessions with an
external payment provider.
"""

from abc import ABC, abstractmethod
from typing import Dict
from pydantic import BaseModel, Field


class PaymentGatewayError(Exception):
    """Raised when the payment provider rejects or fails a request"""


class CheckoutSessionRequest(BaseModel):
    """
    Provider-agnostic description of a hosted checkout session

    A single line item with quantity 1, priced in minor units.
    """

    currency: str = Field(default="usd", description="ISO 4217 currency code (lowercase)")
    product_name: str = Field(..., description="Name shown on the checkout page")
    product_description: str = Field(default="", description="Description shown on the checkout page")
    unit_amount: int = Field(..., ge=0, description="Price in minor units (e.g., cents)")
    quantity: int = Field(default=1, ge=1)
    mode: str = Field(default="payment")
    payment_method_types: list[str] = Field(default_factory=lambda: ["card"])
    success_url: str = Field(..., description="Redirect target after successful payment")
    cancel_url: str = Field(..., description="Redirect target when checkout is abandoned")
    metadata: Dict[str, str] = Field(default_factory=dict, description="Reconciliation metadata")


class PaymentGateway(ABC):
    """
    Abstract payment provider client

    Implementations submit the session to the provider exactly once.
    """

    @abstractmethod
    async def create_checkout_session(self, request: CheckoutSessionRequest) -> str:
        """
        Create a hosted checkout session

        Args:
            request: CheckoutSessionRequest describing the payment

        Returns:
            URL of the hosted checkout page to redirect the payer to

        Raises:
            PaymentGatewayError: If the provider call fails
        """
        pass
