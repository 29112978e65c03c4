"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for command inputs and response outputs.
Response DTOs serialize with the camelCase keys used by the web frontend.
"""

from datetime import datetime, date
from decimal import Decimal
from typing import Annotated, List, Optional
from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from src.domain.invoice import InvoiceFrequency

# Invoice totals are rendered as JSON numbers
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class OwnerDetailsDTO(BaseModel):
    """Invoice issuer details"""

    name: str
    email: str
    company: Optional[str] = None
    address: str
    phone: Optional[str] = None
    logo: Optional[str] = None


class ClientDetailsDTO(BaseModel):
    """Bill-to party details"""

    name: str
    email: str
    address: str


class InvoiceDetailsDTO(BaseModel):
    """Invoice dates and frequency"""

    issue_date: date = Field(..., alias="issueDate")
    due_date: date = Field(..., alias="dueDate")
    frequency: InvoiceFrequency = Field(default=InvoiceFrequency.ONCE)

    model_config = ConfigDict(populate_by_name=True)


class LineItemCommandDTO(BaseModel):
    """
    Line item as submitted on the form

    Numeric fields keep their raw string form; parsing happens in the
    use case with the pricing rules.
    """

    activity_type: str
    service_date: date
    description: str
    duration: Optional[str] = None
    rate: Optional[str] = None
    amount: str


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating an invoice

    Used as input to CreateInvoice use case.
    """

    user_details: OwnerDetailsDTO
    bill_to: ClientDetailsDTO
    invoice_details: InvoiceDetailsDTO
    items: List[LineItemCommandDTO] = Field(
        ...,
        min_length=1,
        description="Line items in display order (at least one)"
    )


class CreatedInvoiceDTO(BaseModel):
    """Identifier and number of a newly created invoice"""

    id: str
    number: str


class InvoiceLineDTO(BaseModel):
    """Line item as displayed on the invoice page"""

    activity_type: str = Field(..., alias="activityType")
    service_date: date = Field(..., alias="date")
    description: str
    duration: Optional[str] = None
    rate: Optional[str] = None
    amount: str = Field(..., description="Amount with 2 decimal places")

    model_config = ConfigDict(populate_by_name=True)


class InvoiceDetailResponseDTO(BaseModel):
    """
    Response DTO for a stored invoice

    Returned by GetInvoice use case.
    """

    id: str
    number: str
    user_details: OwnerDetailsDTO = Field(..., alias="userDetails")
    bill_to: ClientDetailsDTO = Field(..., alias="billTo")
    invoice_details: InvoiceDetailsDTO = Field(..., alias="invoiceDetails")
    items: List[InvoiceLineDTO]
    subtotal: Money
    tax: Money
    total: Money
    status: str
    created_at: datetime = Field(..., alias="createdAt")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "7c1f6f0e-3a57-4a43-9a3e-2f8f4f3d9b10",
                "number": "INV-00001",
                "userDetails": {
                    "name": "Jane Doe",
                    "email": "jane@example.com",
                    "company": "Doe Consulting",
                    "address": "1 Main St, Springfield",
                    "phone": None,
                    "logo": None,
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
                        "amount": "100.00",
                    }
                ],
                "subtotal": 100.0,
                "tax": 0.0,
                "total": 100.0,
                "status": "pending",
                "createdAt": "2024-01-15T10:00:00Z",
            }
        },
    )


class CreatePaymentCommandDTO(BaseModel):
    """
    Command DTO for creating a payment session

    Used as input to CreatePaymentSession use case.
    """

    amount: Decimal = Field(
        ...,
        gt=0,
        description="Amount to charge in major units (USD)"
    )

    invoice_id: str = Field(
        ...,
        min_length=1,
        description="Invoice the payment settles"
    )

    description: str = Field(
        default="",
        description="Text shown on the checkout page"
    )


class PaymentSessionResponseDTO(BaseModel):
    """Redirect target of a created checkout session"""

    url: str
