"""Request schemas for Invoice API

Pydantic models for validating incoming HTTP requests.
Field names follow the camelCase keys sent by the web frontend.
"""

from datetime import date
from decimal import Decimal
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator
from src.domain.invoice import InvoiceFrequency
from src.domain.pricing import compute_line_amount, parse_number, to_minor_units


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _number_to_str(value: Any) -> Any:
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return str(value)
    return value


class UserDetailsSchema(BaseModel):
    """Invoice issuer section of the form"""

    name: str = Field(..., min_length=1, description="Your name is required")
    email: EmailStr = Field(..., description="Issuer email address")
    company: Optional[str] = Field(default=None, description="Company name")
    address: str = Field(..., min_length=1, description="Your address is required")
    phone: Optional[str] = Field(default=None)
    logo: Optional[str] = Field(default=None, description="Logo URL or data URI")

    @field_validator("name", "address", mode="before")
    @classmethod
    def strip_required(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("company", "phone", "logo", mode="before")
    @classmethod
    def normalize_optional(cls, v):
        return _blank_to_none(v)


class BillToSchema(BaseModel):
    """Bill-to section of the form"""

    name: str = Field(..., min_length=1, description="Client name is required")
    email: EmailStr = Field(..., description="Client email address")
    address: str = Field(..., min_length=1, description="Client address is required")

    @field_validator("name", "address", mode="before")
    @classmethod
    def strip_required(cls, v):
        return v.strip() if isinstance(v, str) else v


class InvoiceDetailsSchema(BaseModel):
    """Invoice metadata section of the form"""

    issue_date: date = Field(..., alias="issueDate", description="Issue date (YYYY-MM-DD)")
    due_date: date = Field(..., alias="dueDate", description="Due date (YYYY-MM-DD)")
    frequency: InvoiceFrequency = Field(
        default=InvoiceFrequency.ONCE,
        description="Billing frequency (once, daily, weekly, monthly, yearly)"
    )

    model_config = ConfigDict(populate_by_name=True)


class LineItemSchema(BaseModel):
    """
    Line item row of the form

    When duration and rate are both non-zero numbers, amount is replaced
    with duration * rate rounded to 2 decimal places.
    """

    activity_type: str = Field(..., alias="activityType", min_length=1)
    service_date: date = Field(..., alias="date")
    description: str = Field(..., min_length=1)
    duration: Optional[str] = Field(default=None)
    rate: Optional[str] = Field(default=None)
    amount: str = Field(..., min_length=1, description="Line amount")

    @field_validator("activity_type", "description", mode="before")
    @classmethod
    def strip_required(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("duration", "rate", mode="before")
    @classmethod
    def normalize_optional_number(cls, v):
        return _blank_to_none(_number_to_str(v))

    @field_validator("amount", mode="before")
    @classmethod
    def normalize_amount(cls, v):
        v = _number_to_str(v)
        return v.strip() if isinstance(v, str) else v

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v):
        # Unreadable amounts count as 0; only explicit negatives are rejected
        amount = parse_number(v)
        if amount is not None and amount < 0:
            raise ValueError("Amount must not be negative")
        return v

    @model_validator(mode="before")
    @classmethod
    def apply_duration_rate(cls, data):
        if isinstance(data, dict):
            computed = compute_line_amount(data.get("duration"), data.get("rate"))
            if computed is not None:
                data = {**data, "amount": computed}
        return data

    model_config = ConfigDict(populate_by_name=True)


class CreateInvoiceRequestSchema(BaseModel):
    """
    Request schema for creating an invoice

    Used for POST /api/invoices endpoint. A client-computed total may be
    sent but is ignored.
    """

    user_details: UserDetailsSchema = Field(..., alias="userDetails")
    bill_to: BillToSchema = Field(..., alias="billTo")
    invoice_details: InvoiceDetailsSchema = Field(..., alias="invoiceDetails")
    items: List[LineItemSchema] = Field(
        ...,
        min_length=1,
        description="At least one item is required"
    )
    total: Optional[Any] = Field(default=None, description="Ignored; recomputed server-side")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
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
                        "amount": "100.00",
                    }
                ],
            }
        },
    )


class CreatePaymentRequestSchema(BaseModel):
    """
    Request schema for creating a payment session

    Used for POST /api/create-payment endpoint.
    """

    amount: Decimal = Field(..., gt=0, description="Amount to charge in USD (must be > 0)")
    invoice_id: str = Field(..., alias="invoiceId", min_length=1, description="Invoice identifier")
    description: str = Field(default="", description="Text shown on the checkout page")

    @field_validator("amount")
    @classmethod
    def validate_minor_units(cls, v):
        # Raises ValueError when the amount cannot be expressed in cents
        to_minor_units(v)
        return v

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "amount": 49.99,
                "invoiceId": "7c1f6f0e-3a57-4a43-9a3e-2f8f4f3d9b10",
                "description": "Payment for invoice #INV-00001",
            }
        },
    )
