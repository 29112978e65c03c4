"""Invoice Domain Entity

Tracks issued invoices, their totals and payment status.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from pydantic import ConfigDict
from sqlmodel import Field, Column, Index
from sqlalchemy import Date, DateTime, ForeignKey, Numeric, String
from src.domain.base import BaseModel, generate_uuid, utc_now


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    PENDING = "pending"
    PAID = "paid"


class InvoiceFrequency(str, Enum):
    """Billing frequency captured on the invoice form"""
    ONCE = "once"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class Invoice(BaseModel, table=True):
    """
    Invoice - Bill issued by an owner to a client

    Domain Rules:
    - number must be unique (INV-NNNNN, sequential in creation order)
    - total == subtotal == sum of invoice_lines.amount
    - tax is always 0
    - Created with status=pending; paid is set by payment confirmation
    - frequency is informational only
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_owner_id', 'owner_id'),
        Index('ix_invoices_client_id', 'client_id'),
        Index('ix_invoices_status', 'status'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique invoice identifier (UUID)"
    )

    number: str = Field(
        sa_column=Column(String(20), nullable=False, unique=True),
        description="Unique invoice number (e.g., INV-00001)"
    )

    owner_id: str = Field(
        sa_column=Column(String(36), ForeignKey("owners.id"), nullable=False),
        description="Foreign key to Owner"
    )

    client_id: str = Field(
        sa_column=Column(String(36), ForeignKey("clients.id"), nullable=False),
        description="Foreign key to Client"
    )

    subtotal: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Sum of line item amounts"
    )

    tax: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Tax amount (always 0)"
    )

    total: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Amount due (subtotal + tax)"
    )

    issue_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Date the invoice was issued"
    )

    due_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Payment due date"
    )

    frequency: InvoiceFrequency = Field(
        default=InvoiceFrequency.ONCE,
        description="Billing frequency (once, daily, weekly, monthly, yearly)"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.PENDING,
        description="Invoice status (pending, paid)"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Invoice creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last update timestamp"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "7c1f6f0e-3a57-4a43-9a3e-2f8f4f3d9b10",
                "number": "INV-00001",
                "owner_id": "0b8a5b2e-1d6c-4f7e-8f0a-6a1f1d2c3b4a",
                "client_id": "5e2d9c4b-7a8f-4b1e-9c3d-2a1b0f9e8d7c",
                "subtotal": "150.000000",
                "tax": "0.000000",
                "total": "150.000000",
                "issue_date": "2024-01-15",
                "due_date": "2024-02-14",
                "frequency": "once",
                "status": "pending",
                "created_at": "2024-01-15T10:00:00Z",
                "updated_at": "2024-01-15T10:00:00Z"
            }
        },
    )
