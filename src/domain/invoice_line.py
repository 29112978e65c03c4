"""Invoice Line Domain Entity

Tracks individual billable entries within an invoice.
"""

from datetime import datetime, date
from decimal import Decimal
from typing import Optional
from pydantic import ConfigDict
from sqlmodel import Field, Column, Index
from sqlalchemy import Date, DateTime, ForeignKey, Integer, Numeric, String, Text
from src.domain.base import BaseModel, generate_uuid, utc_now


class InvoiceLine(BaseModel, table=True):
    """
    Invoice Line - Individual billable entry within an invoice

    Domain Rules:
    - Each line item belongs to exactly one invoice
    - position keeps the submission order (0-based)
    - amount equals duration * rate when both were given on the form,
      otherwise it is the amount entered by the user
    """

    __tablename__ = "invoice_lines"
    __table_args__ = (
        Index('ix_invoice_lines_invoice_id', 'invoice_id'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique invoice line identifier (UUID)"
    )

    invoice_id: str = Field(
        sa_column=Column(String(36), ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Invoice"
    )

    position: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Order of the line on the invoice"
    )

    activity_type: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Kind of work billed (e.g., 'Consulting')"
    )

    service_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Date the work was performed"
    )

    description: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Free-text line description"
    )

    duration: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
        description="Optional duration (e.g., hours)"
    )

    rate: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
        description="Optional rate per duration unit"
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Line amount (currency-agnostic)"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Line item creation timestamp"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "2f4e6a8c-0b1d-4e3f-a5c7-9e1b3d5f7a9c",
                "invoice_id": "7c1f6f0e-3a57-4a43-9a3e-2f8f4f3d9b10",
                "position": 0,
                "activity_type": "Consulting",
                "service_date": "2024-01-10",
                "description": "Architecture review",
                "duration": "2.000000",
                "rate": "50.000000",
                "amount": "100.000000",
                "created_at": "2024-01-15T10:00:00Z"
            }
        },
    )
