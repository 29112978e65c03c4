"""Client Domain Entity

The bill-to party of an invoice.
"""

from datetime import datetime
from sqlmodel import Field, Column
from sqlalchemy import DateTime, String, Text
from src.domain.base import BaseModel, generate_uuid, utc_now


class Client(BaseModel, table=True):
    """
    Client - Party the invoice is billed to

    Created fresh for every submitted invoice, same as Owner.
    """

    __tablename__ = "clients"

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique client identifier (UUID)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Client name"
    )

    email: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Client email address"
    )

    address: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Client postal address"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp"
    )
