"""Owner Domain Entity

The invoice issuer's profile, captured with each invoice submission.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import DateTime, String, Text
from src.domain.base import BaseModel, generate_uuid, utc_now


class Owner(BaseModel, table=True):
    """
    Owner - Party issuing the invoice

    Domain Rules:
    - A new owner row is created for every submitted invoice
    - No lookup or deduplication by email
    """

    __tablename__ = "owners"

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique owner identifier (UUID)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Issuer name"
    )

    email: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Issuer email address"
    )

    company: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="Issuer company name"
    )

    address: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Issuer postal address"
    )

    phone: Optional[str] = Field(
        default=None,
        sa_column=Column(String(50), nullable=True),
        description="Issuer phone number"
    )

    logo: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Logo reference (URL or data URI)"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp"
    )
