from .base import BaseModel, generate_uuid, utc_now
from .owner import Owner
from .client import Client
from .invoice import Invoice, InvoiceStatus, InvoiceFrequency
from .invoice_line import InvoiceLine

__all__ = [
    "BaseModel",
    "generate_uuid",
    "utc_now",
    "Owner",
    "Client",
    "Invoice",
    "InvoiceStatus",
    "InvoiceFrequency",
    "InvoiceLine",
]
