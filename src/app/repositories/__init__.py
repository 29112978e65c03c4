from .owner_repository import OwnerRepository
from .client_repository import ClientRepository
from .invoice_repository import InvoiceRepository
from .invoice_line_repository import InvoiceLineRepository

__all__ = [
    "OwnerRepository",
    "ClientRepository",
    "InvoiceRepository",
    "InvoiceLineRepository",
]
