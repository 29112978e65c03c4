from .owner_repository import SqlAlchemyOwnerRepository
from .client_repository import SqlAlchemyClientRepository
from .invoice_repository import SqlAlchemyInvoiceRepository
from .invoice_line_repository import SqlAlchemyInvoiceLineRepository

__all__ = [
    "SqlAlchemyOwnerRepository",
    "SqlAlchemyClientRepository",
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyInvoiceLineRepository",
]
