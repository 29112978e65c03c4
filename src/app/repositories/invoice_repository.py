"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.invoice import Invoice


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Provides access to invoice data for invoicing operations.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice with generated ID

        Raises:
            IntegrityError: If the invoice number is already taken
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: str) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored invoices"""
        pass

    @abstractmethod
    async def generate_invoice_number(self) -> str:
        """
        Generate the next invoice number

        Format: INV-NNNNN (e.g., INV-00001)

        Returns:
            Candidate invoice number string. Uniqueness is enforced on insert.
        """
        pass
