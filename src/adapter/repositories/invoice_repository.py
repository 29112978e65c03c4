"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from typing import Optional
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import Invoice
from src.domain.pricing import format_invoice_number


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        The flush surfaces a unique constraint violation on the invoice
        number immediately as IntegrityError.
        """
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def get_by_id(self, invoice_id: str) -> Optional[Invoice]:
        statement = select(Invoice).where(Invoice.id == invoice_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def count(self) -> int:
        statement = select(func.count()).select_from(Invoice)
        result = await self.session.execute(statement)
        return result.scalar_one()

    async def generate_invoice_number(self) -> str:
        """
        Generate the next invoice number from the current invoice count

        Format: INV-NNNNN (e.g., INV-00001)

        Returns:
            Candidate invoice number string
        """
        return format_invoice_number(await self.count())
