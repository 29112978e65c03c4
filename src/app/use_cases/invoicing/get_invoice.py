"""GetInvoice Use Case

Loads a stored invoice in the shape displayed on the invoice page.
"""

from libs.result import Result, Return, Error
from src.app.repositories.owner_repository import OwnerRepository
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.domain.invoice import InvoiceStatus
from src.domain.pricing import format_amount, format_quantity
from .dtos import (
    ClientDetailsDTO,
    InvoiceDetailResponseDTO,
    InvoiceDetailsDTO,
    InvoiceLineDTO,
    OwnerDetailsDTO,
)


class GetInvoice:
    """
    Use Case: Retrieve an invoice with its owner, client and line items

    Line items are returned in submission order.
    """

    def __init__(
        self,
        owner_repo: OwnerRepository,
        client_repo: ClientRepository,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
    ):
        self.owner_repo = owner_repo
        self.client_repo = client_repo
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo

    async def execute(self, invoice_id: str) -> Result[InvoiceDetailResponseDTO]:
        try:
            invoice = await self.invoice_repo.get_by_id(invoice_id)
            if invoice is None:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice {invoice_id} not found",
                    )
                )

            owner = await self.owner_repo.get_by_id(invoice.owner_id)
            client = await self.client_repo.get_by_id(invoice.client_id)
            if owner is None or client is None:
                return Return.err(
                    Error(
                        code="INVOICE_INCOMPLETE",
                        message=f"Invoice {invoice_id} is missing its owner or client",
                    )
                )

            lines = await self.invoice_line_repo.get_by_invoice_id(invoice.id)

            response = InvoiceDetailResponseDTO(
                id=invoice.id,
                number=invoice.number,
                user_details=OwnerDetailsDTO(
                    name=owner.name,
                    email=owner.email,
                    company=owner.company,
                    address=owner.address,
                    phone=owner.phone,
                    logo=owner.logo,
                ),
                bill_to=ClientDetailsDTO(
                    name=client.name,
                    email=client.email,
                    address=client.address,
                ),
                invoice_details=InvoiceDetailsDTO(
                    issue_date=invoice.issue_date,
                    due_date=invoice.due_date,
                    frequency=invoice.frequency,
                ),
                items=[
                    InvoiceLineDTO(
                        activity_type=line.activity_type,
                        service_date=line.service_date,
                        description=line.description,
                        duration=format_quantity(line.duration),
                        rate=format_quantity(line.rate),
                        amount=format_amount(line.amount),
                    )
                    for line in lines
                ],
                subtotal=invoice.subtotal,
                tax=invoice.tax,
                total=invoice.total,
                status=InvoiceStatus(invoice.status).value,
                created_at=invoice.created_at,
            )

            return Return.ok(response)

        except Exception as e:
            return Return.err(
                Error(
                    code="GET_INVOICE_FAILED",
                    message="Failed to load invoice",
                    reason=str(e),
                )
            )
