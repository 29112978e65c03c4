"""CreateInvoice Use Case

Persists a submitted invoice together with its owner, client and line items.
"""

import logging
from decimal import Decimal
from typing import List
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.owner_repository import OwnerRepository
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.domain.owner import Owner
from src.domain.client import Client
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_line import InvoiceLine
from src.domain.pricing import compute_total, parse_amount, parse_number
from .dtos import CreateInvoiceCommandDTO, CreatedInvoiceDTO, LineItemCommandDTO

logger = logging.getLogger(__name__)


class InvoiceNumberConflictError(Exception):
    """Raised when the generated invoice number is already taken"""

    def __init__(self, number: str):
        super().__init__(f"Invoice number {number} already taken")
        self.number = number


class CreateInvoice:
    """
    Use Case: Create an invoice from a validated submission

    Business Rules:
    1. Total is recomputed from the line items; client totals are ignored
    2. A new Owner and a new Client are created for every invoice
    3. Invoice number is INV-NNNNN from the current invoice count
    4. Invoice is created with status=pending and tax=0
    5. All records are written in one transaction

    Flow:
    1. Compute total from line items
    2. Create owner and client
    3. Generate invoice number
    4. Create invoice and line items
    5. Commit transaction
    6. Return id and number

    A unique constraint violation on the invoice number rolls the whole
    transaction back and the flow is retried up to max_number_retries times.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        owner_repo: OwnerRepository,
        client_repo: ClientRepository,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
        max_number_retries: int = 1,
    ):
        self.uow = uow
        self.owner_repo = owner_repo
        self.client_repo = client_repo
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo
        self.max_number_retries = max_number_retries

    async def execute(self, command: CreateInvoiceCommandDTO) -> Result[CreatedInvoiceDTO]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO with issuer, client, details and items

        Returns:
            Result[CreatedInvoiceDTO]: Success with invoice id and number or error
        """
        attempts = self.max_number_retries + 1

        for attempt in range(1, attempts + 1):
            try:
                invoice = await self._create_records(command)
                await self.uow.commit()

                logger.info(
                    f"Created invoice {invoice.number} (id={invoice.id}, total={invoice.total}, "
                    f"items={len(command.items)})"
                )
                return Return.ok(CreatedInvoiceDTO(id=invoice.id, number=invoice.number))

            except InvoiceNumberConflictError as e:
                await self.uow.rollback()
                if attempt < attempts:
                    logger.warning(f"{e} on attempt {attempt}/{attempts}, retrying")
                    continue

                logger.error(f"{e} after {attempts} attempts")
                return Return.err(
                    Error(
                        code="INVOICE_NUMBER_CONFLICT",
                        message="Failed to create invoice",
                        reason=f"Invoice number already taken after {attempts} attempts",
                    )
                )

            except Exception as e:
                await self.uow.rollback()
                logger.exception("Failed to create invoice")
                return Return.err(
                    Error(
                        code="CREATE_INVOICE_FAILED",
                        message="Failed to create invoice",
                        reason=str(e),
                    )
                )

    async def _create_records(self, command: CreateInvoiceCommandDTO) -> Invoice:
        # Step 1: Compute total from line items
        total = compute_total(item.amount for item in command.items)

        # Step 2: Create owner and client
        owner = await self.owner_repo.create(
            Owner(
                name=command.user_details.name,
                email=command.user_details.email,
                company=command.user_details.company,
                address=command.user_details.address,
                phone=command.user_details.phone,
                logo=command.user_details.logo,
            )
        )

        client = await self.client_repo.create(
            Client(
                name=command.bill_to.name,
                email=command.bill_to.email,
                address=command.bill_to.address,
            )
        )

        # Step 3: Generate invoice number
        number = await self.invoice_repo.generate_invoice_number()

        # Step 4: Create invoice and line items
        try:
            invoice = await self.invoice_repo.create(
                Invoice(
                    number=number,
                    owner_id=owner.id,
                    client_id=client.id,
                    subtotal=total,
                    tax=Decimal("0"),
                    total=total,
                    issue_date=command.invoice_details.issue_date,
                    due_date=command.invoice_details.due_date,
                    frequency=command.invoice_details.frequency,
                    status=InvoiceStatus.PENDING,
                )
            )
        except IntegrityError as e:
            raise InvoiceNumberConflictError(number) from e

        await self.invoice_line_repo.create_many(self._build_lines(invoice.id, command.items))

        return invoice

    @staticmethod
    def _build_lines(invoice_id: str, items: List[LineItemCommandDTO]) -> List[InvoiceLine]:
        return [
            InvoiceLine(
                invoice_id=invoice_id,
                position=position,
                activity_type=item.activity_type,
                service_date=item.service_date,
                description=item.description,
                duration=parse_number(item.duration),
                rate=parse_number(item.rate),
                amount=parse_amount(item.amount),
            )
            for position, item in enumerate(items)
        ]
