"""Invoice API Routes

FastAPI routes for creating and viewing invoices.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.schemas.invoice_request import CreateInvoiceRequestSchema
from src.app.use_cases.invoicing.dtos import (
    ClientDetailsDTO,
    CreateInvoiceCommandDTO,
    InvoiceDetailResponseDTO,
    InvoiceDetailsDTO,
    LineItemCommandDTO,
    OwnerDetailsDTO,
)
from src.app.use_cases.invoicing.create_invoice import CreateInvoice
from src.app.use_cases.invoicing.get_invoice import GetInvoice
from src.adapter.repositories.owner_repository import SqlAlchemyOwnerRepository
from src.adapter.repositories.client_repository import SqlAlchemyClientRepository
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.invoice_line_repository import SqlAlchemyInvoiceLineRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/invoices", tags=["Invoices"])


def to_command(request: CreateInvoiceRequestSchema) -> CreateInvoiceCommandDTO:
    """Convert a validated request into the CreateInvoice command"""
    return CreateInvoiceCommandDTO(
        user_details=OwnerDetailsDTO(
            name=request.user_details.name,
            email=str(request.user_details.email),
            company=request.user_details.company,
            address=request.user_details.address,
            phone=request.user_details.phone,
            logo=request.user_details.logo,
        ),
        bill_to=ClientDetailsDTO(
            name=request.bill_to.name,
            email=str(request.bill_to.email),
            address=request.bill_to.address,
        ),
        invoice_details=InvoiceDetailsDTO(
            issue_date=request.invoice_details.issue_date,
            due_date=request.invoice_details.due_date,
            frequency=request.invoice_details.frequency,
        ),
        items=[
            LineItemCommandDTO(
                activity_type=item.activity_type,
                service_date=item.service_date,
                description=item.description,
                duration=item.duration,
                rate=item.rate,
                amount=item.amount,
            )
            for item in request.items
        ],
    )


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    responses={
        422: {
            "description": "Validation error",
            "content": {
                "application/json": {
                    "example": {
                        "error": "Validation failed",
                        "code": "VALIDATION_ERROR",
                        "details": [{"field": "items", "message": "List should have at least 1 item"}]
                    }
                }
            }
        },
        500: {
            "description": "Invoice could not be stored",
            "content": {
                "application/json": {
                    "example": {
                        "error": "Failed to create invoice",
                        "code": "CREATE_INVOICE_FAILED"
                    }
                }
            }
        }
    }
)
async def create_invoice(
    request: CreateInvoiceRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Create an invoice with its issuer, client and line items.

    The total is recomputed from the line items; any `total` sent by the
    client is ignored. Owner, client, invoice and line items are written in
    one transaction.

    **Returns:**
    - 200: `{"success": true, "invoice": {"id": ..., "number": "INV-00001"}}`
    - 422: Invalid request body
    - 500: Persistence failure
    """
    # Create UnitOfWork and repositories
    uow = SqlAlchemyUnitOfWork(session)
    owner_repo = SqlAlchemyOwnerRepository(session)
    client_repo = SqlAlchemyClientRepository(session)
    invoice_repo = SqlAlchemyInvoiceRepository(session)
    invoice_line_repo = SqlAlchemyInvoiceLineRepository(session)

    # Execute use case
    use_case = CreateInvoice(
        uow,
        owner_repo,
        client_repo,
        invoice_repo,
        invoice_line_repo,
        max_number_retries=ApplicationConfig.INVOICE_NUMBER_MAX_RETRIES,
    )
    result = await use_case.execute(to_command(request))

    # Handle errors
    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return {"success": True, "invoice": result.value.model_dump()}


@router.get(
    "/{invoice_id}",
    response_model=InvoiceDetailResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        404: {
            "description": "Invoice not found",
            "content": {
                "application/json": {
                    "example": {
                        "error": "Invoice 123 not found",
                        "code": "INVOICE_NOT_FOUND"
                    }
                }
            }
        }
    }
)
async def get_invoice(
    invoice_id: str,
    session: AsyncSession = Depends(get_session)
):
    """
    Get an invoice in the shape rendered by the invoice page.

    **Path parameters:**
    - `invoice_id` (required): Invoice ID

    **Returns:**
    - 200: Invoice with userDetails, billTo, invoiceDetails, items, total and status
    - 404: Invoice not found
    """
    use_case = GetInvoice(
        SqlAlchemyOwnerRepository(session),
        SqlAlchemyClientRepository(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
    )
    result = await use_case.execute(invoice_id)

    if result.is_err():
        if result.error.code == "INVOICE_NOT_FOUND":
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        raise ClientError(result.error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return result.value
