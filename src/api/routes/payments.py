"""Payment API Routes

FastAPI routes for starting hosted checkout payments.
"""

from fastapi import APIRouter, Depends, status

from config import ApplicationConfig
from src.api.schemas.invoice_request import CreatePaymentRequestSchema
from src.app.services.payment_gateway import PaymentGateway
from src.app.use_cases.invoicing.dtos import CreatePaymentCommandDTO, PaymentSessionResponseDTO
from src.app.use_cases.invoicing.create_payment_session import CreatePaymentSession
from src.depends import get_payment_gateway
from src.api.error import ClientError

router = APIRouter(tags=["Payments"])


@router.post(
    "/create-payment",
    response_model=PaymentSessionResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        500: {
            "description": "Payment provider error",
            "content": {
                "application/json": {
                    "example": {
                        "error": "Error creating payment session",
                        "code": "PAYMENT_SESSION_FAILED"
                    }
                }
            }
        }
    }
)
async def create_payment(
    request: CreatePaymentRequestSchema,
    payment_gateway: PaymentGateway = Depends(get_payment_gateway)
):
    """
    Create a hosted checkout session for an invoice.

    **Example request:**
    ```json
    {
      "amount": 49.99,
      "invoiceId": "7c1f6f0e-3a57-4a43-9a3e-2f8f4f3d9b10",
      "description": "Payment for invoice #INV-00001"
    }
    ```

    **Returns:**
    - 200: `{"url": "https://checkout.stripe.com/..."}` to redirect the payer to
    - 422: Invalid request body
    - 500: Payment provider error
    """
    command = CreatePaymentCommandDTO(
        amount=request.amount,
        invoice_id=request.invoice_id,
        description=request.description,
    )

    use_case = CreatePaymentSession(payment_gateway, ApplicationConfig.APP_BASE_URL)
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return result.value
