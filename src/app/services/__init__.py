from .unit_of_work import UnitOfWork
from .payment_gateway import CheckoutSessionRequest, PaymentGateway, PaymentGatewayError

__all__ = [
    "UnitOfWork",
    "CheckoutSessionRequest",
    "PaymentGateway",
    "PaymentGatewayError",
]
