from .unit_of_work import SqlAlchemyUnitOfWork
from .stripe_payment_gateway import StripePaymentGateway

__all__ = [
    "SqlAlchemyUnitOfWork",
    "StripePaymentGateway",
]
