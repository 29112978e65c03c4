"""Invoicing use cases"""
from .create_invoice import CreateInvoice
from .get_invoice import GetInvoice
from .create_payment_session import CreatePaymentSession
from .dtos import (
    OwnerDetailsDTO,
    ClientDetailsDTO,
    InvoiceDetailsDTO,
    LineItemCommandDTO,
    CreateInvoiceCommandDTO,
    CreatedInvoiceDTO,
    InvoiceLineDTO,
    InvoiceDetailResponseDTO,
    CreatePaymentCommandDTO,
    PaymentSessionResponseDTO,
)

__all__ = [
    "CreateInvoice",
    "GetInvoice",
    "CreatePaymentSession",
    "OwnerDetailsDTO",
    "ClientDetailsDTO",
    "InvoiceDetailsDTO",
    "LineItemCommandDTO",
    "CreateInvoiceCommandDTO",
    "CreatedInvoiceDTO",
    "InvoiceLineDTO",
    "InvoiceDetailResponseDTO",
    "CreatePaymentCommandDTO",
    "PaymentSessionResponseDTO",
]
