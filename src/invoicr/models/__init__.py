"""Modèles de données Pydantic pour la génération d'e-factures."""

from invoicr.models.context import (
    Address,
    BankDetails,
    Client,
    EInvoiceConfig,
    EmailConfig,
    InvoiceContext,
    Provider,
    ResolvedLineItem,
    Translations,
)
from invoicr.models.document import BusinessTermDocument, DocumentLine, VATBreakdown
from invoicr.models.enums import CountryCode, FormatId
from invoicr.models.results import FormatDescriptor, GenerateOptions, ValidationResult

__all__ = [
    "Address",
    "BankDetails",
    "BusinessTermDocument",
    "Client",
    "CountryCode",
    "DocumentLine",
    "EInvoiceConfig",
    "EmailConfig",
    "FormatDescriptor",
    "FormatId",
    "GenerateOptions",
    "InvoiceContext",
    "Provider",
    "ResolvedLineItem",
    "Translations",
    "VATBreakdown",
    "ValidationResult",
]
