"""Fixtures partagées pour les tests des générateurs."""

import pytest

from invoicr.mapper import map_invoice_context
from invoicr.models import BusinessTermDocument, InvoiceContext
from invoicr.models.enums import CountryCode, FormatId


@pytest.fixture
def sample_document(sample_context: InvoiceContext) -> BusinessTermDocument:
    """Document Business Terms issu du contexte allemand."""
    return map_invoice_context(
        sample_context, FormatId.XRECHNUNG, CountryCode.DE, CountryCode.DE
    )
