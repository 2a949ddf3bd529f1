"""Types et constructeurs partagés par les tables régionales du registre."""

from invoicr.models.enums import CountryCode, FormatId
from invoicr.models.results import FormatDescriptor

CountryFormats = dict[CountryCode, list[FormatDescriptor]]


def xml_format(fmt: FormatId, description: str) -> FormatDescriptor:
    """Descripteur d'un format XML pur."""
    return FormatDescriptor(
        format=fmt,
        description=description,
        file_extension="xml",
        mime_type="application/xml",
    )


def pdf_format(fmt: FormatId, description: str) -> FormatDescriptor:
    """Descripteur d'un format PDF/A-3 à XML embarqué."""
    return FormatDescriptor(
        format=fmt,
        description=description,
        file_extension="pdf",
        mime_type="application/pdf",
    )


def json_format(fmt: FormatId, description: str) -> FormatDescriptor:
    """Descripteur d'un format JSON (plateformes fiscales)."""
    return FormatDescriptor(
        format=fmt,
        description=description,
        file_extension="json",
        mime_type="application/json",
    )


PEPPOL_BIS = xml_format(FormatId.PEPPOL_BIS, "PEPPOL BIS Billing 3.0")
