"""Formats e-facture des pays d'Amérique du Nord."""

from invoicr.formats.types import PEPPOL_BIS, CountryFormats, xml_format
from invoicr.models.enums import CountryCode as C
from invoicr.models.enums import FormatId as F

NORTH_AMERICA_FORMATS: CountryFormats = {
    C.US: [xml_format(F.UBL, "UBL 2.1 (OASIS Universal Business Language)")],
    C.CA: [PEPPOL_BIS],
}

NORTH_AMERICA_COUNTRY_NAMES: dict[C, str] = {
    C.US: "United States",
    C.CA: "Canada",
}
