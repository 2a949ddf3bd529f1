"""Formats e-facture des pays du Moyen-Orient."""

from invoicr.formats.types import PEPPOL_BIS, CountryFormats, json_format, xml_format
from invoicr.models.enums import CountryCode as C
from invoicr.models.enums import FormatId as F

MIDDLE_EAST_FORMATS: CountryFormats = {
    C.SA: [xml_format(F.FATOORA, "FATOORA/ZATCA (mandatory for all, Phase 2)")],
    C.AE: [PEPPOL_BIS],
    C.IL: [xml_format(F.UBL, "UBL-based e-Invoice")],
    C.TR: [xml_format(F.EFATURA_TR, "e-Fatura (GIB system, mandatory)")],
    C.JO: [xml_format(F.JOFOTARA, "JoFotara (ISTD system)")],
    C.EG: [json_format(F.ERECEIPT_EG, "e-Receipt (ETA system)")],
}

MIDDLE_EAST_COUNTRY_NAMES: dict[C, str] = {
    C.SA: "Saudi Arabia",
    C.AE: "United Arab Emirates",
    C.IL: "Israel",
    C.TR: "Turkey",
    C.JO: "Jordan",
    C.EG: "Egypt",
}
