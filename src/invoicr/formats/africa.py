"""Formats e-facture des pays africains."""

from invoicr.formats.types import PEPPOL_BIS, CountryFormats, json_format, xml_format
from invoicr.models.enums import CountryCode as C
from invoicr.models.enums import FormatId as F

AFRICA_FORMATS: CountryFormats = {
    C.ZA: [PEPPOL_BIS],
    C.KE: [
        json_format(F.TIMS, "TIMS (Tax Invoice Management System, mandatory)")
    ],
    C.NG: [xml_format(F.UBL, "UBL-based e-Invoice")],
    C.GH: [xml_format(F.EVAT_GH, "e-VAT (mandatory for VAT-registered)")],
    C.TZ: [
        json_format(F.EFD_TZ, "EFD (Electronic Fiscal Device, mandatory)")
    ],
    C.RW: [
        json_format(F.EBM, "EBM (Electronic Billing Machine, mandatory)")
    ],
}

AFRICA_COUNTRY_NAMES: dict[C, str] = {
    C.ZA: "South Africa",
    C.KE: "Kenya",
    C.NG: "Nigeria",
    C.GH: "Ghana",
    C.TZ: "Tanzania",
    C.RW: "Rwanda",
}
