"""Formats e-facture des pays d'Asie-Pacifique."""

from invoicr.formats.types import CountryFormats, json_format, xml_format
from invoicr.models.enums import CountryCode as C
from invoicr.models.enums import FormatId as F

_PEPPOL_ANZ = xml_format(
    F.PEPPOL_ANZ, "PEPPOL BIS A-NZ (mandatory B2G from May 2025)"
)

ASIA_PACIFIC_FORMATS: CountryFormats = {
    C.IN: [
        json_format(
            F.GST_EINVOICE,
            "GST e-Invoice (mandatory for businesses > turnover threshold)",
        )
    ],
    C.ID: [xml_format(F.EFAKTUR, "e-Faktur (mandatory since 2015/2016)")],
    C.MY: [xml_format(F.MYINVOIS, "MyInvois (mandatory rollout 2024-2025)")],
    C.SG: [xml_format(F.PEPPOL_SG, "InvoiceNow/PEPPOL (IMDA network)")],
    C.AU: [_PEPPOL_ANZ],
    C.NZ: [_PEPPOL_ANZ],
    C.KR: [xml_format(F.ETAX_KR, "e-Tax Invoice (NTS system, mandatory)")],
    C.JP: [xml_format(F.PEPPOL_JP, "PEPPOL BIS JP (Japan CIUS)")],
    C.TW: [xml_format(F.EGUI, "e-GUI (Government Uniform Invoice)")],
    C.VN: [xml_format(F.VAT_VN, "VAT e-Invoice (mandatory since July 2022)")],
    C.TH: [xml_format(F.ETAX_TH, "e-Tax Invoice (RD system)")],
    C.PH: [xml_format(F.CAS_PH, "CAS e-Invoicing (BIR system)")],
}

ASIA_PACIFIC_COUNTRY_NAMES: dict[C, str] = {
    C.IN: "India",
    C.ID: "Indonesia",
    C.MY: "Malaysia",
    C.SG: "Singapore",
    C.AU: "Australia",
    C.NZ: "New Zealand",
    C.KR: "South Korea",
    C.JP: "Japan",
    C.TW: "Taiwan",
    C.VN: "Vietnam",
    C.TH: "Thailand",
    C.PH: "Philippines",
}
