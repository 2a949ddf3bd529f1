"""Formats e-facture des pays européens (UE et hors UE)."""

from invoicr.formats.types import (
    PEPPOL_BIS,
    CountryFormats,
    pdf_format,
    xml_format,
)
from invoicr.models.enums import CountryCode as C
from invoicr.models.enums import FormatId as F

_ZUGFERD = pdf_format(F.ZUGFERD, "ZUGFeRD (PDF/A-3 with embedded XML)")

EU_FORMATS: CountryFormats = {
    C.DE: [
        xml_format(F.XRECHNUNG, "XRechnung (UBL-based XML, mandatory for B2G)"),
        _ZUGFERD,
    ],
    C.RO: [
        xml_format(F.CIUS_RO, "CIUS-RO (UBL with ANAF requirements, mandatory B2B)"),
    ],
    C.FR: [
        pdf_format(F.FACTUR_X, "Factur-X (PDF/A-3 with embedded XML)"),
        xml_format(F.UBL, "UBL (for Chorus Pro)"),
    ],
    C.IT: [
        xml_format(F.FATTURAPA, "FatturaPA (XML for SDI, mandatory for all)"),
    ],
    C.ES: [
        xml_format(F.FACTURAE, "Facturae 3.2.2 (Spanish e-invoice format)"),
        PEPPOL_BIS,
    ],
    C.PL: [
        xml_format(F.KSEF, "KSeF (Krajowy System e-Faktur)"),
        PEPPOL_BIS,
    ],
    C.BE: [
        PEPPOL_BIS,
        xml_format(F.UBL, "UBL 2.1 (Belgium e-FFF)"),
    ],
    C.NL: [
        xml_format(F.NLCIUS, "NLCIUS (Dutch Core Invoice Usage Specification)"),
        PEPPOL_BIS,
    ],
    C.AT: [
        xml_format(F.EBINTERFACE, "ebInterface 6.1 (Austrian e-invoice standard)"),
        _ZUGFERD,
        PEPPOL_BIS,
    ],
    C.PT: [xml_format(F.PEPPOL_BIS, "PEPPOL BIS Billing 3.0 (CIUS-PT)")],
    C.SE: [xml_format(F.PEPPOL_BIS, "PEPPOL BIS Billing 3.0 (Svefaktura)")],
    C.NO: [
        xml_format(F.EHF, "EHF (Elektronisk Handelsformat)"),
        PEPPOL_BIS,
    ],
    C.DK: [
        xml_format(F.OIOUBL, "OIOUBL (Danish public sector e-invoice)"),
        PEPPOL_BIS,
    ],
    C.FI: [
        xml_format(F.FINVOICE, "Finvoice 3.0 (Finnish e-invoice standard)"),
        PEPPOL_BIS,
    ],
    C.GR: [xml_format(F.PEPPOL_BIS, "PEPPOL BIS Billing 3.0 (myDATA compatible)")],
    C.HU: [
        xml_format(F.PEPPOL_BIS, "PEPPOL BIS Billing 3.0 (NAV Online compatible)")
    ],
    C.SI: [xml_format(F.PEPPOL_BIS, "PEPPOL BIS Billing 3.0 (eSlog compatible)")],
    C.SK: [PEPPOL_BIS],
    C.CZ: [
        xml_format(F.ISDOC, "ISDOC (Information System Document)"),
        PEPPOL_BIS,
    ],
    C.LU: [PEPPOL_BIS],
    C.IE: [PEPPOL_BIS],
    C.LT: [PEPPOL_BIS],
    C.LV: [
        xml_format(F.PEPPOL_BIS, "PEPPOL BIS Billing 3.0 (mandatory B2G from 2025)")
    ],
    C.EE: [
        xml_format(F.PEPPOL_BIS, "PEPPOL BIS Billing 3.0 (mandatory from July 2025)")
    ],
    C.RS: [
        xml_format(F.SEFAKTURA, "Serbian e-Faktura (mandatory B2B since 2023)"),
    ],
    C.HR: [PEPPOL_BIS],
    C.BG: [PEPPOL_BIS],
    C.MT: [PEPPOL_BIS],
    C.CY: [PEPPOL_BIS],
}

NON_EU_EUROPE_FORMATS: CountryFormats = {
    C.GB: [
        PEPPOL_BIS,
        xml_format(F.UBL, "UBL 2.1"),
    ],
    C.CH: [
        pdf_format(F.ZUGFERD, "ZUGFeRD/Factur-X (PDF/A-3 with embedded XML)"),
        PEPPOL_BIS,
    ],
    C.IS: [PEPPOL_BIS],
}

EUROPE_FORMATS: CountryFormats = {**EU_FORMATS, **NON_EU_EUROPE_FORMATS}

EUROPE_COUNTRY_NAMES: dict[C, str] = {
    # UE
    C.DE: "Germany",
    C.RO: "Romania",
    C.FR: "France",
    C.IT: "Italy",
    C.ES: "Spain",
    C.PL: "Poland",
    C.BE: "Belgium",
    C.NL: "Netherlands",
    C.AT: "Austria",
    C.PT: "Portugal",
    C.SE: "Sweden",
    C.NO: "Norway",
    C.DK: "Denmark",
    C.FI: "Finland",
    C.GR: "Greece",
    C.HU: "Hungary",
    C.SI: "Slovenia",
    C.SK: "Slovakia",
    C.CZ: "Czech Republic",
    C.LU: "Luxembourg",
    C.IE: "Ireland",
    C.LT: "Lithuania",
    C.LV: "Latvia",
    C.EE: "Estonia",
    C.RS: "Serbia",
    C.HR: "Croatia",
    C.BG: "Bulgaria",
    C.MT: "Malta",
    C.CY: "Cyprus",
    # Hors UE
    C.GB: "United Kingdom",
    C.CH: "Switzerland",
    C.IS: "Iceland",
}
