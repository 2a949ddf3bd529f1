"""Formats e-facture des pays d'Amérique latine.

FR: Tous les formats de la région sont des XML obligatoires validés par
    l'administration fiscale nationale.
EN: Every format of the region is a mandatory XML cleared by the national
    tax authority.
"""

from invoicr.formats.types import CountryFormats, xml_format
from invoicr.models.enums import CountryCode as C
from invoicr.models.enums import FormatId as F

LATIN_AMERICA_FORMATS: CountryFormats = {
    C.BR: [xml_format(F.NFE, "NF-e (Nota Fiscal Eletronica, mandatory)")],
    C.MX: [xml_format(F.CFDI, "CFDI 4.0 (Comprobante Fiscal Digital, mandatory)")],
    C.AR: [xml_format(F.FE_AR, "Factura Electronica AFIP (mandatory)")],
    C.CL: [xml_format(F.DTE, "DTE (Documento Tributario Electronico, mandatory)")],
    C.CO: [xml_format(F.FE_CO, "Factura Electronica DIAN (mandatory)")],
    C.PE: [xml_format(F.FE_PE, "Factura Electronica SUNAT (mandatory)")],
    C.EC: [xml_format(F.FE_EC, "Factura Electronica SRI (mandatory)")],
    C.CR: [xml_format(F.FE_CR, "Factura Electronica Hacienda (mandatory)")],
    C.UY: [xml_format(F.CFE, "CFE (Comprobante Fiscal Electronico, mandatory)")],
    C.PA: [xml_format(F.FE_PA, "Factura Electronica DGI (mandatory)")],
    C.GT: [xml_format(F.FEL, "FEL (Factura Electronica en Linea, mandatory)")],
    C.DO: [xml_format(F.ECF, "e-CF (Comprobante Fiscal Electronico)")],
    C.BO: [xml_format(F.FE_BO, "Factura Electronica SIN (mandatory)")],
}

LATIN_AMERICA_COUNTRY_NAMES: dict[C, str] = {
    C.BR: "Brazil",
    C.MX: "Mexico",
    C.AR: "Argentina",
    C.CL: "Chile",
    C.CO: "Colombia",
    C.PE: "Peru",
    C.EC: "Ecuador",
    C.CR: "Costa Rica",
    C.UY: "Uruguay",
    C.PA: "Panama",
    C.GT: "Guatemala",
    C.DO: "Dominican Republic",
    C.BO: "Bolivia",
}
