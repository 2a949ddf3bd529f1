"""Règles spécifiques à chaque format e-facture.

FR: Table de dispatch couvrant TOUS les FormatId. Un format sans exigence
    supplémentaire pointe explicitement vers _no_extra_rules ; un format
    ajouté à l'énumération sans entrée ici fait échouer l'import.
EN: Dispatch table covering EVERY FormatId. Formats without extra
    requirements explicitly map to _no_extra_rules; a format added to the
    enum without an entry here fails at import time.
"""

import re
from collections.abc import Callable

from invoicr.models.context import InvoiceContext
from invoicr.models.enums import CountryCode, FormatId

FormatRule = Callable[[InvoiceContext, CountryCode, list[str], list[str]], None]

# Forme attendue d'une Leitweg-ID : 2 chiffres, segment, 2 chiffres de contrôle
_LEITWEG_ID_RE = re.compile(r"\d{2}-[A-Z0-9-]+-\d{2}")


def _xrechnung(
    ctx: InvoiceContext,
    provider_country: CountryCode,
    errors: list[str],
    warnings: list[str],
) -> None:
    """XRechnung : TVA et email vendeur obligatoires, Leitweg-ID en B2G."""
    einvoice = ctx.client.einvoice
    leitweg_id = einvoice.leitweg_id if einvoice else None
    buyer_reference = einvoice.buyer_reference if einvoice else None

    # Obligatoire en B2G seulement, indiscernable du B2B ici
    if not leitweg_id and not buyer_reference:
        warnings.append(
            "No Leitweg-ID or Buyer Reference set. Required for B2G invoices (BT-10)"
        )

    if leitweg_id and not _LEITWEG_ID_RE.fullmatch(leitweg_id):
        warnings.append(
            f"Leitweg-ID format may be invalid: {leitweg_id}. "
            "Expected format: XX-XXXXX-XX"
        )

    if not ctx.provider.vat_id:
        errors.append("Provider VAT ID is required for XRechnung (BT-31)")

    # Adresse électronique vendeur obligatoire depuis XRechnung 3.0.1
    if not ctx.provider.email:
        errors.append("Provider email is required for XRechnung (BT-34)")


def _zugferd(
    ctx: InvoiceContext,
    provider_country: CountryCode,
    errors: list[str],
    warnings: list[str],
) -> None:
    """ZUGFeRD : plus permissif qu'XRechnung."""
    if not ctx.provider.vat_id:
        warnings.append("Provider VAT ID is recommended for ZUGFeRD")


def _cius_ro(
    ctx: InvoiceContext,
    provider_country: CountryCode,
    errors: list[str],
    warnings: list[str],
) -> None:
    """CIUS-RO : code fiscal (CUI) obligatoire."""
    if not ctx.provider.tax_number:
        errors.append("Provider Tax Number (CUI) is required for CIUS-RO")

    einvoice = ctx.client.einvoice
    if not (einvoice and einvoice.buyer_reference):
        warnings.append("Buyer reference is recommended for CIUS-RO invoices")


def _no_extra_rules(
    ctx: InvoiceContext,
    provider_country: CountryCode,
    errors: list[str],
    warnings: list[str],
) -> None:
    """Aucune règle au-delà des règles communes."""


FORMAT_RULES: dict[FormatId, FormatRule] = {
    FormatId.XRECHNUNG: _xrechnung,
    FormatId.ZUGFERD: _zugferd,
    FormatId.CIUS_RO: _cius_ro,
    # Europe
    FormatId.UBL: _no_extra_rules,
    FormatId.FACTUR_X: _no_extra_rules,
    FormatId.FATTURAPA: _no_extra_rules,
    FormatId.FACTURAE: _no_extra_rules,
    FormatId.PEPPOL_BIS: _no_extra_rules,
    FormatId.NLCIUS: _no_extra_rules,
    FormatId.EHF: _no_extra_rules,
    FormatId.OIOUBL: _no_extra_rules,
    FormatId.FINVOICE: _no_extra_rules,
    FormatId.EBINTERFACE: _no_extra_rules,
    FormatId.ISDOC: _no_extra_rules,
    FormatId.KSEF: _no_extra_rules,
    FormatId.SEFAKTURA: _no_extra_rules,
    # Afrique
    FormatId.TIMS: _no_extra_rules,
    FormatId.EVAT_GH: _no_extra_rules,
    FormatId.EFD_TZ: _no_extra_rules,
    FormatId.EBM: _no_extra_rules,
    # Asie-Pacifique
    FormatId.GST_EINVOICE: _no_extra_rules,
    FormatId.EFAKTUR: _no_extra_rules,
    FormatId.MYINVOIS: _no_extra_rules,
    FormatId.PEPPOL_SG: _no_extra_rules,
    FormatId.PEPPOL_ANZ: _no_extra_rules,
    FormatId.ETAX_KR: _no_extra_rules,
    FormatId.PEPPOL_JP: _no_extra_rules,
    FormatId.EGUI: _no_extra_rules,
    FormatId.VAT_VN: _no_extra_rules,
    FormatId.ETAX_TH: _no_extra_rules,
    FormatId.CAS_PH: _no_extra_rules,
    # Moyen-Orient
    FormatId.FATOORA: _no_extra_rules,
    FormatId.EFATURA_TR: _no_extra_rules,
    FormatId.JOFOTARA: _no_extra_rules,
    FormatId.ERECEIPT_EG: _no_extra_rules,
    # Amérique latine
    FormatId.NFE: _no_extra_rules,
    FormatId.CFDI: _no_extra_rules,
    FormatId.FE_AR: _no_extra_rules,
    FormatId.DTE: _no_extra_rules,
    FormatId.FE_CO: _no_extra_rules,
    FormatId.FE_PE: _no_extra_rules,
    FormatId.FE_EC: _no_extra_rules,
    FormatId.FE_CR: _no_extra_rules,
    FormatId.CFE: _no_extra_rules,
    FormatId.FE_PA: _no_extra_rules,
    FormatId.FEL: _no_extra_rules,
    FormatId.ECF: _no_extra_rules,
    FormatId.FE_BO: _no_extra_rules,
}

_missing = set(FormatId) - set(FORMAT_RULES)
if _missing:
    msg = f"Règles de validation manquantes pour : {', '.join(sorted(_missing))}"
    raise RuntimeError(msg)
