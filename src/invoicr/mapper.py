"""Projection d'un InvoiceContext sur les Business Terms EN16931.

FR: Fonctions pures et déterministes : aucune E/S, aucune lecture de
    l'heure courante, toutes les dates viennent du contexte. Chaque règle
    de dérivation (date, catégorie TVA, unité, référence acheteur, email)
    est une fonction testable séparément.
EN: Pure, deterministic functions: no I/O, no clock reads, every date
    comes from the context. Each derivation rule is a separately testable
    function.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from decimal import Decimal

from invoicr.conf import get_settings
from invoicr.models.context import Client, InvoiceContext, ResolvedLineItem
from invoicr.models.document import BusinessTermDocument, DocumentLine, VATBreakdown
from invoicr.models.enums import (
    BillingType,
    CountryCode,
    FormatId,
    Language,
    PaymentMeansCode,
    UnitCode,
    VATCategory,
)

logger = logging.getLogger(__name__)

_EN_MONTHS = {
    "Jan": "01",
    "Feb": "02",
    "Mar": "03",
    "Apr": "04",
    "May": "05",
    "Jun": "06",
    "Jul": "07",
    "Aug": "08",
    "Sep": "09",
    "Oct": "10",
    "Nov": "11",
    "Dec": "12",
}

# Formats tentés après l'échec des formats localisés
_FALLBACK_DATE_FORMATS = (
    "%d %b %Y",
    "%d %B %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%d/%m/%Y",
    "%Y/%m/%d",
)

_EMAIL_IN_BRACKETS_RE = re.compile(r"<(.+)>")
_FILENAME_UNSAFE_RE = re.compile(r"[^a-zA-Z0-9-]")
_WHITESPACE_RE = re.compile(r"\s+")

_UNIT_CODES = {
    BillingType.HOURLY: UnitCode.HOUR,
    BillingType.DAILY: UnitCode.DAY,
    BillingType.FIXED: UnitCode.UNIT,
}


# --- Règles de dérivation ---


def format_date_to_iso(value: str, lang: Language | str) -> str:
    """Convertit une date localisée en ISO 8601 (YYYY-MM-DD).

    FR: Allemand « DD.MM.YYYY », anglais « D MMM YYYY » (ex. « 15 Dec 2024 »),
        puis quelques formats courants. En dernier recours, la chaîne est
        retournée telle quelle : une valeur visiblement fausse plutôt
        qu'un plantage.
    EN: German "DD.MM.YYYY", English "D MMM YYYY", then a few common
        layouts. As a last resort the string is returned unchanged.
    """
    text = value.strip()

    if lang == Language.DE:
        parts = text.split(".")
        if len(parts) == 3:
            day, month, year = (p.strip() for p in parts)
            return f"{year}-{month.zfill(2)}-{day.zfill(2)}"

    if lang == Language.EN:
        parts = text.split(" ")
        if len(parts) == 3:
            day, month_name, year = parts
            month = _EN_MONTHS.get(month_name, "01")
            return f"{year}-{month}-{day.zfill(2)}"

    parsed = _parse_generic_date(text)
    if parsed is not None:
        return parsed.isoformat()

    logger.debug("Date non interprétable, conservée telle quelle : %r", value)
    return value


def _parse_generic_date(text: str) -> date | None:
    """Tente ISO 8601 puis les formats de repli."""
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    for layout in _FALLBACK_DATE_FORMATS:
        try:
            return datetime.strptime(text, layout).date()
        except ValueError:
            continue
    return None


def vat_category_code(tax_rate: Decimal) -> VATCategory:
    """Catégorie TVA dérivée du taux unique de la facture."""
    if tax_rate == 0:
        return VATCategory.EXEMPT
    if tax_rate > 0:
        return VATCategory.STANDARD
    return VATCategory.NOT_SUBJECT


def unit_code(billing_type: BillingType | str) -> UnitCode:
    """Code unité UN/ECE pour un type de facturation (C62 par défaut)."""
    return _UNIT_CODES.get(billing_type, UnitCode.UNIT)


def resolve_buyer_reference(client: Client) -> str | None:
    """Référence acheteur (BT-10).

    Priorité : Leitweg-ID, puis référence acheteur explicite, puis
    référence projet du client.
    """
    einvoice = client.einvoice
    if einvoice and einvoice.leitweg_id:
        return einvoice.leitweg_id
    if einvoice and einvoice.buyer_reference:
        return einvoice.buyer_reference
    return client.project_reference or None


def extract_email(raw: str | None) -> str | None:
    """Extrait l'adresse d'une chaîne « Nom <adresse> »."""
    if not raw:
        return None
    match = _EMAIL_IN_BRACKETS_RE.search(raw)
    email = match.group(1) if match else raw.strip()
    return email or None


def _first_recipient(client: Client) -> str | None:
    if client.email and client.email.to:
        return client.email.to[0]
    return None


def _or_none(value: str | None) -> str | None:
    return value if value else None


# --- Projection ---


def map_invoice_context(
    ctx: InvoiceContext,
    fmt: FormatId,
    provider_country: CountryCode,
    client_country: CountryCode,
) -> BusinessTermDocument:
    """Projette le contexte de facture sur le document EN16931.

    Args:
        ctx: Le contexte de facture (non modifié).
        fmt: Le format cible (la projection est identique pour tous les
            formats ; il est accepté pour les profils futurs).
        provider_country: Pays du vendeur (BT-40).
        client_country: Pays de l'acheteur (BT-55).

    Returns:
        Le document Business Terms avec un seul récapitulatif TVA.
    """
    category = vat_category_code(ctx.tax_rate)
    rate_percent = ctx.tax_rate * 100
    provider = ctx.provider
    client = ctx.client
    bank = ctx.bank_details

    return BusinessTermDocument(
        invoice_number=ctx.invoice_number,
        issue_date=format_date_to_iso(ctx.invoice_date, ctx.lang),
        currency=ctx.currency,
        due_date=(
            format_date_to_iso(ctx.due_date, ctx.lang) if ctx.due_date else None
        ),
        buyer_reference=resolve_buyer_reference(client),
        payment_terms=ctx.translations.payment_terms,
        seller_name=provider.name,
        seller_vat_id=_or_none(provider.vat_id),
        seller_tax_number=_or_none(provider.tax_number),
        seller_email=provider.email,
        seller_street=provider.address.street,
        seller_city=provider.address.city,
        seller_country=provider_country,
        buyer_name=client.name,
        buyer_email=extract_email(_first_recipient(client)),
        buyer_street=client.address.street,
        buyer_city=client.address.city,
        buyer_country=client_country,
        payment_means_code=PaymentMeansCode.SEPA_CREDIT_TRANSFER,
        payment_account_name=_or_none(bank.name),
        iban=_or_none(_WHITESPACE_RE.sub("", bank.iban)),
        bic=_or_none(bank.bic),
        line_total=ctx.subtotal,
        total_excl_tax=ctx.subtotal,
        total_vat=ctx.tax_amount,
        total_incl_tax=ctx.total_amount,
        amount_due=ctx.total_amount,
        vat_breakdown=[
            VATBreakdown(
                taxable_amount=ctx.subtotal,
                tax_amount=ctx.tax_amount,
                category=category,
                rate=rate_percent,
            )
        ],
        lines=[
            _map_line_item(item, idx, category, rate_percent)
            for idx, item in enumerate(ctx.line_items, start=1)
        ],
    )


def _map_line_item(
    item: ResolvedLineItem,
    idx: int,
    category: VATCategory,
    rate_percent: Decimal,
) -> DocumentLine:
    """Projette une ligne résolue (identifiant à partir de 1)."""
    return DocumentLine(
        identifier=str(idx),
        quantity=item.quantity,
        unit_code=unit_code(item.billing_type),
        net_amount=item.total,
        unit_price=item.rate,
        name=item.description,
        vat_category=category,
        vat_rate=rate_percent,
    )


def einvoice_filename(
    ctx: InvoiceContext, fmt: FormatId | str, file_extension: str
) -> str:
    """Nom de fichier déterministe de l'e-facture.

    FR: ``{préfixe}_{numéro}_{mois}_{format}.{extension}`` ; les caractères
        du numéro hors [A-Za-z0-9-] deviennent « _ », les espaces du mois
        aussi.
    EN: ``{prefix}_{number}_{month}_{format}.{extension}``; number
        characters outside [A-Za-z0-9-] and month whitespace become "_".
    """
    prefix = ctx.translations.file_prefix or get_settings().default_file_prefix
    number = _FILENAME_UNSAFE_RE.sub("_", ctx.invoice_number)
    month = _WHITESPACE_RE.sub("_", ctx.month_name)
    return f"{prefix}_{number}_{month}_{fmt}.{file_extension}"
