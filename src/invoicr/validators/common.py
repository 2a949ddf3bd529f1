"""Règles communes à tous les formats e-facture.

FR: Champs EN16931 minimaux exigés quel que soit le format. L'absence
    d'email client et d'IBAN ne donne que des avertissements.
EN: Minimal EN16931 fields required whatever the format. Missing client
    email and IBAN only produce warnings.
"""

from invoicr.models.context import InvoiceContext


def validate_common(
    ctx: InvoiceContext, errors: list[str], warnings: list[str]
) -> None:
    """Applique les règles communes en complétant errors et warnings."""
    provider = ctx.provider
    client = ctx.client

    # Prestataire
    if not provider.vat_id and not provider.tax_number:
        errors.append("Provider must have either VAT ID or Tax Number")
    if not provider.email:
        errors.append("Provider email is required (BT-34: Seller electronic address)")
    if not provider.name:
        errors.append("Provider name is required")
    if not provider.address.street:
        errors.append("Provider street address is required")
    if not provider.address.city:
        errors.append("Provider city is required")

    # Client
    if not client.name:
        errors.append("Client name is required")
    if not client.address.street:
        errors.append("Client street address is required")
    if not client.address.city:
        errors.append("Client city is required")
    if not (client.email and client.email.to):
        warnings.append(
            "Client email missing - Buyer electronic address (BT-49) will be empty"
        )

    # Facture
    if not ctx.invoice_number:
        errors.append("Invoice number is required (BT-1)")
    if not ctx.invoice_date:
        errors.append("Invoice date is required (BT-2)")
    if not ctx.line_items:
        errors.append("At least one line item is required")

    # Paiement
    if not ctx.bank_details.iban:
        warnings.append("IBAN is recommended for payment instructions")


def has_required_fields(ctx: InvoiceContext) -> bool:
    """Vrai si le minimum requis par tous les formats est présent.

    FR: Pré-contrôle pour les appelants qui ne connaissent pas encore le
        format (ex. interface de configuration).
    EN: Pre-flight check for callers that do not know the format yet.
    """
    provider = ctx.provider
    client = ctx.client
    return bool(
        provider.name
        and provider.email
        and provider.address.street
        and provider.address.city
        and (provider.vat_id or provider.tax_number)
        and client.name
        and client.address.street
        and client.address.city
        and ctx.invoice_number
        and ctx.invoice_date
        and ctx.line_items
    )
