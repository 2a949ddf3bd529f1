"""Validation des factures avant génération e-facture.

FR: Point d'entrée principal : validate_for_einvoice() applique les règles
    communes puis les règles du format. Aucune exception pour une donnée
    manquante : tout est rapporté dans un ValidationResult (erreurs
    bloquantes et avertissements), sans effet de bord.
EN: Main entry point: validate_for_einvoice() applies the common rules
    then the format rules. Missing data never raises: everything is
    reported in a ValidationResult, with no side effects.
"""

from invoicr.models.context import InvoiceContext
from invoicr.models.enums import CountryCode, FormatId
from invoicr.models.results import ValidationResult
from invoicr.validators.common import has_required_fields, validate_common
from invoicr.validators.profiles import FORMAT_RULES


def validate_for_einvoice(
    ctx: InvoiceContext,
    fmt: FormatId,
    provider_country: CountryCode,
    client_country: CountryCode,
) -> ValidationResult:
    """Valide un contexte de facture pour un format donné.

    Args:
        ctx: Le contexte de facture.
        fmt: Le format cible.
        provider_country: Pays du prestataire.
        client_country: Pays du client.

    Returns:
        ValidationResult listant TOUTES les erreurs et avertissements.
    """
    errors: list[str] = []
    warnings: list[str] = []

    validate_common(ctx, errors, warnings)
    FORMAT_RULES[FormatId(fmt)](ctx, provider_country, errors, warnings)

    return ValidationResult(errors=errors, warnings=warnings)


__all__ = ["FORMAT_RULES", "has_required_fields", "validate_for_einvoice"]
