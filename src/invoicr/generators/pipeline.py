"""Pipeline de génération d'e-factures.

FR: Résolution du format, projection EN16931, validation, sérialisation
    et nommage du fichier. Tout ou rien : aucun résultat partiel n'est
    retourné en cas d'échec. Seul save_einvoice() écrit sur le disque.
EN: Format resolution, EN16931 mapping, validation, serialization and
    file naming. All or nothing: no partial result on failure. Only
    save_einvoice() touches the filesystem.
"""

import logging
import os
from pathlib import Path

from invoicr.conf import get_settings
from invoicr.errors import EInvoiceValidationError, NoFormatAvailableError
from invoicr.formats import available_formats, coerce_country, default_format
from invoicr.generators.base import BaseGenerator, GenerationResult
from invoicr.generators.bt_json import JSONGenerator
from invoicr.generators.facturx import FacturXGenerator
from invoicr.generators.ubl import UBLGenerator
from invoicr.mapper import einvoice_filename, map_invoice_context
from invoicr.models.context import InvoiceContext
from invoicr.models.enums import CountryCode, FormatId
from invoicr.models.results import FormatDescriptor, GenerateOptions
from invoicr.validators import validate_for_einvoice

logger = logging.getLogger(__name__)

# Sérialiseur par extension de fichier du descripteur
_GENERATORS: dict[str, type[BaseGenerator]] = {
    "xml": UBLGenerator,
    "pdf": FacturXGenerator,
    "json": JSONGenerator,
}


def resolve_format(
    ctx: InvoiceContext,
    provider_country: CountryCode | str,
    requested: FormatId | str | None = None,
) -> FormatDescriptor:
    """Détermine le format effectif de la facture.

    FR: Format demandé, sinon format préféré du client, sinon format par
        défaut du pays du prestataire. Une préférence non proposée par le
        pays est ignorée (avertissement) au profit du défaut.
    EN: Requested format, else the client's preferred format, else the
        provider country's default. A preference the country does not
        offer is ignored (warning) in favour of the default.

    Raises:
        NoFormatAvailableError: Si le pays est inconnu ou sans format.
    """
    einvoice = ctx.client.einvoice
    preferred = requested or (einvoice.preferred_format if einvoice else None)
    country = coerce_country(provider_country)

    descriptor = default_format(country, preferred)
    if descriptor is None:
        msg = f"Aucun format e-facture disponible pour le pays : {provider_country}"
        raise NoFormatAvailableError(
            msg,
            country=str(provider_country) if provider_country else None,
            requested_format=str(preferred) if preferred else None,
        )

    if preferred and descriptor.format != preferred:
        logger.warning(
            "Format %s non proposé pour %s, repli sur %s",
            preferred,
            country,
            descriptor.format,
        )
    return descriptor


def generate_einvoice(
    ctx: InvoiceContext,
    provider_country: CountryCode | str,
    client_country: CountryCode | str,
    options: GenerateOptions | None = None,
) -> GenerationResult:
    """Génère une e-facture à partir d'un contexte de facture.

    Args:
        ctx: Le contexte de facture entièrement résolu.
        provider_country: Code ISO alpha-2 du prestataire.
        client_country: Code ISO alpha-2 du client.
        options: Format imposé, saut de validation, PDF source.

    Returns:
        GenerationResult avec les octets, le format, le nom de fichier et
        la validation.

    Raises:
        NoFormatAvailableError: Aucun format pour le pays du prestataire.
        EInvoiceValidationError: Facture invalide sans skip_validation.
        ValueError: Code pays client inconnu.
    """
    options = options or GenerateOptions()
    descriptor = resolve_format(ctx, provider_country, options.format)

    provider_cc = coerce_country(provider_country)
    client_cc = coerce_country(client_country)
    if client_cc is None or not available_formats(client_cc):
        msg = f"Code pays client inconnu : {client_country!r}"
        raise ValueError(msg)

    document = map_invoice_context(ctx, descriptor.format, provider_cc, client_cc)
    validation = validate_for_einvoice(ctx, descriptor.format, provider_cc, client_cc)

    if not validation.valid:
        if not options.skip_validation:
            msg = "Validation e-facture échouée : " + "; ".join(validation.errors)
            raise EInvoiceValidationError(
                msg, errors=validation.errors, warnings=validation.warnings
            )
        logger.warning(
            "Validation ignorée pour la facture %s (%d erreur(s))",
            ctx.invoice_number,
            len(validation.errors),
        )

    generator_cls = _GENERATORS[descriptor.file_extension]
    generator = generator_cls(
        descriptor.format, pretty_print=get_settings().pretty_print_xml
    )
    data = generator.generate(document, pdf_bytes=options.pdf_bytes)

    filename = einvoice_filename(ctx, descriptor.format, descriptor.file_extension)
    logger.info(
        "E-facture %s générée pour la facture %s (%s)",
        descriptor.format,
        ctx.invoice_number,
        filename,
    )
    return GenerationResult(
        data=data,
        format=descriptor,
        filename=filename,
        validation=validation,
    )


def save_einvoice(
    result: GenerationResult, output_dir: str | os.PathLike[str]
) -> Path:
    """Écrit le résultat dans output_dir et retourne le chemin complet.

    Raises:
        EInvoiceWriteError: Si l'écriture échoue.
    """
    return result.save(output_dir)
