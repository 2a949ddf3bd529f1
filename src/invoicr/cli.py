"""Point d'entrée CLI ``invoicr-einvoice``.

FR: Sous-commandes formats, countries, validate et generate. Codes de
    sortie : 0 succès, 1 échec de validation ou de génération, 2 erreur
    d'utilisation (argparse).
EN: Subcommands formats, countries, validate and generate. Exit codes:
    0 success, 1 validation or generation failure, 2 usage error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from invoicr.conf import get_settings
from invoicr.errors import EInvoiceError, EInvoiceValidationError
from invoicr.formats import (
    available_formats,
    coerce_country,
    countries_by_region,
    country_name,
    supported_countries,
)
from invoicr.generators import generate_einvoice, resolve_format, save_einvoice
from invoicr.models.context import InvoiceContext
from invoicr.models.enums import FormatId
from invoicr.models.results import GenerateOptions
from invoicr.validators import validate_for_einvoice

logger = logging.getLogger(__name__)


def _load_context(path: Path) -> InvoiceContext:
    """Charge un InvoiceContext sérialisé en JSON."""
    return InvoiceContext.model_validate_json(path.read_bytes())


def _print_issues(errors: Sequence[str], warnings: Sequence[str]) -> None:
    for warning in warnings:
        print(f"warning: {warning}", file=sys.stderr)
    for error in errors:
        print(f"error: {error}", file=sys.stderr)


# --- Sous-commandes ---


def _cmd_formats(args: argparse.Namespace) -> int:
    if args.country:
        country = coerce_country(args.country)
        if country is None:
            print(f"Pays inconnu : {args.country}", file=sys.stderr)
            return 1
        countries = [country]
    else:
        countries = supported_countries()

    for country in countries:
        print(f"{country} ({country_name(country)})")
        for descriptor in available_formats(country):
            print(
                f"  {descriptor.format:<14} .{descriptor.file_extension:<5}"
                f" {descriptor.description}"
            )
    return 0


def _cmd_countries(args: argparse.Namespace) -> int:
    for region, countries in countries_by_region().items():
        print(f"{region}:")
        for country in countries:
            print(f"  {country}  {country_name(country)}")
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    ctx = _load_context(args.context)
    descriptor = resolve_format(ctx, args.provider_country, args.format)
    provider = coerce_country(args.provider_country)
    client = coerce_country(args.client_country)
    if client is None:
        print(f"Pays client inconnu : {args.client_country}", file=sys.stderr)
        return 1

    result = validate_for_einvoice(ctx, descriptor.format, provider, client)
    _print_issues(result.errors, result.warnings)
    if not result.valid:
        return 1
    print(f"{descriptor.format}: OK")
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    ctx = _load_context(args.context)
    options = GenerateOptions(
        format=args.format,
        skip_validation=args.skip_validation,
        pdf_bytes=args.pdf.read_bytes() if args.pdf else None,
    )
    try:
        result = generate_einvoice(
            ctx, args.provider_country, args.client_country, options
        )
    except EInvoiceValidationError as exc:
        _print_issues(exc.errors, exc.warnings)
        return 1

    _print_issues(result.validation.errors, result.validation.warnings)
    path = save_einvoice(result, args.output_dir)
    print(path)
    return 0


# --- Parser ---


def build_parser() -> argparse.ArgumentParser:
    """Construit le parser argparse de la CLI."""
    parser = argparse.ArgumentParser(
        prog="invoicr-einvoice",
        description="Génération d'e-factures EN16931 / E-invoice generation",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    formats_parser = subparsers.add_parser(
        "formats", help="Lister les formats par pays / List formats by country"
    )
    formats_parser.add_argument("--country", help="Code ISO alpha-2")
    formats_parser.set_defaults(handler=_cmd_formats)

    countries_parser = subparsers.add_parser(
        "countries", help="Lister les pays par région / List countries by region"
    )
    countries_parser.set_defaults(handler=_cmd_countries)

    format_choices = [str(fmt) for fmt in FormatId]
    for name, handler, summary in (
        ("validate", _cmd_validate, "Valider une facture / Validate an invoice"),
        ("generate", _cmd_generate, "Générer l'e-facture / Generate the e-invoice"),
    ):
        sub = subparsers.add_parser(name, help=summary, description=summary)
        sub.add_argument("context", type=Path, help="InvoiceContext JSON")
        sub.add_argument("--provider-country", required=True)
        sub.add_argument("--client-country", required=True)
        sub.add_argument("--format", choices=format_choices, default=None)
        sub.set_defaults(handler=handler)

        if name == "generate":
            sub.add_argument("--skip-validation", action="store_true")
            sub.add_argument("--output-dir", type=Path, default=Path.cwd())
            sub.add_argument(
                "--pdf", type=Path, default=None, help="PDF source à enrichir"
            )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Exécute la CLI et retourne le code de sortie."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=get_settings().log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.handler(args)
    except ValidationError as exc:
        print(f"Contexte de facture invalide : {exc}", file=sys.stderr)
        return 1
    except (EInvoiceError, ValueError, OSError) as exc:
        logger.debug("Échec de la commande %s", args.command, exc_info=True)
        print(str(exc), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
