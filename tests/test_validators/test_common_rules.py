"""Tests des règles de validation communes à tous les formats."""

import pytest

from invoicr.models import Address, BankDetails, EmailConfig, InvoiceContext
from invoicr.models.enums import CountryCode, FormatId
from invoicr.validators import has_required_fields, validate_for_einvoice


def _validate(ctx: InvoiceContext, fmt: FormatId = FormatId.UBL):
    return validate_for_einvoice(ctx, fmt, CountryCode.DE, CountryCode.DE)


def _with_provider(ctx: InvoiceContext, **update) -> InvoiceContext:
    return ctx.model_copy(update={"provider": ctx.provider.model_copy(update=update)})


def _with_client(ctx: InvoiceContext, **update) -> InvoiceContext:
    return ctx.model_copy(update={"client": ctx.client.model_copy(update=update)})


class TestCompleteContext:
    """Un contexte complet est valide sans avertissement."""

    def test_valid(self, sample_context: InvoiceContext) -> None:
        result = _validate(sample_context)
        assert result.valid is True
        assert result.errors == []
        assert result.warnings == []

    def test_has_required_fields(self, sample_context: InvoiceContext) -> None:
        assert has_required_fields(sample_context) is True

    def test_valid_is_serialized(self, sample_context: InvoiceContext) -> None:
        assert _validate(sample_context).model_dump()["valid"] is True


class TestProviderRules:
    """Règles sur le prestataire."""

    def test_needs_vat_id_or_tax_number(self, sample_context: InvoiceContext) -> None:
        ctx = _with_provider(sample_context, vat_id=None, tax_number="")
        result = _validate(ctx)
        assert "Provider must have either VAT ID or Tax Number" in result.errors

    def test_tax_number_alone_is_enough(self, sample_context: InvoiceContext) -> None:
        ctx = _with_provider(sample_context, vat_id=None)
        assert _validate(ctx).valid is True

    def test_email_required(self, sample_context: InvoiceContext) -> None:
        ctx = _with_provider(sample_context, email="")
        result = _validate(ctx)
        assert (
            "Provider email is required (BT-34: Seller electronic address)"
            in result.errors
        )

    def test_address_required(self, sample_context: InvoiceContext) -> None:
        ctx = _with_provider(sample_context, address=Address())
        result = _validate(ctx)
        assert "Provider street address is required" in result.errors
        assert "Provider city is required" in result.errors


class TestClientRules:
    """Règles sur le client."""

    def test_address_required(self, sample_context: InvoiceContext) -> None:
        ctx = _with_client(sample_context, address=Address())
        result = _validate(ctx)
        assert "Client street address is required" in result.errors
        assert "Client city is required" in result.errors

    def test_missing_email_is_a_warning(self, sample_context: InvoiceContext) -> None:
        ctx = _with_client(sample_context, email=None)
        result = _validate(ctx)
        assert result.valid is True
        assert (
            "Client email missing - Buyer electronic address (BT-49) will be empty"
            in result.warnings
        )

    def test_empty_recipient_list_is_a_warning(
        self, sample_context: InvoiceContext
    ) -> None:
        ctx = _with_client(sample_context, email=EmailConfig())
        assert len(_validate(ctx).warnings) == 1


class TestInvoiceRules:
    """Règles sur la facture elle-même."""

    def test_number_and_date_required(self, sample_context: InvoiceContext) -> None:
        ctx = sample_context.model_copy(
            update={"invoice_number": "", "invoice_date": ""}
        )
        result = _validate(ctx)
        assert "Invoice number is required (BT-1)" in result.errors
        assert "Invoice date is required (BT-2)" in result.errors

    def test_line_items_required(self, sample_context: InvoiceContext) -> None:
        ctx = sample_context.model_copy(update={"line_items": []})
        result = _validate(ctx)
        assert "At least one line item is required" in result.errors
        assert has_required_fields(ctx) is False

    def test_missing_iban_is_a_warning(self, sample_context: InvoiceContext) -> None:
        ctx = sample_context.model_copy(update={"bank_details": BankDetails()})
        result = _validate(ctx)
        assert result.valid is True
        assert "IBAN is recommended for payment instructions" in result.warnings


class TestAllErrorsReported:
    """Toutes les erreurs sont rapportées en une passe."""

    def test_collects_every_error(self, sample_context: InvoiceContext) -> None:
        ctx = _with_provider(
            sample_context, name="", email="", vat_id=None, tax_number=""
        ).model_copy(update={"invoice_number": "", "line_items": []})
        result = _validate(ctx)
        assert len(result.errors) == 5

    @pytest.mark.parametrize(
        "fix",
        [
            {"name": "Muster Software GmbH"},
            {"email": "rechnung@muster-software.de"},
            {"vat_id": "DE123456789"},
        ],
    )
    def test_fixing_a_field_shrinks_errors(
        self, sample_context: InvoiceContext, fix: dict
    ) -> None:
        """Ajouter un champ manquant ne fait jamais grossir la liste."""
        broken = _with_provider(
            sample_context, name="", email="", vat_id=None, tax_number=""
        )
        before = _validate(broken, FormatId.XRECHNUNG).errors
        after = _validate(
            _with_provider(broken, **fix), FormatId.XRECHNUNG
        ).errors
        assert len(after) < len(before)
        assert set(after) <= set(before)

    def test_does_not_raise_on_empty_context(
        self, sample_context: InvoiceContext
    ) -> None:
        ctx = sample_context.model_copy(
            update={
                "provider": sample_context.provider.model_copy(
                    update={"name": "", "address": Address(), "email": ""}
                ),
                "client": sample_context.client.model_copy(
                    update={"name": "", "address": Address(), "einvoice": None}
                ),
            }
        )
        result = _validate(ctx, FormatId.XRECHNUNG)
        assert result.valid is False
