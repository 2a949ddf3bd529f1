"""Fixtures partagées : contexte de facture allemand complet."""

from decimal import Decimal

import pytest

from invoicr.models import (
    Address,
    BankDetails,
    Client,
    EInvoiceConfig,
    EmailConfig,
    InvoiceContext,
    Provider,
    ResolvedLineItem,
    Translations,
)
from invoicr.models.enums import BillingType, CountryCode, Language


@pytest.fixture
def sample_provider() -> Provider:
    """Prestataire allemand avec TVA, email et IBAN."""
    return Provider(
        name="Muster Software GmbH",
        address=Address(street="Hauptstraße 1", city="10115 Berlin"),
        email="rechnung@muster-software.de",
        phone="+49 30 1234567",
        tax_number="12/345/67890",
        vat_id="DE123456789",
        country_code=CountryCode.DE,
        bank=BankDetails(
            name="Commerzbank",
            iban="DE89 3704 0044 0532 0130 00",
            bic="COBADEFFXXX",
        ),
    )


@pytest.fixture
def sample_client() -> Client:
    """Client allemand avec Leitweg-ID valide."""
    return Client(
        name="Kunde AG",
        address=Address(street="Marktplatz 5", city="80331 München"),
        email=EmailConfig(to=["Erika Mustermann <erika@kunde.de>"]),
        project_reference="PRJ-7",
        country_code=CountryCode.DE,
        einvoice=EInvoiceConfig(leitweg_id="04-1234567-89"),
    )


@pytest.fixture
def sample_context(sample_provider: Provider, sample_client: Client) -> InvoiceContext:
    """Facture de test conforme EN16931 (TVA 19 %, 1000 EUR HT)."""
    return InvoiceContext(
        provider=sample_provider,
        client=sample_client,
        translations=Translations(
            payment_terms="Zahlbar innerhalb von 14 Tagen",
            file_prefix="Rechnung",
        ),
        invoice_number="2024-042",
        invoice_date="15.12.2024",
        due_date="29.12.2024",
        month_name="Dezember 2024",
        lang=Language.DE,
        currency="EUR",
        tax_rate=Decimal("0.19"),
        subtotal=Decimal("1000"),
        tax_amount=Decimal("190"),
        total_amount=Decimal("1190"),
        bank_details=sample_provider.bank,
        line_items=[
            ResolvedLineItem(
                description="Softwareentwicklung",
                quantity=Decimal("10"),
                rate=Decimal("100"),
                billing_type=BillingType.HOURLY,
                total=Decimal("1000"),
            ),
        ],
    )


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path_factory) -> None:
    """Isole les tests des variables INVOICR_* et d'un éventuel .env."""
    for var in (
        "INVOICR_DEFAULT_FILE_PREFIX",
        "INVOICR_PRETTY_PRINT_XML",
        "INVOICR_LOG_LEVEL",
        "INVOICR_FACTURX_CHECK_XSD",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
