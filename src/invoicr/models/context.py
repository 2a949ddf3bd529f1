"""Contexte de facture fourni par la couche de construction des factures.

FR: Modèles Pydantic (immuables) décrivant une facture entièrement résolue :
    prestataire, client, lignes calculées, montants et traductions.
    Le cœur e-facture ne fait que les lire ; il ne valide pas les schémas
    de configuration, seulement la complétude des Business Terms.
EN: Immutable Pydantic models describing a fully-resolved invoice:
    provider, client, computed lines, amounts and translations.
    The e-invoice core only reads them.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from invoicr.models.enums import BillingType, CountryCode, FormatId, Language


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Address(_Frozen):
    """Adresse postale (prestataire ou client)."""

    street: str = Field(default="", description="Rue et numéro / Street and number")
    city: str = Field(
        default="",
        description="Ville, code postal inclus / City, postal code included",
    )
    country: str | None = Field(
        default=None,
        description="Nom du pays affiché / Displayed country name",
    )


class BankDetails(_Frozen):
    """Coordonnées bancaires pour le virement."""

    name: str = Field(default="", description="Nom de la banque / Bank name")
    iban: str = Field(default="", description="IBAN")
    bic: str = Field(default="", description="BIC/SWIFT")


class EmailConfig(_Frozen):
    """Destinataires email du client.

    FR: Les adresses peuvent être au format « Nom <adresse> ».
    EN: Addresses may use the "Display Name <addr>" form.
    """

    to: list[str] = Field(default_factory=list)
    cc: list[str] = Field(default_factory=list)
    bcc: list[str] = Field(default_factory=list)


class EInvoiceConfig(_Frozen):
    """Paramètres e-facture propres au client."""

    leitweg_id: str | None = Field(
        default=None,
        description=(
            "Identifiant de routage B2G allemand (Leitweg-ID, BT-10) / "
            "German B2G routing identifier"
        ),
    )
    buyer_reference: str | None = Field(
        default=None,
        description="Référence acheteur (BT-10) / Buyer reference",
    )
    preferred_format: FormatId | None = Field(
        default=None,
        description="Format préféré / Preferred e-invoice format",
    )


class Provider(_Frozen):
    """Prestataire (vendeur, BG-4)."""

    name: str = Field(..., description="Raison sociale / Legal name")
    address: Address = Field(default_factory=Address)
    email: str = Field(default="", description="Adresse email (BT-34) / Email")
    phone: str = Field(default="", description="Téléphone / Phone")
    tax_number: str = Field(
        default="",
        description="Numéro fiscal (BT-32, CUI en Roumanie) / Tax number",
    )
    vat_id: str | None = Field(
        default=None,
        description="Numéro de TVA (BT-31) / VAT identifier",
    )
    country_code: CountryCode | None = Field(default=None)
    bank: BankDetails = Field(default_factory=BankDetails)


class Client(_Frozen):
    """Client (acheteur, BG-7)."""

    name: str = Field(..., description="Raison sociale / Legal name")
    address: Address = Field(default_factory=Address)
    email: EmailConfig | None = Field(default=None)
    project_reference: str | None = Field(
        default=None,
        description="Référence projet libre / Free-text project reference",
    )
    country_code: CountryCode | None = Field(default=None)
    einvoice: EInvoiceConfig | None = Field(default=None)


class Translations(_Frozen):
    """Libellés traduits utilisés par l'e-facture."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    payment_terms: str | None = Field(
        default=None,
        description="Conditions de paiement (BT-20) / Payment terms text",
    )
    file_prefix: str | None = Field(
        default=None,
        description="Préfixe des noms de fichiers / Output filename prefix",
    )


class ResolvedLineItem(_Frozen):
    """Ligne de facture résolue, total calculé."""

    description: str
    quantity: Decimal
    rate: Decimal
    billing_type: BillingType = BillingType.FIXED
    total: Decimal


class InvoiceContext(_Frozen):
    """Facture entièrement résolue, entrée du pipeline e-facture.

    FR: Construit hors du cœur (configuration, historique, traductions).
        Les dates sont des chaînes localisées selon ``lang``.
    EN: Built outside the core. Dates are locale-formatted strings
        according to ``lang``.
    """

    provider: Provider
    client: Client
    translations: Translations = Field(default_factory=Translations)
    invoice_number: str = Field(default="", description="Numéro (BT-1)")
    invoice_date: str = Field(default="", description="Date localisée (BT-2)")
    due_date: str | None = Field(default=None, description="Échéance (BT-9)")
    month_name: str = Field(
        default="",
        description="Libellé du mois facturé / Billed month label",
    )
    lang: Language = Language.DE
    currency: str = Field(default="EUR", description="Devise ISO 4217 (BT-5)")
    tax_rate: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Taux de TVA unique en fraction (0.19) / Flat tax rate",
    )
    subtotal: Decimal = Decimal("0")
    tax_amount: Decimal = Decimal("0")
    total_amount: Decimal = Decimal("0")
    bank_details: BankDetails = Field(default_factory=BankDetails)
    line_items: list[ResolvedLineItem] = Field(default_factory=list)
