"""Document EN16931 (Business Terms) produit par le mapper.

FR: Projection plate de la facture sur la numérotation BT-nnn de la norme
    EN16931. Chaque champ porte son code BT comme alias de sérialisation,
    utilisé tel quel pour les formats JSON.
EN: Flat projection of the invoice onto the EN16931 BT-nnn numbering.
    Each field carries its BT code as serialization alias.
"""

import re
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from invoicr.models.enums import (
    CountryCode,
    InvoiceTypeCode,
    PaymentMeansCode,
    UnitCode,
    VATCategory,
)

# Caractères interdits en XML 1.0 : contrôles C0 hors tab/LF/CR, surrogates
_XML_INVALID_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


class _DocumentModel(BaseModel):
    """Base des modèles du document : textes nettoyés pour XML 1.0.

    FR: Les caractères de contrôle acceptés par le contexte mais interdits
        en XML sont supprimés, pour toutes les syntaxes de sortie.
    EN: Control characters the context accepts but XML forbids are
        removed, for every output syntax.
    """

    @field_validator("*", mode="before")
    @classmethod
    def _strip_xml_invalid(cls, value: object) -> object:
        if type(value) is str:
            return _XML_INVALID_RE.sub("", value)
        return value


class VATBreakdown(_DocumentModel):
    """Récapitulatif TVA (BG-23)."""

    taxable_amount: Decimal = Field(..., serialization_alias="BT-116")
    tax_amount: Decimal = Field(..., serialization_alias="BT-117")
    category: VATCategory = Field(..., serialization_alias="BT-118")
    rate: Decimal = Field(
        ...,
        serialization_alias="BT-119",
        description="Taux en pourcentage (19, pas 0.19) / Rate in percent",
    )


class DocumentLine(_DocumentModel):
    """Ligne de facture (BG-25)."""

    identifier: str = Field(..., serialization_alias="BT-126")
    quantity: Decimal = Field(..., serialization_alias="BT-129")
    unit_code: UnitCode = Field(..., serialization_alias="BT-130")
    net_amount: Decimal = Field(..., serialization_alias="BT-131")
    unit_price: Decimal = Field(..., serialization_alias="BT-146")
    name: str = Field(..., serialization_alias="BT-153")
    vat_category: VATCategory = Field(..., serialization_alias="BT-151")
    vat_rate: Decimal = Field(..., serialization_alias="BT-152")


class BusinessTermDocument(_DocumentModel):
    """Facture projetée sur les Business Terms EN16931.

    FR: Les dates sont au format ISO 8601 (YYYY-MM-DD) quand elles ont pu
        être interprétées ; sinon la chaîne d'origine est conservée.
    EN: Dates are ISO 8601 when they could be parsed; otherwise the
        input string is kept.
    """

    # --- Document ---
    invoice_number: str = Field(..., serialization_alias="BT-1")
    issue_date: str = Field(..., serialization_alias="BT-2")
    type_code: InvoiceTypeCode = Field(
        default=InvoiceTypeCode.INVOICE, serialization_alias="BT-3"
    )
    currency: str = Field(..., serialization_alias="BT-5")
    due_date: str | None = Field(default=None, serialization_alias="BT-9")
    buyer_reference: str | None = Field(default=None, serialization_alias="BT-10")
    payment_terms: str | None = Field(default=None, serialization_alias="BT-20")

    # --- Vendeur (BG-4) ---
    seller_name: str = Field(..., serialization_alias="BT-27")
    seller_vat_id: str | None = Field(default=None, serialization_alias="BT-31")
    seller_tax_number: str | None = Field(
        default=None, serialization_alias="BT-32"
    )
    seller_email: str = Field(..., serialization_alias="BT-34")
    seller_street: str = Field(..., serialization_alias="BT-35")
    seller_city: str = Field(..., serialization_alias="BT-37")
    seller_country: CountryCode = Field(..., serialization_alias="BT-40")

    # --- Acheteur (BG-7) ---
    buyer_name: str = Field(..., serialization_alias="BT-44")
    buyer_email: str | None = Field(default=None, serialization_alias="BT-49")
    buyer_street: str = Field(..., serialization_alias="BT-50")
    buyer_city: str = Field(..., serialization_alias="BT-52")
    buyer_country: CountryCode = Field(..., serialization_alias="BT-55")

    # --- Paiement (BG-16) ---
    payment_means_code: PaymentMeansCode = Field(
        default=PaymentMeansCode.SEPA_CREDIT_TRANSFER,
        serialization_alias="BT-81",
    )
    payment_account_name: str | None = Field(
        default=None, serialization_alias="BT-83"
    )
    iban: str | None = Field(default=None, serialization_alias="BT-84")
    bic: str | None = Field(default=None, serialization_alias="BT-86")

    # --- Totaux (BG-22) ---
    line_total: Decimal = Field(..., serialization_alias="BT-106")
    total_excl_tax: Decimal = Field(..., serialization_alias="BT-109")
    total_vat: Decimal = Field(..., serialization_alias="BT-110")
    total_incl_tax: Decimal = Field(..., serialization_alias="BT-112")
    amount_due: Decimal = Field(..., serialization_alias="BT-115")

    vat_breakdown: list[VATBreakdown] = Field(
        ..., serialization_alias="vatBreakdown"
    )
    lines: list[DocumentLine]
