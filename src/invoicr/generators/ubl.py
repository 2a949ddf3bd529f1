"""Générateur UBL 2.1 (XML pur, standard OASIS).

FR: Produit un XML Invoice conforme au standard OASIS UBL 2.1 à partir
    du document Business Terms. Le CustomizationID dépend du format :
    XRechnung, PEPPOL BIS, CIUS-RO ou EN16931 de base.
EN: Produces an OASIS UBL 2.1 Invoice XML from the Business Terms
    document. The CustomizationID depends on the format.
"""

from decimal import Decimal

from lxml import etree

from invoicr.generators.base import BaseGenerator
from invoicr.models.document import BusinessTermDocument, DocumentLine, VATBreakdown
from invoicr.models.enums import FormatId

# --- Namespaces UBL 2.1 ---
INV_NS = "urn:oasis:names:specification:ubl:schema:xsd:Invoice-2"
CAC = "urn:oasis:names:specification:ubl:schema:xsd:CommonAggregateComponents-2"
CBC = "urn:oasis:names:specification:ubl:schema:xsd:CommonBasicComponents-2"

_PEPPOL_BILLING = "urn:fdc:peppol.eu:2017:poacc:billing:01:1.0"

# --- URN des profils UBL ---
PROFILE_URNS: dict[str, dict[str, str]] = {
    "EN16931": {
        "customization_id": "urn:cen.eu:en16931:2017",
    },
    "XRECHNUNG": {
        "customization_id": (
            "urn:cen.eu:en16931:2017#compliant#"
            "urn:xeinkauf.de:kosit:xrechnung_3.0"
        ),
        "profile_id": _PEPPOL_BILLING,
    },
    "PEPPOL": {
        "customization_id": (
            "urn:cen.eu:en16931:2017#compliant#"
            "urn:fdc:peppol.eu:2017:poacc:billing:3.0"
        ),
        "profile_id": _PEPPOL_BILLING,
    },
    "CIUS-RO": {
        "customization_id": (
            "urn:cen.eu:en16931:2017#compliant#"
            "urn:efactura.mfinante.ro:CIUS-RO:1.0.1"
        ),
    },
}

# Formats hors de cette table : profil EN16931
_FORMAT_PROFILES = {
    FormatId.XRECHNUNG: "XRECHNUNG",
    FormatId.CIUS_RO: "CIUS-RO",
    FormatId.PEPPOL_BIS: "PEPPOL",
    FormatId.PEPPOL_SG: "PEPPOL",
    FormatId.PEPPOL_ANZ: "PEPPOL",
    FormatId.PEPPOL_JP: "PEPPOL",
    FormatId.EHF: "PEPPOL",
}

# Adresse électronique (EAS « EM »)
_EMAIL_SCHEME = "EM"


def profile_for_format(fmt: FormatId | str) -> str:
    """Clé de profil UBL utilisée pour un format."""
    return _FORMAT_PROFILES.get(fmt, "EN16931")


def _cac(tag: str) -> str:
    """Construit un nom qualifié dans le namespace CAC."""
    return f"{{{CAC}}}{tag}"


def _cbc(tag: str) -> str:
    """Construit un nom qualifié dans le namespace CBC."""
    return f"{{{CBC}}}{tag}"


def _fmt_amount(amount: Decimal) -> str:
    """Formate un montant avec 2 décimales."""
    return f"{amount:.2f}"


def _amount(
    parent: etree._Element, tag: str, amount: Decimal, currency: str
) -> None:
    el = etree.SubElement(parent, _cbc(tag))
    el.set("currencyID", currency)
    el.text = _fmt_amount(amount)


class UBLGenerator(BaseGenerator):
    """Générateur de factures au format UBL 2.1.

    FR: Sert tous les formats XML du registre. Les dates du document sont
        déjà en ISO 8601, elles sont reprises telles quelles.
    EN: Serves every XML format of the registry. Document dates are
        already ISO 8601 and are copied verbatim.
    """

    @property
    def profile(self) -> str:
        return profile_for_format(self.fmt)

    def generate(self, document: BusinessTermDocument, **kwargs: object) -> bytes:
        """Génère le XML UBL du document."""
        root = etree.Element(
            f"{{{INV_NS}}}Invoice", nsmap={None: INV_NS, "cac": CAC, "cbc": CBC}
        )
        self._build_header(root, document)
        self._build_supplier_party(root, document)
        self._build_customer_party(root, document)
        self._build_payment_means(root, document)
        self._build_payment_terms(root, document)
        self._build_tax_total(root, document)
        self._build_legal_monetary_total(root, document)
        for line in document.lines:
            self._build_invoice_line(root, line, document.currency)
        return etree.tostring(
            root,
            xml_declaration=True,
            encoding="UTF-8",
            pretty_print=self.pretty_print,
        )

    # --- Construction de l'arbre XML ---

    def _build_header(
        self, root: etree._Element, document: BusinessTermDocument
    ) -> None:
        """Construit les éléments d'en-tête (profil, ID, dates, type, devise)."""
        profile_data = PROFILE_URNS[self.profile]

        etree.SubElement(
            root, _cbc("CustomizationID")
        ).text = profile_data["customization_id"]
        if "profile_id" in profile_data:
            etree.SubElement(root, _cbc("ProfileID")).text = profile_data["profile_id"]

        etree.SubElement(root, _cbc("ID")).text = document.invoice_number
        etree.SubElement(root, _cbc("IssueDate")).text = document.issue_date
        if document.due_date:
            etree.SubElement(root, _cbc("DueDate")).text = document.due_date
        etree.SubElement(root, _cbc("InvoiceTypeCode")).text = str(document.type_code)
        etree.SubElement(
            root, _cbc("DocumentCurrencyCode")
        ).text = document.currency
        if document.buyer_reference:
            etree.SubElement(
                root, _cbc("BuyerReference")
            ).text = document.buyer_reference

    # --- Parties ---

    def _build_supplier_party(
        self, root: etree._Element, document: BusinessTermDocument
    ) -> None:
        """Construit AccountingSupplierParty (vendeur, BG-4)."""
        supplier = etree.SubElement(root, _cac("AccountingSupplierParty"))
        party = etree.SubElement(supplier, _cac("Party"))

        endpoint = etree.SubElement(party, _cbc("EndpointID"))
        endpoint.set("schemeID", _EMAIL_SCHEME)
        endpoint.text = document.seller_email

        party_name = etree.SubElement(party, _cac("PartyName"))
        etree.SubElement(party_name, _cbc("Name")).text = document.seller_name

        self._build_postal_address(
            party,
            document.seller_street,
            document.seller_city,
            str(document.seller_country),
        )

        if document.seller_vat_id:
            tax_scheme_wrapper = etree.SubElement(party, _cac("PartyTaxScheme"))
            etree.SubElement(
                tax_scheme_wrapper, _cbc("CompanyID")
            ).text = document.seller_vat_id
            tax_scheme = etree.SubElement(tax_scheme_wrapper, _cac("TaxScheme"))
            etree.SubElement(tax_scheme, _cbc("ID")).text = "VAT"

        legal_entity = etree.SubElement(party, _cac("PartyLegalEntity"))
        etree.SubElement(
            legal_entity, _cbc("RegistrationName")
        ).text = document.seller_name
        if document.seller_tax_number:
            etree.SubElement(
                legal_entity, _cbc("CompanyID")
            ).text = document.seller_tax_number

    def _build_customer_party(
        self, root: etree._Element, document: BusinessTermDocument
    ) -> None:
        """Construit AccountingCustomerParty (acheteur, BG-7)."""
        customer = etree.SubElement(root, _cac("AccountingCustomerParty"))
        party = etree.SubElement(customer, _cac("Party"))

        if document.buyer_email:
            endpoint = etree.SubElement(party, _cbc("EndpointID"))
            endpoint.set("schemeID", _EMAIL_SCHEME)
            endpoint.text = document.buyer_email

        party_name = etree.SubElement(party, _cac("PartyName"))
        etree.SubElement(party_name, _cbc("Name")).text = document.buyer_name

        self._build_postal_address(
            party,
            document.buyer_street,
            document.buyer_city,
            str(document.buyer_country),
        )

        legal_entity = etree.SubElement(party, _cac("PartyLegalEntity"))
        etree.SubElement(
            legal_entity, _cbc("RegistrationName")
        ).text = document.buyer_name

    def _build_postal_address(
        self, parent: etree._Element, street: str, city: str, country_code: str
    ) -> None:
        """Construit PostalAddress."""
        addr = etree.SubElement(parent, _cac("PostalAddress"))
        etree.SubElement(addr, _cbc("StreetName")).text = street
        etree.SubElement(addr, _cbc("CityName")).text = city
        country = etree.SubElement(addr, _cac("Country"))
        etree.SubElement(country, _cbc("IdentificationCode")).text = country_code

    # --- Paiement ---

    def _build_payment_means(
        self, root: etree._Element, document: BusinessTermDocument
    ) -> None:
        """Construit PaymentMeans (uniquement avec un IBAN)."""
        if not document.iban:
            return
        means = etree.SubElement(root, _cac("PaymentMeans"))
        etree.SubElement(
            means, _cbc("PaymentMeansCode")
        ).text = str(document.payment_means_code)

        account = etree.SubElement(means, _cac("PayeeFinancialAccount"))
        etree.SubElement(account, _cbc("ID")).text = document.iban
        if document.payment_account_name:
            etree.SubElement(
                account, _cbc("Name")
            ).text = document.payment_account_name
        if document.bic:
            branch = etree.SubElement(account, _cac("FinancialInstitutionBranch"))
            etree.SubElement(branch, _cbc("ID")).text = document.bic

    def _build_payment_terms(
        self, root: etree._Element, document: BusinessTermDocument
    ) -> None:
        """Construit PaymentTerms (BT-20)."""
        if not document.payment_terms:
            return
        terms = etree.SubElement(root, _cac("PaymentTerms"))
        etree.SubElement(terms, _cbc("Note")).text = document.payment_terms

    # --- TVA ---

    def _build_tax_total(
        self, root: etree._Element, document: BusinessTermDocument
    ) -> None:
        """Construit TaxTotal avec un TaxSubtotal par récapitulatif."""
        tax_total = etree.SubElement(root, _cac("TaxTotal"))
        _amount(tax_total, "TaxAmount", document.total_vat, document.currency)
        for breakdown in document.vat_breakdown:
            self._build_tax_subtotal(tax_total, breakdown, document.currency)

    def _build_tax_subtotal(
        self, parent: etree._Element, breakdown: VATBreakdown, currency: str
    ) -> None:
        """Construit un bloc TaxSubtotal."""
        subtotal = etree.SubElement(parent, _cac("TaxSubtotal"))
        _amount(subtotal, "TaxableAmount", breakdown.taxable_amount, currency)
        _amount(subtotal, "TaxAmount", breakdown.tax_amount, currency)

        tax_cat = etree.SubElement(subtotal, _cac("TaxCategory"))
        etree.SubElement(tax_cat, _cbc("ID")).text = str(breakdown.category)
        etree.SubElement(tax_cat, _cbc("Percent")).text = _fmt_amount(breakdown.rate)
        tax_scheme = etree.SubElement(tax_cat, _cac("TaxScheme"))
        etree.SubElement(tax_scheme, _cbc("ID")).text = "VAT"

    # --- Totaux monétaires ---

    def _build_legal_monetary_total(
        self, root: etree._Element, document: BusinessTermDocument
    ) -> None:
        """Construit LegalMonetaryTotal (BG-22)."""
        monetary = etree.SubElement(root, _cac("LegalMonetaryTotal"))
        currency = document.currency
        _amount(monetary, "LineExtensionAmount", document.line_total, currency)
        _amount(monetary, "TaxExclusiveAmount", document.total_excl_tax, currency)
        _amount(monetary, "TaxInclusiveAmount", document.total_incl_tax, currency)
        _amount(monetary, "PayableAmount", document.amount_due, currency)

    # --- Lignes de facture ---

    def _build_invoice_line(
        self, root: etree._Element, line: DocumentLine, currency: str
    ) -> None:
        """Construit InvoiceLine (BG-25)."""
        line_el = etree.SubElement(root, _cac("InvoiceLine"))
        etree.SubElement(line_el, _cbc("ID")).text = line.identifier

        qty = etree.SubElement(line_el, _cbc("InvoicedQuantity"))
        qty.set("unitCode", str(line.unit_code))
        qty.text = str(line.quantity)

        _amount(line_el, "LineExtensionAmount", line.net_amount, currency)

        item = etree.SubElement(line_el, _cac("Item"))
        etree.SubElement(item, _cbc("Name")).text = line.name
        tax_cat = etree.SubElement(item, _cac("ClassifiedTaxCategory"))
        etree.SubElement(tax_cat, _cbc("ID")).text = str(line.vat_category)
        etree.SubElement(tax_cat, _cbc("Percent")).text = _fmt_amount(line.vat_rate)
        tax_scheme = etree.SubElement(tax_cat, _cac("TaxScheme"))
        etree.SubElement(tax_scheme, _cbc("ID")).text = "VAT"

        price = etree.SubElement(line_el, _cac("Price"))
        _amount(price, "PriceAmount", line.unit_price, currency)
