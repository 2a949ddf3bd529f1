"""Générateur CII pur (XML, standard UN/CEFACT).

FR: Produit un XML conforme au standard UN/CEFACT CII D16B, utilisé par
    ZUGFeRD et Factur-X. L'arbre est construit avec lxml en respectant
    l'ordre imposé par le XSD (xs:sequence).
EN: Produces an XML conforming to the UN/CEFACT CII D16B standard, used
    by ZUGFeRD and Factur-X.
"""

import re
from decimal import Decimal

from lxml import etree

from invoicr.generators.base import BaseGenerator
from invoicr.models.document import BusinessTermDocument, DocumentLine, VATBreakdown

# --- Namespaces CII D16B ---
RSM = "urn:un:unece:uncefact:data:standard:CrossIndustryInvoice:100"
RAM = "urn:un:unece:uncefact:data:standard:ReusableAggregateBusinessInformationEntity:100"
QDT = "urn:un:unece:uncefact:data:standard:QualifiedDataType:100"
UDT = "urn:un:unece:uncefact:data:standard:UnqualifiedDataType:100"

NSMAP = {
    "rsm": RSM,
    "ram": RAM,
    "qdt": QDT,
    "udt": UDT,
}

# Profil EN16931 (COMFORT) commun à ZUGFeRD 2.x et Factur-X
EN16931_URN = "urn:cen.eu:en16931:2017"

_ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def _rsm(tag: str) -> str:
    """Construit un nom qualifié dans le namespace RSM."""
    return f"{{{RSM}}}{tag}"


def _ram(tag: str) -> str:
    """Construit un nom qualifié dans le namespace RAM."""
    return f"{{{RAM}}}{tag}"


def _udt(tag: str) -> str:
    """Construit un nom qualifié dans le namespace UDT."""
    return f"{{{UDT}}}{tag}"


def _fmt_amount(amount: Decimal) -> str:
    """Formate un montant avec 2 décimales."""
    return f"{amount:.2f}"


def _fmt_date(value: str) -> str:
    """Convertit une date ISO 8601 au format CII 102 (YYYYMMDD).

    Une date non ISO est reprise telle quelle.
    """
    match = _ISO_DATE_RE.match(value)
    if not match:
        return value
    return "".join(match.groups())


def _date_element(parent: etree._Element, tag: str, value: str) -> None:
    wrapper = etree.SubElement(parent, _ram(tag))
    dt_str = etree.SubElement(wrapper, _udt("DateTimeString"))
    dt_str.set("format", "102")
    dt_str.text = _fmt_date(value)


class CIIGenerator(BaseGenerator):
    """Générateur de factures au format CII pur.

    FR: XML des formats PDF (zugferd, factur-x). L'ordre des éléments
        respecte strictement le XSD.
    EN: XML of the PDF formats (zugferd, factur-x). Element order strictly
        follows the XSD.
    """

    def generate(self, document: BusinessTermDocument, **kwargs: object) -> bytes:
        """Génère le XML CII du document."""
        root = etree.Element(_rsm("CrossIndustryInvoice"), nsmap=NSMAP)
        self._build_context(root)
        self._build_document(root, document)
        self._build_transaction(root, document)
        return etree.tostring(
            root,
            xml_declaration=True,
            encoding="UTF-8",
            pretty_print=self.pretty_print,
        )

    # --- Construction de l'arbre XML ---

    def _build_context(self, root: etree._Element) -> None:
        """Construit ExchangedDocumentContext avec le profil EN16931."""
        ctx = etree.SubElement(root, _rsm("ExchangedDocumentContext"))
        guideline = etree.SubElement(
            ctx, _ram("GuidelineSpecifiedDocumentContextParameter")
        )
        etree.SubElement(guideline, _ram("ID")).text = EN16931_URN

    def _build_document(
        self, root: etree._Element, document: BusinessTermDocument
    ) -> None:
        """Construit ExchangedDocument (ID, TypeCode, date)."""
        doc = etree.SubElement(root, _rsm("ExchangedDocument"))
        etree.SubElement(doc, _ram("ID")).text = document.invoice_number
        etree.SubElement(doc, _ram("TypeCode")).text = str(document.type_code)
        _date_element(doc, "IssueDateTime", document.issue_date)

    def _build_transaction(
        self, root: etree._Element, document: BusinessTermDocument
    ) -> None:
        """Construit SupplyChainTradeTransaction.

        Ordre XSD : lignes d'abord, puis agreement, delivery, settlement.
        """
        transaction = etree.SubElement(root, _rsm("SupplyChainTradeTransaction"))
        for line in document.lines:
            self._build_line_item(transaction, line)
        self._build_trade_agreement(transaction, document)
        etree.SubElement(transaction, _ram("ApplicableHeaderTradeDelivery"))
        self._build_trade_settlement(transaction, document)

    # --- Lignes de facture ---

    def _build_line_item(self, parent: etree._Element, line: DocumentLine) -> None:
        """Construit IncludedSupplyChainTradeLineItem."""
        item = etree.SubElement(parent, _ram("IncludedSupplyChainTradeLineItem"))

        line_doc = etree.SubElement(item, _ram("AssociatedDocumentLineDocument"))
        etree.SubElement(line_doc, _ram("LineID")).text = line.identifier

        product = etree.SubElement(item, _ram("SpecifiedTradeProduct"))
        etree.SubElement(product, _ram("Name")).text = line.name

        agreement = etree.SubElement(item, _ram("SpecifiedLineTradeAgreement"))
        net_price = etree.SubElement(agreement, _ram("NetPriceProductTradePrice"))
        etree.SubElement(net_price, _ram("ChargeAmount")).text = _fmt_amount(
            line.unit_price
        )

        delivery = etree.SubElement(item, _ram("SpecifiedLineTradeDelivery"))
        billed_qty = etree.SubElement(delivery, _ram("BilledQuantity"))
        billed_qty.set("unitCode", str(line.unit_code))
        billed_qty.text = str(line.quantity)

        settlement = etree.SubElement(item, _ram("SpecifiedLineTradeSettlement"))
        tax = etree.SubElement(settlement, _ram("ApplicableTradeTax"))
        etree.SubElement(tax, _ram("TypeCode")).text = "VAT"
        etree.SubElement(tax, _ram("CategoryCode")).text = str(line.vat_category)
        etree.SubElement(tax, _ram("RateApplicablePercent")).text = _fmt_amount(
            line.vat_rate
        )
        summation = etree.SubElement(
            settlement, _ram("SpecifiedTradeSettlementLineMonetarySummation")
        )
        etree.SubElement(summation, _ram("LineTotalAmount")).text = _fmt_amount(
            line.net_amount
        )

    # --- Header : Agreement (vendeur, acheteur, référence) ---

    def _build_trade_agreement(
        self, parent: etree._Element, document: BusinessTermDocument
    ) -> None:
        """Construit ApplicableHeaderTradeAgreement."""
        agreement = etree.SubElement(parent, _ram("ApplicableHeaderTradeAgreement"))

        if document.buyer_reference:
            etree.SubElement(
                agreement, _ram("BuyerReference")
            ).text = document.buyer_reference

        seller = self._build_trade_party(
            agreement,
            "SellerTradeParty",
            name=document.seller_name,
            street=document.seller_street,
            city=document.seller_city,
            country=str(document.seller_country),
            email=document.seller_email,
        )
        if document.seller_tax_number:
            tax_reg = etree.SubElement(seller, _ram("SpecifiedTaxRegistration"))
            fc_id = etree.SubElement(tax_reg, _ram("ID"))
            fc_id.set("schemeID", "FC")
            fc_id.text = document.seller_tax_number
        if document.seller_vat_id:
            tax_reg = etree.SubElement(seller, _ram("SpecifiedTaxRegistration"))
            vat_id = etree.SubElement(tax_reg, _ram("ID"))
            vat_id.set("schemeID", "VA")
            vat_id.text = document.seller_vat_id

        self._build_trade_party(
            agreement,
            "BuyerTradeParty",
            name=document.buyer_name,
            street=document.buyer_street,
            city=document.buyer_city,
            country=str(document.buyer_country),
            email=document.buyer_email,
        )

    def _build_trade_party(
        self,
        parent: etree._Element,
        tag: str,
        *,
        name: str,
        street: str,
        city: str,
        country: str,
        email: str | None,
    ) -> etree._Element:
        """Construit SellerTradeParty ou BuyerTradeParty (sans TVA)."""
        party_el = etree.SubElement(parent, _ram(tag))
        etree.SubElement(party_el, _ram("Name")).text = name

        addr = etree.SubElement(party_el, _ram("PostalTradeAddress"))
        etree.SubElement(addr, _ram("LineOne")).text = street
        etree.SubElement(addr, _ram("CityName")).text = city
        etree.SubElement(addr, _ram("CountryID")).text = country

        if email:
            uri = etree.SubElement(party_el, _ram("URIUniversalCommunication"))
            uri_id = etree.SubElement(uri, _ram("URIID"))
            uri_id.set("schemeID", "EM")
            uri_id.text = email
        return party_el

    # --- Header : Settlement (paiement, taxes, totaux) ---

    def _build_trade_settlement(
        self, parent: etree._Element, document: BusinessTermDocument
    ) -> None:
        """Construit ApplicableHeaderTradeSettlement (ordre XSD respecté)."""
        settlement = etree.SubElement(parent, _ram("ApplicableHeaderTradeSettlement"))
        etree.SubElement(
            settlement, _ram("InvoiceCurrencyCode")
        ).text = document.currency

        if document.iban:
            self._build_payment_means(settlement, document)

        for breakdown in document.vat_breakdown:
            self._build_tax_summary(settlement, breakdown)

        if document.payment_terms or document.due_date:
            terms = etree.SubElement(settlement, _ram("SpecifiedTradePaymentTerms"))
            if document.payment_terms:
                etree.SubElement(
                    terms, _ram("Description")
                ).text = document.payment_terms
            if document.due_date:
                _date_element(terms, "DueDateDateTime", document.due_date)

        self._build_monetary_summation(settlement, document)

    def _build_payment_means(
        self, parent: etree._Element, document: BusinessTermDocument
    ) -> None:
        """Construit SpecifiedTradeSettlementPaymentMeans."""
        means = etree.SubElement(
            parent, _ram("SpecifiedTradeSettlementPaymentMeans")
        )
        etree.SubElement(
            means, _ram("TypeCode")
        ).text = str(document.payment_means_code)

        account = etree.SubElement(means, _ram("PayeePartyCreditorFinancialAccount"))
        etree.SubElement(account, _ram("IBANID")).text = document.iban
        if document.payment_account_name:
            etree.SubElement(
                account, _ram("AccountName")
            ).text = document.payment_account_name

        if document.bic:
            institution = etree.SubElement(
                means, _ram("PayeeSpecifiedCreditorFinancialInstitution")
            )
            etree.SubElement(institution, _ram("BICID")).text = document.bic

    def _build_tax_summary(
        self, parent: etree._Element, breakdown: VATBreakdown
    ) -> None:
        """Construit un bloc ApplicableTradeTax du settlement."""
        tax = etree.SubElement(parent, _ram("ApplicableTradeTax"))
        etree.SubElement(tax, _ram("CalculatedAmount")).text = _fmt_amount(
            breakdown.tax_amount
        )
        etree.SubElement(tax, _ram("TypeCode")).text = "VAT"
        etree.SubElement(tax, _ram("BasisAmount")).text = _fmt_amount(
            breakdown.taxable_amount
        )
        etree.SubElement(tax, _ram("CategoryCode")).text = str(breakdown.category)
        etree.SubElement(tax, _ram("RateApplicablePercent")).text = _fmt_amount(
            breakdown.rate
        )

    def _build_monetary_summation(
        self, parent: etree._Element, document: BusinessTermDocument
    ) -> None:
        """Construit SpecifiedTradeSettlementHeaderMonetarySummation."""
        summation = etree.SubElement(
            parent, _ram("SpecifiedTradeSettlementHeaderMonetarySummation")
        )
        etree.SubElement(summation, _ram("LineTotalAmount")).text = _fmt_amount(
            document.line_total
        )
        etree.SubElement(summation, _ram("TaxBasisTotalAmount")).text = _fmt_amount(
            document.total_excl_tax
        )
        tax_total = etree.SubElement(summation, _ram("TaxTotalAmount"))
        tax_total.set("currencyID", document.currency)
        tax_total.text = _fmt_amount(document.total_vat)
        etree.SubElement(summation, _ram("GrandTotalAmount")).text = _fmt_amount(
            document.total_incl_tax
        )
        etree.SubElement(summation, _ram("DuePayableAmount")).text = _fmt_amount(
            document.amount_due
        )
