"""Tests unitaires du générateur UBL 2.1.

FR: Vérifie la structure XML UBL générée, les namespaces, profils,
    parties, lignes, taxes, totaux et les champs optionnels.
EN: Verifies the generated UBL XML structure, namespaces, profiles,
    parties, lines, taxes, totals and optional fields.
"""

import pytest
from lxml import etree

from invoicr.generators.ubl import CAC, CBC, INV_NS, PROFILE_URNS, UBLGenerator
from invoicr.models import BusinessTermDocument
from invoicr.models.enums import FormatId

# Namespaces pour les requêtes XPath
NS = {"cac": CAC, "cbc": CBC}


def _parse(xml_bytes: bytes) -> etree._Element:
    """Parse le XML et retourne l'élément racine."""
    return etree.fromstring(xml_bytes)


def _generate(
    document: BusinessTermDocument, fmt: FormatId = FormatId.XRECHNUNG
) -> etree._Element:
    return _parse(UBLGenerator(fmt).generate(document))


class TestBasicInvoiceXML:
    """Tests de la structure XML de base."""

    def test_root_element_is_invoice(
        self, sample_document: BusinessTermDocument
    ) -> None:
        root = _generate(sample_document)
        assert root.tag == f"{{{INV_NS}}}Invoice"

    def test_xml_namespaces(self, sample_document: BusinessTermDocument) -> None:
        root = _generate(sample_document)
        assert root.nsmap[None] == INV_NS
        assert root.nsmap["cac"] == CAC
        assert root.nsmap["cbc"] == CBC

    def test_xml_declaration(self, sample_document: BusinessTermDocument) -> None:
        xml_bytes = UBLGenerator(FormatId.UBL).generate(sample_document)
        assert xml_bytes.startswith(b"<?xml version='1.0' encoding='UTF-8'?>")

    def test_header(self, sample_document: BusinessTermDocument) -> None:
        root = _generate(sample_document)
        assert root.findtext("cbc:ID", namespaces=NS) == "2024-042"
        assert root.findtext("cbc:IssueDate", namespaces=NS) == "2024-12-15"
        assert root.findtext("cbc:DueDate", namespaces=NS) == "2024-12-29"
        assert root.findtext("cbc:InvoiceTypeCode", namespaces=NS) == "380"
        assert root.findtext("cbc:DocumentCurrencyCode", namespaces=NS) == "EUR"
        assert root.findtext("cbc:BuyerReference", namespaces=NS) == "04-1234567-89"

    def test_optional_fields_omitted(
        self, sample_document: BusinessTermDocument
    ) -> None:
        document = sample_document.model_copy(
            update={"due_date": None, "buyer_reference": None, "payment_terms": None}
        )
        root = _generate(document)
        assert root.find("cbc:DueDate", NS) is None
        assert root.find("cbc:BuyerReference", NS) is None
        assert root.find("cac:PaymentTerms", NS) is None


class TestProfiles:
    """CustomizationID par format."""

    @pytest.mark.parametrize(
        ("fmt", "profile"),
        [
            (FormatId.XRECHNUNG, "XRECHNUNG"),
            (FormatId.CIUS_RO, "CIUS-RO"),
            (FormatId.PEPPOL_BIS, "PEPPOL"),
            (FormatId.EHF, "PEPPOL"),
            (FormatId.UBL, "EN16931"),
            (FormatId.FATTURAPA, "EN16931"),
        ],
    )
    def test_customization_id(
        self,
        sample_document: BusinessTermDocument,
        fmt: FormatId,
        profile: str,
    ) -> None:
        root = _generate(sample_document, fmt)
        assert (
            root.findtext("cbc:CustomizationID", namespaces=NS)
            == PROFILE_URNS[profile]["customization_id"]
        )

    def test_profile_id_only_for_routed_profiles(
        self, sample_document: BusinessTermDocument
    ) -> None:
        assert _generate(sample_document, FormatId.UBL).find("cbc:ProfileID", NS) is None
        assert (
            _generate(sample_document, FormatId.PEPPOL_BIS).find("cbc:ProfileID", NS)
            is not None
        )


class TestParties:
    """Vendeur et acheteur."""

    def test_seller(self, sample_document: BusinessTermDocument) -> None:
        root = _generate(sample_document)
        party = root.find("cac:AccountingSupplierParty/cac:Party", NS)
        endpoint = party.find("cbc:EndpointID", NS)
        assert endpoint.text == "rechnung@muster-software.de"
        assert endpoint.get("schemeID") == "EM"
        assert party.findtext("cac:PartyName/cbc:Name", namespaces=NS) == (
            "Muster Software GmbH"
        )
        assert (
            party.findtext("cac:PartyTaxScheme/cbc:CompanyID", namespaces=NS)
            == "DE123456789"
        )
        assert (
            party.findtext("cac:PartyLegalEntity/cbc:CompanyID", namespaces=NS)
            == "12/345/67890"
        )
        assert (
            party.findtext(
                "cac:PostalAddress/cac:Country/cbc:IdentificationCode",
                namespaces=NS,
            )
            == "DE"
        )

    def test_seller_without_vat_id(
        self, sample_document: BusinessTermDocument
    ) -> None:
        document = sample_document.model_copy(update={"seller_vat_id": None})
        root = _generate(document)
        assert root.find(
            "cac:AccountingSupplierParty/cac:Party/cac:PartyTaxScheme", NS
        ) is None

    def test_buyer(self, sample_document: BusinessTermDocument) -> None:
        root = _generate(sample_document)
        party = root.find("cac:AccountingCustomerParty/cac:Party", NS)
        assert party.findtext("cbc:EndpointID", namespaces=NS) == "erika@kunde.de"
        assert party.findtext(
            "cac:PostalAddress/cbc:CityName", namespaces=NS
        ) == "80331 München"

    def test_buyer_without_email(self, sample_document: BusinessTermDocument) -> None:
        document = sample_document.model_copy(update={"buyer_email": None})
        root = _generate(document)
        assert root.find(
            "cac:AccountingCustomerParty/cac:Party/cbc:EndpointID", NS
        ) is None


class TestPayment:
    """Moyens et conditions de paiement."""

    def test_payment_means(self, sample_document: BusinessTermDocument) -> None:
        root = _generate(sample_document)
        means = root.find("cac:PaymentMeans", NS)
        assert means.findtext("cbc:PaymentMeansCode", namespaces=NS) == "58"
        account = means.find("cac:PayeeFinancialAccount", NS)
        assert account.findtext("cbc:ID", namespaces=NS) == "DE89370400440532013000"
        assert account.findtext("cbc:Name", namespaces=NS) == "Commerzbank"
        assert (
            account.findtext("cac:FinancialInstitutionBranch/cbc:ID", namespaces=NS)
            == "COBADEFFXXX"
        )

    def test_no_payment_means_without_iban(
        self, sample_document: BusinessTermDocument
    ) -> None:
        document = sample_document.model_copy(update={"iban": None})
        assert _generate(document).find("cac:PaymentMeans", NS) is None

    def test_payment_terms(self, sample_document: BusinessTermDocument) -> None:
        root = _generate(sample_document)
        assert (
            root.findtext("cac:PaymentTerms/cbc:Note", namespaces=NS)
            == "Zahlbar innerhalb von 14 Tagen"
        )


class TestTaxesAndTotals:
    """TaxTotal et LegalMonetaryTotal."""

    def test_tax_total(self, sample_document: BusinessTermDocument) -> None:
        root = _generate(sample_document)
        tax_amount = root.find("cac:TaxTotal/cbc:TaxAmount", NS)
        assert tax_amount.text == "190.00"
        assert tax_amount.get("currencyID") == "EUR"
        subtotals = root.findall("cac:TaxTotal/cac:TaxSubtotal", NS)
        assert len(subtotals) == 1
        assert subtotals[0].findtext("cac:TaxCategory/cbc:ID", namespaces=NS) == "S"
        assert (
            subtotals[0].findtext("cac:TaxCategory/cbc:Percent", namespaces=NS)
            == "19.00"
        )

    def test_monetary_total(self, sample_document: BusinessTermDocument) -> None:
        monetary = _generate(sample_document).find("cac:LegalMonetaryTotal", NS)
        assert monetary.findtext("cbc:LineExtensionAmount", namespaces=NS) == "1000.00"
        assert monetary.findtext("cbc:TaxExclusiveAmount", namespaces=NS) == "1000.00"
        assert monetary.findtext("cbc:TaxInclusiveAmount", namespaces=NS) == "1190.00"
        assert monetary.findtext("cbc:PayableAmount", namespaces=NS) == "1190.00"


class TestInvoiceLines:
    """Lignes de facture."""

    def test_line(self, sample_document: BusinessTermDocument) -> None:
        line = _generate(sample_document).find("cac:InvoiceLine", NS)
        assert line.findtext("cbc:ID", namespaces=NS) == "1"
        qty = line.find("cbc:InvoicedQuantity", NS)
        assert qty.get("unitCode") == "HUR"
        assert qty.text == "10"
        assert line.findtext("cac:Item/cbc:Name", namespaces=NS) == "Softwareentwicklung"
        assert line.findtext("cac:Price/cbc:PriceAmount", namespaces=NS) == "100.00"

    def test_special_characters_escaped(
        self, sample_document: BusinessTermDocument
    ) -> None:
        document = sample_document.model_copy(update={"seller_name": "Müller & Söhne <GmbH>"})
        xml_bytes = UBLGenerator(FormatId.UBL).generate(document)
        assert b"M\xc3\xbcller &amp; S\xc3\xb6hne &lt;GmbH&gt;" in xml_bytes
