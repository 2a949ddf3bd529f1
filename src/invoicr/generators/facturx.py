"""Embarquement PDF/A-3 pour ZUGFeRD et Factur-X.

FR: Sans PDF source, les formats PDF produisent le XML CII seul sous un
    nom de fichier .pdf. Avec un PDF source, le XML CII est embarqué via
    la bibliothèque factur-x (Akretion).
EN: Without a source PDF, PDF formats produce bare CII XML under a .pdf
    filename. With a source PDF, the CII XML is embedded via the factur-x
    library.
"""

import logging

from facturx import generate_from_binary

from invoicr.conf import get_settings
from invoicr.generators.base import BaseGenerator
from invoicr.generators.cii import CIIGenerator
from invoicr.models.document import BusinessTermDocument
from invoicr.models.enums import FormatId

logger = logging.getLogger(__name__)

# ZUGFeRD 2.x et Factur-X partagent la syntaxe ; seul le flavor change
_FLAVORS = {
    FormatId.ZUGFERD: "zugferd",
    FormatId.FACTUR_X: "factur-x",
}


class FacturXGenerator(BaseGenerator):
    """Générateur ZUGFeRD / Factur-X (PDF/A-3 + XML CII).

    FR: Délègue la génération XML au CIIGenerator, puis embarque le XML
        dans le PDF fourni par l'appelant.
    EN: Delegates XML generation to CIIGenerator, then embeds the XML into
        the caller-supplied PDF.
    """

    def __init__(self, fmt: FormatId, pretty_print: bool = True) -> None:
        super().__init__(fmt, pretty_print=pretty_print)
        self._cii_generator = CIIGenerator(fmt, pretty_print=pretty_print)

    def generate(self, document: BusinessTermDocument, **kwargs: object) -> bytes:
        """Génère le XML CII, embarqué dans pdf_bytes s'il est fourni.

        Args:
            document: Le document Business Terms.
            **kwargs: Peut contenir 'pdf_bytes' (bytes du PDF source).

        Returns:
            Le PDF/A-3 si pdf_bytes est fourni, sinon le XML CII.
        """
        xml_bytes = self._cii_generator.generate(document)
        pdf_bytes = kwargs.get("pdf_bytes")
        if not isinstance(pdf_bytes, bytes):
            return xml_bytes

        flavor = _FLAVORS.get(self.fmt, "factur-x")
        logger.info(
            "Embarquement %s profil en16931 pour facture %s",
            flavor,
            document.invoice_number,
        )
        return generate_from_binary(
            pdf_bytes,
            xml_bytes,
            flavor=flavor,
            level="en16931",
            check_xsd=get_settings().facturx_check_xsd,
        )
