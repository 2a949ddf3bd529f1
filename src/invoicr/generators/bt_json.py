"""Générateur JSON (document Business Terms).

FR: Les plateformes fiscales à API JSON (Inde, Kenya, Tanzanie, Rwanda,
    Égypte) reçoivent le document Business Terms sérialisé avec les codes
    BT comme clés. Les montants Decimal sont émis en chaînes.
EN: JSON tax platforms receive the Business Terms document keyed by BT
    codes. Decimal amounts are emitted as strings.
"""

from invoicr.generators.base import BaseGenerator
from invoicr.models.document import BusinessTermDocument


class JSONGenerator(BaseGenerator):
    """Sérialiseur JSON des formats ``application/json``."""

    def generate(self, document: BusinessTermDocument, **kwargs: object) -> bytes:
        """Génère le JSON du document (champs vides omis)."""
        payload = document.model_dump_json(
            by_alias=True,
            exclude_none=True,
            indent=2 if self.pretty_print else None,
        )
        return payload.encode("utf-8")
