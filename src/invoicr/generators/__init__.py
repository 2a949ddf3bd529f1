"""Générateurs d'e-factures (UBL, CII, JSON, ZUGFeRD/Factur-X) et pipeline."""

from invoicr.generators.base import BaseGenerator, GenerationResult
from invoicr.generators.bt_json import JSONGenerator
from invoicr.generators.cii import CIIGenerator
from invoicr.generators.facturx import FacturXGenerator
from invoicr.generators.pipeline import (
    generate_einvoice,
    resolve_format,
    save_einvoice,
)
from invoicr.generators.ubl import UBLGenerator

__all__ = [
    "BaseGenerator",
    "CIIGenerator",
    "FacturXGenerator",
    "GenerationResult",
    "JSONGenerator",
    "UBLGenerator",
    "generate_einvoice",
    "resolve_format",
    "save_einvoice",
]
