"""Descripteurs de format, résultats de validation et options de génération."""

from pydantic import BaseModel, ConfigDict, Field, computed_field

from invoicr.models.enums import FormatId


class FormatDescriptor(BaseModel):
    """Description d'un format e-facture dans le registre.

    FR: Immuable ; construit uniquement par les tables du registre.
    EN: Immutable; only built by the registry tables.
    """

    model_config = ConfigDict(frozen=True)

    format: FormatId
    description: str
    file_extension: str = Field(..., description="Extension sans point / Extension")
    mime_type: str


class ValidationResult(BaseModel):
    """Résultat de validation : erreurs bloquantes et avertissements.

    FR: ``valid`` est vrai si et seulement si ``errors`` est vide ;
        les avertissements n'affectent jamais la validité.
    EN: ``valid`` is true iff ``errors`` is empty; warnings never affect
        validity.
    """

    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def valid(self) -> bool:
        return not self.errors


class GenerateOptions(BaseModel):
    """Options de génération fournies par l'appelant."""

    format: FormatId | None = Field(
        default=None,
        description="Format imposé (prioritaire) / Format override",
    )
    skip_validation: bool = Field(
        default=False,
        description=(
            "Générer même si la validation échoue / "
            "Generate even when validation fails"
        ),
    )
    pdf_bytes: bytes | None = Field(
        default=None,
        description=(
            "PDF source dans lequel embarquer le XML (formats PDF) / "
            "Source PDF to embed the XML into (PDF formats)"
        ),
    )
