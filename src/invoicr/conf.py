"""Configuration du cœur e-facture via variables d'environnement.

FR: Paramètres lus depuis l'environnement (préfixe INVOICR_) ou un
    fichier .env, avec des valeurs par défaut sûres.
EN: Settings read from the environment (INVOICR_ prefix) or a .env file,
    with safe defaults.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Paramètres INVOICR_*.

    Exemple : INVOICR_DEFAULT_FILE_PREFIX=Rechnung
    """

    model_config = SettingsConfigDict(
        env_prefix="INVOICR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_file_prefix: str = Field(
        default="Invoice",
        description=(
            "Préfixe des fichiers si les traductions n'en fournissent pas / "
            "Filename prefix when translations carry none"
        ),
    )
    pretty_print_xml: bool = Field(
        default=True,
        description="Indenter le XML généré / Indent generated XML",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Niveau de log de la CLI / CLI logging level",
    )
    facturx_check_xsd: bool = Field(
        default=False,
        description=(
            "Contrôle XSD lors de l'embarquement PDF/A-3 / "
            "XSD check when embedding into PDF/A-3"
        ),
    )


def get_settings() -> Settings:
    """Retourne les paramètres courants.

    FR: Nouvelle instance à chaque appel : aucun état n'est conservé entre
        deux générations.
    EN: Fresh instance per call: no state is kept between generations.
    """
    return Settings()
