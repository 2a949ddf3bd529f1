"""Hiérarchie d'exceptions pour la génération d'e-factures.

FR: Exceptions typées pour l'absence de format, l'échec de validation
    et les erreurs d'écriture. Aucune n'est réessayée par le cœur.
EN: Typed exceptions for missing format, failed validation and write
    errors. None of them is retried by the core.
"""

from pathlib import Path


class EInvoiceError(Exception):
    """Erreur de base pour toutes les opérations e-facture.

    FR: Classe parente de toutes les exceptions du pipeline.
    EN: Base class for all pipeline exceptions.
    """


class NoFormatAvailableError(EInvoiceError):
    """Aucun format e-facture disponible.

    FR: Le pays n'a aucun format enregistré et aucune préférence explicite
        ne désigne un format connu.
    EN: The country has no registered format and no explicit preference
        names a known format.
    """

    def __init__(
        self,
        message: str,
        country: str | None = None,
        requested_format: str | None = None,
    ) -> None:
        super().__init__(message)
        self.country = country
        self.requested_format = requested_format


class EInvoiceValidationError(EInvoiceError):
    """Facture incomplète pour le format demandé.

    FR: Contient TOUTES les règles violées, pour corriger la configuration
        en une seule passe.
    EN: Carries EVERY violated rule so the configuration can be fixed in
        one pass.
    """

    def __init__(
        self,
        message: str,
        errors: list[str] | None = None,
        warnings: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.errors: list[str] = errors or []
        self.warnings: list[str] = warnings or []


class EInvoiceWriteError(EInvoiceError):
    """Échec d'écriture du fichier e-facture.

    FR: Droits, disque plein, chemin trop long... L'OSError d'origine est
        chaînée (``__cause__``).
    EN: Permissions, disk full, path too long... The underlying OSError is
        chained (``__cause__``).
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path
