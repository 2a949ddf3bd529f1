"""Interface abstraite des sérialiseurs et résultat de génération."""

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from invoicr.errors import EInvoiceWriteError
from invoicr.models.document import BusinessTermDocument
from invoicr.models.enums import FormatId
from invoicr.models.results import FormatDescriptor, ValidationResult

logger = logging.getLogger(__name__)


def _current_umask() -> int:
    """Umask du processus (lecture par écriture puis restauration)."""
    umask = os.umask(0)
    os.umask(umask)
    return umask


class GenerationResult:
    """Résultat de la génération d'une e-facture.

    FR: Contient les octets générés, le descripteur du format, le nom de
        fichier déterministe et le résultat de validation (éventuellement
        en échec si la validation a été ignorée).
    EN: Holds the generated bytes, the format descriptor, the
        deterministic filename and the validation result (possibly failing
        when validation was skipped).
    """

    def __init__(
        self,
        data: bytes,
        format: FormatDescriptor,
        filename: str,
        validation: ValidationResult,
    ) -> None:
        self.data = data
        self.format = format
        self.filename = filename
        self.validation = validation

    def save(self, output_dir: str | os.PathLike[str]) -> Path:
        """Écrit le fichier de manière atomique dans output_dir.

        FR: Écriture dans un fichier temporaire du même répertoire puis
            os.replace() : le fichier final est complet ou absent. Les
            droits sont ceux d'une écriture ordinaire (0o666 moins l'umask).
        EN: Writes a temp file in the same directory then os.replace():
            the final file is either complete or absent. Permissions are
            those of an ordinary write (0o666 minus the umask).

        Returns:
            Le chemin complet du fichier écrit.

        Raises:
            EInvoiceWriteError: Si l'écriture échoue (OSError chaînée).
        """
        directory = Path(output_dir)
        target = directory / self.filename
        tmp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                dir=directory,
                prefix=f".{self.filename}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(self.data)
            os.chmod(tmp_name, 0o666 & ~_current_umask())
            os.replace(tmp_name, target)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            msg = f"Écriture impossible de {target} : {exc}"
            raise EInvoiceWriteError(msg, path=target) from exc

        logger.info("E-facture écrite : %s (%d octets)", target, len(self.data))
        return target


class BaseGenerator(ABC):
    """Classe de base abstraite des sérialiseurs e-facture.

    FR: Un sérialiseur par syntaxe (UBL, CII, JSON). Il reçoit le document
        Business Terms déjà projeté et retourne des octets.
    EN: One serializer per syntax (UBL, CII, JSON). It receives the
        already-mapped Business Terms document and returns bytes.
    """

    def __init__(self, fmt: FormatId, pretty_print: bool = True) -> None:
        self.fmt = fmt
        self.pretty_print = pretty_print

    @abstractmethod
    def generate(self, document: BusinessTermDocument, **kwargs: object) -> bytes:
        """Sérialise le document dans la syntaxe cible.

        Args:
            document: Le document Business Terms.
            **kwargs: Options spécifiques au sérialiseur.

        Returns:
            Le contenu sérialisé en bytes.
        """
        ...
