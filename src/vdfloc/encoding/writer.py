"""
Conversion de texte Unicode canonique vers un encodage cible.

Deux points d'entrée :
- convert() : conversion ponctuelle d'un texte en octets (BOM inclus)
- open_writer() : écrivain à état qui émet le BOM une seule fois à l'ouverture
  puis encode chaque écriture
"""

import codecs
import sys
from typing import BinaryIO, Optional

from ..exceptions import StreamIOError, TranscodeError, UnknownEncodingError
from ..logger import get_logger
from .constants import EncodingLabel

logger = get_logger(__name__)


def _writer_label(encoding_name: str) -> EncodingLabel:
    label = EncodingLabel.from_name(encoding_name)
    if label is None:
        raise UnknownEncodingError(encoding_name)
    return label


def convert(text: str, encoding_name: str) -> bytes:
    """
    Convertit un texte dans l'encodage demandé, BOM compris.

    Args:
        text: Texte Unicode
        encoding_name: UTF8, UTF8BOM, UTF16LE, UTF16BE, UTF32LE ou UTF32BE

    Returns:
        Octets encodés (précédés du BOM si l'encodage en a un)

    Raises:
        UnknownEncodingError: Encodage non reconnu
        TranscodeError: Texte non encodable (ex: surrogate isolé)

    Example:
        >>> convert("ok", "UTF16BE")
        b'\\xfe\\xff\\x00o\\x00k'
    """
    label = _writer_label(encoding_name)
    try:
        return label.bom + text.encode(label.codec)
    except UnicodeEncodeError as e:
        raise TranscodeError(text, label.value, e) from e


class UTFConvWriter:
    """
    Écrivain qui encode du texte Unicode vers un flux binaire.

    Le BOM de l'encodage cible est écrit une seule fois, à l'ouverture.
    Chaque appel à write() encode exactement le texte reçu ; seul l'état
    interne du codec est conservé entre deux appels.

    Attributes:
        encoding: Label de l'encodage cible
        name: Nom du flux (nom du fichier, "<stdout>" ou "<stream>")

    Example:
        >>> with open("out.txt", "wb") as f, UTFConvWriter(f, "UTF16LE") as w:
        ...     w.write("Trésor")
        12
    """

    def __init__(self, sink: Optional[BinaryIO], encoding_name: str):
        """
        Ouvre l'écrivain et émet le BOM.

        Args:
            sink: Flux binaire de sortie (None = sortie standard)
            encoding_name: Label de l'encodage cible

        Raises:
            UnknownEncodingError: Encodage non reconnu
            StreamIOError: Échec d'écriture du BOM
        """
        self.encoding = _writer_label(encoding_name)

        self._owns_sink = sink is not None
        if sink is None:
            self._sink: BinaryIO = sys.stdout.buffer
            self.name = "<stdout>"
        else:
            self._sink = sink
            self.name = str(getattr(sink, "name", "<stream>"))

        self._encoder = codecs.getincrementalencoder(self.encoding.codec)()

        if self.encoding.bom:
            self._write_bytes(self.encoding.bom)
        logger.debug(f"Écrivain {self.encoding.value} ouvert sur {self.name}")

    def write(self, text: str) -> int:
        """
        Encode et écrit un texte.

        Args:
            text: Texte Unicode à écrire

        Returns:
            Nombre d'octets écrits dans le flux

        Raises:
            TranscodeError: Texte non encodable
            StreamIOError: Échec d'écriture
        """
        try:
            out = self._encoder.encode(text)
        except UnicodeEncodeError as e:
            raise TranscodeError(text, self.encoding.value, e) from e
        return self._write_bytes(out)

    def _write_bytes(self, data: bytes) -> int:
        try:
            self._sink.write(data)
        except (OSError, ValueError) as e:
            raise StreamIOError(f"Unable to write {data!r} to {self.name}: {e}") from e
        return len(data)

    def close(self) -> None:
        """Ferme le flux de sortie (la sortie standard n'est jamais fermée)."""
        logger.debug(f"Écrivain {self.encoding.value} fermé ({self.name})")
        if self._owns_sink:
            self._sink.close()
        else:
            self._sink.flush()

    def __enter__(self) -> "UTFConvWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"UTFConvWriter(encoding={self.encoding.value}, name={self.name!r})"


def open_writer(sink: Optional[BinaryIO], encoding_name: str) -> UTFConvWriter:
    """
    Ouvre un écrivain vers sink dans l'encodage demandé.

    Args:
        sink: Flux binaire de sortie (None = sortie standard)
        encoding_name: UTF8, UTF8BOM, UTF16LE, UTF16BE, UTF32LE ou UTF32BE

    Returns:
        UTFConvWriter prêt à l'emploi (BOM déjà écrit)
    """
    return UTFConvWriter(sink, encoding_name)
