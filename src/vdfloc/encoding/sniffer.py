"""
Détection de l'encodage d'un flux d'octets et lecture en Unicode canonique.

L'ordre de détection est le suivant (la première correspondance gagne) :
1. BOM utf-8 (EF BB BF)
2. BOM utf-32LE (FF FE 00 00), prioritaire sur utf-16LE dont le BOM est un préfixe
3. BOM utf-32BE (00 00 FE FF)
4. BOM utf-16LE (FF FE)
5. BOM utf-16BE (FE FF)
6. Sans BOM : sondage utf-8 des premiers 128 Ko si aucun encodage n'est imposé,
   sinon encodage imposé, sinon utf-8 par défaut.
"""

import codecs
import io
from dataclasses import dataclass
from pathlib import Path
from typing import IO, BinaryIO

from ..config import Encoding_Settings
from ..exceptions import StreamIOError, UnknownEncodingError
from ..logger import get_logger
from .constants import (
    UTF8_BOM,
    UTF16BE_BOM,
    UTF16LE_BOM,
    UTF32BE_BOM,
    UTF32LE_BOM,
    UTF_MAX,
    EncodingLabel,
)

logger = get_logger(__name__)

# utf-32LE avant utf-16LE : FF FE 00 00 commence par FF FE
_BOM_LABELS: tuple[tuple[bytes, EncodingLabel], ...] = (
    (UTF32LE_BOM, EncodingLabel.UTF32LE),
    (UTF32BE_BOM, EncodingLabel.UTF32BE),
    (UTF16LE_BOM, EncodingLabel.UTF16LE),
    (UTF16BE_BOM, EncodingLabel.UTF16BE),
)


@dataclass(frozen=True)
class EncodingDecision:
    """
    Encodage détecté pour un flux.

    Attributes:
        label: Encodage reconnu
        bom_length: Nombre d'octets de BOM sautés avant le contenu (0 si aucun)
    """

    label: EncodingLabel
    bom_length: int = 0

    def __str__(self) -> str:
        return self.label.value


def resolve_encoding(encoding_name: str) -> EncodingLabel:
    """
    Résout un nom d'encodage via le registre des codecs.

    Les labels vdfloc (UTF8, UTF16LE...) sont reconnus sans tenir compte de
    la casse ; les autres noms passent par codecs.lookup() et doivent
    désigner l'un des six encodages Unicode supportés.

    Raises:
        UnknownEncodingError: Nom inconnu, ou codec connu mais non supporté
    """
    label = EncodingLabel.from_name(encoding_name)
    if label is not None:
        return label

    try:
        info = codecs.lookup(encoding_name)
    except LookupError as e:
        raise UnknownEncodingError(encoding_name, str(e)) from e

    label = EncodingLabel.from_name(info.name)
    if label is None:
        raise UnknownEncodingError(
            encoding_name, f"(codec {info.name} is not a supported Unicode encoding)"
        )
    return label


def detect(stream: BinaryIO, encoding_name: str = "") -> tuple[IO, EncodingDecision]:
    """
    Détecte l'encodage d'un flux et retourne un lecteur de texte Unicode.

    Le lecteur retourné saute le BOM et décode le reste du flux. Un flux vide
    est retourné tel quel (même objet, aucun décodage) avec le label UTF8.

    Args:
        stream: Flux binaire positionnable (fichier ouvert en "rb", BytesIO...)
        encoding_name: Encodage imposé si aucun BOM n'est présent ("" = sonder)

    Returns:
        Tuple (reader, decision)
        - reader: io.TextIOWrapper sur le flux (ou le flux lui-même s'il est vide)
        - decision: EncodingDecision immuable

    Raises:
        ValueError: Si stream est None
        StreamIOError: Échec de lecture ou de positionnement
        UnknownEncodingError: encoding_name inconnu ou non supporté

    Example:
        >>> reader, decision = detect(io.BytesIO(b"\\xff\\xfe\\x00\\x00" + "é".encode("utf-32-le")))
        >>> decision.label
        <EncodingLabel.UTF32LE: 'UTF32LE'>
        >>> reader.read()
        'é'
    """
    if stream is None:
        raise ValueError("invalid (None) source stream")

    head = _read(stream, UTF_MAX)
    if not head:
        logger.debug("Flux vide : retourné sans décodage")
        return stream, EncodingDecision(EncodingLabel.UTF8)

    if head.startswith(UTF8_BOM):
        _seek(stream, len(UTF8_BOM))
        return _decoded(stream, EncodingLabel.UTF8BOM, len(UTF8_BOM))

    for bom, label in _BOM_LABELS:
        if head.startswith(bom):
            _seek(stream, len(bom))
            return _decoded(stream, label, len(bom))

    # Pas de BOM : revenir au début du flux
    _seek(stream, 0)

    if not encoding_name:
        probe_length = Encoding_Settings().probe_length
        probe = _read(stream, probe_length)
        _seek(stream, 0)

        consumed = _utf8_prefix_length(probe)
        if consumed >= len(probe) or consumed >= probe_length - UTF_MAX:
            return _decoded(stream, EncodingLabel.UTF8, 0)

        logger.debug(
            f"Sondage utf-8 échoué à l'octet {consumed} ({len(probe)} octets lus)"
        )

    label = resolve_encoding(encoding_name or Encoding_Settings().default_encoding)
    return _decoded(stream, label, 0)


def read_text(path: str | Path, encoding_name: str = "") -> tuple[str, EncodingDecision]:
    """
    Lit un fichier complet en Unicode canonique.

    Args:
        path: Chemin du fichier
        encoding_name: Encodage imposé si aucun BOM ("" = sonder)

    Returns:
        Tuple (texte, decision)

    Raises:
        StreamIOError: Fichier illisible
        UnknownEncodingError: encoding_name inconnu
        UnicodeDecodeError: Contenu non conforme à l'encodage détecté
    """
    try:
        f = open(path, "rb")
    except OSError as e:
        raise StreamIOError(f"file open error: {e}") from e

    with f:
        reader, decision = detect(f, encoding_name)
        content = reader.read()
        if isinstance(content, bytes):
            # Flux vide retourné tel quel
            content = content.decode("utf-8")
    return content, decision


def _decoded(
    stream: BinaryIO, label: EncodingLabel, bom_length: int
) -> tuple[IO, EncodingDecision]:
    decision = EncodingDecision(label, bom_length)
    logger.debug(f"Encodage détecté : {decision} (BOM: {bom_length} octet(s))")
    reader = io.TextIOWrapper(stream, encoding=label.codec, errors="strict", newline="")
    return reader, decision


def _utf8_prefix_length(data: bytes) -> int:
    """
    Retourne le nombre d'octets formant une suite utf-8 valide en tête de data.

    Une séquence multi-octets tronquée en fin de données n'est pas comptée.
    """
    decoder = codecs.getincrementaldecoder("utf-8")()
    try:
        decoder.decode(data, final=False)
    except UnicodeDecodeError as e:
        return e.start
    pending, _ = decoder.getstate()
    return len(data) - len(pending)


def _read(stream: BinaryIO, size: int) -> bytes:
    try:
        return stream.read(size)
    except (OSError, ValueError) as e:
        raise StreamIOError(f"file read error: {e}") from e


def _seek(stream: BinaryIO, offset: int) -> None:
    try:
        stream.seek(offset, io.SEEK_SET)
    except (OSError, ValueError) as e:
        raise StreamIOError(f"file seek error: {e}") from e
