"""
Détection d'encodage et conversion Unicode des fichiers de localisation.

Ce module lit un flux d'octets dans l'encodage où il a été écrit (BOM ou
sondage utf-8) pour produire du texte Unicode, et réécrit du texte Unicode
dans un encodage cible (utf-8, utf-8 avec BOM, utf-16, utf-32).
"""

from .constants import (
    UTF8_BOM,
    UTF16LE_BOM,
    UTF16BE_BOM,
    UTF32LE_BOM,
    UTF32BE_BOM,
    EncodingLabel,
)
from .sniffer import EncodingDecision, detect, read_text, resolve_encoding
from .writer import UTFConvWriter, convert, open_writer

__all__ = [
    "EncodingLabel",
    "EncodingDecision",
    "detect",
    "read_text",
    "resolve_encoding",
    "UTFConvWriter",
    "open_writer",
    "convert",
    # Constantes
    "UTF8_BOM",
    "UTF16LE_BOM",
    "UTF16BE_BOM",
    "UTF32LE_BOM",
    "UTF32BE_BOM",
]
