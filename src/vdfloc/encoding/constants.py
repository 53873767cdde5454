"""
Constantes utilisées pour la détection et la conversion des encodages.
"""

from enum import Enum

# Marques d'ordre des octets (BOM)
UTF8_BOM = b"\xef\xbb\xbf"
UTF16LE_BOM = b"\xff\xfe"
UTF16BE_BOM = b"\xfe\xff"
UTF32LE_BOM = b"\xff\xfe\x00\x00"
UTF32BE_BOM = b"\x00\x00\xfe\xff"

# Taille maximale d'un point de code encodé en utf-8
UTF_MAX = 4


class EncodingLabel(Enum):
    """Encodages reconnus à la frontière flux d'octets / texte."""

    UTF8 = "UTF8"
    UTF8BOM = "UTF8BOM"
    UTF16LE = "UTF16LE"
    UTF16BE = "UTF16BE"
    UTF32LE = "UTF32LE"
    UTF32BE = "UTF32BE"

    @property
    def bom(self) -> bytes:
        return _BOMS[self]

    @property
    def codec(self) -> str:
        """Codec Python utilisé pour encoder le texte (sans BOM)."""
        return _CODECS[self]

    @classmethod
    def from_name(cls, name: str) -> "EncodingLabel | None":
        """
        Résout un nom (label vdfloc ou alias de codec Python) en label.

        Args:
            name: "UTF16LE", "utf16le", "utf-16-le", "UTF-8"...

        Returns:
            Le label correspondant, ou None si le nom n'est pas reconnu
            (l'appelant décide s'il faut consulter le registre des codecs).
        """
        key = name.strip().upper()
        if key in cls.__members__:
            return cls[key]
        return _PY_CODEC_LABELS.get(name.strip().lower().replace("_", "-"))


_BOMS = {
    EncodingLabel.UTF8: b"",
    EncodingLabel.UTF8BOM: UTF8_BOM,
    EncodingLabel.UTF16LE: UTF16LE_BOM,
    EncodingLabel.UTF16BE: UTF16BE_BOM,
    EncodingLabel.UTF32LE: UTF32LE_BOM,
    EncodingLabel.UTF32BE: UTF32BE_BOM,
}

_CODECS = {
    EncodingLabel.UTF8: "utf-8",
    EncodingLabel.UTF8BOM: "utf-8",
    EncodingLabel.UTF16LE: "utf-16-le",
    EncodingLabel.UTF16BE: "utf-16-be",
    EncodingLabel.UTF32LE: "utf-32-le",
    EncodingLabel.UTF32BE: "utf-32-be",
}

# Noms canoniques du registre codecs -> label
_PY_CODEC_LABELS = {
    "utf-8": EncodingLabel.UTF8,
    "utf-8-sig": EncodingLabel.UTF8BOM,
    "utf-16-le": EncodingLabel.UTF16LE,
    "utf-16-be": EncodingLabel.UTF16BE,
    "utf-32-le": EncodingLabel.UTF32LE,
    "utf-32-be": EncodingLabel.UTF32BE,
}
