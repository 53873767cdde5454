"""
Classification des tokens selon le suffixe de leur nom.

Suffixes reconnus (ancrés en fin de nom) : :p, :n, :g, :np, :gp.
La forme paramétrée :p{nom_valeur} est aussi un token pluriel.

Example:
    >>> classify("Valve_Apples:p")
    <VariantKind.PLURAL: ':p'>
    >>> classify("Valve_Apples:p{count}")
    <VariantKind.PLURAL: ':p'>
    >>> classify("Valve_Title") is None
    True
"""

import re
from typing import Iterable, Optional

from .base import VariantKind

# Alternatives les plus longues d'abord
_SUFFIX_RE = re.compile(r"(?P<suffix>:(?:np|gp|p|n|g))(?P<param>\{[A-Za-z_\d:]+\})?\Z")


def classify(token_name: str) -> Optional[VariantKind]:
    """
    Retourne la variante d'un token, ou None pour un token simple.

    Le paramètre {...} n'est admis qu'après :p.
    """
    match = _SUFFIX_RE.search(token_name)
    if match is None:
        return None

    kind = VariantKind(match.group("suffix"))
    if match.group("param") and kind is not VariantKind.PLURAL:
        return None
    return kind


def is_plural_gender(token_name: str) -> bool:
    return classify(token_name) is not None


def filter_plural_gender(token_names: Iterable[str]) -> list[str]:
    """
    Ne garde que les tokens plural/gender, dans leur ordre d'origine.

    Args:
        token_names: Noms de tokens

    Returns:
        Noms des tokens portant un suffixe plural/gender
    """
    return [name for name in token_names if is_plural_gender(name)]
