"""
Checks de syntaxe plural/gender des valeurs de tokens de localisation.

Chaque variante de token (:p, :n, :g, :np, :gp) a son check ; les tokens
simples sont contrôlés par PlainTokenCheck (aucune balise admise).
"""

from .base import Check, CheckResult, Token, ValidationContext, VariantKind
from .classifier import classify, filter_plural_gender, is_plural_gender
from .gender_check import GenderReceiverCheck, GenderSenderCheck
from .gender_plural_check import (
    GenderReceiverPluralCheck,
    GenderSenderPluralCheck,
    TagOccurrence,
)
from .plain_check import PlainTokenCheck
from .plural_check import PluralCheck
from .tags import ALL_TAGS, GENDER_TAGS, PLURAL_TAG

__all__ = [
    "Check",
    "CheckResult",
    "Token",
    "ValidationContext",
    "VariantKind",
    "TagOccurrence",
    # Checks
    "PluralCheck",
    "GenderSenderCheck",
    "GenderReceiverCheck",
    "GenderSenderPluralCheck",
    "GenderReceiverPluralCheck",
    "PlainTokenCheck",
    # Classification
    "classify",
    "filter_plural_gender",
    "is_plural_gender",
    # Constantes
    "GENDER_TAGS",
    "PLURAL_TAG",
    "ALL_TAGS",
]
