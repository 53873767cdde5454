"""
Validation et transcodage des chaînes de localisation plural/gender.

vdfloc est une bibliothèque pour les pipelines de localisation qui manipulent
des fichiers clé/valeur (format VDF) dont les valeurs portent des balises de
pluriel et de genre.

Le traitement se fait en deux temps :
1. Lecture du fichier source dans l'encodage où il a été écrit (BOM ou
   sondage utf-8) et normalisation en texte Unicode
2. Vérification, pour chaque token, que les balises plural/gender de sa
   valeur correspondent au profil grammatical de la langue cible

Le texte peut ensuite être réécrit dans un encodage cible (utf-8, utf-8 avec
BOM, utf-16LE/BE, utf-32LE/BE).

Organisation du package :
- encoding/ : Détection d'encodage (sniffer) et conversion (writer)
- checks/ : Checks de syntaxe par variante de token et classification
- profiles.py : Profils grammaticaux par langue (chargement JSON)
- validator.py : Validateur (dispatch par variante, validation par lot)
- logger.py : Configuration du logging (sessions, fichiers différés)
- config.py : Configuration (niveaux de log, sondage d'encodage)

Exports publics :
    Classes principales :
        - GrammarValidator : Validation plural/gender des tokens
        - GrammarProfiles : Profils grammaticaux par langue
        - LanguageProfile : Profil d'une langue
        - UTFConvWriter : Écrivain encodant vers un flux binaire

    Fonctions :
        - detect : Détection d'encodage d'un flux
        - read_text : Lecture d'un fichier en Unicode
        - open_writer / convert : Conversion vers un encodage cible
        - classify / filter_plural_gender : Classification des tokens

Variables d'environnement (lues par la CLI via .env) :
    VDFLOC_PROFILES : Fichier JSON des profils (défaut : profils livrés)
    VDFLOC_LOG_DIR : Répertoire des logs (défaut : logs)
    VDFLOC_LOG_LEVEL : Niveau de log console (défaut : ERROR)

Usage minimal :
    >>> from vdfloc import GrammarProfiles, GrammarValidator, read_text
    >>>
    >>> validator = GrammarValidator(GrammarProfiles.load_default())
    >>> validator.check_token("Valve_Apples:p", "pomme#|#pommes", "french") is None
    True
    >>>
    >>> text, decision = read_text("resource/loc_french.txt")
    >>> decision.label
    <EncodingLabel.UTF16LE: 'UTF16LE'>
"""

from .checks import (
    GENDER_TAGS,
    PLURAL_TAG,
    VariantKind,
    classify,
    filter_plural_gender,
)
from .encoding import (
    EncodingDecision,
    EncodingLabel,
    UTFConvWriter,
    convert,
    detect,
    open_writer,
    read_text,
)
from .exceptions import (
    LanguageNotFoundError,
    ProcessingError,
    ProfileError,
    StreamIOError,
    TranscodeError,
    UnknownEncodingError,
)
from .profiles import GrammarProfiles, LanguageProfile
from .validator import GrammarValidator, TokenIssue, ValidationReport

# Version du package
__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Validation
    "GrammarValidator",
    "GrammarProfiles",
    "LanguageProfile",
    "ValidationReport",
    "TokenIssue",
    "VariantKind",
    "classify",
    "filter_plural_gender",
    # Encodage
    "EncodingLabel",
    "EncodingDecision",
    "UTFConvWriter",
    "detect",
    "read_text",
    "open_writer",
    "convert",
    # Exceptions
    "ProcessingError",
    "LanguageNotFoundError",
    "ProfileError",
    "StreamIOError",
    "TranscodeError",
    "UnknownEncodingError",
    # Constantes
    "GENDER_TAGS",
    "PLURAL_TAG",
]
