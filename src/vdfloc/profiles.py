"""
Profils grammaticaux par langue (balises de genre et nombre de formes plurielles).

Ce module fournit le fournisseur de profils consommé par le validateur. Les
profils sont chargés une fois au démarrage (JSON) dans un objet GrammarProfiles
immuable, puis passés explicitement à GrammarValidator.

Format JSON:
    {
        "french": {"genders": ["#|m|#", "#|f|#"], "plurals": 2},
        "schinese": {"plurals": 1}
    }

    - "genders" absent = langue sans genre grammatical
    - "plurals" absent = 0 (pluriel non significatif, aucun séparateur attendu)
    - les identifiants de langue sont insensibles à la casse
"""

import json
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from .checks.tags import GENDER_TAGS
from .exceptions import LanguageNotFoundError, ProfileError
from .logger import get_logger

logger = get_logger(__name__)

# Profils livrés avec le paquet
DEFAULT_PROFILES_PATH = Path(__file__).parent / "data" / "pluralgender.json"


@dataclass(frozen=True)
class LanguageProfile:
    """
    Profil grammatical d'une langue.

    Attributes:
        gender_tags: Balises de genre valides, dans l'ordre du profil
                     (sous-ensemble des 7 balises de GENDER_TAGS)
        plural_form_count: Nombre de formes plurielles (0 = pluriel non significatif)

    Raises:
        ProfileError: Balise inconnue ou dupliquée, nombre de formes négatif
    """

    gender_tags: tuple[str, ...] = ()
    plural_form_count: int = 0

    def __post_init__(self):
        tags = tuple(self.gender_tags)
        object.__setattr__(self, "gender_tags", tags)

        unknown = [tag for tag in tags if tag not in GENDER_TAGS]
        if unknown:
            raise ProfileError(f"Unknown gender tag(s): {', '.join(unknown)}")
        if len(set(tags)) != len(tags):
            raise ProfileError(f"Duplicate gender tag in: {', '.join(tags)}")

        count = self.plural_form_count
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ProfileError(f"Invalid plural form count: {count!r}")

    @property
    def has_genders(self) -> bool:
        return bool(self.gender_tags)


class GrammarProfiles:
    """
    Ensemble immuable des profils grammaticaux, indexé par langue.

    Example:
        >>> profiles = GrammarProfiles.from_dict(
        ...     {"french": {"genders": ["#|m|#", "#|f|#"], "plurals": 2}}
        ... )
        >>> profiles.get_plural_form_count("French")
        2
        >>> profiles.get_gender_tags("french")
        ('#|m|#', '#|f|#')
    """

    def __init__(self, profiles: Mapping[str, LanguageProfile]):
        self._profiles: Mapping[str, LanguageProfile] = MappingProxyType(
            {language.lower(): profile for language, profile in profiles.items()}
        )

    def get(self, language: str) -> LanguageProfile:
        """
        Retourne le profil d'une langue.

        Raises:
            LanguageNotFoundError: Langue absente des profils
        """
        try:
            return self._profiles[language.lower()]
        except KeyError:
            raise LanguageNotFoundError(language) from None

    def get_plural_form_count(self, language: str) -> int:
        return self.get(language).plural_form_count

    def get_gender_tags(self, language: str) -> tuple[str, ...]:
        return self.get(language).gender_tags

    @property
    def languages(self) -> list[str]:
        return sorted(self._profiles)

    def __contains__(self, language: object) -> bool:
        return isinstance(language, str) and language.lower() in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)

    def __iter__(self) -> Iterator[str]:
        return iter(self._profiles)

    def __repr__(self) -> str:
        return f"GrammarProfiles({self.languages})"

    # ------------------------------------------------------------
    # Chargement
    # ------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GrammarProfiles":
        """
        Construit les profils depuis un dictionnaire au format JSON décrit plus haut.

        Raises:
            ProfileError: Structure invalide
        """
        if not isinstance(data, Mapping):
            raise ProfileError("Profile data must be an object mapping language -> profile")

        profiles: dict[str, LanguageProfile] = {}
        for language, entry in data.items():
            if not isinstance(entry, Mapping):
                raise ProfileError(f"Invalid profile for {language!r}: expected an object")

            genders = entry.get("genders") or []
            if isinstance(genders, str) or not isinstance(genders, list):
                raise ProfileError(f"Invalid genders for {language!r}: expected a list")

            try:
                profiles[language] = LanguageProfile(
                    gender_tags=tuple(genders),
                    plural_form_count=entry.get("plurals", 0),
                )
            except ProfileError as e:
                raise ProfileError(f"Invalid profile for {language!r}: {e}") from e

        return cls(profiles)

    @classmethod
    def from_json(cls, path: str | Path) -> "GrammarProfiles":
        """
        Charge les profils depuis un fichier JSON.

        Raises:
            ProfileError: Fichier illisible ou contenu invalide
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8-sig") as f:
                data = json.load(f)
        except OSError as e:
            raise ProfileError(f"Unable to read profiles {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ProfileError(f"Invalid JSON in {path}: {e}") from e

        profiles = cls.from_dict(data)
        logger.info(f"{len(profiles)} profil(s) grammatical(aux) chargé(s) depuis {path}")
        return profiles

    @classmethod
    def load_default(cls) -> "GrammarProfiles":
        """Charge les profils livrés avec le paquet (data/pluralgender.json)."""
        return cls.from_json(DEFAULT_PROFILES_PATH)
