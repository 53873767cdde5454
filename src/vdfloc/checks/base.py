"""
Types de base et interfaces pour les checks plural/gender.

Ce module définit les variantes de tokens, le contexte passé aux checks,
le résultat d'un check et le protocole commun à tous les checks.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Protocol

if TYPE_CHECKING:
    from ..profiles import LanguageProfile


class VariantKind(Enum):
    """Variante d'un token, déterminée par le suffixe de son nom."""

    PLURAL = ":p"
    GENDER_SENDER = ":n"
    GENDER_RECEIVER = ":g"
    GENDER_SENDER_PLURAL = ":np"
    GENDER_RECEIVER_PLURAL = ":gp"


@dataclass
class Token:
    """
    Token de localisation à valider.

    Attributes:
        name: Nom du token (ex: "Valve_TestPluralGenders_Noun1:np")
        raw_value: Valeur brute du token
        variant: Variante détectée (None = token simple, sans balises attendues)
    """

    name: str
    raw_value: str
    variant: Optional[VariantKind] = None


@dataclass
class CheckResult:
    """
    Résultat d'un check de validation.

    Attributes:
        is_valid: True si la syntaxe est correcte, False sinon
        check_name: Nom unique du check (ex: "plural", "gender_receiver")
        error_message: Message décrivant le problème de syntaxe si invalide, None sinon
        error_data: Données détaillées de l'erreur (format dépend du check)

    Example:
        >>> result = CheckResult(
        ...     is_valid=False,
        ...     check_name="plural",
        ...     error_message="Expected number of plural forms: 3 - found: 2",
        ...     error_data={"expected_forms": 3, "actual_forms": 2},
        ... )
        >>> print(result)
        ❌ plural: Expected number of plural forms: 3 - found: 2
    """

    is_valid: bool
    check_name: str
    error_message: str | None = None
    error_data: dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        """Représentation pour le debug."""
        if self.is_valid:
            return f"✅ {self.check_name}: OK"
        return f"❌ {self.check_name}: {self.error_message}"

    @classmethod
    def ok(cls, check_name: str) -> "CheckResult":
        return cls(is_valid=True, check_name=check_name)

    @classmethod
    def issue(cls, check_name: str, message: str, **error_data: Any) -> "CheckResult":
        return cls(
            is_valid=False,
            check_name=check_name,
            error_message=message,
            error_data=error_data,
        )


@dataclass(frozen=True)
class ValidationContext:
    """
    Contexte passé à un check pour un token.

    Le profil est une vue en lecture seule empruntée au fournisseur de profils
    le temps de l'appel ; les checks ne le conservent pas.

    Attributes:
        token: Token à valider
        profile: Profil grammatical de la langue cible
    """

    token: Token
    profile: "LanguageProfile"

    @property
    def value(self) -> str:
        return self.token.raw_value


class Check(Protocol):
    """
    Interface (Protocol) pour tous les checks plural/gender.

    Un check doit implémenter :
    1. Une propriété `name` retournant un identifiant unique
    2. Une méthode `validate()` qui vérifie la syntaxe de la valeur du token
    """

    @property
    def name(self) -> str:
        """Nom unique du check."""
        ...

    def validate(self, context: ValidationContext) -> CheckResult:
        """
        Valide la syntaxe de la valeur du token dans le contexte.

        Returns:
            CheckResult avec is_valid=True si OK, False avec error_message sinon
        """
        ...
