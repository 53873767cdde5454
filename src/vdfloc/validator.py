"""
Validateur de la syntaxe plural/gender des tokens de localisation.

Le validateur classe chaque token selon le suffixe de son nom, récupère le
profil grammatical de la langue cible et applique le check de la variante.

Deux familles de résultats :
- problème de syntaxe : message retourné (str), jamais levé ; la validation
  d'un lot continue et tous les problèmes sont collectés ;
- erreur de traitement (langue sans profil) : LanguageNotFoundError levée,
  l'appelant décide d'interrompre ou non le lot.
"""

from dataclasses import dataclass, field
from typing import Iterable, Mapping, assert_never

from .checks import (
    Check,
    CheckResult,
    GenderReceiverCheck,
    GenderReceiverPluralCheck,
    GenderSenderCheck,
    GenderSenderPluralCheck,
    PlainTokenCheck,
    PluralCheck,
    Token,
    ValidationContext,
    VariantKind,
    classify,
)
from .logger import get_logger
from .profiles import GrammarProfiles

logger = get_logger(__name__)


@dataclass
class TokenIssue:
    """
    Problème de syntaxe relevé sur un token.

    Attributes:
        token_name: Nom du token
        value: Valeur fautive
        message: Description du problème
        check_name: Nom du check qui l'a relevé
    """

    token_name: str
    value: str
    message: str
    check_name: str

    def __str__(self) -> str:
        return f"{self.token_name}: {self.message}"


@dataclass
class ValidationReport:
    """
    Résultat de la validation d'un lot de tokens.

    Attributes:
        language: Langue cible du lot
        checked: Nombre de tokens vérifiés
        issues: Problèmes de syntaxe relevés, dans l'ordre des tokens
    """

    language: str
    checked: int = 0
    issues: list[TokenIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.issues


class GrammarValidator:
    """
    Valide les valeurs des tokens plural/gender selon le profil de leur langue.

    Attributes:
        profiles: Profils grammaticaux (lecture seule)

    Example:
        >>> validator = GrammarValidator(GrammarProfiles.load_default())
        >>> validator.check_variant("Valve_Sword:n", "#|f|#épée", "french") is None
        True
        >>> validator.check_variant("Valve_Sword:n", "#|f|#épée#|m|#glaive", "french")
        'Error with gender form - expected one of: #|m|#, #|f|#'
    """

    def __init__(self, profiles: GrammarProfiles):
        self.profiles = profiles

        self._plural = PluralCheck()
        self._gender_sender = GenderSenderCheck()
        self._gender_receiver = GenderReceiverCheck()
        self._gender_sender_plural = GenderSenderPluralCheck()
        self._gender_receiver_plural = GenderReceiverPluralCheck()
        self._plain = PlainTokenCheck()

    def check_for(self, kind: VariantKind) -> Check:
        """Retourne le check associé à une variante."""
        match kind:
            case VariantKind.PLURAL:
                return self._plural
            case VariantKind.GENDER_SENDER:
                return self._gender_sender
            case VariantKind.GENDER_RECEIVER:
                return self._gender_receiver
            case VariantKind.GENDER_SENDER_PLURAL:
                return self._gender_sender_plural
            case VariantKind.GENDER_RECEIVER_PLURAL:
                return self._gender_receiver_plural
            case _:
                assert_never(kind)

    def check_variant_result(
        self, token_name: str, value: str, language: str
    ) -> CheckResult | None:
        """
        Applique le check de la variante du token et retourne le CheckResult complet.

        Returns:
            None si le token n'a pas de suffixe plural/gender, CheckResult sinon

        Raises:
            LanguageNotFoundError: Aucun profil pour cette langue
        """
        kind = classify(token_name)
        if kind is None:
            return None
        return self._validate(Token(name=token_name, raw_value=value, variant=kind), language)

    def _validate(self, token: Token, language: str) -> CheckResult:
        # Token simple : aucun profil consulté
        if token.variant is None:
            result = self._plain.validate_token(token)
        else:
            context = ValidationContext(token=token, profile=self.profiles.get(language))
            result = self.check_for(token.variant).validate(context)

        if not result.is_valid:
            logger.debug(f"{token.name} [{language}] {result!r}")
        return result

    def check_variant(self, token_name: str, value: str, language: str) -> str | None:
        """
        Vérifie la syntaxe plural/gender d'une valeur de token.

        Args:
            token_name: Nom du token (le suffixe détermine la variante)
            value: Valeur brute du token
            language: Identifiant de la langue cible

        Returns:
            Message décrivant le problème de syntaxe, ou None si la syntaxe est
            correcte ou si le token n'est pas une variante plural/gender

        Raises:
            LanguageNotFoundError: Aucun profil pour cette langue
        """
        logger.debug(f"check_variant({token_name}, {value}, {language})")
        result = self.check_variant_result(token_name, value, language)
        if result is None:
            return None
        return result.error_message

    def check_plain_token(self, token_name: str, value: str) -> str | None:
        """
        Vérifie qu'un token simple ne contient ni balise de genre ni séparateur de pluriel.

        Returns:
            Message décrivant le problème, ou None
        """
        result = self._plain.validate_token(Token(name=token_name, raw_value=value))
        return result.error_message

    def check_token(self, token_name: str, value: str, language: str) -> str | None:
        """
        Classe le token puis applique check_variant() ou check_plain_token().

        Raises:
            LanguageNotFoundError: Aucun profil pour cette langue (tokens variantes)
        """
        token = Token(name=token_name, raw_value=value, variant=classify(token_name))
        return self._validate(token, language).error_message

    def validate_tokens(
        self,
        tokens: Mapping[str, str] | Iterable[tuple[str, str]],
        language: str,
    ) -> ValidationReport:
        """
        Valide un lot de tokens et collecte tous les problèmes de syntaxe.

        Args:
            tokens: Paires (nom, valeur) ou dictionnaire {nom: valeur}
            language: Identifiant de la langue cible

        Returns:
            ValidationReport avec tous les problèmes relevés

        Raises:
            LanguageNotFoundError: Aucun profil pour cette langue (interrompt le lot)

        Example:
            >>> report = validator.validate_tokens(
            ...     {"Valve_Title": "Titre", "Valve_Apples:p": "pomme#|#pommes"},
            ...     "french",
            ... )
            >>> report.is_valid
            True
        """
        items = tokens.items() if isinstance(tokens, Mapping) else tokens
        report = ValidationReport(language=language)

        for token_name, value in items:
            report.checked += 1
            token = Token(name=token_name, raw_value=value, variant=classify(token_name))
            result = self._validate(token, language)

            if not result.is_valid:
                report.issues.append(
                    TokenIssue(
                        token_name=token_name,
                        value=value,
                        message=result.error_message or "",
                        check_name=result.check_name,
                    )
                )

        logger.info(
            f"Validation [{language}] : {report.checked} token(s) vérifié(s), "
            f"{len(report.issues)} problème(s) de syntaxe"
        )
        return report
