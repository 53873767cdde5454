"""
Check de la syntaxe des tokens pluriels (suffixe :p).

Les formes plurielles sont séparées par la balise #|#. Une langue à N formes
attend N-1 séparateurs (aucun si N vaut 0 ou 1).

Example:
    "Valve_Apples:p"  "#|#pomme#|#pommes" -> 3 formes
"""

from .base import CheckResult, ValidationContext
from .tags import PLURAL_TAG


def expected_separator_count(plural_form_count: int) -> int:
    """Nombre de séparateurs #|# attendus pour N formes plurielles."""
    return max(plural_form_count - 1, 0)


def count_separators(value: str) -> int:
    """Compte les séparateurs #|# d'une valeur."""
    return value.count(PLURAL_TAG)


class PluralCheck:
    """
    Vérifie le nombre de formes plurielles d'un token :p.

    Example:
        >>> check = PluralCheck()
        >>> result = check.validate(context)  # russe, 3 formes
        >>> result.error_message
        'Expected number of plural forms: 3 - found: 2'
    """

    @property
    def name(self) -> str:
        """Nom unique du check."""
        return "plural"

    def validate(self, context: ValidationContext) -> CheckResult:
        expected = expected_separator_count(context.profile.plural_form_count)
        found = count_separators(context.value)

        if found == expected:
            return CheckResult.ok(self.name)

        # Formes = séparateurs + 1
        return CheckResult.issue(
            self.name,
            f"Expected number of plural forms: {expected + 1} - found: {found + 1}",
            expected_forms=expected + 1,
            actual_forms=found + 1,
        )
