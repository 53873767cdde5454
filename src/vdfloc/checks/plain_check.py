"""
Check des tokens simples : aucune balise de genre ni séparateur de pluriel admis.
"""

from .base import CheckResult, Token, ValidationContext
from .tags import ALL_TAGS


def find_stray_tag(value: str) -> str | None:
    """Retourne la première balise plural/gender trouvée dans value, ou None."""
    for tag in ALL_TAGS:
        if tag in value:
            return tag
    return None


class PlainTokenCheck:
    """Signale les balises plural/gender présentes dans un token sans suffixe."""

    @property
    def name(self) -> str:
        """Nom unique du check."""
        return "plain_token"

    def validate(self, context: ValidationContext) -> CheckResult:
        return self.validate_token(context.token)

    def validate_token(self, token: Token) -> CheckResult:
        """Valide un token simple (aucun profil de langue nécessaire)."""
        tag = find_stray_tag(token.raw_value)
        if tag is None:
            return CheckResult.ok(self.name)

        return CheckResult.issue(
            self.name,
            f"Error - found plural separators and/or gender tags ({tag}) in a non "
            f"gendered/plural token: {token.name} - {token.raw_value}",
            tag=tag,
        )
