"""
Tests pour le check des tokens pluriels (:p).
"""

import pytest

from vdfloc import LanguageNotFoundError
from vdfloc.checks import PluralCheck, Token, ValidationContext, VariantKind
from vdfloc.checks.plural_check import count_separators, expected_separator_count


class TestSeparatorCount:
    """Tests pour les helpers de comptage."""

    def test_expected_separators(self):
        """N formes -> N-1 séparateurs, jamais négatif."""
        assert expected_separator_count(3) == 2
        assert expected_separator_count(1) == 0
        assert expected_separator_count(0) == 0

    def test_gender_tags_are_not_separators(self):
        """Les balises de genre ne comptent pas comme séparateurs."""
        assert count_separators("#|m|#a#|f|#b") == 0
        assert count_separators("a#|#b#|#c") == 2


class TestPluralCheck:
    """Tests pour PluralCheck via le validateur."""

    def test_three_forms_valid(self, validator):
        """3 formes, 2 séparateurs : aucun problème."""
        assert validator.check_variant("Valve_Apples:p", "яблоко#|#яблока#|#яблок", "russian") is None

    def test_three_forms_missing_one(self, validator):
        """3 formes attendues, 2 trouvées."""
        issue = validator.check_variant("Valve_Apples:p", "яблоко#|#яблока", "russian")

        assert issue == "Expected number of plural forms: 3 - found: 2"

    def test_too_many_forms(self, validator):
        """Une forme en trop est aussi signalée."""
        issue = validator.check_variant("Valve_Apples:p", "a#|#b#|#c", "french")

        assert issue is not None
        assert "2" in issue and "3" in issue

    def test_plural_not_meaningful(self, validator):
        """Pluriel non significatif : aucun séparateur admis."""
        assert validator.check_variant("Valve_Apples:p", "pomme", "nogrammar") is None
        issue = validator.check_variant("Valve_Apples:p", "pomme#|#pommes", "nogrammar")
        assert issue == "Expected number of plural forms: 1 - found: 2"

    def test_parameterized_plural_token(self, validator):
        """La forme :p{valeur} est validée comme un pluriel."""
        issue = validator.check_variant("Valve_Apples:p{count}", "pomme", "french")

        assert issue == "Expected number of plural forms: 2 - found: 1"

    def test_unknown_language_raises(self, validator):
        """Une langue sans profil est une erreur de traitement, pas un problème de syntaxe."""
        with pytest.raises(LanguageNotFoundError):
            validator.check_variant("Valve_Apples:p", "a#|#b", "klingon")

    def test_error_data(self, profiles):
        """Le CheckResult expose les nombres de formes attendu et trouvé."""
        context = ValidationContext(
            token=Token("Valve_Apples:p", "a#|#b", VariantKind.PLURAL),
            profile=profiles.get("russian"),
        )

        result = PluralCheck().validate(context)

        assert not result.is_valid
        assert result.check_name == "plural"
        assert result.error_data == {"expected_forms": 3, "actual_forms": 2}
        assert repr(result).startswith("❌ plural")
