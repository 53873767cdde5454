"""
Tests pour les checks genrés avec pluriel (:np émetteur, :gp récepteur).
"""

from vdfloc.checks.gender_plural_check import TagOccurrence, find_all


class TestFindAll:
    """Tests pour find_all()."""

    def test_positions(self):
        """Positions de chaque occurrence, sans chevauchement."""
        assert find_all("#|m|#a#|m|#", "#|m|#") == [0, 6]
        assert find_all("abc", "#|m|#") == []

    def test_tag_occurrence_is_immutable(self):
        """TagOccurrence est un enregistrement transitoire immuable."""
        occurrence = TagOccurrence(plural_group=1, gender_tag="#|m|#", position=0)
        assert occurrence == TagOccurrence(1, "#|m|#", 0)


class TestGenderSenderPlural:
    """Tests pour GenderSenderPluralCheck (:np)."""

    def test_one_tag_per_form(self, validator):
        """Une balise valide par forme plurielle."""
        assert validator.check_variant("Valve_Noun1:np", "#|m|#Trésor#|m|#Trésors", "french") is None

    def test_genders_may_differ_between_forms(self, validator):
        """Seul le nombre total de balises est contrôlé."""
        assert validator.check_variant("Valve_Noun1:np", "#|m|#Trésor#|f|#Trésors", "french") is None

    def test_missing_form(self, validator):
        """Moins de balises que de formes plurielles."""
        issue = validator.check_variant("Valve_Noun1:np", "#|m|#Trésor", "french")

        assert issue == "Error with gender/plural forms - counted 1 while expecting 2"

    def test_unexpected_tag(self, validator):
        """Une balise hors profil est signalée avant le comptage."""
        issue = validator.check_variant("Valve_Noun1:np", "#|n|#Trésor#|m|#Trésors", "french")

        assert issue == "Error with gender/plural form: this tag was unexpected #|n|#"

    def test_fallback_without_genders(self, validator):
        """Langue sans genre : les formes sont séparées par #|#."""
        assert validator.check_variant("Valve_Noun1:np", "apple#|#apples", "english") is None
        assert validator.check_variant("Valve_Noun1:np", "苹果", "schinese") is None

        issue = validator.check_variant("Valve_Noun1:np", "苹果#|#苹果", "schinese")
        assert issue is not None
        assert "found 2 plural forms, while expecting 1" in issue


class TestGenderReceiverPlural:
    """Tests pour GenderReceiverPluralCheck (:gp)."""

    def test_two_well_formed_groups(self, validator):
        """Deux groupes complets, un m et un f chacun."""
        value = "#|m|#A#|f|#B#|m|#C#|f|#D"
        assert validator.check_variant("Valve_Adjective1:gp", value, "french") is None

    def test_real_world_value(self, validator):
        """Exemple de valeur réelle à deux groupes."""
        value = "#|m|#peu Commun#|f|#peu Commune#|m|#peu Communs#|f|#peu Communes"
        assert validator.check_variant("Valve_Adjective1:gp", value, "french") is None

    def test_gender_order_inside_group_is_free(self, validator):
        """À l'intérieur d'un groupe, l'ordre des genres est libre."""
        value = "#|f|#B#|m|#A#|m|#C#|f|#D"
        assert validator.check_variant("Valve_Adjective1:gp", value, "french") is None

    def test_groups_interleaved(self, validator):
        """Les deux m avant les deux f : groupes entremêlés."""
        value = "#|m|#A#|m|#C#|f|#B#|f|#D"
        issue = validator.check_variant("Valve_Adjective1:gp", value, "french")

        assert issue == (
            "Error with gender/plural form: incorrect order plural form: 2, gender tag: #|m|#"
        )

    def test_order_error_data(self, validator):
        """Le CheckResult indique le groupe et la balise fautifs."""
        result = validator.check_variant_result(
            "Valve_Adjective1:gp", "#|m|#A#|m|#C#|f|#B#|f|#D", "french"
        )

        assert result is not None
        assert result.error_data["plural_group"] == 2
        assert result.error_data["tag"] == "#|m|#"
        assert result.error_data["position"] == 6

    def test_reported_tag_follows_profile_order(self, validator):
        """La balise signalée est celle du profil, dans l'ordre du profil."""
        value = "#|m|#A#|m|#C#|f|#B#|f|#D"
        issue = validator.check_variant("Valve_Adjective1:gp", value, "french_fm")

        # Profil (f, m) : groupe 2, f en 18 >= 12, puis m en 6 < 12
        assert issue is not None
        assert issue.endswith("plural form: 2, gender tag: #|m|#")

    def test_wrong_count(self, validator):
        """Un genre n'apparaît pas N fois."""
        issue = validator.check_variant("Valve_Adjective1:gp", "#|m|#A#|f|#B#|m|#C", "french")

        assert issue == (
            "Error with gender/plural form: #|f|# - found 1 while expecting 2 "
            "of each gender group: #|m|#, #|f|#"
        )

    def test_unexpected_tag(self, validator):
        """Une balise hors profil est signalée immédiatement."""
        value = "#|m|#A#|f|#B#|m|#C#|f|#D#|n|#E"
        issue = validator.check_variant("Valve_Adjective1:gp", value, "french")

        assert issue is not None
        assert "#|n|#" in issue
        assert "unexpected" in issue

    def test_three_genders_three_forms(self, validator):
        """Russe : trois groupes de trois genres."""
        group = "#|m|#a#|f|#b#|n|#c"
        assert validator.check_variant("Valve_Adjective1:gp", group * 3, "russian") is None

    def test_three_genders_misplaced_in_last_group(self, validator):
        """Une balise du dernier groupe placée avant la fin du groupe précédent."""
        value = "#|m|#a#|f|#b#|n|#c" "#|m|#a#|f|#b#|n|#c" "#|m|#a#|n|#c" "#|f|#b"
        assert validator.check_variant("Valve_Adjective1:gp", value, "russian") is None

        value = "#|m|#a#|f|#b#|n|#c" "#|m|#a#|f|#b" "#|n|#c#|m|#a#|f|#b" "#|n|#c"
        assert validator.check_variant("Valve_Adjective1:gp", value, "russian") is None

        value = "#|m|#a#|f|#b" "#|m|#a#|n|#c#|f|#b#|n|#c" "#|m|#a#|f|#b#|n|#c"
        issue = validator.check_variant("Valve_Adjective1:gp", value, "russian")
        assert issue is not None
        assert "plural form: 2, gender tag: #|m|#" in issue

    def test_fallback_without_genders(self, validator):
        """Langue sans genre : les formes sont séparées par #|#."""
        assert validator.check_variant("Valve_Adjective1:gp", "red#|#red", "english") is None

        issue = validator.check_variant("Valve_Adjective1:gp", "red", "english")
        assert issue is not None
        assert "found 1 plural forms, while expecting 2" in issue
