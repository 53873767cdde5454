"""
Tests pour les profils grammaticaux (LanguageProfile, GrammarProfiles).
"""

import json

import pytest

from vdfloc import GrammarProfiles, LanguageNotFoundError, LanguageProfile, ProcessingError, ProfileError


class TestLanguageProfile:
    """Tests pour LanguageProfile."""

    def test_defaults(self):
        """Profil vide : aucun genre, pluriel non significatif."""
        profile = LanguageProfile()

        assert profile.gender_tags == ()
        assert profile.plural_form_count == 0
        assert not profile.has_genders

    def test_list_converted_to_tuple(self):
        """Les balises sont stockées en tuple, ordre conservé."""
        profile = LanguageProfile(gender_tags=["#|f|#", "#|m|#"], plural_form_count=2)

        assert profile.gender_tags == ("#|f|#", "#|m|#")

    def test_unknown_tag(self):
        """Une balise hors des 7 balises reconnues est refusée."""
        with pytest.raises(ProfileError):
            LanguageProfile(gender_tags=("#|x|#",))

    def test_duplicate_tag(self):
        """Une balise dupliquée est refusée."""
        with pytest.raises(ProfileError):
            LanguageProfile(gender_tags=("#|m|#", "#|m|#"))

    @pytest.mark.parametrize("count", [-1, 1.5, "2", True])
    def test_invalid_plural_count(self, count):
        """Le nombre de formes doit être un entier positif ou nul."""
        with pytest.raises(ProfileError):
            LanguageProfile(plural_form_count=count)

    def test_immutable(self):
        """Le profil ne peut pas être modifié."""
        profile = LanguageProfile(plural_form_count=2)
        with pytest.raises(AttributeError):
            profile.plural_form_count = 3  # type: ignore[misc]


class TestGrammarProfiles:
    """Tests pour GrammarProfiles."""

    def test_lookup(self, profiles):
        """Accès aux balises et au nombre de formes."""
        assert profiles.get_gender_tags("french") == ("#|m|#", "#|f|#")
        assert profiles.get_plural_form_count("russian") == 3
        assert profiles.get_gender_tags("english") == ()

    def test_case_insensitive(self, profiles):
        """Les identifiants de langue sont insensibles à la casse."""
        assert "FRENCH" in profiles
        assert profiles.get("French") is profiles.get("french")

    def test_unknown_language(self, profiles):
        """Une langue absente lève LanguageNotFoundError (erreur de traitement)."""
        with pytest.raises(LanguageNotFoundError) as exc_info:
            profiles.get_plural_form_count("klingon")

        error = exc_info.value
        assert isinstance(error, ProcessingError)
        assert isinstance(error, KeyError)
        assert str(error) == "No plural/gender profile for language: 'klingon'"

    def test_languages(self, profiles):
        """Liste triée des langues, taille et itération."""
        assert profiles.languages[0] == "english"
        assert len(profiles) == 7
        assert set(profiles) == set(profiles.languages)
        assert 42 not in profiles

    def test_from_dict_invalid_entry(self):
        """Une entrée qui n'est pas un objet est refusée."""
        with pytest.raises(ProfileError):
            GrammarProfiles.from_dict({"french": 2})

    def test_from_dict_invalid_genders(self):
        """genders doit être une liste."""
        with pytest.raises(ProfileError):
            GrammarProfiles.from_dict({"french": {"genders": "#|m|#"}})

    def test_from_dict_names_language_in_error(self):
        """L'erreur indique la langue fautive."""
        with pytest.raises(ProfileError, match="german"):
            GrammarProfiles.from_dict({"german": {"genders": ["#|x|#"], "plurals": 2}})

    def test_from_dict_not_a_mapping(self):
        """La racine doit être un objet."""
        with pytest.raises(ProfileError):
            GrammarProfiles.from_dict([])  # type: ignore[arg-type]


class TestLoading:
    """Tests pour le chargement JSON."""

    def test_from_json(self, tmp_path):
        """Chargement d'un fichier JSON valide."""
        path = tmp_path / "pluralgender.json"
        path.write_text(
            json.dumps({"polish": {"genders": ["#|mp|#", "#|f|#"], "plurals": 3}}),
            encoding="utf-8",
        )

        profiles = GrammarProfiles.from_json(path)

        assert profiles.get_gender_tags("polish") == ("#|mp|#", "#|f|#")
        assert profiles.get_plural_form_count("polish") == 3

    def test_from_json_with_bom(self, tmp_path):
        """Un fichier utf-8 avec BOM est accepté."""
        path = tmp_path / "pluralgender.json"
        path.write_bytes(b"\xef\xbb\xbf" + b'{"english": {"plurals": 2}}')

        assert GrammarProfiles.from_json(path).get_plural_form_count("english") == 2

    def test_invalid_json(self, tmp_path):
        """Un JSON mal formé lève ProfileError."""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ProfileError):
            GrammarProfiles.from_json(path)

    def test_missing_file(self, tmp_path):
        """Un fichier absent lève ProfileError."""
        with pytest.raises(ProfileError):
            GrammarProfiles.from_json(tmp_path / "missing.json")

    def test_load_default(self):
        """Les profils livrés sont valides et couvrent les langues courantes."""
        profiles = GrammarProfiles.load_default()

        for language in ("english", "french", "german", "russian", "polish", "schinese"):
            assert language in profiles
        assert profiles.get_gender_tags("english") == ()
        assert profiles.get_gender_tags("german") == ("#|m|#", "#|f|#", "#|n|#")
