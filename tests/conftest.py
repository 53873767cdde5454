"""
Configuration pytest pour les tests vdfloc.

Ce fichier contient les fixtures communes à tous les tests.
"""

import pytest

from vdfloc import GrammarProfiles, GrammarValidator
from vdfloc.config import Log_Settings
from vdfloc.logger import LogSession


@pytest.fixture
def profiles() -> GrammarProfiles:
    """
    Profils de test couvrant les cas utiles aux checks.

    - french / french_fm : 2 genres (ordres différents), 2 formes
    - russian : 3 genres, 3 formes
    - german_n : 1 seul genre, 2 formes
    - english : aucun genre, 2 formes
    - schinese : aucun genre, 1 forme
    - nogrammar : aucun genre, pluriel non significatif
    """
    return GrammarProfiles.from_dict(
        {
            "french": {"genders": ["#|m|#", "#|f|#"], "plurals": 2},
            "french_fm": {"genders": ["#|f|#", "#|m|#"], "plurals": 2},
            "russian": {"genders": ["#|m|#", "#|f|#", "#|n|#"], "plurals": 3},
            "german_n": {"genders": ["#|n|#"], "plurals": 2},
            "english": {"plurals": 2},
            "schinese": {"plurals": 1},
            "nogrammar": {},
        }
    )


@pytest.fixture
def validator(profiles) -> GrammarValidator:
    """Validateur branché sur les profils de test."""
    return GrammarValidator(profiles)


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path, monkeypatch):
    """Redirige les sessions de logs vers un répertoire temporaire."""
    LogSession.reset()
    monkeypatch.setattr(Log_Settings(), "log_dir", str(tmp_path / "logs"))
    monkeypatch.setattr(Log_Settings(), "file_logging", False)
    yield tmp_path / "logs"
    LogSession.reset()
