"""
Balises de genre et séparateur de pluriel reconnus dans les valeurs de tokens.
"""

# Séparateur entre deux formes plurielles
PLURAL_TAG = "#|#"

# Univers des balises de genre (l'ordre sert à l'ordre des vérifications)
GENDER_TAGS: tuple[str, ...] = (
    "#|f|#",
    "#|n|#",
    "#|c|#",
    "#|m|#",
    "#|ma|#",
    "#|mi|#",
    "#|mp|#",
)

ALL_TAGS: tuple[str, ...] = GENDER_TAGS + (PLURAL_TAG,)


def format_tag_list(tags) -> str:
    """Liste de balises pour les messages d'erreur : "#|m|#, #|f|#"."""
    return ", ".join(tags)
