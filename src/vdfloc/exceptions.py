"""
Exceptions spécifiques au paquet vdfloc.

Deux familles d'erreurs coexistent dans vdfloc :
- les problèmes de syntaxe (balises plural/gender mal formées) ne sont PAS des
  exceptions : ce sont des messages retournés à l'appelant et collectés ;
- les erreurs de traitement (langue inconnue, erreur d'E/S, encodage inconnu,
  conversion impossible) sont levées et propagées à l'appelant, qui décide
  d'interrompre ou non le lot en cours.

Toutes les erreurs de traitement dérivent de ProcessingError.
"""


class ProcessingError(Exception):
    """Erreur de traitement (inattendue, opérationnelle)."""


class LanguageNotFoundError(ProcessingError, KeyError):
    """
    Exception levée quand aucun profil grammatical n'existe pour une langue.

    Attributes:
        language: Identifiant de langue demandé
    """

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"No plural/gender profile for language: {language!r}")

    def __str__(self) -> str:
        # KeyError.__str__ ajoute des guillemets autour du message
        return self.args[0]


class ProfileError(ProcessingError, ValueError):
    """Exception levée quand un profil grammatical (ou son fichier JSON) est invalide."""


class StreamIOError(ProcessingError, OSError):
    """Exception levée lors d'un échec de lecture, d'écriture ou de positionnement."""


class UnknownEncodingError(ProcessingError, LookupError):
    """
    Exception levée quand un nom d'encodage est inconnu ou non supporté.

    Attributes:
        encoding_name: Nom d'encodage demandé
    """

    def __init__(self, encoding_name: str, reason: str = ""):
        self.encoding_name = encoding_name
        message = f"invalid encoding: {encoding_name}"
        if reason:
            message += f" {reason}"
        super().__init__(message)


class TranscodeError(ProcessingError, ValueError):
    """
    Exception levée quand un texte ne peut pas être converti dans l'encodage cible.

    Attributes:
        buffer: Texte fautif
        encoding_name: Encodage cible
    """

    def __init__(self, buffer: str, encoding_name: str, cause: Exception):
        self.buffer = buffer
        self.encoding_name = encoding_name
        super().__init__(f"Unable to convert {buffer!r} to {encoding_name} - {cause}")

    def __repr__(self) -> str:
        return f"TranscodeError(encoding={self.encoding_name!r}, buffer={self.buffer!r})"
