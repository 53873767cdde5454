import logging


class ConfigBase:
    # Attribut de classe pour le singleton
    _instance = None
    _locked: bool = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def lock(self):
        self._locked = True

    def unlock(self):
        # object.__setattr__ pour contourner le verrou
        object.__setattr__(self, "_locked", False)

    def __setattr__(self, name, value):
        if getattr(self, "_locked", False):
            raise AttributeError("Configuration is locked")
        super().__setattr__(name, value)


class Logger_Level(ConfigBase):
    level: int = logging.INFO
    console_level: int = logging.ERROR
    file_level: int = logging.DEBUG


class Log_Settings(ConfigBase):
    log_dir: str = "logs"
    file_logging: bool = False  # True = fichiers de session (activé par la CLI)


class Encoding_Settings(ConfigBase):
    probe_length: int = 128 * 1024  # au-delà, le reste du fichier est supposé utf-8
    default_encoding: str = "UTF8"  # pas de repli dépendant de l'OS


def lock_config():
    """Verrouille la configuration pour empêcher les modifications ultérieures."""
    Logger_Level().lock()
    Log_Settings().lock()
    Encoding_Settings().lock()


def unlock_config():
    """Déverrouille la configuration (utile pour les tests)."""
    Logger_Level().unlock()
    Log_Settings().unlock()
    Encoding_Settings().unlock()
