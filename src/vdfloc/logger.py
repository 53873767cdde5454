"""
Module de configuration du logging pour vdfloc.

Ce module fournit une fonction centralisée pour configurer le système de logging
avec sortie console et fichier. Tous les modules du paquet obtiennent leur logger
via get_logger(__name__) pour une configuration cohérente.

Fonctionnalités :
- Regroupement des logs par session d'exécution dans <log_dir>/run_YYYYMMDD_HHMMSS/
- Création différée du répertoire de session et des fichiers (aucun fichier
  vide, rien n'est créé tant qu'aucun message n'est écrit)
- Console compatible avec les barres de progression tqdm
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Callable, Optional, Union

from tqdm import tqdm

from .config import Logger_Level, Log_Settings


# ============================================================
# 🔹 Gestionnaire de session de logs
# ============================================================


class LogSession:
    """
    Gestionnaire singleton pour regrouper tous les logs d'une exécution.

    Le nom du répertoire (run_YYYYMMDD_HHMMSS) est fixé au premier appel,
    mais le répertoire n'est créé sur disque qu'au premier message écrit
    par un LazyFileHandler.
    """

    _instance: Optional["LogSession"] = None
    _session_dir: Optional[Path] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        # Éviter la ré-initialisation
        if LogSession._session_dir is not None:
            return

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        base_dir = Path(Log_Settings().log_dir)
        LogSession._session_dir = base_dir / f"run_{timestamp}"

    @classmethod
    def get_session_dir(cls) -> Path:
        """Retourne le répertoire de la session en cours (sans le créer)."""
        if cls._session_dir is None:
            cls()  # Initialiser si pas encore fait
        assert cls._session_dir is not None
        return cls._session_dir

    @classmethod
    def reset(cls):
        """Reset la session (utile pour les tests)."""
        cls._instance = None
        cls._session_dir = None


# ============================================================
# 🔹 Handlers de logging
# ============================================================


class TqdmLoggingHandler(logging.Handler):
    """
    Handler de logging compatible avec tqdm.

    Utilise tqdm.write() pour afficher les logs sans perturber
    les barres de progression de la CLI.
    """

    def __init__(self, level=logging.NOTSET):
        super().__init__(level)

    def emit(self, record):
        try:
            msg = self.format(record)
            tqdm.write(msg, file=sys.stderr)
        except Exception:
            self.handleError(record)


class LazyFileHandler(logging.Handler):
    """
    Handler qui crée le fichier de log seulement au premier message.

    Le chemin peut être donné directement ou via une fonction appelée au
    premier message (permet de différer aussi la création du répertoire
    de session).
    """

    def __init__(
        self,
        filename: Union[Path, Callable[[], Path]],
        mode: str = "a",
        encoding: str = "utf-8",
        level: int = logging.NOTSET,
    ):
        super().__init__(level)
        self._filename = filename
        self.mode = mode
        self.encoding = encoding
        self._handler: Optional[logging.FileHandler] = None

    @property
    def filename(self) -> Path:
        if callable(self._filename):
            return self._filename()
        return self._filename

    def _ensure_handler(self):
        """Crée le FileHandler sous-jacent si pas encore fait."""
        if self._handler is None:
            path = self.filename
            path.parent.mkdir(parents=True, exist_ok=True)
            self._handler = logging.FileHandler(
                path,
                mode=self.mode,
                encoding=self.encoding,
            )
            if self.formatter:
                self._handler.setFormatter(self.formatter)

    def emit(self, record):
        """Émet un log, en créant le fichier si nécessaire."""
        try:
            self._ensure_handler()
            if self._handler:
                self._handler.emit(record)
        except Exception:
            self.handleError(record)

    def close(self):
        """Ferme le handler sous-jacent si existant."""
        if self._handler:
            self._handler.close()
        super().close()


# ============================================================
# 🔹 Configuration des loggers
# ============================================================


def setup_logger(
    name: str,
    log_dir: Optional[str] = None,
    level: Optional[int] = None,
    console_level: Optional[int] = None,
    file_level: Optional[int] = None,
    log_filename: str = "vdfloc.log",
) -> logging.Logger:
    """
    Configure un logger avec sortie console et fichier.

    Les niveaux non fournis sont lus dans Logger_Level au moment de l'appel.

    Args:
        name: Nom du logger (généralement __name__ du module)
        log_dir: Répertoire des logs (None = session automatique via LogSession)
        level: Niveau de logging global du logger
        console_level: Niveau de logging pour la sortie console
        file_level: Niveau de logging pour le fichier
        log_filename: Nom du fichier de log (défaut: "vdfloc.log")

    Returns:
        Logger configuré avec handlers console et fichier

    Example:
        >>> logger = setup_logger(__name__)
        >>> logger.info("Validation démarrée")

    Note:
        Le handler fichier est toujours attaché mais n'écrit rien (et ne crée
        aucun répertoire) tant que Log_Settings().file_logging est False.
        Les loggers de modules sont créés à l'import : la CLI peut ainsi activer
        les fichiers après coup.
    """
    levels = Logger_Level()
    logger = logging.getLogger(name)
    logger.setLevel(levels.level if level is None else level)

    # Éviter d'ajouter des handlers multiples si déjà configuré
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = TqdmLoggingHandler()
    console_handler.setLevel(levels.console_level if console_level is None else console_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir is None:
        target: Union[Path, Callable[[], Path]] = lambda: get_session_log_path(log_filename)
    else:
        target = Path(log_dir) / log_filename

    file_handler = LazyFileHandler(filename=target, mode="a", encoding="utf-8")
    file_handler.setLevel(levels.file_level if file_level is None else file_level)
    file_handler.setFormatter(formatter)
    file_handler.addFilter(_file_logging_enabled)
    logger.addHandler(file_handler)

    return logger


def _file_logging_enabled(record: logging.LogRecord) -> bool:
    return Log_Settings().file_logging


def get_logger(name: str, log_filename: Optional[str] = None) -> logging.Logger:
    """
    Récupère un logger existant ou en crée un nouveau avec la configuration par défaut.

    Args:
        name: Nom du logger (généralement __name__ du module)
        log_filename: Nom optionnel du fichier de log (None = "vdfloc.log")

    Returns:
        Logger configuré

    Example:
        >>> logger = get_logger(__name__, "encoding.log")
        >>> logger.debug("BOM utf-16LE détecté")
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        return setup_logger(name, log_filename=log_filename or "vdfloc.log")

    return logger


def set_console_level(level: int, prefix: str = "vdfloc") -> None:
    """
    Change le niveau console de tous les loggers du paquet déjà configurés.

    Args:
        level: Nouveau niveau (ex: logging.DEBUG)
        prefix: Préfixe des noms de loggers concernés
    """
    Logger_Level().console_level = level

    for name, logger in logging.Logger.manager.loggerDict.items():
        if not name.startswith(prefix) or not isinstance(logger, logging.Logger):
            continue
        if level < logger.level:
            logger.setLevel(level)
        for handler in logger.handlers:
            if isinstance(handler, TqdmLoggingHandler):
                handler.setLevel(level)


def get_session_log_path(filename: str) -> Path:
    """
    Retourne le chemin complet d'un fichier de log dans le répertoire de session.

    Args:
        filename: Nom du fichier de log (ex: "check_french.log")

    Returns:
        Chemin complet : <log_dir>/run_YYYYMMDD_HHMMSS/filename
    """
    return LogSession.get_session_dir() / filename
