"""
Point d'entrée en ligne de commande de vdfloc.

Commandes :
- detect FICHIER... : affiche l'encodage détecté de chaque fichier
- transcode SRC DST --to LABEL : réécrit un fichier dans un autre encodage
- check TOKENS_JSON --lang LANGUE : valide un objet JSON {token: valeur}

Les variables d'environnement (ou un fichier .env) permettent de configurer
les profils (VDFLOC_PROFILES), le niveau de log console (VDFLOC_LOG_LEVEL) et
les fichiers de log (VDFLOC_LOG_DIR : sans elle, aucun fichier n'est écrit).
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from tqdm import tqdm

from .config import Log_Settings
from .encoding import EncodingLabel, detect, open_writer, read_text
from .exceptions import ProcessingError
from .logger import get_logger, set_console_level
from .profiles import GrammarProfiles
from .validator import GrammarValidator

logger = get_logger("vdfloc.cli")

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vdfloc",
        description="Validation plural/gender et transcodage des fichiers de localisation",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_detect = subparsers.add_parser("detect", help="Affiche l'encodage détecté")
    p_detect.add_argument("files", nargs="+", type=Path)

    labels = [label.value for label in EncodingLabel]
    p_transcode = subparsers.add_parser("transcode", help="Réécrit un fichier dans un autre encodage")
    p_transcode.add_argument("source", type=Path)
    p_transcode.add_argument("destination", type=Path)
    p_transcode.add_argument("--to", dest="target", required=True, type=str.upper, choices=labels)
    p_transcode.add_argument(
        "--from", dest="source_encoding", default="",
        help="Encodage de la source si elle n'a pas de BOM (défaut: sondage utf-8)",
    )

    p_check = subparsers.add_parser("check", help="Valide un fichier JSON {token: valeur}")
    p_check.add_argument("tokens", type=Path)
    p_check.add_argument("--lang", required=True)
    p_check.add_argument("--profiles", type=Path, default=None)

    return parser


def _apply_environment() -> None:
    """Applique les variables d'environnement à la configuration."""
    # Fichiers de log uniquement sur demande
    log_dir = os.getenv("VDFLOC_LOG_DIR")
    if log_dir:
        settings = Log_Settings()
        settings.log_dir = log_dir
        settings.file_logging = True

    level_name = os.getenv("VDFLOC_LOG_LEVEL")
    if level_name:
        level = logging.getLevelName(level_name.upper())
        if isinstance(level, int):
            set_console_level(level)
        else:
            logger.warning(f"VDFLOC_LOG_LEVEL ignoré : niveau inconnu {level_name!r}")


def load_profiles(path: Optional[Path]) -> GrammarProfiles:
    """Charge les profils : --profiles, puis VDFLOC_PROFILES, puis profils livrés."""
    if path is None and os.getenv("VDFLOC_PROFILES"):
        path = Path(os.environ["VDFLOC_PROFILES"])
    if path is None:
        return GrammarProfiles.load_default()
    return GrammarProfiles.from_json(path)


def cmd_detect(args: argparse.Namespace) -> int:
    files: list[Path] = args.files
    status = EXIT_OK

    for path in tqdm(files, desc="Détection", unit="fichier", disable=len(files) < 2):
        try:
            with open(path, "rb") as f:
                _, decision = detect(f)
        except (OSError, ProcessingError) as e:
            tqdm.write(f"{path}: error: {e}", file=sys.stderr)
            status = EXIT_ERROR
            continue
        tqdm.write(f"{path}: {decision.label.value}")

    return status


def cmd_transcode(args: argparse.Namespace) -> int:
    text, decision = read_text(args.source, args.source_encoding)
    logger.info(f"Transcodage {args.source} ({decision}) -> {args.destination} ({args.target})")

    with open(args.destination, "wb") as f:
        with open_writer(f, args.target) as writer:
            writer.write(text)

    print(f"{args.source}: {decision.label.value} -> {args.destination}: {args.target}")
    return EXIT_OK


def cmd_check(args: argparse.Namespace) -> int:
    validator = GrammarValidator(load_profiles(args.profiles))

    text, _ = read_text(args.tokens)
    tokens = json.loads(text) if text.strip() else {}
    if not isinstance(tokens, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in tokens.items()
    ):
        print(f"{args.tokens}: expected a JSON object of token -> string value", file=sys.stderr)
        return EXIT_ERROR

    report = validator.validate_tokens(tokens, args.lang)
    for issue in report.issues:
        print(issue)

    print(f"{report.checked} token(s) checked, {len(report.issues)} issue(s)")
    return EXIT_OK if report.is_valid else EXIT_ISSUES


def main(argv: Optional[list[str]] = None) -> int:
    """
    Point d'entrée principal du programme.

    Returns:
        0 si tout est correct, 1 si des problèmes de syntaxe ont été relevés,
        2 en cas d'erreur de traitement
    """
    load_dotenv()
    args = build_parser().parse_args(argv)
    _apply_environment()

    try:
        match args.command:
            case "detect":
                return cmd_detect(args)
            case "transcode":
                return cmd_transcode(args)
            case "check":
                return cmd_check(args)
            case _:
                raise ValueError(f"Unknown command: {args.command}")
    except (ProcessingError, UnicodeError, json.JSONDecodeError, OSError) as e:
        logger.debug(f"{args.command} échoué : {e}", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
