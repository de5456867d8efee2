"""Application entry point and setup for the Typr typing test."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from typr.core.config import load_settings
from typr.core.words import DIFFICULTY_FILTERS, WordRepository
from typr.runner import TypingTest
from typr.ui.terminal import Terminal

logger = logging.getLogger(__name__)

DEFAULT_LOG_FILE = Path.home() / ".typr" / "typr.log"


def configure_logging(log_file: Optional[Path] = None, verbose: bool = False) -> None:
    """Configure application-wide logging with a standard format.

    Stdout is the drawing surface, so verbose output always goes to a
    file: ``log_file`` when one is set, ``~/.typr/typr.log`` otherwise.
    Without either, only warnings reach stderr.
    """
    if verbose and log_file is None:
        log_file = DEFAULT_LOG_FILE
        log_file.parent.mkdir(parents=True, exist_ok=True)
    level = logging.INFO if log_file else logging.WARNING
    kwargs = {"filename": str(log_file), "encoding": "utf-8"} if log_file else {}
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        **kwargs,
    )


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typr",
        description="Measure typing speed and accuracy in the terminal. "
        "Space moves to the next word, backspace fixes mistakes, "
        "tab then space restarts, Ctrl+C quits.",
    )
    parser.add_argument(
        "-l", "--length", type=positive_int, metavar="NUMBER",
        help="number of words to generate (default: 25)",
    )
    parser.add_argument(
        "-d", "--difficulty", choices=list(DIFFICULTY_FILTERS), metavar="LEVEL",
        help="easy (<5 chars), normal (<7 chars), hard (<10 chars), "
        "masochist (>11 chars) (default: normal)",
    )
    parser.add_argument(
        "-w", "--word-file", type=Path, metavar="PATH",
        help="word list to draw from, one word per line",
    )
    parser.add_argument(
        "-c", "--config", type=Path, metavar="PATH",
        help="settings file (default: ~/.typr/config.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="log progress to the settings' log_file (default: ~/.typr/typr.log)",
    )
    return parser


def run(argv: Optional[list[str]] = None) -> int:
    """Load settings and words, then run the test; return the exit code."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config).with_overrides(
            length=args.length,
            difficulty=args.difficulty,
            word_file=args.word_file,
        )
    except (FileNotFoundError, ValueError) as e:
        configure_logging()
        logger.error("Could not load settings: %s", e)
        print(f"typr: {e}", file=sys.stderr)
        return 1

    try:
        configure_logging(settings.log_file, verbose=args.verbose)
    except OSError as e:
        print(f"typr: cannot open log file: {e}", file=sys.stderr)
        return 1

    try:
        repository = WordRepository(settings.word_file)
        # Fail before the terminal is touched if no test can be generated.
        repository.sample(settings.length, settings.difficulty)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Could not prepare a test: %s", e)
        print(f"typr: {e}", file=sys.stderr)
        return 1

    terminal = Terminal()
    if not terminal.is_interactive():
        logger.error("Standard input is not a terminal")
        print("typr: standard input is not a terminal", file=sys.stderr)
        return 1

    TypingTest(repository, settings, terminal).run()
    return 0


def main() -> None:
    sys.exit(run())
