from __future__ import annotations

import logging
import random
import re
from pathlib import Path
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_WORD_FILE = Path(__file__).resolve().parent.parent / "data" / "words.txt"

DIFFICULTY_FILTERS: dict[str, Callable[[str], bool]] = {
    "easy": lambda word: len(word) < 5,
    "normal": lambda word: len(word) < 7,
    "hard": lambda word: len(word) < 10,
    "masochist": lambda word: len(word) > 11,
}

_WORD_RE = re.compile(r"^[a-zA-Z]+$")
MIN_WORD_LENGTH = 3


def difficulty_filter(difficulty: str) -> Callable[[str], bool]:
    """Return the length predicate for a difficulty name."""
    try:
        return DIFFICULTY_FILTERS[difficulty]
    except KeyError:
        valid = ", ".join(DIFFICULTY_FILTERS)
        raise ValueError(f"unknown difficulty {difficulty!r} (expected one of: {valid})") from None


class WordRepository:
    """Read-only list of candidate words, loaded once at startup."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path(path) if path is not None else DEFAULT_WORD_FILE
        self._words = self._load_words()

    @property
    def path(self) -> Path:
        return self._path

    def all(self) -> list[str]:
        return list(self._words)

    def candidates(self, difficulty: str) -> list[str]:
        keep = difficulty_filter(difficulty)
        return [word for word in self._words if keep(word)]

    def sample(self, count: int, difficulty: str, rng: Optional[random.Random] = None) -> list[str]:
        """Draw ``count`` distinct words for a test at the given difficulty."""
        if count < 1:
            raise ValueError(f"word count must be at least 1, got {count}")
        pool = self.candidates(difficulty)
        if not pool:
            raise ValueError(f"{self._path.name}: no words match difficulty {difficulty!r}")
        if count > len(pool):
            logger.warning(
                "Only %d %s words available, using all of them instead of %d",
                len(pool),
                difficulty,
                count,
            )
            count = len(pool)
        return (rng or random).sample(pool, count)

    def _load_words(self) -> tuple[str, ...]:
        if not self._path.exists():
            raise FileNotFoundError(f"Word list not found: {self._path}")

        words: list[str] = []
        skipped = 0
        for line in self._path.read_text(encoding="utf-8").splitlines():
            word = line.strip()
            if not word:
                continue
            if not _WORD_RE.match(word) or len(word) < MIN_WORD_LENGTH:
                skipped += 1
                continue
            words.append(word.lower())

        if not words:
            raise ValueError(f"{self._path.name}: word list has no usable words")
        if skipped:
            logger.info("Skipped %d unusable entries in %s", skipped, self._path)
        logger.info("Loaded %d words from %s", len(words), self._path)
        return tuple(words)
