"""Input/render loop tying a session to the terminal."""

from __future__ import annotations

import logging
import random
import time
from typing import Callable, Optional, Protocol

from typr.core.config import Settings
from typr.core.session import Outcome, TypingSession
from typr.core.stats import Statistics
from typr.core.words import WordRepository
from typr.ui.render import render
from typr.ui.screen import Screen
from typr.ui.terminal import text_width

logger = logging.getLogger(__name__)


class TerminalIO(Protocol):
    def read_char(self) -> str: ...

    def columns(self) -> int: ...

    def write(self, text: str) -> None: ...


class TypingTest:
    """Runs one typing test, restarting with new words on tab + space."""

    def __init__(
        self,
        repository: WordRepository,
        settings: Settings,
        terminal: TerminalIO,
        clock: Callable[[], float] = time.time,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._repository = repository
        self._settings = settings
        self._terminal = terminal
        self._screen = Screen(terminal)
        self._clock = clock
        self._rng = rng
        self._session: Optional[TypingSession] = None

    @property
    def session(self) -> Optional[TypingSession]:
        return self._session

    def new_session(self) -> TypingSession:
        """Build a session over freshly sampled words."""
        words = self._repository.sample(self._settings.length, self._settings.difficulty, self._rng)
        logger.info("New test: %d %s words", len(words), self._settings.difficulty)
        return TypingSession(words, clock=self._clock)

    def run(self) -> Optional[Statistics]:
        """Run until the test completes; return None if the user cancelled."""
        self._start()
        try:
            while True:
                try:
                    char = self._terminal.read_char()
                except EOFError:
                    logger.info("Input closed, cancelling test")
                    self._screen.show_cancelled()
                    return None

                outcome = self._session.feed(char)
                if outcome is Outcome.CANCEL:
                    logger.info("Test cancelled")
                    self._screen.show_cancelled()
                    return None
                if outcome is Outcome.RESTART:
                    logger.info("Restart requested")
                    self._start()
                    continue

                self._redraw()
                if self._session.is_complete():
                    break
        except KeyboardInterrupt:
            # SIGINT outside raw mode, e.g. while a frame is being drawn.
            logger.info("Interrupted, cancelling test")
            self._screen.show_cancelled()
            return None
        except BaseException:
            self._screen.restore()
            raise

        stats = self._session.statistics()
        logger.info("Test complete: %s WPM, %s%% accuracy", stats.wpm, stats.accuracy)
        self._screen.show_results(stats, self._terminal.columns())
        return stats

    def _start(self) -> None:
        self._session = self.new_session()
        self._screen.setup()
        self._redraw()

    def _redraw(self) -> None:
        width = text_width(self._terminal.columns(), self._settings.padding)
        self._screen.draw(render(self._session, width))
