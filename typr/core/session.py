from __future__ import annotations

import time
from enum import Enum
from typing import Callable, Optional, Sequence

from typr.core.keys import Key, classify
from typr.core.stats import Statistics, calculate_statistics


class Outcome(Enum):
    """What the host loop should do after a keystroke has been fed in."""

    CONTINUE = "continue"
    RESTART = "restart"
    CANCEL = "cancel"


class TypingSession:
    """State of a single typing test over a fixed list of words.

    The session consumes one keystroke at a time and keeps the typed
    buffer of the current word, the committed text of finished words and
    two running counters:

      * **total_chars** – characters accepted, minus characters removed
        with backspace inside a word (never negative).
      * **correct_chars** – characters that matched the target letter at
        the same position when they were typed.  Backspace does not take
        these back, so a correct letter that is erased and retyped counts
        twice.

    A fresh session is built for every attempt; restarting never reuses
    an old one.
    """

    def __init__(self, words: Sequence[str], clock: Callable[[], float] = time.time) -> None:
        """Initialize a session over ``words``; ``clock`` supplies timestamps in seconds."""
        if not words:
            raise ValueError("a typing session needs at least one word")
        self._words = tuple(words)
        self._clock = clock
        self._index = 0
        self._typed: list[str] = []
        self._completed: dict[int, str] = {}
        self._correct_chars = 0
        self._total_chars = 0
        self._start_time: Optional[float] = None
        self._end_time: Optional[float] = None
        self._tab_pending = False

    @property
    def words(self) -> tuple[str, ...]:
        """Target words, in order."""
        return self._words

    @property
    def current_word_index(self) -> int:
        """Index of the word being typed; equals ``len(words)`` once finished."""
        return self._index

    @property
    def current_word(self) -> Optional[str]:
        if self.is_finished:
            return None
        return self._words[self._index]

    @property
    def typed_chars(self) -> str:
        """Characters typed so far for the current word."""
        return "".join(self._typed)

    @property
    def cursor(self) -> int:
        """Position of the next character inside the current word."""
        return len(self._typed)

    @property
    def completed_words(self) -> dict[int, str]:
        """Committed text of finished words, keyed by word index."""
        return dict(self._completed)

    @property
    def correct_chars(self) -> int:
        return self._correct_chars

    @property
    def total_chars(self) -> int:
        return self._total_chars

    @property
    def start_time(self) -> Optional[float]:
        return self._start_time

    @property
    def end_time(self) -> Optional[float]:
        return self._end_time

    @property
    def tab_pending(self) -> bool:
        """True right after tab; a following space asks for a restart."""
        return self._tab_pending

    @property
    def is_finished(self) -> bool:
        """True when there is no current word left (no side effects)."""
        return self._index >= len(self._words)

    def feed(self, char: str) -> Outcome:
        """Dispatch one raw character from the terminal."""
        key = classify(char)
        if key is Key.INTERRUPT:
            return Outcome.CANCEL

        self._start_timer()
        if key is Key.CHARACTER:
            self.accept_character(char)
        elif key is Key.BACKSPACE:
            self.backspace()
        elif key is Key.SPACE:
            if self.press_space():
                return Outcome.RESTART
        elif key is Key.TAB:
            self.press_tab()
        else:
            self._tab_pending = False

        self.is_complete()
        return Outcome.CONTINUE

    def accept_character(self, char: str) -> None:
        """Append ``char`` to the current word and update the counters."""
        self._tab_pending = False
        if self.is_finished:
            return
        self._start_timer()

        word = self._words[self._index]
        position = len(self._typed)
        self._typed.append(char)
        self._total_chars += 1
        if position < len(word) and char == word[position]:
            self._correct_chars += 1

    def backspace(self) -> None:
        """Erase the last character, or step back into a mistyped previous word."""
        self._tab_pending = False
        if self.is_finished:
            return
        if not self._typed and not self.can_move_back():
            return

        if not self._typed:
            self._move_back()
            return
        self._typed.pop()
        self._total_chars = max(0, self._total_chars - 1)

    def can_move_back(self) -> bool:
        """Backward navigation is allowed only if no earlier word was typed correctly."""
        if self._index == 0:
            return False
        return all(
            self._completed.get(i) != self._words[i]
            for i in range(self._index)
        )

    def press_space(self) -> bool:
        """Commit the current word, or report a restart request after tab.

        Returns True when the caller should start over with a new session.
        """
        if self._tab_pending:
            self._tab_pending = False
            return True
        if self.is_finished:
            return False
        self._commit_current_word()
        return False

    def press_tab(self) -> None:
        self._tab_pending = True

    def is_complete(self) -> bool:
        """Return True once every word is done, recording the end time on transition.

        The last word finishes as soon as its buffer equals the target; no
        trailing space is needed.
        """
        if not self.is_finished and self._on_last_word() and self.typed_chars == self._words[-1]:
            self._commit_current_word()

        if self.is_finished:
            if self._end_time is None:
                self._end_time = self._clock()
            return True
        return False

    def statistics(self) -> Statistics:
        return calculate_statistics(
            start_time=self._start_time,
            end_time=self._end_time,
            words_typed=self._index,
            correct_chars=self._correct_chars,
            total_chars=self._total_chars,
        )

    def _on_last_word(self) -> bool:
        return self._index == len(self._words) - 1

    def _start_timer(self) -> None:
        if self._start_time is None:
            self._start_time = self._clock()

    def _commit_current_word(self) -> None:
        self._completed[self._index] = "".join(self._typed)
        self._index += 1
        self._typed = []

    def _move_back(self) -> None:
        self._index -= 1
        self._typed = list(self._completed.pop(self._index, ""))
