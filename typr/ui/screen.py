"""Drawing of frames and result screens with VT100 control sequences."""

from __future__ import annotations

from typing import Protocol

from typr.core.stats import Statistics
from typr.ui.colors import paint
from typr.ui.models import Frame

CLEAR_SCREEN = "\033[2J\033[H"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
TEXT_ROW = 3
MAX_BANNER_WIDTH = 50


class Output(Protocol):
    def write(self, text: str) -> None: ...


def move_to(row: int, column: int = 1) -> str:
    return f"\033[{row};{column}H"


class Screen:
    """Writes the test UI to an output that accepts text."""

    def __init__(self, output: Output) -> None:
        self._output = output

    def setup(self) -> None:
        """Clear the screen, hide the real cursor and print the header."""
        self._output.write(CLEAR_SCREEN + HIDE_CURSOR + "Type the text below:\n")

    def draw(self, frame: Frame) -> None:
        """Replace everything below the header with ``frame``."""
        body = "\n".join(paint(line) for line in frame.lines)
        body += f"\n\n{frame.progress}"
        self._output.write(move_to(TEXT_ROW) + "\033[J" + body + move_to(TEXT_ROW))

    def show_results(self, stats: Statistics, banner_width: int) -> None:
        banner = "=" * min(banner_width, MAX_BANNER_WIDTH)
        lines = [
            banner,
            "Test Complete!",
            banner,
            f"WPM: {stats.wpm}",
            f"Time: {stats.duration} seconds",
            f"Words typed: {stats.words_typed}",
            f"Accuracy: {stats.accuracy}%",
            f"Correct characters: {stats.correct_chars}/{stats.total_chars}",
        ]
        self._output.write(CLEAR_SCREEN + SHOW_CURSOR + "\n".join(lines) + "\n")

    def show_cancelled(self) -> None:
        self._output.write(CLEAR_SCREEN + SHOW_CURSOR + "Test cancelled.\n")

    def restore(self) -> None:
        """Make the real cursor visible again."""
        self._output.write(SHOW_CURSOR)
