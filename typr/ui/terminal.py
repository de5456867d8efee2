"""Raw single-character input and size queries for a POSIX terminal."""

from __future__ import annotations

import shutil
import sys
import termios
import tty
from typing import Optional, TextIO

MIN_WIDTH = 20


class Terminal:
    """Thin wrapper around the controlling terminal.

    Raw mode is only held while a character is being read, so output in
    between keeps the normal newline translation.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout

    def is_interactive(self) -> bool:
        """True when stdin is a terminal that raw mode can be applied to."""
        return self._stdin.isatty()

    def read_char(self) -> str:
        """Block until one key is pressed and return it, unbuffered and unechoed."""
        fd = self._stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            char = self._stdin.read(1)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
        if not char:
            raise EOFError("input closed")
        return char

    def columns(self) -> int:
        return shutil.get_terminal_size(fallback=(80, 24)).columns

    def write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()


def text_width(columns: int, padding: int) -> int:
    """Width available for the passage after leaving ``padding`` columns free."""
    return max(MIN_WIDTH, columns - padding)
