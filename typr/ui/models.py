"""Display models produced by the renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Style(Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    UNTYPED = "untyped"
    CURSOR = "cursor"


@dataclass(frozen=True)
class Token:
    """A single displayed character and how to style it."""

    char: str
    style: Style


@dataclass
class Frame:
    """One full redraw: wrapped text lines plus the progress summary."""

    lines: list[list[Token]] = field(default_factory=list)
    progress: str = ""

    def text_lines(self) -> list[str]:
        """Visible text of each line, without styling."""
        return ["".join(token.char for token in line) for line in self.lines]
