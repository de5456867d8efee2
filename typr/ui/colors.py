"""ANSI palette and styling of display tokens."""

from __future__ import annotations

from typing import Iterable

from typr.ui.models import Style, Token


class TerminalColors:
    """SGR sequences for the four text styles."""

    GRAY = "\033[90m"
    WHITE = "\033[97m"
    RED = "\033[91m"
    RESET = "\033[0m"

    # Translucent block drawn under the next character to type.
    CURSOR = "\033[0m\033[100m\033[37m"


STYLE_CODES = {
    Style.UNTYPED: TerminalColors.GRAY,
    Style.CORRECT: TerminalColors.WHITE,
    Style.INCORRECT: TerminalColors.RED,
    Style.CURSOR: TerminalColors.CURSOR,
}


def colorize(text: str, style: Style) -> str:
    """Wrap ``text`` in the SGR codes for ``style``."""
    return f"{STYLE_CODES[style]}{text}{TerminalColors.RESET}"


def paint(tokens: Iterable[Token]) -> str:
    """Turn a token line into an ANSI string, merging runs of the same style."""
    parts = []
    run_style = None
    run: list[str] = []
    for token in tokens:
        if token.style is not run_style and run:
            parts.append(colorize("".join(run), run_style))
            run = []
        run_style = token.style
        run.append(token.char)
    if run:
        parts.append(colorize("".join(run), run_style))
    return "".join(parts)
