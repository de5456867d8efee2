"""Builds a display frame from the state of a typing session.

Every word becomes a short run of tokens followed by a separating space:

  * completed words show what was committed, letter by letter, in the
    correct or incorrect style, with extra letters appended in red;
  * the current word shows typed letters the same way, the cursor on
    the next letter (or on the space after the word) and the rest gray;
  * upcoming words are gray.

Tokens are then wrapped into lines no wider than the terminal width.
"""

from __future__ import annotations

from typing import Optional

from typr.core.session import TypingSession
from typr.ui.models import Frame, Style, Token

SEPARATOR = Token(" ", Style.UNTYPED)
CURSOR_SPACE = Token(" ", Style.CURSOR)


def render(session: TypingSession, width: int) -> Frame:
    """Render ``session`` into lines of at most ``width`` visible characters."""
    completed = session.completed_words
    lines: list[list[Token]] = []
    line: list[Token] = []

    for index, word in enumerate(session.words):
        tokens = word_tokens(session, index, word, completed)
        if line and len(line) + len(tokens) > width:
            lines.append(_trim(line))
            line = list(tokens)
        else:
            line.extend(tokens)

    if line:
        lines.append(_trim(line))

    progress = f"Progress: {session.current_word_index}/{len(session.words)} words"
    return Frame(lines=lines, progress=progress)


def word_tokens(
    session: TypingSession,
    index: int,
    word: str,
    completed: Optional[dict[int, str]] = None,
) -> list[Token]:
    """Tokens for a single word, including its trailing separator."""
    if index < session.current_word_index:
        if completed is None:
            completed = session.completed_words
        return _completed_tokens(word, completed.get(index))
    if index == session.current_word_index:
        return _current_tokens(word, session.typed_chars, session.cursor)
    return _untyped(word) + [SEPARATOR]


def _completed_tokens(word: str, typed: Optional[str]) -> list[Token]:
    if typed is None:
        return [Token(char, Style.CORRECT) for char in word] + [SEPARATOR]

    tokens = []
    for position, char in enumerate(word):
        if position < len(typed):
            tokens.append(_compare(typed[position], char))
        else:
            tokens.append(Token(char, Style.UNTYPED))
    tokens.extend(Token(char, Style.INCORRECT) for char in typed[len(word):])
    tokens.append(SEPARATOR)
    return tokens


def _current_tokens(word: str, typed: str, cursor: int) -> list[Token]:
    tokens = []
    for position, char in enumerate(word):
        if position < len(typed):
            tokens.append(_compare(typed[position], char))
        elif position == cursor:
            tokens.append(Token(char, Style.CURSOR))
        else:
            tokens.append(Token(char, Style.UNTYPED))

    if len(typed) > len(word):
        tokens.extend(Token(char, Style.INCORRECT) for char in typed[len(word):])
        tokens.append(CURSOR_SPACE if cursor > len(word) else SEPARATOR)
    elif cursor >= len(word):
        tokens.append(CURSOR_SPACE)
    else:
        tokens.append(SEPARATOR)
    return tokens


def _compare(typed: str, expected: str) -> Token:
    return Token(typed, Style.CORRECT if typed == expected else Style.INCORRECT)


def _untyped(word: str) -> list[Token]:
    return [Token(char, Style.UNTYPED) for char in word]


def _trim(line: list[Token]) -> list[Token]:
    """Drop trailing separators; a cursor parked on a space stays."""
    end = len(line)
    while end and line[end - 1] == SEPARATOR:
        end -= 1
    return line[:end]
