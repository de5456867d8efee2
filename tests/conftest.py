from __future__ import annotations

import io
import re
from typing import Iterable

import pytest


class FakeTerminal:
    """Scripted stand-in for the real terminal: replays keys, records output."""

    def __init__(self, keys: Iterable[str] = (), columns: int = 80) -> None:
        self._keys = iter(keys)
        self._columns = columns
        self.output = io.StringIO()

    def read_char(self) -> str:
        char = next(self._keys, None)
        if char is None:
            raise EOFError("input closed")
        return char

    def columns(self) -> int:
        return self._columns

    def write(self, text: str) -> None:
        self.output.write(text)

    @property
    def text(self) -> str:
        return self.output.getvalue()


@pytest.fixture()
def fake_terminal():
    return FakeTerminal


_SGR_RE = re.compile(r"\033\[[0-9;]*m")


@pytest.fixture()
def strip_ansi():
    """Remove SGR sequences from output, leaving only the visible characters."""
    return lambda text: _SGR_RE.sub("", text)

