# vortex/cursor.py
"""Immutable input position.

A Cursor never changes; ``advance`` builds a new one. Line numbers are 1-based,
columns count codepoints since the last line break.
"""

from __future__ import annotations
from dataclasses import dataclass
import regex as re

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class Cursor:
    text: str
    offset: int = 0
    line: int = 1
    column: int = 0

    @classmethod
    def start(cls, text: str) -> "Cursor":
        return cls(text)

    def peek(self, n: int) -> str:
        """Up to `n` codepoints from the current offset (clamped at end)."""
        if n <= 0:
            return ""
        return self.text[self.offset:self.offset + n]

    def advance(self, n: int) -> "Cursor":
        if n < 0 or self.offset + n > len(self.text):
            raise ValueError(f"cannot advance {n} from offset {self.offset} (length {len(self.text)})")
        if n == 0:
            return self
        chunk = self.text[self.offset:self.offset + n]

        # '\n' finishing a "\r\n" that the previous advance split
        skip = 0
        if chunk[0] == "\n" and self.offset > 0 and self.text[self.offset - 1] == "\r":
            skip = 1

        breaks = list(_LINE_BREAK.finditer(chunk, skip))
        if breaks:
            line = self.line + len(breaks)
            column = len(chunk) - breaks[-1].end()
        elif skip:
            line = self.line
            column = len(chunk) - 1
        else:
            line = self.line
            column = self.column + n
        return Cursor(self.text, self.offset + n, line, column)

    def at_end(self) -> bool:
        return self.offset == len(self.text)

    @property
    def remaining(self) -> str:
        return self.text[self.offset:]

    def __repr__(self) -> str:
        return f"Cursor(offset={self.offset}, line={self.line}, column={self.column})"
