# vortex/charclass.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Pattern
import regex as re

from .errors import GrammarError


@dataclass(frozen=True)
class CharClass:
    """Character class given by its bracket body, e.g. ``"0-9"`` or ``"a-zA-Z."``.

    The body is used as-is inside ``[...]``, so ranges, escapes and a leading
    ``^`` behave as they do in a regular expression.
    """
    pattern: str
    _re: Pattern[str] = field(repr=False, compare=False)

    @classmethod
    def compile(cls, pattern: str) -> "CharClass":
        if not isinstance(pattern, str) or not pattern:
            raise GrammarError(f"character class pattern must be a non-empty string, got {pattern!r}")
        try:
            rx = re.compile(f"[{pattern}]")
        except re.error as e:
            raise GrammarError(f"invalid character class {pattern!r}: {e}") from e
        return cls(pattern, rx)

    @classmethod
    def of(cls, chars: str) -> "CharClass":
        """Class matching exactly the characters in `chars`."""
        if not chars:
            raise GrammarError("one_of() needs at least one character")
        return cls.compile("".join(re.escape(c) for c in chars))

    def matches(self, ch: str) -> bool:
        return len(ch) == 1 and self._re.fullmatch(ch) is not None
