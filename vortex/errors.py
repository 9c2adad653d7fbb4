# vortex/errors.py
from __future__ import annotations


class GrammarError(ValueError):
    """Raised while *building* a grammar (bad pattern, undefined rule, ...).

    Matching itself never raises for ordinary failure; a failed match is
    always reported as ``None``.
    """


class ParseError(SyntaxError):
    """Raised by :func:`vortex.driver.parse_strict` when the text is rejected."""

    def __init__(self, msg: str, *, offset: int, line: int, column: int, reason: str):
        super().__init__(f"{msg} at {line}:{column}")
        self.offset = offset
        self.line = line
        self.column = column
        self.reason = reason
