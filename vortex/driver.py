# vortex/driver.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .combinators import Matcher
from .cursor import Cursor
from .errors import ParseError
from .node import Node

OK = "ok"
NO_MATCH = "no_match"
PARTIAL = "partial"


@dataclass(frozen=True)
class ParseOutcome:
    """Result of running a grammar over a whole text.

    reason:
      - "ok"        grammar matched and consumed everything
      - "no_match"  grammar did not match at offset 0
      - "partial"   grammar matched a prefix; `cursor` is where it stopped
    """
    node: Optional[Node]
    cursor: Cursor
    reason: str

    @property
    def ok(self) -> bool:
        return self.reason == OK


def parse_outcome(text: str, grammar: Matcher) -> ParseOutcome:
    start = Cursor.start(text)
    r = grammar(start)
    if r is None:
        return ParseOutcome(None, start, NO_MATCH)
    node, cur = r
    if not cur.at_end():
        return ParseOutcome(None, cur, PARTIAL)
    return ParseOutcome(node, cur, OK)


def parse(text: str, grammar: Matcher) -> Optional[Node]:
    """Parse all of `text`; None if the grammar fails or leaves input over."""
    return parse_outcome(text, grammar).node


def parse_strict(text: str, grammar: Matcher) -> Node:
    out = parse_outcome(text, grammar)
    if out.ok:
        return out.node  # type: ignore[return-value]
    cur = out.cursor
    if out.reason == PARTIAL:
        msg = f"unexpected input {cur.peek(10)!r}"
    else:
        msg = "no match"
    raise ParseError(msg, offset=cur.offset, line=cur.line, column=cur.column, reason=out.reason)
