# vortex/combinators.py
"""Matchers and the constructors that build them.

A matcher is called with a :class:`~vortex.cursor.Cursor` and returns either
``None`` (no match) or ``(node, next_cursor)``. Matchers keep nothing but
their configuration, so calling one twice on the same cursor gives the same
result, and a failed branch leaves nothing behind.

Composites accept bare text wherever a matcher is expected; it is lifted to
``string(text)``.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple, Union

from .charclass import CharClass
from .cursor import Cursor
from .errors import GrammarError
from .node import Node
from .visitor import NO_TRANSFORM, NoTransform, Visitor, as_visitor

Match = Optional[Tuple[Node, Cursor]]


class Matcher:
    def __call__(self, cursor: Cursor) -> Match:
        raise NotImplementedError

    def nullable(self) -> bool:
        """True if this matcher can succeed without consuming input."""
        return False

    def __or__(self, other: Any) -> "Choice":
        return either(self, other)

    def __ror__(self, other: Any) -> "Choice":
        return either(other, self)


MatcherLike = Union[Matcher, str]


def lift(m: MatcherLike) -> Matcher:
    if isinstance(m, Matcher):
        return m
    if isinstance(m, str):
        return string(m)
    raise GrammarError(f"expected a matcher or literal text, got {type(m).__name__}")


def _lift_all(ms: Iterable[MatcherLike]) -> Tuple[Matcher, ...]:
    if isinstance(ms, (str, Matcher)):
        raise GrammarError("expected a list of matchers")
    return tuple(lift(m) for m in ms)


def _transform_children(visitor: Visitor, children: Any) -> Any:
    if isinstance(children, tuple):
        children = list(children)
    return visitor(children)


# ---- primitives ----

@dataclass(frozen=True)
class Literal(Matcher):
    text: str
    label: str = "str"
    visitor: Visitor = NO_TRANSFORM

    def __call__(self, cursor: Cursor) -> Match:
        n = len(self.text)
        chunk = cursor.peek(n)
        if chunk != self.text:
            return None
        return Node(self.label, (self.visitor(chunk),)), cursor.advance(n)

    def nullable(self) -> bool:
        return self.text == ""


@dataclass(frozen=True)
class Char(Matcher):
    cls: CharClass
    label: str = "char"
    visitor: Visitor = NO_TRANSFORM

    def __call__(self, cursor: Cursor) -> Match:
        ch = cursor.peek(1)
        if not self.cls.matches(ch):
            return None
        return Node(self.label, (self.visitor(ch),)), cursor.advance(1)


# ---- composites ----

@dataclass(frozen=True)
class Seq(Matcher):
    items: Tuple[Matcher, ...]
    label: str = "seq"
    visitor: Visitor = NO_TRANSFORM

    def __call__(self, cursor: Cursor) -> Match:
        cur = cursor
        children = []
        for m in self.items:
            r = m(cur)
            if r is None:
                return None
            node, cur = r
            children.append(node)
        return Node(self.label, self.visitor(children)), cur

    def nullable(self) -> bool:
        return all(m.nullable() for m in self.items)


@dataclass(frozen=True)
class Choice(Matcher):
    """Ordered choice: the first alternative that matches wins.

    The winning node is returned as is unless a label override or a visitor
    was configured, in which case it is relabeled / its children transformed.
    """
    alts: Tuple[Matcher, ...]
    label: Optional[str] = None
    visitor: Visitor = NO_TRANSFORM

    def __call__(self, cursor: Cursor) -> Match:
        for m in self.alts:
            r = m(cursor)
            if r is None:
                continue
            node, cur = r
            if self.label is None and isinstance(self.visitor, NoTransform):
                return r
            label = node.label if self.label is None else self.label
            return Node(label, _transform_children(self.visitor, node.children)), cur
        return None

    def nullable(self) -> bool:
        return any(m.nullable() for m in self.alts)


@dataclass(frozen=True)
class Repeat(Matcher):
    """Greedy repetition, at least `minimum` times."""
    node: Matcher
    minimum: int
    label: str = "rep"
    visitor: Visitor = NO_TRANSFORM

    def __call__(self, cursor: Cursor) -> Match:
        if self.minimum < 0:
            return None
        cur = cursor
        children = []
        while True:
            r = self.node(cur)
            if r is None:
                break
            node, nxt = r
            # a zero-width success would repeat forever
            if nxt.offset == cur.offset:
                break
            children.append(node)
            cur = nxt
        if len(children) < self.minimum:
            return None
        return Node(self.label, self.visitor(children)), cur

    def nullable(self) -> bool:
        if self.minimum < 0:
            return False
        return self.minimum == 0 or self.node.nullable()


@dataclass(frozen=True)
class Opt(Matcher):
    node: Matcher
    label: str = "opt"
    visitor: Visitor = NO_TRANSFORM

    def __call__(self, cursor: Cursor) -> Match:
        r = self.node(cursor)
        if r is not None:
            return r
        return Node(self.label, self.visitor([])), cursor

    def nullable(self) -> bool:
        return True


# ---- constructors ----

def string(expected: str, label: str = "str", visitor: Any = NO_TRANSFORM) -> Literal:
    """Match `expected` literally."""
    if not isinstance(expected, str):
        raise GrammarError(f"string() expects text, got {type(expected).__name__}")
    return Literal(expected, label, as_visitor(visitor))


def char(pattern: str, label: str = "char", visitor: Any = NO_TRANSFORM) -> Char:
    """Match one codepoint from the character class `pattern` (e.g. ``"0-9"``)."""
    return Char(CharClass.compile(pattern), label, as_visitor(visitor))


def seq(matchers: Iterable[MatcherLike], label: str = "seq", visitor: Any = NO_TRANSFORM) -> Seq:
    return Seq(_lift_all(matchers), label, as_visitor(visitor))


def alt(matchers: Iterable[MatcherLike], label: Optional[str] = None, visitor: Any = NO_TRANSFORM) -> Choice:
    return Choice(_lift_all(matchers), label, as_visitor(visitor))


def rep(matcher: MatcherLike, minimum: int, label: str = "rep", visitor: Any = NO_TRANSFORM) -> Repeat:
    """Greedy repetition of `matcher`, succeeding on at least `minimum` matches.

    A negative `minimum` is accepted and yields a matcher that never matches.
    Repeating something that can match the empty string is rejected here,
    since it could never make progress.
    """
    m = lift(matcher)
    if minimum >= 0 and m.nullable():
        raise GrammarError(f"rep() over a matcher that can match empty input: {m!r}")
    return Repeat(m, minimum, label, as_visitor(visitor))


def opt(matcher: MatcherLike, label: str = "opt", visitor: Any = NO_TRANSFORM) -> Opt:
    return Opt(lift(matcher), label, as_visitor(visitor))


def either(a: MatcherLike, b: MatcherLike) -> Choice:
    """``alt([a, b])`` where either side may be bare text."""
    return alt([a, b])
