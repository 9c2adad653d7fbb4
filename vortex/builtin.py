# vortex/builtin.py
"""Shorthands built from the core combinators."""

from __future__ import annotations
from typing import Any

from .charclass import CharClass
from .combinators import Char, Choice, MatcherLike, Repeat, Seq, alt, rep, seq, lift, opt
from .visitor import NO_TRANSFORM, as_visitor


def many1(m: MatcherLike, label: str = "rep", visitor: Any = NO_TRANSFORM) -> Repeat:
    return rep(m, 1, label, visitor)


def choice(*ms: MatcherLike) -> Choice:
    return alt(list(ms))


def one_of(chars: str, label: str = "char", visitor: Any = NO_TRANSFORM) -> Char:
    """One character out of `chars`, taken literally (no ranges)."""
    return Char(CharClass.of(chars), label, as_visitor(visitor))


def between(open_: MatcherLike, m: MatcherLike, close: MatcherLike,
            label: str = "seq", visitor: Any = NO_TRANSFORM) -> Seq:
    return seq([open_, m, close], label, visitor)


def _flatten_sep_by(children: list) -> list:
    # [first, rep[seq[sep, item], ...]]  ->  [first, sep, item, ...]
    first, tail = children
    out = [first]
    for pair in tail.children:
        out.extend(pair.children)
    return out


def sep_by(item: MatcherLike, separator: MatcherLike, minimum: int = 0,
           label: str = "sep_by") -> Any:
    """`item` repeated, separated by `separator`, at least `minimum` items.

    Children alternate item and separator nodes in input order. A trailing
    separator is not consumed. A negative `minimum` never matches.
    """
    if minimum < 0:
        return rep(item, minimum, label)
    item, separator = lift(item), lift(separator)
    tail = rep(seq([separator, item]), max(minimum - 1, 0))
    some = seq([item, tail], label, _flatten_sep_by)
    if minimum <= 0:
        return opt(some, label)
    return some
