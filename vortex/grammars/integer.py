# vortex/grammars/integer.py
"""Integer literals: ``0``, ``123``, ``-45``. No leading zeros, no ``-0``."""

from __future__ import annotations

from ..combinators import Matcher, alt, char, either, rep, seq, string


def zero() -> Matcher:
    return string("0")


def non_zero_digit() -> Matcher:
    return char("1-9")


def digit() -> Matcher:
    return either(zero(), non_zero_digit())


def digits() -> Matcher:
    """One or more digits."""
    return rep(digit(), 1)


def sign() -> Matcher:
    return either("+", "-")


def positive_integer() -> Matcher:
    return seq([non_zero_digit(), rep(digit(), 0)])


def negative_integer() -> Matcher:
    return seq([string("-"), non_zero_digit(), rep(digit(), 0)])


def integer() -> Matcher:
    return alt([zero(), negative_integer(), positive_integer()])


def ws() -> Matcher:
    return rep(char(r"\s"), 1)
