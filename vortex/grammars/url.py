# vortex/grammars/url.py
# A very limited URL grammar: scheme "://" [user ":" password "@"] host.
# Adapted from the ANTLR url.g4 grammar; see RFC 3986 for the real thing.

from __future__ import annotations
from typing import Optional

from ..combinators import Matcher, alt, char, opt, rep, seq, string
from ..driver import parse
from ..node import Node
from .integer import digits


def word() -> Matcher:
    return rep(char("0-9A-Za-z."), 0)


def user() -> Matcher:
    return word()


def password() -> Matcher:
    return word()


def login() -> Matcher:
    return seq([user(), string(":"), password(), string("@")], "login")


def hostname() -> Matcher:
    return word()


def host_number() -> Matcher:
    return seq([digits(), ".", digits(), ".", digits(), ".", digits()], "host_number")


def host() -> Matcher:
    return seq([opt("/"), alt([hostname(), host_number()])], "host")


def scheme() -> Matcher:
    return rep(char("A-Za-z0-9+.-"), 1, "scheme")


def url() -> Matcher:
    return seq([scheme(), string("://"), opt(login()), host()], "url")


def parse_url(text: str) -> Optional[Node]:
    return parse(text, url())
