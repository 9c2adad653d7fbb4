# vortex/rules.py
"""Named grammar rules.

``Rules`` maps rule names to thunks producing matchers. ``Ref`` looks its rule
up when it is *called*, not when it is built, which is what lets a rule refer
to itself or to rules defined after it:

    g = Rules()

    @g.rule
    def parens():
        return alt([seq(["(", g.ref("parens"), ")"]), ""])
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Callable, Dict, Iterator, List, Optional, Set, Union

from .combinators import Match, Matcher, lift
from .cursor import Cursor
from .errors import GrammarError

Thunk = Callable[[], Matcher]


class Rules:
    def __init__(self) -> None:
        self._thunks: Dict[str, Thunk] = {}
        # filled by require() on first use, or all at once by check()
        self._resolved: Dict[str, Matcher] = {}

    def define(self, name: str, rule: Union[Thunk, Matcher, str]) -> None:
        if name in self._thunks:
            raise GrammarError(f"rule {name!r} is already defined")
        if isinstance(rule, (Matcher, str)):
            m = lift(rule)
            self._thunks[name] = lambda: m
        elif callable(rule):
            self._thunks[name] = rule
        else:
            raise GrammarError(f"rule {name!r} must be a matcher or a thunk returning one")

    def rule(self, fn: Optional[Union[Thunk, str]] = None):
        """Decorator registering a zero-argument function as a rule.

        ``@rules.rule`` uses the function name, ``@rules.rule("name")`` an
        explicit one. The function itself is returned unchanged.
        """
        if isinstance(fn, str):
            name = fn

            def deco(f: Thunk) -> Thunk:
                self.define(name, f)
                return f
            return deco

        def deco(f: Thunk) -> Thunk:
            self.define(f.__name__, f)
            return f
        return deco(fn) if fn is not None else deco

    def require(self, name: str) -> Matcher:
        m = self._resolved.get(name)
        if m is not None:
            return m
        try:
            thunk = self._thunks[name]
        except KeyError:
            raise GrammarError(f"undefined rule {name!r}") from None
        m = lift(thunk())
        self._resolved[name] = m
        return m

    def check(self) -> None:
        """Resolve every rule now and reject references to undefined rules.

        Once this passes, matching only reads the registry and a Ref can no
        longer raise.
        """
        missing: Set[str] = set()
        for name in list(self._thunks):
            for r in _refs(self.require(name)):
                if r.name not in r.rules:
                    missing.add(r.name)
        if missing:
            raise GrammarError(f"undefined rule(s): {', '.join(sorted(missing))}")

    __getitem__ = require

    def ref(self, name: str) -> "Ref":
        return Ref(name, self)

    def __contains__(self, name: object) -> bool:
        return name in self._thunks

    def __iter__(self) -> Iterator[str]:
        return iter(self._thunks)

    def __len__(self) -> int:
        return len(self._thunks)


@dataclass(frozen=True)
class Ref(Matcher):
    name: str
    rules: Rules = field(repr=False)

    def __call__(self, cursor: Cursor) -> Match:
        return self.rules.require(self.name)(cursor)


def ref(name: str, rules: Rules) -> Ref:
    return rules.ref(name)


def _refs(root: Matcher) -> Iterator[Ref]:
    """Refs reachable from `root` without following them."""
    stack: List[object] = [root]
    seen: Set[int] = set()
    while stack:
        m = stack.pop()
        if id(m) in seen:
            continue
        seen.add(id(m))
        if isinstance(m, Ref):
            yield m
            continue
        if not is_dataclass(m):
            continue
        for f in fields(m):
            v = getattr(m, f.name)
            if isinstance(v, Matcher):
                stack.append(v)
            elif isinstance(v, tuple):
                stack.extend(x for x in v if isinstance(x, Matcher))
