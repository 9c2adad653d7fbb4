# vortex/__init__.py
"""vortex: a small parser combinator library.

This package provides:
- an immutable Cursor over the input text
- primitive matchers (string, char) and combinators (seq, alt, rep, opt)
- named, late-bound rules for recursive grammars (Rules, ref)
- the parse driver (parse, parse_outcome, parse_strict)
"""

from .cursor import Cursor
from .node import Node
from .visitor import NO_TRANSFORM, NoTransform, Transform
from .errors import GrammarError, ParseError
from .combinators import Matcher, string, char, seq, alt, rep, opt, either, lift
from .rules import Rules, Ref, ref
from .driver import ParseOutcome, parse, parse_outcome, parse_strict
from .builtin import many1, choice, one_of, between, sep_by
