# vortex/grammars/__init__.py
"""Example grammars written purely against the public combinators."""

from typing import Callable, Dict

from ..combinators import Matcher
from . import integer, url

GRAMMARS: Dict[str, Callable[[], Matcher]] = {
    "integer": integer.integer,
    "url": url.url,
}
