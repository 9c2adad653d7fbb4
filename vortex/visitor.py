# vortex/visitor.py
"""Visitor hook: an optional transform applied to what a combinator attaches
to its node (the leaf text for ``string``/``char``, the child list for the
composites)."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Union


@dataclass(frozen=True)
class NoTransform:
    def __call__(self, value: Any) -> Any:
        return value


@dataclass(frozen=True)
class Transform:
    fn: Callable[[Any], Any]

    def __call__(self, value: Any) -> Any:
        return self.fn(value)


Visitor = Union[NoTransform, Transform]

NO_TRANSFORM = NoTransform()


def as_visitor(value: Any) -> Visitor:
    if value is None:
        return NO_TRANSFORM
    if isinstance(value, (NoTransform, Transform)):
        return value
    if callable(value):
        return Transform(value)
    raise TypeError(f"visitor must be callable, got {type(value).__name__}")
