# vortex/node.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List, Tuple


def _freeze(children: Any) -> Any:
    if isinstance(children, list):
        return tuple(children)
    return children


@dataclass(frozen=True)
class Node:
    """Parse tree element.

    ``children`` holds leaf text and nested Nodes in grammar order. A visitor
    may replace it with any value; lists are stored as tuples.
    """
    label: str
    children: Any = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", _freeze(self.children))

    def _items(self) -> Tuple[Any, ...]:
        if isinstance(self.children, tuple):
            return self.children
        return (self.children,)

    def text(self) -> str:
        """Concatenated string leaves, depth first."""
        out: List[str] = []
        stack: List[Any] = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, Node):
                stack.extend(reversed(item._items()))
            elif isinstance(item, str):
                out.append(item)
        return "".join(out)

    def to_list(self) -> list:
        out: list = [self.label]
        for c in self._items():
            out.append(c.to_list() if isinstance(c, Node) else c)
        return out

    def pretty(self, indent: str = "  ") -> str:
        lines: List[str] = []

        def walk(node: Node, depth: int) -> None:
            lines.append(f"{indent * depth}{node.label}")
            for c in node._items():
                if isinstance(c, Node):
                    walk(c, depth + 1)
                else:
                    lines.append(f"{indent * (depth + 1)}{c!r}")

        walk(self, 0)
        return "\n".join(lines)
