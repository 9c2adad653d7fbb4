from __future__ import annotations

import pytest

from vortex.node import Node
from vortex.visitor import NO_TRANSFORM, Transform, as_visitor


def _tree() -> Node:
    return Node("seq", [Node("str", ("-",)), Node("rep", (Node("char", ("1",)), Node("char", ("2",))))])


class TestNode:
    def test_lists_are_stored_as_tuples(self) -> None:
        n = Node("seq", ["a", "b"])
        assert n.children == ("a", "b")

    def test_structural_equality(self) -> None:
        assert _tree() == _tree()
        assert Node("a", ()) != Node("b", ())

    def test_text(self) -> None:
        assert _tree().text() == "-12"

    def test_text_skips_non_string_leaves(self) -> None:
        assert Node("seq", (Node("num", 7), Node("str", ("x",)))).text() == "x"

    def test_to_list(self) -> None:
        assert _tree().to_list() == ["seq", ["str", "-"], ["rep", ["char", "1"], ["char", "2"]]]

    def test_to_list_with_scalar_children(self) -> None:
        assert Node("num", 42).to_list() == ["num", 42]

    def test_pretty(self) -> None:
        assert _tree().pretty() == "\n".join([
            "seq",
            "  str",
            "    '-'",
            "  rep",
            "    char",
            "      '1'",
            "    char",
            "      '2'",
        ])


class TestVisitor:
    def test_no_transform_is_identity(self) -> None:
        assert NO_TRANSFORM([1, 2]) == [1, 2]

    def test_transform(self) -> None:
        assert Transform(str.upper)("hi") == "HI"

    def test_as_visitor(self) -> None:
        assert as_visitor(None) is NO_TRANSFORM
        assert as_visitor(NO_TRANSFORM) is NO_TRANSFORM
        t = Transform(len)
        assert as_visitor(t) is t
        assert as_visitor(len) == Transform(len)

    def test_as_visitor_rejects_non_callables(self) -> None:
        with pytest.raises(TypeError):
            as_visitor(5)
