"""Tests for the composition resolver (extends roots and block overrides)."""

from __future__ import annotations

import pytest

from pugtree.composition import Composition, resolve
from pugtree.environment.exceptions import (
    MultipleRootElementsError,
    NoParseResultError,
    TemplateSyntaxError,
)
from pugtree.nodes import Block, Extends, NamedBlock, Tag, Text


def _layout() -> Block:
    body = Block((NamedBlock("title", (Text("Grand title"),)), NamedBlock("content")))
    return Block((Tag("html", (), body),))


class TestResolveWithoutExtends:
    def test_single_root(self) -> None:
        root = Tag("div")
        composition = resolve([root])
        assert composition.root is root
        assert composition.lookup("anything") is None

    def test_no_nodes(self) -> None:
        with pytest.raises(NoParseResultError):
            resolve([])

    def test_two_roots(self) -> None:
        with pytest.raises(MultipleRootElementsError) as exc_info:
            resolve([Tag("div"), Tag("span")])
        assert exc_info.value.count == 2

    def test_error_message_names_count(self) -> None:
        with pytest.raises(MultipleRootElementsError, match="found 3"):
            resolve([Tag("a"), Tag("b"), Tag("c")])


class TestResolveWithExtends:
    def test_root_is_parent_root(self) -> None:
        layout = _layout()
        override = (Text("Child"),)
        composition = resolve([Extends(layout, "layout.pug"), NamedBlock("content", override)])
        assert composition.root is layout.nodes[0]
        assert composition.lookup("content") == override
        assert composition.lookup("title") is None

    def test_extends_alone(self) -> None:
        layout = _layout()
        composition = resolve([Extends(layout)])
        assert composition.root is layout.nodes[0]
        assert composition.overrides == {}

    def test_only_named_blocks_may_follow(self) -> None:
        with pytest.raises(TemplateSyntaxError, match="Only named blocks"):
            resolve([Extends(_layout(), "layout.pug"), Tag("div")])

    def test_empty_parent(self) -> None:
        with pytest.raises(NoParseResultError):
            resolve([Extends(Block(()), "empty.pug")])

    def test_extends_chain_child_wins(self) -> None:
        parent = Block(
            (
                Extends(_layout(), "layout.pug"),
                NamedBlock("title", (Text("Parent title"),)),
                NamedBlock("content", (Text("Parent content"),)),
            )
        )
        child_title = (Text("Child title"),)
        composition = resolve([Extends(parent, "parent.pug"), NamedBlock("title", child_title)])

        assert isinstance(composition.root, Tag)
        assert composition.root.name == "html"
        assert composition.lookup("title") == child_title
        assert composition.lookup("content") == (Text("Parent content"),)

    def test_composition_lookup(self) -> None:
        composition = Composition(Tag("div"), {"a": (Text("x"),)})
        assert composition.lookup("a") == (Text("x"),)
        assert composition.lookup("b") is None
