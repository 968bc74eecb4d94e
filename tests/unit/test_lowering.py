"""Tests for lowering call-AST nodes to Python ``ast`` expressions."""

from __future__ import annotations

import ast

import pytest

from pugtree.compiler import dotted_name, to_python_ast
from pugtree.nodes import NULL, Concat, Literal, Property, Props, Reference

from ..conftest import component, el


def _name(identifier: str) -> ast.Name:
    return ast.Name(id=identifier, ctx=ast.Load())


def _source(node) -> str:
    return ast.unparse(to_python_ast(node))


class TestDottedName:
    def test_single_name(self) -> None:
        assert ast.unparse(dotted_name("h")) == "h"

    def test_attribute_chain(self) -> None:
        expr = dotted_name("React.createElement")
        assert isinstance(expr, ast.Attribute)
        assert ast.unparse(expr) == "React.createElement"


class TestToPythonAst:
    def test_element_without_props(self) -> None:
        assert _source(el("br")) == "React.createElement('br', None)"

    def test_component_with_props_and_children(self) -> None:
        call = component(
            "Button",
            Props((Property("onClick", _name("save")), Property("data-id", Literal(3), True))),
            Literal("Save"),
        )
        assert _source(call) == "React.createElement(Button, {'onClick': save, 'data-id': 3}, 'Save')"

    def test_interpolation_passes_through(self) -> None:
        expr = _name("title")
        assert to_python_ast(expr) is expr

    def test_concat_is_fstring(self) -> None:
        node = Concat((Literal("/users/"), _name("uid"), Literal("/edit")))
        assert _source(node) == "f'/users/{uid}/edit'"

    def test_list(self) -> None:
        assert _source([Literal("a"), _name("b")]) == "['a', b]"

    def test_null_and_scalars(self) -> None:
        assert _source(NULL) == "None"
        assert _source(Literal(True)) == "True"
        assert _source(1.5) == "1.5"
        assert _source(Reference("Card")) == "Card"

    def test_unlowerable_value(self) -> None:
        with pytest.raises(TypeError, match="Cannot lower object"):
            to_python_ast(object())
