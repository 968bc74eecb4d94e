"""Property-based tests for whole-pipeline compilation.

Uses hypothesis to verify invariants that must hold for *all* inputs:

- Every interpolation appears in the output exactly once
- Uppercase tags compile to references, all others to literals
- Markup without interpolations compiles to literals only
"""

from __future__ import annotations

from hypothesis import given, settings

from pugtree import Environment
from pugtree.nodes import NULL, Literal, Reference

from .conftest import el, leaves
from .strategies import inline_text, interpolation_count, tag_name

_env = Environment()


class _Expr:
    """Opaque host expression stand-in."""

    def __init__(self, index: int) -> None:
        self.index = index


class TestCompileProperties:
    @given(count=interpolation_count)
    @settings(max_examples=50)
    def test_interpolation_conservation(self, count: int) -> None:
        exprs = [_Expr(i) for i in range(count)]
        fragments = ["ul\n  li "] + ["\n  li "] * (count - 1) + [""]
        result = _env.compile(fragments, exprs)
        found = leaves(result)
        assert [e.index for e in found] == list(range(count))

    @given(count=interpolation_count)
    @settings(max_examples=50)
    def test_conservation_in_attributes(self, count: int) -> None:
        exprs = [_Expr(i) for i in range(count)]
        fragments = ["div\n  a(href=\"/x/"] + ['")\n  a(href="/x/'] * (count - 1) + ['")']
        result = _env.compile(fragments, exprs)
        assert [e.index for e in leaves(result)] == list(range(count))

    @given(name=tag_name)
    @settings(max_examples=100)
    def test_classification(self, name: str) -> None:
        tag = _env.from_string(name).tag
        if name[0].isupper():
            assert tag == Reference(name)
        else:
            assert tag == Literal(name)

    @given(text=inline_text)
    @settings(max_examples=100)
    def test_no_interpolation_round_trip(self, text: str) -> None:
        assert _env.from_string(f"p {text}") == el("p", NULL, Literal(text))
