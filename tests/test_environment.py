"""Tests for the Environment pipeline: encode → parse → resolve → compile."""

from __future__ import annotations

import ast
import logging
from types import SimpleNamespace

import pytest

from pugtree import (
    CircularTemplateError,
    DictLoader,
    EmptyTemplateError,
    Environment,
    MultipleRootElementsError,
    TemplateDepthError,
    TemplateNotFoundError,
    UnmatchedPlaceholderError,
)
from pugtree.nodes import NULL, Concat, Literal, Reference

from .conftest import component, el, props


class TestConfiguration:
    def test_defaults(self, env: Environment) -> None:
        assert env.loader is None
        assert env.factory == "React.createElement"
        assert env.attribute_translations["class"] == "className"
        assert env.strict is False
        assert env.max_depth == 64

    def test_invalid_max_depth(self) -> None:
        with pytest.raises(ValueError, match="max_depth"):
            Environment(max_depth=0)

    def test_invalid_factory(self) -> None:
        with pytest.raises(ValueError, match="dotted name"):
            Environment(factory="create element")

    def test_custom_translations(self) -> None:
        env = Environment(attribute_translations={"class": "class"})
        assert env.from_string("div.a").props.get("class") == Literal("a")


class TestCompile:
    def test_card(self, env: Environment) -> None:
        title, save = object(), object()
        result = env.compile(
            ["\n    div.card\n      h2 ", "\n      Button(onClick=", ") Save\n"],
            [title, save],
        )
        assert result == el(
            "div",
            props(className="card"),
            el("h2", NULL, title),
            component("Button", props(onClick=save), Literal("Save")),
        )

    def test_component_vs_element(self, env: Environment) -> None:
        assert env.from_string("Foo").tag == Reference("Foo")
        assert env.from_string("foo").tag == Literal("foo")

    def test_attribute_interpolation_in_string(self, env: Environment) -> None:
        uid = object()
        result = env.compile(['a(href="/users/', '") Profile'], [uid])
        assert result.props.get("href") == Concat((Literal("/users/"), uid))

    def test_no_interpolation_round_trip(self, env: Environment) -> None:
        assert env.from_string("p Hello world") == el("p", NULL, Literal("Hello world"))

    def test_two_roots(self, env: Environment) -> None:
        with pytest.raises(MultipleRootElementsError) as exc_info:
            env.from_string("div\ndiv")
        assert exc_info.value.count == 2

    def test_empty_fragments(self, env: Environment) -> None:
        with pytest.raises(EmptyTemplateError):
            env.compile([], [])

    def test_all_interpolations_used_no_warning(
        self, env: Environment, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="pugtree"):
            env.compile(["p ", " ", ""], ["a", "b"])
        assert "never used" not in caplog.text

    def test_unused_interpolations_warn(
        self, env_with_loader: Environment, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A placeholder inside a block the layout never declares is never compiled."""
        with caplog.at_level(logging.WARNING, logger="pugtree"):
            env_with_loader.compile(["extends layout\nblock sidebar\n  p ", ""], ["orphan"])
        assert "1 interpolation(s) never used: 0" in caplog.text

    def test_strict_mode(self, env_strict: Environment) -> None:
        with pytest.raises(UnmatchedPlaceholderError):
            env_strict.from_string("p /~0~/")

    def test_depth_limit(self) -> None:
        env = Environment(max_depth=2)
        with pytest.raises(TemplateDepthError):
            env.from_string("div\n  div\n    div\n      div")
        assert env.from_string("div\n  div\n    div").tag == Literal("div")

    def test_translated_alias_keeps_interpolation(self, env: Environment) -> None:
        marker = object()
        result = env.compile(['div(class=', ', className="x")'], [marker])
        assert result.props.get("className") == Concat((marker, Literal(" x")))

    def test_recursive_block_override(self, env_with_loader: Environment) -> None:
        with pytest.raises(TemplateDepthError):
            env_with_loader.from_string(
                "extends layout\nblock content\n  block content\n    p Hi"
            )

    def test_compile_template(self, env: Environment) -> None:
        template = SimpleNamespace(
            strings=("li.item ", ""),
            interpolations=(SimpleNamespace(value="Milk"),),
        )
        assert env.compile_template(template) == el("li", props(className="item"), "Milk")

    def test_compile_template_rejects_strings(self, env: Environment) -> None:
        with pytest.raises(TypeError):
            env.compile_template("li")

    def test_to_python(self, env: Environment) -> None:
        expr = env.to_python(env.from_string("br"))
        assert ast.unparse(expr) == "React.createElement('br', None)"


class TestLoading:
    def test_extends_overrides_block(self, env_with_loader: Environment) -> None:
        result = env_with_loader.from_string("extends layout\nblock content\n  p A\n  p B")
        head, body = result.children
        assert head == el("head", NULL, el("title", NULL, Literal("Default title")))
        assert body == el("body", NULL, el("p", NULL, Literal("A")), el("p", NULL, Literal("B")))

    def test_extends_without_override_keeps_default(self, env_with_loader: Environment) -> None:
        body = env_with_loader.from_string("extends layout").children[1]
        assert body == el("body", NULL, el("p", NULL, Literal("Default content")))

    def test_get_template(self, env_with_loader: Environment) -> None:
        body = env_with_loader.get_template("page.pug").children[1]
        assert body.children == (el("p", NULL, Literal("Page content")),)

    def test_include_relative_to_including_template(self, env_with_loader: Environment) -> None:
        footer = env_with_loader.get_template("partials/footer.pug")
        (nav,) = footer.children
        assert nav.tag == Literal("nav")

    def test_root_relative_include(self, env_with_loader: Environment) -> None:
        result = env_with_loader.compile(["div\n  include /partials/nav.pug"], name="deep/x.pug")
        assert result.children[0].tag == Literal("nav")

    def test_include_interpolations_stay_in_order(self) -> None:
        env = Environment(loader=DictLoader({"item.pug": "li Static"}))
        first, second = object(), object()
        result = env.compile(["ul\n  li ", "\n  include item\n  li ", ""], [first, second])
        assert result.children == (
            el("li", NULL, first),
            el("li", NULL, Literal("Static")),
            el("li", NULL, second),
        )

    def test_missing_template(self, env_with_loader: Environment) -> None:
        with pytest.raises(TemplateNotFoundError, match="Did you mean 'layout.pug'"):
            env_with_loader.from_string("extends layot")

    def test_no_loader(self, env: Environment) -> None:
        with pytest.raises(TemplateNotFoundError, match="no loader configured"):
            env.from_string("div\n  include nav")
        with pytest.raises(TemplateNotFoundError):
            env.get_template("nav.pug")

    def test_cycle(self, env_with_loader: Environment) -> None:
        with pytest.raises(CircularTemplateError) as exc_info:
            env_with_loader.get_template("cycle/a.pug")
        assert exc_info.value.chain == ["cycle/a.pug", "cycle/b.pug", "cycle/a.pug"]

    def test_include_chain_depth(self) -> None:
        templates = {f"t{i}.pug": f"div\n  include t{i + 1}" for i in range(10)}
        templates["t10.pug"] = "span"
        env = Environment(loader=DictLoader(templates), max_depth=5)
        with pytest.raises(TemplateDepthError):
            env.get_template("t0.pug")

    def test_resolve_name(self) -> None:
        resolve = Environment._resolve_name
        assert resolve("nav", None) == "nav.pug"
        assert resolve("nav", "partials/footer.pug") == "partials/nav.pug"
        assert resolve("../layout", "pages/home.pug") == "layout.pug"
        assert resolve("/nav.html", "pages/home.pug") == "nav.html"
