"""Pytest configuration and fixtures for pugtree tests."""

from typing import Any

import pytest

from pugtree import DictLoader, Environment
from pugtree.nodes import NULL, Call, Literal, Property, Props, Reference

FACTORY = Reference("React.createElement")


@pytest.fixture
def env():
    """Create a basic pugtree Environment."""
    return Environment()


@pytest.fixture
def env_strict():
    """Create an Environment that raises on unmatched placeholders."""
    return Environment(strict=True)


@pytest.fixture
def env_with_loader():
    """Create an Environment with DictLoader and test templates."""
    loader = DictLoader(
        {
            "layout.pug": (
                "html\n"
                "  head\n"
                "    block title\n"
                "      title Default title\n"
                "  body\n"
                "    block content\n"
                "      p Default content\n"
            ),
            "page.pug": ("extends layout\nblock content\n  p Page content\n"),
            "partials/nav.pug": "nav\n  a(href=\"/\") Home\n",
            "partials/footer.pug": "footer\n  include nav\n",
            "cycle/a.pug": "div\n  include b\n",
            "cycle/b.pug": "div\n  include a\n",
        }
    )
    return Environment(loader=loader)


def el(tag: str, props: Any = NULL, *children: Any) -> Call:
    """Expected ``createElement`` call for a lowercase element."""
    return Call(FACTORY, (Literal(tag), props, *children))


def component(name: str, props: Any = NULL, *children: Any) -> Call:
    """Expected ``createElement`` call for a component reference."""
    return Call(FACTORY, (Reference(name), props, *children))


def props(**values: Any) -> Props:
    """Build a Props node from keyword values; plain scalars become literals."""
    return Props(
        tuple(
            Property(key, value if not isinstance(value, (str, int, float)) else Literal(value))
            for key, value in values.items()
        )
    )


def leaves(node: Any) -> list[Any]:
    """Every interpolation object in a call-AST, in tree order."""
    found: list[Any] = []
    if isinstance(node, Call):
        for arg in node.args:
            found.extend(leaves(arg))
    elif isinstance(node, Props):
        for prop in node.properties:
            found.extend(leaves(prop.value))
    elif isinstance(node, list):
        for item in node:
            found.extend(leaves(item))
    elif hasattr(node, "parts"):
        for part in node.parts:
            found.extend(leaves(part))
    elif not isinstance(node, (Literal, Reference, type(NULL))):
        found.append(node)
    return found
