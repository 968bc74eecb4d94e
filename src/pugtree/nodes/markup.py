"""Markup nodes produced by the parser and consumed by the compiler."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from pugtree.nodes.base import Node

AttributeValue = str | int | float | bool


@dataclass(frozen=True, slots=True)
class Attribute:
    """Element attribute: ``a(href="/home")``.

    String values hold the unquoted payload. Bare boolean attributes
    (``input(disabled)``) carry ``True``.
    """

    name: str
    value: AttributeValue


@dataclass(frozen=True, slots=True)
class Block(Node):
    """Anonymous sequence of nodes, processed in order."""

    nodes: Sequence[Node] = ()


@dataclass(frozen=True, slots=True)
class NamedBlock(Node):
    """Overridable region: ``block content``"""

    name: str
    nodes: Sequence[Node] = ()


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Literal text, possibly containing placeholder tokens."""

    value: str


@dataclass(frozen=True, slots=True)
class Tag(Node):
    """Element or component invocation: ``button.primary(type="submit") Save``"""

    name: str
    attrs: Sequence[Attribute] = ()
    block: Block | None = None


@dataclass(frozen=True, slots=True)
class Include(Node):
    """Spliced template: ``include partials/nav.pug``

    ``resolved_tree`` is filled by the loader before compilation.
    """

    resolved_tree: Node
    path: str | None = None


@dataclass(frozen=True, slots=True)
class Extends(Node):
    """Parent template: ``extends layout.pug``. Only legal as the first top-level node."""

    resolved_tree: Node
    path: str | None = None


MarkupNode = Block | NamedBlock | Text | Tag | Include | Extends
