"""Composition resolver: reconciles ``extends`` roots with block overrides.

A derived template looks like::

    extends layout.pug
    block title
      | Dashboard
    block content
      Dashboard(user=/~0~/)

The resolver turns the top-level node list into the effective root (the
parent layout's root node) plus a lookup from block name to the overriding
children. Blocks without an override fall back to their own body; that
fallback is the compiler's job, ``lookup`` just returns None.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from pugtree.environment.exceptions import (
    MultipleRootElementsError,
    NoParseResultError,
    TemplateSyntaxError,
)
from pugtree.nodes import Block, Extends, NamedBlock, Node

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Composition:
    """Effective root plus block overrides for one template."""

    root: Node
    overrides: Mapping[str, Sequence[Node]] = field(default_factory=dict)

    def lookup(self, name: str) -> Sequence[Node] | None:
        """Override children for block ``name``, or None when not overridden."""
        return self.overrides.get(name)


def _top_level(node: Node) -> Sequence[Node]:
    if isinstance(node, Block):
        return node.nodes
    return (node,)


def _collect_overrides(extends: Extends, siblings: Sequence[Node]) -> dict[str, Sequence[Node]]:
    overrides: dict[str, Sequence[Node]] = {}
    for sibling in siblings:
        if not isinstance(sibling, NamedBlock):
            raise TemplateSyntaxError(
                f"Only named blocks may follow extends, found {type(sibling).__name__}",
                lineno=sibling.lineno or None,
                name=extends.path,
                suggestion="Move content into a 'block' that the parent template declares",
            )
        overrides[sibling.name] = sibling.nodes
    return overrides


def _resolve_extends(extends: Extends, siblings: Sequence[Node]) -> Composition:
    overrides = _collect_overrides(extends, siblings)

    parent_nodes = _top_level(extends.resolved_tree)
    if not parent_nodes:
        raise NoParseResultError(f"Parent template '{extends.path}' is empty")

    first = parent_nodes[0]
    if isinstance(first, Extends):
        # The parent extends a grandparent: its overrides apply where ours don't.
        inherited = _resolve_extends(first, parent_nodes[1:])
        return Composition(inherited.root, {**inherited.overrides, **overrides})

    # Trailing siblings of the parent root are discarded, as in the compiler.
    return Composition(first, overrides)


def resolve(nodes: Sequence[Node]) -> Composition:
    """Resolve a template's top-level nodes into a Composition.

    Raises:
        NoParseResultError: If there are no top-level nodes.
        MultipleRootElementsError: If several top-level nodes appear without
            a leading ``extends``.
        TemplateSyntaxError: If something other than a named block follows
            ``extends``.
    """
    if not nodes:
        raise NoParseResultError()

    first = nodes[0]
    if isinstance(first, Extends):
        composition = _resolve_extends(first, nodes[1:])
        logger.debug(
            "Resolved extends %s with overrides: %s",
            first.path or "<tree>",
            ", ".join(composition.overrides) or "none",
        )
        return composition

    if len(nodes) > 1:
        raise MultipleRootElementsError(len(nodes))

    return Composition(first)
