"""Base node class for pugtree markup AST."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all markup AST nodes.

    All nodes track their source location for error reporting.
    Nodes are immutable, so one parsed tree can be compiled any number of times.

    Location fields are keyword-only so subclasses keep their own fields
    positional: ``Tag("div", (), None, lineno=3)``.
    """

    lineno: int = field(default=0, kw_only=True)
    col_offset: int = field(default=0, kw_only=True)
