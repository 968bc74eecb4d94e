"""Call-AST nodes: the output of compilation.

A compiled template is a tree of ``Call`` nodes whose arguments follow the
``createElement(tag, props, *children)`` shape. Interpolation expressions are
opaque to the compiler and appear in the tree exactly as the host supplied
them; a ``list`` stands for a flattened child sequence.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Reference:
    """Identifier reference: a component tag (``Card``) or the element factory."""

    name: str


@dataclass(frozen=True, slots=True)
class Literal:
    """String or numeric literal."""

    value: str | int | float | bool


@dataclass(frozen=True, slots=True)
class _NullType:
    """Explicit "no props" marker."""

    def __repr__(self) -> str:
        return "NULL"


NULL = _NullType()


@dataclass(frozen=True, slots=True)
class Concat:
    """String built from literal segments and interpolations: ``href="/u/${id}"``"""

    parts: Sequence[Any]


@dataclass(frozen=True, slots=True)
class Property:
    """One props entry.

    ``quoted`` keys cannot be written as bare identifiers in the target
    language (``'data-id'``), everything else can (``className``).
    """

    key: str
    value: Any
    quoted: bool = False


@dataclass(frozen=True, slots=True)
class Props:
    """Props object, entries in first-insertion order."""

    properties: Sequence[Property]

    def keys(self) -> list[str]:
        return [prop.key for prop in self.properties]

    def get(self, key: str, default: Any = None) -> Any:
        for prop in self.properties:
            if prop.key == key:
                return prop.value
        return default


@dataclass(frozen=True, slots=True)
class Call:
    """Element construction call: ``callee(tag, props, *children)``"""

    callee: Reference
    args: Sequence[Any]

    @property
    def tag(self) -> Reference | Literal:
        return self.args[0]

    @property
    def props(self) -> Props | _NullType:
        return self.args[1]

    @property
    def children(self) -> Sequence[Any]:
        return self.args[2:]


CallNode = Call | Reference | Literal | _NullType | Concat | Props
