"""Attribute compilation for pugtree compiler.

Provides mixin for turning a tag's attribute list into a props node:
merge duplicates, translate names, splice interpolations into values.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from pugtree.nodes import NULL, Attribute, AttributeValue, Concat, Literal, Property, Props

if TYPE_CHECKING:
    from pugtree.nodes.calls import _NullType


def merge_attributes(
    attrs: Sequence[Attribute],
    translations: Mapping[str, str] | None = None,
) -> dict[str, AttributeValue]:
    """Fold attributes left to right into a key -> value map.

    Names are translated first, so ``class`` and ``className`` land on the
    same key. Repeated string attributes join with a single space
    (``class="a"`` + ``class="b"`` -> ``"a b"``); otherwise the later
    occurrence overwrites the earlier one. Keys keep the position of their
    first occurrence.
    """
    merged: dict[str, AttributeValue] = {}
    for attr in attrs:
        key = translations.get(attr.name, attr.name) if translations else attr.name
        previous = merged.get(key)
        if isinstance(previous, str) and isinstance(attr.value, str):
            merged[key] = f"{previous} {attr.value}"
        else:
            merged[key] = attr.value
    return merged


def needs_quoting(key: str) -> bool:
    """True when ``key`` cannot be written as a bare identifier key (``data-id``, ``xlink:href``)."""
    return not key.isidentifier()


class AttributeCompilationMixin:
    """Mixin for compiling tag attributes into a ``Props`` node."""

    if TYPE_CHECKING:
        _translations: Mapping[str, str]

        # From InterpolationMixin
        def _splice(self, value: str) -> list[Any]: ...

    def _compile_attribute_value(self, value: AttributeValue) -> Any:
        """Compile one merged attribute value.

        Strings are spliced: a single resulting node is used directly,
        several become a ``Concat``. Numbers and booleans become literals.
        """
        if not isinstance(value, str):
            return Literal(value)

        parts = self._splice(value)
        if not parts:
            # Every placeholder in the value was dropped.
            return Literal("")
        if len(parts) == 1:
            return parts[0]
        return Concat(tuple(parts))

    def _compile_attributes(self, attrs: Sequence[Attribute]) -> Props | _NullType:
        """Build the props argument for a tag, or NULL when it has no attributes."""
        merged = merge_attributes(attrs, self._translations)
        if not merged:
            return NULL

        return Props(
            tuple(
                Property(
                    key=key,
                    value=self._compile_attribute_value(value),
                    quoted=needs_quoting(key),
                )
                for key, value in merged.items()
            )
        )
