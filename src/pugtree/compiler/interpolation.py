"""Interpolation splicing for pugtree compiler.

Provides mixin for replacing placeholder tokens in text and attribute values
with the interpolations they stand for.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pugtree.encoder import PLACEHOLDER_PATTERN
from pugtree.environment.exceptions import UnmatchedPlaceholderError
from pugtree.nodes import Literal

if TYPE_CHECKING:
    from pugtree.cursor import InterpolationCursor

logger = logging.getLogger(__name__)


class InterpolationMixin:
    """Mixin for splicing interpolations into literal strings.

    Splitting ``"Hi /~0~/, you have /~1~/ messages"`` yields the segments
    ``["Hi ", ", you have ", " messages"]`` with placeholders 0 and 1 between
    them, which splice to::

        [Literal("Hi "), <expr 0>, Literal(", you have "), <expr 1>, Literal(" messages")]

    """

    if TYPE_CHECKING:
        _cursor: InterpolationCursor | None
        _strict: bool

    def _splice(self, value: str) -> list[Any]:
        """Split ``value`` on placeholder tokens and interleave the interpolations.

        A value without placeholders becomes a single literal, even when empty.
        Empty segments between placeholders produce no literal.
        """
        pieces = PLACEHOLDER_PATTERN.split(value)
        if len(pieces) == 1:
            return [Literal(value)]

        result: list[Any] = []
        # split() with one capture group alternates segment, index, segment, ...
        for position in range(0, len(pieces), 2):
            segment = pieces[position]
            if segment:
                result.append(Literal(segment))
            if position + 1 < len(pieces):
                result.extend(self._take_interpolation(int(pieces[position + 1])))
        return result

    def _take_interpolation(self, index: int) -> list[Any]:
        """Consume interpolation ``index`` as a zero- or one-item list.

        Unmatched placeholders (index out of range or already consumed)
        produce nothing, or raise in strict mode.
        """
        cursor = self._cursor
        if cursor is not None and cursor.is_available(index):
            return [cursor.take(index)]

        available = len(cursor) if cursor is not None else 0
        if self._strict:
            raise UnmatchedPlaceholderError(index, available)
        logger.warning(
            "Dropping placeholder /~%d~/: no unconsumed interpolation (%d supplied)",
            index,
            available,
        )
        return []
