"""Interpolation cursor: consume-once access to a template's interpolations.

Each placeholder token met during compilation takes exactly one entry.
Entries are never re-read: once taken, a slot stays empty for the rest of
the compilation. A cursor belongs to a single ``compile`` call and must not
be reused for another template.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class InterpolationCursor:
    """Ordered, single-consumption view over interpolation expressions.

    ``next()`` hands out entries first-in first-out. ``take(index)`` serves
    placeholders that carry an explicit index. Both only ever move forward:
    a consumed slot is never handed out again, and the consumed count only
    grows.

    Example:
            >>> cursor = InterpolationCursor(["a", "b"])
            >>> cursor.take(0)
            'a'
            >>> cursor.take(0) is None
            True
            >>> cursor.next()
            'b'
            >>> cursor.exhausted
            True

    """

    __slots__ = ("_consumed", "_head", "_items")

    def __init__(self, interpolations: Sequence[Any] = ()):
        self._items = tuple(interpolations)
        self._consumed = [False] * len(self._items)
        self._head = 0

    def __len__(self) -> int:
        return len(self._items)

    def _advance_head(self) -> None:
        while self._head < len(self._items) and self._consumed[self._head]:
            self._head += 1

    def next(self) -> Any | None:
        """Remove and return the first unconsumed entry, or None once exhausted."""
        self._advance_head()
        if self._head >= len(self._items):
            return None
        value = self._items[self._head]
        self._consumed[self._head] = True
        self._advance_head()
        return value

    def is_available(self, index: int) -> bool:
        """True if ``index`` is in range and not yet consumed."""
        return 0 <= index < len(self._items) and not self._consumed[index]

    def take(self, index: int) -> Any | None:
        """Consume the entry at ``index``.

        Returns None when the index is out of range or the entry was already
        consumed.
        """
        if not self.is_available(index):
            return None
        self._consumed[index] = True
        self._advance_head()
        return self._items[index]

    @property
    def consumed(self) -> int:
        return sum(self._consumed)

    @property
    def remaining(self) -> int:
        return len(self._items) - self.consumed

    @property
    def exhausted(self) -> bool:
        return self.remaining == 0

    def unconsumed(self) -> list[int]:
        """Indices of entries no placeholder has taken."""
        return [i for i, taken in enumerate(self._consumed) if not taken]
