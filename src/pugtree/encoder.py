"""Placeholder encoding for host template literals.

A host template arrives as literal fragments interleaved with opaque
interpolation expressions. The encoder joins the fragments into one markup
string, marking each interpolation slot with a positional placeholder token
``/~N~/`` that the parser carries through untouched and the compiler later
swaps back for the Nth interpolation.

The joined text is then de-indented so the template can sit at whatever
indentation the surrounding host code uses:

    >>> encode(["\\n    div\\n      p Hi ", "\\n"], [name_expr])
    '\\ndiv\\n  p Hi /~0~/\\n'

"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import Any

from pugtree.environment.exceptions import EmptyTemplateError

logger = logging.getLogger(__name__)

# Neither "/~" nor "~/" is meaningful in the markup grammar, so the token
# survives lexing inside text and attribute values alike.
PLACEHOLDER_PATTERN = re.compile(r"/~(\d+)~/")

_LEADING_TABS = re.compile(r"^\t+")
_LEADING_SPACES = re.compile(r"^ +")


def placeholder(index: int) -> str:
    """Return the placeholder token for interpolation ``index``."""
    return f"/~{index}~/"


def insert_placeholders(fragments: Sequence[str], interpolations: Sequence[Any]) -> str:
    """Join fragments, following fragment i with placeholder i when interpolation i exists."""
    parts: list[str] = []
    for index, fragment in enumerate(fragments):
        parts.append(fragment)
        if index < len(interpolations):
            parts.append(placeholder(index))
    return "".join(parts)


def normalize_indentation(template: str) -> str:
    """Strip the leading indentation of the first non-empty line from every line.

    Only a pure run of tabs or a pure run of spaces is recognised. The run's
    length is removed from the front of every line, whatever those lines
    start with. Text whose first non-empty line is not indented is returned
    unchanged.
    """
    lines = template.split("\n")
    root_line = next((line for line in lines if line), None)
    if root_line is None:
        return template

    match = _LEADING_TABS.match(root_line) or _LEADING_SPACES.match(root_line)
    if match is None:
        return template

    width = len(match.group(0))
    return "\n".join(line[width:] for line in lines)


def encode(fragments: Sequence[str], interpolations: Sequence[Any] = ()) -> str:
    """Encode host fragments and interpolations into one markup string.

    Args:
        fragments: Literal text pieces, one more than ``interpolations``.
        interpolations: Opaque host expressions; only their count matters here.

    Returns:
        De-indented markup text with ``/~N~/`` placeholder tokens.

    Raises:
        EmptyTemplateError: If ``fragments`` is empty.
    """
    if not fragments:
        raise EmptyTemplateError()

    if len(fragments) != len(interpolations) + 1:
        logger.warning(
            "Expected %d fragment(s) for %d interpolation(s), got %d",
            len(interpolations) + 1,
            len(interpolations),
            len(fragments),
        )

    return normalize_indentation(insert_placeholders(fragments, interpolations))
