"""Token types for the pugtree markup lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class TokenType(Enum):
    # Layout
    INDENT = auto()
    OUTDENT = auto()
    NEWLINE = auto()
    EOS = auto()

    # Tag line parts
    TAG = auto()  # div, Button
    ID = auto()  # #main
    CLASS = auto()  # .card
    ATTRIBUTE = auto()  # value is (name, value)
    COLON = auto()  # block expansion: li: a
    DOT = auto()  # start of a text block: p.

    # Content
    TEXT = auto()  # inline, piped or block text

    # Keywords
    BLOCK = auto()  # block content
    EXTENDS = auto()  # extends layout.pug
    INCLUDE = auto()  # include partials/nav.pug


@dataclass(frozen=True, slots=True)
class Token:
    """A lexer token. Line numbers are 1-based, columns 0-based."""

    type: TokenType
    value: Any
    lineno: int
    col_offset: int
