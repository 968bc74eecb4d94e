"""pugtree lexer: turns indentation-based markup into a flat token stream.

The lexer works line by line. Each non-blank line produces its content
tokens followed by NEWLINE; changes in leading whitespace produce INDENT and
OUTDENT tokens before the line's content, so the parser never has to count
columns.

Supported line forms:

    div#main.card(data-id=/~0~/, hidden)   tag with shorthand and attributes
    p Some inline text                     tag with inline text
    li: a(href="/") Home                   block expansion
    p.                                     text block (indented lines below)
    | piped text
    /~1~/                                  line starting with a placeholder
    block content
    extends layout.pug
    include partials/nav.pug

"""

from __future__ import annotations

import re
from typing import Any

from pugtree._types import Token, TokenType
from pugtree.encoder import PLACEHOLDER_PATTERN
from pugtree.environment.exceptions import TemplateSyntaxError

# Tag names may contain - and : but not end with them (``li: a`` is expansion).
_TAG_NAME = re.compile(r"[A-Za-z_](?:[\w:-]*\w)?")
_ID = re.compile(r"#([\w-]+)")
_CLASS = re.compile(r"\.(-?[_A-Za-z][\w-]*)")
_KEYWORD = re.compile(r"(extends|include|block)(?:\s+(.*))?$")
_ATTR_NAME = re.compile(r"[^\s=,()'\"]+")
_NUMBER = re.compile(r"-?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][-+]?\d+)?")

_KEYWORD_TOKENS = {
    "extends": TokenType.EXTENDS,
    "include": TokenType.INCLUDE,
    "block": TokenType.BLOCK,
}
_BARE_VALUE_STOP = frozenset(" \t,)")


class Lexer:
    """Tokenize markup source into a stream of Token objects."""

    __slots__ = ("_index", "_indent_char", "_indents", "_lines", "_name", "_source", "_tokens")

    def __init__(self, source: str, name: str | None = None):
        self._source = source.replace("\r\n", "\n")
        self._name = name
        self._lines = self._source.split("\n")
        self._index = 0
        self._tokens: list[Token] = []
        self._indents = [0]
        self._indent_char: str | None = None

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return the token list, ending with EOS."""
        while self._index < len(self._lines):
            raw = self._lines[self._index]
            lineno = self._index + 1
            self._index += 1
            if not raw.strip():
                continue

            indent = self._measure_indent(raw, lineno)
            self._emit_indentation(indent, lineno)
            self._lex_line(raw[indent:], lineno, indent)
            if self._tokens[-1].type == TokenType.DOT:
                self._lex_text_block(indent, lineno)
            self._emit(TokenType.NEWLINE, None, lineno, len(raw))

        last_line = len(self._lines)
        while len(self._indents) > 1:
            self._indents.pop()
            self._emit(TokenType.OUTDENT, None, last_line, 0)
        self._emit(TokenType.EOS, None, last_line, 0)
        return self._tokens

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _emit(self, token_type: TokenType, value: Any, lineno: int, col_offset: int) -> None:
        self._tokens.append(Token(token_type, value, lineno, col_offset))

    def _error(
        self,
        message: str,
        lineno: int,
        col_offset: int | None = None,
        suggestion: str | None = None,
    ) -> TemplateSyntaxError:
        return TemplateSyntaxError(
            message,
            lineno=lineno,
            name=self._name,
            source=self._source,
            col_offset=col_offset,
            suggestion=suggestion,
        )

    # ------------------------------------------------------------------
    # Indentation
    # ------------------------------------------------------------------

    def _measure_indent(self, raw: str, lineno: int) -> int:
        content = raw.lstrip(" \t")
        whitespace = raw[: len(raw) - len(content)]
        if not whitespace:
            return 0

        if " " in whitespace and "\t" in whitespace:
            raise self._error("Mixed tabs and spaces in indentation", lineno, 0)

        char = whitespace[0]
        if self._indent_char is None:
            self._indent_char = char
        elif char != self._indent_char:
            expected = "tabs" if self._indent_char == "\t" else "spaces"
            raise self._error(f"Inconsistent indentation, expected {expected}", lineno, 0)
        return len(whitespace)

    def _emit_indentation(self, indent: int, lineno: int) -> None:
        if indent > self._indents[-1]:
            self._indents.append(indent)
            self._emit(TokenType.INDENT, indent, lineno, 0)
            return

        while indent < self._indents[-1]:
            self._indents.pop()
            self._emit(TokenType.OUTDENT, indent, lineno, 0)

        if indent != self._indents[-1]:
            raise self._error(
                "Inconsistent indentation",
                lineno,
                indent,
                suggestion="Dedent to the same column as an enclosing line",
            )

    # ------------------------------------------------------------------
    # Line content
    # ------------------------------------------------------------------

    def _lex_line(self, content: str, lineno: int, col: int) -> None:
        if content.startswith("|"):
            text = content[1:]
            self._emit(TokenType.TEXT, text[1:] if text.startswith(" ") else text, lineno, col)
            return

        if PLACEHOLDER_PATTERN.match(content):
            self._emit(TokenType.TEXT, content, lineno, col)
            return

        keyword = _KEYWORD.match(content)
        if keyword:
            word = keyword.group(1)
            argument = (keyword.group(2) or "").strip()
            if not argument:
                what = "name" if word == "block" else "path"
                raise self._error(f"Expected a {what} after '{word}'", lineno, col + len(word))
            self._emit(_KEYWORD_TOKENS[word], argument, lineno, col)
            return

        self._lex_tag(content, lineno, col)

    def _lex_tag(self, content: str, lineno: int, col: int) -> None:
        match = _TAG_NAME.match(content)
        if match:
            self._emit(TokenType.TAG, match.group(), lineno, col)
            pos = match.end()
        elif content[:1] in ("#", "."):
            self._emit(TokenType.TAG, "div", lineno, col)
            pos = 0
        else:
            raise self._error(
                f"Unexpected text '{content}'",
                lineno,
                col,
                suggestion="Start plain text lines with '| '",
            )

        while pos < len(content):
            char = content[pos]
            if char == "#":
                match = _ID.match(content, pos)
                if not match:
                    raise self._error("Expected an id after '#'", lineno, col + pos)
                self._emit(TokenType.ID, match.group(1), lineno, col + pos)
                pos = match.end()
            elif char == ".":
                match = _CLASS.match(content, pos)
                if match:
                    self._emit(TokenType.CLASS, match.group(1), lineno, col + pos)
                    pos = match.end()
                elif pos == len(content) - 1:
                    self._emit(TokenType.DOT, None, lineno, col + pos)
                    pos += 1
                else:
                    raise self._error("Invalid class name", lineno, col + pos + 1)
            elif char == "(":
                pos = self._lex_attributes(content, pos + 1, lineno, col)
            elif char == ":":
                self._emit(TokenType.COLON, None, lineno, col + pos)
                rest = content[pos + 1 :].lstrip()
                if not rest:
                    raise self._error("Expected content after ':'", lineno, col + pos)
                self._lex_line(rest, lineno, col + len(content) - len(rest))
                return
            elif char == " ":
                text = content[pos + 1 :]
                if text.strip():
                    self._emit(TokenType.TEXT, text, lineno, col + pos + 1)
                return
            else:
                raise self._error(f"Unexpected character {char!r}", lineno, col + pos)

    # ------------------------------------------------------------------
    # Attributes
    # ------------------------------------------------------------------

    def _skip(self, content: str, pos: int, chars: str) -> int:
        while pos < len(content) and content[pos] in chars:
            pos += 1
        return pos

    def _lex_attributes(self, content: str, pos: int, lineno: int, col: int) -> int:
        """Lex ``name=value`` pairs up to the closing ``)``; returns the position after it."""
        while True:
            pos = self._skip(content, pos, " \t,")
            if pos >= len(content):
                raise self._error(
                    "Unclosed attribute list",
                    lineno,
                    col + pos,
                    suggestion="Close the attribute list with ')' on the same line",
                )
            if content[pos] == ")":
                return pos + 1

            match = _ATTR_NAME.match(content, pos)
            if not match:
                raise self._error("Expected attribute name", lineno, col + pos)
            name = match.group()
            start = pos
            pos = self._skip(content, match.end(), " \t")

            value: str | int | float | bool = True
            if content.startswith("=", pos):
                pos = self._skip(content, pos + 1, " \t")
                value, pos = self._lex_attribute_value(content, pos, lineno, col)

            self._emit(TokenType.ATTRIBUTE, (name, value), lineno, col + start)

    def _lex_attribute_value(
        self, content: str, pos: int, lineno: int, col: int
    ) -> tuple[str | int | float | bool, int]:
        if pos >= len(content):
            raise self._error("Expected attribute value", lineno, col + pos)

        quote = content[pos]
        if quote in ("'", '"'):
            chars: list[str] = []
            index = pos + 1
            while index < len(content):
                char = content[index]
                if char == "\\" and index + 1 < len(content):
                    chars.append(content[index + 1])
                    index += 2
                    continue
                if char == quote:
                    return "".join(chars), index + 1
                chars.append(char)
                index += 1
            raise self._error("Unterminated attribute string", lineno, col + pos)

        end = pos
        while end < len(content) and content[end] not in _BARE_VALUE_STOP:
            end += 1
        raw = content[pos:end]

        if raw == "true":
            return True, end
        if raw == "false":
            return False, end
        if _NUMBER.fullmatch(raw):
            is_float = any(c in raw for c in ".eE")
            return (float(raw) if is_float else int(raw)), end
        if PLACEHOLDER_PATTERN.fullmatch(raw):
            return raw, end
        raise self._error(
            f"Unquoted attribute value '{raw}'",
            lineno,
            col + pos,
            suggestion="Quote the value, or interpolate the expression",
        )

    # ------------------------------------------------------------------
    # Text blocks
    # ------------------------------------------------------------------

    def _lex_text_block(self, parent_indent: int, lineno: int) -> None:
        """Consume the lines indented under ``tag.`` as one TEXT token."""
        lines: list[str] = []
        base: int | None = None
        while self._index < len(self._lines):
            raw = self._lines[self._index]
            if not raw.strip():
                lines.append("")
                self._index += 1
                continue
            indent = len(raw) - len(raw.lstrip(" \t"))
            if indent <= parent_indent:
                break
            if base is None:
                base = indent
            lines.append(raw[min(base, indent) :])
            self._index += 1

        while lines and not lines[-1]:
            lines.pop()
        if lines:
            self._emit(TokenType.TEXT, "\n".join(lines), lineno + 1, base or 0)


def tokenize(source: str, name: str | None = None) -> list[Token]:
    """Tokenize markup source.

    Raises:
        TemplateSyntaxError: On malformed indentation, tags or attributes.
    """
    return Lexer(source, name).tokenize()
