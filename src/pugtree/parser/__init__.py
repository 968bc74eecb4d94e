"""pugtree parser: builds the markup AST from the token stream.

Each line becomes one node; indented lines become the children of the line
above. ``include`` and ``extends`` are resolved while parsing through the
``resolve`` callback, so the tree handed to the compiler is complete.

Example:
    >>> from pugtree.lexer import tokenize
    >>> Parser(tokenize("ul\\n  li One\\n  li Two")).parse()
    Block(nodes=(Tag(name='ul', ...),))
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import replace

from pugtree._types import Token, TokenType
from pugtree.environment.exceptions import TemplateNotFoundError
from pugtree.nodes import Attribute, Block, Extends, Include, NamedBlock, Node, Tag, Text
from pugtree.parser.errors import ParseError

Resolver = Callable[[str], Node]

_BLOCK_NAME = re.compile(r"[\w-]+")


class Parser:
    """Recursive descent parser for pugtree token streams."""

    __slots__ = ("_name", "_nesting", "_pos", "_resolve", "_source", "_tokens")

    def __init__(
        self,
        tokens: list[Token],
        name: str | None = None,
        source: str | None = None,
        resolve: Resolver | None = None,
    ):
        self._tokens = tokens
        self._name = name
        self._source = source
        self._resolve = resolve
        self._pos = 0
        self._nesting = 0

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    @property
    def _current(self) -> Token:
        return self._tokens[min(self._pos, len(self._tokens) - 1)]

    def _match(self, *types: TokenType) -> bool:
        return self._current.type in types

    def _advance(self) -> Token:
        token = self._current
        if token.type != TokenType.EOS:
            self._pos += 1
        return token

    def _expect(self, token_type: TokenType, message: str) -> Token:
        if self._current.type != token_type:
            raise self._error(message)
        return self._advance()

    def _error(
        self, message: str, token: Token | None = None, suggestion: str | None = None
    ) -> ParseError:
        return ParseError(
            message,
            token or self._current,
            source=self._source,
            name=self._name,
            suggestion=suggestion,
        )

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def parse(self) -> Block:
        """Parse the whole token stream into a top-level Block."""
        nodes = self._parse_nodes()
        if not self._match(TokenType.EOS):
            raise self._error("Unexpected dedent")
        return Block(tuple(nodes), lineno=1)

    def _parse_nodes(self) -> list[Node]:
        nodes: list[Node] = []
        while not self._match(TokenType.OUTDENT, TokenType.EOS):
            if self._match(TokenType.INDENT):
                raise self._error("Unexpected indentation")
            if nodes and self._match(TokenType.EXTENDS):
                raise self._error(
                    "'extends' must be the first line of the template",
                    suggestion="Move 'extends' above all other content",
                )
            nodes.append(self._parse_statement())
        return nodes

    def _parse_statement(self) -> Node:
        """Parse one line plus any indented children below it."""
        chain = self._parse_line()
        self._expect(TokenType.NEWLINE, "Expected end of line")

        children: list[Node] = []
        if self._match(TokenType.INDENT):
            self._advance()
            self._nesting += 1
            children = self._parse_nodes()
            self._nesting -= 1
            self._expect(TokenType.OUTDENT, "Expected dedent")

        # Indented children belong to the innermost tag of a ``li: a`` expansion.
        node = self._attach(chain[-1], children)
        for outer in reversed(chain[:-1]):
            node = self._attach(outer, [node])
        return node

    def _attach(self, node: Node, children: list[Node]) -> Node:
        if not children:
            return node
        if isinstance(node, Tag):
            existing = node.block.nodes if node.block is not None else ()
            return replace(node, block=Block((*existing, *children), lineno=node.lineno))
        if isinstance(node, NamedBlock):
            return replace(node, nodes=(*node.nodes, *children))
        raise ParseError(
            f"{type(node).__name__} cannot have nested content",
            Token(TokenType.INDENT, None, node.lineno + 1, 0),
            source=self._source,
            name=self._name,
        )

    # ------------------------------------------------------------------
    # Lines
    # ------------------------------------------------------------------

    def _parse_line(self) -> list[Node]:
        """Parse a line into its chain of nodes (more than one for ``a: b`` expansion)."""
        chain: list[Node] = []
        while True:
            token = self._current
            if token.type == TokenType.TAG:
                node: Node = self._parse_tag()
            elif token.type == TokenType.TEXT:
                self._advance()
                node = Text(token.value, lineno=token.lineno, col_offset=token.col_offset)
            elif token.type == TokenType.BLOCK:
                node = self._parse_named_block()
            elif token.type == TokenType.EXTENDS:
                if self._nesting or chain:
                    raise self._error("'extends' is only allowed at the top level")
                node = self._parse_extends()
            elif token.type == TokenType.INCLUDE:
                node = self._parse_include()
            else:
                raise self._error(f"Unexpected {token.type.name.lower()}")

            chain.append(node)
            if isinstance(node, Tag) and self._match(TokenType.COLON):
                self._advance()
                continue
            return chain

    def _parse_tag(self) -> Tag:
        """Parse ``name#id.class(attrs) text``; shorthand ids and classes become attributes."""
        start = self._advance()
        attrs: list[Attribute] = []
        while self._match(TokenType.ID, TokenType.CLASS, TokenType.ATTRIBUTE):
            token = self._advance()
            if token.type == TokenType.ID:
                attrs.append(Attribute("id", token.value))
            elif token.type == TokenType.CLASS:
                attrs.append(Attribute("class", token.value))
            else:
                attrs.append(Attribute(*token.value))

        inline: list[Node] = []
        if self._match(TokenType.DOT):
            self._advance()
        if self._match(TokenType.TEXT):
            token = self._advance()
            inline.append(Text(token.value, lineno=token.lineno, col_offset=token.col_offset))

        return Tag(
            start.value,
            tuple(attrs),
            Block(tuple(inline), lineno=start.lineno),
            lineno=start.lineno,
            col_offset=start.col_offset,
        )

    def _parse_named_block(self) -> NamedBlock:
        start = self._advance()
        if not _BLOCK_NAME.fullmatch(start.value):
            raise self._error(
                f"Invalid block name '{start.value}'",
                start,
                suggestion="Block names are single words; append/prepend modes are not supported",
            )
        return NamedBlock(start.value, (), lineno=start.lineno, col_offset=start.col_offset)

    def _load(self, token: Token) -> Node:
        if self._resolve is None:
            raise TemplateNotFoundError(
                f"Cannot load '{token.value}' from {self._name or '<template>'}:"
                f"{token.lineno}: no loader configured"
            )
        return self._resolve(token.value)

    def _parse_extends(self) -> Extends:
        start = self._advance()
        return Extends(
            self._load(start),
            start.value,
            lineno=start.lineno,
            col_offset=start.col_offset,
        )

    def _parse_include(self) -> Include:
        start = self._advance()
        return Include(
            self._load(start),
            start.value,
            lineno=start.lineno,
            col_offset=start.col_offset,
        )


def parse(source: str, name: str | None = None, resolve: Resolver | None = None) -> Block:
    """Tokenize and parse markup source into a top-level Block."""
    from pugtree.lexer import tokenize

    return Parser(tokenize(source, name), name=name, source=source, resolve=resolve).parse()
