"""Parser error handling for pugtree.

Provides ParseError, a TemplateSyntaxError located by the offending token.
"""

from __future__ import annotations

from pugtree._types import Token
from pugtree.environment.exceptions import TemplateSyntaxError


class ParseError(TemplateSyntaxError):
    """Parser error with rich source context.

    Displays errors with source code snippets and visual pointers,
    matching the format used by the lexer for consistency.
    """

    def __init__(
        self,
        message: str,
        token: Token,
        source: str | None = None,
        name: str | None = None,
        suggestion: str | None = None,
    ):
        self.token = token
        super().__init__(
            message,
            lineno=token.lineno,
            name=name,
            source=source,
            col_offset=token.col_offset,
            suggestion=suggestion,
        )
