"""pugtree: indentation markup templates compiled to element factory calls.

Compiles Pug-style markup embedded in host template literals into a tree of
``createElement(tag, props, *children)`` calls, with the host's
interpolation expressions spliced back into place.

Quickstart:
    >>> from pugtree import Environment
    >>> env = Environment()
    >>> env.compile(["ul.menu\\n  li: a(href=", ") Home"], ["url"])
    Call(callee=Reference(name='React.createElement'), args=(Literal(value='ul'), ...))

Python sources:
    >>> from pugtree import transform_source
    >>> transform_source('view = pug(f"Button(onClick={save}) Save")')
    "view = React.createElement(Button, {'onClick': save}, 'Save')"

Architecture:
Fragments → Encoder → Lexer → Parser → Markup AST → Composition → Compiler → Call-AST

Pipeline stages:
1. **Encoder**: Joins fragments with ``/~N~/`` placeholders, strips common indentation
2. **Lexer/Parser**: Build the immutable markup AST, loading include/extends targets
3. **Composition**: Picks the effective root and the block overrides of ``extends``
4. **Compiler**: Walks the tree, consuming each interpolation exactly once
5. **Lowering** (optional): Call-AST → Python ``ast`` for source transformation

Tag Classification:
Tags starting with an uppercase letter are components and compile to a
``Reference``; all others are elements and compile to a string ``Literal``.

"""

from pugtree._types import Token, TokenType
from pugtree.composition import Composition, resolve
from pugtree.cursor import InterpolationCursor
from pugtree.encoder import PLACEHOLDER_PATTERN, encode, normalize_indentation, placeholder
from pugtree.environment import (
    ChoiceLoader,
    CircularTemplateError,
    DictLoader,
    EmptyTemplateError,
    Environment,
    ErrorCode,
    FileSystemLoader,
    FunctionLoader,
    MultipleRootElementsError,
    NoParseResultError,
    SourceSnippet,
    TemplateDepthError,
    TemplateError,
    TemplateNotFoundError,
    TemplateSyntaxError,
    UnmatchedPlaceholderError,
    UnsupportedNodeTypeError,
    build_source_snippet,
)
from pugtree.compiler import Compiler, to_python_ast
from pugtree.transform import PugTransformer, transform_source
from pugtree.tstring import pug

__version__ = "0.1.0"

__all__ = [
    "PLACEHOLDER_PATTERN",
    "ChoiceLoader",
    "CircularTemplateError",
    "Compiler",
    "Composition",
    "DictLoader",
    "EmptyTemplateError",
    "Environment",
    "ErrorCode",
    "FileSystemLoader",
    "FunctionLoader",
    "InterpolationCursor",
    "MultipleRootElementsError",
    "NoParseResultError",
    "PugTransformer",
    "SourceSnippet",
    "TemplateDepthError",
    "TemplateError",
    "TemplateNotFoundError",
    "TemplateSyntaxError",
    "Token",
    "TokenType",
    "UnmatchedPlaceholderError",
    "UnsupportedNodeTypeError",
    "__version__",
    "build_source_snippet",
    "encode",
    "normalize_indentation",
    "placeholder",
    "pug",
    "resolve",
    "to_python_ast",
    "transform_source",
]
