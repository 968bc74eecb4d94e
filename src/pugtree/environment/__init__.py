"""Environment package for pugtree.

Public API:
- Environment: configuration and compile entry point
- Loaders: FileSystemLoader, DictLoader, ChoiceLoader, FunctionLoader
- Exceptions: TemplateError and friends, with their ErrorCode
"""

from pugtree.environment.exceptions import (
    CircularTemplateError,
    EmptyTemplateError,
    ErrorCode,
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
from pugtree.environment.loaders import (
    ChoiceLoader,
    DictLoader,
    FileSystemLoader,
    FunctionLoader,
    Loader,
)

__all__ = [
    "ChoiceLoader",
    "CircularTemplateError",
    "DictLoader",
    "EmptyTemplateError",
    "Environment",
    "ErrorCode",
    "FileSystemLoader",
    "FunctionLoader",
    "Loader",
    "MultipleRootElementsError",
    "NoParseResultError",
    "SourceSnippet",
    "TemplateDepthError",
    "TemplateError",
    "TemplateNotFoundError",
    "TemplateSyntaxError",
    "UnmatchedPlaceholderError",
    "UnsupportedNodeTypeError",
    "build_source_snippet",
]


# Loaded on first access: environment.core imports the compiler, and the
# compiler imports environment.exceptions.
def __getattr__(name: str) -> object:
    if name == "Environment":
        from pugtree.environment.core import Environment

        globals()["Environment"] = Environment
        return Environment
    raise AttributeError(f"module 'pugtree.environment' has no attribute {name!r}")
