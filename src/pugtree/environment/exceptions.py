"""Exceptions for pugtree template compilation.

Exception Hierarchy:
TemplateError (base)
├── EmptyTemplateError          # No literal fragments supplied
├── TemplateSyntaxError         # Markup could not be parsed
├── NoParseResultError          # Parser produced no usable tree
├── MultipleRootElementsError   # More than one top-level node without extends
├── UnsupportedNodeTypeError    # Unknown node reached the compiler
├── UnmatchedPlaceholderError   # Placeholder without interpolation (strict mode)
├── TemplateDepthError          # Include/extends/tag nesting too deep
├── TemplateNotFoundError       # Loader could not find include/extends target
└── CircularTemplateError       # Include/extends chain loops back on itself

Every error aborts the whole compilation; no partial output is returned.

Example:
    ```
    PT-CMP-001: Template must have a single root element, found 2
      --> card.pug:3
       |
      2 | div.header
     >3 | div.body
       |
      Hint: Wrap the elements in a single parent tag
    ```

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pugtree.environment import terminal

# ---------------------------------------------------------------------------
# Error codes
# ---------------------------------------------------------------------------


class ErrorCode(Enum):
    """Searchable error codes for pugtree errors.

    Format: PT-{CATEGORY}-{NUMBER}
    Categories: ENC (encoder), PAR (parser), CMP (compiler), TPL (template loading)
    """

    EMPTY_TEMPLATE = "PT-ENC-001"

    SYNTAX_ERROR = "PT-PAR-001"
    NO_PARSE_RESULT = "PT-PAR-002"

    MULTIPLE_ROOTS = "PT-CMP-001"
    UNSUPPORTED_NODE = "PT-CMP-002"
    UNMATCHED_PLACEHOLDER = "PT-CMP-003"
    DEPTH_EXCEEDED = "PT-CMP-004"

    TEMPLATE_NOT_FOUND = "PT-TPL-001"
    CIRCULAR_TEMPLATE = "PT-TPL-002"

    @property
    def category(self) -> str:
        """Error category (e.g., 'encoder', 'parser', 'compiler', 'template')."""
        prefix = self.value.split("-")[1]
        return {
            "ENC": "encoder",
            "PAR": "parser",
            "CMP": "compiler",
            "TPL": "template",
        }.get(prefix, "unknown")


# ---------------------------------------------------------------------------
# Source snippets
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SourceSnippet:
    """Template source context around an error line.

    Attributes:
        lines: Tuple of (line_number, line_content) pairs around the error.
        error_line: The 1-based line number where the error occurred.
        column: Optional column offset for caret pointer.
    """

    lines: tuple[tuple[int, str], ...]
    error_line: int
    column: int | None = None

    def format(self) -> str:
        parts: list[str] = [terminal.dim_text("   |")]
        for lineno, content in self.lines:
            parts.append(
                terminal.format_source_line(lineno, content, is_error=lineno == self.error_line)
            )
        if self.column is not None:
            caret = " " * self.column + "^"
            parts.append(f"{terminal.dim_text('   |')} {terminal.error_line(caret)}")
        parts.append(terminal.dim_text("   |"))
        return "\n".join(parts)


def build_source_snippet(
    source: str,
    error_line: int,
    *,
    context_lines: int = 2,
    column: int | None = None,
) -> SourceSnippet:
    """Build a SourceSnippet showing ``context_lines`` around ``error_line`` (1-based)."""
    all_lines = source.splitlines()
    start = max(0, error_line - 1 - context_lines)
    end = min(len(all_lines), error_line + context_lines)
    lines = tuple((i + 1, all_lines[i]) for i in range(start, end))
    return SourceSnippet(lines=lines, error_line=error_line, column=column)


class TemplateError(Exception):
    """Base exception for all pugtree errors.

    Attributes:
        code: ErrorCode identifying the failure kind.
        suggestion: Optional actionable hint shown by ``format_compact()``.
    """

    code: ErrorCode | None = None
    suggestion: str | None = None

    def format_compact(self) -> str:
        """Format error as a structured, human-readable summary without traceback noise."""
        parts = [terminal.format_error_header(self.code.value if self.code else None, str(self))]
        if self.suggestion:
            parts.append(f"  {terminal.hint('Hint:')} {self.suggestion}")
        return "\n".join(parts)


class EmptyTemplateError(TemplateError):
    """No literal fragments were supplied to the encoder."""

    code = ErrorCode.EMPTY_TEMPLATE

    def __init__(self, message: str = "Template has no literal fragments"):
        super().__init__(message)


class TemplateSyntaxError(TemplateError):
    """Markup source could not be parsed.

    When ``source`` and ``lineno`` are provided, the message includes a
    snippet of the offending line, with a caret under ``col_offset``.
    """

    code = ErrorCode.SYNTAX_ERROR

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        name: str | None = None,
        source: str | None = None,
        col_offset: int | None = None,
        suggestion: str | None = None,
    ):
        self.message = message
        self.lineno = lineno
        self.name = name
        self.source = source
        self.col_offset = col_offset
        self.suggestion = suggestion
        super().__init__(self._format_message())

    def _location(self) -> str:
        location = self.name or "<template>"
        if self.lineno:
            location += f":{self.lineno}"
            if self.col_offset is not None:
                location += f":{self.col_offset}"
        return location

    def _format_message(self) -> str:
        header = f"Syntax Error: {self.message}\n  --> {self._location()}"
        if self.source and self.lineno:
            lines = self.source.splitlines()
            if 0 < self.lineno <= len(lines):
                snippet = f"\n   |\n{self.lineno:>3} | {lines[self.lineno - 1]}"
                if self.col_offset is not None:
                    snippet += f"\n   | {' ' * self.col_offset}^"
                return header + snippet
        return header

    def format_compact(self) -> str:
        parts = [terminal.format_error_header(self.code.value, self.message)]
        parts.append(f"  --> {terminal.location(self._location())}")
        if self.source and self.lineno:
            snippet = build_source_snippet(self.source, self.lineno, column=self.col_offset)
            parts.append(snippet.format())
        if self.suggestion:
            parts.append(f"  {terminal.hint('Hint:')} {self.suggestion}")
        return "\n".join(parts)


class NoParseResultError(TemplateError):
    """The parser returned no usable tree."""

    code = ErrorCode.NO_PARSE_RESULT

    def __init__(self, message: str = "No markup nodes could be generated from the template"):
        super().__init__(message)


class MultipleRootElementsError(TemplateError):
    """More than one top-level node without a governing ``extends``."""

    code = ErrorCode.MULTIPLE_ROOTS
    suggestion = "Wrap the elements in a single parent tag"

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Template must have a single root element, found {count}")


class UnsupportedNodeTypeError(TemplateError):
    """A node outside the markup AST reached the compiler."""

    code = ErrorCode.UNSUPPORTED_NODE

    def __init__(self, node_type: str):
        self.node_type = node_type
        super().__init__(f"Unsupported node type: {node_type}")


class UnmatchedPlaceholderError(TemplateError):
    """A placeholder carries an index with no interpolation left to take.

    Only raised when the environment runs in strict mode; otherwise the
    placeholder is dropped with a warning.
    """

    code = ErrorCode.UNMATCHED_PLACEHOLDER
    suggestion = "Check that every placeholder token came from the encoder"

    def __init__(self, index: int, available: int):
        self.index = index
        self.available = available
        super().__init__(
            f"Placeholder /~{index}~/ has no matching interpolation ({available} supplied)"
        )


class TemplateDepthError(TemplateError):
    """Nesting went past the environment's ``max_depth``."""

    code = ErrorCode.DEPTH_EXCEEDED
    suggestion = "Raise Environment(max_depth=...) or flatten the template"

    def __init__(self, max_depth: int, name: str | None = None):
        self.max_depth = max_depth
        self.name = name
        where = f" in {name}" if name else ""
        super().__init__(f"Maximum template depth of {max_depth} exceeded{where}")


class TemplateNotFoundError(TemplateError):
    """Include or extends target not found by the loader."""

    code = ErrorCode.TEMPLATE_NOT_FOUND


class CircularTemplateError(TemplateError):
    """An include/extends chain refers back to a template still being loaded."""

    code = ErrorCode.CIRCULAR_TEMPLATE

    def __init__(self, chain: list[str]):
        self.chain = chain
        super().__init__(f"Circular template reference: {' -> '.join(chain)}")
