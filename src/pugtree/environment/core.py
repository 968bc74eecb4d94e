"""Core Environment class for pugtree.

The Environment is the central configuration object. It owns the loader and
the compile options, and runs the pipeline::

    fragments + interpolations
        → encode    (placeholder tokens, de-indented markup)
        → parse     (markup AST; include/extends loaded here)
        → resolve   (composition root + block overrides)
        → compile   (call-AST, interpolations spliced back in)

Every compile builds its own cursor, block lookup and Compiler, so a single
Environment can be shared freely.
"""

from __future__ import annotations

import ast
import logging
import posixpath
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pugtree.compiler import Compiler, to_python_ast
from pugtree.composition import resolve
from pugtree.cursor import InterpolationCursor
from pugtree.encoder import encode
from pugtree.environment.exceptions import (
    CircularTemplateError,
    TemplateDepthError,
    TemplateNotFoundError,
)
from pugtree.lexer import tokenize
from pugtree.nodes import Block, Node
from pugtree.parser import Parser
from pugtree.utils.constants import ATTRIBUTE_TRANSLATIONS, DEFAULT_FACTORY, DEFAULT_MAX_DEPTH

if TYPE_CHECKING:
    from pugtree.environment.loaders import Loader
    from pugtree.tstring import TemplateProtocol

logger = logging.getLogger(__name__)

_TEMPLATE_EXTENSION = ".pug"


def _default_translations() -> Mapping[str, str]:
    return ATTRIBUTE_TRANSLATIONS


@dataclass
class Environment:
    """Configuration and entry point for compiling markup templates.

    Attributes:
        loader: Supplies ``include``/``extends`` targets (None disables them)
        factory: Dotted name of the element factory, e.g. ``"h"`` or ``"React.createElement"``
        attribute_translations: Markup attribute name → prop name
        strict: Raise ``UnmatchedPlaceholderError`` instead of dropping placeholders
        max_depth: Limit for tag nesting and include/extends chains

    Example:
            >>> env = Environment(factory="h")
            >>> env.compile(["div.card\\n  p ", ""], ["title"])
            Call(callee=Reference(name='h'), args=(Literal(value='div'), Props(...), Call(...)))

    """

    loader: Loader | None = None
    factory: str = DEFAULT_FACTORY
    attribute_translations: Mapping[str, str] = field(default_factory=_default_translations)
    strict: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")
        if not all(part.isidentifier() for part in self.factory.split(".")):
            raise ValueError(f"factory must be a dotted name, got {self.factory!r}")

    # ------------------------------------------------------------------
    # Pipeline stages
    # ------------------------------------------------------------------

    def encode(self, fragments: Sequence[str], interpolations: Sequence[Any] = ()) -> str:
        """Join host fragments into markup source with placeholder tokens."""
        return encode(fragments, interpolations)

    def parse(self, source: str, name: str | None = None) -> Block:
        """Parse markup source, loading ``include`` and ``extends`` targets.

        Raises:
            TemplateSyntaxError: On malformed markup.
            TemplateNotFoundError: If a target is missing or no loader is set.
            CircularTemplateError: If a target is already being loaded.
            TemplateDepthError: If the include/extends chain exceeds ``max_depth``.
        """
        return self._parse(source, name, ())

    def _parse(self, source: str, name: str | None, loading: tuple[str, ...]) -> Block:
        stack = (*loading, name) if name is not None else loading

        def load(path: str) -> Node:
            target = self._resolve_name(path, name)
            if target in stack:
                raise CircularTemplateError([*stack, target])
            if len(stack) >= self.max_depth:
                raise TemplateDepthError(self.max_depth, target)
            if self.loader is None:
                raise TemplateNotFoundError(
                    f"Cannot load '{target}' from {name or '<template>'}: no loader configured"
                )
            template_source, filename = self.loader.get_source(target)
            logger.debug(
                "Loading %s (%s) from %s", target, filename or "memory", name or "<template>"
            )
            return self._parse(template_source, target, stack)

        tokens = tokenize(source, name)
        return Parser(tokens, name=name, source=source, resolve=load).parse()

    @staticmethod
    def _resolve_name(path: str, parent: str | None) -> str:
        """Resolve an include/extends path against the including template.

        ``/x`` is relative to the loader root, anything else to the directory
        of ``parent``. A missing extension defaults to ``.pug``.
        """
        if not posixpath.splitext(path)[1]:
            path += _TEMPLATE_EXTENSION
        if path.startswith("/"):
            return posixpath.normpath(path.lstrip("/"))
        if parent:
            return posixpath.normpath(posixpath.join(posixpath.dirname(parent), path))
        return posixpath.normpath(path)

    def _compiler(self) -> Compiler:
        return Compiler(
            factory=self.factory,
            translations=self.attribute_translations,
            strict=self.strict,
            max_depth=self.max_depth,
        )

    # ------------------------------------------------------------------
    # Public entry points
    # ------------------------------------------------------------------

    def compile(
        self,
        fragments: Sequence[str],
        interpolations: Sequence[Any] = (),
        name: str | None = None,
    ) -> Any:
        """Compile host fragments and interpolations to a call-AST.

        Args:
            fragments: Literal text pieces of the host template
            interpolations: Opaque host expressions, one per gap between fragments
            name: Template name used in errors and for relative includes

        Returns:
            The call-AST for the template root (a ``Call`` for a tag root).
        """
        source = self.encode(fragments, interpolations)
        logger.debug(
            "Encoded %s: %d fragments, %d interpolations",
            name or "<template>",
            len(fragments),
            len(interpolations),
        )

        tree = self.parse(source, name)
        composition = resolve(tree.nodes)

        cursor = InterpolationCursor(interpolations)
        result = self._compiler().compile(composition.root, cursor, composition.lookup)

        leftover = cursor.unconsumed()
        if leftover:
            logger.warning(
                "%s: %d interpolation(s) never used: %s",
                name or "<template>",
                len(leftover),
                ", ".join(str(index) for index in leftover),
            )
        logger.debug(
            "Compiled %s (%d/%d interpolations consumed)",
            name or "<template>",
            cursor.consumed,
            len(cursor),
        )
        return result

    def from_string(self, source: str, name: str | None = None) -> Any:
        """Compile plain markup source with no interpolations."""
        return self.compile([source], (), name)

    def get_template(self, name: str) -> Any:
        """Load a template through the loader and compile it.

        Raises:
            TemplateNotFoundError: If no loader is configured or the template is missing.
        """
        if self.loader is None:
            raise TemplateNotFoundError(f"Cannot load '{name}': no loader configured")
        source, _ = self.loader.get_source(name)
        return self.compile([source], (), name)

    def compile_template(self, template: TemplateProtocol) -> Any:
        """Compile a t-string (or any object with ``strings`` and ``interpolations``).

        Interpolation values are spliced as-is.
        """
        from pugtree.tstring import TemplateProtocol

        if not isinstance(template, TemplateProtocol):
            raise TypeError(
                "compile_template() expects a string.templatelib.Template or compatible object"
            )
        values = [interpolation.value for interpolation in template.interpolations]
        return self.compile(list(template.strings), values)

    def to_python(self, node: Any) -> ast.expr:
        """Lower a call-AST node to a Python expression."""
        return to_python_ast(node)
