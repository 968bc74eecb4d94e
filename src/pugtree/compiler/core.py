"""pugtree Compiler Core: main Compiler class.

The Compiler transforms a markup AST into a call-AST: a tree of
``createElement(tag, props, *children)`` calls with the host's
interpolation expressions spliced back into place. Uses a mixin-based
design like the rest of the compiler package.

Design Principles:
1. **Pure walk**: the result depends only on the node, the block lookup and
   the interpolations; nothing carries over between ``compile()`` calls
2. **Closed dispatch**: dict-based node type → handler lookup; anything
   else is an ``UnsupportedNodeTypeError``
3. **Consume once**: every placeholder takes its interpolation from the
   cursor exactly once, in document order

Output Shape:
    ```
    div.card
      h2 /~0~/
      Button(onClick=/~1~/) Save
    ```
    compiles to

    ```python
    Call(Reference("React.createElement"), (
        Literal("div"),
        Props((Property("className", Literal("card")),)),
        Call(Reference("React.createElement"), (Literal("h2"), NULL, <expr 0>)),
        Call(Reference("React.createElement"), (
            Reference("Button"),
            Props((Property("onClick", <expr 1>),)),
            Literal("Save"),
        )),
    ))
    ```

"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from pugtree.compiler.attributes import AttributeCompilationMixin
from pugtree.compiler.interpolation import InterpolationMixin
from pugtree.cursor import InterpolationCursor
from pugtree.environment.exceptions import TemplateDepthError, UnsupportedNodeTypeError
from pugtree.nodes import (
    Block,
    Call,
    Extends,
    Include,
    Literal,
    NamedBlock,
    Node,
    Reference,
    Tag,
    Text,
)
from pugtree.utils.constants import ATTRIBUTE_TRANSLATIONS, DEFAULT_FACTORY, DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)

BlockLookup = Callable[[str], Sequence[Node] | None]


def flatten(items: Sequence[Any]) -> list[Any]:
    """Collapse nested child lists into one flat list, keeping order."""
    flat: list[Any] = []
    for item in items:
        if isinstance(item, list):
            flat.extend(flatten(item))
        else:
            flat.append(item)
    return flat


class Compiler(AttributeCompilationMixin, InterpolationMixin):
    """Compile markup AST nodes to call-AST nodes.

    Attributes:
        _factory: Name of the element factory every call targets
        _translations: Attribute name translation table
        _strict: Raise on unmatched placeholders instead of dropping them
        _max_depth: Nesting limit for tags, blocks, includes and extends
        _cursor: Interpolation cursor for the running compile (None between compiles)
        _lookup: Block override lookup for the running compile
        _depth: Current nesting depth

    Node Dispatch:
        Uses O(1) dict lookup for node type → handler:
            ```python
            handler = self._node_dispatch[type(node)]
            ```

    Example:
            >>> from pugtree.compiler import Compiler
            >>> from pugtree.cursor import InterpolationCursor
            >>> from pugtree.nodes import Tag, Text, Block
            >>> tree = Tag("p", (), Block((Text("Hello /~0~/"),)))
            >>> Compiler().compile(tree, InterpolationCursor(["name"]))
            Call(callee=Reference(name='React.createElement'), args=(Literal(value='p'), NULL, Literal(value='Hello '), 'name'))

    """

    __slots__ = (
        "_cursor",
        "_depth",
        "_factory",
        "_lookup",
        "_max_depth",
        "_node_dispatch",
        "_strict",
        "_translations",
    )

    def __init__(
        self,
        factory: str = DEFAULT_FACTORY,
        translations: Mapping[str, str] = ATTRIBUTE_TRANSLATIONS,
        strict: bool = False,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        self._factory = factory
        self._translations = translations
        self._strict = strict
        self._max_depth = max_depth
        self._cursor: InterpolationCursor | None = None
        self._lookup: BlockLookup | None = None
        self._depth = 0
        self._node_dispatch: dict[type, Callable[[Any], Any]] = {
            Block: self._compile_block,
            NamedBlock: self._compile_named_block,
            Text: self._compile_text,
            Tag: self._compile_tag,
            Include: self._compile_include,
            Extends: self._compile_extends,
        }

    def compile(
        self,
        node: Node,
        cursor: InterpolationCursor | None = None,
        lookup: BlockLookup | None = None,
    ) -> Any:
        """Compile a markup node to a call-AST node.

        Args:
            node: Root markup node (usually the Composition root)
            cursor: Interpolation cursor; consumed as placeholders are met
            lookup: Block override lookup from the composition resolver

        Returns:
            A ``Call`` for tags, a list for blocks and text.

        Raises:
            UnsupportedNodeTypeError: If a node outside the markup AST is met.
            UnmatchedPlaceholderError: In strict mode, for a placeholder whose
                interpolation is missing or already consumed.
            TemplateDepthError: If nesting exceeds ``max_depth``.
        """
        self._cursor = cursor if cursor is not None else InterpolationCursor()
        self._lookup = lookup
        self._depth = 0
        try:
            return self._compile_node(node)
        finally:
            self._cursor = None
            self._lookup = None

    def _compile_node(self, node: Node) -> Any:
        handler = self._node_dispatch.get(type(node))
        if handler is None:
            raise UnsupportedNodeTypeError(type(node).__name__)
        return handler(node)

    def _descend(self, node: Node) -> Any:
        """Compile a nested node, enforcing the depth limit."""
        self._depth += 1
        try:
            if self._depth > self._max_depth:
                raise TemplateDepthError(self._max_depth)
            return self._compile_node(node)
        finally:
            self._depth -= 1

    def _compile_nodes(self, nodes: Sequence[Node]) -> list[Any]:
        return [self._descend(child) for child in nodes]

    def _compile_block(self, node: Block) -> list[Any]:
        return self._compile_nodes(node.nodes)

    def _compile_named_block(self, node: NamedBlock) -> list[Any]:
        """Compile a named block, preferring the override from an extending template."""
        override = self._lookup(node.name) if self._lookup is not None else None
        if override is not None:
            logger.debug("Block '%s' overridden", node.name)
            return self._compile_nodes(override)
        return self._compile_nodes(node.nodes)

    def _compile_text(self, node: Text) -> list[Any]:
        return self._splice(node.value)

    def _compile_tag_name(self, name: str) -> Reference | Literal:
        """Uppercase names are components (references), the rest are elements."""
        if name[:1].isupper():
            return Reference(name)
        return Literal(name)

    def _compile_tag(self, node: Tag) -> Call:
        args: list[Any] = [
            self._compile_tag_name(node.name),
            self._compile_attributes(node.attrs),
        ]
        if node.block is not None and node.block.nodes:
            args.extend(flatten(self._compile_nodes(node.block.nodes)))
        return Call(Reference(self._factory), tuple(args))

    def _compile_include(self, node: Include) -> Any:
        return self._descend(node.resolved_tree)

    def _compile_extends(self, node: Extends) -> Any:
        """Compile the parent tree and keep its first top-level result."""
        result = self._descend(node.resolved_tree)
        if isinstance(result, list):
            return result[0] if result else []
        return result
