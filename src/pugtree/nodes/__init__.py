"""pugtree AST nodes.

Two closed families of frozen dataclasses:

- Markup nodes (``Block``, ``NamedBlock``, ``Text``, ``Tag``, ``Include``,
  ``Extends``) produced by the parser.
- Call nodes (``Call``, ``Reference``, ``Literal``, ``NULL``, ``Props``,
  ``Property``, ``Concat``) produced by the compiler.
"""

from pugtree.nodes.base import Node
from pugtree.nodes.calls import (
    NULL,
    Call,
    CallNode,
    Concat,
    Literal,
    Property,
    Props,
    Reference,
)
from pugtree.nodes.markup import (
    Attribute,
    AttributeValue,
    Block,
    Extends,
    Include,
    MarkupNode,
    NamedBlock,
    Tag,
    Text,
)

__all__ = [
    "NULL",
    "Attribute",
    "AttributeValue",
    "Block",
    "Call",
    "CallNode",
    "Concat",
    "Extends",
    "Include",
    "Literal",
    "MarkupNode",
    "NamedBlock",
    "Node",
    "Property",
    "Props",
    "Reference",
    "Tag",
    "Text",
]
