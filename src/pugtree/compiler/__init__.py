"""pugtree compiler: markup AST → call-AST → Python AST.

- ``Compiler``: recursive descent producing ``createElement`` calls
- ``merge_attributes`` / ``needs_quoting``: attribute helpers
- ``to_python_ast``: lowering for Python hosts
"""

from pugtree.compiler.attributes import merge_attributes, needs_quoting
from pugtree.compiler.core import BlockLookup, Compiler, flatten
from pugtree.compiler.lowering import dotted_name, to_python_ast

__all__ = [
    "BlockLookup",
    "Compiler",
    "dotted_name",
    "flatten",
    "merge_attributes",
    "needs_quoting",
    "to_python_ast",
]
