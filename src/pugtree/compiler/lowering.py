"""Lowering of call-AST nodes to Python ``ast`` expressions.

Lets a Python host splice a compiled template into its own module and print
it with ``ast.unparse``:

    >>> expr = to_python_ast(call)
    >>> ast.unparse(expr)
    "React.createElement('div', {'className': 'card'}, title)"

Interpolations are expected to be ``ast.expr`` nodes already (the Python
source transformer supplies them that way). Plain scalars are accepted as
constants; anything else has no Python spelling and raises ``TypeError``.
"""

from __future__ import annotations

import ast
from typing import Any

from pugtree.nodes import Call, Concat, Literal, Props, Reference
from pugtree.nodes.calls import _NullType

_SCALARS = (str, int, float, bool, type(None))


def dotted_name(name: str) -> ast.expr:
    """``"React.createElement"`` → ``Attribute(Name("React"), "createElement")``."""
    head, *rest = name.split(".")
    expr: ast.expr = ast.Name(id=head, ctx=ast.Load())
    for attr in rest:
        expr = ast.Attribute(value=expr, attr=attr, ctx=ast.Load())
    return expr


def _lower_concat(node: Concat) -> ast.expr:
    values: list[ast.expr] = []
    for part in node.parts:
        if isinstance(part, Literal):
            values.append(ast.Constant(value=str(part.value)))
        else:
            values.append(
                ast.FormattedValue(value=to_python_ast(part), conversion=-1, format_spec=None)
            )
    return ast.JoinedStr(values=values)


def to_python_ast(node: Any) -> ast.expr:
    """Lower a call-AST node (or child list) to a Python expression.

    Raises:
        TypeError: If an interpolation is neither an ``ast.expr`` nor a scalar.
    """
    if isinstance(node, ast.expr):
        return node
    if isinstance(node, Call):
        return ast.Call(
            func=dotted_name(node.callee.name),
            args=[to_python_ast(arg) for arg in node.args],
            keywords=[],
        )
    if isinstance(node, Reference):
        return dotted_name(node.name)
    if isinstance(node, Literal):
        return ast.Constant(value=node.value)
    if isinstance(node, _NullType):
        return ast.Constant(value=None)
    if isinstance(node, Props):
        return ast.Dict(
            keys=[ast.Constant(value=prop.key) for prop in node.properties],
            values=[to_python_ast(prop.value) for prop in node.properties],
        )
    if isinstance(node, Concat):
        return _lower_concat(node)
    if isinstance(node, list):
        return ast.List(elts=[to_python_ast(item) for item in node], ctx=ast.Load())
    if isinstance(node, _SCALARS):
        return ast.Constant(value=node)
    raise TypeError(f"Cannot lower {type(node).__name__} to a Python expression")
