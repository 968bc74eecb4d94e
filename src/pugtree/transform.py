"""Python source transformer: compiles ``pug(...)`` calls ahead of time.

Rewrites every ``pug(<f-string>)``, ``pug(<t-string>)`` or ``pug("...")``
call in a module into the element factory calls it stands for:

    >>> transform_source('view = pug(f"p.note Hello {name}")')
    "view = React.createElement('p', {'className': 'note'}, 'Hello ', name)"

The literal parts of the string become the template fragments; each
``{expression}`` becomes an interpolation and lands in the output as the
original Python expression. Calls nested inside an interpolation are
transformed first.
"""

from __future__ import annotations

import ast
import logging
from typing import Any

from pugtree.environment import Environment

logger = logging.getLogger(__name__)

# Python 3.14+ only
_TemplateStr = getattr(ast, "TemplateStr", None)


def _interpolated_expr(value: ast.expr, conversion: int, format_spec: ast.expr | None) -> ast.expr:
    """The spliced expression; ``{x!r}`` and ``{x:>4}`` keep their formatting as an f-string."""
    if conversion == -1 and format_spec is None:
        return value
    return ast.JoinedStr(
        values=[ast.FormattedValue(value=value, conversion=conversion, format_spec=format_spec)]
    )


def split_template(node: ast.expr) -> tuple[list[str], list[ast.expr]] | None:
    """Split a string-like expression into fragments and interpolation expressions.

    Returns None when ``node`` is not an f-string, t-string or string constant.
    """
    if isinstance(node, ast.Constant) and isinstance(node.value, str):
        return [node.value], []

    is_fstring = isinstance(node, ast.JoinedStr)
    if not is_fstring and not (_TemplateStr is not None and isinstance(node, _TemplateStr)):
        return None

    fragments = [""]
    interpolations: list[ast.expr] = []
    for part in node.values:  # type: ignore[attr-defined]
        if isinstance(part, ast.Constant):
            fragments[-1] += part.value
            continue
        interpolations.append(_interpolated_expr(part.value, part.conversion, part.format_spec))
        fragments.append("")
    return fragments, interpolations


class PugTransformer(ast.NodeTransformer):
    """Replace ``pug(...)`` calls with their compiled element expressions.

    Example:
            >>> tree = ast.parse(source)
            >>> tree = PugTransformer(Environment(factory="h")).visit(tree)
            >>> ast.fix_missing_locations(tree)

    """

    def __init__(self, env: Environment | None = None, tag: str = "pug"):
        self._env = env or Environment()
        self._tag = tag
        self.transformed = 0

    def _is_tag_call(self, node: ast.Call) -> bool:
        return (
            isinstance(node.func, ast.Name)
            and node.func.id == self._tag
            and len(node.args) == 1
            and not node.keywords
        )

    def visit_Call(self, node: ast.Call) -> Any:
        self.generic_visit(node)
        if not self._is_tag_call(node):
            return node

        split = split_template(node.args[0])
        if split is None:
            return node

        fragments, interpolations = split
        logger.debug("Compiling %s() call at line %d", self._tag, node.lineno)
        compiled = self._env.compile(fragments, interpolations)
        self.transformed += 1
        return ast.copy_location(self._env.to_python(compiled), node)


def transform_source(source: str, env: Environment | None = None, filename: str = "<unknown>") -> str:
    """Transform a Python module's source, compiling every ``pug(...)`` call.

    Raises:
        SyntaxError: If ``source`` is not valid Python.
        TemplateError: If any template fails to compile.
    """
    tree = ast.parse(source, filename)
    transformer = PugTransformer(env)
    tree = transformer.visit(tree)
    ast.fix_missing_locations(tree)
    logger.debug("Transformed %d template(s) in %s", transformer.transformed, filename)
    return ast.unparse(tree)
