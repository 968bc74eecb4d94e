"""pugtree Template String support (PEP 750).

Provides the `pug` tag for Python 3.14+ t-strings: the literal parts are the
markup, the interpolated values are spliced into the call-AST as-is.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pugtree.environment import Environment


@runtime_checkable
class TemplateProtocol(Protocol):
    strings: tuple[str, ...]
    interpolations: tuple[Any, ...]


_default_environment = Environment()


def pug(template: TemplateProtocol, env: Environment | None = None) -> Any:
    """The `pug` tag for markup template strings.

    Example:
        >>> title = "Hello"
        >>> pug(t"h1.title {title}")
        Call(callee=Reference(name='React.createElement'), args=(Literal(value='h1'), Props(...), 'Hello'))

    """
    # Accept any object that structurally matches the template protocol, even
    # when the stdlib templatelib module is available (tests pass SimpleNamespace).
    if not isinstance(template, TemplateProtocol):
        raise TypeError("pug() expects a string.templatelib.Template or compatible object")
    return (env or _default_environment).compile_template(template)
