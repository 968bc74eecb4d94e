"""Template loaders for pugtree.

Loaders supply the source of ``include`` and ``extends`` targets. They
implement ``get_source(name) -> (source, filename)``; ``filename`` is None
for sources that do not live on disk. Names arrive already resolved by the
Environment: relative to the including template, ``.pug`` appended when no
extension was given, ``..`` segments folded.

Built-in Loaders:
- `FileSystemLoader`: Load from template directories
- `DictLoader`: Load from an in-memory mapping (tests, embedded templates)
- `ChoiceLoader`: Try several loaders in order
- `FunctionLoader`: Wrap a callable

Custom Loaders:
    ```python
    class PackageDataLoader:
        def get_source(self, name: str) -> tuple[str, str | None]:
            try:
                text = files("myapp.views").joinpath(name).read_text()
            except FileNotFoundError:
                raise TemplateNotFoundError(f"Template '{name}' not found") from None
            return text, f"myapp.views/{name}"
    ```

Loaders that can enumerate their templates also provide ``list_templates()``;
it feeds the "Did you mean" hints and ``pugtree --list``.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from difflib import get_close_matches
from pathlib import Path, PurePosixPath
from typing import Protocol

from pugtree.environment.exceptions import TemplateNotFoundError

_MAX_LISTED = 10


class Loader(Protocol):
    def get_source(self, name: str) -> tuple[str, str | None]: ...


def _not_found(name: str, available: Iterable[str], where: str = "") -> TemplateNotFoundError:
    """Build a not-found error, suggesting the closest known template name."""
    known = sorted(available)
    msg = f"Template '{name}' not found{where}"
    matches = get_close_matches(name, known, n=1, cutoff=0.6)
    if matches:
        msg += f". Did you mean '{matches[0]}'?"
    elif known:
        msg += f". Available: {', '.join(known[:_MAX_LISTED])}"
        if len(known) > _MAX_LISTED:
            msg += f" ... ({len(known)} total)"
    return TemplateNotFoundError(msg)


class FileSystemLoader:
    """Load templates from one or more directories.

    Directories are searched in order and the first match wins, so a project
    can shadow shared partials:
        ```python
        loader = FileSystemLoader(["views/custom/", "views/shared/"])
        ```

    Names that climb out of the search path (``../secrets.pug``) are never
    read.

    Raises:
        TemplateNotFoundError: If no search path holds the template
    """

    __slots__ = ("_encoding", "_extensions", "_paths")

    def __init__(
        self,
        paths: str | Path | list[str | Path],
        encoding: str = "utf-8",
        extensions: tuple[str, ...] = (".pug",),
    ):
        self._paths = [Path(paths)] if isinstance(paths, (str, Path)) else [Path(p) for p in paths]
        self._encoding = encoding
        self._extensions = extensions

    def get_source(self, name: str) -> tuple[str, str]:
        relative = PurePosixPath(name)
        if relative.is_absolute() or ".." in relative.parts:
            raise TemplateNotFoundError(f"Template '{name}' is outside the search path")

        for base in self._paths:
            candidate = base.joinpath(*relative.parts)
            if candidate.is_file():
                return candidate.read_text(self._encoding), str(candidate)

        searched = ", ".join(str(p) for p in self._paths)
        raise _not_found(name, self.list_templates(), f" in: {searched}")

    def list_templates(self) -> list[str]:
        """Template names under every search path, as ``get_source`` accepts them."""
        found: set[str] = set()
        for base in self._paths:
            if not base.is_dir():
                continue
            found.update(
                path.relative_to(base).as_posix()
                for path in base.rglob("*")
                if path.suffix in self._extensions and path.is_file()
            )
        return sorted(found)


class DictLoader:
    """Serve templates from a ``name -> source`` mapping.

    Example:
            >>> loader = DictLoader({
            ...     "layout.pug": "html\\n  body\\n    block content",
            ...     "page.pug": "extends layout\\nblock content\\n  p Hi",
            ... })

    """

    __slots__ = ("_mapping",)

    def __init__(self, mapping: Mapping[str, str]):
        self._mapping = mapping

    def get_source(self, name: str) -> tuple[str, None]:
        try:
            return self._mapping[name], None
        except KeyError:
            raise _not_found(name, self._mapping) from None

    def list_templates(self) -> list[str]:
        return sorted(self._mapping)


class ChoiceLoader:
    """Try loaders in order; the first one that has the template wins."""

    __slots__ = ("_loaders",)

    def __init__(self, loaders: list[Loader]):
        self._loaders = loaders

    def get_source(self, name: str) -> tuple[str, str | None]:
        for loader in self._loaders:
            try:
                return loader.get_source(name)
            except TemplateNotFoundError:
                continue
        raise _not_found(
            name, self.list_templates(), f" in any of {len(self._loaders)} loaders"
        )

    def list_templates(self) -> list[str]:
        found: set[str] = set()
        for loader in self._loaders:
            list_templates = getattr(loader, "list_templates", None)
            if list_templates is not None:
                found.update(list_templates())
        return sorted(found)


class FunctionLoader:
    """Adapt a callable to the loader protocol.

    The callable gets the resolved template name and returns the source, a
    ``(source, filename)`` pair, or None when it has no such template.
    """

    __slots__ = ("_load",)

    def __init__(
        self,
        load: Callable[[str], str | tuple[str, str | None] | None],
    ):
        self._load = load

    def get_source(self, name: str) -> tuple[str, str | None]:
        loaded = self._load(name)
        if loaded is None:
            raise TemplateNotFoundError(f"Template '{name}' not found by {self._describe()}")
        if isinstance(loaded, str):
            return loaded, None
        return loaded

    def _describe(self) -> str:
        return getattr(self._load, "__qualname__", None) or repr(self._load)
