"""Command-line interface for pugtree."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from pugtree.environment import Environment, FileSystemLoader, TemplateError
from pugtree.transform import transform_source
from pugtree.utils.constants import DEFAULT_FACTORY, DEFAULT_MAX_DEPTH


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None
    output_file: Path | None
    factory: str
    strict: bool
    templates: list[Path]
    max_depth: int
    verbose: bool
    list_templates: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="pugtree",
        description="Compile pug(...) markup templates in a Python file to element factory calls",
    )
    p.add_argument("input", nargs="?", help="Input .py file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--factory",
        default=DEFAULT_FACTORY,
        metavar="NAME",
        help=f"Element factory to call (default: {DEFAULT_FACTORY})",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Fail on placeholders without a matching interpolation",
    )
    p.add_argument(
        "--templates",
        action="append",
        default=[],
        metavar="DIR",
        help="Directory for include/extends targets (repeatable)",
    )
    p.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        metavar="N",
        help=f"Nesting limit for tags and includes (default: {DEFAULT_MAX_DEPTH})",
    )
    p.add_argument(
        "--list",
        dest="list_templates",
        action="store_true",
        help="List the templates found under --templates and exit",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log pipeline stages to stderr")
    return p


def resolve_options(args: argparse.Namespace) -> CliOptions:
    return CliOptions(
        input_file=Path(args.input) if args.input else None,
        output_file=Path(args.output) if args.output else None,
        factory=args.factory,
        strict=args.strict,
        templates=[Path(p) for p in args.templates],
        max_depth=args.max_depth,
        verbose=args.verbose,
        list_templates=args.list_templates,
    )


def build_environment(options: CliOptions) -> Environment:
    """Map CLI options onto an Environment."""
    return Environment(
        loader=FileSystemLoader(options.templates) if options.templates else None,
        factory=options.factory,
        strict=options.strict,
        max_depth=options.max_depth,
    )


def compile_file(options: CliOptions) -> str:
    """Read a Python file and compile every ``pug(...)`` call in it."""
    if options.input_file is None:
        raise ValueError("an input file is required")
    source = options.input_file.read_text(encoding="utf-8")
    return transform_source(source, build_environment(options), str(options.input_file))


def list_templates(options: CliOptions) -> list[str]:
    """Names of the templates ``include``/``extends`` can reach under ``--templates``."""
    return FileSystemLoader(options.templates).list_templates()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)
    options = resolve_options(args)

    if options.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if options.list_templates:
        if not options.templates:
            print("error: --list needs at least one --templates directory", file=sys.stderr)
            return 2
        for name in list_templates(options):
            print(name)
        return 0

    try:
        output = compile_file(options)
    except (OSError, SyntaxError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except TemplateError as exc:
        print(exc.format_compact(), file=sys.stderr)
        return 1

    if options.output_file:
        options.output_file.write_text(output + "\n", encoding="utf-8")
    else:
        sys.stdout.write(output + "\n")

    return 0
