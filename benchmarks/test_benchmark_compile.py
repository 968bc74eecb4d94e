"""Full compile pipeline benchmarks: encode → lex → parse → resolve → compile.

Measures env.compile() for templates of increasing size, plus the lowering
and source transformation steps a Python build runs on top.

Run with: pytest benchmarks/test_benchmark_compile.py --benchmark-only -v
"""

from __future__ import annotations

import pytest
from pytest_benchmark.fixture import BenchmarkFixture

from pugtree import DictLoader, Environment, transform_source

MINIMAL = ["p Hello ", ""]

SMALL = ["ul.menu\n  li: a(href=", ") Home\n  li: a(href=", ") About\n"]

MEDIUM = [
    """\
div.profile
  h1.title """,
    """
  p.bio """,
    """
  ul.posts
    li.post
      h2 """,
    """
      p """,
    """
      Button(onClick=""",
    """, disabled=false) Read more
  footer
    | Joined
    span.date """,
    "",
]

LARGE = ["section\n"] + ["  article.card\n    h2 Title\n    p Body text\n"] * 100


def _interpolations(fragments: list[str]) -> list[str]:
    return [f"expr{i}" for i in range(len(fragments) - 1)]


@pytest.mark.benchmark(group="compile:pipeline:minimal")
def test_compile_minimal(benchmark: BenchmarkFixture) -> None:
    """Full pipeline: one tag, one interpolation."""
    env = Environment()
    benchmark(env.compile, MINIMAL, _interpolations(MINIMAL))


@pytest.mark.benchmark(group="compile:pipeline:small")
def test_compile_small(benchmark: BenchmarkFixture) -> None:
    """Full pipeline: block expansion and attribute interpolations."""
    env = Environment()
    benchmark(env.compile, SMALL, _interpolations(SMALL))


@pytest.mark.benchmark(group="compile:pipeline:medium")
def test_compile_medium(benchmark: BenchmarkFixture) -> None:
    """Full pipeline: nested tags, components and mixed text."""
    env = Environment()
    benchmark(env.compile, MEDIUM, _interpolations(MEDIUM))


@pytest.mark.benchmark(group="compile:pipeline:large")
def test_compile_large(benchmark: BenchmarkFixture) -> None:
    """Full pipeline: 100 sibling cards, no interpolations."""
    env = Environment()
    source = "".join(LARGE)
    benchmark(env.from_string, source)


@pytest.mark.benchmark(group="compile:extends")
def test_compile_extends(benchmark: BenchmarkFixture) -> None:
    """Layout inheritance with includes, loaded from memory on every compile."""
    env = Environment(
        loader=DictLoader(
            {
                "layout.pug": "html\n  body\n    include nav\n    block content\n",
                "nav.pug": 'nav\n  a(href="/") Home\n',
            }
        )
    )
    benchmark(env.from_string, "extends layout\nblock content\n  p Page")


@pytest.mark.benchmark(group="transform")
def test_transform_source(benchmark: BenchmarkFixture) -> None:
    """Python source transformation including lowering and unparse."""
    source = "\n".join(f'v{i} = pug(f"li.item(data-i={{i}}) {{label}}")' for i in range(20))
    benchmark(transform_source, source)
