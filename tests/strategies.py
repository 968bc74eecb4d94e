"""Shared hypothesis strategies for pugtree property-based testing.

Provides reusable strategies at three levels:

- **Encoder**: markup lines and indentation prefixes
- **Markup**: tag names, class names and inline text
- **Attributes**: attribute lists with repeated names

These are building blocks -- individual test modules compose them into
property-specific strategies.
"""

from __future__ import annotations

from hypothesis import strategies as st

from pugtree.nodes import Attribute

# ---------------------------------------------------------------------------
# Encoder strategies
# ---------------------------------------------------------------------------

# A markup line that does not start with whitespace
markup_line = st.from_regex(r"[a-z|.#][a-z0-9 .#|()=\"-]{0,30}", fullmatch=True)

markup_lines = st.lists(markup_line, min_size=1, max_size=8)

indent_width = st.integers(min_value=0, max_value=12)

indent_char = st.sampled_from([" ", "\t"])

# ---------------------------------------------------------------------------
# Markup strategies
# ---------------------------------------------------------------------------

element_name = st.from_regex(r"[a-z][a-z0-9]{0,8}", fullmatch=True).filter(
    lambda name: name not in ("block", "extends", "include")
)

component_name = st.from_regex(r"[A-Z][A-Za-z0-9]{0,8}", fullmatch=True)

tag_name = st.one_of(element_name, component_name)

class_name = st.from_regex(r"[a-z][a-z0-9-]{0,8}", fullmatch=True)

# Inline text: no newlines, no placeholder markers, not blank
inline_text = st.text(
    alphabet=st.characters(
        whitelist_categories=("Lu", "Ll", "Nd"),
        whitelist_characters=" ,.!?'-",
    ),
    min_size=1,
    max_size=40,
).filter(lambda s: s.strip())

# ---------------------------------------------------------------------------
# Attribute strategies
# ---------------------------------------------------------------------------

_attr_name = st.sampled_from(["class", "id", "title", "data-id", "href", "tabindex"])

_attr_value = st.one_of(
    st.from_regex(r"[a-z0-9]{1,6}", fullmatch=True),
    st.integers(min_value=-100, max_value=100),
    st.booleans(),
)

attribute = st.builds(Attribute, _attr_name, _attr_value)

attribute_list = st.lists(attribute, min_size=0, max_size=8)

# String values only: merging these is a plain ordered join per name
string_attribute_list = st.lists(
    st.builds(Attribute, _attr_name, st.from_regex(r"[a-z0-9]{1,6}", fullmatch=True)),
    min_size=0,
    max_size=8,
)

class_values = st.lists(class_name, min_size=1, max_size=6)

# Number of interpolations in a generated template
interpolation_count = st.integers(min_value=1, max_value=12)
