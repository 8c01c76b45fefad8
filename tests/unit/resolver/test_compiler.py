"""Tests for the markup compiler.

Snippet strings use ``${n}`` for tab stops and ``$0`` for the final cursor.
"""

from __future__ import annotations

import pytest

from tagcraft.config import MarkupConfig
from tagcraft.resolver.compiler import (
    VOID_ELEMENTS,
    compile_markup,
    escape_snippet,
    is_void_element,
)
from tagcraft.resolver.parser import TagExpression, parse_token


def _compile(token: str, config: MarkupConfig | None = None):
    return compile_markup(parse_token(token), token, config)


class TestVoidElements:
    """Self-closing detection."""

    def test_html_void_set(self) -> None:
        assert {"img", "br", "hr", "input", "meta", "link", "wbr"} <= VOID_ELEMENTS
        assert "div" not in VOID_ELEMENTS

    @pytest.mark.parametrize("tag", ["img", "IMG", "Br"])
    def test_case_insensitive(self, tag: str) -> None:
        assert is_void_element(tag)


class TestNonVoid:
    """Elements with content get a final stop and a closing tag."""

    def test_plain_tag(self) -> None:
        result = _compile("div")
        assert result.snippet == "<div>$0</div>"
        assert result.preview == "<div>|</div>"
        assert not result.is_void_element
        assert result.tab_stops == 0

    def test_class_attribute(self) -> None:
        """section.hero opens with the class, then $0, then the close tag."""
        expr = TagExpression(tag="section", classes=("hero",))
        result = compile_markup(expr, "section.hero")
        assert result.snippet == '<section className="hero">$0</section>'
        assert result.preview == '<section className="hero">|</section>'

    def test_classes_joined_with_space(self) -> None:
        assert _compile("p.a.b").snippet == '<p className="a b">$0</p>'

    def test_id_literal(self) -> None:
        assert _compile("div#main").snippet == '<div id="main">$0</div>'

    def test_all_fragments_in_order(self) -> None:
        result = _compile('a.link#home[href="/"][target=_blank]')
        assert result.snippet == (
            '<a className="link" id="home" href="/" target=_blank>$0</a>'
        )

    def test_unterminated_attr_verbatim(self) -> None:
        """'div[data-x' keeps the fragment as typed."""
        assert _compile("div[data-x").snippet == "<div data-x>$0</div>"


class TestPlaceholders:
    """Editable stops for fragments typed without a value."""

    def test_trailing_dot(self) -> None:
        """'div.' gets an empty class placeholder as stop 1."""
        result = _compile("div.")
        assert result.snippet == '<div className="${1}">$0</div>'
        assert result.preview == '<div className="|">|</div>'
        assert result.tab_stops == 1

    def test_trailing_hash(self) -> None:
        assert _compile("div#").snippet == '<div id="${1}">$0</div>'

    def test_dot_and_hash_numbered_in_order(self) -> None:
        """Each placeholder gets its own increasing stop."""
        result = _compile("div.#")
        assert result.snippet == '<div className="${1}" id="${2}">$0</div>'
        assert result.tab_stops == 2

    def test_literal_id_with_empty_class(self) -> None:
        result = _compile("div#main.")
        assert result.snippet == '<div className="${1}" id="main">$0</div>'

    def test_trailing_bracket(self) -> None:
        """A bare '[' offers an attribute placeholder."""
        result = _compile("div[")
        assert result.snippet == "<div ${1}>$0</div>"
        assert result.preview == "<div |>|</div>"

    def test_dot_inside_attr_still_counts(self) -> None:
        """The raw token check sees any '.', including inside brackets."""
        result = _compile('div[data-v="1.5"]')
        assert result.snippet == '<div className="${1}" data-v="1.5">$0</div>'


class TestVoid:
    """Self-closing elements."""

    def test_img_bare(self) -> None:
        """img closes itself, gets no alt placeholder and no $0."""
        result = compile_markup(TagExpression(tag="img"), "img")
        assert result.snippet == "<img />"
        assert result.preview == "<img />"
        assert result.is_void_element
        assert result.tab_stops == 0

    def test_img_uppercase_no_alt(self) -> None:
        assert _compile("IMG").snippet == "<IMG />"

    def test_other_void_gets_alt(self) -> None:
        result = _compile("br")
        assert result.snippet == '<br alt="${1}" />'
        assert result.preview == '<br alt="|" />'
        assert result.tab_stops == 1

    def test_alt_numbered_after_other_stops(self) -> None:
        result = _compile("hr.rule#")
        assert result.snippet == '<hr className="rule" id="${1}" alt="${2}" />'

    def test_alt_fragment_suppresses_placeholder(self) -> None:
        assert _compile("input[alt]").snippet == "<input alt />"

    def test_alt_with_value_does_not_suppress(self) -> None:
        """Only a fragment that is literally 'alt' counts."""
        result = _compile('input[alt="x"]')
        assert result.snippet == '<input alt="x" alt="${1}" />'


class TestEscaping:
    """Literal text cannot turn into snippet syntax."""

    def test_escape_snippet(self) -> None:
        assert escape_snippet("a$b}c\\") == "a\\$b\\}c\\\\"

    def test_dollar_in_attr_escaped(self) -> None:
        result = _compile('div[data-price="$5"]')
        assert result.snippet == '<div data-price="\\$5">$0</div>'
        assert result.preview == '<div data-price="$5">|</div>'


class TestConfig:
    """Rendering options."""

    def test_plain_html_class_attribute(self) -> None:
        config = MarkupConfig(class_attribute="class")
        result = _compile("section.hero", config)
        assert result.snippet == '<section class="hero">$0</section>'

    def test_preview_cursor_marker(self) -> None:
        config = MarkupConfig(preview_cursor="^")
        assert _compile("div.", config).preview == '<div className="^">^</div>'
