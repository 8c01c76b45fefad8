"""Tests for the keyword snippet catalog and the component scaffold."""

from __future__ import annotations

import pytest

from tagcraft.snippets import (
    KEYWORD_SNIPPETS,
    MatchMode,
    build_scaffold,
    match_keywords,
)
from tagcraft.snippets.scaffold import hint_snippet, render_component


class TestKeywordCatalog:
    """Static keyword table."""

    def test_fun_prefix_offers_two_arrow_functions(self) -> None:
        snippets = [entry.snippet for entry in match_keywords("fun")]
        assert snippets == ["(${1:param}) => { $0 }", "() => { $0 }"]

    def test_func_matches_prefix_and_exact(self) -> None:
        """'func' starts with 'fun' and also equals 'func'."""
        snippets = [entry.snippet for entry in match_keywords("func")]
        assert snippets == [
            "(${1:param}) => { $0 }",
            "() => { $0 }",
            "(param) => { $0 }",
        ]

    def test_prefix_match_on_longer_token(self) -> None:
        assert len(match_keywords("function")) == 2

    @pytest.mark.parametrize(
        ("token", "snippet"),
        [
            ("greaterThan", ">$0"),
            ("sup", ">$0"),
            ("minusThan", "<$0"),
            ("inf", "<$0"),
            ("void", "<>$0</>"),
        ],
    )
    def test_exact_keywords(self, token: str, snippet: str) -> None:
        assert [entry.snippet for entry in match_keywords(token)] == [snippet]

    @pytest.mark.parametrize("token", ["div", "voids", "su", "fu", ""])
    def test_no_match(self, token: str) -> None:
        assert match_keywords(token) == []

    def test_previews_have_cursor_marker(self) -> None:
        for entry in KEYWORD_SNIPPETS:
            assert "|" in entry.preview
            assert entry.mode in (MatchMode.EXACT, MatchMode.PREFIX)


class TestScaffold:
    """jsxbuild<Name>[__<tag>] expansion."""

    def test_name_and_tag(self) -> None:
        scaffold = build_scaffold("jsxbuildCard__section")
        assert scaffold is not None
        assert scaffold.name == "Card"
        assert scaffold.tag == "section"
        assert "function ${1:Card} ({children," in scaffold.snippet
        assert "<section className={className} style={style} {...rest}>" in (
            scaffold.snippet
        )
        assert "</section>" in scaffold.snippet
        assert " * Card component" in scaffold.snippet

    def test_tag_defaults_to_div(self) -> None:
        scaffold = build_scaffold("jsxbuildHeader")
        assert scaffold is not None
        assert scaffold.tag == "div"
        assert "</div>" in scaffold.snippet

    def test_preview_summary(self) -> None:
        scaffold = build_scaffold("jsxbuildCard__article")
        assert scaffold is not None
        assert scaffold.preview.startswith("function Card (..) { return <article")
        assert scaffold.preview.endswith("</article> }")

    @pytest.mark.parametrize(
        "token",
        ["jsxbuild", "jsxbuildcard", "jsxbuildCard__", "xjsxbuildCard", "jsx.Card"],
    )
    def test_not_a_scaffold(self, token: str) -> None:
        assert build_scaffold(token) is None

    def test_render_component_substitutes_all(self) -> None:
        text = render_component("Nav", "nav")
        assert "__NAME__" not in text
        assert "__TAG__" not in text
        assert text.count("nav") >= 2

    def test_hint_snippet_uses_placeholder_names(self) -> None:
        text = hint_snippet()
        assert "${1:Xcomponent}" in text
        assert "<tagName " in text
