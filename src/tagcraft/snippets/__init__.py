"""Fixed snippets offered next to tag expansion: keywords and scaffolds."""

from tagcraft.snippets.keywords import (
    KEYWORD_SNIPPETS,
    KeywordSnippet,
    MatchMode,
    match_keywords,
)
from tagcraft.snippets.scaffold import Scaffold, build_scaffold

__all__ = [
    "KEYWORD_SNIPPETS",
    "KeywordSnippet",
    "MatchMode",
    "Scaffold",
    "build_scaffold",
    "match_keywords",
]
