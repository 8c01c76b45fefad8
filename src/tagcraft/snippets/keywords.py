"""Catalog of literal-keyword snippets.

A fixed table of shorthand words that expand to a canned snippet rather than
to an element: ``fun`` for arrow functions, ``void`` for a fragment, and so
on. Lookup only; none of this goes through the resolver grammar.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class MatchMode(StrEnum):
    """How a keyword trigger is compared with the typed token."""

    EXACT = "exact"
    PREFIX = "prefix"


@dataclass(frozen=True, slots=True)
class KeywordSnippet:
    """A canned snippet offered when the token matches one of its triggers.

    Attributes:
        triggers: Words that offer this snippet.
        mode: Whether the token must equal a trigger or only start with it.
        snippet: Text in snippet syntax.
        preview: The snippet with ``|`` where the cursor lands.
        description: One-line human description.
    """

    triggers: tuple[str, ...]
    mode: MatchMode
    snippet: str
    preview: str
    description: str

    def matches(self, token: str) -> bool:
        """Return True if ``token`` triggers this snippet."""
        if self.mode is MatchMode.PREFIX:
            return token.startswith(self.triggers)
        return token in self.triggers


KEYWORD_SNIPPETS: tuple[KeywordSnippet, ...] = (
    KeywordSnippet(
        triggers=("fun",),
        mode=MatchMode.PREFIX,
        snippet="(${1:param}) => { $0 }",
        preview="(param) => { | }",
        description="Arrow function with one parameter",
    ),
    KeywordSnippet(
        triggers=("fun",),
        mode=MatchMode.PREFIX,
        snippet="() => { $0 }",
        preview="() => { | }",
        description="Arrow function without parameters",
    ),
    KeywordSnippet(
        triggers=("func",),
        mode=MatchMode.EXACT,
        snippet="(param) => { $0 }",
        preview="(param) => { | }",
        description="Arrow function with a literal param",
    ),
    KeywordSnippet(
        triggers=("greaterThan", "sup"),
        mode=MatchMode.EXACT,
        snippet=">$0",
        preview=">|",
        description="Literal greater-than sign",
    ),
    KeywordSnippet(
        triggers=("minusThan", "inf"),
        mode=MatchMode.EXACT,
        snippet="<$0",
        preview="<|",
        description="Literal less-than sign",
    ),
    KeywordSnippet(
        triggers=("void",),
        mode=MatchMode.EXACT,
        snippet="<>$0</>",
        preview="<>|</>",
        description="Empty fragment",
    ),
)


def match_keywords(token: str) -> list[KeywordSnippet]:
    """Return the catalog entries triggered by ``token``, in catalog order."""
    return [entry for entry in KEYWORD_SNIPPETS if entry.matches(token)]
