"""Editor-agnostic completion provider.

Turns a line and a cursor offset into the list of suggestions an editor
integration shows: the component scaffold when the token follows the
``jsxbuild`` convention, a hint about that convention, matching keyword
snippets, and finally the tag expansion itself. Every suggestion replaces
the same span, the one the resolver computed.

Usage:
    from tagcraft.completion import provide_suggestions

    for suggestion in provide_suggestions(line, cursor):
        editor.insert_snippet(
            suggestion.insert_text,
            suggestion.replace_start,
            suggestion.replace_end,
        )
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from tagcraft.config import get_settings
from tagcraft.resolver import resolve
from tagcraft.snippets.keywords import match_keywords
from tagcraft.snippets.scaffold import (
    HINT_DETAIL,
    HINT_DOCUMENTATION,
    HINT_LABEL,
    build_scaffold,
    hint_snippet,
)

if TYPE_CHECKING:
    from tagcraft.config import Settings
    from tagcraft.resolver import ResolvedExpansion

logger = logging.getLogger(__name__)


def trigger_characters(settings: Settings | None = None) -> tuple[str, ...]:
    """Characters that should re-trigger completion when typed."""
    if settings is None:
        settings = get_settings()
    return tuple(settings.completion.trigger_characters)


class SuggestionKind(StrEnum):
    """What a suggestion inserts."""

    SNIPPET = "snippet"
    HINT = "hint"


@dataclass(frozen=True, slots=True)
class Suggestion:
    """One entry of the completion list.

    Attributes:
        label: Text shown in the list (the typed token for most entries).
        insert_text: Snippet-syntax text to insert.
        detail: Short one-line description.
        documentation: Longer description, may contain Markdown.
        kind: Snippet or naming hint.
        replace_start: First line offset the insertion replaces.
        replace_end: Line offset just past the replaced text.
        sort_text: Sort key; lower sorts first.
    """

    label: str
    insert_text: str
    detail: str
    documentation: str
    kind: SuggestionKind
    replace_start: int
    replace_end: int
    sort_text: str = "000"


def _scaffold_suggestions(expansion: ResolvedExpansion) -> list[Suggestion]:
    suggestions: list[Suggestion] = []
    token = expansion.token

    scaffold = build_scaffold(token)
    if scaffold is not None:
        suggestions.append(
            Suggestion(
                label=token,
                insert_text=scaffold.snippet,
                detail=f"React component <{scaffold.tag}> with props",
                documentation=f"JSX: {scaffold.preview}",
                kind=SuggestionKind.SNIPPET,
                replace_start=expansion.replacement_start,
                replace_end=expansion.replacement_end,
                sort_text="000",
            )
        )

    if token.startswith("js"):
        suggestions.append(
            Suggestion(
                label=HINT_LABEL,
                insert_text=hint_snippet(),
                detail=HINT_DETAIL,
                documentation=HINT_DOCUMENTATION,
                kind=SuggestionKind.HINT,
                replace_start=expansion.replacement_start,
                replace_end=expansion.replacement_end,
                sort_text="001",
            )
        )
    return suggestions


def provide_suggestions(
    line_text: str,
    cursor_offset: int,
    settings: Settings | None = None,
) -> list[Suggestion]:
    """Compute the completion list for the cursor position.

    Args:
        line_text: The full text of the line containing the cursor.
        cursor_offset: Zero-based character offset into ``line_text``.
        settings: Settings to use. Defaults to ``get_settings()``.

    Returns:
        Suggestions in display order; empty when no token is recoverable.
    """
    if settings is None:
        settings = get_settings()

    expansion = resolve(line_text, cursor_offset, settings.markup)
    if expansion is None:
        return []

    logger.debug("Token %s", expansion.token)

    suggestions: list[Suggestion] = []
    if settings.completion.scaffold:
        suggestions.extend(_scaffold_suggestions(expansion))

    if settings.completion.keyword_snippets:
        suggestions.extend(
            Suggestion(
                label=expansion.token,
                insert_text=entry.snippet,
                detail="JSX autocompletion",
                documentation=f"Helper {entry.preview}.",
                kind=SuggestionKind.SNIPPET,
                replace_start=expansion.replacement_start,
                replace_end=expansion.replacement_end,
            )
            for entry in match_keywords(expansion.token)
        )

    tag = expansion.expression.tag
    suggestions.append(
        Suggestion(
            label=expansion.token,
            insert_text=expansion.markup_text,
            detail=f"JSX <{tag}> autocompletion",
            documentation=f"JSX {expansion.preview_text}.",
            kind=SuggestionKind.SNIPPET,
            replace_start=expansion.replacement_start,
            replace_end=expansion.replacement_end,
        )
    )
    return suggestions
