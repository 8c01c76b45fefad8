"""Cursor-anchored shorthand resolver.

Pipeline: scan the window around the cursor, recover a well-formed token,
parse it, compile it to markup. ``resolve`` runs the whole pipeline for one
completion request and keeps no state between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tagcraft.resolver.compiler import (
    VOID_ELEMENTS,
    CompiledMarkup,
    compile_markup,
    escape_snippet,
    is_void_element,
)
from tagcraft.resolver.parser import TagExpression, TrailingConstruct, parse_token
from tagcraft.resolver.sanitizer import (
    SanitizedToken,
    ScanState,
    TokenRange,
    compute_valid_post_length,
    get_valid_token_range_at_cursor,
    replacement_offset,
    sanitize_token,
)
from tagcraft.resolver.scanner import CursorWindow, scan_window

if TYPE_CHECKING:
    from tagcraft.config import MarkupConfig

__all__ = [
    "VOID_ELEMENTS",
    "CompiledMarkup",
    "CursorWindow",
    "ResolvedExpansion",
    "SanitizedToken",
    "ScanState",
    "TagExpression",
    "TokenRange",
    "TrailingConstruct",
    "compile_markup",
    "compute_valid_post_length",
    "escape_snippet",
    "get_valid_token_range_at_cursor",
    "is_void_element",
    "parse_token",
    "replacement_offset",
    "resolve",
    "sanitize_token",
    "scan_window",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedExpansion:
    """Everything an editor needs to apply one expansion.

    Attributes:
        token: The sanitized shorthand token.
        expression: The parsed token.
        replacement_start: First line offset to replace.
        replacement_end: Line offset just past the replaced text.
        markup_text: Snippet with numbered placeholders and a terminal stop.
        preview_text: Placeholder-free rendering for labels and details.
        is_void_element: Whether the element was emitted self-closing.
    """

    token: str
    expression: TagExpression
    replacement_start: int
    replacement_end: int
    markup_text: str
    preview_text: str
    is_void_element: bool

    @property
    def used_default_tag(self) -> bool:
        """True when the token had no tag and the default was substituted."""
        return not self.expression.explicit_tag


def resolve(
    line_text: str,
    cursor_offset: int,
    config: MarkupConfig | None = None,
) -> ResolvedExpansion | None:
    """Resolve the shorthand at the cursor into replacement markup.

    Args:
        line_text: The full text of the line containing the cursor.
        cursor_offset: Zero-based character offset into ``line_text``.
        config: Rendering options. Defaults to ``get_settings().markup``.

    Returns:
        The expansion, or None when no shorthand token can be recovered.
    """
    if config is None:
        from tagcraft.config import get_settings

        config = get_settings().markup

    token_range = get_valid_token_range_at_cursor(line_text, cursor_offset)
    if token_range is None:
        return None

    token = token_range.token.text
    expression = parse_token(token, default_tag=config.default_tag)
    compiled = compile_markup(expression, token, config)

    logger.debug(
        "Resolved %r -> %r at [%d, %d)",
        token,
        compiled.preview,
        token_range.start,
        token_range.end,
    )
    return ResolvedExpansion(
        token=token,
        expression=expression,
        replacement_start=token_range.start,
        replacement_end=token_range.end,
        markup_text=compiled.snippet,
        preview_text=compiled.preview,
        is_void_element=compiled.is_void_element,
    )
