"""Sanitizer with recovery: pull a well-formed shorthand token out of a raw window.

The window around the cursor routinely contains things that are not shorthand:
a ``]`` left behind by an earlier edit, a ``(`` from surrounding code, the
``="..."`` of an attribute the cursor sits next to. The sanitizer walks the
window once, left to right, carrying a small state machine, and keeps the
longest trailing fragment that the shorthand grammar accepts.

Recovery rules:
- An orphan ``]`` (no open bracket) discards everything before it.
- Inside brackets every character is accepted; contents are not checked.
- When the cursor position is known, an invalid character before it is
  leading junk and is discarded the same way as an orphan ``]``, while an
  invalid character or orphan ``]`` at or after it ends the token.
- Without a cursor position, any invalid character outside brackets ends
  the token.
"""

# Pattern: Functional Core (pure functions over immutable scan state)

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum

from tagcraft.resolver.scanner import CursorWindow, scan_window

logger = logging.getLogger(__name__)

_NAME_CHARS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_-"
)
# Characters accepted outside brackets
SHORTHAND_ALPHABET = _NAME_CHARS | frozenset(".#[")


class ScanState(Enum):
    """States of the left-to-right recovery scan."""

    SCANNING = "SCANNING"
    IN_BRACKET = "IN_BRACKET"
    TERMINATED = "TERMINATED"


@dataclass(frozen=True, slots=True)
class ScanStep:
    """Scan state after consuming a character.

    Attributes:
        state: Current machine state.
        depth: Open bracket count; positive exactly when state is IN_BRACKET.
        start: Index where the recovered token begins, None until one is found.
    """

    state: ScanState = ScanState.SCANNING
    depth: int = 0
    start: int | None = None


@dataclass(frozen=True, slots=True)
class SanitizedToken:
    """The token recovered from a window.

    Attributes:
        text: The canonical shorthand string, never empty.
        start: Offset of ``text`` inside the window.
        end: Offset just past ``text`` inside the window (where the scan stopped).
    """

    text: str
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class TokenRange:
    """A sanitized token together with the line span it replaces.

    Attributes:
        token: The recovered token.
        window: The raw window the token was recovered from.
        consumed_after_length: Leading characters of ``window.after`` that
            the replacement swallows.
        start: First line offset to replace. The window start, unless
            discarded code precedes the token.
        end: Line offset just past the replaced text.
    """

    token: SanitizedToken
    window: CursorWindow
    consumed_after_length: int
    start: int
    end: int


def step(scan: ScanStep, ch: str, index: int, cursor: int | None = None) -> ScanStep:
    """Advance the recovery scan over one character.

    Args:
        scan: State before ``ch``.
        ch: The character at ``index``.
        index: Position of ``ch`` in the window.
        cursor: Cursor position in the window, if known. Invalid characters
            left of it are leading junk; right of it they end the scan.

    Returns:
        State after ``ch``. A TERMINATED state means ``ch`` was not consumed.
    """
    if scan.state is ScanState.TERMINATED:
        return scan

    if scan.state is ScanState.IN_BRACKET:
        if ch == "[":
            return replace(scan, depth=scan.depth + 1)
        if ch == "]":
            depth = scan.depth - 1
            state = ScanState.IN_BRACKET if depth else ScanState.SCANNING
            return replace(scan, state=state, depth=depth)
        return scan

    start = index if scan.start is None else scan.start

    if ch == "[":
        return ScanStep(state=ScanState.IN_BRACKET, depth=1, start=start)
    if ch in SHORTHAND_ALPHABET:
        return replace(scan, start=start)

    if cursor is None:
        if ch == "]":
            # Orphan close: everything up to here is unrecoverable
            return replace(scan, start=index + 1)
    elif index < cursor:
        # Leading junk, orphan closes included
        return replace(scan, start=index + 1)
    return replace(scan, state=ScanState.TERMINATED)


def sanitize_token(window: str, cursor: int | None = None) -> SanitizedToken | None:
    """Extract the longest well-formed shorthand fragment from ``window``.

    Args:
        window: Raw text, ``before + after`` the cursor.
        cursor: Cursor position inside ``window``, if known. Enables skipping
            leading junk before it.

    Returns:
        The recovered token, or None if nothing usable was found.
    """
    scan = ScanStep()
    end = len(window)
    for index, ch in enumerate(window):
        scan = step(scan, ch, index, cursor)
        if scan.state is ScanState.TERMINATED:
            end = index
            break

    if scan.start is None or scan.start >= end:
        return None
    return SanitizedToken(text=window[scan.start : end], start=scan.start, end=end)


def compute_valid_post_length(
    before: str, after: str, token_text: str, token_start: int = 0
) -> int:
    """Count how many leading characters of ``after`` the token keeps.

    Compares ``after`` character by character against the token from the
    cursor's position inside it.

    Args:
        before: Window text before the cursor.
        after: Window text after the cursor.
        token_text: The sanitized token.
        token_start: Offset of the token inside the window. Must not be past
            the cursor, i.e. at most ``len(before)``.

    Returns:
        Number of characters of ``after`` to include in the replacement;
        never more than ``len(after)``.

    Raises:
        ValueError: If ``token_start`` lies past the cursor.
    """
    offset = len(before) - token_start
    if offset < 0:
        msg = f"token start {token_start} is past the cursor at {len(before)}"
        raise ValueError(msg)

    consumed = 0
    for wanted, actual in zip(token_text[offset:], after):
        if wanted != actual:
            break
        consumed += 1
    return consumed


def replacement_offset(window: str, token_start: int) -> int:
    """Offset inside ``window`` where the replacement begins.

    Text discarded through orphan ``]`` closes is shorthand debris and is
    replaced along with the token. Any other character discarded outside
    brackets belongs to the surrounding code, so the replacement starts just
    after the last one.
    """
    offset = 0
    depth = 0
    for index, ch in enumerate(window[:token_start]):
        if depth:
            if ch == "[":
                depth += 1
            elif ch == "]":
                depth -= 1
        elif ch == "[":
            depth = 1
        elif ch != "]" and ch not in SHORTHAND_ALPHABET:
            offset = index + 1
    return offset


def get_valid_token_range_at_cursor(
    line_text: str, cursor_offset: int
) -> TokenRange | None:
    """Resolve the token at the cursor and the line span it replaces.

    Args:
        line_text: The full text of the line.
        cursor_offset: Zero-based cursor offset into ``line_text``.

    Returns:
        The token and its replacement span, or None if no token is recoverable.
    """
    window = scan_window(line_text, cursor_offset)
    token = sanitize_token(window.text, window.cursor)
    if token is None:
        logger.debug("No shorthand token in window %r", window.text)
        return None

    consumed = compute_valid_post_length(
        window.before, window.after, token.text, token.start
    )
    return TokenRange(
        token=token,
        window=window,
        consumed_after_length=consumed,
        start=window.start + replacement_offset(window.text, token.start),
        end=cursor_offset + consumed,
    )
