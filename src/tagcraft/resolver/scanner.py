"""Boundary scanner: isolate the raw text window around the cursor."""

from __future__ import annotations

from dataclasses import dataclass

# Markup delimiters that end a window alongside whitespace
_DELIMITERS = frozenset("<>")


@dataclass(frozen=True, slots=True)
class CursorWindow:
    """Raw text around the cursor, up to the nearest separator on each side.

    Attributes:
        before: Text between the previous separator (or line start) and the cursor.
        after: Text between the cursor and the next separator (or line end).
        start: Offset in the line where ``before`` begins.
    """

    before: str
    after: str
    start: int

    @property
    def text(self) -> str:
        """The whole window, ``before + after``."""
        return self.before + self.after

    @property
    def cursor(self) -> int:
        """Cursor position relative to the window start."""
        return len(self.before)


def is_separator(ch: str) -> bool:
    """Return True if ``ch`` ends a shorthand window."""
    return ch.isspace() or ch in _DELIMITERS


def scan_window(line_text: str, cursor_offset: int) -> CursorWindow:
    """Walk backward and forward from the cursor over non-separator characters.

    Args:
        line_text: The full text of the line containing the cursor.
        cursor_offset: Zero-based character offset into ``line_text``.

    Returns:
        The window around the cursor. Empty ``before`` at line start.

    Raises:
        ValueError: If ``cursor_offset`` lies outside the line.
    """
    if not 0 <= cursor_offset <= len(line_text):
        msg = f"cursor offset {cursor_offset} outside line of length {len(line_text)}"
        raise ValueError(msg)

    start = cursor_offset
    while start > 0 and not is_separator(line_text[start - 1]):
        start -= 1

    end = cursor_offset
    while end < len(line_text) and not is_separator(line_text[end]):
        end += 1

    return CursorWindow(
        before=line_text[start:cursor_offset],
        after=line_text[cursor_offset:end],
        start=start,
    )
