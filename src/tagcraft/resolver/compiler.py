"""Markup compiler: turn a TagExpression into an editor snippet.

Snippet syntax follows the TextMate / VS Code convention: ``${1}``, ``${2}``
... are editable tab stops visited in order and ``$0`` is where the cursor
rests at the end. Literal text is escaped so a ``$`` typed in an attribute
value cannot become a tab stop.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tagcraft.config import MarkupConfig
from tagcraft.resolver.parser import TagExpression, TrailingConstruct

# HTML void elements: no children, no closing tag
VOID_ELEMENTS = frozenset(
    (
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    )
)

_SNIPPET_ESCAPES = str.maketrans({"\\": "\\\\", "$": "\\$", "}": "\\}"})


@dataclass(frozen=True, slots=True)
class CompiledMarkup:
    """Compiler output.

    Attributes:
        snippet: Markup with numbered placeholders and the terminal stop.
        preview: The same markup with a cursor marker in place of placeholders.
        is_void_element: Whether the element was closed as self-closing.
        tab_stops: How many numbered placeholders the snippet contains.
    """

    snippet: str
    preview: str
    is_void_element: bool
    tab_stops: int


def escape_snippet(text: str) -> str:
    """Escape text so snippet expansion inserts it literally."""
    return text.translate(_SNIPPET_ESCAPES)


def is_void_element(tag: str) -> bool:
    """Return True if ``tag`` names a void element (case-insensitive)."""
    return tag.lower() in VOID_ELEMENTS


@dataclass
class _SnippetBuilder:
    """Accumulates snippet and preview text side by side."""

    cursor_marker: str
    snippet: list[str] = field(default_factory=list)
    preview: list[str] = field(default_factory=list)
    next_stop: int = 1

    def literal(self, text: str) -> None:
        self.snippet.append(escape_snippet(text))
        self.preview.append(text)

    def placeholder(self) -> None:
        self.snippet.append(f"${{{self.next_stop}}}")
        self.preview.append(self.cursor_marker)
        self.next_stop += 1

    def final_stop(self) -> None:
        self.snippet.append("$0")
        self.preview.append(self.cursor_marker)

    def attribute(self, name: str, value: str | None) -> None:
        """Emit `` name="value"``; a None value becomes a placeholder."""
        self.literal(f' {name}="')
        if value is None:
            self.placeholder()
        else:
            self.literal(value)
        self.literal('"')


def compile_markup(
    expression: TagExpression,
    raw_token: str,
    config: MarkupConfig | None = None,
) -> CompiledMarkup:
    """Assemble replacement markup for a parsed shorthand token.

    Args:
        expression: The parsed token.
        raw_token: The sanitized token text, used to spot ``.`` / ``#`` typed
            without a name yet.
        config: Rendering options. Defaults to ``MarkupConfig()``.

    Returns:
        Snippet and preview text. Tab stops are numbered in emission order;
        non-void elements end with ``$0`` between the open and close tags.
    """
    if config is None:
        config = MarkupConfig()

    tag = expression.tag
    self_closing = is_void_element(tag)
    out = _SnippetBuilder(cursor_marker=config.preview_cursor)

    out.literal(f"<{tag}")

    if expression.classes:
        out.attribute(config.class_attribute, " ".join(expression.classes))
    elif "." in raw_token:
        out.attribute(config.class_attribute, None)

    if expression.id is not None:
        out.attribute("id", expression.id)
    elif "#" in raw_token:
        out.attribute("id", None)

    for index, attr in enumerate(expression.attrs):
        is_open_bracket = (
            index == len(expression.attrs) - 1
            and expression.trailing is TrailingConstruct.BRACKET
        )
        out.literal(" ")
        if is_open_bracket and not attr:
            out.placeholder()
        else:
            out.literal(attr)

    if self_closing:
        # Not for img itself: long-standing behaviour kept as is
        if tag.lower() != "img" and "alt" not in expression.attrs:
            out.attribute("alt", None)
        out.literal(" />")
    else:
        out.literal(">")
        out.final_stop()
        out.literal(f"</{tag}>")

    return CompiledMarkup(
        snippet="".join(out.snippet),
        preview="".join(out.preview),
        is_void_element=self_closing,
        tab_stops=out.next_stop - 1,
    )
