"""Shorthand grammar parser.

Parses a sanitized token such as ``section.hero.dark#top[data-x="1"]`` into a
TagExpression. Grammar::

    token     := tag? ( '.' classname? | '#' idname? | '[' attrtext ']'? )*
    tag       := [A-Za-z][A-Za-z0-9_-]*
    classname := [A-Za-z0-9_-]*
    idname    := [A-Za-z0-9_-]*

The parser never fails: characters it does not recognise are skipped one at
a time so a single stray character cannot sink the whole expression.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_TAG_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9_-]*")
_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]*")


class TrailingConstruct(Enum):
    """Fragment the user is in the middle of typing at the end of the token."""

    NONE = ""
    DOT = "."
    HASH = "#"
    BRACKET = "["


@dataclass(frozen=True, slots=True)
class TagExpression:
    """A parsed shorthand token.

    Attributes:
        tag: Element name; the default tag when the token has none.
        classes: Class names in the order typed, never empty strings.
        id: Element id. Repeated ``#`` fragments overwrite, the last one wins.
        attrs: Raw attribute text from ``[...]`` fragments. Only the final
            entry can be unterminated, and only it can be empty.
        trailing: Set when the token ends in ``.``, ``#`` or ``[``.
        explicit_tag: False when ``tag`` is the default rather than typed.
    """

    tag: str
    classes: tuple[str, ...] = ()
    id: str | None = None
    attrs: tuple[str, ...] = ()
    trailing: TrailingConstruct = TrailingConstruct.NONE
    explicit_tag: bool = True


def _trailing_construct(token: str) -> TrailingConstruct:
    if not token:
        return TrailingConstruct.NONE
    last = token[-1]
    for construct in (
        TrailingConstruct.DOT,
        TrailingConstruct.HASH,
        TrailingConstruct.BRACKET,
    ):
        if last == construct.value:
            return construct
    return TrailingConstruct.NONE


def parse_token(token: str, default_tag: str = "div") -> TagExpression:
    """Parse a sanitized shorthand token into a TagExpression.

    Args:
        token: The token returned by the sanitizer.
        default_tag: Tag used when the token does not start with one.

    Returns:
        The parsed expression. Empty ``.`` / ``#`` fragments add nothing and
        show up only through ``trailing`` and the raw token.
    """
    trailing = _trailing_construct(token)

    tag = default_tag
    i = 0
    tag_match = _TAG_PATTERN.match(token)
    if tag_match:
        tag = tag_match.group()
        i = tag_match.end()

    classes: list[str] = []
    element_id: str | None = None
    attrs: list[str] = []

    while i < len(token):
        ch = token[i]
        if ch in ".#":
            name_match = _NAME_PATTERN.match(token, i + 1)
            # _NAME_PATTERN accepts the empty string, so a match always exists
            assert name_match is not None
            name = name_match.group()
            i = name_match.end()
            if not name:
                continue
            if ch == ".":
                classes.append(name)
            else:
                element_id = name
        elif ch == "[":
            close = token.find("]", i + 1)
            if close == -1:
                # Unterminated: keep the partial text and stop
                attrs.append(token[i + 1 :])
                break
            if close > i + 1:
                attrs.append(token[i + 1 : close])
            i = close + 1
        else:
            i += 1

    return TagExpression(
        tag=tag,
        classes=tuple(classes),
        id=element_id,
        attrs=tuple(attrs),
        trailing=trailing,
        explicit_tag=tag_match is not None,
    )
