"""Component scaffold generator.

``jsxbuildCard__section`` expands to a function component named ``Card``
whose root element is ``<section>`` and which forwards ``className``,
``style`` and the remaining props. Without ``__tag`` the root is a ``<div>``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

SCAFFOLD_PREFIX = "jsxbuild"
SCAFFOLD_PATTERN = re.compile(r"^jsxbuild([A-Z][A-Za-z0-9]*)(?:__(\w+))?$")
DEFAULT_SCAFFOLD_TAG = "div"

# __NAME__ / __TAG__ are substituted; everything else is literal snippet text
_COMPONENT_TEMPLATE = """
/**
 * __NAME__ component
 *
 * @param props - React.HTMLAttributes<HTMLElement>
 */
function ${1:__NAME__} ({children,className = '',style = {},...rest}) {
 return (
  <__TAG__ className={className} style={style} {...rest}>
   {children}
  </__TAG__>
 );
}"""

# Offered for any token starting with "js" to advertise the naming convention
HINT_LABEL = "jsxbuildXcomponent__tagName to create a React component"
HINT_DETAIL = "Ex: jsxbuildCard__section -> function Card() { return <section> }"
HINT_DOCUMENTATION = (
    "To generate a **React component** with forwarded props, type "
    "`jsxbuildName__tag`.\n\n**Examples**:\n"
    "- `jsxbuildCard__section`\n"
    "- `jsxbuildHeader__header`"
)


@dataclass(frozen=True, slots=True)
class Scaffold:
    """An expanded component scaffold.

    Attributes:
        name: Component name taken from the token.
        tag: Root element of the component.
        snippet: Component source in snippet syntax; the name is tab stop 1.
        preview: One-line summary for labels.
    """

    name: str
    tag: str
    snippet: str
    preview: str


def render_component(name: str, tag: str = DEFAULT_SCAFFOLD_TAG) -> str:
    """Render the component template for ``name`` rooted at ``tag``."""
    return _COMPONENT_TEMPLATE.replace("__NAME__", name).replace("__TAG__", tag)


def build_scaffold(token: str) -> Scaffold | None:
    """Expand a ``jsxbuild<Name>[__<tag>]`` token.

    Returns:
        The scaffold, or None if ``token`` does not follow the convention.
    """
    match = SCAFFOLD_PATTERN.match(token)
    if not match:
        return None

    name = match.group(1)
    tag = match.group(2) or DEFAULT_SCAFFOLD_TAG
    return Scaffold(
        name=name,
        tag=tag,
        snippet=render_component(name, tag),
        preview=(
            f"function {name} (..) {{ return <{tag} className={{className}} "
            f"style={{style}} {{...rest}}> | </{tag}> }}"
        ),
    )


def hint_snippet() -> str:
    """The placeholder scaffold inserted by the naming-convention hint."""
    return render_component("Xcomponent", "tagName")
