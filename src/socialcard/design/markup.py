"""Markup templates and the immutable node tree they produce."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from jinja2 import Environment
from lxml import etree
from lxml import html as lxml_html

from socialcard.errors import MarkupError

# Autoescape so interpolated values can never inject markup
_env = Environment(autoescape=True)


@dataclass(frozen=True)
class Node:
    """
    An element of the markup tree.

    Attributes:
        tag: Lower-case element name (e.g., "div", "h1").
        classes: Utility classes from the element's tw (or class) attribute.
        children: Child elements and whitespace-collapsed text, in document order.
    """
    tag: str
    classes: tuple[str, ...] = ()
    children: tuple[Union["Node", str], ...] = ()

    def text_content(self) -> str:
        """Concatenated text of this node and its descendants, space separated."""
        parts = []
        for child in self.children:
            parts.append(child if isinstance(child, str) else child.text_content())
        return " ".join(part for part in parts if part)


def html(template: str, **values: Any) -> Node:
    """
    Render a template with interpolated values and parse it into a Node tree.

    Args:
        template: Jinja2 template whose output is a single root element.
        **values: Values interpolated into the template (HTML-escaped).

    Returns:
        Root Node of the parsed markup.

    Raises:
        MarkupError: If the rendered markup is not exactly one root element.
    """
    source = _env.from_string(template).render(**values).strip()
    if not source:
        raise MarkupError("Markup is empty")

    try:
        root = lxml_html.fragment_fromstring(source)
    except (etree.ParserError, etree.XMLSyntaxError) as e:
        raise MarkupError(f"Invalid card markup: {e}") from e

    return _convert(root)


def _convert(element: etree._Element) -> Node:
    classes = (element.get("tw") or element.get("class") or "").split()

    children: list[Node | str] = []
    _append_text(children, element.text)
    for child in element:
        # Comments and processing instructions carry no content, only their tail
        if isinstance(child.tag, str):
            children.append(_convert(child))
        _append_text(children, child.tail)

    return Node(tag=element.tag.lower(), classes=tuple(classes), children=tuple(children))


def _append_text(children: list[Node | str], text: str | None) -> None:
    if text and (collapsed := " ".join(text.split())):
        children.append(collapsed)
